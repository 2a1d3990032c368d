import pytest

from cable_cutsim.config.models import CableFamilyModel
from cable_cutsim.domain.mechanics.mechanics_core import CutMechanics
from cable_cutsim.domain.mechanics.mechanics_factory import build_mechanics


def _row(km, lat=None, lng=None):
    r = {"cable_cumulative_total": km}
    if lat is not None:
        r["latitude"], r["longitude"] = lat, lng
    return r


# Three segments in lay order, no mirror rules.
_FAMILY = CableFamilyModel.model_validate(
    {
        "name": "TEST",
        "slug": "test",
        "cut_prefix": "test",
        "table_prefix": "test_rpl",
        "segments": [{"id": f"S{i}", "label": f"S{i}"} for i in (1, 2, 3, 4)],
    }
)


@pytest.fixture
def mech() -> CutMechanics:
    return build_mechanics(
        _FAMILY,
        {
            "S1": [_row(0, 0.0, 120.0), _row(25, 2.5, 120.0), _row(50, 5.0, 120.0)],
            "S2": [],  # no data: zero length
            "S3": [_row(0, 5.0, 120.0), _row(30, 8.0, 120.0)],
            "S4": [_row(100, 8.0, 121.0), _row(120, 9.0, 121.0)],
        },
    )


def test_total_span_sums_path_lengths(mech: CutMechanics):
    assert mech.total_span("S1", "S3") == 80.0
    assert mech.total_span("S3", "S1") == 80.0
    assert mech.total_span("S1", "S4") == 100.0
    assert mech.total_span("S4", "S4") == 20.0


def test_owner_segment_and_local_offset(mech: CutMechanics):
    pos = mech.resolve("S1", "S3", 60.0)
    assert pos.segment_id == "S3" and abs(pos.local_km - 10.0) < 1e-9
    assert pos.total_span == 80.0 and pos.path == ("S1", "S2", "S3")

    pos = mech.resolve("S1", "S4", 85.0)
    assert pos.segment_id == "S4" and abs(pos.local_km - 5.0) < 1e-9


def test_boundary_belongs_to_the_earlier_segment(mech: CutMechanics):
    pos = mech.resolve("S1", "S3", 50.0)
    assert (pos.segment_id, pos.local_km) == ("S1", 50.0)


def test_reverse_traversal_starts_from_point_a(mech: CutMechanics):
    pos = mech.resolve("S3", "S1", 10.0)
    assert (pos.segment_id, pos.local_km) == ("S3", 10.0)
    pos = mech.resolve("S3", "S1", 40.0)
    assert (pos.segment_id, pos.local_km) == ("S1", 10.0)


def test_out_of_range_targets_are_clamped(mech: CutMechanics):
    assert mech.resolve("S1", "S3", -5.0) == mech.resolve("S1", "S3", 0.0)
    assert mech.resolve("S1", "S3", 180.0) == mech.resolve("S1", "S3", 80.0)
    pos = mech.resolve("S1", "S3", 180.0)
    assert (pos.segment_id, pos.local_km) == ("S3", 30.0)


@pytest.mark.parametrize("x", [0.0, 3.25, 12.5, 30.0])
def test_single_segment_is_passed_through(mech: CutMechanics, x: float):
    pos = mech.resolve("S3", "S3", x)
    assert (pos.segment_id, pos.local_km, pos.path) == ("S3", x, ("S3",))


def test_unknown_start_resolves_to_nothing(mech: CutMechanics):
    assert mech.resolve("S9", "S1", 10.0) is None
    assert mech.resolve("", "S1", 10.0) is None


def test_empty_span_resolves_to_zero(mech: CutMechanics):
    pos = mech.resolve("S2", "S2", 15.0)
    assert (pos.segment_id, pos.local_km, pos.total_span) == ("S2", 0.0, 0.0)


@pytest.mark.parametrize("target", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_target_resolves_to_nothing(mech: CutMechanics, target: float):
    assert mech.resolve("S1", "S3", target) is None
    assert mech.resolve("S3", "S3", target) is None
    assert mech.locate("S1", "S3", target) is None
