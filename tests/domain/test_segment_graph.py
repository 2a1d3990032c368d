import pytest

from cable_cutsim.config.models import MirrorRuleModel
from cable_cutsim.domain.mechanics.mechanics_factory import build_graph
from cable_cutsim.domain.mechanics.mirror_policies import EndpointMirrorPolicy, SpanMirrorPolicy
from cable_cutsim.domain.mechanics.segment_graph import SegmentGraph
from cable_cutsim.runtime.registries import make_family


@pytest.fixture
def sea_us():
    return build_graph(make_family("sea-us"))


@pytest.fixture
def tgnia():
    return build_graph(make_family("tgnia"))


# ---------- Paths


def test_path_between_is_a_contiguous_oriented_slice(sea_us: SegmentGraph):
    assert sea_us.path_between("S2", "S4") == ["S2", "S3", "S4"]
    assert sea_us.path_between("S4", "S2") == ["S4", "S3", "S2"]
    assert sea_us.path_between("S1", "S6") == ["S1", "S2", "S3", "S4", "S5", "S6"]


def test_path_between_degenerate_cases(sea_us: SegmentGraph):
    assert sea_us.path_between("S3", "S3") == ["S3"]
    assert sea_us.path_between("S3", "") == ["S3"]
    assert sea_us.path_between("S3", None) == ["S3"]
    assert sea_us.path_between("S2", "S99") == ["S2"]
    assert sea_us.path_between("S99", "S2") == []
    assert sea_us.path_between("", "S2") == []


# ---------- SEA-US mirror table (endpoint rules only)


def test_sea_us_endpoint_flags(sea_us: SegmentGraph):
    # S1 -> S2: {a: False, b: True}
    assert sea_us.is_mirrored("S1", "S1", "S2") is False
    assert sea_us.is_mirrored("S2", "S1", "S2") is True
    # S4 -> S3: {a: True, b: False}
    assert sea_us.is_mirrored("S4", "S4", "S3") is True
    assert sea_us.is_mirrored("S3", "S4", "S3") is False
    # S3 -> S4: {a: True, b: False}
    assert sea_us.is_mirrored("S3", "S3", "S4") is True
    assert sea_us.is_mirrored("S4", "S3", "S4") is False


def test_sea_us_intermediates_and_s6_are_never_mirrored(sea_us: SegmentGraph):
    # S3 -> S5 marks both endpoints mirrored, S4 in between stays native
    assert sea_us.is_mirrored("S3", "S3", "S5") is True
    assert sea_us.is_mirrored("S5", "S3", "S5") is True
    assert sea_us.is_mirrored("S4", "S3", "S5") is False
    assert sea_us.is_mirrored("S1", "S1", "S6") is False
    assert sea_us.is_mirrored("S6", "S1", "S6") is False
    assert sea_us.is_mirrored("S6", "S6", "S5") is False


def test_single_segment_selection_is_not_mirrored(sea_us: SegmentGraph, tgnia: SegmentGraph):
    assert sea_us.is_mirrored("S4", "S4", "S4") is False
    assert tgnia.is_mirrored("S6", "S6", "") is False


# ---------- TGN-IA mirror table


def test_tgnia_endpoint_flags(tgnia: SegmentGraph):
    assert tgnia.is_mirrored("S2", "S2", "S1") is True
    assert tgnia.is_mirrored("S1", "S2", "S1") is True
    assert tgnia.is_mirrored("S1", "S1", "S7") is False
    assert tgnia.is_mirrored("S7", "S1", "S7") is True
    assert tgnia.is_mirrored("S6", "S6", "S12") is False
    assert tgnia.is_mirrored("S12", "S6", "S12") is True


def test_tgnia_segments_inside_the_span_keep_their_axis(tgnia: SegmentGraph):
    # (S1, S8).b is True, but S8 is only passed through on S1 -> S12
    assert tgnia.is_mirrored("S8", "S1", "S12") is False
    assert tgnia.is_mirrored("S2", "S3", "S1") is False
    assert tgnia.is_mirrored("S9", "S8", "S10") is False
    assert not any(tgnia.is_mirrored(f"S{i}", "S1", "S4") for i in (2, 3))


def test_tgnia_segments_off_the_path_use_rule_from_point_a(tgnia: SegmentGraph):
    assert tgnia.is_mirrored("S9", "S1", "S3") is True
    assert tgnia.is_mirrored("S5", "S1", "S3") is False
    # blank Point B: every segment is off the path
    assert tgnia.is_mirrored("S8", "S1", "") is True
    assert tgnia.is_mirrored("S1", "S1", "") is False


def test_sea_us_segments_off_the_path_are_never_mirrored(sea_us: SegmentGraph):
    # (S1, S5).b is True, yet SEA-US only reads rules for the selected pair
    assert sea_us.is_mirrored("S5", "S1", "S3") is False
    assert sea_us.is_mirrored("S5", "S1", "") is False


# ---------- Table lookups


def test_reversed_entry_is_used_when_ordered_one_is_missing():
    g = SegmentGraph(
        ["S1", "S2"],
        {"S1": {"S2": MirrorRuleModel(a=False, b=True)}},
        policy=EndpointMirrorPolicy(),
    )
    assert g.rule("S1", "S2") == (False, True)
    assert g.rule("S2", "S1") == (True, False)
    assert g.is_mirrored("S2", "S2", "S1") is True
    assert g.is_mirrored("S1", "S2", "S1") is False


def test_missing_rules_default_to_native_axis():
    g = SegmentGraph(["S1", "S2", "S3"], {}, policy=SpanMirrorPolicy())
    assert g.rule("S1", "S3") is None
    assert not any(g.is_mirrored(s, "S1", "S3") for s in ("S1", "S2", "S3"))
