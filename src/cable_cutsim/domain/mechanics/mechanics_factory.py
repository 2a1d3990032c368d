# cable_cutsim/domain/mechanics/mechanics_factory.py
from collections.abc import Iterable, Mapping
from typing import Any

from cable_cutsim.app.protocols import RouteFeed
from cable_cutsim.config.models import CableFamilyModel
from cable_cutsim.domain.mechanics.mechanics_core import CutMechanics
from cable_cutsim.domain.mechanics.route_store import build_store
from cable_cutsim.domain.mechanics.segment_graph import SegmentGraph
from cable_cutsim.runtime.registries import make_mirror_policy

RawRows = Mapping[str, Iterable[Mapping[str, Any]]]


def fetch_rows(family: CableFamilyModel, feed: RouteFeed) -> dict[str, list]:
    """Pull every segment table of the family from an external feed."""
    return {s.id: list(feed.rows(s.id, s.endpoint)) for s in family.segments}


def build_graph(family: CableFamilyModel) -> SegmentGraph:
    policy = make_mirror_policy(family.mirror_policy)
    return SegmentGraph(family.segment_ids, family.mirror, policy=policy)


def build_mechanics(family: CableFamilyModel, raw_rows: RawRows) -> CutMechanics:
    # rows for segments outside the family's lay order are ignored
    known = {sid: rows for sid, rows in raw_rows.items() if sid in set(family.segment_ids)}
    store = build_store(known, family.columns)
    return CutMechanics(store=store, graph=build_graph(family))
