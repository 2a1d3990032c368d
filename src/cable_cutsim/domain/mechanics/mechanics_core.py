# cable_cutsim/domain/mechanics/mechanics_core.py
import math
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from cable_cutsim.domain.entities.route import RoutePoint, RouteStore, SpanPosition
from cable_cutsim.domain.mechanics import span_resolver
from cable_cutsim.domain.mechanics.interpolator import interpolate_point
from cable_cutsim.domain.mechanics.segment_graph import SegmentGraph


@dataclass(frozen=True)
class SpanLengths:
    point_a_km: float
    point_b_km: float
    total_km: float


@dataclass(frozen=True)
class CutMechanics:
    """
    Façade over one route snapshot: span resolution plus interpolation.
    Pure over (store, graph); a feed refresh builds a new instance.
    """

    store: RouteStore
    graph: SegmentGraph

    def path_between(self, start_id: str, end_id: str | None) -> list[str]:
        return self.graph.path_between(start_id, end_id)

    def segment_length(self, segment_id: str) -> float:
        return self.store.segment_length(segment_id)

    def is_mirrored(self, segment_id: str, start_id: str, end_id: str | None) -> bool:
        return self.graph.is_mirrored(segment_id, start_id, end_id)

    def total_span(self, start_id: str, end_id: str | None) -> float:
        return span_resolver.total_span(self.graph, self.store, start_id, end_id)

    def span_lengths(self, start_id: str, end_id: str | None) -> SpanLengths:
        len_a = self.segment_length(start_id) if start_id else 0.0
        len_b = 0.0 if not end_id or end_id == start_id else self.segment_length(end_id)
        return SpanLengths(len_a, len_b, self.total_span(start_id, end_id))

    def resolve(
        self, start_id: str, end_id: str | None, target_km: float
    ) -> SpanPosition | None:
        return span_resolver.resolve(self.graph, self.store, start_id, end_id, target_km)

    def interpolate(
        self, segment_id: str, local_km: float, start_id: str, end_id: str | None
    ) -> RoutePoint | None:
        segment = self.store.get(segment_id)
        if segment is None:
            return None
        mirrored = self.graph.is_mirrored(segment_id, start_id, end_id)
        return interpolate_point(segment, local_km, mirrored=mirrored)

    def locate(
        self, start_id: str, end_id: str | None, target_km: float
    ) -> tuple[SpanPosition, RoutePoint] | None:
        pos = self.resolve(start_id, end_id, target_km)
        if pos is None:
            return None
        point = self.interpolate(pos.segment_id, pos.local_km, start_id, end_id)
        if point is None:
            return None
        return pos, point

    def trace(
        self, start_id: str, end_id: str | None, step_km: float = 1.0
    ) -> Iterable[tuple[float, RoutePoint]]:
        """Yield (distance from Point A, point) checkpoints across the whole span."""
        span = self.total_span(start_id, end_id)
        steps = max(1, math.ceil(span / max(step_km, 1e-9)))
        for d in np.minimum(np.arange(steps + 1) * step_km, span):
            hit = self.locate(start_id, end_id, float(d))
            if hit is not None:
                yield float(d), hit[1]
