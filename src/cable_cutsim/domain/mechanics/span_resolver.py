import math

from cable_cutsim.domain.entities.route import RouteStore, SpanPosition
from cable_cutsim.domain.mechanics.segment_graph import SegmentGraph


def clamp(x: float, lo: float, hi: float) -> float:
    return min(max(x, lo), hi)


def total_span(
    graph: SegmentGraph, store: RouteStore, start_id: str, end_id: str | None
) -> float:
    return sum(store.segment_length(sid) for sid in graph.path_between(start_id, end_id))


def resolve(
    graph: SegmentGraph,
    store: RouteStore,
    start_id: str,
    end_id: str | None,
    target_km: float,
) -> SpanPosition | None:
    """
    Map a distance measured from Point A onto (owner segment, local km).
    Out-of-range targets are clamped to the span. None when Point A is unknown
    or the target is not a finite number.
    """
    path = graph.path_between(start_id, end_id)
    if not path or not math.isfinite(target_km):
        return None
    lengths = [store.segment_length(sid) for sid in path]
    span = sum(lengths)
    target = clamp(target_km, 0.0, span) if span > 0 else 0.0

    if len(path) == 1:
        return SpanPosition(path[0], target, span, tuple(path))

    remaining = target
    last = len(path) - 1
    for i, (sid, seg_len) in enumerate(zip(path, lengths)):
        if seg_len <= 0 and i != last:
            continue  # nothing to land on
        if remaining <= seg_len or i == last:
            return SpanPosition(sid, remaining, span, tuple(path))
        remaining -= seg_len
    return None
