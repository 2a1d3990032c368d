import math
from collections.abc import Sequence

import numpy as np

from cable_cutsim.domain.entities.route import RoutePoint, SegmentBounds, SegmentStore
from cable_cutsim.domain.mechanics.span_resolver import clamp


def nearest_cable_type(meta: Sequence[RoutePoint], km: float) -> str | None:
    """Closest labelled row; on a tie the row at or after km wins (a type row starts a run)."""
    best: tuple[str, float, bool] | None = None
    for p in meta:
        if not p.cable_type:
            continue
        diff = abs(p.km - km)
        forward = p.km >= km
        if best is None or diff < best[1] or (diff == best[1] and forward and not best[2]):
            best = (p.cable_type, diff, forward)
    return best[0] if best else None


def interpolated_depth(meta: Sequence[RoutePoint], km: float) -> float | None:
    prev = nxt = None
    for p in meta:
        if p.depth is None or not math.isfinite(p.depth):
            continue
        if p.km <= km:
            prev = p
        if p.km >= km:
            nxt = p
            break
    if prev and nxt:
        if prev.km == nxt.km:
            return prev.depth
        ratio = (km - prev.km) / (nxt.km - prev.km)
        return prev.depth + ratio * (nxt.depth - prev.depth)
    if nxt:
        return nxt.depth
    if prev:
        return prev.depth
    return None


def lookup_km(bounds: SegmentBounds, local_km: float, mirrored: bool) -> float:
    """Translate a distance from Point A into the segment's recorded axis."""
    x = clamp(local_km, 0.0, bounds.length)
    return bounds.max - x if mirrored else bounds.min + x


def interpolate_point(
    segment: SegmentStore, local_km: float, *, mirrored: bool
) -> RoutePoint | None:
    coords = segment.coords
    if not coords or not math.isfinite(local_km):
        return None
    km = lookup_km(segment.bounds(), local_km, mirrored)
    cable_type = nearest_cable_type(segment.meta, km)
    depth = interpolated_depth(segment.meta, km)

    first, last = coords[0], coords[-1]
    if km <= first.km:
        return RoutePoint(first.km, first.lat, first.lng, depth, cable_type)
    if km >= last.km:
        return RoutePoint(last.km, last.lat, last.lng, depth, cable_type)

    kms = np.fromiter((p.km for p in coords), dtype=float, count=len(coords))
    # first coord at or beyond km; equal-km runs resolve to their first row
    i = int(np.searchsorted(kms, km, side="left"))
    prev, curr = coords[i - 1], coords[i]
    span = curr.km - prev.km
    ratio = (km - prev.km) / span if span else 0.0
    return RoutePoint(
        km=km,
        lat=prev.lat + ratio * (curr.lat - prev.lat),
        lng=prev.lng + ratio * (curr.lng - prev.lng),
        depth=depth,
        cable_type=cable_type,
    )
