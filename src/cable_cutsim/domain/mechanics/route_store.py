"""Build per-segment route-position snapshots from raw RPL rows.

Source tables name the same quantity differently (``cable_cumulative_total``
on one segment, ``route_distance_cumm`` on another), so every logical field is
resolved through an ordered list of alias keys, first finite match wins.
"""

import math
import re
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

from cable_cutsim.config.models import FieldAliasesModel
from cable_cutsim.domain.entities.route import RoutePoint, RouteStore, SegmentStore

T = TypeVar("T")

Row = Mapping[str, Any]

# leading numeric prefix, like JavaScript's parseFloat
_NUMBER_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        v = float(value)
        return v if math.isfinite(v) else None
    if not isinstance(value, str):
        return None
    m = _NUMBER_PREFIX.match(value.strip())
    if not m:
        return None
    v = float(m.group(0))
    return v if math.isfinite(v) else None


def parse_label(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    return value.strip() or None


def resolve_field(row: Row, keys: Sequence[str], parse: Callable[[Any], T | None]) -> T | None:
    for key in keys:
        if key in row:
            v = parse(row[key])
            if v is not None:
                return v
    return None


def to_route_point(row: Row, columns: FieldAliasesModel) -> RoutePoint | None:
    km = resolve_field(row, columns.distance, parse_number)
    if km is None:
        return None
    lat = resolve_field(row, columns.latitude, parse_number)
    lng = resolve_field(row, columns.longitude, parse_number)
    return RoutePoint(
        km=km,
        lat=lat,
        lng=lng,
        depth=resolve_field(row, columns.depth, parse_number),
        cable_type=resolve_field(row, columns.cable_type, parse_label),
    )


def build_segment(
    segment_id: str, rows: Iterable[Row], columns: FieldAliasesModel
) -> tuple[SegmentStore, int]:
    """Return the segment snapshot and the number of rows dropped for lack of a distance."""
    meta: list[RoutePoint] = []
    dropped = 0
    for row in rows:
        p = to_route_point(row, columns) if isinstance(row, Mapping) else None
        if p is None:
            dropped += 1
            continue
        meta.append(p)
    # stable sort keeps table order among equal km
    meta.sort(key=lambda p: p.km)
    coords = [p for p in meta if p.has_coords]
    return SegmentStore(segment_id, tuple(meta), tuple(coords)), dropped


def build_store(
    raw_by_segment: Mapping[str, Iterable[Row]], columns: FieldAliasesModel
) -> RouteStore:
    segments, dropped = [], {}
    for segment_id, rows in raw_by_segment.items():
        seg, n = build_segment(segment_id, rows or (), columns)
        segments.append(seg)
        dropped[segment_id] = n
    return RouteStore(segments, dropped=dropped)
