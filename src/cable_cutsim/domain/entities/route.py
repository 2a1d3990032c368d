from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType


# Core route types used by mechanics
@dataclass(frozen=True)
class RoutePoint:
    km: float  # cumulative distance on the segment's recorded axis
    lat: float | None = None
    lng: float | None = None
    depth: float | None = None  # metres
    cable_type: str | None = None

    @property
    def has_coords(self) -> bool:
        return self.lat is not None and self.lng is not None


@dataclass(frozen=True)
class SegmentBounds:
    min: float
    max: float
    length: float


EMPTY_BOUNDS = SegmentBounds(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class SegmentStore:
    segment_id: str
    meta: tuple[RoutePoint, ...]  # every retained row, ascending km
    coords: tuple[RoutePoint, ...]  # rows with lat/lng, ascending km

    def bounds(self) -> SegmentBounds:
        if not self.meta:
            return EMPTY_BOUNDS
        lo, hi = self.meta[0].km, self.meta[-1].km
        return SegmentBounds(lo, hi, max(0.0, hi - lo))

    @property
    def length(self) -> float:
        return self.bounds().length


class RouteStore(Mapping[str, SegmentStore]):
    """Read-only snapshot of every loaded segment of one cable family."""

    def __init__(
        self,
        segments: Iterable[SegmentStore] = (),
        *,
        dropped: Mapping[str, int] | None = None,
    ):
        self._segments = MappingProxyType({s.segment_id: s for s in segments})
        self.dropped = MappingProxyType(dict(dropped or {}))

    def __getitem__(self, segment_id: str) -> SegmentStore:
        return self._segments[segment_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def segment_length(self, segment_id: str) -> float:
        seg = self._segments.get(segment_id)
        return seg.length if seg else 0.0

    def is_complete(self, segment_ids: Iterable[str]) -> bool:
        return all(sid in self._segments for sid in segment_ids)


@dataclass(frozen=True)
class SpanPosition:
    segment_id: str
    local_km: float
    total_span: float
    path: tuple[str, ...]
