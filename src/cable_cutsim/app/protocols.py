from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cable_cutsim.domain.mechanics.segment_graph import SegmentGraph
    from cable_cutsim.io.cut_events import CutRecord


# ------------- Mechanics --------------------
@runtime_checkable
class MirrorPolicy(Protocol):
    """
    Decide the orientation of a segment that is not on the selected A..B path
    (or of any segment when Point B is blank). Segments on the path are always
    decided by the rule for the (A, B) pair.
    """

    def detached(
        self, graph: SegmentGraph, segment_id: str, start_id: str, end_id: str | None
    ) -> bool: ...


# ------------- Collaborators --------------------
@runtime_checkable
class RouteFeed(Protocol):
    """
    Source of raw RPL rows, one table per segment.
    Responsibilities:
      • Fetch every segment of a family (HTTP, database, fixture file...).
      • Return loosely-typed rows; parsing is done by the route store.
    """

    def rows(self, segment_id: str, endpoint: str) -> Iterable[Mapping[str, Any]]: ...


@runtime_checkable
class Sink(Protocol):
    def write(self, rec: CutRecord) -> None: ...
