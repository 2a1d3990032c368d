# cable_cutsim/domain/entities/cut.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

UNKNOWN = "Unknown"

BASE_CUT_TYPES: tuple[str, ...] = (
    "Shunt Fault",
    "Partial Fiber Break",
    "Fiber Break",
    "Full Cut",
)


def _segment_from_label(label: str | None) -> str:
    # "S3 | BU2 - BU3" -> "S3"
    if not label:
        return ""
    parts = str(label).strip().split(" ")
    return parts[0] if parts else ""


@dataclass(frozen=True)
class CutRequest:
    start_segment: str = ""
    end_segment: str = ""
    target_km: float | str | None = None
    cut_type: str = ""
    fault_date: str = ""  # YYYY-MM-DD, blank -> today
    fault_time: str = ""  # HH:MM, blank -> now
    editing_cut_id: str | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> CutRequest:
        """Rebuild a request from a stored cut so it can be edited and resubmitted."""
        date_part, time_part = "", ""
        if record.get("fault_date"):
            date_part, _, rest = str(record["fault_date"]).partition("T")
            time_part = rest[:5]
        distance = record.get("distance")
        return cls(
            start_segment=_segment_from_label(record.get("point_a")),
            end_segment=_segment_from_label(record.get("point_b")),
            target_km=distance if distance is not None else None,
            cut_type=record.get("cut_type") or "",
            fault_date=date_part,
            fault_time=time_part,
            editing_cut_id=record.get("cut_id"),
        )


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class CutPreview:
    distance_km: float  # clamped
    segment_source: str
    local_km: float
    total_span: float
    lat: float
    lng: float
    depth: float | None
    cable_type: str | None
    advisory: str | None = None


@dataclass(frozen=True)
class CutEvent:
    cut_id: str
    distance_km: float
    segment_source: str
    lat: float
    lng: float
    depth: float | str
    cable_type: str
    cut_type: str
    fault_date_time: str
    simulated: str
    cable: str
    segment: str
    source_table: str
    point_a: str
    point_b: str
    new_cut_id: str | None = None
    method: Literal["POST", "PUT"] = "POST"

    def to_payload(self) -> dict[str, Any]:
        """Request body for the cable-cuts resource."""
        payload = {
            "cut_id": self.cut_id,
            "distance": self.distance_km,
            "cut_type": self.cut_type,
            "fault_date": self.fault_date_time,
            "simulated": self.simulated,
            "latitude": self.lat,
            "longitude": self.lng,
            "depth": self.depth,
            "cable_type": self.cable_type,
            "cableType": self.cable_type,
            "cable": self.cable,
            "segment": self.segment,
            "source_table": self.source_table,
            "point_a": self.point_a,
            "point_b": self.point_b,
        }
        if self.new_cut_id:
            payload["new_cut_id"] = self.new_cut_id
        return payload


@dataclass
class AssemblyResult:
    event: CutEvent | None = None
    errors: list[FieldError] = field(default_factory=list)
    preview: CutPreview | None = None

    @property
    def ok(self) -> bool:
        return self.event is not None and not self.errors

    def messages(self) -> dict[str, str]:
        return {e.field: e.message for e in self.errors}
