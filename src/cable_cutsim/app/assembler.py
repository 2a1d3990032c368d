# cable_cutsim/app/assembler.py
import re

from cable_cutsim.config.models import CableFamilyModel
from cable_cutsim.domain.entities.cut import (
    BASE_CUT_TYPES,
    UNKNOWN,
    AssemblyResult,
    CutEvent,
    CutPreview,
    CutRequest,
    FieldError,
)
from cable_cutsim.domain.mechanics.mechanics_core import CutMechanics
from cable_cutsim.domain.mechanics.route_store import parse_number
from cable_cutsim.domain.mechanics.span_resolver import clamp
from cable_cutsim.sim.clock import FaultClock, valid_date, valid_time
from cable_cutsim.sim.hooks import CutHooks, NoopHooks

NO_ROUTE_DATA = "No route data available for the selected segments."
UNLOCATABLE = "Unable to calculate cut location. Please adjust your selection."


def range_advisory(span: float) -> str:
    return f"Target must be within 0 and {span:.3f} km."


def segment_number(segment_id: str) -> str:
    m = re.search(r"\d+", segment_id or "")
    return m.group(0) if m else "1"


def _has_error(errors: list[FieldError], *fields: str) -> bool:
    return any(e.field in fields for e in errors)


class CutAssembler:
    """
    Turns a user's (Point A, Point B, distance, cut type, date/time) selection
    into a CutEvent ready for the cable-cuts resource.

    Validation problems come back as FieldError values; nothing is emitted
    unless every check passes. Persisting the event and drawing its marker
    are the caller's job.
    """

    def __init__(
        self,
        *,
        family: CableFamilyModel,
        mechanics: CutMechanics,
        clock: FaultClock | None = None,
        hooks: CutHooks | None = None,
    ):
        self.family = family
        self.mechanics = mechanics
        self.clock = clock or FaultClock()
        self.hooks = hooks or NoopHooks()

    @property
    def cut_types(self) -> tuple[str, ...]:
        return BASE_CUT_TYPES + tuple(self.family.extra_cut_types)

    @property
    def data_ready(self) -> bool:
        return self.mechanics.store.is_complete(self.family.segment_ids)

    # --------------- Preview -----------------------------

    def preview(self, start: str, end: str | None, target_km: float) -> CutPreview | None:
        """Locate the cut at the clamped distance; out-of-range input only adds an advisory."""
        if not start:
            return None
        span = self.mechanics.total_span(start, end)
        if span <= 0:
            return None
        hit = self.mechanics.locate(start, end, target_km)
        if hit is None:
            return None
        pos, point = hit
        advisory = range_advisory(span) if target_km < 0 or target_km > span else None
        pv = CutPreview(
            distance_km=clamp(target_km, 0.0, span),
            segment_source=pos.segment_id,
            local_km=pos.local_km,
            total_span=span,
            lat=point.lat,
            lng=point.lng,
            depth=point.depth,
            cable_type=point.cable_type,
            advisory=advisory,
        )
        self.hooks.preview(pv, start=start, end=end)
        return pv

    # --------------- Validation -----------------------------

    def validate(self, req: CutRequest) -> tuple[list[FieldError], float | None]:
        errors: list[FieldError] = []
        if not req.start_segment:
            errors.append(FieldError("start_segment", "Please select Point A segment."))
        if not req.end_segment:
            errors.append(FieldError("end_segment", "Please select Point B segment."))
        for name, sid in (("start_segment", req.start_segment), ("end_segment", req.end_segment)):
            if sid and sid not in self.mechanics.graph:
                errors.append(FieldError(name, f"Unknown segment {sid!r}."))
        if not req.cut_type:
            errors.append(FieldError("cut_type", "Please select a cut type."))
        elif req.cut_type not in self.cut_types:
            errors.append(FieldError("cut_type", f"Unsupported cut type {req.cut_type!r}."))

        target = parse_number(req.target_km)
        if target is None:
            errors.append(FieldError("target_km", "Enter a valid number."))

        if req.fault_date.strip() and not valid_date(req.fault_date.strip()):
            errors.append(FieldError("fault_date", "Enter a date as YYYY-MM-DD."))
        if req.fault_time.strip() and not valid_time(req.fault_time.strip()):
            errors.append(FieldError("fault_time", "Enter a time as HH:MM."))

        if not _has_error(errors, "start_segment", "end_segment"):
            span = self.mechanics.total_span(req.start_segment, req.end_segment)
            if span <= 0:
                errors.append(FieldError("route", NO_ROUTE_DATA))
            elif target is not None and (target < 0 or target > span):
                errors.append(FieldError("target_km", range_advisory(span)))
        return errors, target

    # --------------- Assembly -----------------------------

    def _cut_identity(self, source: str, editing_cut_id: str | None) -> tuple[str, str | None]:
        prefix = f"{self.family.cut_prefix}{segment_number(source)}"
        fresh = f"{prefix}-{self.clock.epoch_ms()}"
        if not editing_cut_id:
            return fresh, None
        if editing_cut_id.startswith(f"{prefix}-"):
            return editing_cut_id, None
        # the cut moved to another segment: re-key it
        return fresh, fresh

    def assemble(self, req: CutRequest) -> AssemblyResult:
        start, end = req.start_segment, req.end_segment
        errors, target = self.validate(req)
        if errors:
            self.hooks.rejected(errors, start=start, end=end)
            return AssemblyResult(errors=errors)

        pv = self.preview(start, end, target)
        if pv is None:
            self.hooks.error(reason="unlocatable", start=start, end=end, target_km=target)
            errors = [FieldError("route", UNLOCATABLE)]
            self.hooks.rejected(errors, start=start, end=end)
            return AssemblyResult(errors=errors)

        cut_id, new_cut_id = self._cut_identity(pv.segment_source, req.editing_cut_id)
        n = segment_number(pv.segment_source)
        ev = CutEvent(
            cut_id=cut_id,
            distance_km=round(pv.distance_km, 3),
            segment_source=pv.segment_source,
            lat=pv.lat,
            lng=pv.lng,
            depth=pv.depth if pv.depth is not None else UNKNOWN,
            cable_type=pv.cable_type if pv.cable_type is not None else UNKNOWN,
            cut_type=req.cut_type,
            fault_date_time=self.clock.combine(req.fault_date, req.fault_time),
            simulated=self.clock.iso_utc(),
            cable=self.family.slug,
            segment=f"s{n}",
            source_table=f"{self.family.table_prefix}_s{n}",
            point_a=self.family.label_of(start),
            point_b=self.family.label_of(end),
            new_cut_id=new_cut_id,
            method="PUT" if req.editing_cut_id else "POST",
        )
        self.hooks.assembled(ev)
        return AssemblyResult(event=ev, preview=pv)
