# io/cut_logging.py
import json
import logging
import sys

from cable_cutsim.domain.entities.cut import CutEvent, CutPreview, FieldError
from cable_cutsim.io.cut_events import CutRejectedRecord, CutSimulatedRecord
from cable_cutsim.io.recorder import Recorder
from cable_cutsim.sim.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def json_logger(name="cable_cutsim", level="INFO", stream=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class CutLogging(NoopHooks):
    """
    One place to shape and emit structured logs for route snapshots, previews and cuts.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        self.log = logger or json_logger(level=level)
        self._seq = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _next_seq(self) -> int:
        self._seq += 1
        return self._seq

    # --------------------------------------------------------

    def store_built(self, *, family, segments, points, dropped):
        self._emit("INFO", "store_built", family=family, segments=segments, points=points)
        skipped = {sid: n for sid, n in dropped.items() if n}
        if skipped:
            self._emit("WARNING", "rows_dropped", family=family, dropped=skipped)

    def preview(self, pv: CutPreview, *, start, end):
        if self.debug:
            self._emit(
                "DEBUG",
                "preview",
                start=start,
                end=end,
                distance_km=pv.distance_km,
                segment=pv.segment_source,
                local_km=pv.local_km,
                lat=pv.lat,
                lng=pv.lng,
                advisory=pv.advisory,
            )

    def assembled(self, ev: CutEvent):
        self._emit(
            "INFO",
            "cut_assembled",
            cut_id=ev.cut_id,
            segment=ev.segment_source,
            distance_km=ev.distance_km,
            cut_type=ev.cut_type,
            method=ev.method,
        )
        if self.recorder:
            self.recorder.emit(
                CutSimulatedRecord(
                    run_id=self.run_id,
                    seq=self._next_seq(),
                    name="CutSimulated",
                    cut_id=ev.cut_id,
                    cable=ev.cable,
                    segment=ev.segment,
                    distance_km=ev.distance_km,
                    lat=ev.lat,
                    lng=ev.lng,
                    cut_type=ev.cut_type,
                    method=ev.method,
                )
            )

    def rejected(self, errors: list[FieldError], *, start, end):
        fields = [e.field for e in errors]
        self._emit("WARNING", "cut_rejected", start=start, end=end, fields=fields)
        if self.recorder:
            self.recorder.emit(
                CutRejectedRecord(
                    run_id=self.run_id,
                    seq=self._next_seq(),
                    name="CutRejected",
                    start=start,
                    end=end,
                    fields=fields,
                )
            )

    def error(self, *, reason: str, **kw):
        self._emit("ERROR", "cut_error", reason=reason, **kw)
