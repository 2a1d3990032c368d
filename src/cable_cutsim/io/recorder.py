# io/recorder.py
import json
import logging
import sys
from collections import Counter
from dataclasses import asdict

from cable_cutsim.app.protocols import Sink
from cable_cutsim.io.cut_events import CutRecord

log = logging.getLogger("cable_cutsim.recorder")


class JsonlSink:
    """One JSON object per record; `names` keeps only those record kinds."""

    def __init__(self, fp=None, *, names: set[str] | None = None):
        self.fp = fp or sys.stdout
        self.names = names

    def write(self, rec: CutRecord) -> None:
        if self.names is not None and rec.name not in self.names:
            return
        self.fp.write(json.dumps(asdict(rec), default=str) + "\n")
        self.fp.flush()


class MemorySink:
    def __init__(self):
        self.events: list[CutRecord] = []

    def write(self, rec: CutRecord) -> None:
        self.events.append(rec)

    def named(self, name: str) -> list[CutRecord]:
        return [r for r in self.events if r.name == name]


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)
        self.counts: Counter[str] = Counter()  # records emitted, by name
        self.failures = 0

    def emit(self, rec: CutRecord) -> None:
        self.counts[rec.name] += 1
        for s in self.sinks:
            try:
                s.write(rec)
            except Exception:
                # a failing sink is reported and skipped; the others still receive the record
                self.failures += 1
                log.exception("sink %s failed on %s", type(s).__name__, rec.name)
