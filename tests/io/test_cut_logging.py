import json
import logging

import pytest

from cable_cutsim.domain.entities.cut import CutEvent, CutPreview, FieldError
from cable_cutsim.io.cut_events import CutRejectedRecord, CutSimulatedRecord
from cable_cutsim.io.cut_logging import CutLogging, _JsonFormatter
from cable_cutsim.io.recorder import JsonlSink, MemorySink, Recorder


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def handler():
    return ListHandler()


@pytest.fixture
def logger(handler):
    lg = logging.getLogger("cable_cutsim.test")
    lg.handlers[:] = [handler]
    lg.setLevel(logging.DEBUG)
    lg.propagate = False
    return lg


def _event(**kw) -> CutEvent:
    base = dict(
        cut_id="seaus2-1",
        distance_km=60.0,
        segment_source="S2",
        lat=6.0,
        lng=120.0,
        depth="Unknown",
        cable_type="Unknown",
        cut_type="Full Cut",
        fault_date_time="2025-03-04T05:06",
        simulated="2025-03-04T05:06:07.000Z",
        cable="sea-us",
        segment="s2",
        source_table="sea_us_rpl_s2",
        point_a="S1 - Kauditan",
        point_b="S2 - Davao",
    )
    return CutEvent(**{**base, **kw})


def test_assembled_cut_is_logged_and_recorded(logger, handler):
    sink = MemorySink()
    hooks = CutLogging(run_id="r-1", logger=logger, recorder=Recorder(sink))
    hooks.assembled(_event())
    hooks.assembled(_event(cut_id="seaus2-2", method="PUT"))

    assert [r.getMessage() for r in handler.records] == ["cut_assembled", "cut_assembled"]
    assert handler.records[0].extra["run_id"] == "r-1"
    assert handler.records[1].extra["method"] == "PUT"

    first, second = sink.events
    assert isinstance(first, CutSimulatedRecord)
    assert (first.seq, second.seq) == (1, 2)
    assert second.cut_id == "seaus2-2" and second.method == "PUT"


def test_rejections_are_warnings(logger, handler):
    sink = MemorySink()
    hooks = CutLogging(logger=logger, recorder=Recorder(sink))
    hooks.rejected([FieldError("cut_type", "Please select a cut type.")], start="S1", end="")
    (rec,) = handler.records
    assert rec.levelno == logging.WARNING and rec.extra["fields"] == ["cut_type"]
    (ev,) = sink.events
    assert isinstance(ev, CutRejectedRecord) and ev.name == "CutRejected"


def test_store_report_warns_only_about_dropped_rows(logger, handler):
    hooks = CutLogging(logger=logger)
    hooks.store_built(family="sea-us", segments=6, points=10, dropped={"S1": 0})
    hooks.store_built(family="sea-us", segments=6, points=10, dropped={"S1": 0, "S2": 3})
    msgs = [(r.levelname, r.getMessage()) for r in handler.records]
    assert msgs == [
        ("INFO", "store_built"),
        ("INFO", "store_built"),
        ("WARNING", "rows_dropped"),
    ]
    assert handler.records[-1].extra["dropped"] == {"S2": 3}


def test_previews_are_logged_only_in_debug(logger, handler):
    pv = CutPreview(10.0, "S1", 10.0, 80.0, 1.0, 120.0, None, None)
    CutLogging(logger=logger).preview(pv, start="S1", end="S2")
    assert handler.records == []
    CutLogging(logger=logger, debug=True).preview(pv, start="S1", end="S2")
    assert handler.records[0].levelno == logging.DEBUG


def test_errors_carry_their_context(logger, handler):
    CutLogging(logger=logger).error(reason="unlocatable", start="S5", end="S5", target_km=5.0)
    (rec,) = handler.records
    assert rec.levelno == logging.ERROR and rec.extra["reason"] == "unlocatable"


def test_json_formatter_flattens_extra():
    rec = logging.LogRecord("x", logging.INFO, __file__, 1, "cut_assembled", None, None)
    rec.extra = {"run_id": "r-1", "depth": float("inf")}
    out = json.loads(_JsonFormatter().format(rec))
    assert out["msg"] == "cut_assembled" and out["run_id"] == "r-1"
    assert out["level"] == "INFO"


# ---------- Recorder


class BrokenSink:
    def write(self, ev):
        raise OSError("disk full")


def test_recorder_keeps_going_after_a_failing_sink(caplog):
    sink = MemorySink()
    rec = Recorder(BrokenSink(), sink)
    with caplog.at_level(logging.ERROR, logger="cable_cutsim.recorder"):
        rec.emit(CutRejectedRecord("r", 1, "CutRejected", "S1", "S2", ["route"]))
    assert len(sink.events) == 1
    assert rec.failures == 1 and rec.counts["CutRejected"] == 1
    assert "BrokenSink" in caplog.text


def test_jsonl_sink_writes_one_line_per_record(tmp_path):
    path = tmp_path / "cuts.jsonl"
    with open(path, "w", encoding="utf-8") as fp:
        rec = Recorder(JsonlSink(fp))
        rec.emit(CutRejectedRecord("r", 1, "CutRejected", "S1", "S2", ["route"]))
        rec.emit(CutRejectedRecord("r", 2, "CutRejected", "S3", "", ["end_segment"]))
    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["seq"] for line in lines] == [1, 2]


def test_sinks_can_select_record_kinds(tmp_path):
    path = tmp_path / "simulated.jsonl"
    memory = MemorySink()
    with open(path, "w", encoding="utf-8") as fp:
        rec = Recorder(JsonlSink(fp, names={"CutSimulated"}), memory)
        hooks = CutLogging(logger=logging.getLogger("cable_cutsim.test.kinds"), recorder=rec)
        hooks.rejected([FieldError("route", "x")], start="S1", end="S2")
        hooks.assembled(_event())
    (line,) = path.read_text(encoding="utf-8").splitlines()
    assert json.loads(line)["cut_id"] == "seaus2-1"
    assert [r.seq for r in memory.named("CutRejected")] == [1]
    assert dict(rec.counts) == {"CutRejected": 1, "CutSimulated": 1}
