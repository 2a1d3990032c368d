# main.py
import json
import sys
from pathlib import Path

from cable_cutsim.app.build import build
from cable_cutsim.domain.entities.cut import CutRequest
from cable_cutsim.io.cut_logging import json_logger
from cable_cutsim.io.recorder import JsonlSink, Recorder


class JsonDirFeed:
    """RPL snapshot exported as one JSON array per segment: <dir>/<segment id>.json"""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def rows(self, segment_id: str, endpoint: str):
        path = self.root / f"{segment_id}.json"
        if not path.exists():
            return []
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, list) else []


def run(rows_dir: str, family: str, start: str, end: str, km: float, cut_type: str) -> int:
    # stdout carries only the payload; logs and records go to stderr
    app = build(
        {"family": family, "run_id": "cli"},
        feed=JsonDirFeed(rows_dir),
        logger=json_logger("cutsim.cli", stream=sys.stderr),
        recorder=Recorder(JsonlSink(sys.stderr)),
    )
    result = app.assembler.assemble(
        CutRequest(start_segment=start, end_segment=end, target_km=km, cut_type=cut_type)
    )
    if not result.ok:
        for field, msg in result.messages().items():
            print(f"{field}: {msg}", file=sys.stderr)
        return 1
    print(json.dumps(result.event.to_payload(), indent=2))
    return 0


if __name__ == "__main__":
    # python main.py <rows_dir> <family> <point A> <point B> <km> "<cut type>"
    rows_dir, family, start, end, km, cut_type = sys.argv[1:7]
    sys.exit(run(rows_dir, family, start, end, float(km), cut_type))
