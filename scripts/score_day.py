"""Score a day of tracked data from a JSON state file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from timeflow_engine.adapters import json_adapter
from timeflow_engine.config import load_config
from timeflow_engine.report import build_report


def main() -> None:
    parser = argparse.ArgumentParser(description="Compute productivity and health scores for a day")
    parser.add_argument("--data", required=True, help="Path to JSON state file")
    parser.add_argument("--now", help="Evaluation instant (ISO 8601), defaults to the current time")
    parser.add_argument("--config", help="Path to scoring YAML config")
    parser.add_argument("--output", help="Also write the report to this path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    now = datetime.fromisoformat(args.now) if args.now else datetime.now()
    state = json_adapter.parse_state(args.data)
    report = build_report(state, now, load_config(args.config))

    print(json.dumps(report, indent=2, ensure_ascii=False))

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"Saved report to {out_path}")


if __name__ == "__main__":
    main()
