"""Demo script for timeflow-engine."""

import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from timeflow_engine.adapters.json_adapter import parse_state
from timeflow_engine.categorizer import categorize
from timeflow_engine.report import build_report


def main() -> None:
    state = parse_state("examples/sample_state.json")
    now = datetime.fromisoformat("2025-03-12T21:00:00")
    for activity in state.activities:
        print(f"{activity.name!r}:", ", ".join(category.value for category in categorize(activity.name)))

    report = build_report(state, now)
    productivity = report["productivity"]
    print("Productivity:", round(productivity["final_score"], 1), productivity["label"])
    print("Health:", round(report["health"]["health_score"], 1), report["health"]["label"])
    print("Today:", report["today"])


if __name__ == "__main__":
    main()
