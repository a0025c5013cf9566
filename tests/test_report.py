import json
from datetime import datetime
from pathlib import Path

from timeflow_engine.adapters.json_adapter import parse_state
from timeflow_engine.report import build_report

SAMPLE_STATE = Path(__file__).resolve().parents[1] / "examples" / "sample_state.json"
NOW = datetime(2025, 3, 12, 21, 0)


def test_build_report_on_sample_state():
    state = parse_state(str(SAMPLE_STATE))
    report = build_report(state, NOW)

    assert report["date"] == "2025-03-12"
    assert 0.0 <= report["productivity"]["final_score"] <= 100.0
    assert 0.0 <= report["health"]["health_score"] <= 100.0
    assert report["today"]["activity_count"] == 5
    assert report["top_category"] == "Technical Education"
    assert [goal["category"] for goal in report["goals"]] == ["Technical Education", "Fitness"]
    assert report["habits"][1] == {"name": "Meditate", "completed": False, "streak": 2}
    json.dumps(report)


def test_report_is_deterministic():
    state = parse_state(str(SAMPLE_STATE))
    assert build_report(state, NOW) == build_report(state, NOW)


def test_report_includes_streak_achievements_and_insights():
    report = build_report(parse_state(str(SAMPLE_STATE)), NOW)

    assert report["health"]["color"] == "text-blue-400"
    assert report["streak"]["level"] == "Getting Started"
    assert report["streak"]["message"] == "5 days strong! 🔥"
    assert [m["reached"] for m in report["streak"]["milestones"]] == [True, False, False, False, False]
    assert report["achievements"] == []
    assert report["next_achievements"][0] == "🎯 Set 19 more timers for Timer Pro"
    assert report["insights"]["total_hours"] == 4.75
    assert report["insights"]["daily"][-1]["minutes"] == 255
    assert report["insights"]["daily"][-2]["minutes"] == 30
