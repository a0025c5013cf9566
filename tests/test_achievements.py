import pytest

from timeflow_engine.achievements import achievement, achievements, next_achievement, next_achievements


def test_achievement_tiers():
    assert achievement("timers", 24) is None
    assert achievement("timers", 25) == "⏰ Timer Pro"
    assert achievement("timers", 50) == "🎯 Timer Master"
    assert achievement("pomodoros", 15) == "🍅 Pomodoro Pro"
    assert achievement("pomodoros", 30) == "🍅 Pomodoro Master"
    assert achievement("focus", 10) == "⚡ Focus Champion"
    assert achievement("focus", 20) == "⚡ Focus Master"
    assert achievement("goals", 5) == "🏆 Goal Achiever"
    assert achievement("goals", 10) == "🏆 Goal Master"


def test_next_achievement_hints():
    assert next_achievement("timers", 0) == "🎯 Set 25 more timers for Timer Pro"
    assert next_achievement("timers", 30) == "🎯 Set 20 more timers for Timer Master"
    assert next_achievement("pomodoros", 14) == "🍅 Complete 1 more pomodoros for Pomodoro Pro"
    assert next_achievement("focus", 12) == "⚡ Use focus mode 8 more times for Focus Master"
    assert next_achievement("goals", 2) == "🏆 Complete 3 more goals for Goal Achiever"
    assert next_achievement("goals", 10) is None


def test_unknown_kind_is_rejected():
    with pytest.raises(ValueError):
        achievement("streaks", 3)
    with pytest.raises(ValueError):
        next_achievement("streaks", 3)


def test_achievement_lists():
    assert achievements(0, 0, 0, 0) == []
    assert achievements(60, 16, 3, 10) == ["🎯 Timer Master", "🍅 Pomodoro Pro", "🏆 Goal Master"]
    assert next_achievements(60, 16, 3, 10) == [
        "🍅 Complete 14 more pomodoros for Pomodoro Master",
        "⚡ Use focus mode 7 more times for Focus Champion",
    ]
