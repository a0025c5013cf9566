from datetime import date, datetime

from timeflow_engine.habits import (
    HabitState,
    habit_state,
    refresh_habit,
    streak_level,
    streak_message,
    streak_milestones,
    toggle_habit,
    update_daily_streak,
)
from timeflow_engine.schema import Habit

DAY1 = datetime(2025, 3, 10, 8, 0)
DAY2 = datetime(2025, 3, 11, 8, 0)
DAY3 = datetime(2025, 3, 12, 8, 0)
DAY4 = datetime(2025, 3, 13, 8, 0)


def test_streak_grows_on_consecutive_days_and_resets_after_gap():
    habit = Habit("h1", "Meditate")
    day1 = toggle_habit(habit, DAY1)
    assert (day1.completed, day1.streak, day1.last_completed) == (True, 1, DAY1)

    day2 = toggle_habit(day1, DAY2)
    assert day2.streak == 2

    day4 = toggle_habit(day2, DAY4)
    assert day4.streak == 1
    assert day4.last_completed == DAY4


def test_uncompleting_today_keeps_streak():
    habit = toggle_habit(toggle_habit(Habit("h1", "Meditate"), DAY1), DAY2)
    undone = toggle_habit(habit, DAY2.replace(hour=20))
    assert undone.completed is False
    assert undone.last_completed is None
    assert undone.streak == 2


def test_toggle_does_not_mutate_input():
    habit = Habit("h1", "Meditate")
    toggle_habit(habit, DAY1)
    assert habit.streak == 0
    assert habit.last_completed is None


def test_habit_state_is_derived_from_last_completed():
    assert habit_state(Habit("h1", "Walk"), DAY1) is HabitState.NEVER_COMPLETED
    done = Habit("h1", "Walk", last_completed=DAY1)
    assert habit_state(done, DAY1.replace(hour=23)) is HabitState.COMPLETED_TODAY
    assert habit_state(done, DAY2) is HabitState.COMPLETED_PREVIOUSLY


def test_refresh_habit_rolls_over_days():
    habit = Habit("h1", "Walk", completed=True, streak=2, last_completed=DAY2)
    assert refresh_habit(habit, DAY2) == habit

    next_day = refresh_habit(habit, DAY3)
    assert next_day.completed is False
    assert next_day.streak == 2

    missed = refresh_habit(habit, DAY4)
    assert missed.completed is False
    assert missed.streak == 0


def test_update_daily_streak():
    today = date(2025, 3, 12)
    assert update_daily_streak(3, date(2025, 3, 11), today) == (4, today)
    assert update_daily_streak(3, today, today) == (3, today)
    assert update_daily_streak(3, date(2025, 3, 9), today) == (0, today)
    assert update_daily_streak(0, None, today) == (0, today)


def test_streak_levels():
    assert streak_level(0).level == "Beginner"
    assert streak_level(2).icon == "🌱"
    assert streak_level(3).level == "Getting Started"
    assert streak_level(7).color == "bg-green-500"
    assert streak_level(14).level == "Pro"
    assert streak_level(21).level == "Expert"
    assert streak_level(30).level == "Master"
    assert streak_level(365).icon == "👑"


def test_streak_milestones_and_messages():
    milestones = streak_milestones(14)
    assert [m["days"] for m in milestones] == [3, 7, 14, 21, 30]
    assert [m["reached"] for m in milestones] == [True, True, True, False, False]
    assert milestones[1]["title"] == "Week Warrior"

    assert streak_message(0) == "Start your streak today!"
    assert streak_message(1) == "Great start! Keep it up!"
    assert streak_message(5) == "5 days strong! 🔥"
