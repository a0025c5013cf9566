"""Assemble a day's scores and statistics into a single report."""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import Any

from timeflow_engine.achievements import achievements, next_achievements
from timeflow_engine.config import ScoringConfig
from timeflow_engine.goals import category_goal_progress, weekly_progress
from timeflow_engine.health import calculate_health_score, health_score_color, health_score_label
from timeflow_engine.habits import refresh_habit, streak_level, streak_message, streak_milestones
from timeflow_engine.productivity import calculate_productivity_score
from timeflow_engine.schema import AppState
from timeflow_engine.stats import activity_insights, category_distribution, todays_stats, top_category


def build_report(state: AppState, now: datetime, config: ScoringConfig | None = None) -> dict[str, Any]:
    """Run every engine step over ``state`` and return a JSON-ready payload."""

    config = config or ScoringConfig()
    habits = [refresh_habit(habit, now) for habit in state.habits]

    productivity = calculate_productivity_score(
        state.activities,
        state.todos,
        habits,
        state.pomodoro_count,
        state.focus_mode_count,
        state.streak,
        now=now,
        config=config,
    )
    health = calculate_health_score(state.health, state.activities, now=now, config=config)
    top = top_category(state.activities, now)
    goals = [vars(category_goal_progress(goal, state.activities, now)) for goal in state.goals]
    counts = (
        len(state.activities),
        state.pomodoro_count,
        state.focus_mode_count,
        sum(1 for goal in goals if goal["completed"]),
    )

    return {
        "date": now.date().isoformat(),
        "productivity": productivity.to_dict(),
        "health": {
            **health.to_dict(),
            "label": health_score_label(health.health_score),
            "color": health_score_color(health.health_score),
        },
        "today": todays_stats(state.activities, now),
        "top_category": top.value if top else None,
        "distribution": category_distribution(state.activities, now),
        "goals": goals,
        "weekly": weekly_progress(state.activities, now, config.weekly_goal_hours),
        "habits": [{"name": h.name, "completed": h.completed, "streak": h.streak} for h in habits],
        "streak": {
            "days": state.streak,
            **asdict(streak_level(state.streak)),
            "message": streak_message(state.streak),
            "milestones": streak_milestones(state.streak),
        },
        "achievements": achievements(*counts),
        "next_achievements": next_achievements(*counts),
        "insights": activity_insights(state.activities, now),
    }
