"""Composite daily productivity score."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime

from timeflow_engine.config import ScoringConfig
from timeflow_engine.lexicon import category_weight
from timeflow_engine.schema import ActivityRecord, Habit, TodoItem
from timeflow_engine.windowing import category_durations, duration_in, is_same_day, todays_activities, total_duration

logger = logging.getLogger(__name__)

_SCORE_LABELS = (
    (90, "Exceptional"),
    (80, "Highly Productive"),
    (70, "Good"),
    (60, "Average"),
    (50, "Below Average"),
)
_SCORE_COLORS = (
    (90, "text-green-400"),
    (80, "text-blue-400"),
    (70, "text-yellow-400"),
    (60, "text-orange-400"),
)


@dataclass
class ComponentScore:
    value: float
    cap: float


@dataclass
class ScoreBreakdown:
    completed_tasks: int
    total_tasks: int
    completed_habits: int
    total_habits: int
    total_activity_time: int
    focus_time: int
    unproductive_time: float
    unproductive_ratio: float
    average_productivity: float
    base_score: float
    streak_multiplier: float
    penalties: float


@dataclass
class ProductivityScoreResult:
    final_score: float
    label: str
    components: dict[str, ComponentScore] = field(default_factory=dict)
    breakdown: ScoreBreakdown | None = None

    def to_dict(self) -> dict:
        return asdict(self)


def _ratio(part: float, whole: float) -> float:
    if whole <= 0:
        return 0.0
    return part / whole


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def streak_multiplier(streak: int, config: ScoringConfig | None = None) -> float:
    """Boost applied to the base score, saturating at the configured maximum."""

    config = config or ScoringConfig()
    return min(1.0 + max(streak, 0) * config.streak_step, config.max_streak_multiplier)


def score_label(score: float) -> str:
    for threshold, label in _SCORE_LABELS:
        if score >= threshold:
            return label
    return "Needs Improvement"


def score_color(score: float) -> str:
    for threshold, color in _SCORE_COLORS:
        if score >= threshold:
            return color
    return "text-red-400"


def _activity_quality(durations: dict, total_time: float, cap: float) -> tuple[float, float]:
    """Return the time-weighted quality points and the average weight."""

    average = sum(_ratio(seconds, total_time) * category_weight(category) for category, seconds in durations.items())
    return _clamp(average * cap, 0.0, cap), average


def _penalty(unproductive_ratio: float, config: ScoringConfig) -> float:
    if unproductive_ratio > config.heavy_penalty_ratio:
        return config.heavy_penalty
    if unproductive_ratio >= config.light_penalty_ratio:
        return config.light_penalty
    return 0.0


def calculate_productivity_score(
    activities: list[ActivityRecord],
    todos: list[TodoItem],
    habits: list[Habit],
    pomodoro_count: int,
    focus_mode_count: int,
    streak: int,
    now: datetime | None = None,
    config: ScoringConfig | None = None,
) -> ProductivityScoreResult:
    """Compute today's bounded productivity score with its component breakdown."""

    now = now or datetime.now()
    config = config or ScoringConfig()

    today = todays_activities(activities, now)
    total_time = total_duration(today)
    durations = category_durations(today, split=True)

    completed_tasks = sum(1 for todo in todos if todo.completed)
    task_score = _clamp(_ratio(completed_tasks, len(todos)) * config.task_cap, 0.0, config.task_cap)

    completed_habits = sum(1 for habit in habits if is_same_day(habit.last_completed, now))
    habit_score = _clamp(_ratio(completed_habits, len(habits)) * config.habit_cap, 0.0, config.habit_cap)

    quality_score, average_productivity = _activity_quality(durations, total_time, config.quality_cap)

    focus_time = duration_in(today, config.focus_categories)
    focus_score = min(_ratio(focus_time, config.focus_target_seconds), 1.0) * config.focus_cap

    bonus_score = min(max(pomodoro_count, 0) * config.points_per_pomodoro, config.pomodoro_bonus_cap) + min(
        max(focus_mode_count, 0) * config.points_per_focus_session, config.focus_session_bonus_cap
    )

    base_score = task_score + habit_score + quality_score + focus_score + bonus_score
    multiplier = streak_multiplier(streak, config)

    unproductive_time = sum(
        seconds for category, seconds in durations.items() if category in config.unproductive_categories
    )
    unproductive_ratio = _ratio(unproductive_time, total_time)
    penalties = _penalty(unproductive_ratio, config)

    final_score = _clamp(base_score * multiplier - penalties, 0.0, 100.0)
    logger.debug(
        "Productivity score %.2f (base %.2f x %.2f - %.1f) over %d activities",
        final_score,
        base_score,
        multiplier,
        penalties,
        len(today),
    )

    return ProductivityScoreResult(
        final_score=final_score,
        label=score_label(final_score),
        components={
            "task_completion": ComponentScore(task_score, config.task_cap),
            "habit_completion": ComponentScore(habit_score, config.habit_cap),
            "activity_quality": ComponentScore(quality_score, config.quality_cap),
            "focus_time": ComponentScore(focus_score, config.focus_cap),
            "bonus": ComponentScore(bonus_score, config.bonus_cap),
        },
        breakdown=ScoreBreakdown(
            completed_tasks=completed_tasks,
            total_tasks=len(todos),
            completed_habits=completed_habits,
            total_habits=len(habits),
            total_activity_time=total_time,
            focus_time=focus_time,
            unproductive_time=unproductive_time,
            unproductive_ratio=unproductive_ratio,
            average_productivity=average_productivity,
            base_score=base_score,
            streak_multiplier=multiplier,
            penalties=penalties,
        ),
    )
