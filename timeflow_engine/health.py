"""Daily health score from manual counters and fitness activity time."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields, replace
from datetime import datetime

from timeflow_engine.config import ScoringConfig
from timeflow_engine.schema import ActivityRecord, HealthCounters
from timeflow_engine.windowing import duration_in, todays_activities

logger = logging.getLogger(__name__)

_HEALTH_LABELS = (
    (90, "Excellent Health"),
    (75, "Good Health"),
    (60, "Fair Health"),
    (45, "Needs Improvement"),
)

_HEALTH_COLORS = (
    (90, "text-green-400"),
    (75, "text-blue-400"),
    (60, "text-yellow-400"),
    (45, "text-orange-400"),
)


@dataclass
class HealthBreakdown:
    water_score: float
    meal_score: float
    fruits_veggies_score: float
    fitness_score: float


@dataclass
class HealthScoreResult:
    counters: HealthCounters
    fitness_time: int
    health_score: float
    breakdown: HealthBreakdown

    def to_dict(self) -> dict:
        return asdict(self)


def _component(actual: float, target: float, cap: float) -> float:
    if target <= 0:
        return 0.0
    return min(max(actual, 0) / target, 1.0) * cap


def adjust_counter(counters: HealthCounters, name: str, delta: int) -> HealthCounters:
    """Return new counters with ``name`` moved by ``delta``, never below zero."""

    if name not in {f.name for f in fields(HealthCounters)}:
        raise ValueError(f"Unknown health counter '{name}'")
    return replace(counters, **{name: max(0, getattr(counters, name) + delta)})


def health_score_label(score: float) -> str:
    for threshold, label in _HEALTH_LABELS:
        if score >= threshold:
            return label
    return "Poor Health"


def health_score_color(score: float) -> str:
    for threshold, color in _HEALTH_COLORS:
        if score >= threshold:
            return color
    return "text-red-400"


def calculate_health_score(
    counters: HealthCounters,
    activities: list[ActivityRecord],
    now: datetime | None = None,
    config: ScoringConfig | None = None,
) -> HealthScoreResult:
    """Score water, meals, fruit/veg servings and today's fitness time, 25 points each."""

    now = now or datetime.now()
    config = config or ScoringConfig()
    cap = config.health_component_cap

    fitness_time = duration_in(todays_activities(activities, now), config.fitness_categories)

    breakdown = HealthBreakdown(
        water_score=_component(counters.water, config.water_target, cap),
        meal_score=_component(counters.meals, config.meals_target, cap),
        fruits_veggies_score=_component(counters.fruits_veggies, config.fruits_veggies_target, cap),
        fitness_score=_component(fitness_time, config.fitness_target_seconds, cap),
    )
    health_score = (
        breakdown.water_score + breakdown.meal_score + breakdown.fruits_veggies_score + breakdown.fitness_score
    )
    logger.debug("Health score %.2f with %ds of fitness", health_score, fitness_time)

    return HealthScoreResult(
        counters=counters,
        fitness_time=fitness_time,
        health_score=min(health_score, 100.0),
        breakdown=breakdown,
    )
