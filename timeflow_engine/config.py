"""Scoring configuration with YAML overrides."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path

import yaml

from timeflow_engine.lexicon import Category, parse_category

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "config" / "scoring.yaml"

_CATEGORY_SET_FIELDS = {"focus_categories", "unproductive_categories", "fitness_categories"}


@dataclass(frozen=True)
class ScoringConfig:
    """Constants of the productivity and health formulas."""

    task_cap: float = 25.0
    habit_cap: float = 20.0
    quality_cap: float = 40.0
    focus_cap: float = 10.0
    focus_target_seconds: int = 3600
    points_per_pomodoro: float = 1.0
    pomodoro_bonus_cap: float = 5.0
    points_per_focus_session: float = 1.0
    focus_session_bonus_cap: float = 5.0
    streak_step: float = 0.01
    max_streak_multiplier: float = 1.10
    heavy_penalty_ratio: float = 0.60
    heavy_penalty: float = 15.0
    light_penalty_ratio: float = 0.40
    light_penalty: float = 8.0
    focus_categories: frozenset[Category] = field(
        default_factory=lambda: frozenset(
            {Category.TECHNICAL_EDUCATION, Category.LEARNING_SKILLS, Category.BUSINESS}
        )
    )
    unproductive_categories: frozenset[Category] = field(
        default_factory=lambda: frozenset({Category.LEISURE, Category.BROWSING})
    )
    fitness_categories: frozenset[Category] = field(default_factory=lambda: frozenset({Category.FITNESS}))
    health_component_cap: float = 25.0
    water_target: int = 8
    meals_target: int = 3
    fruits_veggies_target: int = 5
    fitness_target_seconds: int = 1800
    weekly_goal_hours: float = 40.0

    @property
    def bonus_cap(self) -> float:
        return self.pomodoro_bonus_cap + self.focus_session_bonus_cap


def _coerce(name: str, value, default):
    if name in _CATEGORY_SET_FIELDS:
        if not isinstance(value, (list, tuple, set)):
            raise ValueError(f"Config key '{name}' must be a list of category names")
        return frozenset(parse_category(item) for item in value)

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Config key '{name}' must be a number")
    if value < 0:
        raise ValueError(f"Config key '{name}' must not be negative")
    if isinstance(default, int) and value != int(value):
        raise ValueError(f"Config key '{name}' must be a whole number")
    return type(default)(value)


def config_from_mapping(payload: dict) -> ScoringConfig:
    """Build a config from a mapping of overrides; unknown keys are rejected."""

    if not isinstance(payload, dict):
        raise ValueError("Scoring config must be a mapping")

    defaults = ScoringConfig()
    known = {f.name for f in fields(ScoringConfig)}
    unknown = sorted(set(payload) - known)
    if unknown:
        raise ValueError(f"Unknown config keys {unknown}")

    overrides = {name: _coerce(name, value, getattr(defaults, name)) for name, value in payload.items()}
    return replace(defaults, **overrides)


def load_config(path: str | Path | None = None) -> ScoringConfig:
    """Load scoring config from YAML, falling back to defaults when the file is absent."""

    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        logger.debug("No scoring config at %s, using defaults", config_path)
        return ScoringConfig()

    try:
        with open(config_path, encoding="utf-8") as handle:
            payload = yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        raise ValueError(f"Malformed scoring config {config_path}") from exc

    logger.info("Loaded scoring config from %s", config_path)
    return config_from_mapping(payload or {})
