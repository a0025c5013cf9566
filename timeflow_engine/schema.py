"""Core data schema for tracked activities, todos, habits and goals."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional


@dataclass
class ActivityRecord:
    """A timed activity. ``duration`` is in seconds."""

    id: str
    name: str
    duration: int
    start_time: datetime
    end_time: Optional[datetime] = None
    category: str = "Other"
    description: Optional[str] = None
    is_active: bool = False


@dataclass
class TodoItem:
    id: str
    text: str
    completed: bool = False
    created_at: Optional[datetime] = None


@dataclass
class Habit:
    """Daily habit with its completion streak."""

    id: str
    name: str
    target: float = 1
    unit: str = "time"
    completed: bool = False
    streak: int = 0
    last_completed: Optional[datetime] = None


@dataclass
class HealthCounters:
    water: int = 0
    meals: int = 0
    fruits_veggies: int = 0


@dataclass
class CategoryGoal:
    """Weekly time target for one category, in minutes."""

    id: str
    category: str
    weekly_minutes: int
    current_minutes: int = 0


@dataclass
class AppState:
    """Everything the application persists between sessions."""

    activities: list[ActivityRecord] = field(default_factory=list)
    todos: list[TodoItem] = field(default_factory=list)
    habits: list[Habit] = field(default_factory=list)
    health: HealthCounters = field(default_factory=HealthCounters)
    goals: list[CategoryGoal] = field(default_factory=list)
    pomodoro_count: int = 0
    focus_mode_count: int = 0
    streak: int = 0
    last_active_date: Optional[date] = None
