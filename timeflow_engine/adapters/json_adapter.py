"""JSON adapter for activity records and full application state."""

from __future__ import annotations

import json
import logging
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum

from timeflow_engine.categorizer import primary_category
from timeflow_engine.lexicon import parse_category
from timeflow_engine.schema import ActivityRecord, AppState, CategoryGoal, Habit, HealthCounters, TodoItem

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes"}
_FALSE_VALUES = {"0", "false", "no", ""}


def _require(item: dict, required: set, label: str) -> None:
    if not isinstance(item, dict):
        raise ValueError(f"{label}: expected an object")
    missing = sorted(name for name in required if item.get(name) in (None, ""))
    if missing:
        raise ValueError(f"{label}: missing required fields {missing}")


def _timestamp(value, label: str, name: str) -> datetime | None:
    if value in (None, ""):
        return None
    try:
        return datetime.fromisoformat(str(value))
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"{label}: malformed {name}") from exc


def parse_count(value, label: str, name: str) -> int:
    try:
        number = int(value)
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"{label}: invalid {name}") from exc
    if number < 0:
        raise ValueError(f"{label}: negative {name}")
    return number


def parse_flag(value, label: str, name: str) -> bool:
    """Booleans, 0/1, or the strings true/false/yes/no/1/0; missing means False."""

    if value is None or isinstance(value, bool) or value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        key = value.strip().lower()
        if key in _TRUE_VALUES:
            return True
        if key in _FALSE_VALUES:
            return False
    raise ValueError(f"{label}: invalid {name} {value!r}")


def _parse_activity(item: dict, label: str) -> ActivityRecord:
    _require(item, {"id", "name", "duration", "start_time"}, label)
    name = str(item["name"]).strip()
    category_raw = item.get("category")
    try:
        category = parse_category(category_raw) if category_raw else primary_category(name)
    except ValueError as exc:
        raise ValueError(f"{label}: {exc}") from exc

    return ActivityRecord(
        id=str(item["id"]).strip(),
        name=name,
        duration=parse_count(item["duration"], label, "duration"),
        start_time=_timestamp(item["start_time"], label, "start_time"),
        end_time=_timestamp(item.get("end_time"), label, "end_time"),
        category=category.value,
        description=item.get("description"),
        is_active=parse_flag(item.get("is_active"), label, "is_active"),
    )


def _parse_todo(item: dict, label: str) -> TodoItem:
    _require(item, {"id", "text"}, label)
    return TodoItem(
        id=str(item["id"]).strip(),
        text=str(item["text"]),
        completed=parse_flag(item.get("completed"), label, "completed"),
        created_at=_timestamp(item.get("created_at"), label, "created_at"),
    )


def _parse_habit(item: dict, label: str) -> Habit:
    _require(item, {"id", "name"}, label)
    try:
        target = float(item.get("target", 1))
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"{label}: invalid target") from exc
    return Habit(
        id=str(item["id"]).strip(),
        name=str(item["name"]),
        target=target,
        unit=str(item.get("unit", "time")),
        completed=parse_flag(item.get("completed"), label, "completed"),
        streak=parse_count(item.get("streak", 0), label, "streak"),
        last_completed=_timestamp(item.get("last_completed"), label, "last_completed"),
    )


def _parse_goal(item: dict, label: str) -> CategoryGoal:
    _require(item, {"id", "category", "weekly_minutes"}, label)
    try:
        category = parse_category(item["category"])
    except ValueError as exc:
        raise ValueError(f"{label}: {exc}") from exc
    return CategoryGoal(
        id=str(item["id"]).strip(),
        category=category.value,
        weekly_minutes=parse_count(item["weekly_minutes"], label, "weekly_minutes"),
        current_minutes=parse_count(item.get("current_minutes", 0), label, "current_minutes"),
    )


_ITEM_PARSERS = {
    "activities": _parse_activity,
    "todos": _parse_todo,
    "habits": _parse_habit,
    "goals": _parse_goal,
}


def parse_items(kind: str, items) -> list:
    """Parse a list of ``kind`` records (activities, todos, habits or goals)."""

    if kind not in _ITEM_PARSERS:
        raise ValueError(f"Unknown record kind '{kind}'")
    if not isinstance(items, list):
        raise ValueError(f"'{kind}' must be a list of objects")
    parser = _ITEM_PARSERS[kind]
    return [parser(item, f"{kind} item {i}") for i, item in enumerate(items, start=1)]


def parse_health(payload) -> HealthCounters:
    if payload is None:
        return HealthCounters()
    if not isinstance(payload, dict):
        raise ValueError("health: expected an object")
    return HealthCounters(
        **{f.name: parse_count(payload.get(f.name, 0), "health", f.name) for f in fields(HealthCounters)}
    )


def to_payload(value):
    """Convert records (and containers of records) to JSON-ready values."""

    if is_dataclass(value):
        return {f.name: to_payload(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, (list, tuple)):
        return [to_payload(item) for item in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value


def state_from_payload(payload) -> AppState:
    if not isinstance(payload, dict):
        raise ValueError("JSON state payload must be an object")

    last_active = payload.get("last_active_date")
    try:
        last_active_date = date.fromisoformat(last_active) if last_active else None
    except Exception as exc:  # noqa: BLE001
        raise ValueError("malformed last_active_date") from exc

    return AppState(
        activities=parse_items("activities", payload.get("activities", [])),
        todos=parse_items("todos", payload.get("todos", [])),
        habits=parse_items("habits", payload.get("habits", [])),
        health=parse_health(payload.get("health")),
        goals=parse_items("goals", payload.get("goals", [])),
        pomodoro_count=parse_count(payload.get("pomodoro_count", 0), "state", "pomodoro_count"),
        focus_mode_count=parse_count(payload.get("focus_mode_count", 0), "state", "focus_mode_count"),
        streak=parse_count(payload.get("streak", 0), "state", "streak"),
        last_active_date=last_active_date,
    )


def state_to_payload(state: AppState) -> dict:
    return to_payload(state)


def parse(file_path: str) -> list[ActivityRecord]:
    """Parse JSON file into activity records."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    return parse_items("activities", payload)


def parse_state(file_path: str) -> AppState:
    """Parse a JSON state file holding activities, todos, habits, counters and goals."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    state = state_from_payload(payload)
    logger.debug(
        "Parsed state from %s: %d activities, %d todos, %d habits",
        file_path,
        len(state.activities),
        len(state.todos),
        len(state.habits),
    )
    return state
