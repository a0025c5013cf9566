"""Key-value persistence for application state."""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Protocol

from timeflow_engine.adapters.json_adapter import parse_count, parse_health, parse_items, to_payload
from timeflow_engine.schema import AppState

logger = logging.getLogger(__name__)

ACTIVITIES_KEY = "timeflow-activities"
TODOS_KEY = "timeflow-todos"
HABITS_KEY = "timeflow-habits"
HEALTH_KEY = "timeflow-health"
GOALS_KEY = "timeflow-goals"
POMODOROS_KEY = "timeflow-pomodoros"
FOCUS_SESSIONS_KEY = "timeflow-focus-sessions"
STREAK_KEY = "timeflow-streak"
LAST_ACTIVE_KEY = "timeflow-last-active"


class KeyValueStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class MemoryStore:
    """In-process store, mostly useful for tests."""

    def __init__(self, initial: dict | None = None):
        self._data = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value


class JsonFileStore:
    """Store backed by a single JSON object on disk, written on every ``set``."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._data = self._read()

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as exc:
            raise ValueError(f"Store file {self.path} is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise ValueError(f"Store file {self.path} must hold a JSON object")
        return payload

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")


class StateRepository:
    """Explicit load/save of ``AppState`` on top of a key-value store."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def load(self) -> AppState:
        last_active = self.store.get(LAST_ACTIVE_KEY)
        try:
            last_active_date = date.fromisoformat(last_active) if last_active else None
        except Exception as exc:  # noqa: BLE001
            raise ValueError(f"'{LAST_ACTIVE_KEY}' holds a malformed date") from exc

        state = AppState(
            activities=parse_items("activities", self.store.get(ACTIVITIES_KEY, [])),
            todos=parse_items("todos", self.store.get(TODOS_KEY, [])),
            habits=parse_items("habits", self.store.get(HABITS_KEY, [])),
            health=parse_health(self.store.get(HEALTH_KEY)),
            goals=parse_items("goals", self.store.get(GOALS_KEY, [])),
            pomodoro_count=parse_count(self.store.get(POMODOROS_KEY, 0), "store", POMODOROS_KEY),
            focus_mode_count=parse_count(self.store.get(FOCUS_SESSIONS_KEY, 0), "store", FOCUS_SESSIONS_KEY),
            streak=parse_count(self.store.get(STREAK_KEY, 0), "store", STREAK_KEY),
            last_active_date=last_active_date,
        )
        logger.debug("Loaded state with %d activities", len(state.activities))
        return state

    def save(self, state: AppState) -> None:
        self.store.set(ACTIVITIES_KEY, to_payload(state.activities))
        self.store.set(TODOS_KEY, to_payload(state.todos))
        self.store.set(HABITS_KEY, to_payload(state.habits))
        self.store.set(HEALTH_KEY, to_payload(state.health))
        self.store.set(GOALS_KEY, to_payload(state.goals))
        self.store.set(POMODOROS_KEY, state.pomodoro_count)
        self.store.set(FOCUS_SESSIONS_KEY, state.focus_mode_count)
        self.store.set(STREAK_KEY, state.streak)
        self.store.set(LAST_ACTIVE_KEY, to_payload(state.last_active_date))
        logger.debug("Saved state with %d activities", len(state.activities))
