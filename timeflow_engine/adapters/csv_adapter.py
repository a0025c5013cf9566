"""CSV adapter for activity records."""

from __future__ import annotations

import csv
import logging
from datetime import datetime

from timeflow_engine.adapters.json_adapter import parse_flag
from timeflow_engine.categorizer import primary_category
from timeflow_engine.lexicon import parse_category
from timeflow_engine.schema import ActivityRecord

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = {"id", "name", "duration", "start_time"}


def _parse_timestamp(value: str, row_number: int, field: str) -> datetime:
    try:
        return datetime.fromisoformat(value.strip())
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Row {row_number}: malformed {field}") from exc


def _parse_row(row: dict, row_number: int) -> ActivityRecord:
    missing = sorted(field for field in _REQUIRED_FIELDS if not row.get(field))
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    try:
        duration = int(row["duration"])
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Row {row_number}: invalid duration") from exc
    if duration < 0:
        raise ValueError(f"Row {row_number}: negative duration")

    start_time = _parse_timestamp(row["start_time"], row_number, "start_time")
    end_raw = row.get("end_time")
    end_time = _parse_timestamp(end_raw, row_number, "end_time") if end_raw else None

    name = row["name"].strip()
    category_raw = row.get("category")
    try:
        category = parse_category(category_raw) if category_raw else primary_category(name)
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: {exc}") from exc

    description = row.get("description")
    return ActivityRecord(
        id=row["id"].strip(),
        name=name,
        duration=duration,
        start_time=start_time,
        end_time=end_time,
        category=category.value,
        description=description.strip() if description else None,
        is_active=parse_flag(row.get("is_active"), f"Row {row_number}", "is_active"),
    )


def parse(file_path: str) -> list[ActivityRecord]:
    """Parse CSV file into a list of activity records."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        activities: list[ActivityRecord] = []
        for row_number, row in enumerate(reader, start=2):
            activities.append(_parse_row(row, row_number))

    logger.debug("Parsed %d activities from %s", len(activities), file_path)
    return activities
