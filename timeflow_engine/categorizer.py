"""Keyword-based activity categorizer."""

from __future__ import annotations

import logging

from timeflow_engine.lexicon import LEXICON, Category
from timeflow_engine.schema import ActivityRecord

logger = logging.getLogger(__name__)


def categorize(activity_name: str | None) -> list[Category]:
    """Return every category whose triggers occur in the name, in priority order.

    Matching is case-insensitive literal substring containment. Names that
    match nothing (including empty names) yield ``[Category.OTHER]``.
    """

    normalized = (activity_name or "").lower()
    matches = []
    if normalized.strip():
        for category, info in LEXICON.items():
            if any(trigger in normalized for trigger in info.triggers):
                matches.append(category)

    if not matches:
        logger.debug("No category matched %r, using %s", activity_name, Category.OTHER.value)
        return [Category.OTHER]
    return matches


def primary_category(activity_name: str | None) -> Category:
    return categorize(activity_name)[0]


def activity_categories(activity: ActivityRecord) -> list[Category]:
    """Categories of a recorded activity, re-derived from its name."""

    return categorize(activity.name)
