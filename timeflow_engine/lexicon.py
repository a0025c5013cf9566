"""Category lexicon: trigger substrings, display metadata and weights."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    """Closed set of activity categories, in matching priority order."""

    TECHNICAL_EDUCATION = "Technical Education"
    LEARNING_SKILLS = "Learning & Skills"
    BUSINESS = "Business"
    FITNESS = "Fitness"
    EATING = "Eating"
    FAMILY = "Time with Family"
    LEISURE = "Leisure"
    BROWSING = "Browsing"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CategoryInfo:
    category: Category
    triggers: tuple[str, ...]
    color: str
    emoji: str
    weight: float


LEXICON: dict[Category, CategoryInfo] = {
    Category.TECHNICAL_EDUCATION: CategoryInfo(
        Category.TECHNICAL_EDUCATION,
        (
            "coding", "programming", "codecademy", "code", "python", "javascript",
            "algorithm", "software", "debug", "developer", "computer science",
            "leetcode", "tutorial", "technical",
        ),
        "#3B82F6",
        "💻",
        1.0,
    ),
    Category.LEARNING_SKILLS: CategoryInfo(
        Category.LEARNING_SKILLS,
        (
            "study", "learn", "course", "read", "research", "practice", "training",
            "skill", "book", "homework", "exam", "class", "lecture", "workshop",
        ),
        "#6366F1",
        "📚",
        0.9,
    ),
    Category.BUSINESS: CategoryInfo(
        Category.BUSINESS,
        (
            "work", "meeting", "project", "email", "client", "business", "planning",
            "presentation", "report", "office", "admin", "calls",
        ),
        "#0EA5E9",
        "💼",
        0.9,
    ),
    Category.FITNESS: CategoryInfo(
        Category.FITNESS,
        (
            "exercise", "workout", "gym", "run", "walk", "yoga", "sport", "fitness",
            "bike", "swim", "dance", "hike", "stretch", "cardio", "health",
        ),
        "#10B981",
        "💪",
        0.7,
    ),
    Category.EATING: CategoryInfo(
        Category.EATING,
        (
            "eat", "meal", "breakfast", "lunch", "dinner", "snack", "cook", "food",
            "restaurant", "kitchen", "recipe", "grocery",
        ),
        "#F59E0B",
        "🍽️",
        0.5,
    ),
    Category.FAMILY: CategoryInfo(
        Category.FAMILY,
        (
            "family", "parent", "child", "sibling", "mom", "dad", "mother", "father",
            "kids", "relatives", "together", "visit",
        ),
        "#EF4444",
        "👨‍👩‍👧‍👦",
        0.6,
    ),
    Category.LEISURE: CategoryInfo(
        Category.LEISURE,
        (
            "break", "rest", "relax", "nap", "sleep", "chill", "leisure", "free time",
            "pause", "entertainment", "game", "tv", "movie", "music",
        ),
        "#8B5CF6",
        "😌",
        0.3,
    ),
    Category.BROWSING: CategoryInfo(
        Category.BROWSING,
        (
            "browsing", "social media", "scrolling", "doomscroll", "youtube", "reddit",
            "instagram", "tiktok", "procrastinating", "idle", "wasting time",
        ),
        "#EC4899",
        "📱",
        0.1,
    ),
}

DEFAULT_INFO = CategoryInfo(Category.OTHER, (), "#6B7280", "📝", 0.4)

_BY_NAME = {category.value.lower(): category for category in Category}


def resolve_category(value) -> Category:
    """Map a category or category name to ``Category``; unknown names become OTHER."""

    if isinstance(value, Category):
        return value
    if not value:
        return Category.OTHER
    return _BY_NAME.get(str(value).strip().lower(), Category.OTHER)


def parse_category(value) -> Category:
    """Strict variant of ``resolve_category`` for configuration and input files."""

    if isinstance(value, Category):
        return value
    key = str(value).strip().lower()
    if key not in _BY_NAME:
        raise ValueError(f"Unknown category '{value}'")
    return _BY_NAME[key]


def category_info(category) -> CategoryInfo:
    return LEXICON.get(resolve_category(category), DEFAULT_INFO)


def category_color(category) -> str:
    return category_info(category).color


def category_emoji(category) -> str:
    return category_info(category).emoji


def category_weight(category) -> float:
    return category_info(category).weight
