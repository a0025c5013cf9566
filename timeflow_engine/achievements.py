"""Achievement tiers and next-achievement hints from usage counters."""

from __future__ import annotations

# (kind, pro threshold, pro title, master threshold, master title)
_TIERS = {
    "timers": (25, "⏰ Timer Pro", 50, "🎯 Timer Master"),
    "pomodoros": (15, "🍅 Pomodoro Pro", 30, "🍅 Pomodoro Master"),
    "focus": (10, "⚡ Focus Champion", 20, "⚡ Focus Master"),
    "goals": (5, "🏆 Goal Achiever", 10, "🏆 Goal Master"),
}

_HINTS = {
    "timers": ("🎯 Set {n} more timers for {title}", "Timer Pro", "Timer Master"),
    "pomodoros": ("🍅 Complete {n} more pomodoros for {title}", "Pomodoro Pro", "Pomodoro Master"),
    "focus": ("⚡ Use focus mode {n} more times for {title}", "Focus Champion", "Focus Master"),
    "goals": ("🏆 Complete {n} more goals for {title}", "Goal Achiever", "Goal Master"),
}


def achievement(kind: str, count: int) -> str | None:
    """Highest tier earned for ``kind``, or None below the first tier."""

    if kind not in _TIERS:
        raise ValueError(f"Unknown achievement kind '{kind}'")
    pro_at, pro_title, master_at, master_title = _TIERS[kind]
    if count >= master_at:
        return master_title
    if count >= pro_at:
        return pro_title
    return None


def next_achievement(kind: str, count: int) -> str | None:
    """Hint for the next tier of ``kind``; None once the top tier is earned."""

    if kind not in _HINTS:
        raise ValueError(f"Unknown achievement kind '{kind}'")
    template, pro_title, master_title = _HINTS[kind]
    pro_at, _, master_at, _ = _TIERS[kind]
    if count < pro_at:
        return template.format(n=pro_at - count, title=pro_title)
    if count < master_at:
        return template.format(n=master_at - count, title=master_title)
    return None


def _counts(timer_count: int, pomodoro_count: int, focus_mode_count: int, goals_completed: int) -> dict:
    return {
        "timers": timer_count,
        "pomodoros": pomodoro_count,
        "focus": focus_mode_count,
        "goals": goals_completed,
    }


def achievements(timer_count: int, pomodoro_count: int, focus_mode_count: int, goals_completed: int) -> list[str]:
    counts = _counts(timer_count, pomodoro_count, focus_mode_count, goals_completed)
    earned = (achievement(kind, count) for kind, count in counts.items())
    return [title for title in earned if title]


def next_achievements(
    timer_count: int, pomodoro_count: int, focus_mode_count: int, goals_completed: int
) -> list[str]:
    counts = _counts(timer_count, pomodoro_count, focus_mode_count, goals_completed)
    hints = (next_achievement(kind, count) for kind, count in counts.items())
    return [hint for hint in hints if hint]
