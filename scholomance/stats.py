"""Stat calculation: race base plus class bonus."""

from scholomance.constants import BASE_STATS, CLASS_BONUSES, DEFAULT_BASE_STATS, STAT_KEYS
from scholomance.models import Stats


def calculate_stats(race: str, class_type: str) -> Stats:
    """Return base[race] + bonus[class_type], component-wise.

    Unknown races fall back to a flat base of 5; unknown classes add nothing.
    Never raises.
    """
    base = BASE_STATS.get(race, DEFAULT_BASE_STATS)
    bonus = CLASS_BONUSES.get(class_type, {})
    return Stats(**{key: base[key] + bonus.get(key, 0) for key in STAT_KEYS})
