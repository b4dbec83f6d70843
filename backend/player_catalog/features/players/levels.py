"""Level progression formula.

Reaching level ``n`` costs ``50 * n * (n + 1)`` experience in total, so the
level for a given experience counter is the largest ``n`` satisfying that
bound, computed in closed form.
"""

import math


def calculate_level(experience: int) -> int:
    """Return the level reached with ``experience`` points.

    The square root is taken in floating point and the result is truncated
    toward zero, never rounded.
    """
    return int((math.sqrt(2500 + 200 * experience) - 50) / 100)


def experience_until_next_level(experience: int, level: int) -> int:
    """Return the points still needed to go from ``level`` to ``level + 1``."""
    return 50 * (level + 1) * (level + 2) - experience


def calculate_level_fields(experience: int) -> tuple[int, int]:
    """Return ``(level, until_next_level)`` for ``experience``."""
    level = calculate_level(experience)
    return level, experience_until_next_level(experience, level)
