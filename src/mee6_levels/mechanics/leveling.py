"""XP to level math — pure functions, no I/O.

Cumulative XP to reach a level follows the cubic
(5/6) * level * (2 * level^2 + 27 * level + 91). Levels are found by
inverting that curve in float arithmetic, so results are exact for XP
up to 2**52 and may drift by one level far beyond it.
"""
from __future__ import annotations

import logging
import math
from typing import Callable

from mee6_levels.config import get_settings

logger = logging.getLogger(__name__)

MAX_XP = 2**64 - 1
PRECISE_XP_LIMIT = 2**52


def xp_for_level(level: float) -> float:
    """Cumulative XP required to reach a level. Accepts real-valued levels."""
    return (5.0 / 6.0) * level * (2.0 * level * level + 27.0 * level + 91.0)


def xp_threshold(level: int) -> int:
    """Exact integer form of xp_for_level for whole levels.

    level * (2 * level^2 + 27 * level + 91) is always divisible by 6.
    """
    if level < 0:
        raise ValueError(f"Level cannot be negative: {level}")
    return 5 * level * (2 * level * level + 27 * level + 91) // 6


def total_xp_for_level(level: int) -> int:
    """Smallest whole XP count the level search places at level.

    The float curve can land a hair above the exact threshold (level 11 is
    5775.000000000001), in which case 5775 XP still reads as level 10.
    """
    if level < 0:
        raise ValueError(f"Level cannot be negative: {level}")
    return math.ceil(xp_for_level(level))


def validate_xp(xp: int) -> int:
    """Check an XP count is a non-negative 64-bit integer."""
    if isinstance(xp, bool) or not isinstance(xp, int):
        raise ValueError(f"XP must be an integer, got {type(xp).__name__}")
    if xp < 0:
        raise ValueError(f"XP cannot be negative: {xp}")
    if xp > MAX_XP:
        raise ValueError(f"XP exceeds the 64-bit range: {xp}")
    if xp > get_settings().precise_xp_limit:
        logger.warning("XP %d is beyond the precise range; level may be off by one.", xp)
    return xp


def _linear_level(xp: float) -> int:
    # Walk up until a threshold passes the XP; the level before it wins.
    level = 0
    threshold = 0.0
    while xp >= threshold:
        level += 1
        threshold = xp_for_level(level)
    return level - 1


def _closed_form_level(xp: float) -> int:
    # (5/3) * level^3 dominates, so the cube root overshoots by a few levels at most.
    level = int((0.6 * xp) ** (1.0 / 3.0))
    while level > 0 and xp_for_level(level) > xp:
        level -= 1
    while xp_for_level(level + 1) <= xp:
        level += 1
    return level


_STRATEGIES: dict[str, Callable[[float], int]] = {
    "linear": _linear_level,
    "closed_form": _closed_form_level,
}


def _pick_strategy(strategy: str | None) -> Callable[[float], int]:
    name = strategy or get_settings().strategy
    try:
        return _STRATEGIES[name]
    except KeyError:
        raise ValueError(f"Unknown leveling strategy: {name}") from None


def _percentage(xp: float, level: int) -> int:
    last = xp_for_level(level)
    nxt = xp_for_level(level + 1)
    pct = int((xp - last) / (nxt - last) * 100.0)
    if pct >= 100:
        logger.warning("Progress for XP %s at level %d rounded to %d%%, clamping to 99.", xp, level, pct)
        return 99
    return pct


def level_for_xp(xp: int, strategy: str | None = None) -> int:
    """Highest level whose threshold does not exceed xp."""
    xp = validate_xp(xp)
    return _pick_strategy(strategy)(float(xp))


def progress_percentage(xp: int, level: int) -> int:
    """Whole percent of the way from level's threshold to the next one."""
    xp = validate_xp(xp)
    if isinstance(level, bool) or not isinstance(level, int) or level < 0:
        raise ValueError(f"Invalid level: {level!r}")
    xp_f = float(xp)
    if not xp_for_level(level) <= xp_f < xp_for_level(level + 1):
        raise ValueError(f"XP {xp} does not belong to level {level}")
    return _percentage(xp_f, level)


def compute_progress(xp: int, strategy: str | None = None) -> tuple[int, int]:
    """Resolve (level, percentage) for an XP count in one pass."""
    xp = validate_xp(xp)
    xp_f = float(xp)
    level = _pick_strategy(strategy)(xp_f)
    return level, _percentage(xp_f, level)


def xp_into_level(xp: int, level: int) -> int:
    """XP earned since reaching level."""
    return xp - total_xp_for_level(level)


def xp_to_next_level(xp: int, level: int) -> int:
    """XP still needed to reach level + 1."""
    return total_xp_for_level(level + 1) - xp
