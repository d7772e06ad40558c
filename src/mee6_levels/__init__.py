from __future__ import annotations

from mee6_levels.mechanics.leveling import (
    MAX_XP,
    PRECISE_XP_LIMIT,
    level_for_xp,
    progress_percentage,
    total_xp_for_level,
    xp_for_level,
    xp_threshold,
)
from mee6_levels.models.level_info import LevelInfo, level_info

__all__ = [
    "MAX_XP",
    "PRECISE_XP_LIMIT",
    "LevelInfo",
    "level_info",
    "level_for_xp",
    "progress_percentage",
    "total_xp_for_level",
    "xp_for_level",
    "xp_threshold",
]
