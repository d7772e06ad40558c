"""Leveling settings loaded from config.toml."""
from __future__ import annotations

import logging
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).parent.parent.parent / "config.toml"


class LevelingSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    strategy: Literal["linear", "closed_form"] = "closed_form"
    precise_xp_limit: int = Field(default=2**52, ge=0)


def load_settings(config_path: Path | None = None) -> LevelingSettings:
    """Read the [leveling] table of a config.toml, falling back to defaults."""
    path = config_path or CONFIG_PATH
    if not path.exists():
        logger.debug("No config at %s, using default leveling settings.", path)
        return LevelingSettings()

    with open(path, "rb") as f:
        data = tomllib.load(f)
    logger.debug("Loaded leveling settings from %s", path)
    return LevelingSettings.model_validate(data.get("leveling", {}))


@lru_cache(maxsize=1)
def get_settings() -> LevelingSettings:
    return load_settings()
