from __future__ import annotations

from typing import Any, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    model_validator,
)

from mee6_levels.mechanics import leveling
from mee6_levels.mechanics.leveling import MAX_XP, compute_progress, total_xp_for_level

_FIELDS = ("xp", "level", "percentage")
_INT = TypeAdapter(int)


class LevelInfo(BaseModel):
    """Level and progress derived from a cumulative XP count.

    Level and percentage are computed when the model is built, so reading
    them afterwards is free. Passing them in explicitly is allowed only if
    they agree with the XP. model_copy(update=...) re-runs the derivation, so
    copies obey the same rule.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    xp: int = Field(ge=0, le=MAX_XP)
    level: int = Field(default=0, ge=0)
    percentage: int = Field(default=0, ge=0, le=100)

    @model_validator(mode="before")
    @classmethod
    def _derive_progress(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            if not hasattr(data, "xp"):
                return data
            data = {name: getattr(data, name) for name in _FIELDS if hasattr(data, name)}
        if "xp" not in data:
            return data

        strategy = (info.context or {}).get("strategy")
        level, percentage = compute_progress(data["xp"], strategy)
        for name, derived in (("level", level), ("percentage", percentage)):
            given = data.get(name)
            if given is None:
                continue
            try:
                coerced = _INT.validate_python(given)
            except ValidationError:
                raise ValueError(f"Invalid {name}: {given!r}") from None
            if coerced != derived:
                raise ValueError(
                    f"{name}={given!r} does not match XP {data['xp']} (expected {derived})"
                )
        return {**data, "level": level, "percentage": percentage}

    @classmethod
    def from_xp(cls, xp: int, strategy: str | None = None) -> LevelInfo:
        return cls.model_validate({"xp": xp}, context={"strategy": strategy})

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> LevelInfo:
        if not update:
            return super().model_copy(deep=deep)
        # A new xp re-derives level and percentage unless they are given too.
        data = {"xp": self.xp} if "xp" in update else self.model_dump()
        return type(self).model_validate({**data, **update})

    # -- Derived values --

    @property
    def next_level_xp(self) -> int:
        """Cumulative XP at which the next level starts."""
        return total_xp_for_level(self.level + 1)

    @property
    def xp_into_level(self) -> int:
        return leveling.xp_into_level(self.xp, self.level)

    @property
    def xp_to_next_level(self) -> int:
        return leveling.xp_to_next_level(self.xp, self.level)

    # -- Ordering follows (xp, level, percentage) --

    def _sort_key(self) -> tuple[int, int, int]:
        return (self.xp, self.level, self.percentage)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LevelInfo):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LevelInfo):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LevelInfo):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LevelInfo):
            return NotImplemented
        return self._sort_key() >= other._sort_key()


def level_info(xp: int) -> LevelInfo:
    """Shortcut for LevelInfo.from_xp."""
    return LevelInfo.from_xp(xp)
