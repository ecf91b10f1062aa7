from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


class LevelConfigError(ValueError):
    """Raised when a configuration cannot produce a level."""


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _as_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        s = value.strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
    raise LevelConfigError(f"{name} must be a boolean (got {value!r})")


def _odd_ceil(n: int) -> int:
    return n if n % 2 else n + 1


def _odd_floor(n: int) -> int:
    return n if n % 2 else n - 1


@dataclass
class RoomConfig:
    min_width: int = 3
    max_width: int = 7
    min_height: int = 3
    max_height: int = 7
    ideal: int = 10


@dataclass
class LevelConfig:
    width: int = 21
    height: int = 21
    room: RoomConfig = field(default_factory=RoomConfig)
    retry: int = 10
    special: bool = False
    seed: Optional[int] = None
    enable_metrics: bool = True

    def __post_init__(self):
        if "LEVEL_ENABLE_METRICS" in os.environ:
            val = os.environ.get("LEVEL_ENABLE_METRICS", "").lower()
            self.enable_metrics = val not in {"0", "false", "no", ""}

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "LevelConfig":
        """Build a config from the nested ``{"width", "room": {...}, ...}`` shape.

        Missing or ``None`` values take the defaults; unknown keys are ignored.
        """
        data = data or {}
        room_data = data.get("room") or {}
        room_kwargs = {
            k: int(room_data[k])
            for k in ("min_width", "max_width", "min_height", "max_height", "ideal")
            if room_data.get(k) is not None
        }
        kwargs: dict[str, Any] = {"room": RoomConfig(**room_kwargs)}
        for k in ("width", "height", "retry", "seed"):
            if data.get(k) is not None:
                kwargs[k] = int(data[k])
        if data.get("special") is not None:
            kwargs["special"] = _as_bool("special", data["special"])
        if data.get("enable_metrics") is not None:
            kwargs["enable_metrics"] = _as_bool("enable_metrics", data["enable_metrics"])
        return cls(**kwargs)

    def validate(self) -> "LevelConfig":
        r = self.room
        for name, value in (
            ("width", self.width),
            ("height", self.height),
            ("room.ideal", r.ideal),
            ("retry", self.retry),
        ):
            if value < 1:
                raise LevelConfigError(f"{name} must be positive (got {value})")
        for axis, lo, hi, extent in (
            ("width", r.min_width, r.max_width, self.width),
            ("height", r.min_height, r.max_height, self.height),
        ):
            lo_odd, hi_odd = _odd_ceil(lo), _odd_floor(hi)
            if lo_odd < 3:
                raise LevelConfigError(f"room.min_{axis} must allow rooms at least 3 tiles wide (got {lo})")
            if lo_odd > hi_odd:
                raise LevelConfigError(f"room {axis} bounds {lo}..{hi} contain no odd value")
            # largest room plus a one-tile gap on both sides and a sliding step
            if extent < hi_odd + 3:
                raise LevelConfigError(f"grid {axis} {extent} too small for rooms up to {hi_odd} tiles")
        return self


__all__ = ["LevelConfig", "RoomConfig", "LevelConfigError"]
