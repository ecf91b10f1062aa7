"""Structured event logging for generation runs.

Every record is one line: ``level=<lvl> ts=<epoch> key=value ...`` or, with
``ROGUELIKE_LOG_JSON=1``, a compact JSON object. Batch runs (the CLI and
``scripts/diagnose_seeds.py``) print thousands of these, so the format stays
grep- and ``jq``-friendly.

    from roguelike_level.logging_utils import get_logger
    log = get_logger("level.pipeline")
    log.info(event="level_generated", seed=42, rooms=9)

Values are rendered for the level domain: enums by value, ``(x, y)`` pairs
as ``x,y`` and spaces replaced with ``_``. ``None`` fields are dropped.
"""

from __future__ import annotations

import json
import os
import sys
import time
from enum import Enum
from typing import Any, Optional

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}

_settings = {
    "threshold": LEVELS.get(os.getenv("ROGUELIKE_LOG_LEVEL", "info").lower(), 20),
    "json": os.getenv("ROGUELIKE_LOG_JSON", "0").lower() in ("1", "true", "yes", "on"),
}


def configure(level: Optional[str] = None, json_mode: Optional[bool] = None) -> None:
    """Override the environment settings, e.g. for ``--verbose`` style flags or tests."""
    if level is not None:
        _settings["threshold"] = LEVELS[level]
    if json_mode is not None:
        _settings["json"] = json_mode


def _render(value: Any):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple) and len(value) == 2 and all(isinstance(v, int) for v in value):
        return f"{value[0]},{value[1]}"
    return value


def _format(level: str, fields: dict) -> str:
    ts = int(time.time())
    if _settings["json"]:
        rec = {k: _render(v) for k, v in fields.items() if v is not None}
        rec.update(level=level, ts=ts)
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={ts}"]
    for k, v in fields.items():
        if v is None:
            continue
        v = _render(v)
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            v = str(v).replace(" ", "_")
        parts.append(f"{k}={v}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str):
        self.name = name

    def _emit(self, level: str, fields: dict) -> None:
        if LEVELS[level] < _settings["threshold"]:
            return
        fields.setdefault("logger", self.name)
        stream = sys.stderr if level == "error" else sys.stdout
        print(_format(level, fields), file=stream)

    def debug(self, **fields):
        self._emit("debug", fields)

    def info(self, **fields):
        self._emit("info", fields)

    def warn(self, **fields):
        self._emit("warn", fields)

    def error(self, **fields):
        self._emit("error", fields)


_loggers: dict = {}


def get_logger(name: str) -> _Logger:
    return _loggers.setdefault(name, _Logger(name))


log = get_logger("roguelike_level")
