"""Pipeline orchestration for level generation.

A build runs a fixed, ordered list of phases over one ``LevelState``:

    init_grid -> place_starter -> place_rooms -> build_walls -> finish

Each phase only reads what earlier phases committed, so tests can stop the
pipeline after any phase and inspect the state. The finishing phase reports
a failed entrance/exit selection as a value; ``generate_level`` turns that
into ``LevelGenerationError`` for callers that only want a finished level.
"""

from __future__ import annotations

import copy
import time
from dataclasses import dataclass, replace
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from ..logging_utils import get_logger
from .config import LevelConfig
from .errors import LevelGenerationError
from .finisher import FinishOutcome, SelectionFailure, finish_level
from .metrics import init_metrics
from .model import LevelState, create_void
from .placement import add_starter_room, generate_rooms
from .result import DoorRecord, LevelResult, RoomRecord
from .rng import LevelRandom
from .walls import build_walls

log = get_logger("level.pipeline")

PHASES = ("init_grid", "place_starter", "place_rooms", "build_walls", "finish")


@dataclass
class BuildOutcome:
    state: LevelState
    level: Optional[LevelResult] = None
    failure: Optional[SelectionFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


class LevelBuilder:
    def __init__(self, config: Union[LevelConfig, Mapping[str, Any], None] = None, rng: Optional[LevelRandom] = None):
        if not isinstance(config, LevelConfig):
            config = LevelConfig.from_mapping(config)
        self.config = config.validate()
        # An injected generator wins over the configured seed
        self.rng = rng if rng is not None else LevelRandom(self.config.seed)
        self.state = LevelState(width=self.config.width, height=self.config.height)
        if self.config.enable_metrics:
            self.state.metrics = init_metrics()
        self._finish: Optional[FinishOutcome] = None
        self.completed: List[str] = []

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------
    def init_grid(self):
        self.state.world = create_void(self.state.width, self.state.height)

    def place_starter(self):
        add_starter_room(self.state, self.config, self.rng)

    def place_rooms(self):
        remaining = generate_rooms(self.state, self.config, self.rng)
        if self.state.metrics:
            self.state.metrics["retries_remaining"] = remaining
            self.state.metrics["rooms_placed"] = len(self.state.rooms)
            self.state.metrics["doors_created"] = len(self.state.doors)

    def build_walls(self):
        build_walls(self.state)
        if self.state.metrics:
            self.state.metrics["walls"] = len(self.state.walls)

    def finish(self):
        self._finish = finish_level(self.state, self.rng, self.config.special)
        if self.state.metrics:
            self.state.metrics["deadends"] = sum(1 for r in self.state.rooms if r.deadend)

    def phases(self) -> List[Tuple[str, Callable[[], None]]]:
        return [(name, getattr(self, name)) for name in PHASES]

    # ------------------------------------------------------------------
    def run_until(self, last_phase: str) -> LevelState:
        """Run phases in order up to and including ``last_phase``."""
        if last_phase not in PHASES:
            raise ValueError(f"unknown phase {last_phase!r}")
        timed = bool(self.state.metrics)
        phase_times = self.state.metrics.setdefault("phase_ms", {}) if timed else {}
        for name, fn in self.phases():
            if name in self.completed:
                continue
            ps = time.perf_counter()
            fn()
            if timed:
                phase_times[name] = int((time.perf_counter() - ps) * 1000)
            self.completed.append(name)
            if name == last_phase:
                break
        return self.state

    def build(self) -> BuildOutcome:
        start = time.perf_counter()
        try:
            self.run_until(PHASES[-1])
        except LevelGenerationError as exc:
            return BuildOutcome(self.state, failure=SelectionFailure(exc.which, str(exc)))
        if self.state.metrics:
            self.state.metrics["runtime_ms"] = int((time.perf_counter() - start) * 1000)
        outcome = self._finish
        if not outcome.ok:
            return BuildOutcome(self.state, failure=outcome.failure)
        return BuildOutcome(self.state, level=self._snapshot(outcome))

    def _snapshot(self, outcome: FinishOutcome) -> LevelResult:
        state = self.state
        return LevelResult(
            width=state.width,
            height=state.height,
            seed=self.rng.seed,
            enter=outcome.enter,
            exit=outcome.exit,
            special=outcome.special,
            rooms=tuple(RoomRecord.from_room(r) for r in state.rooms),
            doors=tuple(DoorRecord.from_door(d) for d in state.doors),
            walls=tuple(state.walls),
            deadends=tuple(outcome.deadends),
            world=tuple(tuple(row) for row in state.world),
            metrics=copy.deepcopy(state.metrics),
        )


def generate_level(
    config: Union[LevelConfig, Mapping[str, Any], None] = None,
    *,
    seed: Optional[int] = None,
    rng: Optional[LevelRandom] = None,
) -> LevelResult:
    """Build one level or raise ``LevelGenerationError``."""
    if not isinstance(config, LevelConfig):
        config = LevelConfig.from_mapping(config)
    if seed is not None:
        config = replace(config, seed=seed)
    builder = LevelBuilder(config, rng=rng)
    outcome = builder.build()
    if not outcome.ok:
        log.warn(
            event="level_generation_failed",
            seed=builder.rng.seed,
            which=outcome.failure.which,
            rooms=len(outcome.state.rooms),
        )
        raise LevelGenerationError(outcome.failure.message, which=outcome.failure.which, state=outcome.state)
    level = outcome.level
    log.debug(
        event="level_generated",
        seed=level.seed,
        rooms=level.room_count,
        doors=level.door_count,
        deadends=len(level.deadends),
        special=level.special is not None,
    )
    return level


__all__ = ["PHASES", "BuildOutcome", "LevelBuilder", "generate_level"]
