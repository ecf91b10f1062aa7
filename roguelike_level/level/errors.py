from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .model import LevelState


class LevelGenerationError(RuntimeError):
    """A build that cannot produce a valid level.

    ``which`` names the selection that failed (``"enter"``, ``"exit"`` or
    ``"door"``). ``state`` holds the grid and registries as they stood when
    the build stopped, for diagnostics only.
    """

    def __init__(self, message: str, which: str, state: Optional["LevelState"] = None):
        super().__init__(message)
        self.which = which
        self.state = state


__all__ = ["LevelGenerationError"]
