"""Per-build random source.

Every draw made while building one level goes through a single
``LevelRandom`` so that a seed fully determines the output. Nothing here
touches the module-level ``random`` state.
"""

from __future__ import annotations

import random
from typing import MutableSequence, Optional


class LevelRandom:
    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = random.SystemRandom().randint(0, 2**31 - 1)
        self.seed = seed
        self._rng = random.Random(seed)

    def uniform_int(self, lo: int, hi: int) -> int:
        """Pick an integer between lo and hi, inclusive."""
        return self._rng.randint(lo, hi)

    def uniform_odd_int(self, lo: int, hi: int) -> int:
        """Pick an odd integer between lo and hi, inclusive.

        e.g. 2, 9 => 3, 5, 7 or 9. The odd values are mapped onto a
        contiguous range (k -> 2k + 1), drawn there, and mapped back.
        """
        if lo % 2 == 0:
            lo += 1
        if hi % 2 == 0:
            hi -= 1
        if lo > hi:
            raise ValueError(f"no odd integer in range [{lo}, {hi}]")
        return self._rng.randint((lo - 1) // 2, (hi - 1) // 2) * 2 + 1

    def shuffle(self, seq: MutableSequence) -> None:
        self._rng.shuffle(seq)


__all__ = ["LevelRandom"]
