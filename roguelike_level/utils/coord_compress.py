"""Compact encoding of coordinate lists for JSON responses.

Format strategy:
  - Input: sequence of ``(x, y)`` integer pairs (order is not preserved).
  - Coordinates are sorted, then x and y are delta-encoded separately.
  - Output is prefixed with ``D:`` so decoders can tell it from a raw list.

Compressed grammar:
  D:x0,y0|dx1,dy1|dx2,dy2|...

An empty input encodes to ``"D:"``.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple


def encode_coords(coords: Iterable[Tuple[int, int]]) -> str:
    """Return the ``D:`` delta encoding of ``coords`` (sorted)."""
    pieces = []
    prev = None
    for x, y in sorted(coords):
        if prev is None:
            pieces.append(f"{x},{y}")
        else:
            pieces.append(f"{x - prev[0]},{y - prev[1]}")
        prev = (x, y)
    return "D:" + "|".join(pieces)


def decode_coords(data: str) -> List[Tuple[int, int]]:
    """Inverse of :func:`encode_coords`.

    Raises:
        ValueError: if ``data`` lacks the ``D:`` prefix or a token is malformed.
    """
    if not data.startswith("D:"):
        raise ValueError("not a delta-encoded coordinate list")
    body = data[2:]
    if not body:
        return []
    coords = []
    prev = None
    for token in body.split("|"):
        x_s, y_s = token.split(",")
        dx, dy = int(x_s), int(y_s)
        if prev is None:
            cur = (dx, dy)
        else:
            cur = (prev[0] + dx, prev[1] + dy)
        coords.append(cur)
        prev = cur
    return coords


__all__ = ["encode_coords", "decode_coords"]
