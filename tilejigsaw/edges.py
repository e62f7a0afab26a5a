"""Edge directions and orientation-invariant edge signatures."""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple

import numpy as np


class Direction(IntEnum):
    """Tile sides, in the order their raw edges are stored."""

    TOP = 0
    LEFT = 1
    BOTTOM = 2
    RIGHT = 3

    @property
    def vector(self) -> Tuple[int, int]:
        """Unit step (dx, dy) towards this side; y grows downwards."""
        return _VECTORS[self]

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)

    @property
    def is_vertical(self) -> bool:
        """True for TOP/BOTTOM, whose step has no x component."""
        return self.vector[0] == 0

    @classmethod
    def from_vector(cls, vector: Tuple[int, int]) -> "Direction":
        for direction, step in _VECTORS.items():
            if step == tuple(vector):
                return direction
        raise ValueError(f"Not a unit direction vector: {vector}")


_VECTORS = {
    Direction.TOP: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.BOTTOM: (0, 1),
    Direction.RIGHT: (1, 0),
}


def bits_to_int(bits: np.ndarray) -> int:
    """Read a 1-D boolean array as an unsigned integer, first cell most significant."""
    value = 0
    for bit in np.ravel(bits):
        value = value << 1 | bool(bit)
    return value


def reverse_bits(value: int, width: int) -> int:
    """Reverse the low `width` bits of `value`."""
    if value < 0 or value >= 1 << width:
        raise ValueError(f"{value} does not fit in {width} bits")
    return int(format(value, f"0{width}b")[::-1], 2)


def normalize(value: int, width: int) -> int:
    """Return the canonical signature shared by an edge and its mirror image."""
    return min(value, reverse_bits(value, width))


def format_edge(value: int, width: int) -> str:
    return format(value, f"0{width}b")
