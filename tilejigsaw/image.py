"""Stitch placed tile interiors into one pixel set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, Iterator, Tuple

import numpy as np

from .assembler import Board

Pixel = Tuple[int, int]

EMPTY = 0
SET = 1
MOTIF = 2


@dataclass(frozen=True)
class Image:
    """Set pixels of the assembled picture, addressed by global (x, y)."""

    pixels: FrozenSet[Pixel]
    interior_side: int
    origin: Pixel
    shape: Tuple[int, int]

    @classmethod
    def assemble(cls, board: Board) -> "Image":
        """Union every tile's interior, offset by its board position."""
        if not board.positions:
            raise ValueError("Cannot assemble an image from an empty board")
        side = next(iter(board.tiles.values())).interior_size

        pixels = set()
        for tile_id, (tx, ty) in board.positions.items():
            ys, xs = np.nonzero(board.tiles[tile_id].interior())
            for y, x in zip(ys.tolist(), xs.tolist()):
                pixels.add((tx * side + x, ty * side + y))

        min_x, min_y, _, _ = board.bounds()
        rows, cols = board.shape
        return cls(
            pixels=frozenset(pixels),
            interior_side=side,
            origin=(min_x * side, min_y * side),
            shape=(rows * side, cols * side),
        )

    def __len__(self) -> int:
        return len(self.pixels)

    def __contains__(self, pixel: object) -> bool:
        return pixel in self.pixels

    def __iter__(self) -> Iterator[Pixel]:
        return iter(self.pixels)

    @property
    def area(self) -> int:
        """Number of cells (set or not) covered by the board."""
        return self.shape[0] * self.shape[1]

    def to_array(self, covered: AbstractSet[Pixel] = frozenset()) -> np.ndarray:
        """Label canvas: EMPTY, SET, or MOTIF for pixels in `covered`."""
        canvas = np.full(self.shape, EMPTY, dtype=np.uint8)
        ox, oy = self.origin
        for x, y in self.pixels:
            canvas[y - oy, x - ox] = MOTIF if (x, y) in covered else SET
        return canvas

    def render(self, covered: AbstractSet[Pixel] = frozenset()) -> str:
        chars = {EMPTY: ".", SET: "#", MOTIF: "O"}
        canvas = self.to_array(covered)
        return "\n".join("".join(chars[int(v)] for v in row) for row in canvas)
