"""Square boolean tiles with cached edge values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

import numpy as np

from .edges import Direction, bits_to_int, format_edge, normalize


@dataclass(frozen=True, eq=False)
class Tile:
    """A square tile and its four raw edges, indexed by `Direction`.

    Top and bottom edges are read left to right, left and right edges top to
    bottom, so two tiles fit side by side exactly when their facing raw edges
    are equal. Transforms return a new tile; the grid is never mutated.
    """

    id: int
    grid: np.ndarray
    edges: Tuple[int, int, int, int]

    @classmethod
    def create(cls, tile_id: int, grid: np.ndarray) -> "Tile":
        """Create a tile and compute its 4 directional edges."""
        cells = np.array(grid, dtype=bool)
        if cells.ndim != 2 or cells.shape[0] != cells.shape[1]:
            raise ValueError(f"Tile {tile_id}: grid must be square, got shape {cells.shape}")
        if cells.shape[0] < 3:
            raise ValueError(f"Tile {tile_id}: grid must be at least 3x3 to have an interior")
        cells.setflags(write=False)
        edges = (
            bits_to_int(cells[0, :]),
            bits_to_int(cells[:, 0]),
            bits_to_int(cells[-1, :]),
            bits_to_int(cells[:, -1]),
        )
        return cls(id=int(tile_id), grid=cells, edges=edges)

    @property
    def size(self) -> int:
        return int(self.grid.shape[0])

    @property
    def interior_size(self) -> int:
        return self.size - 2

    def raw_edge(self, direction: Direction) -> int:
        return self.edges[direction]

    def signature(self, direction: Direction) -> int:
        """Canonical signature of one side."""
        return normalize(self.edges[direction], self.size)

    def canonical_signature_set(self) -> FrozenSet[int]:
        return frozenset(self.signature(d) for d in Direction)

    def shared_edge(self, other: "Tile") -> Optional[Direction]:
        """Return our first side whose signature `other` also exposes."""
        theirs = other.canonical_signature_set()
        for direction in Direction:
            if self.signature(direction) in theirs:
                return direction
        return None

    def rotate(self) -> "Tile":
        """Rotate 90 degrees clockwise; the top row becomes the right column."""
        return Tile.create(self.id, np.rot90(self.grid, k=-1))

    def flip_horizontal(self) -> "Tile":
        """Mirror across the vertical axis (left and right swap)."""
        return Tile.create(self.id, np.flip(self.grid, axis=1))

    def flip_vertical(self) -> "Tile":
        """Mirror across the horizontal axis (top and bottom swap)."""
        return Tile.create(self.id, np.flip(self.grid, axis=0))

    def orientations(self) -> List["Tile"]:
        """All 8 orientations: 4 rotations, then 4 rotations of the mirror."""
        result: List[Tile] = []
        for start in (self, self.flip_horizontal()):
            current = start
            for _ in range(4):
                result.append(current)
                current = current.rotate()
        return result

    def interior(self) -> np.ndarray:
        """Grid with the outer ring of border cells stripped."""
        return self.grid[1:-1, 1:-1]

    def render(self) -> str:
        return "\n".join("".join("#" if cell else "." for cell in row) for row in self.grid)

    def __repr__(self) -> str:
        sides = ", ".join(f"{d.name.lower()}={format_edge(self.edges[d], self.size)}" for d in Direction)
        return f"Tile({self.id}, {sides})"
