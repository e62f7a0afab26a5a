"""Place and orient tiles on an integer grid by exact edge matching."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, Optional, Tuple

import numpy as np

from .edges import Direction, format_edge
from .errors import AlignmentError, DisconnectedGraphError
from .graph import PieceGraph
from .tile import Tile

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

TRAVERSALS = ("bfs", "dfs")


@dataclass
class AssemblerConfig:
    """Configuration for the tile assembler."""

    start_tile: Optional[int] = None
    traversal: str = "bfs"


@dataclass
class Board:
    """Grid positions (in tile units) and final orientation of every tile."""

    positions: Dict[int, Position] = field(default_factory=dict)
    tiles: Dict[int, Tile] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.positions)

    def bounds(self) -> Tuple[int, int, int, int]:
        """Return (min_x, min_y, max_x, max_y) over all placed tiles."""
        xs = [x for x, _ in self.positions.values()]
        ys = [y for _, y in self.positions.values()]
        return min(xs), min(ys), max(xs), max(ys)

    @property
    def shape(self) -> Tuple[int, int]:
        """Board extent as (rows, cols)."""
        min_x, min_y, max_x, max_y = self.bounds()
        return max_y - min_y + 1, max_x - min_x + 1

    def grid(self) -> np.ndarray:
        """Tile ids laid out row-major from the top-left tile; empty cells are -1."""
        min_x, min_y, _, _ = self.bounds()
        grid = np.full(self.shape, -1, dtype=np.int64)
        for tile_id, (x, y) in self.positions.items():
            grid[y - min_y, x - min_x] = tile_id
        return grid

    def tile_at(self, position: Position) -> Optional[int]:
        for tile_id, placed in self.positions.items():
            if placed == position:
                return tile_id
        return None

    def neighbor(self, tile_id: int, direction: Direction) -> Optional[int]:
        """Id of the tile placed next to `tile_id` on the given side, if any."""
        x, y = self.positions[tile_id]
        dx, dy = direction.vector
        return self.tile_at((x + dx, y + dy))


class TileAssembler:
    """Grow a board outwards from one anchor tile through the piece graph."""

    def __init__(self, config: Optional[AssemblerConfig] = None) -> None:
        self.config = config if config is not None else AssemblerConfig()
        if self.config.traversal not in TRAVERSALS:
            raise ValueError(
                f"Unsupported traversal {self.config.traversal!r}; expected one of {TRAVERSALS}"
            )

    def assemble(self, graph: PieceGraph) -> Board:
        """Return a board where every tile is placed once and seams match exactly."""
        start = self._select_start_tile(graph)
        tiles: Dict[int, Tile] = dict(graph.tiles)
        positions: Dict[int, Position] = {start: (0, 0)}
        occupied: Dict[Position, int] = {(0, 0): start}

        frontier: Deque[Tuple[int, int]] = deque(
            (start, other) for other in sorted(graph.neighbors[start])
        )
        take = frontier.popleft if self.config.traversal == "bfs" else frontier.pop

        while frontier:
            anchor_id, tile_id = take()
            if tile_id in positions:
                continue

            oriented, direction = self.align(tiles[tile_id], tiles[anchor_id])
            ax, ay = positions[anchor_id]
            dx, dy = direction.vector
            position = (ax + dx, ay + dy)
            if position in occupied:
                raise AlignmentError(
                    f"Tile {tile_id} would land on {position}, already taken by tile "
                    f"{occupied[position]}",
                    tile_id=tile_id,
                    anchor_id=anchor_id,
                )

            tiles[tile_id] = oriented
            positions[tile_id] = position
            occupied[position] = tile_id
            logger.debug("Placed tile %d at %s, %s of tile %d", tile_id, position, direction.name, anchor_id)

            frontier.extend(
                (tile_id, other) for other in sorted(graph.neighbors[tile_id]) if other not in positions
            )

        unplaced = set(tiles) - set(positions)
        if unplaced:
            raise DisconnectedGraphError(start, unplaced)

        board = Board(positions=positions, tiles={tid: tiles[tid] for tid in positions})
        rows, cols = board.shape
        logger.info("Assembled %d tiles into a %dx%d board from tile %d", len(board), rows, cols, start)
        return board

    def align(self, tile: Tile, anchor: Tile) -> Tuple[Tile, Direction]:
        """Orient `tile` to sit against `anchor`.

        Returns the oriented tile and the side of `anchor` it attaches to.
        """
        anchor_dir = anchor.shared_edge(tile)
        if anchor_dir is None:
            raise AlignmentError(
                f"Tiles {anchor.id} and {tile.id} share no edge signature",
                tile_id=tile.id,
                anchor_id=anchor.id,
            )
        target = anchor_dir.opposite

        for _ in range(4):
            if tile.shared_edge(anchor) == target:
                break
            tile = tile.rotate()
        else:
            raise AlignmentError(
                f"No rotation of tile {tile.id} exposes its shared edge on the {target.name} "
                f"side facing tile {anchor.id}",
                tile_id=tile.id,
                anchor_id=anchor.id,
            )

        if tile.raw_edge(target) != anchor.raw_edge(anchor_dir):
            tile = tile.flip_horizontal() if target.is_vertical else tile.flip_vertical()

        ours = tile.raw_edge(target)
        theirs = anchor.raw_edge(anchor_dir)
        if ours != theirs:
            raise AlignmentError(
                f"Tile {tile.id} {target.name} edge {format_edge(ours, tile.size)} does not match "
                f"tile {anchor.id} {anchor_dir.name} edge {format_edge(theirs, anchor.size)} "
                f"after rotation and flip",
                tile_id=tile.id,
                anchor_id=anchor.id,
                tile_edge=ours,
                anchor_edge=theirs,
            )
        return tile, anchor_dir

    def _select_start_tile(self, graph: PieceGraph) -> int:
        """Use the configured tile, else the least-connected tile with the smallest id.

        For any board of at least 2x2 tiles that is the smallest corner id.
        """
        if self.config.start_tile is not None:
            if self.config.start_tile not in graph.tiles:
                raise ValueError(f"Start tile {self.config.start_tile} is not in the tile set")
            return self.config.start_tile
        return min(graph.tiles, key=lambda tid: (len(graph.neighbors[tid]), tid))
