"""Consistency metrics for assembled boards."""

from __future__ import annotations

from dataclasses import dataclass

from .assembler import Board
from .edges import Direction
from .graph import PieceGraph


@dataclass
class EvaluationResult:
    """Container for board consistency metrics."""

    seam_accuracy: float
    placed_fraction: float
    is_rectangular: bool
    corner_positions_match: bool

    @property
    def is_consistent(self) -> bool:
        return (
            self.seam_accuracy == 1.0
            and self.placed_fraction == 1.0
            and self.is_rectangular
            and self.corner_positions_match
        )


class PlacementEvaluator:
    """Check a board against the piece graph it was assembled from."""

    def compute_seam_accuracy(self, board: Board, graph: PieceGraph) -> float:
        """Fraction of graph-adjacent pairs that sit side by side with equal facing edges."""
        correct = 0
        total = 0
        for tile_id, linked in graph.neighbors.items():
            for other_id in linked:
                if other_id < tile_id:
                    continue
                total += 1
                if tile_id not in board.positions or other_id not in board.positions:
                    continue
                (x1, y1), (x2, y2) = board.positions[tile_id], board.positions[other_id]
                try:
                    direction = Direction.from_vector((x2 - x1, y2 - y1))
                except ValueError:
                    continue
                ours = board.tiles[tile_id].raw_edge(direction)
                theirs = board.tiles[other_id].raw_edge(direction.opposite)
                if ours == theirs:
                    correct += 1
        return correct / total if total else 1.0

    def compute_placed_fraction(self, board: Board, graph: PieceGraph) -> float:
        placed = sum(1 for tile_id in graph.tiles if tile_id in board.positions)
        return placed / len(graph.tiles)

    def compute_is_rectangular(self, board: Board) -> bool:
        """True when the board fills its bounding box with no holes."""
        rows, cols = board.shape
        return len(set(board.positions.values())) == len(board) == rows * cols

    def compute_corner_positions_match(self, board: Board, graph: PieceGraph) -> bool:
        """Graph corners must occupy the four corners of the board.

        A single row or column has no degree-2 corners; its two end tiles
        must instead be the tiles with at most one neighbor.
        """
        grid = board.grid()
        if min(grid.shape) == 1:
            ends = {int(grid.flat[0]), int(grid.flat[-1])}
            return ends == {tid for tid, linked in graph.neighbors.items() if len(linked) <= 1}
        board_corners = {int(grid[0, 0]), int(grid[0, -1]), int(grid[-1, 0]), int(grid[-1, -1])}
        return board_corners == set(graph.corners())

    def evaluate(self, board: Board, graph: PieceGraph) -> EvaluationResult:
        """Calculate all consistency metrics for an assembled board."""
        return EvaluationResult(
            seam_accuracy=self.compute_seam_accuracy(board, graph),
            placed_fraction=self.compute_placed_fraction(board, graph),
            is_rectangular=self.compute_is_rectangular(board),
            corner_positions_match=self.compute_corner_positions_match(board, graph),
        )
