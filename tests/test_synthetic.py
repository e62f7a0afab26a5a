"""End-to-end tests on generated puzzles with scrambled orientation."""

from __future__ import annotations

import numpy as np
import pytest

from tilejigsaw.assembler import AssemblerConfig, TileAssembler
from tilejigsaw.edges import Direction
from tilejigsaw.evaluator import PlacementEvaluator
from tilejigsaw.graph import PieceGraph
from tilejigsaw.image import Image
from tilejigsaw.motif import SEA_MONSTER, MotifScanner
from tilejigsaw.utils import (
    array_orientations,
    embed_motif,
    generate_puzzle,
    same_up_to_orientation,
    scramble_tiles,
)


def _run_case(rows: int, cols: int, tile_size: int, seed: int, traversal: str = "bfs"):
    puzzle = generate_puzzle(rows, cols, tile_size=tile_size, seed=seed)
    scrambled, _ = scramble_tiles(puzzle.tiles, seed=seed)
    graph = PieceGraph.build(scrambled)
    board = TileAssembler(AssemblerConfig(traversal=traversal)).assemble(graph)
    return puzzle, graph, board


def test_generated_neighbors_share_borders() -> None:
    """Generated tiles overlap by one cell with their neighbors."""
    puzzle = generate_puzzle(2, 3, tile_size=10, seed=5)
    tiles = {t.id: t for t in puzzle.tiles}
    left, right, below = tiles[1000], tiles[1001], tiles[1003]
    assert left.raw_edge(Direction.RIGHT) == right.raw_edge(Direction.LEFT)
    assert left.raw_edge(Direction.BOTTOM) == below.raw_edge(Direction.TOP)
    assert puzzle.picture.shape == (16, 24)


@pytest.mark.parametrize("rows, cols, tile_size", [(3, 3, 10), (2, 5, 10), (4, 4, 12)])
def test_scrambled_puzzle_reassembles(rows: int, cols: int, tile_size: int) -> None:
    """Scrambled tiles stitch back into the original picture up to orientation."""
    puzzle, graph, board = _run_case(rows, cols, tile_size, seed=11)
    assert sorted(board.shape) == sorted((rows, cols))
    assert PlacementEvaluator().evaluate(board, graph).is_consistent

    image = Image.assemble(board)
    assert image.area == rows * cols * (tile_size - 2) ** 2
    assert len(image) == int(puzzle.picture.sum())
    assert same_up_to_orientation(image.to_array().astype(bool), puzzle.picture)


def test_traversals_agree_on_generated_puzzle() -> None:
    """BFS and DFS build the same board."""
    _, _, bfs = _run_case(4, 4, 12, seed=3, traversal="bfs")
    _, _, dfs = _run_case(4, 4, 12, seed=3, traversal="dfs")
    assert bfs.positions == dfs.positions


def test_strip_puzzle_starts_at_an_end() -> None:
    """A single row is anchored on one of its two end tiles."""
    puzzle, graph, board = _run_case(1, 4, 10, seed=2)
    start = board.tile_at((0, 0))
    assert len(graph.neighbors[start]) == 1
    assert sorted(board.shape) == [1, 4]
    assert PlacementEvaluator().evaluate(board, graph).is_consistent
    assert same_up_to_orientation(Image.assemble(board).to_array().astype(bool), puzzle.picture)


def test_planted_monsters_are_found() -> None:
    """Monsters drawn into a blank picture are all found, whatever the scramble."""
    picture = np.zeros((24, 24), dtype=bool)
    picture = embed_motif(picture, SEA_MONSTER, [(1, 2), (3, 10), (0, 18)])
    puzzle = generate_puzzle(3, 3, tile_size=10, seed=8, picture=picture)
    for seed in range(4):
        scrambled, _ = scramble_tiles(puzzle.tiles, seed=seed)
        board = TileAssembler().assemble(PieceGraph.build(scrambled))
        result = MotifScanner().find(Image.assemble(board), SEA_MONSTER)
        assert result.count == 3
        assert result.uncovered_count == 0


def test_scramble_keeps_ids_and_signatures() -> None:
    """Scrambling only reorders and reorients."""
    puzzle = generate_puzzle(3, 3, tile_size=10, seed=4)
    scrambled, order = scramble_tiles(puzzle.tiles, seed=4)
    assert [t.id for t in scrambled] == [puzzle.tiles[int(i)].id for i in order]
    for original, moved in zip((puzzle.tiles[int(i)] for i in order), scrambled):
        assert original.canonical_signature_set() == moved.canonical_signature_set()


def test_generator_validation() -> None:
    """Bad sizes and impossible seams are reported."""
    with pytest.raises(ValueError, match="positive"):
        generate_puzzle(0, 3)
    with pytest.raises(ValueError, match="picture must have shape"):
        generate_puzzle(2, 2, tile_size=10, picture=np.zeros((5, 5), dtype=bool))
    with pytest.raises(ValueError, match="Could not draw unique seams"):
        generate_puzzle(6, 6, tile_size=4, max_attempts=3)
    with pytest.raises(ValueError, match="leaves the picture"):
        embed_motif(np.zeros((5, 5), dtype=bool), SEA_MONSTER, [(0, 0)])


def test_array_orientations_are_distinct() -> None:
    """An asymmetric array has 8 distinct orientations."""
    array = np.arange(6).reshape(2, 3)
    variants = array_orientations(array)
    assert len(variants) == 8
    assert len({(v.shape, v.tobytes()) for v in variants}) == 8
