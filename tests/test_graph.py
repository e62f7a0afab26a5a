"""Tests for piece graph construction and classification."""

from __future__ import annotations

import math
from pathlib import Path

import numpy as np
import pytest

from tilejigsaw.errors import GraphInconsistencyError
from tilejigsaw.graph import PieceGraph, TileKind
from tilejigsaw.tile import Tile
from tilejigsaw.utils import load_tiles, scramble_tiles

ROOT = Path(__file__).resolve().parents[1]
EXAMPLE_TILES = ROOT / "examples" / "example_tiles.txt"


def _example_graph() -> PieceGraph:
    return PieceGraph.build(load_tiles(EXAMPLE_TILES))


def test_example_corners_and_product() -> None:
    """The example has four corners with a known id product."""
    graph = _example_graph()
    assert set(graph.corners()) == {1951, 3079, 2971, 1171}
    assert graph.corners() == sorted(graph.corners())
    assert graph.corner_product() == 20899048083289
    assert math.prod(graph.corners()) == 20899048083289


def test_example_classification() -> None:
    """A 3x3 board has 4 corners, 4 edge tiles and 1 interior tile."""
    graph = _example_graph()
    assert len(graph.edge_tiles()) == 4
    assert graph.interior_tiles() == [1427]
    assert graph.classify(1427) is TileKind.INTERIOR
    assert graph.classify(1951) is TileKind.CORNER
    assert graph.classify(2311) is TileKind.EDGE


def test_example_signature_counts() -> None:
    """12 internal seams are shared; the 12 outer sides are not."""
    graph = _example_graph()
    assert len(graph.shared_signatures()) == 12
    assert len(graph.border_signatures()) == 12
    for owners in graph.edges.values():
        assert 1 <= len(owners) <= 2


def test_neighbors_are_symmetric_and_exclude_self() -> None:
    """Adjacency is mutual and never includes the tile itself."""
    graph = _example_graph()
    for tile_id, linked in graph.neighbors.items():
        assert tile_id not in linked
        for other in linked:
            assert tile_id in graph.neighbors[other]


def test_corners_do_not_depend_on_orientation() -> None:
    """Scrambling orientation and order leaves the graph unchanged."""
    scrambled, _ = scramble_tiles(load_tiles(EXAMPLE_TILES), seed=3)
    graph = PieceGraph.build(scrambled)
    assert graph.neighbors == _example_graph().neighbors


def test_signature_shared_by_three_tiles_is_fatal() -> None:
    """More than two owners of one signature cannot form a seam."""
    grid = np.array([[1, 1, 0], [0, 0, 0], [1, 0, 0]], dtype=bool)
    tiles = [Tile.create(i, grid) for i in (3, 1, 2)]
    with pytest.raises(GraphInconsistencyError, match="shared by 3 tiles") as info:
        PieceGraph.build(tiles)
    assert info.value.tile_ids == (1, 2, 3)


def test_build_rejects_bad_input() -> None:
    """Duplicate ids, mixed sizes and empty input are rejected."""
    tile = Tile.create(1, np.eye(3, dtype=bool))
    with pytest.raises(ValueError, match="Duplicate"):
        PieceGraph.build([tile, tile])
    with pytest.raises(ValueError, match="one size"):
        PieceGraph.build([tile, Tile.create(2, np.eye(4, dtype=bool))])
    with pytest.raises(ValueError, match="zero tiles"):
        PieceGraph.build([])
