"""Adjacency between tiles derived from shared edge signatures."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Set

from .errors import GraphInconsistencyError
from .tile import Tile

logger = logging.getLogger(__name__)


class TileKind(Enum):
    """Where a tile sits in the finished image, judged by its neighbor count."""

    CORNER = 2
    EDGE = 3
    INTERIOR = 4


@dataclass
class PieceGraph:
    """Signature index and neighbor sets for a full tile set."""

    tiles: Dict[int, Tile]
    edges: Dict[int, Set[int]]
    neighbors: Dict[int, Set[int]]
    tile_size: int

    @classmethod
    def build(cls, tiles: Iterable[Tile]) -> "PieceGraph":
        """Index every canonical signature and derive neighbor sets."""
        by_id: Dict[int, Tile] = {}
        for tile in tiles:
            if tile.id in by_id:
                raise ValueError(f"Duplicate tile id {tile.id}")
            by_id[tile.id] = tile
        if not by_id:
            raise ValueError("Cannot build a piece graph from zero tiles")

        sizes = {tile.size for tile in by_id.values()}
        if len(sizes) != 1:
            raise ValueError(f"All tiles must share one size, got {sorted(sizes)}")
        tile_size = sizes.pop()

        edges: Dict[int, Set[int]] = {}
        for tile in by_id.values():
            for sig in tile.canonical_signature_set():
                edges.setdefault(sig, set()).add(tile.id)

        for sig in sorted(edges):
            if len(edges[sig]) > 2:
                raise GraphInconsistencyError(sig, edges[sig], tile_size)

        neighbors: Dict[int, Set[int]] = {}
        for tile in by_id.values():
            linked: Set[int] = set()
            for sig in tile.canonical_signature_set():
                linked |= edges[sig]
            linked.discard(tile.id)
            neighbors[tile.id] = linked

        graph = cls(tiles=by_id, edges=edges, neighbors=neighbors, tile_size=tile_size)
        logger.debug(
            "Built piece graph: %d tiles, %d shared and %d border signatures",
            len(by_id),
            len(graph.shared_signatures()),
            len(graph.border_signatures()),
        )
        return graph

    def __len__(self) -> int:
        return len(self.tiles)

    def _with_degree(self, degree: int) -> List[int]:
        return sorted(tid for tid, linked in self.neighbors.items() if len(linked) == degree)

    def corners(self) -> List[int]:
        """Tiles touching exactly 2 others, in ascending id order."""
        return self._with_degree(TileKind.CORNER.value)

    def edge_tiles(self) -> List[int]:
        return self._with_degree(TileKind.EDGE.value)

    def interior_tiles(self) -> List[int]:
        return self._with_degree(TileKind.INTERIOR.value)

    def classify(self, tile_id: int) -> TileKind:
        degree = len(self.neighbors[tile_id])
        try:
            return TileKind(degree)
        except ValueError:
            raise ValueError(f"Tile {tile_id} has {degree} neighbors; cannot classify") from None

    def corner_product(self) -> int:
        return math.prod(self.corners())

    def border_signatures(self) -> Set[int]:
        """Signatures exposed by one tile only, i.e. on the outer border."""
        return {sig for sig, owners in self.edges.items() if len(owners) == 1}

    def shared_signatures(self) -> Set[int]:
        return {sig for sig, owners in self.edges.items() if len(owners) == 2}
