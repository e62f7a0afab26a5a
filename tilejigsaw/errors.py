"""Exceptions raised by tile parsing, assembly and motif search."""

from __future__ import annotations

from typing import Iterable, Optional


class TileParseError(ValueError):
    """A tile block is malformed (bad header, dimensions or characters)."""


class JigsawError(RuntimeError):
    """Base class for fatal conditions found while solving a puzzle."""


class GraphInconsistencyError(JigsawError):
    """An edge signature is claimed by more tiles than a seam can join."""

    def __init__(self, signature: int, tile_ids: Iterable[int], width: int) -> None:
        self.signature = signature
        self.tile_ids = tuple(sorted(tile_ids))
        super().__init__(
            f"Edge signature {signature:0{width}b} is shared by {len(self.tile_ids)} tiles "
            f"{list(self.tile_ids)}; expected 1 or 2"
        )


class AlignmentError(JigsawError):
    """A tile could not be oriented to match its already-placed neighbor."""

    def __init__(
        self,
        message: str,
        tile_id: int,
        anchor_id: int,
        tile_edge: Optional[int] = None,
        anchor_edge: Optional[int] = None,
    ) -> None:
        self.tile_id = tile_id
        self.anchor_id = anchor_id
        self.tile_edge = tile_edge
        self.anchor_edge = anchor_edge
        super().__init__(message)


class DisconnectedGraphError(JigsawError):
    """Some tiles cannot be reached from the starting tile."""

    def __init__(self, start_id: int, unplaced: Iterable[int]) -> None:
        self.start_id = start_id
        self.unplaced = tuple(sorted(unplaced))
        super().__init__(
            f"{len(self.unplaced)} tile(s) unreachable from tile {start_id}: {list(self.unplaced)}"
        )


class MotifNotFoundError(JigsawError):
    """No orientation of the motif appears in the image."""
