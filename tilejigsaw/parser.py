"""Parse blank-line separated tile blocks into tiles."""

from __future__ import annotations

import re
from typing import List

import numpy as np

from .errors import TileParseError
from .tile import Tile

_HEADER = re.compile(r"^Tile (\d+):$")
_BLOCK_SEPARATOR = re.compile(r"\n\s*\n")


def parse_tile(block: str) -> Tile:
    """Parse one `Tile <id>:` header followed by N rows of `#`/`.` cells."""
    lines = [line.rstrip() for line in block.strip().splitlines()]
    if not lines:
        raise TileParseError("empty tile block")

    match = _HEADER.match(lines[0].strip())
    if match is None:
        raise TileParseError(f"expected 'Tile <id>:' header, got {lines[0]!r}")
    tile_id = int(match.group(1))

    rows = lines[1:]
    size = len(rows)
    if size < 3:
        raise TileParseError(f"tile {tile_id}: expected at least 3 rows, got {size}")

    grid = np.zeros((size, size), dtype=bool)
    for y, row in enumerate(rows):
        if len(row) != size:
            raise TileParseError(
                f"tile {tile_id}: row {y} has {len(row)} cells, expected {size}"
            )
        for x, char in enumerate(row):
            if char not in "#.":
                raise TileParseError(f"tile {tile_id}: invalid character {char!r} at row {y}, column {x}")
            grid[y, x] = char == "#"
    return Tile.create(tile_id, grid)


def parse_tiles(text: str) -> List[Tile]:
    """Parse every tile block in `text`, rejecting duplicate ids and mixed sizes."""
    blocks = [block for block in _BLOCK_SEPARATOR.split(text.strip()) if block.strip()]
    if not blocks:
        raise TileParseError("no tile blocks found")

    tiles = [parse_tile(block) for block in blocks]
    seen = set()
    for tile in tiles:
        if tile.id in seen:
            raise TileParseError(f"duplicate tile id {tile.id}")
        seen.add(tile.id)

    sizes = {tile.size for tile in tiles}
    if len(sizes) != 1:
        raise TileParseError(f"tiles must all share one size, got sizes {sorted(sizes)}")
    return tiles
