"""Utility helpers for reproducible tile puzzle experiments."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import numpy as np

from .edges import reverse_bits
from .motif import Motif
from .parser import parse_tiles
from .tile import Tile

PALETTE = np.array(
    [
        [20, 40, 80],  # empty water
        [90, 170, 220],  # set pixel
        [40, 200, 90],  # motif pixel
    ],
    dtype=np.uint8,
)


@dataclass
class SyntheticPuzzle:
    """Tiles cut from a random canvas, plus the picture they should stitch into."""

    tiles: List[Tile]
    picture: np.ndarray
    rows: int
    cols: int
    attempts: int


def set_random_seed(seed: int = 42) -> np.random.Generator:
    """Create a deterministic numpy random generator."""
    return np.random.default_rng(seed)


def load_tiles(path: Union[str, Path]) -> List[Tile]:
    """Read and parse a tile file."""
    return parse_tiles(Path(path).read_text())


def array_orientations(array: np.ndarray) -> List[np.ndarray]:
    """The 8 rotations and mirrors of a 2-D array."""
    variants: List[np.ndarray] = []
    for start in (array, np.fliplr(array)):
        for k in range(4):
            variants.append(np.rot90(start, k=k))
    return variants


def same_up_to_orientation(a: np.ndarray, b: np.ndarray) -> bool:
    return any(np.array_equal(a, variant) for variant in array_orientations(b))


def embed_motif(picture: np.ndarray, motif: Motif, anchors: List[Tuple[int, int]]) -> np.ndarray:
    """Return a copy of `picture` with the motif's bounding box placed at each (x, y)."""
    out = picture.astype(bool).copy()
    height, width = out.shape
    min_dx = min(dx for dx, _ in motif.offsets)
    min_dy = min(dy for _, dy in motif.offsets)
    for ax, ay in anchors:
        for dx, dy in motif.offsets:
            x, y = ax + dx - min_dx, ay + dy - min_dy
            if not (0 <= x < width and 0 <= y < height):
                raise ValueError(f"Motif at anchor {(ax, ay)} leaves the picture at {(x, y)}")
            out[y, x] = True
    return out


def _cut_tiles(canvas: np.ndarray, rows: int, cols: int, tile_size: int, first_id: int) -> List[Tile]:
    step = tile_size - 1
    tiles: List[Tile] = []
    for r in range(rows):
        for c in range(cols):
            block = canvas[r * step : r * step + tile_size, c * step : c * step + tile_size]
            tiles.append(Tile.create(first_id + r * cols + c, block))
    return tiles


def _has_unique_seams(tiles: List[Tile], rows: int, cols: int) -> bool:
    """True when only physical seams share a signature and no seam is a palindrome."""
    width = tiles[0].size
    counts: Dict[int, int] = {}
    for tile in tiles:
        sigs = tile.canonical_signature_set()
        if len(sigs) != 4:
            return False
        for sig in sigs:
            counts[sig] = counts.get(sig, 0) + 1

    seams = rows * (cols - 1) + cols * (rows - 1)
    shared = [sig for sig, count in counts.items() if count == 2]
    if any(count > 2 for count in counts.values()) or len(shared) != seams:
        return False
    return all(reverse_bits(sig, width) != sig for sig in shared)


def generate_puzzle(
    rows: int,
    cols: int,
    tile_size: int = 10,
    seed: int = 42,
    picture: Optional[np.ndarray] = None,
    fill: float = 0.5,
    first_id: int = 1000,
    max_attempts: int = 2000,
) -> SyntheticPuzzle:
    """Cut a random canvas into tiles whose neighboring borders are identical.

    Tiles overlap by one cell, so a tile's right column is its right
    neighbor's left column. Border cells are redrawn until every seam has a
    unique, non-palindromic signature. When `picture` is given it supplies the
    interiors and must be `(rows * (tile_size - 2), cols * (tile_size - 2))`.
    """
    if rows <= 0 or cols <= 0:
        raise ValueError("rows and cols must be positive integers")
    if tile_size < 3:
        raise ValueError("tile_size must be at least 3")

    side = tile_size - 2
    step = tile_size - 1
    rng = set_random_seed(seed)
    if picture is None:
        picture = rng.random((rows * side, cols * side)) < fill
    picture = np.asarray(picture, dtype=bool)
    if picture.shape != (rows * side, cols * side):
        raise ValueError(f"picture must have shape {(rows * side, cols * side)}, got {picture.shape}")

    for attempt in range(1, max_attempts + 1):
        canvas = rng.random((rows * step + 1, cols * step + 1)) < fill
        for r in range(rows):
            for c in range(cols):
                canvas[r * step + 1 : r * step + 1 + side, c * step + 1 : c * step + 1 + side] = picture[
                    r * side : (r + 1) * side, c * side : (c + 1) * side
                ]
        tiles = _cut_tiles(canvas, rows, cols, tile_size, first_id)
        if _has_unique_seams(tiles, rows, cols):
            return SyntheticPuzzle(tiles=tiles, picture=picture, rows=rows, cols=cols, attempts=attempt)

    raise ValueError(
        f"Could not draw unique seams for a {rows}x{cols} puzzle of {tile_size}-cell tiles "
        f"in {max_attempts} attempts; use a larger tile_size"
    )


def scramble_tiles(tiles: List[Tile], seed: int = 42) -> Tuple[List[Tile], np.ndarray]:
    """Return tiles in random order, each in a random one of its 8 orientations."""
    rng = set_random_seed(seed)
    order = rng.permutation(len(tiles))
    picks = rng.integers(0, 8, size=len(tiles))
    scrambled = [tiles[int(i)].orientations()[int(k)] for i, k in zip(order, picks)]
    return scrambled, order


def labels_to_rgb(labels: np.ndarray) -> np.ndarray:
    """Map an Image label canvas to an RGB array for display."""
    return PALETTE[labels]


def save_image(path: Union[str, Path], labels: np.ndarray) -> None:
    """Save a label canvas as an RGB image."""
    import matplotlib.pyplot as plt

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    plt.imsave(path, labels_to_rgb(labels))
