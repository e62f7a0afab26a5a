"""Demo script for tile assembly and motif search."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from tilejigsaw.assembler import TileAssembler
from tilejigsaw.graph import PieceGraph
from tilejigsaw.image import Image
from tilejigsaw.motif import SEA_MONSTER, MotifScanner
from tilejigsaw.utils import (
    embed_motif,
    generate_puzzle,
    labels_to_rgb,
    load_tiles,
    scramble_tiles,
)

EXAMPLE_TILES = Path(__file__).resolve().parent / "examples" / "example_tiles.txt"


def _synthetic_tiles(grid_size: int, tile_size: int, seed: int):
    """Random puzzle with a few sea monsters planted in its picture."""
    side = tile_size - 2
    rng = np.random.default_rng(seed)
    picture = rng.random((grid_size * side, grid_size * side)) < 0.3
    anchors = [(2, 1 + 4 * i) for i in range(max(1, (grid_size * side - 3) // 4))]
    anchors = [(x, y) for x, y in anchors if x + 19 < picture.shape[1] and y + 2 < picture.shape[0]]
    picture = embed_motif(picture, SEA_MONSTER, anchors)
    puzzle = generate_puzzle(grid_size, grid_size, tile_size=tile_size, seed=seed, picture=picture)
    scrambled, _ = scramble_tiles(puzzle.tiles, seed=seed)
    return scrambled


def run_demo(tiles_path: str | None = None, grid_size: int = 3, tile_size: int = 10, seed: int = 42) -> None:
    """Run the full pipeline and display the stitched picture with motifs highlighted."""
    if tiles_path:
        tiles = load_tiles(tiles_path)
    elif grid_size == 3 and tile_size == 10:
        tiles = load_tiles(EXAMPLE_TILES)
    else:
        tiles = _synthetic_tiles(grid_size, tile_size, seed)

    start = time.perf_counter()
    graph = PieceGraph.build(tiles)
    board = TileAssembler().assemble(graph)
    image = Image.assemble(board)
    scan = MotifScanner().find(image, SEA_MONSTER)
    duration = time.perf_counter() - start

    print(f"Tiles: {len(graph)}")
    print(f"Corners: {graph.corners()} - product: {graph.corner_product()}")
    print(f"Motifs found: {scan.count}")
    print(f"Uncovered pixels: {scan.uncovered_count}")
    print(f"Solve time: {duration:.4f}s")

    fig, axes = plt.subplots(1, 2, figsize=(10, 5))
    axes[0].imshow(labels_to_rgb(image.to_array()))
    axes[0].set_title("Assembled")
    axes[1].imshow(labels_to_rgb(image.to_array(scan.covered)))
    axes[1].set_title(f"{scan.count} motif(s)")
    for ax in axes:
        ax.axis("off")
    plt.tight_layout()
    plt.show()


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Tile assembly and motif search demo")
    parser.add_argument("--tiles", type=str, default=None, help="Optional tile file path")
    parser.add_argument("--grid-size", type=int, default=3, help="Synthetic puzzle grid size, default=3")
    parser.add_argument("--tile-size", type=int, default=10, help="Synthetic tile size, default=10")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    run_demo(
        tiles_path=args.tiles,
        grid_size=args.grid_size,
        tile_size=args.tile_size,
        seed=args.seed,
    )
