"""Benchmark assembly and motif search across puzzle sizes."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List

import sys
import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tilejigsaw.assembler import AssemblerConfig, TileAssembler
from tilejigsaw.evaluator import PlacementEvaluator
from tilejigsaw.graph import PieceGraph
from tilejigsaw.image import Image
from tilejigsaw.motif import SEA_MONSTER, MotifScanner
from tilejigsaw.utils import embed_motif, generate_puzzle, same_up_to_orientation, scramble_tiles


@dataclass
class BenchmarkRow:
    grid: str
    seeds: int
    seam_acc_min: float
    picture_match_rate: float
    motifs_mean: float
    assemble_mean_sec: float
    scan_mean_sec: float


@dataclass
class CaseResult:
    seam_accuracy: float
    picture_match: bool
    motifs: int
    assemble_sec: float
    scan_sec: float


def run_case(grid_size: int, tile_size: int, seed: int, traversal: str) -> CaseResult:
    side = tile_size - 2
    rng = np.random.default_rng(seed)
    picture = rng.random((grid_size * side, grid_size * side)) < 0.25
    picture = embed_motif(picture, SEA_MONSTER, [(1, 1)])
    puzzle = generate_puzzle(grid_size, grid_size, tile_size=tile_size, seed=seed, picture=picture)
    scrambled, _ = scramble_tiles(puzzle.tiles, seed=seed)

    t0 = time.perf_counter()
    graph = PieceGraph.build(scrambled)
    board = TileAssembler(AssemblerConfig(traversal=traversal)).assemble(graph)
    image = Image.assemble(board)
    assemble_sec = time.perf_counter() - t0

    t0 = time.perf_counter()
    scan = MotifScanner().find(image, SEA_MONSTER)
    scan_sec = time.perf_counter() - t0

    result = PlacementEvaluator().evaluate(board, graph)
    return CaseResult(
        seam_accuracy=result.seam_accuracy,
        picture_match=same_up_to_orientation(image.to_array().astype(bool), puzzle.picture),
        motifs=scan.count,
        assemble_sec=assemble_sec,
        scan_sec=scan_sec,
    )


def run_case_multi_seed(grid_size: int, tile_size: int, seeds: List[int], traversal: str) -> BenchmarkRow:
    cases = [run_case(grid_size, tile_size, seed=seed, traversal=traversal) for seed in seeds]
    seam = np.array([c.seam_accuracy for c in cases], dtype=np.float64)
    match = np.array([c.picture_match for c in cases], dtype=np.float64)
    motifs = np.array([c.motifs for c in cases], dtype=np.float64)
    assemble = np.array([c.assemble_sec for c in cases], dtype=np.float64)
    scan = np.array([c.scan_sec for c in cases], dtype=np.float64)
    return BenchmarkRow(
        grid=f"{grid_size}x{grid_size}",
        seeds=len(seeds),
        seam_acc_min=float(np.min(seam)),
        picture_match_rate=float(np.mean(match)),
        motifs_mean=float(np.mean(motifs)),
        assemble_mean_sec=float(np.mean(assemble)),
        scan_mean_sec=float(np.mean(scan)),
    )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run tile assembly benchmark on multiple grid sizes.")
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=[3, 6, 12],
        help="Grid sizes to benchmark (default: 3 6 12)",
    )
    parser.add_argument(
        "--tile-size",
        type=int,
        default=16,
        help="Cells per tile side; larger tiles make unique seams easier to draw (default: 16)",
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument(
        "--num-seeds",
        type=int,
        default=1,
        help="Number of seeds to evaluate per grid (default: 1)",
    )
    parser.add_argument("--traversal", choices=["bfs", "dfs"], default="bfs", help="Placement order")
    return parser.parse_args()


def print_table(rows: List[BenchmarkRow]) -> None:
    header = (
        f"{'Grid':<8}{'Seeds':>7}{'SeamMin':>10}{'PicMatch':>10}"
        f"{'Motifs':>8}{'Asm(s)':>10}{'Scan(s)':>10}"
    )
    print(header)
    print("-" * len(header))
    for row in rows:
        print(
            f"{row.grid:<8}"
            f"{row.seeds:>7d}"
            f"{row.seam_acc_min:>10.4f}"
            f"{row.picture_match_rate:>10.4f}"
            f"{row.motifs_mean:>8.2f}"
            f"{row.assemble_mean_sec:>10.4f}"
            f"{row.scan_mean_sec:>10.4f}"
        )


def main() -> None:
    args = parse_args()
    seeds = [args.seed + i for i in range(args.num_seeds)]
    rows = [
        run_case_multi_seed(size, args.tile_size, seeds=seeds, traversal=args.traversal)
        for size in args.sizes
    ]
    print_table(rows)


if __name__ == "__main__":
    main()
