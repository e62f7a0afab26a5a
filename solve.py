"""Assemble a tile file into one picture and count the pixels outside any motif."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tilejigsaw.assembler import TRAVERSALS, AssemblerConfig, TileAssembler
from tilejigsaw.errors import JigsawError
from tilejigsaw.evaluator import PlacementEvaluator
from tilejigsaw.graph import PieceGraph
from tilejigsaw.image import Image
from tilejigsaw.motif import SEA_MONSTER, Motif, MotifScanner
from tilejigsaw.utils import load_tiles, save_image


def setup_logging(verbose: bool) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Assemble square tiles and search for a motif.")
    parser.add_argument("--input", required=True, help="Path to a file of 'Tile <id>:' blocks")
    parser.add_argument(
        "--motif",
        default=None,
        help="Optional path to a '#'-drawn motif (default: the sea monster)",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Optional output path for the rendered picture (default: do not save)",
    )
    parser.add_argument(
        "--traversal",
        choices=TRAVERSALS,
        default="bfs",
        help="Placement work-queue order (default: bfs)",
    )
    parser.add_argument("--start-tile", type=int, default=None, help="Tile id to anchor at (0, 0)")
    parser.add_argument("--no-render", action="store_true", help="Do not print the stitched picture")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def run(args: argparse.Namespace) -> None:
    """Run the parse, graph, assemble, stitch and scan pipeline and print a report."""
    input_path = Path(args.input)
    tiles = load_tiles(input_path)
    motif = Motif.from_text(Path(args.motif).read_text()) if args.motif else SEA_MONSTER

    graph = PieceGraph.build(tiles)
    corners = graph.corners()
    print(f"Input: {input_path}")
    print(f"Tiles: {len(graph)} of {graph.tile_size}x{graph.tile_size}")
    print(f"Corners: {corners} - product: {graph.corner_product()}")

    assembler = TileAssembler(AssemblerConfig(start_tile=args.start_tile, traversal=args.traversal))
    board = assembler.assemble(graph)
    result = PlacementEvaluator().evaluate(board, graph)
    rows, cols = board.shape
    print(f"Board: {rows}x{cols}, seam accuracy {result.seam_accuracy:.4f}")
    print("Tile ids:")
    print(board.grid())

    image = Image.assemble(board)
    scan = MotifScanner().find(image, motif)
    print(
        f"Found {scan.count} motif(s) in orientation {scan.orientation} among {len(image)} "
        f"pixels; {scan.uncovered_count} remain"
    )

    if not args.no_render:
        print(image.render(scan.covered))

    if args.output is not None:
        output_path = Path(args.output)
        save_image(output_path, image.to_array(scan.covered))
        print(f"Output image: {output_path.resolve()}")


def main() -> int:
    args = parse_args()
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)
    try:
        run(args)
    except (ValueError, JigsawError) as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1
    except FileNotFoundError as exc:
        logger.error("File not found: %s", exc.filename)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
