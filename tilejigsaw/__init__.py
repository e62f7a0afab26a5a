"""Reassemble square boolean tiles of unknown orientation and search the picture for a motif."""

from .assembler import AssemblerConfig, Board, TileAssembler
from .edges import Direction, normalize, reverse_bits
from .errors import (
    AlignmentError,
    DisconnectedGraphError,
    GraphInconsistencyError,
    JigsawError,
    MotifNotFoundError,
    TileParseError,
)
from .evaluator import EvaluationResult, PlacementEvaluator
from .graph import PieceGraph, TileKind
from .image import Image
from .motif import SEA_MONSTER, Motif, MotifScanner, MotifScanResult
from .parser import parse_tile, parse_tiles
from .tile import Tile

__all__ = [
    "Direction",
    "normalize",
    "reverse_bits",
    "Tile",
    "parse_tile",
    "parse_tiles",
    "PieceGraph",
    "TileKind",
    "AssemblerConfig",
    "Board",
    "TileAssembler",
    "Image",
    "Motif",
    "MotifScanner",
    "MotifScanResult",
    "SEA_MONSTER",
    "EvaluationResult",
    "PlacementEvaluator",
    "JigsawError",
    "TileParseError",
    "GraphInconsistencyError",
    "AlignmentError",
    "DisconnectedGraphError",
    "MotifNotFoundError",
]
