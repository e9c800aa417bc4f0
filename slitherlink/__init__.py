"""
Slitherlink Generator - Core Package
Loop carving, clue selection and solution checking for square and hex boards.
"""
from .errors import InvalidGridError, InvalidEdgeStateError
from .config import GenerationConfig, resolve_config, make_rng
from .graph import EdgeGraph, EDGE_EMPTY, EDGE_ON, EDGE_CROSSED
from .puzzle import SquarePuzzle, HexPuzzle
from .validators import (
    SolutionReport,
    check_hex_solution,
    check_square_solution,
    is_single_loop_hex,
    is_single_loop_square,
    validate_hex_solution,
    validate_square_solution,
)
from .generators import generate_hex_puzzle, generate_square_puzzle, PuzzleGenerator
from .board import SquareBoard, HexBoard

__all__ = [
    'InvalidGridError', 'InvalidEdgeStateError',
    'GenerationConfig', 'resolve_config', 'make_rng',
    'EdgeGraph', 'EDGE_EMPTY', 'EDGE_ON', 'EDGE_CROSSED',
    'SquarePuzzle', 'HexPuzzle',
    'SolutionReport', 'check_square_solution', 'check_hex_solution',
    'is_single_loop_square', 'is_single_loop_hex',
    'validate_square_solution', 'validate_hex_solution',
    'generate_square_puzzle', 'generate_hex_puzzle', 'PuzzleGenerator',
    'SquareBoard', 'HexBoard',
]
