"""
Puzzle generation: loop carving, clue selection and the orchestrator.
"""
from .base import CarvingLoopGenerator, GenerationStats
from .square_generator import SquareLoopGenerator
from .hex_generator import HexLoopGenerator
from .clue_selector import select_square_clues, select_hex_clues
from .puzzle_generator import (
    PuzzleGenerator,
    extract_hex_numbers,
    extract_square_numbers,
    generate_hex_puzzle,
    generate_square_puzzle,
)

__all__ = [
    'CarvingLoopGenerator', 'GenerationStats',
    'SquareLoopGenerator', 'HexLoopGenerator',
    'select_square_clues', 'select_hex_clues',
    'PuzzleGenerator', 'extract_square_numbers', 'extract_hex_numbers',
    'generate_square_puzzle', 'generate_hex_puzzle',
]
