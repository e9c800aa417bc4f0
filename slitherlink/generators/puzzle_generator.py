"""
Puzzle Generator
================
Ties a loop generator, number extraction and clue selection together:

    loop generator -> solution edges -> full numbers -> clue selector -> puzzle

The loop is checked with the loop validator before it is used. A loop
that fails is regenerated within the attempt budget; generation itself
never raises for random bad luck.
"""

import logging
import random
import time
from typing import Dict, List, Optional

import numpy as np

from slitherlink.config import GenerationConfig, ensure_rng, resolve_config
from slitherlink.errors import require_positive_int
from slitherlink.generators.base import GenerationStats
from slitherlink.generators.clue_selector import select_hex_clues, select_square_clues
from slitherlink.generators.hex_generator import HexLoopGenerator
from slitherlink.generators.square_generator import SquareLoopGenerator
from slitherlink.hex_grid import HexCell, count_lines_around_cell
from slitherlink.puzzle import HexPuzzle, SquarePuzzle
from slitherlink.square_grid import as_edge_grids, count_all_cells
from slitherlink.validators import is_single_loop_hex, is_single_loop_square

logger = logging.getLogger(__name__)


def extract_square_numbers(horizontal, vertical) -> np.ndarray:
    """Full per-cell numbers for a solution, shape (height, width)."""
    h, v = as_edge_grids(horizontal, vertical)
    return count_all_cells(h, v).astype(int)


def extract_hex_numbers(cells: List[HexCell], edges: Dict) -> Dict[HexCell, int]:
    return {(q, r): count_lines_around_cell(edges, q, r) for q, r in cells}


class PuzzleGenerator:
    """
    Generates square or hex puzzles with one random source and config.

    Holds no state between calls other than the stats of the last one, so
    separate instances can run in parallel threads.
    """

    def __init__(self, rng: Optional[random.Random] = None, config: Optional[GenerationConfig] = None):
        self.rng = ensure_rng(rng)
        self.config = config or resolve_config()
        self.last_stats = GenerationStats()
        self.last_loop_checks = 0
        self.last_elapsed = 0.0

    def generate_square(self, width: int, height: int) -> SquarePuzzle:
        width = require_positive_int("width", width)
        height = require_positive_int("height", height)
        start = time.perf_counter()

        loop_gen = SquareLoopGenerator(width, height, self.rng, self.config)
        logger.debug("square %dx%d: generating random loop", width, height)
        horizontal, vertical = self._checked_loop(loop_gen, lambda e: is_single_loop_square(*e))

        logger.debug("square %dx%d: extracting numbers from solution", width, height)
        numbers = extract_square_numbers(horizontal, vertical)

        logger.debug("square %dx%d: selecting clues", width, height)
        clues = select_square_clues(numbers, self.rng, self.config)

        self.last_elapsed = time.perf_counter() - start
        return SquarePuzzle.create(width, height, clues, horizontal, vertical)

    def generate_hex(self, radius: int) -> HexPuzzle:
        radius = require_positive_int("radius", radius)
        start = time.perf_counter()

        loop_gen = HexLoopGenerator(radius, self.rng, self.config)
        logger.debug("hex radius %d: generating loop over %d cells", radius, len(loop_gen.cells))
        edges = self._checked_loop(loop_gen, lambda e: is_single_loop_hex(loop_gen.cells, e))

        numbers = extract_hex_numbers(loop_gen.cells, edges)
        clues = select_hex_clues(numbers, loop_gen.cells, self.rng, self.config)

        self.last_elapsed = time.perf_counter() - start
        return HexPuzzle.create(radius, loop_gen.cells, clues, edges)

    def _checked_loop(self, loop_gen, is_loop):
        edges = None
        for check in range(1, self.config.max_attempts + 1):
            self.last_loop_checks = check
            edges = loop_gen.generate()
            self.last_stats = loop_gen.last_stats
            if is_loop(edges):
                return edges
            logger.warning("%s: generated edges are not a single loop, regenerating", loop_gen.label)
        logger.error("%s: no single loop after %d generations, keeping the last one",
                     loop_gen.label, self.config.max_attempts)
        return edges


def generate_square_puzzle(
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
    config: Optional[GenerationConfig] = None,
) -> SquarePuzzle:
    return PuzzleGenerator(rng, config).generate_square(width, height)


def generate_hex_puzzle(
    radius: int,
    rng: Optional[random.Random] = None,
    config: Optional[GenerationConfig] = None,
) -> HexPuzzle:
    return PuzzleGenerator(rng, config).generate_hex(radius)
