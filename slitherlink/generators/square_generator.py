"""
Square Loop Generator
=====================
Carves a random loop out of a W x H orthogonal grid.

Every cell starts "inside". Cells are carved away one at a time, always
from the border or next to an already carved cell, so the carved area
stays joined to the outside. The loop is the boundary of whatever is left.

Per iteration:
- candidates: border cells on the first pass, afterwards the union of
  cells next to carved ones and still-inside border cells
- prefer candidates whose removal lowers the number of inside cells with
  zero bounding edges
- shuffle and try up to 5; skip a cell whose row or column is down to a
  single inside cell, and (from the fourth carve on) a cell whose removal
  would split the inside region
"""

import logging
import random
from typing import List, Optional, Tuple

import numpy as np

from slitherlink.config import GenerationConfig
from slitherlink.errors import require_positive_int
from slitherlink.generators.base import CarvingLoopGenerator
from slitherlink.regions import is_inside_connected, is_single_region
from slitherlink.square_grid import Cell, border_cells, boundary_edges, count_all_cells, orthogonal_neighbors

logger = logging.getLogger(__name__)

SquareEdges = Tuple[np.ndarray, np.ndarray]


def count_zero_score_cells(inside: np.ndarray) -> int:
    """Inside cells that would show a 0 if the current boundary were the loop."""
    horizontal, vertical = boundary_edges(inside)
    counts = count_all_cells(horizontal, vertical)
    return int(np.count_nonzero(inside & (counts == 0)))


class SquareLoopGenerator(CarvingLoopGenerator[SquareEdges]):
    label = "square"

    def __init__(
        self,
        width: int,
        height: int,
        rng: Optional[random.Random] = None,
        config: Optional[GenerationConfig] = None,
    ):
        super().__init__(rng, config)
        self.width = require_positive_int("width", width)
        self.height = require_positive_int("height", height)
        self._border = border_cells(self.width, self.height)

    def validate(self, edges: SquareEdges) -> bool:
        return is_single_region(*edges)

    # ── Carving ───────────────────────────────────────────────

    def carve(self, force: bool = False) -> Optional[SquareEdges]:
        cfg = self.config
        inside = np.ones((self.height, self.width), dtype=bool)
        total_cells = self.width * self.height
        target = total_cells // cfg.carve_divisor
        carved = {}  # insertion-ordered set

        iterations = 0
        max_iterations = total_cells * cfg.square_iteration_factor
        consecutive_failures = 0

        while iterations < max_iterations and len(carved) < target:
            iterations += 1

            candidates = self._candidates(inside, carved)
            if not candidates:
                break

            zero_reducing = self._zero_reducing(inside, candidates)
            if zero_reducing:
                candidates = zero_reducing

            self.rng.shuffle(candidates)
            carved_this_iteration = False

            for row, col in candidates[:cfg.square_candidates_per_iteration]:
                if (row, col) in carved or not inside[row][col]:
                    continue
                if self._would_clear_row_or_column(inside, row, col):
                    continue
                inside[row][col] = False
                if len(carved) >= cfg.square_connectivity_min_carved and not is_inside_connected(inside):
                    inside[row][col] = True
                    continue
                carved[(row, col)] = None
                carved_this_iteration = True
                consecutive_failures = 0
                break

            if not carved_this_iteration:
                consecutive_failures += 1
                if consecutive_failures >= cfg.square_max_consecutive_failures:
                    break

        self._record_carve(len(carved), target)
        logger.debug("square: carved %d cells out of %d (target %d)", len(carved), total_cells, target)

        if not force and len(carved) < target - cfg.carve_slack:
            return None
        return boundary_edges(inside)

    def _candidates(self, inside: np.ndarray, carved: dict) -> List[Cell]:
        border = [cell for cell in self._border if inside[cell]]
        if not carved:
            return border

        found = {}
        for r, c in carved:
            for cell in orthogonal_neighbors(r, c, self.width, self.height):
                if inside[cell]:
                    found[cell] = None
        for cell in border:
            found[cell] = None
        return list(found)

    @staticmethod
    def _zero_reducing(inside: np.ndarray, candidates: List[Cell]) -> List[Cell]:
        current = count_zero_score_cells(inside)
        result = []
        for cell in candidates:
            if not inside[cell]:
                continue
            inside[cell] = False
            after = count_zero_score_cells(inside)
            inside[cell] = True
            if after < current:
                result.append(cell)
        return result

    @staticmethod
    def _would_clear_row_or_column(inside: np.ndarray, row: int, col: int) -> bool:
        if np.count_nonzero(inside[row, :]) <= 1:
            return True
        return np.count_nonzero(inside[:, col]) <= 1
