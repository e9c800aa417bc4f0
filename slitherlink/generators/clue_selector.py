"""
Clue Selector
=============
Chooses which of a solution's cell numbers to show as clues.

1. Retention: each number n is kept when rng.random() > threshold[n].
   Extreme values (0, 3, 4 on squares; 0, 5, 6 on hexes) are kept far more
   often than the busy middle values.
2. Backfill: the square board is split into 2x2 blocks and any block left
   without a clue gets up to two random cells revealed. The hex board is
   treated as a single block.
3. Cap: if more than floor(cells * cap) clues survive, random ones are
   dropped until the cap holds.

The result is not checked for a unique solution.
"""

import logging
import math
import random
from typing import Dict, List, Optional, Sequence

from slitherlink.config import GenerationConfig, ensure_rng, resolve_config
from slitherlink.hex_grid import HexCell
from slitherlink.square_grid import ClueGrid

logger = logging.getLogger(__name__)


def _retain(num: int, thresholds: Dict[int, float], rng: random.Random) -> bool:
    threshold = thresholds.get(num)
    if threshold is None:
        return False
    return rng.random() > threshold


def max_clues(total_cells: int, cap: float) -> int:
    return math.floor(total_cells * cap)


def select_square_clues(
    numbers: Sequence[Sequence[int]],
    rng: Optional[random.Random] = None,
    config: Optional[GenerationConfig] = None,
) -> ClueGrid:
    rng = ensure_rng(rng)
    cfg = config or resolve_config()
    height = len(numbers)
    width = len(numbers[0]) if height else 0

    clues: ClueGrid = [[None] * width for _ in range(height)]
    for row in range(height):
        for col in range(width):
            num = int(numbers[row][col])
            if _retain(num, cfg.square_retention, rng):
                clues[row][col] = num

    block = cfg.backfill_block_size
    for block_row in range(0, height, block):
        for block_col in range(0, width, block):
            end_row = min(block_row + block, height)
            end_col = min(block_col + block, width)
            has_clue = any(
                clues[r][c] is not None
                for r in range(block_row, end_row)
                for c in range(block_col, end_col)
            )
            if has_clue:
                continue
            for _ in range(cfg.backfill_attempts):
                r = rng.randrange(block_row, end_row)
                c = rng.randrange(block_col, end_col)
                if clues[r][c] is None:
                    clues[r][c] = int(numbers[r][c])

    positions = [(r, c) for r in range(height) for c in range(width) if clues[r][c] is not None]
    limit = max_clues(width * height, cfg.square_clue_cap)
    if len(positions) > limit:
        rng.shuffle(positions)
        for r, c in positions[:len(positions) - limit]:
            clues[r][c] = None

    logger.debug("square: selected %d clues (cap %d)", min(len(positions), limit), limit)
    return clues


def select_hex_clues(
    numbers: Dict[HexCell, int],
    cells: List[HexCell],
    rng: Optional[random.Random] = None,
    config: Optional[GenerationConfig] = None,
) -> Dict[HexCell, int]:
    rng = ensure_rng(rng)
    cfg = config or resolve_config()

    clues: Dict[HexCell, int] = {}
    for cell in cells:
        num = numbers[cell]
        if _retain(num, cfg.hex_retention, rng):
            clues[cell] = num

    if not clues and cells:
        for _ in range(cfg.backfill_attempts):
            cell = cells[rng.randrange(len(cells))]
            clues.setdefault(cell, numbers[cell])

    limit = max_clues(len(cells), cfg.hex_clue_cap)
    if len(clues) > limit:
        keys = list(clues)
        rng.shuffle(keys)
        for cell in keys[:len(keys) - limit]:
            del clues[cell]

    logger.debug("hex: selected %d clues (cap %d)", len(clues), limit)
    return clues
