import unittest
import sys
import os
import random

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np

from slitherlink.config import resolve_config
from slitherlink.generators.clue_selector import max_clues, select_hex_clues, select_square_clues
from slitherlink.hex_grid import generate_cells


class TestSquareClueSelector(unittest.TestCase):

    def test_shown_clues_match_numbers(self):
        rng = random.Random(11)
        numbers = np.array([[rng.randint(0, 4) for _ in range(7)] for _ in range(6)])
        clues = select_square_clues(numbers, random.Random(1))
        self.assertEqual(len(clues), 6)
        for r, row in enumerate(clues):
            self.assertEqual(len(row), 7)
            for c, clue in enumerate(row):
                if clue is not None:
                    self.assertEqual(clue, numbers[r][c])

    def test_cap_holds(self):
        numbers = np.zeros((10, 10), dtype=int)
        for seed in range(20):
            clues = select_square_clues(numbers, random.Random(seed))
            shown = sum(1 for row in clues for c in row if c is not None)
            self.assertLessEqual(shown, 50)

    def test_backfill_when_nothing_retained(self):
        config = resolve_config(square_retention={n: 1.0 for n in range(5)})
        numbers = np.full((4, 4), 2)
        clues = select_square_clues(numbers, random.Random(0), config)
        for block_row in (0, 2):
            for block_col in (0, 2):
                block = [clues[r][c] for r in (block_row, block_row + 1) for c in (block_col, block_col + 1)]
                self.assertTrue(any(c is not None for c in block))

    def test_everything_retained_is_capped(self):
        config = resolve_config(square_retention={n: -1.0 for n in range(5)})
        clues = select_square_clues(np.ones((5, 5), dtype=int), random.Random(0), config)
        shown = sum(1 for row in clues for c in row if c is not None)
        self.assertEqual(shown, 12)

    def test_max_clues(self):
        self.assertEqual(max_clues(25, 0.5), 12)
        self.assertEqual(max_clues(19, 0.55), 10)


class TestHexClueSelector(unittest.TestCase):

    def test_cap_and_values(self):
        cells = generate_cells(3)
        rng = random.Random(4)
        numbers = {cell: rng.randint(0, 6) for cell in cells}
        for seed in range(20):
            clues = select_hex_clues(numbers, cells, random.Random(seed))
            self.assertLessEqual(len(clues), max_clues(len(cells), 0.55))
            for cell, clue in clues.items():
                self.assertEqual(clue, numbers[cell])

    def test_backfill_when_nothing_retained(self):
        config = resolve_config(hex_retention={n: 1.0 for n in range(7)})
        cells = generate_cells(2)
        clues = select_hex_clues({cell: 3 for cell in cells}, cells, random.Random(0), config)
        self.assertGreaterEqual(len(clues), 1)
        self.assertLessEqual(len(clues), 2)


if __name__ == '__main__':
    unittest.main()
