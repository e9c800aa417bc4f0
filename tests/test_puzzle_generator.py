import unittest
import sys
import os
import json
import math
import random

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np

from slitherlink import (
    HexPuzzle,
    InvalidGridError,
    PuzzleGenerator,
    SquarePuzzle,
    check_hex_solution,
    check_square_solution,
    generate_hex_puzzle,
    generate_square_puzzle,
    is_single_loop_hex,
    is_single_loop_square,
)
from slitherlink.generators import extract_hex_numbers, extract_square_numbers
from slitherlink.square_grid import count_lines_around_cell
from slitherlink import hex_grid


class TestSquarePuzzles(unittest.TestCase):

    def test_generated_puzzles(self):
        """Loop is single, clues agree with the loop, and density stays under the cap."""
        for seed in range(12):
            rng = random.Random(seed)
            width, height = rng.randint(2, 10), rng.randint(2, 10)
            puzzle = generate_square_puzzle(width, height, rng)
            with self.subTest(seed=seed, width=width, height=height):
                self.assertTrue(is_single_loop_square(puzzle.horizontal, puzzle.vertical))
                for r in range(height):
                    for c in range(width):
                        clue = puzzle.clues[r][c]
                        if clue is not None:
                            self.assertEqual(clue, count_lines_around_cell(puzzle.horizontal, puzzle.vertical, r, c))
                self.assertLessEqual(puzzle.clue_count, math.floor(width * height * 0.5))
                self.assertTrue(check_square_solution(
                    puzzle.clue_grid(), puzzle.horizontal, puzzle.vertical, width, height))

    def test_same_seed_same_puzzle(self):
        a = generate_square_puzzle(6, 6, random.Random(9))
        b = generate_square_puzzle(6, 6, random.Random(9))
        self.assertEqual(a.clues, b.clues)
        self.assertTrue(np.array_equal(a.horizontal, b.horizontal))

    def test_invalid_sizes(self):
        for w, h in ((0, 5), (5, 0), (-3, 3), (2.5, 3), (True, 3)):
            with self.assertRaises(InvalidGridError):
                generate_square_puzzle(w, h)

    def test_solution_is_read_only(self):
        puzzle = generate_square_puzzle(4, 4, random.Random(0))
        with self.assertRaises(ValueError):
            puzzle.horizontal[0][0] = 0

    def test_to_dict_shape(self):
        puzzle = generate_square_puzzle(5, 3, random.Random(2))
        data = puzzle.to_dict()
        self.assertEqual(data["type"], "square")
        self.assertEqual(len(data["clues"]), 3)
        self.assertEqual(len(data["solution"]["horizontalEdges"]), 4)
        self.assertEqual(len(data["solution"]["horizontalEdges"][0]), 5)
        self.assertEqual(len(data["solution"]["verticalEdges"][0]), 6)
        restored = SquarePuzzle.from_dict(json.loads(json.dumps(data)))
        self.assertEqual(restored.clues, puzzle.clues)
        self.assertTrue(np.array_equal(restored.vertical, puzzle.vertical))

    def test_extract_numbers(self):
        h = [[1, 1], [0, 0], [1, 1]]
        v = [[1, 0, 1], [1, 0, 1]]
        self.assertEqual(extract_square_numbers(h, v).tolist(), [[2, 2], [2, 2]])

    def test_render(self):
        puzzle = generate_square_puzzle(3, 2, random.Random(1))
        lines = puzzle.render().splitlines()
        self.assertEqual(len(lines), 5)
        self.assertEqual(lines[0], "+   +   +   +")
        self.assertIn("---", puzzle.render(show_solution=True))

    def test_stats_recorded(self):
        generator = PuzzleGenerator(random.Random(5))
        generator.generate_square(7, 7)
        self.assertGreaterEqual(generator.last_stats.attempts, 1)
        self.assertEqual(generator.last_stats.target, 49 // 3)
        self.assertGreater(generator.last_elapsed, 0)


class TestHexPuzzles(unittest.TestCase):

    def test_generated_puzzles(self):
        for radius in (1, 2, 3, 4):
            for seed in range(4):
                puzzle = generate_hex_puzzle(radius, random.Random(seed))
                with self.subTest(radius=radius, seed=seed):
                    self.assertEqual(len(puzzle.cells), 3 * radius * (radius + 1) + 1)
                    self.assertTrue(is_single_loop_hex(puzzle.cells, puzzle.edges))
                    for (q, r), clue in puzzle.clues.items():
                        self.assertEqual(clue, hex_grid.count_lines_around_cell(puzzle.edges, q, r))
                    self.assertLessEqual(puzzle.clue_count, math.floor(len(puzzle.cells) * 0.55))
                    self.assertTrue(check_hex_solution(puzzle.cells, puzzle.clues, puzzle.edges))

    def test_invalid_radius(self):
        for radius in (0, -2, 1.5, "2"):
            with self.assertRaises(InvalidGridError):
                generate_hex_puzzle(radius)

    def test_to_dict_key_formats(self):
        puzzle = generate_hex_puzzle(2, random.Random(3))
        data = puzzle.to_dict()
        self.assertEqual(data["type"], "hexagonal")
        self.assertEqual(len(data["cells"]), 19)
        self.assertEqual(set(data["cells"][0]), {"q", "r"})
        for key in data["clues"]:
            q, r = key.split(",")
            self.assertIn((int(q), int(r)), puzzle.cells)
        for key in data["solution"]["edges"]:
            left, right = key.split("|")
            a = tuple(int(x) for x in left.split(","))
            b = tuple(int(x) for x in right.split(","))
            self.assertLess(a, b)

    def test_dict_round_trip(self):
        puzzle = generate_hex_puzzle(3, random.Random(8))
        restored = HexPuzzle.from_dict(json.loads(json.dumps(puzzle.to_dict())))
        self.assertEqual(restored.cells, puzzle.cells)
        self.assertEqual(dict(restored.clues), dict(puzzle.clues))
        self.assertEqual(dict(restored.edges), dict(puzzle.edges))

    def test_solution_is_read_only(self):
        puzzle = generate_hex_puzzle(2, random.Random(0))
        edge = puzzle.on_edges[0]
        with self.assertRaises(TypeError):
            puzzle.edges[edge] = 2
        with self.assertRaises(TypeError):
            puzzle.clues[(99, 99)] = 5
        self.assertEqual(puzzle.edges[edge], 1)
        self.assertNotIn((99, 99), puzzle.clues)

    def test_extract_numbers_ring(self):
        cells = hex_grid.generate_cells(1)
        edges = {e: 1 for e in hex_grid.cell_edges(0, 0)}
        numbers = extract_hex_numbers(cells, edges)
        self.assertEqual(numbers[(0, 0)], 6)
        self.assertTrue(all(numbers[c] == 1 for c in cells if c != (0, 0)))


if __name__ == '__main__':
    unittest.main()
