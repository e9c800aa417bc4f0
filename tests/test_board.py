import unittest
import sys
import os
import random

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from slitherlink.board import HORIZONTAL, VERTICAL, HexBoard, SquareBoard
from slitherlink.errors import InvalidGridError
from slitherlink.generators import generate_hex_puzzle, generate_square_puzzle
from slitherlink.validators import NOT_A_LOOP_MESSAGE, SOLVED_MESSAGE


class TestSquareBoard(unittest.TestCase):

    def setUp(self):
        self.puzzle = generate_square_puzzle(4, 4, random.Random(21))
        self.board = SquareBoard(self.puzzle)

    def test_toggle_cycle(self):
        self.assertEqual(self.board.toggle_line(HORIZONTAL, 0, 0), 1)
        self.assertEqual(self.board.toggle_line(HORIZONTAL, 0, 0), 0)
        self.assertEqual(self.board.toggle_cross(VERTICAL, 1, 4), 2)
        self.assertEqual(self.board.toggle_line(VERTICAL, 1, 4), 1)
        self.assertEqual(self.board.toggle_cross(VERTICAL, 1, 4), 2)

    def test_show_solution_solves(self):
        self.assertFalse(self.board.is_solved())
        self.board.show_solution()
        report = self.board.check()
        self.assertTrue(report.valid)
        self.assertEqual(report.message, SOLVED_MESSAGE)

    def test_overlay_does_not_touch_puzzle(self):
        self.board.show_solution()
        row, col = 0, 0
        before = int(self.puzzle.horizontal[row][col])
        self.board.toggle_cross(HORIZONTAL, row, col)
        self.assertEqual(int(self.puzzle.horizontal[row][col]), before)

    def test_clear(self):
        self.board.show_solution()
        self.board.clear()
        self.assertEqual(int(self.board.horizontal.sum() + self.board.vertical.sum()), 0)

    def test_off_board_edge(self):
        with self.assertRaises(InvalidGridError):
            self.board.toggle_line(HORIZONTAL, 5, 0)
        with self.assertRaises(InvalidGridError):
            self.board.toggle_line(VERTICAL, 0, 5)
        with self.assertRaises(InvalidGridError):
            self.board.toggle_line("diagonal", 0, 0)

    def test_render_shows_player_marks(self):
        self.board.toggle_cross(HORIZONTAL, 0, 0)
        self.assertTrue(self.board.render().startswith("+ x +"))


class TestHexBoard(unittest.TestCase):

    def setUp(self):
        self.puzzle = generate_hex_puzzle(2, random.Random(6))
        self.board = HexBoard(self.puzzle)

    def test_show_solution_solves(self):
        self.board.show_solution()
        self.assertTrue(self.board.is_solved())

    def test_missing_line_breaks_loop(self):
        self.board.show_solution()
        edge = self.puzzle.on_edges[0]
        self.assertEqual(self.board.toggle_cross(edge), 2)
        report = self.board.check()
        self.assertFalse(report.loop_valid)
        if report.numbers_valid:
            self.assertEqual(report.message, NOT_A_LOOP_MESSAGE)

    def test_string_edge_keys(self):
        self.assertEqual(self.board.toggle_line("0,0|0,1"), 1)
        self.assertEqual(self.board.edges[((0, 0), (0, 1))], 1)
        self.assertEqual(self.board.toggle_line("0,1|0,0"), 0)

    def test_edge_off_board(self):
        with self.assertRaises(InvalidGridError):
            self.board.toggle_line("5,0|6,0")
        with self.assertRaises(InvalidGridError):
            self.board.toggle_line("0,0|2,0")


if __name__ == '__main__':
    unittest.main()
