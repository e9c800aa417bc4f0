"""
Player Boards
=============
Mutable edge overlay a player edits on top of one immutable puzzle.

Edge states: 0 empty, 1 line, 2 cross. A line toggle flips between line
and empty (a cross becomes a line); a cross toggle flips between cross
and empty (a line becomes a cross). show_solution() copies the stored
solution over the overlay; the puzzle itself never changes.
"""

from typing import Dict, Union

import numpy as np

from slitherlink import hex_grid
from slitherlink.errors import InvalidGridError
from slitherlink.graph import EDGE_CROSSED, EDGE_EMPTY, EDGE_ON
from slitherlink.puzzle import HexPuzzle, SquarePuzzle
from slitherlink.validators import (
    SolutionReport,
    validate_hex_solution,
    validate_square_solution,
)

HORIZONTAL = "horizontal"
VERTICAL = "vertical"


def _toggled(current: int, target: int) -> int:
    return EDGE_EMPTY if current == target else target


class SquareBoard:
    def __init__(self, puzzle: SquarePuzzle):
        self.puzzle = puzzle
        self.clear()

    def clear(self):
        self.horizontal = np.zeros((self.puzzle.height + 1, self.puzzle.width), dtype=np.int8)
        self.vertical = np.zeros((self.puzzle.height, self.puzzle.width + 1), dtype=np.int8)

    def _grid(self, orientation: str) -> np.ndarray:
        if orientation == HORIZONTAL:
            return self.horizontal
        if orientation == VERTICAL:
            return self.vertical
        raise InvalidGridError(f"unknown edge orientation {orientation!r}", parameter="orientation", value=orientation)

    def _set(self, orientation: str, row: int, col: int, target: int) -> int:
        grid = self._grid(orientation)
        if not (0 <= row < grid.shape[0] and 0 <= col < grid.shape[1]):
            raise InvalidGridError(
                f"{orientation} edge ({row}, {col}) is off the board",
                parameter="edge",
                value=(orientation, row, col),
            )
        grid[row][col] = _toggled(grid[row][col], target)
        return int(grid[row][col])

    def toggle_line(self, orientation: str, row: int, col: int) -> int:
        return self._set(orientation, row, col, EDGE_ON)

    def toggle_cross(self, orientation: str, row: int, col: int) -> int:
        return self._set(orientation, row, col, EDGE_CROSSED)

    def show_solution(self):
        self.horizontal = np.array(self.puzzle.horizontal, dtype=np.int8)
        self.vertical = np.array(self.puzzle.vertical, dtype=np.int8)

    def check(self) -> SolutionReport:
        return validate_square_solution(
            self.puzzle.clues, self.horizontal, self.vertical,
            self.puzzle.width, self.puzzle.height,
        )

    def is_solved(self) -> bool:
        return self.check().valid

    def render(self) -> str:
        return self.puzzle.render(horizontal=self.horizontal, vertical=self.vertical)


class HexBoard:
    def __init__(self, puzzle: HexPuzzle):
        self.puzzle = puzzle
        self._board_edges = set(hex_grid.all_edges(list(puzzle.cells)))
        self.edges: Dict[hex_grid.HexEdge, int] = {}

    def clear(self):
        self.edges = {}

    def _set(self, edge: Union[str, hex_grid.HexEdge], target: int) -> int:
        key = hex_grid.normalize_edge(edge)
        if key not in self._board_edges:
            raise InvalidGridError(f"edge {key} is not on the board", parameter="edge", value=edge)
        self.edges[key] = _toggled(self.edges.get(key, EDGE_EMPTY), target)
        return self.edges[key]

    def toggle_line(self, edge: Union[str, hex_grid.HexEdge]) -> int:
        return self._set(edge, EDGE_ON)

    def toggle_cross(self, edge: Union[str, hex_grid.HexEdge]) -> int:
        return self._set(edge, EDGE_CROSSED)

    def show_solution(self):
        self.edges = dict(self.puzzle.edges)

    def check(self) -> SolutionReport:
        return validate_hex_solution(self.puzzle.cells, self.puzzle.clues, self.edges)

    def is_solved(self) -> bool:
        return self.check().valid
