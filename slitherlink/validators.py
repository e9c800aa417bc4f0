"""
Game Validators
===============
Loop-structure and clue checks shared by the generators (self-check of a
candidate loop) and by players (win condition).

Every function here is a pure predicate over immutable input: calling it
twice on the same edge state gives the same answer. Only edges in state
EDGE_ON take part; crossed edges (2) count as empty.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from slitherlink import hex_grid, square_grid
from slitherlink.errors import InvalidGridError

NUMBERS_VIOLATED_MESSAGE = "Numbers constraint violated! Check the number of lines around each number."
NOT_A_LOOP_MESSAGE = "Must form a single continuous loop with no branches!"
SOLVED_MESSAGE = "Congratulations! Puzzle solved correctly!"


@dataclass
class ClueError:
    cell: Any
    expected: int
    actual: int


@dataclass
class SolutionReport:
    """Outcome of checking a player's edges against a puzzle."""
    valid: bool
    numbers_valid: bool
    loop_valid: bool
    loop_count: int
    clue_errors: List[ClueError] = field(default_factory=list)
    message: str = ""


# ── Loop validation ────────────────────────────────────────────

def is_single_loop_square(horizontal, vertical) -> bool:
    h, v = square_grid.as_edge_grids(horizontal, vertical)
    return square_grid.build_edge_graph(h, v).is_single_loop()


def _hex_edge_map(cell_list: List[hex_grid.HexCell], edges: Mapping) -> Dict[hex_grid.HexEdge, int]:
    """Canonical edge map; every edge must border at least one board cell."""
    edge_map = hex_grid.normalize_edge_map(edges)
    board_edges = set(hex_grid.all_edges(cell_list))
    for edge in edge_map:
        if edge not in board_edges:
            raise InvalidGridError(f"edge {edge} is not on the board", parameter="edges", value=edge)
    return edge_map


def is_single_loop_hex(cells: Iterable, edges: Mapping) -> bool:
    cell_list = [hex_grid.normalize_cell(c) for c in cells]
    return hex_grid.build_edge_graph(cell_list, _hex_edge_map(cell_list, edges)).is_single_loop()


# ── Clue validation ────────────────────────────────────────────

def _square_clue_errors(clues, h, v) -> List[ClueError]:
    height, width = v.shape[0], h.shape[1]
    square_grid.check_clue_grid(clues, width, height)
    counts = square_grid.count_all_cells(h, v)
    errors = []
    for row in range(height):
        for col in range(width):
            clue = clues[row][col]
            if clue is None:
                continue
            actual = int(counts[row][col])
            if actual != clue:
                errors.append(ClueError((row, col), clue, actual))
    return errors


def _hex_clues(cells: Sequence, clues: Mapping) -> Tuple[List[hex_grid.HexCell], Dict[hex_grid.HexCell, int]]:
    cell_list = [hex_grid.normalize_cell(c) for c in cells]
    board = set(cell_list)
    normalized = {}
    for key, clue in clues.items():
        cell = hex_grid.normalize_cell(key)
        if cell not in board:
            raise InvalidGridError(f"clue cell {cell} is not on the board", parameter="clues", value=key)
        if clue is not None:
            normalized[cell] = clue
    return cell_list, normalized


def _hex_clue_errors(cell_list, clues, edges) -> List[ClueError]:
    errors = []
    for cell in cell_list:
        clue = clues.get(cell)
        if clue is None:
            continue
        actual = hex_grid.count_lines_around_cell(edges, *cell)
        if actual != clue:
            errors.append(ClueError(cell, clue, actual))
    return errors


def square_numbers_satisfied(clues: Sequence[Sequence[Optional[int]]], horizontal, vertical) -> bool:
    """Every non-null clue equals the number of on edges around its cell."""
    h, v = square_grid.as_edge_grids(horizontal, vertical)
    return not _square_clue_errors(clues, h, v)


def hex_numbers_satisfied(cells: Sequence, clues: Mapping, edges: Mapping) -> bool:
    cell_list, normalized = _hex_clues(cells, clues)
    return not _hex_clue_errors(cell_list, normalized, _hex_edge_map(cell_list, edges))


# ── Win condition ──────────────────────────────────────────────

def check_square_solution(clues, horizontal_edges, vertical_edges, width: int, height: int) -> bool:
    h, v = square_grid.as_edge_grids(horizontal_edges, vertical_edges, width, height)
    if _square_clue_errors(clues, h, v):
        return False
    return square_grid.build_edge_graph(h, v).is_single_loop()


def check_hex_solution(cells: Sequence, clues: Mapping, edges: Mapping) -> bool:
    cell_list, normalized = _hex_clues(cells, clues)
    edge_map = _hex_edge_map(cell_list, edges)
    if _hex_clue_errors(cell_list, normalized, edge_map):
        return False
    return hex_grid.build_edge_graph(cell_list, edge_map).is_single_loop()


def check_win_condition(report: SolutionReport) -> Tuple[bool, str]:
    """
    Collapse a report to the (bool, reason) pair the UI shows.
    Clues are reported before loop structure.
    """
    if not report.numbers_valid:
        return False, NUMBERS_VIOLATED_MESSAGE
    if not report.loop_valid:
        return False, NOT_A_LOOP_MESSAGE
    return True, SOLVED_MESSAGE


def _report(clue_errors: List[ClueError], graph) -> SolutionReport:
    loop_valid = graph.is_single_loop()
    report = SolutionReport(
        valid=False,
        numbers_valid=not clue_errors,
        loop_valid=loop_valid,
        loop_count=graph.count_closed_loops(),
        clue_errors=clue_errors,
    )
    report.valid, report.message = check_win_condition(report)
    return report


def validate_square_solution(clues, horizontal_edges, vertical_edges, width: int, height: int) -> SolutionReport:
    h, v = square_grid.as_edge_grids(horizontal_edges, vertical_edges, width, height)
    return _report(_square_clue_errors(clues, h, v), square_grid.build_edge_graph(h, v))


def validate_hex_solution(cells: Sequence, clues: Mapping, edges: Mapping) -> SolutionReport:
    cell_list, normalized = _hex_clues(cells, clues)
    edge_map = _hex_edge_map(cell_list, edges)
    return _report(
        _hex_clue_errors(cell_list, normalized, edge_map),
        hex_grid.build_edge_graph(cell_list, edge_map),
    )
