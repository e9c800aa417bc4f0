"""
Square Grid Topology
====================
Orthogonal W x H grid. Cells are (row, col); vertices are the integer grid
points (row, col) with 0 <= row <= H and 0 <= col <= W.

Edge grids are numpy int8 arrays:
- horizontal[row][col], shape (H+1, W): edge above cell (row, col)
- vertical[row][col],   shape (H, W+1): edge left of cell (row, col)
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from slitherlink.errors import InvalidEdgeStateError, InvalidGridError, require_positive_int
from slitherlink.graph import EDGE_ON, EDGE_STATES, EdgeGraph

Cell = Tuple[int, int]
Vertex = Tuple[int, int]
ClueGrid = List[List[Optional[int]]]


def empty_edges(width: int, height: int) -> Tuple[np.ndarray, np.ndarray]:
    horizontal = np.zeros((height + 1, width), dtype=np.int8)
    vertical = np.zeros((height, width + 1), dtype=np.int8)
    return horizontal, vertical


def as_edge_grids(
    horizontal,
    vertical,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert nested lists or arrays to int8 edge grids and check their shapes.

    Dimensions default to the ones implied by *horizontal*. Raises
    InvalidGridError on a shape mismatch and InvalidEdgeStateError on a
    value outside {0, 1, 2}.
    """
    h = np.asarray(horizontal)
    v = np.asarray(vertical)
    if h.ndim != 2 or v.ndim != 2:
        raise InvalidGridError("edge grids must be two-dimensional", parameter="edges")

    if height is None:
        height = h.shape[0] - 1
    if width is None:
        width = h.shape[1]
    require_positive_int("width", width)
    require_positive_int("height", height)

    if h.shape != (height + 1, width):
        raise InvalidGridError(
            f"horizontal edges must have shape {(height + 1, width)}, got {h.shape}",
            parameter="horizontal",
            value=h.shape,
        )
    if v.shape != (height, width + 1):
        raise InvalidGridError(
            f"vertical edges must have shape {(height, width + 1)}, got {v.shape}",
            parameter="vertical",
            value=v.shape,
        )
    for name, grid in (("horizontal", h), ("vertical", v)):
        if not np.isin(grid, EDGE_STATES).all():
            raise InvalidEdgeStateError(f"{name} edges must be 0, 1 or 2", parameter=name)
    return h.astype(np.int8), v.astype(np.int8)


def check_clue_grid(clues: Sequence[Sequence[Optional[int]]], width: int, height: int) -> None:
    if len(clues) != height or any(len(row) != width for row in clues):
        raise InvalidGridError(
            f"clue grid must be {height} rows of {width} cells",
            parameter="clues",
        )


def count_lines_around_cell(horizontal: np.ndarray, vertical: np.ndarray, row: int, col: int) -> int:
    count = 0
    if horizontal[row][col] == EDGE_ON:
        count += 1
    if horizontal[row + 1][col] == EDGE_ON:
        count += 1
    if vertical[row][col] == EDGE_ON:
        count += 1
    if vertical[row][col + 1] == EDGE_ON:
        count += 1
    return count


def count_all_cells(horizontal: np.ndarray, vertical: np.ndarray) -> np.ndarray:
    """Per-cell count of bounding "on" edges, shape (H, W)."""
    h_on = (horizontal == EDGE_ON).astype(np.int8)
    v_on = (vertical == EDGE_ON).astype(np.int8)
    return h_on[:-1, :] + h_on[1:, :] + v_on[:, :-1] + v_on[:, 1:]


def boundary_edges(inside: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Edges separating inside from outside. The grid exterior counts as
    outside, so an inside cell on the border gets its border edge.
    """
    padded = np.pad(inside.astype(bool), 1, mode="constant", constant_values=False)
    horizontal = (padded[:-1, 1:-1] != padded[1:, 1:-1]).astype(np.int8)
    vertical = (padded[1:-1, :-1] != padded[1:-1, 1:]).astype(np.int8)
    return horizontal, vertical


def on_edge_vertices(horizontal: np.ndarray, vertical: np.ndarray) -> Iterator[Tuple[Vertex, Vertex]]:
    for row, col in zip(*np.nonzero(horizontal == EDGE_ON)):
        yield (int(row), int(col)), (int(row), int(col) + 1)
    for row, col in zip(*np.nonzero(vertical == EDGE_ON)):
        yield (int(row), int(col)), (int(row) + 1, int(col))


def build_edge_graph(horizontal: np.ndarray, vertical: np.ndarray) -> EdgeGraph:
    return EdgeGraph(on_edge_vertices(horizontal, vertical))


def orthogonal_neighbors(row: int, col: int, width: int, height: int) -> List[Cell]:
    result = []
    for nr, nc in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
        if 0 <= nr < height and 0 <= nc < width:
            result.append((nr, nc))
    return result


def border_cells(width: int, height: int) -> List[Cell]:
    return [
        (r, c)
        for r in range(height)
        for c in range(width)
        if r == 0 or r == height - 1 or c == 0 or c == width - 1
    ]
