"""
Region Connectivity
===================
Flood-fill checks used while carving a loop out of a grid.

- is_single_region: full check over an edge assignment. Floods the
  "outside" region in from every border edge that is not on, then counts
  the connected components of what is left. Exactly one must remain.
- is_inside_connected: cheap check over a live boolean inside mask,
  used to test a carving candidate before committing it.
- is_hex_inside_connected: the same cheap check over axial neighbours.
"""

from __future__ import annotations

from collections import deque
from typing import Collection, Set

import numpy as np

from slitherlink.graph import EDGE_ON
from slitherlink.hex_grid import HexCell, get_neighbors
from slitherlink.square_grid import as_edge_grids


def _open_neighbors(row, col, horizontal, vertical, height, width):
    """Neighbouring cells reachable from (row, col) without crossing an on edge."""
    for nr, nc, edge in (
        (row - 1, col, horizontal[row][col]),
        (row + 1, col, horizontal[row + 1][col]),
        (row, col - 1, vertical[row][col]),
        (row, col + 1, vertical[row][col + 1]),
    ):
        if 0 <= nr < height and 0 <= nc < width and edge != EDGE_ON:
            yield nr, nc


def is_single_region(horizontal, vertical) -> bool:
    """
    True iff the on edges split the grid into the border-connected outside
    plus exactly one enclosed inside region.
    """
    horizontal, vertical = as_edge_grids(horizontal, vertical)
    height, width = vertical.shape[0], horizontal.shape[1]

    outside = np.zeros((height, width), dtype=bool)
    queue = deque()

    def seed(r, c):
        if not outside[r][c]:
            outside[r][c] = True
            queue.append((r, c))

    for row in range(height):
        if vertical[row][0] != EDGE_ON:
            seed(row, 0)
        if vertical[row][width] != EDGE_ON:
            seed(row, width - 1)
    for col in range(width):
        if horizontal[0][col] != EDGE_ON:
            seed(0, col)
        if horizontal[height][col] != EDGE_ON:
            seed(height - 1, col)

    while queue:
        row, col = queue.popleft()
        for nr, nc in _open_neighbors(row, col, horizontal, vertical, height, width):
            if not outside[nr][nc]:
                outside[nr][nc] = True
                queue.append((nr, nc))

    visited = np.zeros((height, width), dtype=bool)
    inside_regions = 0
    for row in range(height):
        for col in range(width):
            if outside[row][col] or visited[row][col]:
                continue
            inside_regions += 1
            if inside_regions > 1:
                return False
            visited[row][col] = True
            region = deque([(row, col)])
            while region:
                r, c = region.popleft()
                for nr, nc in _open_neighbors(r, c, horizontal, vertical, height, width):
                    if not outside[nr][nc] and not visited[nr][nc]:
                        visited[nr][nc] = True
                        region.append((nr, nc))

    return inside_regions == 1


def is_inside_connected(inside: np.ndarray) -> bool:
    """True when the True cells of *inside* form one 4-connected region (or there are none)."""
    cells = np.argwhere(inside)
    if len(cells) == 0:
        return True
    height, width = inside.shape
    start = (int(cells[0][0]), int(cells[0][1]))
    visited = {start}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if 0 <= nr < height and 0 <= nc < width and inside[nr][nc] and (nr, nc) not in visited:
                visited.add((nr, nc))
                queue.append((nr, nc))
    return len(visited) == len(cells)


def is_hex_inside_connected(inside: Collection[HexCell]) -> bool:
    if len(inside) <= 1:
        return True
    start = next(iter(inside))
    visited: Set[HexCell] = {start}
    queue = deque([start])
    while queue:
        q, r = queue.popleft()
        for n in get_neighbors(q, r):
            if n in inside and n not in visited:
                visited.add(n)
                queue.append(n)
    return len(visited) == len(inside)
