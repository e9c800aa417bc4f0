"""
Hex Grid Topology
=================
Radius-bounded hexagonal board in axial coordinates (q, r).

Neighbour index i is also the index of the shared edge, and edge i runs
between corner i and corner (i + 1) % 6 where corner i sits at angle
30 + 60*i degrees from the hexagon centre:

    0: (q,   r+1)    3: (q,   r-1)
    1: (q-1, r+1)    4: (q+1, r-1)
    2: (q-1, r)      5: (q+1, r)

The generator, the number extraction and the loop validator all read this
one table.

Edges are keyed by the unordered pair of the two cells they separate,
canonicalised so the lexicographically smaller (q, r) comes first. The
neighbour may lie off the board: border edges are keyed the same way.
"""

from __future__ import annotations

import math
from typing import Dict, Iterator, List, Mapping, Tuple, Union

from slitherlink.errors import InvalidEdgeStateError, InvalidGridError, require_positive_int
from slitherlink.graph import EDGE_ON, EDGE_STATES, EdgeGraph

HexCell = Tuple[int, int]
HexEdge = Tuple[HexCell, HexCell]
VertexId = Tuple[int, int]

NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (0, 1),
    (-1, 1),
    (-1, 0),
    (0, -1),
    (1, -1),
    (1, 0),
)

UNIT_SIZE = 1.0
# Corner coordinates are scaled by this factor and rounded to integers so
# coincident corners of neighbouring cells get the same identity.
VERTEX_PRECISION = 1000

_SQRT3 = math.sqrt(3)


def generate_cells(radius: int) -> List[HexCell]:
    """All cells with |q| <= radius, |r| <= radius and |q + r| <= radius, q-major order."""
    radius = require_positive_int("radius", radius)
    return [
        (q, r)
        for q in range(-radius, radius + 1)
        for r in range(-radius, radius + 1)
        if abs(q + r) <= radius
    ]


def get_neighbors(q: int, r: int) -> List[HexCell]:
    return [(q + dq, r + dr) for dq, dr in NEIGHBOR_OFFSETS]


def edge_key(a: HexCell, b: HexCell) -> HexEdge:
    return (a, b) if a < b else (b, a)


def cell_edges(q: int, r: int) -> List[HexEdge]:
    """The six edges of a cell, in neighbour-index order."""
    return [edge_key((q, r), n) for n in get_neighbors(q, r)]


def cell_key_str(cell: HexCell) -> str:
    return f"{cell[0]},{cell[1]}"


def edge_key_str(edge: HexEdge) -> str:
    a, b = edge_key(*edge)
    return f"{cell_key_str(a)}|{cell_key_str(b)}"


def parse_cell_key(key: str) -> HexCell:
    try:
        q, r = key.split(",")
        return int(q), int(r)
    except ValueError:
        raise InvalidGridError(f"malformed cell key {key!r}", parameter="cell", value=key) from None


def parse_edge_key(key: str) -> HexEdge:
    try:
        left, right = key.split("|")
    except ValueError:
        raise InvalidGridError(f"malformed edge key {key!r}", parameter="edge", value=key) from None
    return edge_key(parse_cell_key(left), parse_cell_key(right))


def is_adjacent(a: HexCell, b: HexCell) -> bool:
    return (b[0] - a[0], b[1] - a[1]) in NEIGHBOR_OFFSETS


def normalize_cell(cell: Union[str, HexCell]) -> HexCell:
    if isinstance(cell, str):
        return parse_cell_key(cell)
    q, r = cell
    return int(q), int(r)


def normalize_edge(edge: Union[str, HexEdge]) -> HexEdge:
    if isinstance(edge, str):
        key = parse_edge_key(edge)
    else:
        a, b = edge
        key = edge_key(normalize_cell(a), normalize_cell(b))
    if not is_adjacent(*key):
        raise InvalidGridError(f"edge {key} does not join adjacent cells", parameter="edge", value=edge)
    return key


def normalize_edge_map(edges: Mapping) -> Dict[HexEdge, int]:
    """Accept tuple or "q1,r1|q2,r2" keys; return canonical tuple keys."""
    result: Dict[HexEdge, int] = {}
    for key, state in edges.items():
        if state not in EDGE_STATES:
            raise InvalidEdgeStateError(f"edge {key!r} has state {state!r}", parameter="edges", value=state)
        result[normalize_edge(key)] = int(state)
    return result


def all_edges(cells: List[HexCell]) -> List[HexEdge]:
    """Every edge of every cell on the board, including border edges, each once."""
    seen = {}
    for q, r in cells:
        for e in cell_edges(q, r):
            seen.setdefault(e, None)
    return list(seen)


def axial_to_pixel(q: int, r: int, size: float = UNIT_SIZE) -> Tuple[float, float]:
    x = size * (_SQRT3 * q + _SQRT3 / 2 * r)
    y = size * (1.5 * r)
    return x, y


def hex_corners(q: int, r: int, size: float = UNIT_SIZE) -> List[Tuple[float, float]]:
    cx, cy = axial_to_pixel(q, r, size)
    corners = []
    for i in range(6):
        angle = math.pi / 6 + (math.pi / 3) * i
        corners.append((cx + size * math.cos(angle), cy + size * math.sin(angle)))
    return corners


def vertex_id(point: Tuple[float, float]) -> VertexId:
    x, y = point
    return int(round(x * VERTEX_PRECISION)), int(round(y * VERTEX_PRECISION))


def on_edge_vertices(cells: List[HexCell], edges: Mapping[HexEdge, int]) -> Iterator[Tuple[VertexId, VertexId]]:
    for q, r in cells:
        corners = None
        for i, e in enumerate(cell_edges(q, r)):
            if edges.get(e) != EDGE_ON:
                continue
            if corners is None:
                corners = [vertex_id(p) for p in hex_corners(q, r)]
            yield corners[i], corners[(i + 1) % 6]


def build_edge_graph(cells: List[HexCell], edges: Mapping[HexEdge, int]) -> EdgeGraph:
    return EdgeGraph(on_edge_vertices(cells, edges))


def count_lines_around_cell(edges: Mapping[HexEdge, int], q: int, r: int) -> int:
    return sum(1 for e in cell_edges(q, r) if edges.get(e) == EDGE_ON)
