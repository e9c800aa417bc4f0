"""
Edge Graph
==========
Adjacency map from vertex identity to the set of vertices it connects to
through "on" edges. Vertex identity is topology specific: integer grid
points (row, col) for the square grid, rounded corner coordinates for the
hex grid. The graph only ever holds edges whose state is EDGE_ON.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Hashable, Iterable, List, Set, Tuple

EDGE_EMPTY = 0
EDGE_ON = 1
EDGE_CROSSED = 2
EDGE_STATES = (EDGE_EMPTY, EDGE_ON, EDGE_CROSSED)

Vertex = Hashable


class EdgeGraph:
    def __init__(self, edges: Iterable[Tuple[Vertex, Vertex]] = ()):
        self.adj_list: Dict[Vertex, Set[Vertex]] = {}
        for u, v in edges:
            self.add_edge(u, v)

    def add_edge(self, u: Vertex, v: Vertex) -> None:
        self.adj_list.setdefault(u, set()).add(v)
        self.adj_list.setdefault(v, set()).add(u)

    @property
    def vertices(self) -> List[Vertex]:
        return list(self.adj_list)

    @property
    def edge_count(self) -> int:
        return sum(len(n) for n in self.adj_list.values()) // 2

    def get_degree(self, v: Vertex) -> int:
        return len(self.adj_list.get(v, ()))

    def is_empty(self) -> bool:
        return not self.adj_list

    def all_degree_two(self) -> bool:
        """True when every touched vertex has exactly two neighbours."""
        return all(len(n) == 2 for n in self.adj_list.values())

    def reachable_from(self, start: Vertex) -> Set[Vertex]:
        visited = {start}
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in self.adj_list[u]:
                if v not in visited:
                    visited.add(v)
                    queue.append(v)
        return visited

    def components(self) -> List[Set[Vertex]]:
        """Connected components, in first-seen vertex order."""
        seen: Set[Vertex] = set()
        result = []
        for v in self.adj_list:
            if v in seen:
                continue
            comp = self.reachable_from(v)
            seen |= comp
            result.append(comp)
        return result

    def count_closed_loops(self) -> int:
        """
        Number of components that are themselves simple cycles
        (every vertex in the component has degree 2).
        """
        return sum(
            1 for comp in self.components()
            if all(len(self.adj_list[v]) == 2 for v in comp)
        )

    def is_single_loop(self) -> bool:
        """
        Exactly one simple closed loop: non-empty, every vertex degree 2,
        and a BFS from any vertex reaches all of them.
        """
        if self.is_empty():
            return False
        if not self.all_degree_two():
            return False
        vertices = self.vertices
        return len(self.reachable_from(vertices[0])) == len(vertices)
