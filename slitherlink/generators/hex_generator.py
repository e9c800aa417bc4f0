"""
Hex Loop Generator
==================
Carves a random loop out of a radius-bounded hex board.

Same idea as the square generator: start with every cell inside and
carve cells that touch the outside (off the board or already carved),
keeping the inside connected and at least three cells large. The loop is
every edge between an inside cell and a cell that is not inside.

Each carved candidate is also checked with the hex loop validator before
it is accepted, and retried like the square generator on failure.
"""

import logging
import random
from typing import Dict, List, Optional, Set

from slitherlink.config import GenerationConfig
from slitherlink.generators.base import CarvingLoopGenerator
from slitherlink.graph import EDGE_EMPTY, EDGE_ON
from slitherlink.hex_grid import HexCell, HexEdge, all_edges, build_edge_graph, edge_key, generate_cells, get_neighbors
from slitherlink.regions import is_hex_inside_connected

logger = logging.getLogger(__name__)

HexEdges = Dict[HexEdge, int]


def build_hex_edges(cells: List[HexCell], inside: Set[HexCell]) -> HexEdges:
    """Edge map covering every board edge: 1 where inside meets not-inside, else 0."""
    edges = {e: EDGE_EMPTY for e in all_edges(cells)}
    for q, r in cells:
        if (q, r) not in inside:
            continue
        for n in get_neighbors(q, r):
            if n not in inside:
                edges[edge_key((q, r), n)] = EDGE_ON
    return edges


class HexLoopGenerator(CarvingLoopGenerator[HexEdges]):
    label = "hex"

    def __init__(
        self,
        radius: int,
        rng: Optional[random.Random] = None,
        config: Optional[GenerationConfig] = None,
    ):
        super().__init__(rng, config)
        self.cells = generate_cells(radius)
        self.radius = radius
        self._board = set(self.cells)
        self.last_inside: Set[HexCell] = set()

    def validate(self, edges: HexEdges) -> bool:
        return build_edge_graph(self.cells, edges).is_single_loop()

    def carve(self, force: bool = False) -> Optional[HexEdges]:
        cfg = self.config
        inside = set(self.cells)
        total_cells = len(self.cells)
        target = total_cells // cfg.carve_divisor
        carved = {}

        iterations = 0
        max_iterations = total_cells * cfg.hex_iteration_factor
        consecutive_failures = 0

        while iterations < max_iterations and len(carved) < target:
            iterations += 1

            candidates = self._boundary_cells(inside, carved)
            if not candidates:
                break

            self.rng.shuffle(candidates)
            carved_this_iteration = False

            for cell in candidates[:cfg.hex_candidates_per_iteration]:
                if cell in carved or cell not in inside:
                    continue
                inside.discard(cell)
                if not is_hex_inside_connected(inside) or len(inside) < cfg.hex_min_inside:
                    inside.add(cell)
                    continue
                carved[cell] = None
                carved_this_iteration = True
                consecutive_failures = 0
                break

            if not carved_this_iteration:
                consecutive_failures += 1
                if consecutive_failures >= cfg.hex_max_consecutive_failures:
                    break

        self._record_carve(len(carved), target)
        self.last_inside = inside
        logger.debug("hex: carved %d cells out of %d (target %d)", len(carved), total_cells, target)

        # Hex attempts are never rejected for falling short of the target.
        return build_hex_edges(self.cells, inside)

    def _boundary_cells(self, inside: Set[HexCell], carved: dict) -> List[HexCell]:
        boundary = []
        for q, r in self.cells:
            if (q, r) not in inside:
                continue
            for n in get_neighbors(q, r):
                if n not in self._board or n in carved:
                    boundary.append((q, r))
                    break
        return boundary
