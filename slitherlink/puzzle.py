"""
Puzzle Records
==============
Immutable results of one generation call: the visible clues plus the
solution edges they were derived from.

to_dict()/from_dict() use the string key formats callers build on:
cell "q,r", edge "q1,r1|q2,r2" (smaller pair first).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

import numpy as np

from slitherlink import hex_grid
from slitherlink.graph import EDGE_CROSSED, EDGE_ON
from slitherlink.square_grid import ClueGrid, as_edge_grids, check_clue_grid


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr = np.array(arr, dtype=np.int8, copy=True)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class SquarePuzzle:
    width: int
    height: int
    clues: Tuple[Tuple[Optional[int], ...], ...]
    horizontal: np.ndarray
    vertical: np.ndarray

    @classmethod
    def create(cls, width: int, height: int, clues: ClueGrid, horizontal, vertical) -> "SquarePuzzle":
        h, v = as_edge_grids(horizontal, vertical, width, height)
        check_clue_grid(clues, width, height)
        return cls(
            width=width,
            height=height,
            clues=tuple(tuple(row) for row in clues),
            horizontal=_frozen(h),
            vertical=_frozen(v),
        )

    @property
    def clue_count(self) -> int:
        return sum(1 for row in self.clues for c in row if c is not None)

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    def clue_grid(self) -> ClueGrid:
        return [list(row) for row in self.clues]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "square",
            "width": self.width,
            "height": self.height,
            "clues": self.clue_grid(),
            "solution": {
                "horizontalEdges": self.horizontal.tolist(),
                "verticalEdges": self.vertical.tolist(),
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SquarePuzzle":
        solution = data["solution"]
        clues = data["clues"] if "clues" in data else data["numbers"]
        return cls.create(
            data["width"],
            data["height"],
            clues,
            solution.get("horizontalEdges", solution.get("horizontal")),
            solution.get("verticalEdges", solution.get("vertical")),
        )

    def render(self, show_solution: bool = False, horizontal=None, vertical=None) -> str:
        """
        ASCII drawing of the board. Lines come from *horizontal*/*vertical*
        when given (a player overlay), else from the solution when
        show_solution is set.
        """
        if horizontal is None and show_solution:
            horizontal, vertical = self.horizontal, self.vertical
        if horizontal is None:
            horizontal = np.zeros_like(self.horizontal)
            vertical = np.zeros_like(self.vertical)

        def h_seg(state):
            return "---" if state == EDGE_ON else " x " if state == EDGE_CROSSED else "   "

        def v_seg(state):
            return "|" if state == EDGE_ON else "x" if state == EDGE_CROSSED else " "

        lines = []
        for row in range(self.height + 1):
            lines.append("+" + "+".join(h_seg(s) for s in horizontal[row]) + "+")
            if row == self.height:
                break
            parts = []
            for col in range(self.width):
                clue = self.clues[row][col]
                parts.append(v_seg(vertical[row][col]) + " " + ("." if clue is None else str(clue)) + " ")
            parts.append(v_seg(vertical[row][self.width]))
            lines.append("".join(parts))
        return "\n".join(lines)


@dataclass(frozen=True, eq=False)
class HexPuzzle:
    radius: int
    cells: Tuple[hex_grid.HexCell, ...]
    clues: Mapping[hex_grid.HexCell, int]
    edges: Mapping[hex_grid.HexEdge, int]

    @classmethod
    def create(cls, radius: int, cells: List, clues: Dict, edges: Dict) -> "HexPuzzle":
        cell_list = tuple(hex_grid.normalize_cell(c) for c in cells)
        clue_map = {hex_grid.normalize_cell(k): int(v) for k, v in clues.items() if v is not None}
        return cls(
            radius=radius,
            cells=cell_list,
            clues=MappingProxyType(clue_map),
            edges=MappingProxyType(hex_grid.normalize_edge_map(edges)),
        )

    @property
    def clue_count(self) -> int:
        return len(self.clues)

    @property
    def total_cells(self) -> int:
        return len(self.cells)

    @property
    def on_edges(self) -> List[hex_grid.HexEdge]:
        return [e for e, state in self.edges.items() if state == EDGE_ON]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "hexagonal",
            "radius": self.radius,
            "cells": [{"q": q, "r": r} for q, r in self.cells],
            "clues": {hex_grid.cell_key_str(c): n for c, n in self.clues.items()},
            "solution": {
                "edges": {hex_grid.edge_key_str(e): s for e, s in self.edges.items()},
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HexPuzzle":
        cells = [
            (c["q"], c["r"]) if isinstance(c, dict) else c
            for c in data["cells"]
        ]
        clues = data["clues"] if "clues" in data else data["numbers"]
        return cls.create(data["radius"], cells, clues, data["solution"]["edges"])
