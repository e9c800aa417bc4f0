"""
Generation and validation errors.
"""

from __future__ import annotations

import numbers
from typing import Any


class InvalidGridError(ValueError):
    """
    Raised when a caller hands the core structurally invalid input:
    bad grid dimensions, mis-shaped edge grids, or coordinates that
    fall outside the board.
    """

    def __init__(
        self,
        message: str,
        *,
        parameter: str | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class InvalidEdgeStateError(InvalidGridError):
    """Raised when an edge carries a value other than 0 (empty), 1 (line) or 2 (cross)."""


def require_positive_int(name: str, value: Any) -> int:
    """
    Return *value* if it is a strictly positive int, else raise InvalidGridError.

    bool is rejected even though it subclasses int.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidGridError(
            f"{name} must be an integer, got {type(value).__name__}",
            parameter=name,
            value=value,
        )
    if value < 1:
        raise InvalidGridError(f"{name} must be >= 1, got {value}", parameter=name, value=value)
    return int(value)
