"""
Loop Generator Interface
========================
Shared retry policy for the carving generators.

A generator carves a candidate region, validates the boundary it produced,
and retries up to config.max_attempts times. When every attempt fails it
runs one final carve with force=True, which always yields an edge set.
Randomness never surfaces as an error.
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from slitherlink.config import GenerationConfig, ensure_rng, resolve_config

logger = logging.getLogger(__name__)

EdgesT = TypeVar("EdgesT")


@dataclass
class GenerationStats:
    """Bookkeeping from the most recent generate() call."""
    attempts: int = 0
    carved: int = 0
    target: int = 0
    fell_back: bool = False


class CarvingLoopGenerator(ABC, Generic[EdgesT]):
    label = "loop"

    def __init__(self, rng: Optional[random.Random] = None, config: Optional[GenerationConfig] = None):
        self.rng = ensure_rng(rng)
        self.config = config or resolve_config()
        self.last_stats = GenerationStats()

    @abstractmethod
    def carve(self, force: bool = False) -> Optional[EdgesT]:
        """
        Run one carving pass. Returns None when too few cells were carved,
        unless *force* is set, in which case the edges are returned anyway.
        """

    @abstractmethod
    def validate(self, edges: EdgesT) -> bool:
        """Global acceptance test applied to each carved candidate."""

    def generate(self) -> EdgesT:
        self.last_stats = GenerationStats()
        max_attempts = self.config.max_attempts

        for attempt in range(1, max_attempts + 1):
            self.last_stats.attempts = attempt
            logger.debug("%s: generation attempt %d/%d", self.label, attempt, max_attempts)

            edges = self.carve()
            if edges is None:
                logger.debug("%s: carving fell short of target, retrying", self.label)
                continue
            if not self.validate(edges):
                logger.debug("%s: validation failed, multiple enclosed regions detected", self.label)
                continue

            logger.debug("%s: validation passed after %d attempt(s)", self.label, attempt)
            return edges

        logger.warning(
            "%s: all %d attempts failed, running one unconditional carving pass",
            self.label, max_attempts,
        )
        self.last_stats.fell_back = True
        return self.carve(force=True)

    def _record_carve(self, carved: int, target: int) -> None:
        self.last_stats.carved = carved
        self.last_stats.target = target
