"""
Generation Worker
=================
Runs puzzle generation off the calling thread so an interactive front end
stays responsive while the carving search runs.

Provides:
- GenerationWorker: one request on a background daemon thread
- generate_many: independent requests fanned out over a thread pool

Generation shares no state between requests, so no locking is needed
beyond the worker's own done/result bookkeeping.
"""

import concurrent.futures
import logging
import random
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

from slitherlink.config import GenerationConfig
from slitherlink.errors import InvalidGridError
from slitherlink.generators.puzzle_generator import PuzzleGenerator
from slitherlink.puzzle import HexPuzzle, SquarePuzzle

logger = logging.getLogger(__name__)

Puzzle = Union[SquarePuzzle, HexPuzzle]

SQUARE = "square"
HEXAGONAL = "hexagonal"


@dataclass
class GenerationRequest:
    """One puzzle to build. width/height for square, radius for hexagonal."""
    type: str = SQUARE
    width: int = 5
    height: int = 5
    radius: int = 2
    seed: Optional[int] = None

    @classmethod
    def from_message(cls, message: Dict[str, Any]) -> "GenerationRequest":
        return cls(
            type=message.get("type", SQUARE),
            width=message.get("width", 5),
            height=message.get("height", 5),
            radius=message.get("radius", 2),
            seed=message.get("seed"),
        )


def run_request(request: GenerationRequest, config: Optional[GenerationConfig] = None) -> Puzzle:
    generator = PuzzleGenerator(random.Random(request.seed), config)
    if request.type == HEXAGONAL:
        return generator.generate_hex(request.radius)
    if request.type == SQUARE:
        return generator.generate_square(request.width, request.height)
    raise InvalidGridError(f"unknown puzzle type {request.type!r}", parameter="type", value=request.type)


class GenerationWorker:
    """
    Runs one generation request in a background thread.

    Usage:
        worker = GenerationWorker(GenerationRequest(type="hexagonal", radius=3))
        worker.start()
        ...
        if worker.is_done():
            puzzle = worker.get_result()
    """

    def __init__(
        self,
        request: GenerationRequest,
        config: Optional[GenerationConfig] = None,
        on_done: Optional[Callable[[Optional[Puzzle]], None]] = None,
    ):
        self.request = request
        self.config = config
        self.on_done = on_done

        self.done_event = threading.Event()
        self._result: Optional[Puzzle] = None
        self._error: Optional[Exception] = None
        self._thread: Optional[threading.Thread] = None
        self.time_taken = 0.0

    # ── Public API ─────────────────────────────────────────────

    def start(self):
        """Launch generation in a background daemon thread."""
        self.done_event.clear()
        self._result = None
        self._error = None
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def is_done(self) -> bool:
        return self.done_event.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self.done_event.wait(timeout)

    def get_result(self) -> Optional[Puzzle]:
        """The generated puzzle, or None if not finished or failed."""
        if not self.done_event.is_set():
            return None
        return self._result

    def get_error(self) -> Optional[Exception]:
        return self._error

    # ── Internal ───────────────────────────────────────────────

    def _run(self):
        start_time = time.perf_counter()
        try:
            logger.debug("worker: starting %s generation", self.request.type)
            self._result = run_request(self.request, self.config)
            logger.debug("worker: %s generation complete", self.request.type)
        except Exception as e:
            logger.exception("worker: %s generation failed", self.request.type)
            self._error = e
        finally:
            self.time_taken = time.perf_counter() - start_time
            self.done_event.set()
            if self.on_done is not None:
                self.on_done(self._result)


def generate_many(
    requests: List[GenerationRequest],
    config: Optional[GenerationConfig] = None,
    max_workers: Optional[int] = None,
) -> List[Puzzle]:
    """Run independent requests concurrently; results keep the request order."""
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(run_request, r, config) for r in requests]
        return [f.result() for f in futures]
