import unittest
import sys
import os
import threading

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from slitherlink.errors import InvalidGridError
from slitherlink.generation_worker import (
    HEXAGONAL,
    SQUARE,
    GenerationRequest,
    GenerationWorker,
    generate_many,
    run_request,
)
from slitherlink.puzzle import HexPuzzle, SquarePuzzle


class TestGenerationWorker(unittest.TestCase):

    def test_square_in_background(self):
        worker = GenerationWorker(GenerationRequest(type=SQUARE, width=5, height=4, seed=1))
        worker.start()
        self.assertTrue(worker.wait(timeout=30))
        self.assertTrue(worker.is_done())
        puzzle = worker.get_result()
        self.assertIsInstance(puzzle, SquarePuzzle)
        self.assertEqual((puzzle.width, puzzle.height), (5, 4))
        self.assertIsNone(worker.get_error())
        self.assertGreater(worker.time_taken, 0)

    def test_callback_receives_puzzle(self):
        received = []
        called = threading.Event()

        def on_done(puzzle):
            received.append(puzzle)
            called.set()

        worker = GenerationWorker(GenerationRequest(type=HEXAGONAL, radius=2, seed=4), on_done=on_done)
        worker.start()
        self.assertTrue(called.wait(timeout=30))
        self.assertIsInstance(received[0], HexPuzzle)

    def test_error_is_captured(self):
        worker = GenerationWorker(GenerationRequest(type=SQUARE, width=0, height=3))
        worker.start()
        worker.wait(timeout=30)
        self.assertIsNone(worker.get_result())
        self.assertIsInstance(worker.get_error(), InvalidGridError)

    def test_unknown_type(self):
        with self.assertRaises(InvalidGridError):
            run_request(GenerationRequest(type="triangle"))

    def test_from_message(self):
        request = GenerationRequest.from_message({"type": "hexagonal", "radius": 3})
        self.assertEqual(request.type, HEXAGONAL)
        self.assertEqual(request.radius, 3)
        self.assertIsNone(request.seed)

    def test_generate_many_keeps_order(self):
        requests = [
            GenerationRequest(type=SQUARE, width=3, height=3, seed=1),
            GenerationRequest(type=HEXAGONAL, radius=1, seed=2),
            GenerationRequest(type=SQUARE, width=6, height=2, seed=3),
        ]
        puzzles = generate_many(requests, max_workers=2)
        self.assertIsInstance(puzzles[0], SquarePuzzle)
        self.assertIsInstance(puzzles[1], HexPuzzle)
        self.assertEqual((puzzles[2].width, puzzles[2].height), (6, 2))

    def test_seeded_requests_repeat(self):
        request = GenerationRequest(type=SQUARE, width=5, height=5, seed=77)
        self.assertEqual(run_request(request).clues, run_request(request).clues)


if __name__ == '__main__':
    unittest.main()
