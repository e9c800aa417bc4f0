import sys
import os
import csv
import random
import logging
import argparse
from typing import Dict, Any, List

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from slitherlink.generators import PuzzleGenerator
from slitherlink.validators import is_single_loop_hex, is_single_loop_square
from slitherlink.puzzle import SquarePuzzle


def run_single_generation(game_id: int, board: str, size: int, seed: int) -> Dict[str, Any]:
    """
    Generates one puzzle and records how the generator got there.
    size is the side length for square boards and the radius for hex boards.
    """
    generator = PuzzleGenerator(random.Random(seed))

    if board == "square":
        puzzle = generator.generate_square(size, size)
        loop_ok = is_single_loop_square(puzzle.horizontal, puzzle.vertical)
        solution_edges = int(puzzle.horizontal.sum() + puzzle.vertical.sum())
    else:
        puzzle = generator.generate_hex(size)
        loop_ok = is_single_loop_hex(puzzle.cells, puzzle.edges)
        solution_edges = len(puzzle.on_edges)

    stats = generator.last_stats
    return {
        "game_id": game_id,
        "board": board,
        "size": size,
        "seed": seed,
        "cells": puzzle.total_cells,
        "clues": puzzle.clue_count,
        "clue_density": puzzle.clue_count / puzzle.total_cells,
        "solution_edges": solution_edges,
        "loop_valid": loop_ok,
        "attempts": stats.attempts,
        "carved": stats.carved,
        "target": stats.target,
        "fell_back": stats.fell_back,
        "time": generator.last_elapsed,
        "clue_values": _clue_values(puzzle),
    }


def _clue_values(puzzle) -> List[int]:
    if isinstance(puzzle, SquarePuzzle):
        return [c for row in puzzle.clues for c in row if c is not None]
    return list(puzzle.clues.values())


def run_benchmark(games: int, configs: List[tuple], base_seed: int = 0) -> List[Dict[str, Any]]:
    """configs: list of (board, size)."""
    results = []
    total = games * len(configs)
    done = 0
    for board, size in configs:
        for g in range(games):
            done += 1
            print(f"  [{done}/{total}] {board} {size} game {g + 1}/{games} ...", end="\r")
            results.append(run_single_generation(done, board, size, base_seed + done))
    print()
    return results


def print_summary(results: List[Dict[str, Any]]):
    print("\nSummary Statistics:")
    print(f"{'Board':<8} | {'Size':>4} | {'Loops OK':>8} | {'Avg Time (s)':>12} | {'Avg Density':>11} | {'Fallbacks':>9}")
    print("-" * 68)

    keys = []
    for r in results:
        if (r["board"], r["size"]) not in keys:
            keys.append((r["board"], r["size"]))

    for board, size in keys:
        rows = [r for r in results if r["board"] == board and r["size"] == size]
        ok = sum(1 for r in rows if r["loop_valid"])
        avg_time = sum(r["time"] for r in rows) / len(rows)
        avg_density = sum(r["clue_density"] for r in rows) / len(rows)
        fallbacks = sum(1 for r in rows if r["fell_back"])
        print(f"{board:<8} | {size:>4} | {ok:>3}/{len(rows):<4} | {avg_time:>12.4f} | {avg_density:>11.2f} | {fallbacks:>9}")


def main():
    parser = argparse.ArgumentParser(description="Benchmark Slitherlink Generators")
    parser.add_argument("--games", type=int, default=10, help="Puzzles per configuration")
    parser.add_argument("--sizes", type=int, nargs="+", default=[5, 7, 10], help="Square side lengths")
    parser.add_argument("--radii", type=int, nargs="+", default=[2, 3, 4], help="Hex radii")
    parser.add_argument("--seed", type=int, default=0, help="Base seed")
    parser.add_argument("--output", type=str, default="benchmark_results.csv", help="Output CSV file")
    parser.add_argument("--show", action="store_true", help="Print the first square puzzle with its solution")
    parser.add_argument("--verbose", action="store_true", help="Log generator progress")

    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    configs = [("square", s) for s in args.sizes] + [("hex", r) for r in args.radii]
    print(f"Starting Benchmark: {args.games} puzzles x {len(configs)} configurations")

    results = run_benchmark(args.games, configs, args.seed)

    invalid = sum(1 for r in results if not r["loop_valid"])
    print(f"Benchmark Complete! Invalid loops: {invalid}/{len(results)}")

    fieldnames = [k for k in results[0].keys() if k != "clue_values"]
    with open(args.output, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(results)
    print(f"Results saved to {args.output}")

    print_summary(results)

    if args.show and args.sizes:
        generator = PuzzleGenerator(random.Random(args.seed))
        puzzle = generator.generate_square(args.sizes[0], args.sizes[0])
        print()
        print(puzzle.render())
        print()
        print(puzzle.render(show_solution=True))


if __name__ == "__main__":
    main()
