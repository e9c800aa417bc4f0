"""
Presentation Chart Generator
=============================
Generates charts describing the square and hexagonal puzzle generators.
Run:  python generate_presentation_charts.py --games 5
Output: presentation_charts/ folder with 5 PNG files.
"""

import sys
import os
import random
import argparse
import numpy as np
from typing import Dict, Any, List
from collections import defaultdict

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for file output
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon

from benchmark_generators import run_benchmark
from slitherlink import hex_grid
from slitherlink.config import DEFAULT_CONFIG
from slitherlink.generators import PuzzleGenerator

# ──────────────────────────────────────────────────────────────
# Color Palette & Styling
# ──────────────────────────────────────────────────────────────
COLORS = {
    "square": "#FF6B6B",   # Coral Red
    "hex":    "#339AF0",   # Sky Blue
}
BOARD_LABELS = {"square": "Square", "hex": "Hexagonal"}
BG_COLOR = "#1A1B26"       # Tokyo Night background
CARD_COLOR = "#24283B"     # Card panels
TEXT_COLOR = "#C0CAF5"     # Soft lavender text
GRID_COLOR = "#414868"     # Subtle grid lines
ACCENT_GOLD = "#E0AF68"   # Gold accent


def setup_style():
    """Apply a dark, presentation-friendly matplotlib style."""
    plt.rcParams.update({
        "figure.facecolor": BG_COLOR,
        "axes.facecolor": CARD_COLOR,
        "axes.edgecolor": GRID_COLOR,
        "axes.labelcolor": TEXT_COLOR,
        "axes.titleweight": "bold",
        "text.color": TEXT_COLOR,
        "xtick.color": TEXT_COLOR,
        "ytick.color": TEXT_COLOR,
        "grid.color": GRID_COLOR,
        "grid.alpha": 0.3,
        "font.size": 13,
        "axes.titlesize": 16,
        "axes.labelsize": 13,
        "legend.facecolor": CARD_COLOR,
        "legend.edgecolor": GRID_COLOR,
        "legend.fontsize": 11,
        "figure.dpi": 180,
        "savefig.dpi": 180,
        "savefig.bbox": "tight",
        "savefig.facecolor": BG_COLOR,
    })


def group_results(results: List[Dict[str, Any]]) -> Dict[str, Dict[int, List[Dict[str, Any]]]]:
    grouped = defaultdict(lambda: defaultdict(list))
    for r in results:
        grouped[r["board"]][r["size"]].append(r)
    return grouped


def _clean_axes(ax):
    ax.grid(axis="y", zorder=0)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)


# ──────────────────────────────────────────────────────────────
# Chart Generators
# ──────────────────────────────────────────────────────────────
def add_value_labels(ax, bars, fmt="{:.0f}%", offset=1.5):
    """Add value labels on top of bars."""
    for bar in bars:
        h = bar.get_height()
        if h > 0:
            ax.text(bar.get_x() + bar.get_width() / 2, h + offset,
                    fmt.format(h), ha="center", va="bottom",
                    fontsize=9, fontweight="bold", color=TEXT_COLOR)


def chart_1_timing(grouped, out_dir):
    """Line chart: average generation time against board cell count."""
    fig, ax = plt.subplots(figsize=(10, 6))
    for board, by_size in grouped.items():
        sizes = sorted(by_size)
        cells = [by_size[s][0]["cells"] for s in sizes]
        times = [np.mean([r["time"] for r in by_size[s]]) * 1000 for s in sizes]
        ax.plot(cells, times, marker="o", linewidth=2.5, markersize=8,
                color=COLORS[board], label=BOARD_LABELS[board], zorder=3)

    ax.set_xlabel("Cells on board")
    ax.set_ylabel("Average Time (ms)")
    ax.set_title("Generation Time by Board Size", fontsize=18, pad=15)
    ax.legend(loc="upper left")
    _clean_axes(ax)

    fig.savefig(os.path.join(out_dir, "1_generation_time.png"))
    plt.close(fig)
    print("  ✓ Chart 1: Generation Time")


def chart_2_clue_density(grouped, out_dir):
    """Bar chart: average clue density per configuration with the cap drawn in."""
    fig, ax = plt.subplots(figsize=(10, 6))
    caps = {"square": DEFAULT_CONFIG.square_clue_cap, "hex": DEFAULT_CONFIG.hex_clue_cap}

    labels, densities, colors = [], [], []
    for board, by_size in grouped.items():
        for size in sorted(by_size):
            labels.append(f"{BOARD_LABELS[board]}\n{size}")
            densities.append(100 * np.mean([r["clue_density"] for r in by_size[size]]))
            colors.append(COLORS[board])

    x = np.arange(len(labels))
    bars = ax.bar(x, densities, 0.6, color=colors, edgecolor="none", alpha=0.9, zorder=3)
    add_value_labels(ax, bars, fmt="{:.0f}%", offset=1.0)

    for board, cap in caps.items():
        if board in grouped:
            ax.axhline(100 * cap, color=COLORS[board], linestyle="--", linewidth=1.5,
                       label=f"{BOARD_LABELS[board]} cap", zorder=2)

    ax.set_xticks(x)
    ax.set_xticklabels(labels, fontsize=10)
    ax.set_ylabel("Clued cells (%)")
    ax.set_ylim(0, 80)
    ax.set_title("Clue Density against Cap", fontsize=18, pad=15)
    ax.legend(loc="upper right")
    _clean_axes(ax)

    fig.savefig(os.path.join(out_dir, "2_clue_density.png"))
    plt.close(fig)
    print("  ✓ Chart 2: Clue Density")


def chart_3_clue_values(results, out_dir):
    """Histogram: which numbers survive clue selection."""
    fig, ax = plt.subplots(figsize=(10, 6))
    width = 0.38
    values = np.arange(7)

    for i, board in enumerate(["square", "hex"]):
        shown = [v for r in results if r["board"] == board for v in r["clue_values"]]
        if not shown:
            continue
        counts = np.bincount(shown, minlength=7)[:7]
        share = 100 * counts / counts.sum()
        bars = ax.bar(values + (i - 0.5) * width, share, width, label=BOARD_LABELS[board],
                      color=COLORS[board], edgecolor="none", alpha=0.9, zorder=3)
        add_value_labels(ax, bars, fmt="{:.0f}%", offset=0.5)

    ax.set_xticks(values)
    ax.set_xlabel("Clue value")
    ax.set_ylabel("Share of shown clues (%)")
    ax.set_title("Distribution of Shown Clues", fontsize=18, pad=15)
    ax.legend(loc="upper right")
    _clean_axes(ax)

    fig.savefig(os.path.join(out_dir, "3_clue_values.png"))
    plt.close(fig)
    print("  ✓ Chart 3: Clue Values")


def chart_4_square_example(out_dir, size=7, seed=1):
    """Draws one square puzzle with its solution loop."""
    puzzle = PuzzleGenerator(random.Random(seed)).generate_square(size, size)
    fig, ax = plt.subplots(figsize=(7, 7))

    for y in range(puzzle.height + 1):
        for x in range(puzzle.width + 1):
            ax.plot(x, y, "o", color=GRID_COLOR, markersize=4, zorder=2)

    for r in range(puzzle.height + 1):
        for c in range(puzzle.width):
            if puzzle.horizontal[r][c] == 1:
                ax.plot([c, c + 1], [r, r], color=ACCENT_GOLD, linewidth=3, zorder=3)
    for r in range(puzzle.height):
        for c in range(puzzle.width + 1):
            if puzzle.vertical[r][c] == 1:
                ax.plot([c, c], [r, r + 1], color=ACCENT_GOLD, linewidth=3, zorder=3)

    for r, row in enumerate(puzzle.clues):
        for c, clue in enumerate(row):
            if clue is not None:
                ax.text(c + 0.5, r + 0.5, str(clue), ha="center", va="center",
                        fontsize=14, fontweight="bold", color=TEXT_COLOR)

    ax.set_xlim(-0.5, puzzle.width + 0.5)
    ax.set_ylim(puzzle.height + 0.5, -0.5)
    ax.set_aspect("equal")
    ax.axis("off")
    ax.set_title(f"Square {size}x{size}  ({puzzle.clue_count} clues)", fontsize=16, pad=10)

    fig.savefig(os.path.join(out_dir, "4_square_example.png"))
    plt.close(fig)
    print("  ✓ Chart 4: Square Example")


def chart_5_hex_example(out_dir, radius=3, seed=1):
    """Draws one hexagonal puzzle with its solution loop."""
    puzzle = PuzzleGenerator(random.Random(seed)).generate_hex(radius)
    fig, ax = plt.subplots(figsize=(8, 8))

    for q, r in puzzle.cells:
        corners = hex_grid.hex_corners(q, r)
        ax.add_patch(Polygon(corners, closed=True, facecolor=CARD_COLOR,
                             edgecolor=GRID_COLOR, linewidth=1, zorder=1))
        for i, e in enumerate(hex_grid.cell_edges(q, r)):
            if puzzle.edges.get(e) == 1:
                (x1, y1), (x2, y2) = corners[i], corners[(i + 1) % 6]
                ax.plot([x1, x2], [y1, y2], color=ACCENT_GOLD, linewidth=3, zorder=3)
        clue = puzzle.clues.get((q, r))
        if clue is not None:
            cx, cy = hex_grid.axial_to_pixel(q, r)
            ax.text(cx, cy, str(clue), ha="center", va="center",
                    fontsize=13, fontweight="bold", color=TEXT_COLOR, zorder=4)

    ax.autoscale_view()
    ax.set_aspect("equal")
    ax.invert_yaxis()
    ax.axis("off")
    ax.set_title(f"Hexagonal radius {radius}  ({puzzle.clue_count} clues)", fontsize=16, pad=10)

    fig.savefig(os.path.join(out_dir, "5_hex_example.png"))
    plt.close(fig)
    print("  ✓ Chart 5: Hex Example")


# ──────────────────────────────────────────────────────────────
# Summary
# ──────────────────────────────────────────────────────────────
def print_summary(grouped):
    print("\n" + "=" * 64)
    print("  GENERATION SUMMARY")
    print("=" * 64)
    print(f"  {'Config':<14} {'Loops OK':>9} {'Avg ms':>9} {'Clues %':>9} {'Fallbacks':>10}")
    print("  " + "-" * 55)
    for board, by_size in grouped.items():
        for size in sorted(by_size):
            rows = by_size[size]
            ok = sum(1 for r in rows if r["loop_valid"])
            avg_ms = 1000 * np.mean([r["time"] for r in rows])
            density = 100 * np.mean([r["clue_density"] for r in rows])
            fallbacks = sum(1 for r in rows if r["fell_back"])
            name = f"{board} {size}"
            print(f"  {name:<14} {ok:>4}/{len(rows):<4} {avg_ms:>9.1f} {density:>9.1f} {fallbacks:>10}")
    print("=" * 64 + "\n")


def main():
    parser = argparse.ArgumentParser(description="Generate Presentation Charts")
    parser.add_argument("--games", type=int, default=5,
                        help="Puzzles per configuration (default: 5)")
    parser.add_argument("--seed", type=int, default=0,
                        help="Base seed (default: 0)")
    parser.add_argument("--quick", action="store_true",
                        help="Quick mode: fewer configs for faster testing")
    args = parser.parse_args()

    out_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                           "presentation_charts")
    os.makedirs(out_dir, exist_ok=True)

    setup_style()

    if args.quick:
        configs = [("square", 5), ("hex", 2)]
    else:
        configs = [("square", s) for s in (4, 6, 8, 10, 12, 15)] + \
                  [("hex", r) for r in (1, 2, 3, 4, 5)]

    print(f"  Puzzles per config : {args.games}")
    print(f"  Configurations     : {len(configs)}")
    print(f"  Output folder      : {out_dir}")
    print()

    print("Phase 1/2: Generating Puzzles...")
    results = run_benchmark(args.games, configs, args.seed)
    grouped = group_results(results)

    print("\nPhase 2/2: Generating Charts...")
    chart_1_timing(grouped, out_dir)
    chart_2_clue_density(grouped, out_dir)
    chart_3_clue_values(results, out_dir)
    chart_4_square_example(out_dir, seed=args.seed)
    chart_5_hex_example(out_dir, seed=args.seed)

    print_summary(grouped)
    print(f"All 5 charts saved to: {out_dir}")


if __name__ == "__main__":
    main()
