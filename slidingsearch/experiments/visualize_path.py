#!/usr/bin/env python3
import argparse, os, random
from pathlib import Path
from typing import List, Optional, Sequence

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt
from loguru import logger

from slidingsearch.domains.sliding_puzzle import SlidingPuzzle
from slidingsearch.experiments.log import configure_logging
from slidingsearch.search.best_first import search
from slidingsearch.search.frontier import STRATEGIES, get_strategy
from slidingsearch.search.path import reconstruct_path

def draw_board(puzzle: SlidingPuzzle, out_path: Path, title: Optional[str] = None):
    n = puzzle.size
    plt.figure(figsize=(3, 3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n + 1):
        ax.plot([0, n], [i, i], linewidth=1)
        ax.plot([i, i], [0, n], linewidth=1)
    # tiles
    for (r, c), t in puzzle.state.items():
        if t == 0: continue
        ax.text(c + 0.5, r + 0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def main(argv: Optional[Sequence[str]] = None) -> List[Path]:
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--algo", choices=sorted(STRATEGIES), default="astar-manhattan")
    p.add_argument("--size", type=int, default=3)
    p.add_argument("--depth", type=int, default=10, help="Scramble length")
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--max_expansions", type=int, default=200000)
    p.add_argument("--outdir", type=Path, default=Path("results/figs/example_path"))
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)
    configure_logging(args.verbose)

    start = SlidingPuzzle(args.size).scramble(args.depth, random.Random(args.seed))
    goal_node = search(start, get_strategy(args.algo), max_expansions=args.max_expansions)
    if goal_node is None:
        logger.warning("No path (cap hit or exhausted). Try smaller depth.")
        return []

    frames: List[Path] = []
    for i, node in enumerate(reconstruct_path(goal_node)):
        out = args.outdir / f"step_{i:03d}.png"
        draw_board(node.state, out, title=node.action or "start")
        frames.append(out)
    logger.info("Saved {} frames to {}", len(frames), args.outdir)
    return frames

if __name__ == "__main__":
    main()
