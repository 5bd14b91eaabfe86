#!/usr/bin/env python3
from __future__ import annotations
import argparse, random
from typing import List, Optional, Sequence

from loguru import logger

from slidingsearch.domains.sliding_puzzle import SlidingPuzzle
from slidingsearch.experiments.log import configure_logging
from slidingsearch.search.best_first import SearchResult, best_first_search
from slidingsearch.search.frontier import STRATEGIES, get_strategy, resolve_strategies
from slidingsearch.search.path import format_solution

def parse_tiles(text: str, size: int) -> SlidingPuzzle:
    """Build a puzzle from whitespace/comma separated tile values."""
    parts = text.replace(",", " ").split()
    try:
        flat = [int(x) for x in parts]
    except ValueError:
        raise ValueError(f"Tiles must be integers, got {text!r}") from None
    return SlidingPuzzle(size).set_state(flat)

def prompt_tiles(size: int, input_fn=input) -> SlidingPuzzle:
    """Ask for tile values row by row (0 for the blank)."""
    print(f"Enter the {size}x{size} puzzle row by row, 0 for the blank:")
    values: List[str] = []
    for r in range(size):
        values.append(input_fn(f"row {r + 1}: "))
    return parse_tiles(" ".join(values), size)

def run_search(name: str, start: SlidingPuzzle, args) -> SearchResult:
    strategy = get_strategy(name)
    print(f"Running {strategy.name}")
    res = best_first_search(start, strategy, max_expansions=args.max_expansions,
                            timeout_sec=args.timeout_sec, graph_search=args.graph_search)
    print(f"{strategy.name} Time: {res.time_sec * 1000:.0f} ms")
    if res.node is None:
        print(f"{strategy.name}: No solution found.")
        if res.termination != "exhausted":
            logger.warning("{} stopped early ({}) after {} expansions",
                           strategy.name, res.termination, res.expanded)
    elif args.quiet:
        print(f"Solution found in {res.node.depth} steps.")
    else:
        print(format_solution(res.node))
    logger.info("{}: expanded={} generated={} peak_frontier={}",
                strategy.name, res.expanded, res.generated, res.peak_frontier)
    return res

def main(argv: Optional[Sequence[str]] = None) -> List[SearchResult]:
    ap = argparse.ArgumentParser(description="Solve an N-puzzle with uniform-cost and A* search")
    ap.add_argument("--size", type=int, default=3, help="Board dimension (N×N)")
    ap.add_argument("--scramble", type=int, default=10, help="Random moves applied to the goal")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the scramble")
    ap.add_argument("--tiles", default=None, help="Custom start, row-major, e.g. '1 2 3 4 5 6 7 0 8'")
    ap.add_argument("--interactive", action="store_true", help="Prompt for the start tiles")
    ap.add_argument("--algo", nargs="+", choices=sorted(STRATEGIES) + ["all"], default=["all"],
                    help="One or more strategies; 'all' runs every registered strategy")
    ap.add_argument("--max_expansions", type=int, default=None, help="Stop after this many expansions")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-search wall time")
    ap.add_argument("--graph_search", action="store_true", help="Skip states already expanded")
    ap.add_argument("--quiet", action="store_true", help="Do not print the solution trace")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.tiles is not None:
            start = parse_tiles(args.tiles, args.size)
        elif args.interactive:
            start = prompt_tiles(args.size)
        else:
            start = SlidingPuzzle(args.size).scramble(args.scramble, random.Random(args.seed))
    except ValueError as e:
        logger.error("{}", e)
        ap.error(str(e))

    if not start.is_solvable():
        logger.warning("Start state is not solvable; search will exhaust or hit a cap")

    print("Initial puzzle:")
    print(start.render())

    return [run_search(n, start, args) for n in resolve_strategies(args.algo)]

if __name__ == "__main__":
    main()
