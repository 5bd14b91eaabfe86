#!/usr/bin/env python3
from __future__ import annotations
import argparse, csv, random
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from loguru import logger

from slidingsearch.domains.sliding_puzzle import SlidingPuzzle
from slidingsearch.experiments.log import configure_logging
from slidingsearch.search.best_first import SearchResult, best_first_search
from slidingsearch.search.frontier import STRATEGIES, get_strategy, resolve_strategies

HEADER = [
    "algorithm", "size", "depth", "seed",
    "expanded", "generated", "duplicates", "g", "time_sec",
    "peak_frontier", "termination",
]

@dataclass
class Instance:
    seed: int
    depth: int
    state: SlidingPuzzle

def generate_instances(size: int, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    """Seeded scrambles of the goal, `per_depth` per scramble length."""
    out: List[Instance] = []
    seed = start_seed
    goal = SlidingPuzzle(size)
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = goal.scramble(d, random.Random(seed))
            attempts += 1
            if s.is_solvable():
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            seed += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out

def result_row(res: SearchResult, inst: Instance) -> list:
    return [
        res.algorithm, inst.state.size, inst.depth, inst.seed,
        res.expanded, res.generated, res.duplicates,
        "" if res.g is None else res.g,
        f"{res.time_sec:.6f}",
        res.peak_frontier, res.termination,
    ]

def run_batch(insts: List[Instance], algos: List[str], out: Path,
              max_expansions: Optional[int] = None, timeout_sec: Optional[float] = None,
              graph_search: bool = False) -> int:
    out.parent.mkdir(parents=True, exist_ok=True)
    rows = 0
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            for name in algos:
                r = best_first_search(inst.state, get_strategy(name), max_expansions=max_expansions,
                                      timeout_sec=timeout_sec, graph_search=graph_search)
                w.writerow(result_row(r, inst))
                rows += 1
            logger.debug("instance seed={} depth={} done", inst.seed, inst.depth)
    return rows

def main(argv: Optional[Sequence[str]] = None) -> Path:
    ap = argparse.ArgumentParser(description="Uniform-cost / A* N-puzzle experiment runner")
    ap.add_argument("--size", type=int, default=3)
    ap.add_argument("--algo", nargs="+", choices=sorted(STRATEGIES) + ["all"], default=["all"],
                    help="One or more strategies; 'all' runs every registered strategy")
    ap.add_argument("--depths", type=int, nargs="+", default=[2, 4, 6, 8])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--start_seed", type=int, default=0)
    ap.add_argument("--max_expansions", type=int, default=200000)
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--graph_search", action="store_true")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    algos = resolve_strategies(args.algo)
    try:
        insts = generate_instances(args.size, args.depths, args.per_depth, args.start_seed)
    except ValueError as e:
        logger.error("{}", e)
        ap.error(str(e))
    n = run_batch(insts, algos, args.out, args.max_expansions, args.timeout_sec, args.graph_search)
    logger.info("Wrote {} ({} instances, {} rows)", args.out, len(insts), n)
    return args.out

if __name__ == "__main__":
    main()
