from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Set
from time import perf_counter

from loguru import logger

from slidingsearch.domains.sliding_puzzle import SlidingPuzzle
from slidingsearch.search.frontier import QueuingStrategy
from slidingsearch.search.node import Node

# silent as a library; experiments.log.configure_logging turns it on
logger.disable("slidingsearch")

@dataclass
class SearchResult:
    node: Optional[Node]
    algorithm: str
    expanded: int = 0
    generated: int = 0
    duplicates: int = 0
    peak_frontier: int = 1
    time_sec: float = 0.0
    termination: str = "ok"

    @property
    def solved(self) -> bool:
        return self.node is not None

    @property
    def g(self) -> Optional[int]:
        return self.node.cost if self.node is not None else None


def best_first_search(
    initial: SlidingPuzzle,
    strategy: QueuingStrategy,
    max_expansions: Optional[int] = None,
    timeout_sec: Optional[float] = None,
    graph_search: bool = False,
) -> SearchResult:
    """
    Generic best-first search with instrumentation.

    The strategy owns the frontier ordering; this loop only pops, goal-tests,
    expands and hands the children back to the strategy. Without
    `graph_search` repeated states are re-expanded (tree search).
    """
    t0 = perf_counter()
    frontier = strategy.new_frontier(Node(initial))
    closed: Set[SlidingPuzzle] = set()
    seen_ever: Set[SlidingPuzzle] = {initial}

    expanded = 0
    generated = 0
    duplicates = 0
    peak_frontier = 1

    def finish(node: Optional[Node], termination: str) -> SearchResult:
        res = SearchResult(
            node=node, algorithm=strategy.name,
            expanded=expanded, generated=generated, duplicates=duplicates,
            peak_frontier=peak_frontier, time_sec=perf_counter() - t0,
            termination=termination,
        )
        logger.debug("{}: {} after {} expansions ({} generated, {:.4f}s)",
                     res.algorithm, termination, expanded, generated, res.time_sec)
        return res

    logger.debug("{}: searching from {}", strategy.name, initial.flat())
    while frontier:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return finish(None, "timeout")

        node = frontier.pop()
        if node.state.is_goal():
            return finish(node, "ok")

        if graph_search:
            if node.state in closed:
                continue
            closed.add(node.state)

        if max_expansions is not None and expanded >= max_expansions:
            return finish(None, "limit")
        expanded += 1

        children = [node.child(action, s) for action, s in node.state.successors()]
        for c in children:
            if c.state in seen_ever:
                duplicates += 1
            else:
                seen_ever.add(c.state)
        generated += len(children)

        frontier = strategy(frontier, children)
        peak_frontier = max(peak_frontier, len(frontier))

    return finish(None, "exhausted")


def search(
    initial: SlidingPuzzle,
    strategy: QueuingStrategy,
    max_expansions: Optional[int] = None,
    timeout_sec: Optional[float] = None,
    graph_search: bool = False,
) -> Optional[Node]:
    """Goal node reached from `initial`, or None when no solution was found."""
    return best_first_search(initial, strategy, max_expansions=max_expansions,
                             timeout_sec=timeout_sec, graph_search=graph_search).node
