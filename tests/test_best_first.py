import importlib

import pytest
from loguru import logger

from slidingsearch.domains.sliding_puzzle import SlidingPuzzle
from slidingsearch.experiments.log import configure_logging
from slidingsearch.search import best_first
from slidingsearch.search.best_first import best_first_search, search
from slidingsearch.search.frontier import STRATEGIES, get_strategy
from slidingsearch.search.path import actions, reconstruct_path

ALL = sorted(STRATEGIES)


@pytest.mark.parametrize("name", ALL)
def test_goal_start_needs_no_moves(name):
    node = search(SlidingPuzzle(3), get_strategy(name))
    assert node is not None
    assert node.depth == 0 and node.cost == 0
    assert node.parent is None and node.action is None


@pytest.mark.parametrize("name", ALL)
def test_single_left_move_is_undone(name):
    start = SlidingPuzzle(3).move("LEFT")
    node = search(start, get_strategy(name))
    assert node.depth == 1
    assert actions(node) == ["RIGHT"]
    assert node.parent.state == start


@pytest.mark.parametrize("seed", range(8))
def test_all_strategies_find_shortest_path(scrambled, bfs_distance, seed):
    start = scrambled(3, 7, seed)
    d = bfs_distance(start)
    for name in ALL:
        res = best_first_search(start, get_strategy(name))
        assert res.termination == "ok"
        assert res.node.depth == d, name
        assert res.g == d


def test_astar_optimal_on_fifteen_puzzle(scrambled, bfs_distance):
    start = scrambled(4, 8, 3)
    node = search(start, get_strategy("astar-manhattan"))
    assert node.depth == bfs_distance(start)


def test_path_costs_never_include_heuristic(scrambled):
    node = search(scrambled(3, 12, 5), get_strategy("astar-manhattan"))
    for n in reconstruct_path(node):
        assert n.cost == n.depth
    assert node.h == 0 and node.f == node.cost


def test_solution_path_is_legal(scrambled):
    start = scrambled(3, 10, 11)
    node = search(start, get_strategy("astar-linear"))
    s = start
    for a in actions(node):
        s = s.move(a)
        assert s is not None
    assert s.is_goal()


@pytest.mark.parametrize("name", ALL)
def test_repeat_runs_agree(scrambled, name):
    start = scrambled(3, 8, 21)
    a = best_first_search(start, get_strategy(name))
    b = best_first_search(start, get_strategy(name))
    assert (a.node.depth, a.node.cost) == (b.node.depth, b.node.cost)
    assert a.expanded == b.expanded


@pytest.mark.parametrize("name", ["ucs", "astar-manhattan", "astar-misplaced"])
def test_graph_search_same_depth(scrambled, name):
    start = scrambled(3, 9, 2)
    tree = best_first_search(start, get_strategy(name))
    graph = best_first_search(start, get_strategy(name), graph_search=True)
    assert graph.node.depth == tree.node.depth


def test_instrumentation_counts():
    start = SlidingPuzzle(3, [1, 2, 3, 4, 6, 0, 7, 5, 8])
    res = best_first_search(start, get_strategy("ucs"))
    assert res.expanded > 0
    assert res.generated >= 2 * res.expanded
    assert res.duplicates > 0
    assert res.peak_frontier >= 1
    assert res.time_sec >= 0
    assert res.algorithm == "Uniform Cost Search"
    assert res.solved


def test_max_expansions_cap():
    start = SlidingPuzzle(3).move("LEFT")
    res = best_first_search(start, get_strategy("ucs"), max_expansions=0)
    assert res.node is None and res.termination == "limit"
    assert not res.solved and res.g is None
    assert search(start, get_strategy("astar-manhattan"), max_expansions=1).depth == 1


def test_timeout():
    res = best_first_search(SlidingPuzzle(3).move("UP"), get_strategy("ucs"), timeout_sec=-1.0)
    assert res.node is None and res.termination == "timeout"


def test_unsolvable_exhausts_with_closed_set():
    start = SlidingPuzzle(2, [2, 1, 3, 0])
    assert not start.is_solvable()
    res = best_first_search(start, get_strategy("astar-manhattan"), graph_search=True)
    assert res.node is None
    assert res.termination == "exhausted"
    assert res.expanded == 12


def test_unsolvable_tree_search_stops_at_cap():
    start = SlidingPuzzle(2, [2, 1, 3, 0])
    res = best_first_search(start, get_strategy("ucs"), max_expansions=500)
    assert res.node is None and res.termination == "limit"
    assert res.expanded == 500


def test_search_logs_nothing_until_logging_is_configured():
    start = SlidingPuzzle(3).move("LEFT")
    messages = []
    module = importlib.reload(best_first)
    sink = logger.add(messages.append, level="DEBUG")
    try:
        module.search(start, get_strategy("ucs"))
    finally:
        logger.remove(sink)
    assert messages == []

    configure_logging(verbose=True)
    sink = logger.add(messages.append, level="DEBUG")
    try:
        module.search(start, get_strategy("ucs"))
    finally:
        logger.remove(sink)
    assert any("searching from" in m for m in messages)
