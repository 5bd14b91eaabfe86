import pytest

from slidingsearch.domains.sliding_puzzle import SlidingPuzzle
from slidingsearch.heuristics.manhattan import manhattan
from slidingsearch.heuristics.misplaced import misplaced
from slidingsearch.search.frontier import (
    STRATEGIES, AStarQueue, Frontier, UniformCostQueue, get_strategy, make_astar_queue,
    resolve_strategies, uniform_cost_queue,
)
from slidingsearch.search.node import Node


def _children(node):
    return [node.child(a, s) for a, s in node.state.successors()]


def test_frontier_pops_by_priority_then_fifo():
    p = SlidingPuzzle(3)
    a = Node(p, cost=2)
    b = Node(p.move("UP"), cost=1)
    c = Node(p.move("LEFT"), cost=1)
    f = Frontier(lambda n: n.cost, [a, b, c])
    assert len(f) == 3
    assert f.peek() is b
    assert [f.pop(), f.pop(), f.pop()] == [b, c, a]
    assert not f


def test_merged_consumes_old_frontier():
    root = Node(SlidingPuzzle(3))
    old = Frontier(lambda n: n.cost, [root])
    kids = _children(root)
    new = old.merged(kids)
    assert len(old) == 0
    assert len(new) == 1 + len(kids)
    assert new.nodes()[0] is root


def test_uniform_cost_orders_by_g():
    ucs = UniformCostQueue()
    root = Node(SlidingPuzzle(3).move("LEFT").move("UP"))
    frontier = ucs.new_frontier(root)
    assert frontier.peek().h == 0
    popped = frontier.pop()
    frontier = ucs(frontier, _children(popped))
    costs = [n.cost for n in frontier.nodes()]
    assert costs == sorted(costs) and set(costs) == {1}
    # siblings keep expansion order
    assert [n.action for n in frontier.nodes()] == ["UP", "DOWN", "LEFT", "RIGHT"]


def test_astar_keeps_g_and_h_separate():
    astar = AStarQueue(manhattan)
    start = SlidingPuzzle(3).move("LEFT").move("LEFT")
    frontier = astar.new_frontier(Node(start))
    root = frontier.pop()
    assert root.h == start.manhattan() == 2
    assert root.cost == 0
    frontier = astar(frontier, _children(root))
    for n in frontier.nodes():
        assert n.cost == 1
        assert n.h == n.state.manhattan()
        assert n.f == n.cost + n.h
    best = frontier.pop()
    assert best.action == "RIGHT" and best.f == 2


def test_astar_child_of_popped_node_does_not_carry_h():
    root = Node(SlidingPuzzle(3).move("UP").move("LEFT"), h=10)
    for c in _children(root):
        assert c.cost == 1 and c.h == 0


def test_strategy_names_and_registry():
    assert set(STRATEGIES) == {"ucs", "astar-manhattan", "astar-misplaced", "astar-linear"}
    assert get_strategy("ucs").name == uniform_cost_queue.name == "Uniform Cost Search"
    assert get_strategy("astar-misplaced").name == "A* Search (Misplaced Tiles)"
    assert make_astar_queue(misplaced).name == "A* Search (misplaced)"
    with pytest.raises(ValueError):
        get_strategy("dfs")


def test_strategy_instances_are_fresh():
    assert get_strategy("astar-manhattan") is not get_strategy("astar-manhattan")


def test_resolve_all_covers_every_strategy():
    assert sorted(resolve_strategies(["all"])) == sorted(STRATEGIES)
    assert resolve_strategies(["ucs", "all"]) == resolve_strategies(["all"])
    assert resolve_strategies(["ucs", "astar-linear"]) == ["ucs", "astar-linear"]
