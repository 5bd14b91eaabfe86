from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, List, Optional, Tuple
import heapq
import itertools

from slidingsearch.domains.sliding_puzzle import SlidingPuzzle
from slidingsearch.heuristics.linear_conflict import linear_conflict
from slidingsearch.heuristics.manhattan import manhattan
from slidingsearch.heuristics.misplaced import misplaced
from slidingsearch.search.node import Node

Heuristic = Callable[[SlidingPuzzle], int]
Priority = Callable[[Node], int]


class Frontier:
    """
    Min-priority queue of nodes. Equal priorities pop in insertion order,
    so siblings keep their UP, DOWN, LEFT, RIGHT expansion order.
    """
    def __init__(self, priority: Priority, nodes: Iterable[Node] = ()):
        self.priority = priority
        self._heap: List[Tuple[int, int, Node]] = []
        self._counter = itertools.count()
        for n in nodes:
            self.push(n)

    def push(self, node: Node) -> None:
        heapq.heappush(self._heap, (self.priority(node), next(self._counter), node))

    def pop(self) -> Node:
        return heapq.heappop(self._heap)[2]

    def peek(self) -> Node:
        return self._heap[0][2]

    def merged(self, children: Iterable[Node]) -> "Frontier":
        """New frontier with every entry of this one plus `children`.
        This frontier is consumed (left empty)."""
        out = Frontier(self.priority)
        out._heap, self._heap = self._heap, []
        out._counter = self._counter
        for c in children:
            out.push(c)
        return out

    def nodes(self) -> List[Node]:
        return [n for _, _, n in sorted(self._heap)]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


class QueuingStrategy(ABC):
    """Decides how newly generated nodes join the frontier."""
    name: str = ""

    @abstractmethod
    def priority(self, node: Node) -> int: ...

    def evaluate(self, state: SlidingPuzzle) -> int:
        return 0

    def new_frontier(self, root: Node) -> Frontier:
        return Frontier(self.priority, [root.with_h(self.evaluate(root.state))])

    @abstractmethod
    def __call__(self, frontier: Frontier, children: List[Node]) -> Frontier: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class UniformCostQueue(QueuingStrategy):
    """Order by path cost g(n) only."""
    name = "Uniform Cost Search"

    def priority(self, node: Node) -> int:
        return node.cost

    def __call__(self, frontier: Frontier, children: List[Node]) -> Frontier:
        return frontier.merged(children)


class AStarQueue(QueuingStrategy):
    """Order by f(n) = g(n) + h(n); h is attached to each child as it is queued."""
    def __init__(self, heuristic: Heuristic, name: Optional[str] = None):
        self.heuristic = heuristic
        self.name = name or f"A* Search ({getattr(heuristic, '__name__', 'h')})"

    def priority(self, node: Node) -> int:
        return node.f

    def evaluate(self, state: SlidingPuzzle) -> int:
        return self.heuristic(state)

    def __call__(self, frontier: Frontier, children: List[Node]) -> Frontier:
        return frontier.merged(c.with_h(self.heuristic(c.state)) for c in children)


def make_astar_queue(heuristic: Heuristic, name: Optional[str] = None) -> AStarQueue:
    return AStarQueue(heuristic, name)

uniform_cost_queue = UniformCostQueue()

STRATEGIES: Dict[str, Callable[[], QueuingStrategy]] = {
    "ucs": UniformCostQueue,
    "astar-manhattan": lambda: AStarQueue(manhattan, "A* Search (Manhattan)"),
    "astar-misplaced": lambda: AStarQueue(misplaced, "A* Search (Misplaced Tiles)"),
    "astar-linear": lambda: AStarQueue(linear_conflict, "A* Search (Linear Conflict)"),
}

def get_strategy(key: str) -> QueuingStrategy:
    try:
        return STRATEGIES[key]()
    except KeyError:
        raise ValueError(f"Unknown strategy {key!r}; choose from {sorted(STRATEGIES)}") from None

# "all" on the command line, in reporting order
ALL_STRATEGIES: List[str] = ["astar-manhattan", "astar-misplaced", "astar-linear", "ucs"]

def resolve_strategies(names: Iterable[str]) -> List[str]:
    names = list(names)
    return list(ALL_STRATEGIES) if "all" in names else names
