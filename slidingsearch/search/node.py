from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Optional

from slidingsearch.domains.sliding_puzzle import SlidingPuzzle

@dataclass(frozen=True)
class Node:
    """
    Search-tree node. `cost` is the path cost g(n); `h` is the heuristic value
    attached by the queuing strategy, so f(n) = g(n) + h(n) is never stored.
    `parent` is a back-reference used only to rebuild the solution path.
    """
    state: SlidingPuzzle
    parent: Optional["Node"] = field(default=None, repr=False, compare=False)
    action: Optional[str] = None
    cost: int = 0
    depth: int = 0
    h: int = 0

    @property
    def f(self) -> int:
        return self.cost + self.h

    def child(self, action: str, state: SlidingPuzzle) -> "Node":
        return Node(state, parent=self, action=action, cost=self.cost + 1, depth=self.depth + 1)

    def with_h(self, h: int) -> "Node":
        return replace(self, h=h)
