from __future__ import annotations
from typing import List, Tuple

from slidingsearch.domains.sliding_puzzle import SlidingPuzzle
from slidingsearch.search.node import Node

def reconstruct_path(node: Node) -> List[Node]:
    path: List[Node] = []
    while node is not None:
        path.append(node)
        node = node.parent  # type: ignore[assignment]
    path.reverse()
    return path

def solution_steps(node: Node) -> List[Tuple[str, SlidingPuzzle]]:
    """(action, resulting puzzle) for every move after the root."""
    return [(n.action, n.state) for n in reconstruct_path(node)[1:]]  # type: ignore[misc]

def actions(node: Node) -> List[str]:
    return [a for a, _ in solution_steps(node)]

def format_solution(goal_node: Node) -> str:
    path = reconstruct_path(goal_node)
    lines = [f"Solution found in {goal_node.depth} steps.", path[0].state.render()]
    for n in path[1:]:
        lines.append(f"Move: {n.action}")
        lines.append(n.state.render())
    return "\n".join(lines)
