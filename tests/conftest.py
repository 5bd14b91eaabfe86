from collections import deque
import random

import pytest

from slidingsearch.domains.sliding_puzzle import SlidingPuzzle


def _bfs_distance(start: SlidingPuzzle) -> int:
    """Reference shortest solution length by plain breadth-first search."""
    if start.is_goal():
        return 0
    q = deque([(start, 0)])
    seen = {start}
    while q:
        s, d = q.popleft()
        for s2 in s.expand():
            if s2.is_goal():
                return d + 1
            if s2 not in seen:
                seen.add(s2)
                q.append((s2, d + 1))
    raise AssertionError(f"{start!r} has no solution")


@pytest.fixture
def bfs_distance():
    return _bfs_distance


@pytest.fixture
def scrambled():
    def make(size: int, steps: int, seed: int) -> SlidingPuzzle:
        return SlidingPuzzle(size).scramble(steps, random.Random(seed))
    return make
