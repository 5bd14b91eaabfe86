from __future__ import annotations
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple
import bisect
import random

Tiles = Tuple[int, ...]

class Position(NamedTuple):
    row: int
    col: int

# Expansion order; also the tie-break order among siblings in the frontier.
DIRECTIONS: Tuple[str, ...] = ("UP", "DOWN", "LEFT", "RIGHT")

_OFFSETS: Dict[str, Tuple[int, int]] = {
    "UP": (-1, 0),
    "DOWN": (1, 0),
    "LEFT": (0, -1),
    "RIGHT": (0, 1),
}

OPPOSITE: Dict[str, str] = {"UP": "DOWN", "DOWN": "UP", "LEFT": "RIGHT", "RIGHT": "LEFT"}

def _goal_tiles(size: int) -> Tiles:
    return tuple(list(range(1, size * size)) + [0])

def build_goal_state(size: int) -> Dict[Position, int]:
    """Goal mapping: tiles 1..size²-1 row-major, blank at bottom-right."""
    return {Position(i // size, i % size): t for i, t in enumerate(_goal_tiles(size))}

def _longest_increasing(seq: List[int]) -> int:
    """Length of the longest strictly increasing subsequence of `seq`."""
    tails: List[int] = []
    for x in seq:
        k = bisect.bisect_left(tails, x)
        if k == len(tails):
            tails.append(x)
        else:
            tails[k] = x
    return len(tails)

def _check_permutation(size: int, tiles: Iterable[int]) -> Tiles:
    out = tuple(tiles)
    n = size * size
    if len(out) != n:
        raise ValueError(f"Expected {n} values, got {len(out)}")
    if sorted(out) != list(range(n)):
        raise ValueError(f"Tiles must be a permutation of 0..{n - 1}, got {list(out)}")
    return out


class SlidingPuzzle:
    """
    Immutable size×size sliding-tile puzzle (0 is the blank).

    Tiles are kept as a flat row-major tuple; `state` exposes them as a
    Position -> value mapping. Every operation returns a new puzzle.
    """
    __slots__ = ("size", "tiles", "_blank")

    def __init__(self, size: int, tiles: Optional[Iterable[int]] = None):
        if size < 2:
            raise ValueError(f"Puzzle size must be >= 2, got {size}")
        self.size = size
        self.tiles: Tiles = _goal_tiles(size) if tiles is None else _check_permutation(size, tiles)
        self._blank = self.tiles.index(0)

    @classmethod
    def goal(cls, size: int) -> "SlidingPuzzle":
        return cls(size)

    @classmethod
    def _trusted(cls, size: int, tiles: Tiles, blank: int) -> "SlidingPuzzle":
        # tiles derived from a valid puzzle by a swap; skip re-validation
        p = cls.__new__(cls)
        p.size = size
        p.tiles = tiles
        p._blank = blank
        return p

    # ---------- views ----------
    @property
    def state(self) -> Dict[Position, int]:
        n = self.size
        return {Position(i // n, i % n): t for i, t in enumerate(self.tiles)}

    def flat(self) -> List[int]:
        return list(self.tiles)

    def blank(self) -> Position:
        return Position(*divmod(self._blank, self.size))

    def __getitem__(self, pos: Tuple[int, int]) -> int:
        r, c = pos
        if not (0 <= r < self.size and 0 <= c < self.size):
            raise IndexError(f"Position {pos} outside {self.size}x{self.size} grid")
        return self.tiles[r * self.size + c]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SlidingPuzzle):
            return NotImplemented
        return self.size == other.size and self.tiles == other.tiles

    def __hash__(self) -> int:
        return hash((self.size, self.tiles))

    def __repr__(self) -> str:
        return f"SlidingPuzzle({self.size}, {list(self.tiles)})"

    # ---------- core dynamics ----------
    def move(self, direction: str) -> Optional["SlidingPuzzle"]:
        """Slide the blank one cell; None when that would leave the grid."""
        try:
            dr, dc = _OFFSETS[direction]
        except KeyError:
            raise ValueError(f"Invalid direction: {direction!r}") from None
        n = self.size
        r, c = divmod(self._blank, n)
        nr, nc = r + dr, c + dc
        if not (0 <= nr < n and 0 <= nc < n):
            return None
        j = nr * n + nc
        lst = list(self.tiles)
        lst[self._blank], lst[j] = lst[j], lst[self._blank]
        return SlidingPuzzle._trusted(n, tuple(lst), j)

    def successors(self) -> List[Tuple[str, "SlidingPuzzle"]]:
        """(action, next_puzzle) for every legal move, in DIRECTIONS order."""
        out: List[Tuple[str, SlidingPuzzle]] = []
        for d in DIRECTIONS:
            nxt = self.move(d)
            if nxt is not None:
                out.append((d, nxt))
        return out

    def expand(self) -> List["SlidingPuzzle"]:
        return [p for _, p in self.successors()]

    def scramble(self, steps: int = 10, rng: Optional[random.Random] = None) -> "SlidingPuzzle":
        """Random walk of `steps` legal moves starting from this puzzle."""
        if steps < 0:
            raise ValueError(f"steps must be >= 0, got {steps}")
        rng = rng or random.Random()
        result = self
        for _ in range(steps):
            order = list(DIRECTIONS)
            rng.shuffle(order)
            for d in order:
                nxt = result.move(d)
                if nxt is not None:
                    result = nxt
                    break
        return result

    def set_state(self, flat: Iterable[int]) -> "SlidingPuzzle":
        """New puzzle of the same size with the given row-major tile values."""
        return SlidingPuzzle(self.size, flat)

    # ---------- goal & solvability ----------
    def is_goal(self) -> bool:
        return self.tiles == _goal_tiles(self.size)

    def is_solvable(self) -> bool:
        """Whether the goal is reachable from this layout.

        Counts inversions among the non-blank tiles in row-major order. On an
        odd-width board a move never changes their parity, so it must be even.
        On an even-width board each vertical move flips both the parity and
        the blank's row, so inversions plus the blank's row counted from the
        bottom (starting at 1) must be odd, as it is for the goal.
        """
        arr = [x for x in self.tiles if x != 0]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        if self.size % 2 == 1:
            return (inv % 2) == 0
        blank_row_from_bottom = self.size - self._blank // self.size
        return ((inv + blank_row_from_bottom) % 2) == 1

    # ---------- heuristics ----------
    def manhattan(self) -> int:
        """Sum of Manhattan distances to goal positions (blank ignored)."""
        n = self.size
        dist = 0
        for idx, tile in enumerate(self.tiles):
            if tile == 0:
                continue
            r, c = divmod(idx, n)
            gr, gc = divmod(tile - 1, n)
            dist += abs(r - gr) + abs(c - gc)
        return dist

    def misplaced(self) -> int:
        """Number of non-blank tiles not on their goal cell."""
        return sum(1 for idx, tile in enumerate(self.tiles) if tile != 0 and tile != idx + 1)

    def linear_conflict(self) -> int:
        """
        Manhattan + 2 for every tile that must leave its goal line.

        Per row (column), the tiles already in their goal row (column) are
        listed by goal column (row); all but a longest increasing run of them
        has to step out of the line and back.
        """
        m = self.manhattan()
        n = self.size
        # Row conflicts
        for r in range(n):
            row = self.tiles[r * n:(r + 1) * n]
            goal_cols = [(t - 1) % n for t in row if t != 0 and (t - 1) // n == r]
            m += 2 * (len(goal_cols) - _longest_increasing(goal_cols))
        # Column conflicts
        for c in range(n):
            col = [self.tiles[c + r * n] for r in range(n)]
            goal_rows = [(t - 1) // n for t in col if t != 0 and (t - 1) % n == c]
            m += 2 * (len(goal_rows) - _longest_increasing(goal_rows))
        return m

    # ---------- display ----------
    def render(self) -> str:
        lines = []
        for r in range(self.size):
            row = self.tiles[r * self.size:(r + 1) * self.size]
            lines.append("".join("%2s " % (" " if v == 0 else v) for v in row))
        lines.append("-" * max(11, 3 * self.size + 2))
        return "\n".join(lines)

    def print(self) -> None:
        print(self.render())
