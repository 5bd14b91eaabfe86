from slidingsearch.domains.sliding_puzzle import SlidingPuzzle

def linear_conflict(p: SlidingPuzzle) -> int:
    return p.linear_conflict()
