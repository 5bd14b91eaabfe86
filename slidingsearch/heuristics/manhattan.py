from slidingsearch.domains.sliding_puzzle import SlidingPuzzle

def manhattan(p: SlidingPuzzle) -> int:
    return p.manhattan()
