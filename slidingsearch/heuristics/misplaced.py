from slidingsearch.domains.sliding_puzzle import SlidingPuzzle

def misplaced(p: SlidingPuzzle) -> int:
    return p.misplaced()
