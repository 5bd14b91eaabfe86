#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("Tree search, all strategies",
        "python -m slidingsearch.experiments.batch --depths 2 4 6 8 --per_depth 10 --algo all --out results/tree.csv")
    run("Graph search, all strategies",
        "python -m slidingsearch.experiments.batch --depths 4 8 12 16 --per_depth 10 --algo all --graph_search --out results/graph.csv")
    run("Summary", "python -m slidingsearch.experiments.analyze results/tree.csv results/graph.csv --out results/summary.csv")
    run("Plots", "python -m slidingsearch.experiments.plot results/tree.csv --save results/plots")

if __name__ == "__main__":
    main()
