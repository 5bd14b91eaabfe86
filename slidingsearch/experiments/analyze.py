#!/usr/bin/env python3
from __future__ import annotations
import argparse
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd
from loguru import logger

from slidingsearch.experiments.log import configure_logging

METRICS = ["expanded", "generated", "time_sec", "g"]

def effective_branching_factor(generated: float, depth: float) -> float:
    """b* such that b* + b*^2 + ... + b*^d = generated (NaN when undefined)."""
    if depth is None or generated is None or np.isnan(depth) or np.isnan(generated):
        return float("nan")
    d = int(depth)
    if d <= 0 or generated <= 0:
        return float("nan")
    coeffs = [1.0] * d + [-float(generated)]
    roots = np.roots(coeffs)
    real = roots[np.isclose(roots.imag, 0.0) & (roots.real > 0)].real
    return float(real.max()) if real.size else float("nan")

def load(files: Sequence[Path]) -> pd.DataFrame:
    dfs = []
    for fn in files:
        df = pd.read_csv(fn)
        df["__src__"] = Path(fn).name
        dfs.append(df)
    if not dfs:
        return pd.DataFrame(columns=["algorithm", "depth"] + METRICS)
    df = pd.concat(dfs, ignore_index=True, sort=False)
    for c in METRICS + ["depth", "seed", "peak_frontier"]:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df

def summarize(df: pd.DataFrame, only_ok: bool = True) -> pd.DataFrame:
    """Per (algorithm, depth) means plus solve rate and effective branching factor."""
    if df.empty:
        return pd.DataFrame()
    df = df.copy()
    df["solved"] = df["termination"].fillna("ok") == "ok"
    rate = df.groupby(["algorithm", "depth"])["solved"].mean().rename("solve_rate")
    if only_ok:
        df = df[df["solved"]].copy()
    df["b_star"] = [effective_branching_factor(n, g) for n, g in zip(df["generated"], df["g"])]
    cols = [c for c in METRICS + ["b_star"] if c in df.columns]
    means = df.groupby(["algorithm", "depth"])[cols].mean()
    counts = df.groupby(["algorithm", "depth"]).size().rename("n")
    out = pd.concat([means, counts, rate], axis=1)
    out["n"] = out["n"].fillna(0).astype(int)
    return out.reset_index()

def main(argv: Optional[Sequence[str]] = None) -> pd.DataFrame:
    ap = argparse.ArgumentParser(description="Summarize experiment CSVs per algorithm and depth")
    ap.add_argument("csv", nargs="+", type=Path)
    ap.add_argument("--all", action="store_true", help="Include capped / exhausted runs in the means")
    ap.add_argument("--out", type=Path, default=None, help="Write the summary table as CSV")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    missing: List[Path] = [p for p in args.csv if not p.exists()]
    if missing:
        ap.error(f"missing CSV: {', '.join(map(str, missing))}")

    table = summarize(load(args.csv), only_ok=not args.all)
    if table.empty:
        logger.warning("No rows to summarize. Are your CSVs empty?")
        return table
    with pd.option_context("display.width", 140, "display.max_columns", 20):
        print(table.to_string(index=False, float_format=lambda x: f"{x:.3f}"))
    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        logger.info("Saved: {}", args.out)
    return table

if __name__ == "__main__":
    main()
