#!/usr/bin/env python3
from __future__ import annotations
import argparse, os
from pathlib import Path
from typing import List, Optional, Sequence

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
from loguru import logger

from slidingsearch.experiments.analyze import load
from slidingsearch.experiments.log import configure_logging

def plot_metric(ax, df: pd.DataFrame, metric: str):
    ok = df[df["termination"].fillna("ok") == "ok"]
    algos = sorted(ok["algorithm"].unique())
    for k, algo in enumerate(algos):
        g = ok[ok["algorithm"] == algo].groupby("depth")[metric]
        stats = g.agg(["mean", "std"]).fillna(0.0)
        # offset curves a tiny bit so they don't overlap
        offset = (k - (len(algos) - 1) / 2) * 0.08
        ax.errorbar(stats.index + offset, stats["mean"], yerr=stats["std"],
                    marker="o", capsize=3, label=algo)
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs depth (mean ± std)")
    ax.grid(True)
    if algos:
        ax.legend()

def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    logger.info("Saved: {}", path)
    return path

def main(argv: Optional[Sequence[str]] = None) -> List[Path]:
    ap = argparse.ArgumentParser(description="Plot results CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", type=Path, help="One or more CSV result files")
    ap.add_argument("--save", type=Path, default=Path("results/plots"), help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    df = load(args.csv)
    if df.empty:
        logger.warning("No rows to plot. Are your CSVs empty?")
        return []

    base = "combo" if len(args.csv) > 1 else args.csv[0].stem
    saved: List[Path] = []

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, metric in zip(axes, ["expanded", "generated", "time_sec"]):
        plot_metric(ax, df, metric)
    plt.tight_layout()
    saved.append(save_fig(fig, args.save, f"{base}_combined"))
    plt.close(fig)

    for metric in ["expanded", "peak_frontier", "time_sec"]:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, df, metric)
        plt.tight_layout()
        saved.append(save_fig(fig, args.save, f"{base}_{metric}"))
        plt.close(fig)

    if args.show:
        plt.show()
    return saved

if __name__ == "__main__":
    main()
