#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import os

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402
from matplotlib.patches import Rectangle  # noqa: E402


def plot_world(ax, meta: dict) -> None:
    w, h = meta["size"]
    ax.add_patch(Rectangle((0, 0), w, h, fill=False, edgecolor="gray"))
    for o in meta["obstacles"]:
        ax.add_patch(Rectangle(tuple(o["anchor"]), *o["size"], color="black"))
    ax.scatter(*zip(meta["start"], meta["goal"]), color="red", s=60, label="start/goal")
    ax.set_xlim(0, w)
    ax.set_ylim(h, 0)  # y grows downward in playground frame


def plot_run(ax, meta: dict, df: pd.DataFrame | None) -> None:
    wps = meta["waypoints"]
    if wps:
        xs, ys, _ = zip(*wps)
        ax.plot(xs, ys, "x--", color="tab:orange", label="waypoints")
    if df is not None:
        ax.plot(df["x"], df["y"], color="tab:blue", label="trajectory")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Plot obstacles, waypoints and the sampled trajectory.")
    ap.add_argument("--waypoints", default="artifacts/playground_waypoints.json")
    ap.add_argument("--csv", default="artifacts/playground_run.csv", help="optional run CSV")
    ap.add_argument("--out", default="artifacts/playground_plot.png")
    args = ap.parse_args(argv)

    with open(args.waypoints, "r") as f:
        meta = json.load(f)
    df = pd.read_csv(args.csv) if os.path.exists(args.csv) else None

    fig, ax = plt.subplots(figsize=(6, 6))
    plot_world(ax, meta)
    plot_run(ax, meta, df)
    ax.set_aspect("equal")
    ax.set_title("Playground run")
    ax.legend(loc="lower right")

    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
    fig.savefig(args.out, dpi=150, bbox_inches="tight")
    print(f"Wrote plot to: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
