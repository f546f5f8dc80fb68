from __future__ import annotations

import argparse
import time
from datetime import datetime
from pathlib import Path

from planning.base import PLANNER_NAMES
from planning.config import load_planner_config, load_playground_config
from scripts.run_playground_demo import build_actor, build_world


def run_planner(name: str, layout: str, planner_config: str, seed: int) -> dict:
    """Plan once on a fresh world and collect KPIs for the table."""
    pg = load_playground_config(layout)
    pc = load_planner_config(planner_config)
    actor = build_actor(build_world(pg, pc), pc, name, seed)

    t0 = time.perf_counter()
    result = actor.compute_path()
    wall_ms = (time.perf_counter() - t0) * 1000.0

    return {
        "ok": result.found,
        "raw": len(result.path),
        "waypoints": len(actor.path),
        "length": actor.trajectory.length if actor.trajectory is not None else 0.0,
        "iterations": result.iterations,
        "checks": actor.validator.checks["pose"] + actor.validator.checks["edge"],
        "wall_ms": wall_ms,
        "reason": result.reason,
    }


def fmt_row(name: str, k: dict) -> str:
    return (
        f"| {name:6} | {'yes' if k['ok'] else 'no':>3} | {k['raw']:>5} | {k['waypoints']:>4} | "
        f"{k['length']:8.1f} | {k['iterations']:>7} | {k['checks']:>8} | {k['wall_ms']:8.1f} |"
    )


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Compare tree (rrt) vs grid (astar) search on a layout.")
    ap.add_argument("--layout", default="configs/playground.yaml")
    ap.add_argument("--planner-config", default="configs/planner.yaml")
    ap.add_argument("--rrt-seed", type=int, default=123)
    ap.add_argument("--out", default="artifacts/compare_planners.md")
    args = ap.parse_args(argv)

    rows = {name: run_planner(name, args.layout, args.planner_config, args.rrt_seed) for name in PLANNER_NAMES}

    lines = []
    ts = datetime.now().isoformat(timespec="seconds")
    lines.append(f"# Planner Compare ({ts})\n")
    lines.append(f"- layout: `{args.layout}`")
    lines.append(f"- rrt seed: {args.rrt_seed}\n")
    lines.append("| Planner | ok | raw | wps |  length | iters | checks | wall[ms] |")
    lines.append("|:-------:|---:|----:|----:|--------:|------:|-------:|---------:|")
    lines.append(fmt_row("RRT", rows["rrt"]))
    lines.append(fmt_row("A*", rows["astar"]))
    lines.append("")
    for name, k in rows.items():
        if not k["ok"]:
            lines.append(f"- {name} failed: {k['reason']}")

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text("\n".join(lines))
    print(f"Wrote: {out_path}")
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
