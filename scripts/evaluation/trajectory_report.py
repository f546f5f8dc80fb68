from __future__ import annotations

import argparse
import json
from pathlib import Path

import numpy as np
import pandas as pd


def compute_kpis_df(df: pd.DataFrame) -> dict:
    required = ["t", "x", "y", "heading", "wp_index"]
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"missing columns: {missing}")
    if df.empty:
        raise ValueError("empty run")

    t = df["t"].to_numpy()
    step = np.hypot(np.diff(df["x"].to_numpy()), np.diff(df["y"].to_numpy()))
    dheading = np.abs(np.diff(df["heading"].to_numpy()))
    dheading = np.minimum(dheading, 360 - dheading)  # wrap 359 -> 0 as a 1 degree step

    k = {
        "duration_s": float(t[-1] - t[0]),
        "samples": int(len(df)),
        "distance": float(step.sum()) if len(step) else 0.0,
        "max_step": float(step.max()) if len(step) else 0.0,
        "max_turn_step_deg": float(dheading.max()) if len(dheading) else 0.0,
        "waypoints_passed": int(df["wp_index"].max()) + 1,
        "final_pose": [int(df["x"].iloc[-1]), int(df["y"].iloc[-1]), int(df["heading"].iloc[-1])],
    }
    return k


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Compute KPIs from a playground run CSV.")
    ap.add_argument("--csv", default="artifacts/playground_run.csv", help="Input CSV from the demo")
    ap.add_argument("--json-out", default="artifacts/playground_kpis.json", help="Where to write KPI JSON")
    args = ap.parse_args(argv)

    df = pd.read_csv(args.csv)
    k = compute_kpis_df(df)

    Path(args.json_out).parent.mkdir(parents=True, exist_ok=True)
    with open(args.json_out, "w") as f:
        json.dump(k, f, indent=2)

    print("Playground KPIs")
    print(f"- duration_s={k['duration_s']:.2f}  samples={k['samples']}  distance={k['distance']:.1f}")
    print(f"- max_step={k['max_step']:.2f}  max_turn_step_deg={k['max_turn_step_deg']:.1f}")
    print(f"- waypoints_passed={k['waypoints_passed']}  final_pose={k['final_pose']}")
    print(f"Wrote JSON: {args.json_out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
