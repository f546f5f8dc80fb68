from __future__ import annotations

import argparse
import csv
import json
import logging
import os

from planning.base import PLANNER_NAMES
from planning.config import (
    PlannerConfig,
    PlaygroundConfig,
    load_planner_config,
    load_playground_config,
)
from planning.world import Actor, World


def build_world(pg: PlaygroundConfig, pc: PlannerConfig) -> World:
    world = World(
        pg.size,
        pg.start,
        pg.goal,
        index_capacity=pc.index_capacity,
        index_max_depth=pc.index_max_depth,
    )
    world.add_obstacles(pg.obstacles)
    return world


def build_actor(world: World, pc: PlannerConfig, planner: str | None = None, seed=None) -> Actor:
    name = planner or pc.planner
    opts = pc.planner_options(name)
    if seed is not None and name == "rrt":
        opts["seed"] = seed
    return Actor(
        world,
        size=pc.actor.size,
        planner=name,
        planner_options=opts,
        speed=pc.actor.speed,
        shortest_arc=pc.actor.shortest_arc,
    )


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Playground demo: plan once -> sample trajectory")
    ap.add_argument("--layout", default="configs/playground.yaml")
    ap.add_argument("--planner-config", default="configs/planner.yaml")
    ap.add_argument("--planner", choices=list(PLANNER_NAMES), default=None)
    ap.add_argument("--seed", type=int, default=None, help="rrt sampling seed")
    ap.add_argument("--dt", type=float, default=0.05)
    ap.add_argument("--sim-seconds", type=float, default=60.0)
    ap.add_argument("--csv-out", default="artifacts/playground_run.csv")
    ap.add_argument("--waypoints-out", default="artifacts/playground_waypoints.json")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    pg = load_playground_config(args.layout)
    pc = load_planner_config(args.planner_config)
    world = build_world(pg, pc)
    actor = build_actor(world, pc, args.planner, args.seed)

    result = actor.compute_path()
    if not result.found:
        print(f"[plan] planner={actor.planner.name} ok=False reason={result.reason}")
        return 2
    traj = actor.trajectory
    assert traj is not None
    print(
        f"[plan] planner={actor.planner.name} ok=True raw={len(result.path)} "
        f"waypoints={len(actor.path)} length={traj.length:.1f} iterations={result.iterations}"
    )

    os.makedirs(os.path.dirname(args.csv_out) or ".", exist_ok=True)
    with open(args.csv_out, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(["t", "x", "y", "heading", "wp_index"])
        t = 0.0
        end = min(args.sim_seconds, traj.duration)
        while True:
            p = actor.update_pos(t)
            w.writerow([round(t, 6), p.x, p.y, p.heading, traj.waypoint_index(t)])
            if t >= end:
                break
            t = min(t + args.dt, end)

    os.makedirs(os.path.dirname(args.waypoints_out) or ".", exist_ok=True)
    with open(args.waypoints_out, "w") as f:
        json.dump(
            {
                "size": list(world.size),
                "start": list(world.start),
                "goal": list(world.goal),
                "actor_size": list(actor.size),
                "obstacles": [
                    {"anchor": list(r.anchor), "size": list(r.size)} for r in actor.obstacles()
                ],
                "waypoints": [[p.x, p.y, p.heading] for p in actor.waypoints()],
            },
            f,
            indent=2,
        )

    print(f"Final pose: {actor.pose}")
    print(f"Wrote: {args.csv_out}")
    print(f"Wrote: {args.waypoints_out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
