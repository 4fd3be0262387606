from __future__ import annotations
import argparse
import logging

from drivesim.config import SimConfig, setup_logging
from drivesim.types import PhysicalParams
from drivesim.display import pose_label
from drivesim.sim_loop import build_robot, build_waypoints, run_ticks
from drivesim.telemetry.tick_logger import TickLogger
from drivesim.viz.anim import run_loop, VizConfig

logger = logging.getLogger(__name__)


def parse_args():
    defaults = SimConfig()
    p = argparse.ArgumentParser(
        description="Differential-drive robot: open-loop wheel command, spline waypoints for display",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    p.add_argument("--dt", type=float, default=defaults.dt, help="Seconds per tick.")
    p.add_argument("--right", type=float, default=defaults.wheel_right, help="Right wheel speed [rad/s].")
    p.add_argument("--left", type=float, default=defaults.wheel_left, help="Left wheel speed [rad/s].")
    p.add_argument("--x", type=float, default=defaults.start_x, help="Start x.")
    p.add_argument("--y", type=float, default=defaults.start_y, help="Start y.")
    p.add_argument("--track_width", type=float, default=defaults.params.track_width)
    p.add_argument("--wheel_radius", type=float, default=defaults.params.wheel_radius)
    p.add_argument("--steps", type=int, default=defaults.max_steps, help="Max ticks to simulate.")
    p.add_argument("--ticks_per_frame", type=int, default=1, help="Simulation ticks per drawn frame.")
    p.add_argument("--headless", action="store_true", help="Run without a window and print the final pose.")
    p.add_argument("--log_csv", type=str, default=None,
                   help="If set, write one CSV row per tick to this path (e.g., logs/run.csv).")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging with timestamps.")

    return p.parse_args()


def main():
    args = parse_args()
    setup_logging(args.verbose)

    cfg = SimConfig(
        dt=args.dt,
        start_x=args.x,
        start_y=args.y,
        wheel_right=args.right,
        wheel_left=args.left,
        params=PhysicalParams(track_width=args.track_width, wheel_radius=args.wheel_radius),
        max_steps=args.steps,
        log_csv=args.log_csv,
    )

    robot = build_robot(cfg)

    if args.headless:
        if cfg.log_csv is not None:
            with TickLogger(cfg.log_csv) as tick_logger:
                run_ticks(robot, cfg.dt, cfg.max_steps, tick_logger=tick_logger)
        else:
            run_ticks(robot, cfg.dt, cfg.max_steps)
        logger.info(pose_label(robot.pose))
        return

    waypoints = build_waypoints(cfg)  # once, outside the frame loop
    run_loop(
        robot=robot,
        waypoints=waypoints,
        dt=cfg.dt,
        viz=VizConfig(max_steps=cfg.max_steps, ticks_per_frame=args.ticks_per_frame),
        log_csv=cfg.log_csv,
    )


if __name__ == "__main__":
    main()
