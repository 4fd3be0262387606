from __future__ import annotations

import logging
from typing import List, Optional

from drivesim.config import SimConfig
from drivesim.robot import RobotState, RobotSnapshot
from drivesim.trajectory import CubicSplineTrajectory, sample_waypoints
from drivesim.telemetry.tick_logger import TickLogger

logger = logging.getLogger(__name__)


def build_robot(cfg: SimConfig) -> RobotState:
    """Robot at the configured start, with the configured wheel command applied."""
    robot = RobotState(cfg.start_x, cfg.start_y, cfg.params, limits=cfg.limits)
    robot.set_wheel_velocity(cfg.wheel_right, cfg.wheel_left)
    return robot


def build_waypoints(cfg: SimConfig) -> List[List[float]]:
    """
    Precompute the display polyline once. Raises TrajectoryRangeError if the
    configured sampling runs past the last control point.
    """
    traj_cfg = cfg.trajectory
    spline = CubicSplineTrajectory(traj_cfg.times, [list(p) for p in traj_cfg.points])
    return sample_waypoints(spline, traj_cfg.samples, traj_cfg.sample_step, start=traj_cfg.times[0])


def run_ticks(
    robot: RobotState,
    dt: float,
    steps: int,
    *,
    tick_logger: Optional[TickLogger] = None,
    sim_t0: float = 0.0,
) -> RobotSnapshot:
    """
    Headless stepping: `steps` calls of robot.tick(dt), optionally recorded.
    Returns the final snapshot.
    """
    if steps < 0:
        raise ValueError(f"steps must be >= 0, got {steps}")

    sim_t = sim_t0
    for _k in range(steps):
        robot.tick(dt)
        sim_t += dt
        if tick_logger is not None:
            tick_logger.log_tick(sim_t, dt, robot.snapshot())

    snap = robot.snapshot()
    logger.debug("ran %d ticks of dt=%s, final %s", steps, dt, snap.pose)
    return snap
