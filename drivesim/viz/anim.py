from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

import matplotlib.pyplot as plt

from drivesim.robot import RobotState
from drivesim.display import make_display_frame
from drivesim.viz.draw import setup_screen_axes, draw_waypoints, BodyArtist
from drivesim.telemetry.tick_logger import TickLogger

logger = logging.getLogger(__name__)


@dataclass
class VizConfig:
    width: float = 1400.0
    height: float = 800.0
    title: str = "Differential drive"
    max_steps: int = 10_000
    ticks_per_frame: int = 1
    waypoint_size: float = 2.0
    corner_size: float = 4.0
    edge_lw: float = 4.0
    trail_lw: float = 1.0
    trail_alpha: float = 0.6

    # perf: only draw last N points of trail
    max_trail_points: int = 2000


def run_loop(
    *,
    robot: RobotState,
    waypoints: Sequence[Sequence[float]],
    dt: float,
    viz: VizConfig = VizConfig(),
    log_csv: Optional[str] = None,
    log_flush_every: int = 200,
) -> int:
    """
    Interactive loop. Simulation and drawing are separate steps:
      - robot.tick(dt) is called ticks_per_frame times
      - the display frame is rebuilt from the resulting pose and drawn

    Keys: space/p pause, n single tick while paused, q/escape quit.
    Returns the number of ticks simulated.
    """
    if dt <= 0.0:
        raise ValueError(f"dt must be > 0, got {dt}")
    if viz.ticks_per_frame < 1:
        raise ValueError(f"ticks_per_frame must be >= 1, got {viz.ticks_per_frame}")

    tick_logger: Optional[TickLogger] = None
    if log_csv is not None:
        tick_logger = TickLogger(log_csv, flush_every=log_flush_every)

    fig, ax = plt.subplots()
    setup_screen_axes(ax, viz.width, viz.height)
    ax.set_title(viz.title)

    # trajectory polyline is precomputed; drawn once
    draw_waypoints(ax, waypoints, size=viz.waypoint_size)

    body_artist = BodyArtist(
        ax,
        make_display_frame(robot.pose, robot.body),
        edge_lw=viz.edge_lw,
        corner_size=viz.corner_size,
    )
    (trail_ln,) = ax.plot([], [], linewidth=viz.trail_lw, alpha=viz.trail_alpha, color="gray")
    trail_x: List[float] = [robot.pose.x]
    trail_y: List[float] = [robot.pose.y]

    paused = {"v": False}
    step_once = {"v": False}

    def on_key(event):
        key = event.key
        if key in (" ", "p"):
            paused["v"] = not paused["v"]
        elif key in ("q", "escape"):
            plt.close(fig)
        elif key == "n" and paused["v"]:
            step_once["v"] = True

    fig.canvas.mpl_connect("key_press_event", on_key)

    def render() -> None:
        body_artist.update(make_display_frame(robot.pose, robot.body))
        if viz.max_trail_points > 0 and len(trail_x) > viz.max_trail_points:
            trail_ln.set_data(trail_x[-viz.max_trail_points:], trail_y[-viz.max_trail_points:])
        else:
            trail_ln.set_data(trail_x, trail_y)
        fig.canvas.draw_idle()

    plt.ion()
    plt.show()
    render()
    plt.pause(0.001)

    sim_t = 0.0
    ticks = 0
    try:
        while ticks < viz.max_steps:
            if not plt.fignum_exists(fig.number):
                break

            if paused["v"] and not step_once["v"]:
                plt.pause(0.05)
                continue

            n = 1 if step_once["v"] else viz.ticks_per_frame
            step_once["v"] = False

            t0 = time.perf_counter()
            for _ in range(n):
                robot.tick(dt)
                sim_t += dt
                ticks += 1
                if tick_logger is not None:
                    tick_logger.log_tick(sim_t, dt, robot.snapshot())
                pose = robot.pose
                trail_x.append(pose.x)
                trail_y.append(pose.y)

            render()

            # real-time pacing: sleep what is left of the frame budget
            elapsed = time.perf_counter() - t0
            plt.pause(max(0.001, n * dt - elapsed))
    finally:
        if tick_logger is not None:
            tick_logger.close()

    logger.info("stopped after %d ticks (sim_t=%.2f s): %s", ticks, sim_t, robot.pose)
    plt.ioff()
    plt.show()
    return ticks
