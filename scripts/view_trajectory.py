# scripts/view_trajectory.py
import matplotlib.pyplot as plt

from drivesim.config import SimConfig
from drivesim.display import make_display_frame
from drivesim.sim_loop import build_robot, build_waypoints
from drivesim.viz.draw import setup_screen_axes, draw_waypoints, BodyArtist


def main():
    cfg = SimConfig()
    robot = build_robot(cfg)
    waypoints = build_waypoints(cfg)

    fig, ax = plt.subplots()
    setup_screen_axes(ax, 1400.0, 800.0)
    draw_waypoints(ax, waypoints)
    BodyArtist(ax, make_display_frame(robot.pose, robot.body))
    plt.title("Spline waypoints + robot at start")
    plt.show()


if __name__ == "__main__":
    main()
