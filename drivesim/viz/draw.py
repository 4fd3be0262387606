# drivesim/viz/draw.py
import matplotlib.pyplot as plt
from typing import List, Sequence, Tuple

from matplotlib.lines import Line2D
from matplotlib.text import Text

from drivesim.display import DisplayFrame


def setup_screen_axes(ax: plt.Axes, width: float, height: float) -> None:
    """
    Screen-style axes: origin top-left, y grows downward, 1 unit = 1 pixel.
    """
    ax.set_xlim(0.0, width)
    ax.set_ylim(height, 0.0)
    ax.set_aspect("equal")
    ax.set_facecolor("white")


def draw_waypoints(ax: plt.Axes, waypoints: Sequence[Sequence[float]], *, size: float = 2.0) -> Line2D:
    xs = [p[0] for p in waypoints]
    ys = [p[1] for p in waypoints]
    (ln,) = ax.plot(xs, ys, marker="o", linestyle="", markersize=size, color="black")
    return ln


class BodyArtist:
    """
    Robot footprint: four edges (first edge in its own color) and corner dots.
    Artists are created once and moved with update().
    """

    def __init__(self, ax: plt.Axes, frame: DisplayFrame, *, edge_lw: float = 4.0, corner_size: float = 4.0):
        self.edges: List[Line2D] = []
        for p, q, color in frame.segments():
            (ln,) = ax.plot([p[0], q[0]], [p[1], q[1]], linewidth=edge_lw, color=color)
            self.edges.append(ln)

        xs, ys = _unzip(frame.corners)
        (self.corner_ln,) = ax.plot(xs, ys, marker="o", linestyle="", markersize=corner_size, color=frame.corner_color)

        self.label: Text = ax.text(
            0.01, 0.99, frame.label,
            transform=ax.transAxes,
            va="top", ha="left",
        )

    def update(self, frame: DisplayFrame) -> None:
        for ln, (p, q, color) in zip(self.edges, frame.segments()):
            ln.set_data([p[0], q[0]], [p[1], q[1]])
            ln.set_color(color)
        xs, ys = _unzip(frame.corners)
        self.corner_ln.set_data(xs, ys)
        self.label.set_text(frame.label)


def _unzip(points: Sequence[Sequence[float]]) -> Tuple[List[float], List[float]]:
    return [p[0] for p in points], [p[1] for p in points]
