from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from drivesim.types import Pose2D, Corners
from drivesim.body import BodyGeometry

Edge = Tuple[int, int]

EDGES: Tuple[Edge, Edge, Edge, Edge] = ((0, 1), (1, 2), (2, 3), (3, 0))
FIRST_EDGE_COLOR = "black"
EDGE_COLOR = "red"
CORNER_COLOR = "red"


def display_heading(theta: float) -> float:
    """
    Heading shown in the label: 180 - |deg(theta) rem 360|.

    Uses the truncated remainder (sign follows the dividend), so theta = 0
    reads 180 and a full turn either way reads 180 again.
    """
    return 180.0 - abs(math.fmod(math.degrees(theta), 360.0))


def pose_label(pose: Pose2D) -> str:
    return f"x: {pose.x:.2f}, y: {pose.y:.2f}, theta: {display_heading(pose.theta):.2f}"


@dataclass(frozen=True)
class DisplayFrame:
    """Everything a display sink needs for one frame."""
    label: str
    corners: Corners
    edges: Tuple[Edge, ...] = EDGES
    edge_colors: Tuple[str, ...] = (FIRST_EDGE_COLOR, EDGE_COLOR, EDGE_COLOR, EDGE_COLOR)
    corner_color: str = CORNER_COLOR

    def segments(self):
        """Yield ((x0, y0), (x1, y1), color) in drawing order."""
        for (i, j), color in zip(self.edges, self.edge_colors):
            yield self.corners[i], self.corners[j], color


def make_display_frame(pose: Pose2D, body: BodyGeometry) -> DisplayFrame:
    return DisplayFrame(label=pose_label(pose), corners=body.transform(pose))
