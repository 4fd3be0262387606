from __future__ import annotations

import math
import numpy as np

from drivesim.types import Pose2D, Point2


def heading_vector(theta: float) -> Point2:
    """
    World direction of body +x for heading theta.
    Screen convention (world y grows downward): theta > 0 turns the nose toward -y.
    """
    return (math.cos(theta), -math.sin(theta))


def body_to_world(p_body: Point2, pose_world: Pose2D) -> Point2:
    """
    Transform a 2D point from robot/body frame into world frame.
    Body frame convention: +x forward, +y left of the nose on screen.

      xw =  c*xb + s*yb + x
      yw = -s*xb + c*yb + y
    """
    pb = np.asarray(p_body, dtype=float)
    t = np.asarray([pose_world.x, pose_world.y], dtype=float)

    c = math.cos(pose_world.theta)
    s = math.sin(pose_world.theta)

    xw =  c * pb[0] + s * pb[1] + t[0]
    yw = -s * pb[0] + c * pb[1] + t[1]
    return (float(xw), float(yw))


def world_to_body(p_world: Point2, pose_world: Pose2D) -> Point2:
    """
    Transform a 2D point from world frame into robot/body frame.
    Inverse of body_to_world.
    """
    pw = np.asarray(p_world, dtype=float)
    t = np.asarray([pose_world.x, pose_world.y], dtype=float)

    dx = pw - t
    c = math.cos(pose_world.theta)
    s = math.sin(pose_world.theta)

    xb = c * dx[0] - s * dx[1]
    yb = s * dx[0] + c * dx[1]
    return (float(xb), float(yb))
