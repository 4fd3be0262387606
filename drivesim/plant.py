# drivesim/plant.py
import logging
import math

from drivesim.types import Pose2D, BodyVelocity, WheelSpeed, WheelLimits

logger = logging.getLogger(__name__)

HALF_PI = math.pi / 2.0


def check_dt(dt: float) -> float:
    dt = float(dt)
    if not math.isfinite(dt) or dt < 0.0:
        raise ValueError(f"dt must be finite and >= 0, got {dt}")
    return dt


def integrate_pose(pose: Pose2D, vel: BodyVelocity, dt: float) -> Pose2D:
    """
    Euler integrate diff-drive kinematics for one step.

    pose: current pose (world)
    vel:  body velocity, only v_x and omega are used
    dt:   timestep [s]

    The input matrix is evaluated at the start-of-step heading:

        B(theta) = [[sin(theta + pi/2), 0],
                    [cos(theta + pi/2), 0],
                    [0,                 1]]

    so forward motion is along (cos(theta), -sin(theta)) (screen convention,
    y grows downward). Theta is not wrapped.
    """
    dt = check_dt(dt)
    heading = pose.theta + HALF_PI

    dx = vel.v_x * math.sin(heading) * dt
    dy = vel.v_x * math.cos(heading) * dt
    dtheta = vel.omega * dt

    return Pose2D(
        x=pose.x + dx,
        y=pose.y + dy,
        theta=pose.theta + dtheta,
    )


def clamp_wheel_speed(wheel_speed: WheelSpeed, limits: WheelLimits) -> WheelSpeed:
    clamped = WheelSpeed(
        right=_clamp(wheel_speed.right, limits.min_speed, limits.max_speed),
        left=_clamp(wheel_speed.left, limits.min_speed, limits.max_speed),
    )
    if clamped != wheel_speed:
        logger.debug("wheel speeds saturated: %s -> %s", wheel_speed, clamped)
    return clamped


def _clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x
