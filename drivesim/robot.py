# drivesim/robot.py
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from drivesim.types import (
    Pose2D,
    BodyVelocity,
    WheelSpeed,
    PhysicalParams,
    WheelLimits,
    Corners,
)
from drivesim.kinematics import forward_kinematics, inverse_kinematics
from drivesim.plant import integrate_pose, clamp_wheel_speed, check_dt
from drivesim.body import BodyGeometry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RobotSnapshot:
    pose: Pose2D
    velocity: BodyVelocity
    wheel_speed: WheelSpeed


class RobotState:
    """
    Differential-drive robot: pose, body velocity, wheel speeds and physical params.

    Wheel speeds and body velocity are kept consistent through the kinematics
    after every setter and every tick. Per tick:
      clamp wheels -> forward kinematics -> integrate pose -> inverse kinematics
    """

    def __init__(
        self,
        x: float,
        y: float,
        params: PhysicalParams = PhysicalParams(),
        *,
        limits: WheelLimits = WheelLimits(),
        body: Optional[BodyGeometry] = None,
    ):
        """
        Args:
          x, y: initial world position. Heading starts at 0.
          params: track width / wheel radius, validated on construction.
          limits: wheel speed saturation range applied in tick().
          body: footprint; defaults to a square of side track_width.
        """
        if not isinstance(params, PhysicalParams):
            raise TypeError(f"params must be PhysicalParams, got {type(params).__name__}")

        self._params = params
        self._limits = limits
        self._body = body if body is not None else BodyGeometry.from_params(params)

        self._pose = Pose2D(x=float(x), y=float(y), theta=0.0)
        self._velocity = BodyVelocity(v_x=0.0, v_y=0.0, omega=0.0)
        self._wheel_speed = WheelSpeed(right=0.0, left=0.0)
        logger.debug("robot created at (%.2f, %.2f) with %s, %s", x, y, params, limits)

    @property
    def params(self) -> PhysicalParams:
        return self._params

    @property
    def limits(self) -> WheelLimits:
        return self._limits

    @property
    def body(self) -> BodyGeometry:
        return self._body

    @property
    def pose(self) -> Pose2D:
        return replace(self._pose)

    @property
    def velocity(self) -> BodyVelocity:
        return replace(self._velocity)

    @property
    def wheel_speed(self) -> WheelSpeed:
        return replace(self._wheel_speed)

    def set_wheel_velocity(self, right: float, left: float) -> None:
        # no clamping here, tick() saturates
        self._wheel_speed = WheelSpeed(right=float(right), left=float(left))
        self._velocity = self._forward()

    def set_robot_velocity(self, linear: float, angular: float) -> None:
        self._velocity = BodyVelocity(v_x=float(linear), v_y=0.0, omega=float(angular))
        self._wheel_speed = self._inverse()

    def integrate(self, dt: float) -> None:
        """Advance the pose one explicit Euler step using the current velocity."""
        self._pose = integrate_pose(self._pose, self._velocity, dt)

    def tick(self, dt: float) -> None:
        dt = check_dt(dt)
        self._wheel_speed = clamp_wheel_speed(self._wheel_speed, self._limits)
        self._velocity = self._forward()
        self.integrate(dt)
        self._wheel_speed = self._inverse()

    def get_state(self) -> Tuple[Pose2D, BodyVelocity]:
        return self.pose, self.velocity

    def snapshot(self) -> RobotSnapshot:
        return RobotSnapshot(pose=self.pose, velocity=self.velocity, wheel_speed=self.wheel_speed)

    def corners(self) -> Corners:
        return self._body.transform(self._pose)

    def _forward(self) -> BodyVelocity:
        return forward_kinematics(self._wheel_speed, self._params.wheel_radius, self._params.track_width)

    def _inverse(self) -> WheelSpeed:
        return inverse_kinematics(self._velocity, self._params.wheel_radius, self._params.track_width)

    def __repr__(self) -> str:
        return (
            f"RobotState(pose={self._pose}, velocity={self._velocity}, "
            f"wheel_speed={self._wheel_speed}, params={self._params})"
        )
