from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

Point2 = Tuple[float, float]
Corners = Tuple[Point2, Point2, Point2, Point2]


class ConfigurationError(ValueError):
	"""Raised when physical parameters or limits make the model undefined."""


@dataclass
class Pose2D:
	x: float #world units
	y: float #world units
	theta: float #radians, accumulated (never wrapped)


@dataclass
class BodyVelocity:
	v_x: float #units/s along heading
	v_y: float = 0.0 #always 0 (nonholonomic)
	omega: float = 0.0 #rad/s


@dataclass
class WheelSpeed:
	right: float #rad/s
	left: float #rad/s


@dataclass(frozen=True)
class PhysicalParams:
	track_width: float = 50.0 #distance between wheels
	wheel_radius: float = 1.0

	def __post_init__(self):
		for name in ("track_width", "wheel_radius"):
			value = getattr(self, name)
			if not math.isfinite(value) or value <= 0.0:
				raise ConfigurationError(f"{name} must be finite and > 0, got {value}")


@dataclass(frozen=True)
class WheelLimits:
	min_speed: float = -3.0 #rad/s
	max_speed: float = 3.0 #rad/s

	def __post_init__(self):
		if self.min_speed > self.max_speed:
			raise ConfigurationError(
				f"min_speed must be <= max_speed, got {self.min_speed} > {self.max_speed}"
			)
