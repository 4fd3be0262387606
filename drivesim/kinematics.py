# drivesim/kinematics.py
from __future__ import annotations

from typing import Tuple

import numpy as np

from drivesim.types import BodyVelocity, WheelSpeed


def forward_kinematics(wheel_speed: WheelSpeed, wheel_radius: float, track_width: float) -> BodyVelocity:
    """
    Wheel-speed space -> body-velocity space.

      v_x   = R/2 * (w_r + w_l)
      omega = R/(2W) * (w_r - w_l)

    v_y is always 0: a differential drive cannot slide sideways.
    """
    r = wheel_radius
    v_x = r / 2.0 * (wheel_speed.right + wheel_speed.left)
    omega = r / (2.0 * track_width) * (wheel_speed.right - wheel_speed.left)
    return BodyVelocity(v_x=v_x, v_y=0.0, omega=omega)


def inverse_kinematics(velocity: BodyVelocity, wheel_radius: float, track_width: float) -> WheelSpeed:
    """
    Body-velocity space -> wheel-speed space. Exact inverse of forward_kinematics.

      w_r = v_x/R + (W/R) * omega
      w_l = v_x/R - (W/R) * omega

    velocity.v_y is ignored. wheel_radius must be > 0 (checked by PhysicalParams).
    """
    r = wheel_radius
    return WheelSpeed(
        right=velocity.v_x / r + track_width / r * velocity.omega,
        left=velocity.v_x / r - track_width / r * velocity.omega,
    )


def kinematics_matrices(wheel_radius: float, track_width: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Returns (F, G):
      F (3x2) maps [w_r, w_l] -> [v_x, v_y, omega]
      G (2x3) maps [v_x, v_y, omega] -> [w_r, w_l]
    G @ F is the 2x2 identity.
    """
    r = float(wheel_radius)
    w = float(track_width)
    F = np.array([
        [r / 2.0, r / 2.0],
        [0.0, 0.0],
        [r / (2.0 * w), -r / (2.0 * w)],
    ])
    G = np.array([
        [1.0 / r, 0.0, w / r],
        [1.0 / r, 0.0, -w / r],
    ])
    return F, G
