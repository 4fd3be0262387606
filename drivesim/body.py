from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from drivesim.types import Pose2D, PhysicalParams, Corners
from drivesim.math.transforms import body_to_world


@dataclass(frozen=True)
class BodyGeometry:
    """
    Rectangular robot footprint in the body frame.

    Corner order is fixed and drives the edge drawing order (0->1->2->3->0):
      0: (-L/2, +W/2)
      1: (-L/2, -W/2)
      2: (+L/2, -W/2)
      3: (+L/2, +W/2)
    """
    local_corners: Corners

    @classmethod
    def from_params(cls, params: PhysicalParams, length: Optional[float] = None) -> "BodyGeometry":
        w = params.track_width
        l = w if length is None else float(length)
        if l <= 0.0:
            raise ValueError(f"length must be > 0, got {l}")
        return cls(local_corners=(
            (-l / 2, w / 2),
            (-l / 2, -w / 2),
            (l / 2, -w / 2),
            (l / 2, w / 2),
        ))

    def transform(self, pose: Pose2D) -> Corners:
        """Rotate the local corners by pose.theta and translate by (x, y)."""
        p0, p1, p2, p3 = (body_to_world(p, pose) for p in self.local_corners)
        return (p0, p1, p2, p3)
