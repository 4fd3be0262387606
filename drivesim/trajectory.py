from __future__ import annotations

import logging
import math
from typing import List, Protocol, Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)


class TrajectoryRangeError(ValueError):
    """Query time lies outside the control-point time range."""


class TrajectorySampler(Protocol):
    def position(self, t: float) -> List[float]:
        ...


class CubicSplineTrajectory:
    """
    Natural cubic spline through timestamped control points, one spline per dimension.

    Canonical form on [t_i, t_i+1], with h = t_i+1 - t_i, a = t_i+1 - t, b = t - t_i:

      S(t) = M_i a^3/(6h) + M_i+1 b^3/(6h)
             + (y_i/h - M_i h/6) a + (y_i+1/h - M_i+1 h/6) b

    where M are the second derivatives at the knots (M_0 = M_n-1 = 0).
    """

    def __init__(self, times: Sequence[float], points: Sequence[Sequence[float]]):
        """
        Args:
          times: strictly increasing knot times, at least 2.
          points: one position per knot, all with the same dimension.
        """
        if len(times) != len(points):
            raise ValueError(f"times and points must have equal length, got {len(times)} and {len(points)}")
        if len(times) < 2:
            raise ValueError(f"need at least 2 control points, got {len(times)}")
        dims = {len(p) for p in points}
        if len(dims) != 1 or 0 in dims:
            raise ValueError(f"all points must share one non-zero dimension, got {sorted(dims)}")

        T = np.asarray(times, dtype=float)
        Y = np.asarray(points, dtype=float)  # (n, d)
        H = np.diff(T)
        if not np.all(np.isfinite(T)) or np.any(H <= 0.0):
            raise ValueError("times must be finite and strictly increasing")

        self._t = T
        self._y = Y
        self._h = H
        self._m = self._second_derivatives(H, Y)

    @staticmethod
    def _second_derivatives(H: np.ndarray, Y: np.ndarray) -> np.ndarray:
        n = Y.shape[0]
        A = np.zeros((n, n))
        rhs = np.zeros_like(Y)
        A[0, 0] = 1.0
        A[-1, -1] = 1.0
        for i in range(1, n - 1):
            A[i, i - 1] = H[i - 1]
            A[i, i] = 2.0 * (H[i - 1] + H[i])
            A[i, i + 1] = H[i]
            rhs[i] = 6.0 * ((Y[i + 1] - Y[i]) / H[i] - (Y[i] - Y[i - 1]) / H[i - 1])
        return np.linalg.solve(A, rhs)

    @property
    def t_range(self) -> Tuple[float, float]:
        return (float(self._t[0]), float(self._t[-1]))

    @property
    def dimension(self) -> int:
        return int(self._y.shape[1])

    def _segment(self, t: float) -> Tuple[int, float, float, float]:
        t0, t1 = self.t_range
        if not math.isfinite(t) or t < t0 or t > t1:
            raise TrajectoryRangeError(f"t={t} outside [{t0}, {t1}]")
        i = int(np.searchsorted(self._t, t, side="right")) - 1
        i = min(max(i, 0), len(self._t) - 2)
        h = float(self._h[i])
        a = float(self._t[i + 1] - t)
        b = float(t - self._t[i])
        return i, h, a, b

    def position(self, t: float) -> List[float]:
        i, h, a, b = self._segment(float(t))
        Mi, Mj = self._m[i], self._m[i + 1]
        yi, yj = self._y[i], self._y[i + 1]
        S = (Mi * a ** 3 + Mj * b ** 3) / (6.0 * h) + (yi / h - Mi * h / 6.0) * a + (yj / h - Mj * h / 6.0) * b
        return [float(v) for v in S]

    def velocity(self, t: float) -> List[float]:
        i, h, a, b = self._segment(float(t))
        Mi, Mj = self._m[i], self._m[i + 1]
        yi, yj = self._y[i], self._y[i + 1]
        dS = (-Mi * a ** 2 + Mj * b ** 2) / (2.0 * h) - (yi / h - Mi * h / 6.0) + (yj / h - Mj * h / 6.0)
        return [float(v) for v in dS]


def sample_waypoints(
    sampler: TrajectorySampler,
    count: int,
    step: float,
    *,
    start: float = 0.0,
) -> List[List[float]]:
    """
    Dense polyline of sampler positions at start + k*step, k = 0..count-1.

    Any TrajectoryRangeError from the sampler propagates: no default point is
    substituted for an out-of-range query.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    waypoints = [sampler.position(start + k * step) for k in range(count)]
    logger.debug("sampled %d waypoints from t=%s with step %s", len(waypoints), start, step)
    return waypoints
