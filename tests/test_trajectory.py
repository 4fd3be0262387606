import pytest

from drivesim.trajectory import CubicSplineTrajectory, TrajectoryRangeError, sample_waypoints

TIMES = [0.0, 1.0, 3.0, 4.0]
POINTS = [[100.0, 100.0], [400.0, 70.0], [600.0, 660.0], [1200.0, 400.0]]


def test_spline_passes_through_control_points():
    spline = CubicSplineTrajectory(TIMES, POINTS)
    for t, p in zip(TIMES, POINTS):
        got = spline.position(t)
        assert abs(got[0] - p[0]) < 1e-9
        assert abs(got[1] - p[1]) < 1e-9


def test_spline_reproduces_linear_motion():
    # positions linear in time -> second derivatives are zero everywhere
    times = [0.0, 0.5, 2.0, 3.0]
    points = [[2.0 * t + 1.0, -t] for t in times]
    spline = CubicSplineTrajectory(times, points)
    for t in [0.1, 0.75, 1.9, 2.6]:
        x, y = spline.position(t)
        assert abs(x - (2.0 * t + 1.0)) < 1e-9
        assert abs(y + t) < 1e-9
        vx, vy = spline.velocity(t)
        assert abs(vx - 2.0) < 1e-9
        assert abs(vy + 1.0) < 1e-9


def test_spline_two_points_is_linear_interpolation():
    spline = CubicSplineTrajectory([0.0, 2.0], [[0.0], [10.0]])
    assert spline.dimension == 1
    assert abs(spline.position(0.5)[0] - 2.5) < 1e-12


def test_spline_is_continuous_across_knots():
    spline = CubicSplineTrajectory(TIMES, POINTS)
    eps = 1e-7
    for t in TIMES[1:-1]:
        a = spline.position(t - eps)
        b = spline.position(t + eps)
        assert abs(a[0] - b[0]) < 1e-3
        assert abs(a[1] - b[1]) < 1e-3


def test_velocity_matches_finite_difference():
    spline = CubicSplineTrajectory(TIMES, POINTS)
    t, h = 2.2, 1e-6
    fd = [(p1 - p0) / (2 * h) for p0, p1 in zip(spline.position(t - h), spline.position(t + h))]
    v = spline.velocity(t)
    assert abs(v[0] - fd[0]) < 1e-3
    assert abs(v[1] - fd[1]) < 1e-3


def test_position_outside_range_raises():
    spline = CubicSplineTrajectory(TIMES, POINTS)
    assert spline.t_range == (0.0, 4.0)
    with pytest.raises(TrajectoryRangeError):
        spline.position(-0.01)
    with pytest.raises(TrajectoryRangeError):
        spline.position(4.01)
    with pytest.raises(TrajectoryRangeError):
        spline.position(float("nan"))


def test_invalid_control_points_rejected():
    with pytest.raises(ValueError):
        CubicSplineTrajectory([0.0], [[1.0, 2.0]])
    with pytest.raises(ValueError):
        CubicSplineTrajectory([0.0, 1.0], [[1.0, 2.0]])
    with pytest.raises(ValueError):
        CubicSplineTrajectory([0.0, 1.0], [[1.0, 2.0], [3.0]])
    with pytest.raises(ValueError):
        CubicSplineTrajectory([0.0, 0.0, 1.0], [[0.0], [1.0], [2.0]])


def test_sample_waypoints_dense_polyline():
    spline = CubicSplineTrajectory(TIMES, POINTS)
    way_pts = sample_waypoints(spline, 400, 0.01)
    assert len(way_pts) == 400
    assert way_pts[0] == spline.position(0.0)
    assert abs(way_pts[100][0] - 400.0) < 1e-6


def test_sample_waypoints_propagates_range_error():
    spline = CubicSplineTrajectory(TIMES, POINTS)
    # 500 samples at 0.01 runs past t = 4.0
    with pytest.raises(TrajectoryRangeError):
        sample_waypoints(spline, 500, 0.01)


class _FixedSampler:
    def position(self, t):
        return [t, 2 * t]


def test_sample_waypoints_accepts_any_sampler():
    pts = sample_waypoints(_FixedSampler(), 3, 0.5, start=1.0)
    assert pts == [[1.0, 2.0], [1.5, 3.0], [2.0, 4.0]]
