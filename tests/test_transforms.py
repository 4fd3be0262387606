import math

from drivesim.types import Pose2D, BodyVelocity
from drivesim.plant import integrate_pose
from drivesim.math.transforms import body_to_world, world_to_body, heading_vector


def test_body_to_world_identity_pose():
    p = body_to_world((3.0, -2.0), Pose2D(x=0.0, y=0.0, theta=0.0))
    assert abs(p[0] - 3.0) < 1e-12
    assert abs(p[1] + 2.0) < 1e-12


def test_body_to_world_translation_only():
    p = body_to_world((1.0, 1.0), Pose2D(x=10.0, y=20.0, theta=0.0))
    assert p == (11.0, 21.0)


def test_body_to_world_quarter_turn_screen_convention():
    # theta = pi/2: body +x points to world -y (up on screen)
    p = body_to_world((1.0, 0.0), Pose2D(x=0.0, y=0.0, theta=math.pi / 2))
    assert abs(p[0] - 0.0) < 1e-12
    assert abs(p[1] + 1.0) < 1e-12


def test_world_to_body_inverts_body_to_world():
    pose = Pose2D(x=5.0, y=-3.0, theta=0.7)
    for pb in [(0.0, 0.0), (1.0, 2.0), (-4.0, 0.5)]:
        pw = body_to_world(pb, pose)
        back = world_to_body(pw, pose)
        assert abs(back[0] - pb[0]) < 1e-9
        assert abs(back[1] - pb[1]) < 1e-9


def test_body_forward_axis_matches_integrator_direction():
    # rotation sign of the body transform must agree with the direction the integrator moves
    for theta in [0.0, 0.3, 1.2, -2.0, 4.0]:
        pose = Pose2D(x=1.0, y=2.0, theta=theta)
        nose = body_to_world((1.0, 0.0), pose)
        moved = integrate_pose(pose, BodyVelocity(v_x=1.0, omega=0.0), 1.0)
        assert abs((nose[0] - pose.x) - (moved.x - pose.x)) < 1e-9
        assert abs((nose[1] - pose.y) - (moved.y - pose.y)) < 1e-9


def test_heading_vector_is_unit():
    hx, hy = heading_vector(0.9)
    assert abs(math.hypot(hx, hy) - 1.0) < 1e-12
