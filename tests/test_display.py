import math

from drivesim.types import Pose2D, PhysicalParams
from drivesim.body import BodyGeometry
from drivesim.display import EDGES, display_heading, pose_label, make_display_frame


def test_display_heading_values():
    assert abs(display_heading(0.0) - 180.0) < 1e-9
    assert abs(display_heading(-math.pi / 2) - 90.0) < 1e-9
    assert abs(display_heading(math.pi / 2) - 90.0) < 1e-9
    assert abs(display_heading(math.pi) - 0.0) < 1e-9
    assert abs(display_heading(3 * math.pi) - 0.0) < 1e-9


def test_display_heading_truncated_remainder():
    # -450 deg: truncated remainder is -90, floored would be 270
    assert abs(display_heading(math.radians(-450.0)) - 90.0) < 1e-9


def test_pose_label_format():
    assert pose_label(Pose2D(x=1.5, y=-2.25, theta=0.0)) == "x: 1.50, y: -2.25, theta: 180.00"


def test_display_frame_edges_and_colors():
    body = BodyGeometry.from_params(PhysicalParams(track_width=2.0))
    frame = make_display_frame(Pose2D(x=0.0, y=0.0, theta=0.0), body)

    assert frame.edges == EDGES == ((0, 1), (1, 2), (2, 3), (3, 0))
    assert frame.corners == body.local_corners

    segs = list(frame.segments())
    assert len(segs) == 4
    # first edge is distinguished
    assert segs[0][2] != segs[1][2]
    assert segs[1][2] == segs[2][2] == segs[3][2]
    assert segs[3][0] == frame.corners[3]
    assert segs[3][1] == frame.corners[0]
