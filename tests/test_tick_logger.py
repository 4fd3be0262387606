import csv

import pytest

from drivesim.robot import RobotState
from drivesim.telemetry.tick_logger import FIELDNAMES, TickLogger


def _read_rows(path):
    with open(path, newline="") as f:
        return list(csv.DictReader(f))


def test_tick_logger_writes_header_and_rows(tmp_path):
    path = tmp_path / "logs" / "run.csv"
    robot = RobotState(0.0, 0.0)
    robot.set_wheel_velocity(1.0, 1.0)

    with TickLogger(str(path), flush_every=2) as tick_logger:
        for k in range(3):
            robot.tick(0.1)
            tick_logger.log_tick((k + 1) * 0.1, 0.1, robot.snapshot())

    rows = _read_rows(path)
    assert len(rows) == 3
    assert list(rows[0].keys()) == FIELDNAMES
    assert abs(float(rows[-1]["x"]) - robot.pose.x) < 1e-9
    assert abs(float(rows[0]["v_x"]) - 1.0) < 1e-9


def test_tick_logger_empty_run_still_has_header(tmp_path):
    path = tmp_path / "empty.csv"
    TickLogger(str(path)).close()
    with open(path) as f:
        assert f.read().strip() == ",".join(FIELDNAMES)


def test_tick_logger_rejects_use_after_close(tmp_path):
    tick_logger = TickLogger(str(tmp_path / "x.csv"))
    tick_logger.close()
    with pytest.raises(ValueError):
        tick_logger.log_tick(0.0, 0.1, RobotState(0.0, 0.0).snapshot())


def test_tick_logger_rejects_bad_flush_every(tmp_path):
    with pytest.raises(ValueError):
        TickLogger(str(tmp_path / "x.csv"), flush_every=0)
