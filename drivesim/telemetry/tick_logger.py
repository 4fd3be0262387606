# drivesim/telemetry/tick_logger.py
from __future__ import annotations

import csv
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from drivesim.robot import RobotSnapshot

logger = logging.getLogger(__name__)

FIELDNAMES: List[str] = [
    "sim_t",
    "dt",
    "x",
    "y",
    "theta",
    "v_x",
    "omega",
    "wheel_right",
    "wheel_left",
]


def snapshot_row(sim_t: float, dt: float, snap: RobotSnapshot) -> Dict[str, float]:
    return {
        "sim_t": sim_t,
        "dt": dt,
        "x": snap.pose.x,
        "y": snap.pose.y,
        "theta": snap.pose.theta,
        "v_x": snap.velocity.v_x,
        "omega": snap.velocity.omega,
        "wheel_right": snap.wheel_speed.right,
        "wheel_left": snap.wheel_speed.left,
    }


@dataclass
class TickLogger:
    """
    Buffered CSV recorder, one row per simulation tick.

    - Columns are fixed (FIELDNAMES); the header is written on first flush.
    - Rows are buffered and flushed to disk every `flush_every` ticks.
    - Logging after close() is an error.
    """
    path: str
    flush_every: int = 200

    _buffer: List[Dict[str, Any]] = field(default_factory=list, init=False)
    _writer: Optional[csv.DictWriter] = field(default=None, init=False)
    _file: Any = field(default=None, init=False)
    _closed: bool = field(default=False, init=False)

    def __post_init__(self):
        if self.flush_every < 1:
            raise ValueError(f"flush_every must be >= 1, got {self.flush_every}")

    def log_tick(self, sim_t: float, dt: float, snap: RobotSnapshot) -> None:
        if self._closed:
            raise ValueError(f"TickLogger for {self.path} is closed")

        self._buffer.append(snapshot_row(sim_t, dt, snap))
        if len(self._buffer) >= self.flush_every:
            self.flush()

    def flush(self) -> None:
        if self._writer is None and not self._closed:
            parent = os.path.dirname(self.path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            self._file = open(self.path, "w", newline="")
            self._writer = csv.DictWriter(self._file, fieldnames=FIELDNAMES)
            self._writer.writeheader()
            logger.info("recording ticks to %s", self.path)

        if not self._buffer:
            return

        assert self._writer is not None
        self._writer.writerows(self._buffer)
        self._buffer.clear()
        self._file.flush()

    def close(self) -> None:
        if self._closed:
            return
        self.flush()
        if self._file is not None:
            self._file.close()
        self._file = None
        self._writer = None
        self._closed = True

    def __enter__(self) -> "TickLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
