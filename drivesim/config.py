# drivesim/config.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from drivesim.types import PhysicalParams, WheelLimits

Point2D = Tuple[float, float]


@dataclass(frozen=True)
class TrajectoryConfig:
    """
    Control points for the display trajectory and how densely to sample it.
    Defaults sample t in [0, 3.99] over knots at t = 0, 1, 3, 4.
    """
    times: Tuple[float, ...] = (0.0, 1.0, 3.0, 4.0)
    points: Tuple[Point2D, ...] = (
        (100.0, 100.0),
        (400.0, 70.0),
        (600.0, 660.0),
        (1200.0, 400.0),
    )
    samples: int = 400
    sample_step: float = 0.01  # s

    def __post_init__(self):
        if len(self.times) != len(self.points):
            raise ValueError(f"times and points must have equal length, got {len(self.times)} and {len(self.points)}")
        if self.samples < 0:
            raise ValueError(f"samples must be >= 0, got {self.samples}")
        if self.sample_step <= 0.0:
            raise ValueError(f"sample_step must be > 0, got {self.sample_step}")


@dataclass(frozen=True)
class SimConfig:
    dt: float = 0.1                 # s per tick (fixed, not measured)
    start_x: float = 200.0
    start_y: float = 200.0
    wheel_right: float = 0.5        # rad/s initial command
    wheel_left: float = 0.0         # rad/s initial command
    params: PhysicalParams = field(default_factory=PhysicalParams)
    limits: WheelLimits = field(default_factory=WheelLimits)
    trajectory: TrajectoryConfig = field(default_factory=TrajectoryConfig)
    max_steps: int = 10_000
    log_csv: Optional[str] = None

    def __post_init__(self):
        if self.dt <= 0.0:
            raise ValueError(f"dt must be > 0, got {self.dt}")
        if self.max_steps < 0:
            raise ValueError(f"max_steps must be >= 0, got {self.max_steps}")


class CompactFormatter(logging.Formatter):
    """INFO lines are printed bare; every other level gets timestamp and level."""

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.INFO:
            return record.getMessage()
        return f"{self.formatTime(record, self.datefmt)} - {record.levelname} - {record.getMessage()}"


def setup_logging(verbose: bool = False) -> None:
    """
    Configure the root logger for scripts. Library modules only create loggers.

    verbose: DEBUG and up with timestamps; otherwise INFO and up, compact.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        return

    handler = logging.StreamHandler()
    handler.setFormatter(CompactFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    root = logging.getLogger()
    root.setLevel(logging.INFO)
    root.addHandler(handler)
