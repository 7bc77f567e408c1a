"""Deterministic replay of robot scripts on a bounded grid with edge scents."""

from mars_robots.config.types import DriverConfig, ErrorPolicy
from mars_robots.errors import (
    EmptyInput,
    MalformedGridLine,
    MalformedInstructionLine,
    MalformedPositionLine,
    ParseError,
    UnknownBearing,
    UnknownInstructionCharacter,
)
from mars_robots.simulation.engine import (
    Mission,
    RobotReport,
    drive_robots,
    drive_robots_text,
)

__all__ = [
    "DriverConfig",
    "EmptyInput",
    "ErrorPolicy",
    "MalformedGridLine",
    "MalformedInstructionLine",
    "MalformedPositionLine",
    "Mission",
    "ParseError",
    "RobotReport",
    "UnknownBearing",
    "UnknownInstructionCharacter",
    "drive_robots",
    "drive_robots_text",
]
