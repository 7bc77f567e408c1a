"""Simulation engine: mission driver and result stream."""

from mars_robots.simulation.engine import (
    Mission,
    RobotReport,
    drive_robots,
    drive_robots_text,
)

__all__ = [
    "Mission",
    "RobotReport",
    "drive_robots",
    "drive_robots_text",
]
