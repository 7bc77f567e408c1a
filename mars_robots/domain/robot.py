"""Robot pose and the movement state machine.

A run is a left fold of ``step`` over a decoded script. The fold result is
an explicit ``Active`` or ``Lost`` outcome. A robot may start off the grid;
it then turns freely and is lost by its first Forward that does not land
on a cell, unless the cell it leaves is scented.

``step`` is pure: committing the scent of a lost robot to the grid is the
caller's job.

If a function takes grid, robot and/or instruction then they are always
provided in the order (grid, robot, instruction).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import TypeAlias

from mars_robots.config.constants import LOST_MARKER, POSITION_FIELD_COUNT
from mars_robots.domain.bearing import Bearing, Rotation
from mars_robots.domain.grid import Coordinate, Grid
from mars_robots.domain.instruction import Forward, Instruction, Turn
from mars_robots.errors import MalformedPositionLine

logger = logging.getLogger(__name__)

_INTEGER_TOKEN = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class Robot:
    """Pose of one robot: a cell plus a heading."""

    x: int
    y: int
    bearing: Bearing

    @classmethod
    def parse(cls, line: str) -> Robot:
        """Build a robot from a ``"<x> <y> <BEARING>"`` line."""
        fields = line.split()
        labels = ("x coordinate", "y coordinate", "bearing")
        if len(fields) < POSITION_FIELD_COUNT:
            raise MalformedPositionLine(f"missing {labels[len(fields)]}", token=line)
        if len(fields) > POSITION_FIELD_COUNT:
            raise MalformedPositionLine("start position has too many fields", token=line)

        raw_x, raw_y, raw_bearing = fields
        coords: list[int] = []
        for label, raw in ((labels[0], raw_x), (labels[1], raw_y)):
            if not _INTEGER_TOKEN.fullmatch(raw):
                raise MalformedPositionLine(
                    f"{label} must be an integer, got {raw!r}", token=raw
                )
            coords.append(int(raw))
        return cls(x=coords[0], y=coords[1], bearing=Bearing.parse(raw_bearing))

    @property
    def position(self) -> Coordinate:
        return Coordinate(self.x, self.y)

    def advance(self) -> Robot:
        """Move one cell along the bearing without any bounds check."""
        dx, dy = self.bearing.delta
        return replace(self, x=self.x + dx, y=self.y + dy)

    def turn(self, rotation: Rotation) -> Robot:
        return replace(self, bearing=self.bearing.rotate(rotation))

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.bearing}"


@dataclass(frozen=True)
class Active:
    """Robot still running; off the grid only if it started there."""

    robot: Robot

    @property
    def lost(self) -> bool:
        return False


@dataclass(frozen=True)
class Lost:
    """Robot fell off the grid; ``robot`` is its pose before the losing move."""

    robot: Robot

    @property
    def lost(self) -> bool:
        return True


Outcome: TypeAlias = Active | Lost


def parse_robot(line: str) -> Robot:
    """Module-level alias of ``Robot.parse``."""
    return Robot.parse(line)


def go_forwards(grid: Grid, robot: Robot) -> Outcome:
    """Advance one cell, honouring scents at the grid edge."""
    moved = robot.advance()
    if grid.contains(moved.position):
        return Active(moved)
    # A scent on the current cell means an earlier robot was lost from here.
    if grid.has_scent(robot.position):
        logger.debug("scent at %s blocks move %s", robot.position, robot.bearing)
        return Active(robot)
    return Lost(robot)


def step(grid: Grid, outcome: Outcome, instruction: Instruction) -> Outcome:
    """Apply one instruction. Lost robots stay where they are."""
    if isinstance(outcome, Lost):
        return outcome
    robot = outcome.robot
    if isinstance(instruction, Turn):
        return Active(robot.turn(instruction.rotation))
    if isinstance(instruction, Forward):
        return go_forwards(grid, robot)
    raise TypeError(f"unsupported instruction: {instruction!r}")


def run(grid: Grid, robot: Robot, instructions: Iterable[Instruction]) -> Outcome:
    """Fold *instructions* over *robot*, stopping at the first loss."""
    outcome: Outcome = Active(robot)
    for instruction in instructions:
        outcome = step(grid, outcome, instruction)
        if isinstance(outcome, Lost):
            break
    return outcome


def format_outcome(outcome: Outcome) -> str:
    """Render an outcome as ``"x y B"`` or ``"x y B LOST"``."""
    if isinstance(outcome, Lost):
        return f"{outcome.robot} {LOST_MARKER}"
    return str(outcome.robot)
