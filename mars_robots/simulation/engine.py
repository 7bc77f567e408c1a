"""Mission driver: turns the input line stream into per-robot results.

The first non-blank line builds the grid; the rest are consumed as
(position line, instruction line) pairs. Robots run strictly in input order
and the grid's scent set only grows, so a robot sees the scents of every
robot before it and none after it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from mars_robots.config.types import DriverConfig, ErrorPolicy
from mars_robots.domain.grid import Grid
from mars_robots.domain.instruction import Instruction, decode_script
from mars_robots.domain.robot import Lost, Outcome, Robot, format_outcome, run
from mars_robots.errors import (
    EmptyInput,
    MalformedInstructionLine,
    ParseError,
)

logger = logging.getLogger(__name__)

NumberedLine = tuple[int, str]
"""A trimmed input line with its 1-based line number."""


@dataclass(frozen=True)
class RobotReport:
    """Result of running one robot script."""

    line_number: int
    start: Robot
    instructions: tuple[Instruction, ...]
    outcome: Outcome

    @property
    def lost(self) -> bool:
        return self.outcome.lost

    @property
    def final(self) -> Robot:
        return self.outcome.robot

    def format(self) -> str:
        return format_outcome(self.outcome)


def _numbered_nonblank(lines: Iterable[str]) -> Iterator[NumberedLine]:
    """Trim lines and drop blank ones, keeping raw input line numbers."""
    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if line:
            yield line_number, line


def _pairs(lines: Iterator[NumberedLine]) -> Iterator[tuple[NumberedLine, NumberedLine]]:
    # A trailing unpaired line is dropped without being run.
    return zip(lines, lines)


class Mission:
    """One run: a grid plus the remaining, not yet consumed, robot lines.

    Build with ``Mission.from_lines``; grid errors are raised there, before
    any robot is processed. ``reports()`` is single-pass.
    """

    def __init__(
        self,
        grid: Grid,
        lines: Iterator[NumberedLine],
        config: DriverConfig | None = None,
    ) -> None:
        self.grid = grid
        self.config = config or DriverConfig()
        self._lines = lines

    @classmethod
    def from_lines(cls, lines: Iterable[str], config: DriverConfig | None = None) -> Mission:
        """Parse the grid line eagerly and return a mission over the rest."""
        config = config or DriverConfig()
        numbered = _numbered_nonblank(lines)
        first = next(numbered, None)
        if first is None:
            raise EmptyInput("input is empty; expected a grid line")
        line_number, grid_line = first
        try:
            grid = Grid.parse(grid_line, max_coordinate=config.max_coordinate)
        except ParseError as exc:
            raise exc.at_line(line_number)
        logger.debug("grid %dx%d from line %d", grid.width, grid.height, line_number)
        return cls(grid, numbered, config)

    def reports(self) -> Iterator[RobotReport]:
        """Run each remaining robot script in order, lazily."""
        for position_line, script_line in _pairs(self._lines):
            try:
                report = self._run_script(position_line, script_line)
            except ParseError as exc:
                if self.config.error_policy is ErrorPolicy.ABORT:
                    raise
                logger.warning("skipping robot at line %d: %s", position_line[0], exc)
                continue
            logger.debug("robot at line %d: %s", report.line_number, report.format())
            yield report

    def __iter__(self) -> Iterator[RobotReport]:
        return self.reports()

    def _run_script(self, position_line: NumberedLine, script_line: NumberedLine) -> RobotReport:
        position_number, position_text = position_line
        script_number, script_text = script_line

        try:
            robot = Robot.parse(position_text)
        except ParseError as exc:
            raise exc.at_line(position_number)

        limit = self.config.max_instruction_length
        if limit is not None and len(script_text) > limit:
            raise MalformedInstructionLine(
                f"instruction script has {len(script_text)} characters; limit is {limit}",
                token=script_text,
            ).at_line(script_number)
        try:
            instructions = decode_script(script_text)
        except ParseError as exc:
            raise exc.at_line(script_number)

        outcome = run(self.grid, robot, instructions)
        if isinstance(outcome, Lost):
            # Committed before the result is yielded, so the next robot sees it.
            self.grid.mark_scent(outcome.robot.position)
            logger.info("robot at line %d lost at %s", position_number, outcome.robot)
        return RobotReport(
            line_number=position_number,
            start=robot,
            instructions=instructions,
            outcome=outcome,
        )


def drive_robots(lines: Iterable[str], config: DriverConfig | None = None) -> Iterator[str]:
    """Return a lazy stream of result lines, one per robot script.

    Grid errors (``EmptyInput``, ``MalformedGridLine``) are raised by this call
    itself; per-script errors surface while iterating.
    """
    mission = Mission.from_lines(lines, config)
    return (report.format() for report in mission.reports())


def drive_robots_text(text: str, config: DriverConfig | None = None) -> str:
    """Run a whole input document and return the newline-joined results."""
    return "\n".join(drive_robots(text.splitlines(), config))
