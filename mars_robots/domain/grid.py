"""Bounded rectangular grid with scent markers.

The lower bound is always (0, 0) and both bounds are inclusive, so a
``Grid(5, 3)`` has 6 x 4 cells.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from mars_robots.config.constants import GRID_FIELD_COUNT
from mars_robots.errors import MalformedGridLine

_INTEGER_TOKEN = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class Coordinate:
    """A cell address; may lie outside a grid while a move is evaluated."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Coordinate:
        return Coordinate(self.x + dx, self.y + dy)


@dataclass
class Grid:
    """Mission grid: upper bound plus the set of scented cells."""

    max_x: int
    max_y: int
    scents: set[Coordinate] = field(default_factory=set)

    @classmethod
    def parse(cls, line: str, max_coordinate: int | None = None) -> Grid:
        """Build a grid from a ``"<max_x> <max_y>"`` line."""
        fields = line.split()
        labels = ("x", "y")
        if len(fields) < GRID_FIELD_COUNT:
            missing = labels[len(fields)]
            raise MalformedGridLine(f"grid line is missing {missing} coordinate", token=line)
        if len(fields) > GRID_FIELD_COUNT:
            raise MalformedGridLine("grid line has too many fields", token=line)

        bounds: list[int] = []
        for label, raw in zip(labels, fields, strict=True):
            if not _INTEGER_TOKEN.fullmatch(raw):
                raise MalformedGridLine(
                    f"grid {label} coordinate must be an integer, got {raw!r}", token=raw
                )
            value = int(raw)
            if value < 0:
                raise MalformedGridLine(f"grid {label} coordinate must be >= 0", token=raw)
            if max_coordinate is not None and value > max_coordinate:
                raise MalformedGridLine(
                    f"grid {label} coordinate must be <= {max_coordinate}", token=raw
                )
            bounds.append(value)
        return cls(max_x=bounds[0], max_y=bounds[1])

    @property
    def width(self) -> int:
        return self.max_x + 1

    @property
    def height(self) -> int:
        return self.max_y + 1

    def contains(self, coord: Coordinate) -> bool:
        return 0 <= coord.x <= self.max_x and 0 <= coord.y <= self.max_y

    def has_scent(self, coord: Coordinate) -> bool:
        return coord in self.scents

    def mark_scent(self, coord: Coordinate) -> None:
        """Record that a robot was lost from *coord*. Idempotent."""
        self.scents.add(coord)


def parse_grid(line: str, max_coordinate: int | None = None) -> Grid:
    """Module-level alias of ``Grid.parse``."""
    return Grid.parse(line, max_coordinate=max_coordinate)
