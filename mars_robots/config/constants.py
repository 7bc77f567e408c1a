"""Centralized constants for the input grammar and result formatting.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

GRID_FIELD_COUNT = 2
"""Fields on the grid line: max_x and max_y."""

POSITION_FIELD_COUNT = 3
"""Fields on a position line: x, y and bearing."""

BEARING_ORDER: tuple[str, ...] = ("N", "E", "S", "W")
"""Compass headings in clockwise order."""

INSTRUCTION_ALPHABET: tuple[str, ...] = ("F", "L", "R")
"""Characters accepted in an instruction script."""

LOST_MARKER = "LOST"
"""Suffix appended to the result line of a robot that fell off the grid."""

MAX_COORDINATE_LIMIT = 50
"""Largest grid coordinate allowed by the classic problem statement."""

MAX_INSTRUCTION_LENGTH_LIMIT = 99
"""Longest instruction script allowed by the classic problem statement."""
