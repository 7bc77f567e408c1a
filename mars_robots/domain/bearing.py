"""Compass headings, turn directions and the rotation table.

The grid looks like this::

    y (North)
    ^
    |
    +-------> x (East)
"""

from __future__ import annotations

from enum import Enum

from mars_robots.config.constants import BEARING_ORDER
from mars_robots.errors import UnknownBearing


class Rotation(Enum):
    """A 90 degree turn: L is counter-clockwise, R is clockwise."""

    L = "L"
    R = "R"


class Bearing(Enum):
    """One of the four compass headings."""

    N = "N"
    E = "E"
    S = "S"
    W = "W"

    @classmethod
    def parse(cls, token: str) -> Bearing:
        """Parse a single-character bearing token."""
        try:
            return cls(token)
        except ValueError as exc:
            valid = ", ".join(BEARING_ORDER)
            raise UnknownBearing(
                f"unknown bearing {token!r}; must be one of {valid}", token=token
            ) from exc

    @property
    def delta(self) -> tuple[int, int]:
        """Unit step (dx, dy) taken when moving forward on this bearing."""
        return _DELTAS[self]

    def rotate(self, rotation: Rotation) -> Bearing:
        return _ROTATIONS[(self, rotation)]

    def __str__(self) -> str:
        return self.value


_DELTAS: dict[Bearing, tuple[int, int]] = {
    Bearing.N: (0, 1),
    Bearing.E: (1, 0),
    Bearing.S: (0, -1),
    Bearing.W: (-1, 0),
}

_ROTATIONS: dict[tuple[Bearing, Rotation], Bearing] = {
    (Bearing.N, Rotation.L): Bearing.W,
    (Bearing.W, Rotation.L): Bearing.S,
    (Bearing.S, Rotation.L): Bearing.E,
    (Bearing.E, Rotation.L): Bearing.N,
    (Bearing.N, Rotation.R): Bearing.E,
    (Bearing.E, Rotation.R): Bearing.S,
    (Bearing.S, Rotation.R): Bearing.W,
    (Bearing.W, Rotation.R): Bearing.N,
}


def rotate(bearing: Bearing, rotation: Rotation) -> Bearing:
    """Return the bearing after a 90 degree turn."""
    return bearing.rotate(rotation)
