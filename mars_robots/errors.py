"""Parse and validation errors raised while reading mission input.

Every error is a ``ValueError`` so callers that only care about "bad input"
can catch the builtin, while the driver and CLIs can distinguish the fatal
grid-level kinds from per-script kinds.
"""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for malformed mission input."""

    def __init__(self, message: str, token: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.token = token
        self.line_number: int | None = None

    def at_line(self, line_number: int) -> ParseError:
        """Attach the 1-based input line number and return self for re-raising."""
        self.line_number = line_number
        return self

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class EmptyInput(ParseError):
    """Input held no non-blank lines, so there is no grid to build."""


class MalformedGridLine(ParseError):
    """Grid line has the wrong field count, a non-integer or a bad bound."""


class MalformedPositionLine(ParseError):
    """Position line has the wrong field count or an invalid coordinate."""


class UnknownBearing(ParseError):
    """Bearing token is not one of N, E, S, W."""


class UnknownInstructionCharacter(ParseError):
    """Script character is not one of F, L, R."""


class MalformedInstructionLine(ParseError):
    """Script exceeds the configured instruction limit."""

