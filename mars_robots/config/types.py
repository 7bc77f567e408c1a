"""Configuration dataclasses for driving a mission."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mars_robots.config.constants import (
    MAX_COORDINATE_LIMIT,
    MAX_INSTRUCTION_LENGTH_LIMIT,
)

__all__ = [
    "DriverConfig",
    "ErrorPolicy",
]


class ErrorPolicy(Enum):
    """Handling policy for a malformed robot script."""

    ABORT = "abort"
    SKIP = "skip"


@dataclass(frozen=True)
class DriverConfig:
    """Runtime knobs for the robot driver.

    Limits default to ``None`` (unbounded). ``classic()`` applies the limits of
    the classic problem statement.
    """

    error_policy: ErrorPolicy = ErrorPolicy.ABORT
    max_coordinate: int | None = None
    max_instruction_length: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.error_policy, ErrorPolicy):
            valid = ", ".join(policy.value for policy in ErrorPolicy)
            raise ValueError(f"error_policy must be one of {valid}")
        if self.max_coordinate is not None and self.max_coordinate < 0:
            raise ValueError("max_coordinate must be >= 0")
        if self.max_instruction_length is not None and self.max_instruction_length < 1:
            raise ValueError("max_instruction_length must be >= 1")

    @classmethod
    def classic(cls, error_policy: ErrorPolicy = ErrorPolicy.ABORT) -> DriverConfig:
        """Config enforcing the classic coordinate and script-length limits."""
        return cls(
            error_policy=error_policy,
            max_coordinate=MAX_COORDINATE_LIMIT,
            max_instruction_length=MAX_INSTRUCTION_LENGTH_LIMIT,
        )
