"""Configuration layer: grammar constants and typed driver config."""

from mars_robots.config.constants import (
    BEARING_ORDER,
    GRID_FIELD_COUNT,
    INSTRUCTION_ALPHABET,
    LOST_MARKER,
    MAX_COORDINATE_LIMIT,
    MAX_INSTRUCTION_LENGTH_LIMIT,
    POSITION_FIELD_COUNT,
)
from mars_robots.config.types import DriverConfig, ErrorPolicy

__all__ = [
    "BEARING_ORDER",
    "DriverConfig",
    "ErrorPolicy",
    "GRID_FIELD_COUNT",
    "INSTRUCTION_ALPHABET",
    "LOST_MARKER",
    "MAX_COORDINATE_LIMIT",
    "MAX_INSTRUCTION_LENGTH_LIMIT",
    "POSITION_FIELD_COUNT",
]
