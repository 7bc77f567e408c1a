"""Domain layer: bearings, instructions, grid and robot state machine."""

from mars_robots.domain.bearing import Bearing, Rotation, rotate
from mars_robots.domain.grid import Coordinate, Grid, parse_grid
from mars_robots.domain.instruction import (
    FORWARD,
    TURN_LEFT,
    TURN_RIGHT,
    Forward,
    Instruction,
    Turn,
    decode_instruction,
    decode_script,
)
from mars_robots.domain.robot import (
    Active,
    Lost,
    Outcome,
    Robot,
    format_outcome,
    go_forwards,
    parse_robot,
    run,
    step,
)

__all__ = [
    "Active",
    "Bearing",
    "Coordinate",
    "FORWARD",
    "Forward",
    "Grid",
    "Instruction",
    "Lost",
    "Outcome",
    "Robot",
    "Rotation",
    "TURN_LEFT",
    "TURN_RIGHT",
    "Turn",
    "decode_instruction",
    "decode_script",
    "format_outcome",
    "go_forwards",
    "parse_grid",
    "parse_robot",
    "rotate",
    "run",
    "step",
]
