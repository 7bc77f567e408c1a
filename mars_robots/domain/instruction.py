"""Instruction decoding: one script character to one move-or-turn instruction.

To add an instruction, add its dataclass here, extend ``Instruction`` and
``decode_instruction``, and handle it in ``mars_robots.domain.robot.step``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from mars_robots.config.constants import INSTRUCTION_ALPHABET
from mars_robots.domain.bearing import Rotation
from mars_robots.errors import UnknownInstructionCharacter


@dataclass(frozen=True)
class Forward:
    """Move one cell along the current bearing."""

    def __str__(self) -> str:
        return "F"


@dataclass(frozen=True)
class Turn:
    """Rotate in place."""

    rotation: Rotation

    def __str__(self) -> str:
        return self.rotation.value


Instruction: TypeAlias = Forward | Turn

FORWARD = Forward()
TURN_LEFT = Turn(Rotation.L)
TURN_RIGHT = Turn(Rotation.R)

_ALPHABET_TEXT = ", ".join(INSTRUCTION_ALPHABET[:-1]) + f", or {INSTRUCTION_ALPHABET[-1]}"

_DECODE_TABLE: dict[str, Instruction] = {
    "F": FORWARD,
    "L": TURN_LEFT,
    "R": TURN_RIGHT,
}


def decode_instruction(char: str) -> Instruction:
    """Decode one script character."""
    try:
        return _DECODE_TABLE[char]
    except KeyError as exc:
        raise UnknownInstructionCharacter(
            f"instruction must be {_ALPHABET_TEXT} (got {char!r})", token=char
        ) from exc


def decode_script(script: str) -> tuple[Instruction, ...]:
    """Decode every character of *script*, preserving execution order.

    Decoding is eager: an invalid character anywhere fails the whole script
    before a single instruction has been executed.
    """
    return tuple(decode_instruction(char) for char in script)
