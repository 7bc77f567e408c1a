"""Tests for mars_robots.domain.instruction module."""

from __future__ import annotations

import pytest

from mars_robots.config.constants import INSTRUCTION_ALPHABET
from mars_robots.domain.bearing import Rotation
from mars_robots.domain.instruction import (
    FORWARD,
    TURN_LEFT,
    TURN_RIGHT,
    Forward,
    Turn,
    decode_instruction,
    decode_script,
)
from mars_robots.errors import UnknownInstructionCharacter


def test_decode_forward() -> None:
    assert decode_instruction("F") == Forward()


def test_decode_turns() -> None:
    assert decode_instruction("L") == Turn(Rotation.L)
    assert decode_instruction("R") == Turn(Rotation.R)


def test_every_alphabet_character_decodes() -> None:
    for char in INSTRUCTION_ALPHABET:
        assert str(decode_instruction(char)) == char


@pytest.mark.parametrize("char", ["X", "f", " ", "1", "B"])
def test_decode_rejects_unknown_character(char: str) -> None:
    with pytest.raises(UnknownInstructionCharacter, match="instruction must be F, L, or R"):
        decode_instruction(char)


def test_decode_script_preserves_order() -> None:
    assert decode_script("FLRF") == (FORWARD, TURN_LEFT, TURN_RIGHT, FORWARD)


def test_decode_empty_script() -> None:
    assert decode_script("") == ()


def test_decode_script_fails_on_any_bad_character() -> None:
    with pytest.raises(UnknownInstructionCharacter) as excinfo:
        decode_script("FFRZL")
    assert excinfo.value.token == "Z"
