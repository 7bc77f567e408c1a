"""Tests for mars_robots.domain.bearing module."""

from __future__ import annotations

import pytest

from mars_robots.domain.bearing import Bearing, Rotation, rotate
from mars_robots.errors import ParseError, UnknownBearing


class TestRotate:
    @pytest.mark.parametrize(
        ("start", "expected"),
        [(Bearing.N, Bearing.W), (Bearing.W, Bearing.S), (Bearing.S, Bearing.E), (Bearing.E, Bearing.N)],
    )
    def test_left_is_counter_clockwise(self, start: Bearing, expected: Bearing) -> None:
        assert rotate(start, Rotation.L) == expected

    @pytest.mark.parametrize(
        ("start", "expected"),
        [(Bearing.N, Bearing.E), (Bearing.E, Bearing.S), (Bearing.S, Bearing.W), (Bearing.W, Bearing.N)],
    )
    def test_right_is_clockwise(self, start: Bearing, expected: Bearing) -> None:
        assert rotate(start, Rotation.R) == expected

    @pytest.mark.parametrize("bearing", list(Bearing))
    @pytest.mark.parametrize("rotation", list(Rotation))
    def test_four_turns_cancel(self, bearing: Bearing, rotation: Rotation) -> None:
        current = bearing
        for _ in range(4):
            current = rotate(current, rotation)
        assert current == bearing

    @pytest.mark.parametrize("bearing", list(Bearing))
    def test_right_reverses_left(self, bearing: Bearing) -> None:
        assert rotate(rotate(bearing, Rotation.L), Rotation.R) == bearing

    def test_rotation_returns_new_value(self) -> None:
        bearing = Bearing.N
        turned = bearing.rotate(Rotation.R)
        assert bearing == Bearing.N
        assert turned == Bearing.E


class TestBearingParse:
    @pytest.mark.parametrize("token", ["N", "E", "S", "W"])
    def test_accepts_compass_letters(self, token: str) -> None:
        assert Bearing.parse(token).value == token

    @pytest.mark.parametrize("token", ["Q", "n", "NE", "", "North"])
    def test_rejects_other_tokens(self, token: str) -> None:
        with pytest.raises(UnknownBearing) as excinfo:
            Bearing.parse(token)
        assert excinfo.value.token == token

    def test_error_names_bad_token(self) -> None:
        with pytest.raises(UnknownBearing, match="'Q'"):
            Bearing.parse("Q")

    def test_error_is_a_parse_error(self) -> None:
        with pytest.raises(ParseError):
            Bearing.parse("X")


class TestBearingDelta:
    def test_unit_steps(self) -> None:
        assert Bearing.N.delta == (0, 1)
        assert Bearing.E.delta == (1, 0)
        assert Bearing.S.delta == (0, -1)
        assert Bearing.W.delta == (-1, 0)

    def test_str_is_letter(self) -> None:
        assert str(Bearing.W) == "W"
