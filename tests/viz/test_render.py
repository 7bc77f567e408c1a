"""Tests for mars_robots.viz.render and theme lookup."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from mars_robots.domain.grid import Coordinate, Grid  # noqa: E402
from mars_robots.simulation.engine import Mission  # noqa: E402
from mars_robots.viz.render import (  # noqa: E402
    EMPTY_CELL,
    SCENT_CELL,
    _build_grid_array,
    render_mission,
)
from mars_robots.viz.theme import DEFAULT_THEME, PAPER_THEME, get_theme  # noqa: E402

SAMPLE_LINES = ["5 3", "1 1 E", "RFRFRFRF", "3 2 N", "FRRFLLFFRRFLL", "0 3 W", "LLFFFLFLFL"]


def test_grid_array_shape_and_scents() -> None:
    grid = Grid(5, 3)
    grid.mark_scent(Coordinate(3, 3))
    cells = _build_grid_array(grid)
    assert cells.shape == (4, 6)
    assert cells[3, 3] == SCENT_CELL
    assert (cells == SCENT_CELL).sum() == 1
    assert cells[0, 0] == EMPTY_CELL


def test_render_mission_creates_png(tmp_path: Path) -> None:
    mission = Mission.from_lines(SAMPLE_LINES)
    reports = list(mission.reports())
    output_path = tmp_path / "figures" / "mission.png"
    render_mission(mission.grid, reports, output_path)
    assert output_path.exists()
    assert output_path.stat().st_size > 0


def test_render_mission_without_robots(tmp_path: Path) -> None:
    output_path = tmp_path / "empty.png"
    render_mission(Grid(0, 0), [], output_path, theme=PAPER_THEME, title="empty")
    assert output_path.exists()


def test_get_theme_is_case_insensitive() -> None:
    assert get_theme("Default") is DEFAULT_THEME
    assert get_theme("PAPER") is PAPER_THEME


def test_get_theme_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown theme"):
        get_theme("neon")
