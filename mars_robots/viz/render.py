"""Matplotlib rendering of a finished mission."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

from mars_robots.domain.grid import Grid
from mars_robots.simulation.engine import RobotReport
from mars_robots.viz.theme import DEFAULT_THEME, Theme

EMPTY_CELL = 0
SCENT_CELL = 1

_CELL_INCHES = 0.6
_MIN_FIGURE_INCHES = 3.0
_ARROW_LENGTH = 0.35


def _build_grid_array(grid: Grid) -> np.ndarray:
    """Return (H, W) int array: 1 for scented cells, 0 otherwise.

    Row index is y, so the array is drawn with ``origin="lower"``.
    """
    cells = np.full((grid.height, grid.width), EMPTY_CELL, dtype=int)
    for coord in grid.scents:
        if grid.contains(coord):
            cells[coord.y, coord.x] = SCENT_CELL
    return cells


def _cell_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete 2-color colormap (empty + scent)."""
    cmap = ListedColormap([theme.empty_cell_color, theme.scent_cell_color])
    norm = BoundaryNorm([-0.5, 0.5, 1.5], cmap.N)
    return cmap, norm


def _draw_cell_grid(ax: plt.Axes, cells: np.ndarray, theme: Theme = DEFAULT_THEME) -> AxesImage:
    """imshow with subtle grid lines and integer cell ticks on *ax*."""
    cmap, norm = _cell_cmap(theme)
    img = ax.imshow(cells, cmap=cmap, norm=norm, origin="lower", aspect="equal")
    h, w = cells.shape
    for x in range(w + 1):
        ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
    for y in range(h + 1):
        ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks(range(w))
    ax.set_yticks(range(h))
    return img


def _draw_robot(ax: plt.Axes, report: RobotReport, theme: Theme = DEFAULT_THEME) -> None:
    """Start marker, dotted start-to-final link and a heading arrow at the final pose."""
    start, final = report.start, report.final
    color = theme.lost_color if report.lost else theme.active_color
    ax.plot(start.x, start.y, marker="o", markersize=6, color=theme.start_color, zorder=3)
    ax.plot(
        [start.x, final.x],
        [start.y, final.y],
        linestyle=theme.path_line_style,
        linewidth=1,
        color=color,
        zorder=2,
    )
    dx, dy = final.bearing.delta
    ax.annotate(
        "",
        xy=(final.x + dx * _ARROW_LENGTH, final.y + dy * _ARROW_LENGTH),
        xytext=(final.x, final.y),
        arrowprops={"arrowstyle": "-|>", "color": color, "linewidth": 1.5},
        zorder=4,
    )
    if report.lost:
        ax.plot(final.x, final.y, marker="x", markersize=9, color=color, zorder=4)


def _build_legend_handles(theme: Theme = DEFAULT_THEME) -> list[Patch | Line2D]:
    return [
        Patch(facecolor=theme.scent_cell_color, edgecolor="gray", label="Scent"),
        Line2D([], [], marker="o", linestyle="", color=theme.start_color, label="Start"),
        Line2D([], [], marker=">", linestyle="", color=theme.active_color, label="Final"),
        Line2D([], [], marker="x", linestyle="", color=theme.lost_color, label="Lost"),
    ]


def render_mission(
    grid: Grid,
    reports: Sequence[RobotReport],
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
    title: str | None = None,
) -> None:
    """Draw the grid, its scents and every robot's start and final pose to *output_path*."""
    width_in = max(_MIN_FIGURE_INCHES, grid.width * _CELL_INCHES)
    height_in = max(_MIN_FIGURE_INCHES, grid.height * _CELL_INCHES)
    fig, ax = plt.subplots(figsize=(width_in + 1.5, height_in))
    try:
        _draw_cell_grid(ax, _build_grid_array(grid), theme=theme)
        for report in reports:
            _draw_robot(ax, report, theme=theme)
        lost = sum(1 for report in reports if report.lost)
        ax.set_title(title or f"{len(reports)} robots, {lost} lost")
        ax.legend(
            handles=_build_legend_handles(theme),
            loc="upper left",
            bbox_to_anchor=(1.02, 1.0),
            fontsize=8,
        )
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, bbox_inches="tight")
    finally:
        plt.close(fig)
