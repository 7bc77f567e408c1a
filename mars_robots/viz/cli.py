"""CLI entrypoint for rendering a mission to an image.

Usage::

    mars-robots-viz --output mission.png < mission.txt
    mars-robots-viz --input mission.txt --output mission.pdf --theme paper
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import matplotlib

from mars_robots.errors import ParseError
from mars_robots.simulation.engine import Mission
from mars_robots.viz.theme import REGISTERED_THEMES, get_theme

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mars-robots-viz",
        description="Run a mission and render the grid, scents and robot poses",
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Mission file (default: read standard input)",
    )
    parser.add_argument("--output", type=Path, required=True, help="Image path (png, pdf, svg)")
    parser.add_argument(
        "--theme",
        type=str,
        default="default",
        choices=sorted(REGISTERED_THEMES),
        help="Theme preset name",
    )
    parser.add_argument("--title", type=str, default=None)
    return parser


def _read_lines(path: Path | None) -> list[str]:
    if path is None:
        return sys.stdin.read().splitlines()
    return path.read_text(encoding="utf-8").splitlines()


def main(argv: list[str] | None = None) -> None:
    """Render one mission; exit with status 1 on malformed input."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)
    matplotlib.use("Agg")
    from mars_robots.viz.render import render_mission

    try:
        lines = _read_lines(args.input)
    except FileNotFoundError:
        parser.error(f"Mission file not found: {args.input}")
    except (OSError, UnicodeDecodeError) as exc:
        parser.error(f"Cannot read mission file {args.input}: {exc}")

    try:
        mission = Mission.from_lines(lines)
        reports = list(mission.reports())
    except ParseError as exc:
        parser.exit(1, f"{parser.prog}: error: {exc}\n")

    render_mission(
        mission.grid,
        reports,
        args.output,
        theme=get_theme(args.theme),
        title=args.title,
    )
    for report in reports:
        print(report.format())


if __name__ == "__main__":
    main()
