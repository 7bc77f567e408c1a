"""CLI entrypoint: read a mission from stdin, print one result per robot.

Usage::

    mars-robots < mission.txt
    python -m mars_robots < mission.txt
"""

from __future__ import annotations

import argparse
import logging
import sys

from mars_robots.errors import ParseError
from mars_robots.simulation.engine import drive_robots

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    return argparse.ArgumentParser(
        prog="mars-robots",
        description=(
            "Replay robot instruction scripts on a bounded grid. Reads the mission "
            "from standard input and writes one result line per robot."
        ),
    )


def main(argv: list[str] | None = None) -> None:
    """Run the mission on stdin; exit with status 1 on malformed input."""
    parser = _build_parser()
    parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)

    try:
        for result in drive_robots(sys.stdin):
            print(result, flush=True)
    except ParseError as exc:
        parser.exit(1, f"{parser.prog}: error: {exc}\n")


if __name__ == "__main__":
    main()
