"""CLI entrypoint for the real-time terminal display."""

from __future__ import annotations

import argparse
import logging

from langtons_ant.config.constants import DEFAULT_DELAY_MS
from langtons_ant.config.types import TerminalConfig
from langtons_ant.domain.heading import Heading, parse_heading
from langtons_ant.terminal.driver import SessionResult, run_terminal


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer given: {raw!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError("delay must be >= 0")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="langtons-ant",
        description="Simple terminal implementation of Langton's ant. Press q to quit.",
    )
    parser.add_argument("-p", "--path", action="store_true", help="Show path")
    parser.add_argument(
        "-d",
        "--delay",
        type=_non_negative_int,
        default=DEFAULT_DELAY_MS,
        metavar="MS",
        help=f"Delay between steps in milliseconds, defaults to {DEFAULT_DELAY_MS}",
    )
    parser.add_argument(
        "-c", "--no-counter", action="store_true", help="Hide step counter"
    )
    parser.add_argument(
        "--heading",
        type=str.lower,
        choices=[heading.value for heading in Heading],
        default=Heading.RIGHT.value,
        help="Initial heading of the ant, defaults to right",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def parse_config(argv: list[str] | None = None) -> tuple[TerminalConfig, bool]:
    """Parse CLI flags into a TerminalConfig plus the verbosity flag."""
    args = build_parser().parse_args(argv)
    config = TerminalConfig(
        delay_ms=args.delay,
        show_path=args.path,
        show_counter=not args.no_counter,
        start_heading=parse_heading(args.heading),
    )
    return config, args.verbose


def describe(result: SessionResult) -> str:
    if result.left_grid:
        return f"Ant left the grid after {result.steps} steps."
    return f"Stopped after {result.steps} steps."


def main(argv: list[str] | None = None) -> None:
    config, verbose = parse_config(argv)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    result = run_terminal(config)
    print(describe(result))


if __name__ == "__main__":
    main()
