"""CLI entrypoint for headless runs and step-log rendering."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path

from langtons_ant.config.constants import GRID_HEIGHT, GRID_WIDTH, MAX_STEPS
from langtons_ant.config.types import HeadlessConfig
from langtons_ant.domain.heading import Heading, parse_heading
from langtons_ant.simulation.engine import run_headless
from langtons_ant.viz.render import render_filmstrip, render_snapshot
from langtons_ant.viz.theme import get_theme


def _parse_grid_size(raw: str) -> tuple[int, int]:
    """Parse a grid size formatted as ``WxH``."""
    tokens = raw.strip().lower().split("x")
    if len(tokens) != 2:
        raise argparse.ArgumentTypeError("grid size must use WxH format")
    try:
        width, height = int(tokens[0]), int(tokens[1])
    except ValueError as exc:
        raise argparse.ArgumentTypeError("grid size must use integer WxH values") from exc
    if width < 1 or height < 1:
        raise argparse.ArgumentTypeError("grid size must be >= 1x1")
    return width, height


def _parse_start(raw: str) -> tuple[int, int]:
    """Parse a start position formatted as ``X,Y``."""
    tokens = [token.strip() for token in raw.split(",")]
    if len(tokens) != 2:
        raise argparse.ArgumentTypeError("start must use X,Y format")
    try:
        return int(tokens[0]), int(tokens[1])
    except ValueError as exc:
        raise argparse.ArgumentTypeError("start must use integer X,Y values") from exc


def _build_run_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("run", help="Run an ant headlessly and write its step log")
    p.set_defaults(func=_handle_run)
    p.add_argument("--out-dir", type=Path, required=True)
    p.add_argument(
        "--grid", type=_parse_grid_size, default=f"{GRID_WIDTH}x{GRID_HEIGHT}", metavar="WxH"
    )
    p.add_argument("--start", type=_parse_start, default=None, metavar="X,Y")
    p.add_argument(
        "--heading",
        type=str.lower,
        choices=[heading.value for heading in Heading],
        default=Heading.RIGHT.value,
    )
    p.add_argument("--max-steps", type=int, default=MAX_STEPS)
    p.add_argument("--path", action="store_true", help="Record path marks for light->dark cells")


def _build_snapshot_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("snapshot", help="Render the grid at one step")
    p.set_defaults(func=_handle_snapshot)
    p.add_argument(
        "--step-log",
        type=Path,
        default=None,
        help="Step log Parquet (default: logs/<run_id>.parquet beside the run JSON)",
    )
    p.add_argument("--run-json", type=Path, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--step", type=int, default=None)
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _build_filmstrip_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("filmstrip", help="Render evenly spaced steps side by side")
    p.set_defaults(func=_handle_filmstrip)
    p.add_argument(
        "--step-log",
        type=Path,
        default=None,
        help="Step log Parquet (default: logs/<run_id>.parquet beside the run JSON)",
    )
    p.add_argument("--run-json", type=Path, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--n-frames", type=int, default=6)
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _handle_run(args: argparse.Namespace) -> None:
    width, height = args.grid
    start_x, start_y = args.start if args.start is not None else (None, None)
    config = HeadlessConfig(
        grid_width=width,
        grid_height=height,
        start_x=start_x,
        start_y=start_y,
        start_heading=parse_heading(args.heading),
        show_path=args.path,
        max_steps=args.max_steps,
    )
    result = run_headless(config, out_dir=args.out_dir)
    print(json.dumps(asdict(result), ensure_ascii=False, indent=2))


def _handle_snapshot(args: argparse.Namespace) -> None:
    render_snapshot(
        step_log_path=args.step_log,
        run_json_path=args.run_json,
        output_path=args.output,
        step=args.step,
        base_dir=args.base_dir,
        theme=args.theme,
    )


def _handle_filmstrip(args: argparse.Namespace) -> None:
    render_filmstrip(
        step_log_path=args.step_log,
        run_json_path=args.run_json,
        output_path=args.output,
        n_frames=args.n_frames,
        base_dir=args.base_dir,
        theme=args.theme,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Headless Langton's ant runs and renders")
    parser.add_argument(
        "--theme",
        type=str,
        default="default",
        help="Theme preset name (default, paper)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    sub = parser.add_subparsers(dest="command", required=True)
    _build_run_parser(sub)
    _build_snapshot_parser(sub)
    _build_filmstrip_parser(sub)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args.theme = get_theme(args.theme)
    args.func(args)


if __name__ == "__main__":
    main()
