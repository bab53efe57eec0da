"""Step-log renderers: final-state snapshots and filmstrips."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
import pyarrow.parquet as pq
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage

from langtons_ant.domain.heading import Color
from langtons_ant.io.paths import resolve_within_base as _resolve_within_base
from langtons_ant.io.paths import step_log_path_for_payload
from langtons_ant.viz.theme import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)

DARK_VALUE = 0
LIGHT_VALUE = 1


# ---------------------------------------------------------------------------
# Loading and replay helpers
# ---------------------------------------------------------------------------


def _resolve_paths(paths: list[Path], base_dir: Path | None) -> list[Path]:
    if base_dir is None:
        return [Path(p).resolve() for p in paths]
    base_dir = Path(base_dir).resolve()
    return [_resolve_within_base(Path(p), base_dir) for p in paths]


def _resolve_step_log(
    step_log_path: Path | None, run_json_path: Path, base_dir: Path | None
) -> Path:
    """Explicit step log, or the one written beside *run_json_path*."""
    if step_log_path is None:
        run_id = json.loads(Path(run_json_path).read_text()).get("run_id")
        if not isinstance(run_id, str) or not run_id:
            raise ValueError("Run JSON must include non-empty string field 'run_id'")
        step_log_path = step_log_path_for_payload(run_json_path, run_id)
    (resolved,) = _resolve_paths([step_log_path], base_dir)
    return resolved


def _metadata_dimension(metadata: dict[str, Any], key: str) -> int:
    value = metadata.get(key)
    if not isinstance(value, int) or value < 1:
        raise ValueError(f"Run JSON metadata must include positive integer field {key!r}")
    return value


def load_run(
    step_log_path: Path | None, run_json_path: Path
) -> tuple[str, dict[str, Any], list[dict[str, Any]]]:
    """Return ``(run_id, metadata, rows)`` with rows sorted by step.

    *step_log_path* defaults to ``logs/<run_id>.parquet`` beside the run
    JSON's ``runs/`` directory. Raises :exc:`ValueError` when the log does not
    hold exactly the steps the run JSON reports.
    """
    run_payload = json.loads(Path(run_json_path).read_text())
    run_id = run_payload.get("run_id")
    if not isinstance(run_id, str) or not run_id:
        raise ValueError("Run JSON must include non-empty string field 'run_id'")
    raw_metadata = run_payload.get("metadata")
    metadata = raw_metadata if isinstance(raw_metadata, dict) else {}
    if step_log_path is None:
        step_log_path = step_log_path_for_payload(run_json_path, run_id)
    rows = pq.read_table(step_log_path, filters=[("run_id", "=", run_id)]).to_pylist()
    rows.sort(key=lambda row: int(row["step"]))
    logged_steps = run_payload.get("steps")
    if isinstance(logged_steps, int) and logged_steps != len(rows):
        raise ValueError(
            f"Step log {step_log_path} holds {len(rows)} rows for run_id={run_id}, "
            f"run JSON reports {logged_steps} steps"
        )
    return run_id, metadata, rows


def build_color_grid(
    rows: list[dict[str, Any]], grid_width: int, grid_height: int, upto_step: int
) -> np.ndarray:
    """Return (H, W) int array of cell colors after ``upto_step`` steps.

    Every cell starts DARK; rows are replayed in step order. Out-of-bounds
    positions are skipped.
    """
    grid = np.full((grid_height, grid_width), DARK_VALUE, dtype=int)
    for row in rows:
        if int(row["step"]) > upto_step:
            break
        x, y = int(row["x"]), int(row["y"])
        if 0 <= y < grid_height and 0 <= x < grid_width:
            grid[y, x] = LIGHT_VALUE if row["color"] == Color.LIGHT.value else DARK_VALUE
    return grid


def ant_position_at(
    rows: list[dict[str, Any]], metadata: dict[str, Any], upto_step: int
) -> tuple[int, int] | None:
    """Ant position after ``upto_step`` steps, falling back to the start cell."""
    position: tuple[int, int] | None = None
    start_x, start_y = metadata.get("start_x"), metadata.get("start_y")
    if isinstance(start_x, int) and isinstance(start_y, int):
        position = (start_x, start_y)
    for row in rows:
        if int(row["step"]) > upto_step:
            break
        position = (int(row["x"]), int(row["y"]))
    return position


def _color_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete 2-color colormap (dark, light)."""
    cmap = ListedColormap([theme.dark_cell_color, theme.light_cell_color])
    norm = BoundaryNorm([-0.5, 0.5, 1.5], cmap.N)
    return cmap, norm


def _draw_color_grid(
    ax: plt.Axes,
    grid: np.ndarray,
    ant: tuple[int, int] | None,
    theme: Theme = DEFAULT_THEME,
) -> AxesImage:
    """Shared renderer: imshow of the cells with the ant overlaid on *ax*."""
    cmap, norm = _color_cmap(theme)
    img = ax.imshow(grid, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    h, w = grid.shape
    if theme.draw_grid_lines:
        for x in range(w + 1):
            ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
        for y in range(h + 1):
            ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    if ant is not None:
        ax.scatter([ant[0]], [ant[1]], color=theme.ant_color, s=12, marker="s", zorder=3)
    ax.set_xlim(-0.5, w - 0.5)
    ax.set_ylim(h - 0.5, -0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    return img


# ---------------------------------------------------------------------------
# render_snapshot
# ---------------------------------------------------------------------------


def render_snapshot(
    step_log_path: Path | None,
    run_json_path: Path,
    output_path: Path,
    step: int | None = None,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Render the grid after ``step`` steps (default: the last logged step)."""
    run_json_path, output_path = _resolve_paths([run_json_path, output_path], base_dir)
    step_log_path = _resolve_step_log(step_log_path, run_json_path, base_dir)
    run_id, metadata, rows = load_run(step_log_path, run_json_path)
    grid_width = _metadata_dimension(metadata, "grid_width")
    grid_height = _metadata_dimension(metadata, "grid_height")

    last_step = int(rows[-1]["step"]) if rows else 0
    if step is None:
        step = last_step
    if step < 0:
        raise ValueError("step must be >= 0")
    if step > last_step:
        logger.warning(
            "Run %s has %d logged steps; rendering step %d", run_id, last_step, last_step
        )
        step = last_step

    grid = build_color_grid(rows, grid_width, grid_height, step)
    ant = ant_position_at(rows, metadata, step)

    fig, ax = plt.subplots(figsize=(max(3.0, grid_width / 10), max(3.0, grid_height / 10)))
    fig.patch.set_facecolor(theme.figure_face_color)
    _draw_color_grid(ax, grid, ant, theme=theme)
    ax.set_title(f"{run_id} (step={step})", fontsize=9, color=theme.title_color)
    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=200, facecolor=fig.get_facecolor())
    plt.close(fig)


# ---------------------------------------------------------------------------
# render_filmstrip
# ---------------------------------------------------------------------------


def render_filmstrip(
    step_log_path: Path | None,
    run_json_path: Path,
    output_path: Path,
    n_frames: int = 6,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> list[int]:
    """Render evenly spaced steps side by side; return the steps drawn."""
    if n_frames < 1:
        raise ValueError("n_frames must be >= 1")
    run_json_path, output_path = _resolve_paths([run_json_path, output_path], base_dir)
    step_log_path = _resolve_step_log(step_log_path, run_json_path, base_dir)
    run_id, metadata, rows = load_run(step_log_path, run_json_path)
    if not rows:
        raise ValueError(f"No step rows found for run_id={run_id}")
    grid_width = _metadata_dimension(metadata, "grid_width")
    grid_height = _metadata_dimension(metadata, "grid_height")

    steps = [0] + [int(row["step"]) for row in rows]
    actual_n = max(1, min(n_frames, len(steps)))
    indices = [int(i * (len(steps) - 1) / max(1, actual_n - 1)) for i in range(actual_n)]
    selected_steps = [steps[i] for i in indices]

    fig, axes = plt.subplots(1, actual_n, figsize=(3 * actual_n, 3), squeeze=False)
    fig.patch.set_facecolor(theme.figure_face_color)
    for col_idx, step in enumerate(selected_steps):
        ax = axes[0, col_idx]
        grid = build_color_grid(rows, grid_width, grid_height, step)
        _draw_color_grid(ax, grid, ant_position_at(rows, metadata, step), theme=theme)
        ax.set_title(f"Step {step}", fontsize=9, color=theme.title_color)

    fig.suptitle(f"Run: {run_id}", fontsize=11, color=theme.title_color)
    fig.tight_layout(rect=(0, 0, 1, 0.92))
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=200, facecolor=fig.get_facecolor())
    plt.close(fig)
    return selected_steps
