"""Headless driver: run an ant to completion and persist its step log."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pyarrow.parquet as pq

from langtons_ant.config.constants import FLUSH_THRESHOLD
from langtons_ant.config.types import HeadlessConfig, RunResult
from langtons_ant.domain.automaton import Automaton, LeftGrid
from langtons_ant.domain.heading import Color
from langtons_ant.io.paths import logs_dir, run_payload_path, runs_dir, step_log_path
from langtons_ant.io.schemas import RUN_PAYLOAD_SCHEMA_VERSION, STEP_LOG_SCHEMA
from langtons_ant.simulation.persistence import empty_step_columns, flush_step_columns

logger = logging.getLogger(__name__)


def deterministic_run_id(config: HeadlessConfig) -> str:
    """Build a run ID that is stable across runs for identical configs."""
    x, y = config.start_position
    return (
        f"ant_{config.grid_width}x{config.grid_height}"
        f"_at{x}-{y}_{config.start_heading.value}_s{config.max_steps}"
    )


def build_automaton(config: HeadlessConfig) -> Automaton:
    return Automaton(
        width=config.grid_width,
        height=config.grid_height,
        start_position=config.start_position,
        start_heading=config.start_heading,
        show_path=config.show_path,
    )


def run_headless(config: HeadlessConfig, out_dir: Path) -> RunResult:
    """Step an ant until it leaves the grid or hits ``max_steps``.

    Writes ``logs/<run_id>.parquet`` and ``runs/<run_id>.json`` under
    *out_dir*. Rerunning an identical config replaces both files.
    """
    out_dir = Path(out_dir)
    runs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    run_id = deterministic_run_id(config)
    automaton = build_automaton(config)
    log_path = step_log_path(out_dir, run_id)
    step_columns = empty_step_columns()
    step_writer: pq.ParquetWriter | None = None
    left_grid = False

    logger.debug("Starting run %s", run_id)
    try:
        for _ in range(config.max_steps):
            outcome = automaton.step()
            if isinstance(outcome, LeftGrid):
                left_grid = True
                break
            step_columns["run_id"].append(run_id)
            step_columns["step"].append(automaton.steps_taken)
            step_columns["x"].append(outcome.x)
            step_columns["y"].append(outcome.y)
            step_columns["color"].append(outcome.color.value)
            step_columns["heading"].append(automaton.agent_heading().value)
            step_columns["mark"].append(outcome.mark.value)
            if len(step_columns["run_id"]) >= FLUSH_THRESHOLD:
                step_writer = flush_step_columns(step_columns, log_path, step_writer)
        step_writer = flush_step_columns(step_columns, log_path, step_writer)
        if step_writer is None:
            pq.write_table(STEP_LOG_SCHEMA.empty_table(), log_path)
    finally:
        if step_writer is not None:
            step_writer.close()

    x, y = config.start_position
    result = RunResult(
        run_id=run_id,
        left_grid=left_grid,
        steps=automaton.steps_taken,
        light_cells=automaton.count(Color.LIGHT),
    )
    final = automaton.snapshot()
    payload = {
        "run_id": run_id,
        "left_grid": result.left_grid,
        "steps": result.steps,
        "light_cells": result.light_cells,
        "final_state": {"x": final.x, "y": final.y, "heading": final.heading.value},
        "metadata": {
            "grid_width": config.grid_width,
            "grid_height": config.grid_height,
            "start_x": x,
            "start_y": y,
            "start_heading": config.start_heading.value,
            "show_path": config.show_path,
            "max_steps": config.max_steps,
            "schema_version": RUN_PAYLOAD_SCHEMA_VERSION,
        },
    }
    run_payload_path(out_dir, run_id).write_text(json.dumps(payload, ensure_ascii=False, indent=2))
    if left_grid:
        logger.info("Run %s: ant left the grid after %d steps", run_id, result.steps)
    else:
        logger.info("Run %s: stopped at step cap %d", run_id, config.max_steps)
    return result
