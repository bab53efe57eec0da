"""Parquet persistence helpers for the step log stream."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from langtons_ant.io.schemas import STEP_LOG_COLUMNS, STEP_LOG_SCHEMA


def empty_step_columns() -> dict[str, list[int | str]]:
    """Fresh in-memory column buffers matching ``STEP_LOG_SCHEMA``."""
    return {name: [] for name in STEP_LOG_COLUMNS}


def flush_step_columns(
    step_columns: dict[str, list[int | str]],
    step_log_path: Path,
    step_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated step rows to Parquet and clear in-memory buffers."""
    if not step_columns["run_id"]:
        return step_writer
    step_table = pa.Table.from_pydict(step_columns, schema=STEP_LOG_SCHEMA)
    if step_writer is None:
        step_writer = pq.ParquetWriter(step_log_path, STEP_LOG_SCHEMA)
    step_writer.write_table(step_table)
    for values in step_columns.values():
        values.clear()
    return step_writer
