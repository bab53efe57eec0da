"""I/O layer: Parquet schemas and output path helpers."""

from langtons_ant.io.paths import (
    logs_dir,
    resolve_within_base,
    run_payload_path,
    runs_dir,
    step_log_path,
    step_log_path_for_payload,
)
from langtons_ant.io.schemas import RUN_PAYLOAD_SCHEMA_VERSION, STEP_LOG_COLUMNS, STEP_LOG_SCHEMA

__all__ = [
    "RUN_PAYLOAD_SCHEMA_VERSION",
    "STEP_LOG_COLUMNS",
    "STEP_LOG_SCHEMA",
    "logs_dir",
    "resolve_within_base",
    "run_payload_path",
    "runs_dir",
    "step_log_path",
    "step_log_path_for_payload",
]
