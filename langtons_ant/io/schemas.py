"""Parquet schema definitions for run artifacts.

Every module that reads or writes a step log works against this column
contract.
"""

from __future__ import annotations

import pyarrow as pa

RUN_PAYLOAD_SCHEMA_VERSION = 1

# One row per Continued outcome. ``color`` is the color stored in the
# visited cell after the step; ``heading`` is the ant's heading after turning.
STEP_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("step", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("color", pa.string()),
        ("heading", pa.string()),
        ("mark", pa.string()),
    ]
)

STEP_LOG_COLUMNS: tuple[str, ...] = tuple(STEP_LOG_SCHEMA.names)
