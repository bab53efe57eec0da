"""Path construction helpers for run output directories."""

from __future__ import annotations

from pathlib import Path


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Resolve *path* and ensure it stays within the trusted *base_dir*.

    Raises :exc:`ValueError` if the resolved path escapes the base directory.
    """
    candidate = path if path.is_absolute() else base_dir / path
    resolved = candidate.resolve()
    base_resolved = base_dir.resolve()
    if resolved != base_resolved and base_resolved not in resolved.parents:
        raise ValueError(f"Path escapes base_dir: {path}")
    return resolved


def runs_dir(out_dir: Path) -> Path:
    return out_dir / "runs"


def logs_dir(out_dir: Path) -> Path:
    return out_dir / "logs"


def step_log_path(out_dir: Path, run_id: str) -> Path:
    """Return path to the step log Parquet file of *run_id*."""
    return logs_dir(out_dir) / f"{run_id}.parquet"


def run_payload_path(out_dir: Path, run_id: str) -> Path:
    """Return path to the JSON payload of *run_id*."""
    return runs_dir(out_dir) / f"{run_id}.json"


def step_log_path_for_payload(run_json_path: Path, run_id: str) -> Path:
    """Locate the step log written next to ``runs/<run_id>.json``."""
    return step_log_path(Path(run_json_path).parent.parent, run_id)
