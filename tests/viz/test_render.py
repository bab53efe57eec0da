"""Tests for viz/render.py: step-log replay and image output."""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest

from langtons_ant.config.types import HeadlessConfig
from langtons_ant.domain.heading import Color
from langtons_ant.io.paths import run_payload_path, step_log_path
from langtons_ant.simulation.engine import build_automaton, run_headless
from langtons_ant.viz.render import (
    DARK_VALUE,
    LIGHT_VALUE,
    ant_position_at,
    build_color_grid,
    load_run,
    render_filmstrip,
    render_snapshot,
)
from langtons_ant.viz.theme import PAPER_THEME


def _run(tmp_path: Path, config: HeadlessConfig) -> tuple[Path, Path]:
    result = run_headless(config, out_dir=tmp_path)
    return step_log_path(tmp_path, result.run_id), run_payload_path(tmp_path, result.run_id)


class TestReplay:
    def test_replayed_grid_matches_automaton(self, tmp_path: Path) -> None:
        config = HeadlessConfig(grid_width=25, grid_height=19, max_steps=400)
        step_log, run_json = _run(tmp_path, config)
        _, metadata, rows = load_run(step_log, run_json)

        automaton = build_automaton(config)
        for _ in range(len(rows)):
            automaton.step()
        expected = np.array(
            [
                [
                    LIGHT_VALUE if automaton.cell_at(x, y) is Color.LIGHT else DARK_VALUE
                    for x in range(25)
                ]
                for y in range(19)
            ]
        )
        grid = build_color_grid(rows, 25, 19, upto_step=len(rows))
        assert grid.shape == (19, 25)
        assert np.array_equal(grid, expected)
        assert ant_position_at(rows, metadata, len(rows)) == automaton.agent_position()

    def test_step_zero_is_all_dark_at_start(self, tmp_path: Path) -> None:
        config = HeadlessConfig(grid_width=9, grid_height=9, max_steps=20)
        step_log, run_json = _run(tmp_path, config)
        _, metadata, rows = load_run(step_log, run_json)
        assert not build_color_grid(rows, 9, 9, upto_step=0).any()
        assert ant_position_at(rows, metadata, 0) == (4, 4)

    def test_partial_replay_stops_at_step(self, tmp_path: Path) -> None:
        config = HeadlessConfig(grid_width=5, grid_height=5, max_steps=4)
        step_log, run_json = _run(tmp_path, config)
        _, _, rows = load_run(step_log, run_json)
        grid = build_color_grid(rows, 5, 5, upto_step=2)
        assert int(grid.sum()) == 2
        assert grid[2, 1] == LIGHT_VALUE
        assert grid[1, 1] == LIGHT_VALUE

    def test_load_run_requires_run_id(self, tmp_path: Path) -> None:
        step_log, _ = _run(tmp_path, HeadlessConfig(grid_width=5, grid_height=5, max_steps=2))
        bad_json = tmp_path / "bad.json"
        bad_json.write_text(json.dumps({"metadata": {}}))
        with pytest.raises(ValueError, match="run_id"):
            load_run(step_log, bad_json)

    def test_default_step_log_sits_beside_run_json(self, tmp_path: Path) -> None:
        config = HeadlessConfig(grid_width=9, grid_height=9, max_steps=5)
        step_log, run_json = _run(tmp_path, config)
        assert load_run(None, run_json) == load_run(step_log, run_json)

    def test_earlier_run_replays_after_later_run_in_same_out_dir(self, tmp_path: Path) -> None:
        first_config = HeadlessConfig(grid_width=15, grid_height=15, max_steps=20)
        first = run_headless(first_config, out_dir=tmp_path)
        run_headless(HeadlessConfig(grid_width=15, grid_height=15, max_steps=30), out_dir=tmp_path)

        _, _, rows = load_run(None, run_payload_path(tmp_path, first.run_id))
        assert len(rows) == first.steps == 20
        grid = build_color_grid(rows, 15, 15, upto_step=first.steps)
        assert int(grid.sum()) == first.light_cells

    def test_rejects_log_missing_reported_steps(self, tmp_path: Path) -> None:
        first = run_headless(HeadlessConfig(grid_width=15, grid_height=15, max_steps=20), tmp_path)
        second = run_headless(HeadlessConfig(grid_width=15, grid_height=15, max_steps=30), tmp_path)
        with pytest.raises(ValueError, match="run JSON reports 20 steps"):
            load_run(
                step_log_path(tmp_path, second.run_id),
                run_payload_path(tmp_path, first.run_id),
            )


class TestRenderSnapshot:
    def test_creates_png(self, tmp_path: Path) -> None:
        step_log, run_json = _run(tmp_path, HeadlessConfig(grid_width=20, grid_height=12))
        output = tmp_path / "out" / "snapshot.png"
        render_snapshot(step_log, run_json, output, base_dir=tmp_path)
        assert output.exists()
        assert output.stat().st_size > 0

    def test_accepts_paper_theme_and_explicit_step(self, tmp_path: Path) -> None:
        step_log, run_json = _run(
            tmp_path, HeadlessConfig(grid_width=10, grid_height=10, max_steps=30)
        )
        output = tmp_path / "step10.png"
        render_snapshot(step_log, run_json, output, step=10, theme=PAPER_THEME)
        assert output.exists()

    def test_empty_log_renders_start_state(self, tmp_path: Path) -> None:
        step_log, run_json = _run(tmp_path, HeadlessConfig(grid_width=1, grid_height=1))
        output = tmp_path / "empty.png"
        render_snapshot(step_log, run_json, output)
        assert output.exists()

    def test_rejects_negative_step(self, tmp_path: Path) -> None:
        step_log, run_json = _run(
            tmp_path, HeadlessConfig(grid_width=5, grid_height=5, max_steps=3)
        )
        with pytest.raises(ValueError, match="step must be >= 0"):
            render_snapshot(step_log, run_json, tmp_path / "x.png", step=-1)

    def test_rejects_paths_outside_base_dir(self, tmp_path: Path) -> None:
        step_log, run_json = _run(
            tmp_path, HeadlessConfig(grid_width=5, grid_height=5, max_steps=3)
        )
        with pytest.raises(ValueError, match="escapes base_dir"):
            render_snapshot(
                step_log, run_json, tmp_path.parent / "outside.png", base_dir=tmp_path
            )

    def test_rejects_missing_dimensions(self, tmp_path: Path) -> None:
        step_log, run_json = _run(
            tmp_path, HeadlessConfig(grid_width=5, grid_height=5, max_steps=3)
        )
        payload = json.loads(run_json.read_text())
        del payload["metadata"]["grid_width"]
        run_json.write_text(json.dumps(payload))
        with pytest.raises(ValueError, match="grid_width"):
            render_snapshot(step_log, run_json, tmp_path / "x.png")


    def test_renders_earlier_run_without_explicit_step_log(self, tmp_path: Path) -> None:
        first = run_headless(HeadlessConfig(grid_width=15, grid_height=15, max_steps=20), tmp_path)
        run_headless(HeadlessConfig(grid_width=15, grid_height=15, max_steps=30), tmp_path)
        output = tmp_path / "first.png"
        render_snapshot(None, run_payload_path(tmp_path, first.run_id), output, base_dir=tmp_path)
        assert output.exists()


class TestRenderFilmstrip:
    def test_creates_png_with_even_spacing(self, tmp_path: Path) -> None:
        step_log, run_json = _run(
            tmp_path, HeadlessConfig(grid_width=30, grid_height=30, max_steps=100)
        )
        output = tmp_path / "strip.png"
        steps = render_filmstrip(step_log, run_json, output, n_frames=5)
        assert output.exists()
        assert steps == [0, 25, 50, 75, 100]

    def test_frames_capped_by_available_steps(self, tmp_path: Path) -> None:
        step_log, run_json = _run(
            tmp_path, HeadlessConfig(grid_width=5, grid_height=5, max_steps=2)
        )
        steps = render_filmstrip(step_log, run_json, tmp_path / "strip.png", n_frames=10)
        assert steps == [0, 1, 2]

    def test_rejects_zero_frames(self, tmp_path: Path) -> None:
        step_log, run_json = _run(
            tmp_path, HeadlessConfig(grid_width=5, grid_height=5, max_steps=2)
        )
        with pytest.raises(ValueError, match="n_frames"):
            render_filmstrip(step_log, run_json, tmp_path / "strip.png", n_frames=0)

    def test_rejects_empty_log(self, tmp_path: Path) -> None:
        step_log, run_json = _run(tmp_path, HeadlessConfig(grid_width=1, grid_height=1))
        with pytest.raises(ValueError, match="No step rows"):
            render_filmstrip(step_log, run_json, tmp_path / "strip.png")
