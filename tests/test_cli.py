from __future__ import annotations

from pathlib import Path

import pandas as pd
from typer.testing import CliRunner

from aoristic_summary.cli import app
from aoristic_summary.grid import slot_column_names


def _write_table(path: Path, drop: list[str] | None = None) -> Path:
    frame = pd.DataFrame([[0.0] * 168], columns=slot_column_names())
    frame.loc[0, "hour26"] = 2.0
    if drop:
        frame = frame.drop(columns=drop)
    frame.to_csv(path, index=False)
    return path


def test_cli_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "summarize" in result.stdout
    assert "slots" in result.stdout


def test_summarize_command_prints_grid(tmp_path: Path) -> None:
    table = _write_table(tmp_path / "weights.csv")

    runner = CliRunner()
    result = runner.invoke(
        app,
        ["summarize", "--table", str(table), "--out", str(tmp_path), "--show"],
    )

    assert result.exit_code == 0, result.stdout
    assert "0100-0159" in result.stdout
    assert "2.000" in result.stdout
    assert "Summary complete. Events: 1" in result.stdout
    assert sorted(item.name for item in tmp_path.iterdir()) == ["weights.csv"]


def test_summarize_command_writes_workbook(tmp_path: Path) -> None:
    table = _write_table(tmp_path / "weights.csv")

    runner = CliRunner()
    result = runner.invoke(
        app,
        ["summarize", "--table", str(table), "--output", "xlsx", "--out", str(tmp_path)],
    )

    assert result.exit_code == 0, result.stdout
    assert "Aoristic_summary_1.xlsx" in result.stdout
    assert (tmp_path / "Aoristic_summary_1.xlsx").exists()


def test_summarize_command_uses_config_mode(tmp_path: Path) -> None:
    table = _write_table(tmp_path / "weights.csv")
    config_path = tmp_path / "config.yaml"
    config_path.write_text("outputs:\n  mode: image\n  directory: figures\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(
        app,
        ["summarize", "--table", str(table), "--config", str(config_path)],
    )

    assert result.exit_code == 0, result.stdout
    assert (tmp_path / "figures" / "Aoristic_summary_1.jpg").exists()


def test_summarize_command_rejects_unknown_output(tmp_path: Path) -> None:
    table = _write_table(tmp_path / "weights.csv")

    runner = CliRunner()
    result = runner.invoke(app, ["summarize", "--table", str(table), "--output", "pdf"])

    assert result.exit_code != 0
    assert "Unsupported output mode" in result.output


def test_summarize_command_rejects_missing_slot_columns(tmp_path: Path) -> None:
    table = _write_table(tmp_path / "weights.csv", drop=["hour12"])

    runner = CliRunner()
    result = runner.invoke(app, ["summarize", "--table", str(table)])

    assert result.exit_code != 0
    assert "hour12" in result.output


def test_slots_command_lists_every_slot() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["slots"])

    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert len(lines) == 168
    assert lines[0] == "hour1\tSo\t0000-0059"
    assert lines[24] == "hour25\tMo\t0000-0059"
    assert lines[-1] == "hour168\tSa\t2300-2359"


def test_summarize_command_rejects_empty_table(tmp_path: Path) -> None:
    table = tmp_path / "weights.csv"
    table.write_text("", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["summarize", "--table", str(table)])

    assert result.exit_code != 0
    assert "Weight table is empty" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
