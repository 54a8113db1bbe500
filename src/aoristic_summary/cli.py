from __future__ import annotations

from pathlib import Path

import typer
from pandas.errors import EmptyDataError

from aoristic_summary.config import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    normalize_output_mode,
)
from aoristic_summary.grid import (
    HOUR_RANGE_LABELS,
    SOURCE_DAY_LABELS,
    SLOTS_PER_WEEK,
    MissingSlotColumnsError,
    slot_to_cell,
)
from aoristic_summary.io.read import load_weight_table
from aoristic_summary.logging import configure_logging
from aoristic_summary.pipeline.summarize import summarize

app = typer.Typer(no_args_is_help=True, add_completion=False)


def _load_app_config(config_path: Path | None) -> AppConfig:
    if config_path is not None:
        return load_config(config_path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return AppConfig()


@app.command("summarize")
def summarize_command(
    table: Path = typer.Option(
        ...,
        exists=True,
        readable=True,
        resolve_path=True,
        help="CSV or Parquet table with hour1..hour168 aoristic weight columns.",
    ),
    output: str = typer.Option(
        "",
        help="Artifact to write: '' (grid only), 'xlsx'/'spreadsheet' or 'jpg'/'image'.",
    ),
    out: Path | None = typer.Option(
        None,
        resolve_path=True,
        help="Directory for written artifacts. Falls back to outputs.directory.",
    ),
    config: Path | None = typer.Option(None, exists=True, readable=True, resolve_path=True),
    show: bool = typer.Option(False, help="Print the summary grid."),
) -> None:
    """Sum aoristic weights into the hour-by-day summary grid."""
    configure_logging()
    cfg = _load_app_config(config)
    try:
        mode = normalize_output_mode(output or cfg.outputs.mode)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--output") from exc
    try:
        frame = load_weight_table(table)
    except EmptyDataError as exc:
        raise typer.BadParameter(f"Weight table is empty: {exc}", param_hint="--table") from exc
    except MissingSlotColumnsError as exc:
        raise typer.BadParameter(str(exc), param_hint="--table") from exc

    result = summarize(frame, mode, out_dir=out, config=cfg)
    if show:
        typer.echo(result.grid.to_string(index=False, float_format=lambda value: f"{value:.3f}"))
    if result.artifact_path is None:
        typer.echo(f"Summary complete. Events: {len(frame)}")
    else:
        typer.echo(f"Summary written to: {result.artifact_path}")


@app.command("slots")
def slots_command() -> None:
    """Print which day and hour range each hour<k> column feeds."""
    for slot in range(1, SLOTS_PER_WEEK + 1):
        row, column = slot_to_cell(slot)
        typer.echo(f"hour{slot}\t{SOURCE_DAY_LABELS[column]}\t{HOUR_RANGE_LABELS[row]}")


if __name__ == "__main__":
    app()
