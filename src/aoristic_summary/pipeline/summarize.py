from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd

from aoristic_summary.config import AppConfig, OutputMode, normalize_output_mode
from aoristic_summary.grid import build_summary_grid
from aoristic_summary.io.write import write_summary_workbook
from aoristic_summary.viz.heatmaps import write_summary_heatmap

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummaryResult:
    grid: pd.DataFrame
    mode: OutputMode
    artifact_path: Path | None = None


def summarize(
    table: Any,
    output: str | None = "",
    *,
    out_dir: Path | None = None,
    config: AppConfig | None = None,
) -> SummaryResult:
    """Build the hour-by-day summary grid and write the artifact ``output`` asks for.

    ``output`` is ``""`` (grid only), ``"xlsx"``/``"spreadsheet"`` or
    ``"jpg"``/``"image"``. Artifacts land in ``out_dir``, which defaults to the
    configured output directory (the working directory unless configured).
    """
    config = config or AppConfig()
    mode = normalize_output_mode(output)
    directory = Path(out_dir) if out_dir is not None else Path(config.outputs.directory)

    grid = build_summary_grid(table)
    LOGGER.debug("Summary grid built; total weight %.3f", float(grid.iloc[:, 1:].to_numpy().sum()))

    artifact_path: Path | None = None
    if mode == "xlsx":
        artifact_path = write_summary_workbook(
            grid,
            directory,
            max_attempts=config.outputs.max_filename_attempts,
        )
    elif mode == "jpg":
        artifact_path = write_summary_heatmap(
            grid,
            directory,
            config=config.heatmap,
            max_attempts=config.outputs.max_filename_attempts,
        )
    return SummaryResult(grid=grid, mode=mode, artifact_path=artifact_path)


def aoristic_summary(table: Any, output: str | None = "") -> pd.DataFrame:
    return summarize(table, output, out_dir=Path.cwd()).grid
