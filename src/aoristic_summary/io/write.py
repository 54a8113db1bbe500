from __future__ import annotations

import logging
import os
from pathlib import Path

import pandas as pd

from aoristic_summary.paths import DEFAULT_MAX_ATTEMPTS, next_available_path, temporary_sibling

LOGGER = logging.getLogger(__name__)

WORKBOOK_EXTENSION = "xlsx"
WORKBOOK_SHEET_NAME = "Aoristic"


def write_workbook(grid: pd.DataFrame, path: Path, sheet_name: str = WORKBOOK_SHEET_NAME) -> Path:
    """Write ``grid`` to a single-sheet workbook at ``path``.

    The workbook is built in a hidden sibling file and moved into place once
    openpyxl has finished, so a failed write leaves no partial ``path`` behind.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    staging = temporary_sibling(path)
    try:
        with pd.ExcelWriter(staging, engine="openpyxl") as writer:
            grid.to_excel(writer, sheet_name=sheet_name, index=False)
        os.replace(staging, path)
    finally:
        staging.unlink(missing_ok=True)
    return path


def write_summary_workbook(
    grid: pd.DataFrame,
    directory: Path,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Path:
    output_path = next_available_path(
        Path(directory),
        WORKBOOK_EXTENSION,
        max_attempts=max_attempts,
    )
    write_workbook(grid, output_path)
    LOGGER.info("Aoristic summary workbook written to: %s", output_path)
    return output_path
