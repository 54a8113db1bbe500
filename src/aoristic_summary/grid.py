from __future__ import annotations

from typing import Any, Iterable

import numpy as np
import pandas as pd

HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7
SLOTS_PER_WEEK = HOURS_PER_DAY * DAYS_PER_WEEK
SLOT_COLUMN_PREFIX = "hour"
SUM_DECIMALS = 3

RANGE_COLUMN = "Range"
# Upstream slot groups start on Sunday: slots 1-24 are "So", 25-48 are "Mo", ...
SOURCE_DAY_LABELS = ("So", "Mo", "Di", "Mi", "Do", "Fr", "Sa")
# Positions into SOURCE_DAY_LABELS; Sunday moves to the end to keep the weekend together.
WEEKEND_LAST_ORDER = (1, 2, 3, 4, 5, 6, 0)
DAY_COLUMNS = tuple(SOURCE_DAY_LABELS[index] for index in WEEKEND_LAST_ORDER)

HOUR_RANGE_LABELS = tuple(f"{hour:02d}00-{hour:02d}59" for hour in range(HOURS_PER_DAY))


class MissingSlotColumnsError(ValueError):
    """Raised when a weight table lacks one or more ``hour<k>`` columns."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        preview = ", ".join(missing[:10])
        if len(missing) > 10:
            preview += f", ... ({len(missing)} missing)"
        super().__init__(f"Weight table missing slot columns: {preview}")


def slot_column_names() -> list[str]:
    return [f"{SLOT_COLUMN_PREFIX}{slot}" for slot in range(1, SLOTS_PER_WEEK + 1)]


def slot_to_cell(slot: int) -> tuple[int, int]:
    """Map a 1-indexed week slot to its 0-indexed ``(hour_row, day_column)`` cell.

    Slots fill the grid column-major: slots 1-24 are the first day top to
    bottom, slots 25-48 the second day, and so on. The day column is in
    upstream order, before ``WEEKEND_LAST_ORDER`` is applied.
    """
    if not 1 <= int(slot) <= SLOTS_PER_WEEK:
        raise ValueError(f"slot must be within 1..{SLOTS_PER_WEEK}, got {slot}")
    index = int(slot) - 1
    return index % HOURS_PER_DAY, index // HOURS_PER_DAY


def format_slot_sum(value: float) -> str:
    return f"{round(float(value), SUM_DECIMALS):.{SUM_DECIMALS}f}".strip()


def _as_frame(table: Any) -> pd.DataFrame:
    if table is None:
        return pd.DataFrame()
    if isinstance(table, pd.DataFrame):
        return table
    return pd.DataFrame(table)


def validate_slot_columns(frame: pd.DataFrame) -> None:
    if frame.shape[1] == 0:
        return
    missing = [column for column in slot_column_names() if column not in frame.columns]
    if missing:
        raise MissingSlotColumnsError(missing)


def compute_slot_sums(table: Any) -> np.ndarray:
    """Return the 168 per-slot weight totals, rounded to 3 decimals.

    Non-numeric and missing cells count as zero. ``None`` or a table with no
    columns at all yields zeros; a table with columns but without the full
    ``hour1``..``hour168`` set raises ``MissingSlotColumnsError``.
    """
    frame = _as_frame(table)
    validate_slot_columns(frame)
    if frame.shape[1] == 0:
        return np.zeros(SLOTS_PER_WEEK, dtype=float)

    slots = frame[slot_column_names()].apply(pd.to_numeric, errors="coerce")
    sums = slots.sum(axis=0, skipna=True).to_numpy(dtype=float)
    return np.round(sums, SUM_DECIMALS)


def reshape_slot_sums(slot_sums: Iterable[float]) -> pd.DataFrame:
    values = np.asarray(list(slot_sums), dtype=float)
    if values.shape != (SLOTS_PER_WEEK,):
        raise ValueError(f"Expected {SLOTS_PER_WEEK} slot sums, got {values.size}")

    matrix = np.zeros((HOURS_PER_DAY, DAYS_PER_WEEK), dtype=float)
    for slot, value in enumerate(values, start=1):
        row, column = slot_to_cell(slot)
        matrix[row, column] = value
    return pd.DataFrame(matrix, columns=list(SOURCE_DAY_LABELS))


def reorder_days(frame: pd.DataFrame) -> pd.DataFrame:
    ordered = [SOURCE_DAY_LABELS[index] for index in WEEKEND_LAST_ORDER]
    leading = [column for column in frame.columns if column not in SOURCE_DAY_LABELS]
    return frame[leading + ordered].copy()


def build_summary_grid(table: Any) -> pd.DataFrame:
    """Aggregate a per-event weight table into the 24x7 hour-by-day summary grid.

    The result has a ``Range`` label column followed by the day columns
    ``Mo`` .. ``So``, one row per hour of the day.
    """
    by_day = reshape_slot_sums(compute_slot_sums(table))
    by_day.insert(0, RANGE_COLUMN, list(HOUR_RANGE_LABELS))
    grid = reorder_days(by_day)
    for column in DAY_COLUMNS:
        grid[column] = pd.to_numeric(grid[column], errors="coerce").astype(float)
    return grid.reset_index(drop=True)


def day_values(grid: pd.DataFrame) -> pd.DataFrame:
    """Return the numeric 24x7 block of a summary grid, without the label column."""
    missing = [column for column in DAY_COLUMNS if column not in grid.columns]
    if missing:
        raise ValueError(f"Summary grid missing day columns: {', '.join(missing)}")
    return grid[list(DAY_COLUMNS)].astype(float)
