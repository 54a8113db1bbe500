from __future__ import annotations

from pathlib import Path

import pandas as pd

from aoristic_summary.grid import validate_slot_columns


def load_weight_table(path: Path) -> pd.DataFrame:
    """Load a per-event aoristic weight table and check its ``hour1``..``hour168`` columns."""
    if path.suffix == ".parquet":
        frame = pd.read_parquet(path)
    elif path.suffix == ".csv":
        # utf-8-sig strips BOM-prefixed headers commonly found in spreadsheet exports.
        frame = pd.read_csv(path, encoding="utf-8-sig")
    else:
        raise ValueError(f"Unsupported weight table file type: {path.suffix}")
    validate_slot_columns(frame)
    return frame
