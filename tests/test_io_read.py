from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from aoristic_summary.grid import MissingSlotColumnsError, slot_column_names
from aoristic_summary.io.read import load_weight_table


def _weight_frame() -> pd.DataFrame:
    frame = pd.DataFrame([[0.0] * 168, [0.0] * 168], columns=slot_column_names())
    frame.loc[0, "hour5"] = 0.5
    frame.loc[1, "hour5"] = 0.25
    frame.insert(0, "event_id", ["A-1", "A-2"])
    return frame


def test_load_weight_table_reads_csv_with_bom(tmp_path: Path) -> None:
    csv_path = tmp_path / "weights.csv"
    _weight_frame().to_csv(csv_path, index=False, encoding="utf-8-sig")

    loaded = load_weight_table(csv_path)

    assert loaded.columns[0] == "event_id"
    assert loaded["hour5"].sum() == 0.75


def test_load_weight_table_reads_parquet(tmp_path: Path) -> None:
    parquet_path = tmp_path / "weights.parquet"
    _weight_frame().to_parquet(parquet_path, index=False)

    loaded = load_weight_table(parquet_path)

    assert len(loaded) == 2
    assert "hour168" in loaded.columns


def test_load_weight_table_rejects_missing_slot_columns(tmp_path: Path) -> None:
    csv_path = tmp_path / "weights.csv"
    _weight_frame().drop(columns=["hour99"]).to_csv(csv_path, index=False)

    with pytest.raises(MissingSlotColumnsError, match="hour99"):
        load_weight_table(csv_path)


def test_load_weight_table_rejects_unknown_suffix(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Unsupported weight table file type"):
        load_weight_table(tmp_path / "weights.xlsx")
