from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

from aoristic_summary.paths import DEFAULT_MAX_ATTEMPTS

OutputMode = Literal["", "xlsx", "jpg"]

OUTPUT_MODE_ALIASES: dict[str, OutputMode] = {
    "": "",
    "xlsx": "xlsx",
    "spreadsheet": "xlsx",
    "jpg": "jpg",
    "image": "jpg",
}


def normalize_output_mode(value: str | None) -> OutputMode:
    key = (value or "").strip().lower()
    if key not in OUTPUT_MODE_ALIASES:
        allowed = ", ".join(repr(alias) for alias in OUTPUT_MODE_ALIASES)
        raise ValueError(f"Unsupported output mode {value!r}; expected one of {allowed}")
    return OUTPUT_MODE_ALIASES[key]


class OutputsConfig(BaseModel):
    mode: str = ""
    directory: str = "."
    max_filename_attempts: int = Field(default=DEFAULT_MAX_ATTEMPTS, ge=1)


class HeatmapConfig(BaseModel):
    width_px: int = Field(default=1200, ge=100)
    height_px: int = Field(default=400, ge=100)
    dpi: int = Field(default=100, ge=10)
    low_color: str = "#3B6E7D"
    mid_color: str = "#CCCCCC"
    high_color: str = "#8B2F2A"
    cell_edge_color: str = "white"
    legend_title: str = "Frequency"
    legend_ticks: int = Field(default=6, ge=2)
    x_label: str = "Hour"
    y_label: str = ""
    title: str = " "
    axis_text_size: float = Field(default=18, gt=0)
    axis_title_size: float = Field(default=18, gt=0)
    legend_title_size: float = Field(default=22, gt=0)
    legend_text_size: float = Field(default=18, gt=0)
    title_size: float = Field(default=22, gt=0)
    cell_text_size: float = Field(default=12, gt=0)


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    outputs: OutputsConfig = Field(default_factory=OutputsConfig)
    heatmap: HeatmapConfig = Field(default_factory=HeatmapConfig)


DEFAULT_CONFIG_PATH = Path("configs/default.yaml")


def _resolve_directory(path_value: str, base_dir: Path) -> str:
    candidate = Path(path_value)
    if candidate.is_absolute():
        return str(candidate)
    return str((base_dir / candidate).resolve())


def load_config(path: Path) -> AppConfig:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}

    config = AppConfig.model_validate(data)
    # Fail at load time rather than after the grid is built.
    normalize_output_mode(config.outputs.mode)
    if "directory" in (data.get("outputs") or {}):
        config.outputs.directory = _resolve_directory(
            config.outputs.directory,
            path.resolve().parent,
        )
    return config
