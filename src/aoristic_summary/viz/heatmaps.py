from __future__ import annotations

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.colors import LinearSegmentedColormap, Normalize, TwoSlopeNorm
from matplotlib.ticker import MaxNLocator

from aoristic_summary.config import HeatmapConfig
from aoristic_summary.grid import DAYS_PER_WEEK, HOURS_PER_DAY, day_values
from aoristic_summary.paths import DEFAULT_MAX_ATTEMPTS, next_available_path
from aoristic_summary.viz.common import save_figure

LOGGER = logging.getLogger(__name__)

HEATMAP_EXTENSION = "jpg"
HEATMAP_DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def to_long_form(grid: pd.DataFrame) -> pd.DataFrame:
    """Stack the summary grid into one ``(value, hour, day, rank)`` row per cell.

    Cells are taken column by column in the grid's day order, so ``rank`` runs
    1..24 for ``Mon``, 25..48 for ``Tue`` and so on up to 168 for ``Sun``.
    """
    block = day_values(grid).to_numpy(dtype=float)
    if block.shape != (HOURS_PER_DAY, DAYS_PER_WEEK):
        raise ValueError(
            f"Summary grid must be {HOURS_PER_DAY}x{DAYS_PER_WEEK}, got {block.shape[0]}x"
            f"{block.shape[1]}"
        )
    rank = np.arange(1, HOURS_PER_DAY * DAYS_PER_WEEK + 1)
    return pd.DataFrame(
        {
            "value": block.ravel(order="F"),
            "hour": (rank - 1) % HOURS_PER_DAY,
            "day": np.repeat(HEATMAP_DAY_LABELS, HOURS_PER_DAY),
            "rank": rank,
        }
    )


def color_midpoint(values: pd.Series | np.ndarray) -> float:
    array = np.asarray(values, dtype=float)
    low = float(np.nanmin(array))
    high = float(np.nanmax(array))
    return low + (high - low) / 2


def diverging_colormap(config: HeatmapConfig) -> LinearSegmentedColormap:
    return LinearSegmentedColormap.from_list(
        "aoristic_diverging",
        [config.low_color, config.mid_color, config.high_color],
    )


def diverging_norm(low: float, high: float, midpoint: float) -> Normalize:
    if low < midpoint < high:
        return TwoSlopeNorm(vcenter=midpoint, vmin=low, vmax=high)
    # Constant grid: a symmetric window keeps every cell on the midpoint colour.
    return Normalize(vmin=midpoint - 0.5, vmax=midpoint + 0.5)


def _day_hour_matrix(long_form: pd.DataFrame) -> pd.DataFrame:
    day_order = long_form.groupby("day", sort=False)["rank"].min().sort_values().index
    return long_form.pivot(index="day", columns="hour", values="value").reindex(
        index=day_order,
        columns=range(HOURS_PER_DAY),
    )


def plot_summary_heatmap(
    grid: pd.DataFrame,
    output_path: Path,
    config: HeatmapConfig | None = None,
) -> Path:
    config = config or HeatmapConfig()
    long_form = to_long_form(grid)
    matrix = _day_hour_matrix(long_form)

    low = float(long_form["value"].min())
    high = float(long_form["value"].max())
    midpoint = color_midpoint(long_form["value"])
    norm = diverging_norm(low, high, midpoint)

    figure, ax = plt.subplots(
        figsize=(config.width_px / config.dpi, config.height_px / config.dpi),
        dpi=config.dpi,
    )
    try:
        mesh = ax.pcolormesh(
            np.arange(HOURS_PER_DAY + 1) - 0.5,
            np.arange(len(matrix.index) + 1) - 0.5,
            matrix.to_numpy(dtype=float),
            cmap=diverging_colormap(config),
            norm=norm,
            edgecolors=config.cell_edge_color,
            linewidth=1.0,
        )
        # Monday on top, Sunday at the bottom.
        ax.invert_yaxis()

        for row_index, values in enumerate(matrix.to_numpy(dtype=float)):
            for hour, value in enumerate(values):
                ax.text(
                    hour,
                    row_index,
                    f"{int(np.rint(value))}",
                    ha="center",
                    va="center",
                    fontsize=config.cell_text_size,
                )

        ax.set_xticks(range(HOURS_PER_DAY))
        ax.set_yticks(range(len(matrix.index)))
        ax.set_yticklabels(list(matrix.index))
        ax.tick_params(axis="both", labelsize=config.axis_text_size, length=0)
        ax.set_xlabel(config.x_label, fontsize=config.axis_title_size)
        ax.set_ylabel(config.y_label, fontsize=config.axis_title_size)
        ax.set_title(config.title, fontsize=config.title_size)
        ax.set_facecolor("white")
        ax.grid(False)
        for spine in ax.spines.values():
            spine.set_visible(False)

        colorbar = figure.colorbar(mesh, ax=ax)
        colorbar.locator = MaxNLocator(nbins=config.legend_ticks)
        colorbar.update_ticks()
        colorbar.ax.set_title(config.legend_title, fontsize=config.legend_title_size)
        colorbar.ax.tick_params(labelsize=config.legend_text_size)
        colorbar.outline.set_visible(False)

        figure.tight_layout()
        return save_figure(figure, output_path, dpi=config.dpi)
    finally:
        plt.close(figure)


def write_summary_heatmap(
    grid: pd.DataFrame,
    directory: Path,
    *,
    config: HeatmapConfig | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Path:
    output_path = next_available_path(
        Path(directory),
        HEATMAP_EXTENSION,
        max_attempts=max_attempts,
    )
    plot_summary_heatmap(grid, output_path, config=config)
    LOGGER.info("Aoristic summary heatmap written to: %s", output_path)
    return output_path
