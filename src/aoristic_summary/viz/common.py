from __future__ import annotations

import os
from pathlib import Path

from matplotlib.figure import Figure

from aoristic_summary.paths import temporary_sibling


def save_figure(figure: Figure, path: Path, *, dpi: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    staging = temporary_sibling(path)
    try:
        figure.savefig(staging, dpi=dpi, facecolor="white")
        os.replace(staging, path)
    finally:
        staging.unlink(missing_ok=True)
    return path
