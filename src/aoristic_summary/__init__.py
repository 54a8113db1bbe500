from importlib.metadata import PackageNotFoundError, version

from aoristic_summary.grid import build_summary_grid, slot_to_cell
from aoristic_summary.pipeline.summarize import SummaryResult, aoristic_summary, summarize

try:
    __version__ = version("aoristic-summary")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "SummaryResult",
    "__version__",
    "aoristic_summary",
    "build_summary_grid",
    "slot_to_cell",
    "summarize",
]
