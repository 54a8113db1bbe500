from __future__ import annotations

from pathlib import Path

ARTIFACT_STEM = "Aoristic_summary"
DEFAULT_MAX_ATTEMPTS = 10_000


class FilenameExhaustedError(FileExistsError):
    pass


def artifact_path(directory: Path, index: int, extension: str) -> Path:
    suffix = extension.lstrip(".")
    return directory / f"{ARTIFACT_STEM}_{index}.{suffix}"


def next_available_path(
    directory: Path,
    extension: str,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Path:
    """Return ``<directory>/Aoristic_summary_<N>.<extension>`` for the smallest free ``N``.

    This is a plain existence check, so two processes writing into the same
    directory at once can pick the same name.
    """
    directory = Path(directory)
    for index in range(1, max(1, int(max_attempts)) + 1):
        candidate = artifact_path(directory, index, extension)
        if not candidate.exists():
            return candidate
    raise FilenameExhaustedError(
        f"No free {ARTIFACT_STEM}_<N>.{extension.lstrip('.')} name in {directory} "
        f"after {max_attempts} attempts"
    )


def temporary_sibling(path: Path) -> Path:
    return path.with_name(f".{path.stem}.tmp{path.suffix}")
