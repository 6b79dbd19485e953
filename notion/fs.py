"""Filesystem helpers."""

from pathlib import Path


def ensure_containing_dir_exists(path: Path) -> None:
    """Create every missing ancestor directory of ``path``.

    Existing directories are left alone. Errors from ``mkdir`` propagate.
    """
    Path(path).parent.mkdir(parents=True, exist_ok=True)
