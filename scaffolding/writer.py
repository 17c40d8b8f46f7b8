"""Filesystem helpers used while scaffolding.

Every helper converts ``OSError`` into ``FilesystemError`` so callers only
have to deal with one failure type. Nothing is rolled back on failure.
"""

import logging
import shutil
from pathlib import Path

from .errors import FilesystemError


logger = logging.getLogger(__name__)


def ensure_directory(path: Path) -> Path:
    """Create a directory and all missing parents (no error if present)."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Cannot create directory {path}: {e}", path) from e
    logger.debug("Ensured directory %s", path)
    return path


def write_text(path: Path, content: str) -> Path:
    """Create or overwrite a UTF-8 text file, creating parent directories."""
    ensure_directory(path.parent)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FilesystemError(f"Cannot write {path}: {e}", path) from e
    logger.debug("Wrote %s (%d chars)", path, len(content))
    return path


def copy_tree(source: Path, destination: Path) -> list[Path]:
    """Recursively copy a directory, byte for byte.

    Directories are created as they are encountered and entries are
    visited depth-first in sorted order.

    Args:
        source: Directory to copy from
        destination: Directory to copy into (created if missing)

    Returns:
        List of copied file paths under ``destination``
    """
    ensure_directory(destination)
    copied: list[Path] = []

    try:
        entries = sorted(source.iterdir())
    except OSError as e:
        raise FilesystemError(f"Cannot read directory {source}: {e}", source) from e

    for entry in entries:
        target = destination / entry.name
        if entry.is_dir():
            copied.extend(copy_tree(entry, target))
            continue
        try:
            shutil.copy2(entry, target)
        except OSError as e:
            raise FilesystemError(f"Cannot copy {entry} to {target}: {e}", target) from e
        copied.append(target)

    logger.debug("Copied %d files from %s to %s", len(copied), source, destination)
    return copied
