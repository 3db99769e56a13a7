"""Expand file and directory arguments into the list of files to scan."""

import logging
import os
from typing import Iterable, Optional

from .config import EXCLUDED_FILENAMES

logger = logging.getLogger(__name__)


def is_excluded_input(path: str) -> bool:
    """Check if a directly passed file is on the exclusion list."""
    return os.path.basename(path) in EXCLUDED_FILENAMES


def _walk_directory(
    root: str,
    max_depth: Optional[int],
    visited_dirs: set[str],
) -> list[str]:
    """
    Collect every regular file under root.

    Uses an explicit stack of (directory, depth) pairs. A directory that
    cannot be listed is skipped along with its subtree; siblings still
    complete.

    Args:
        root: Directory to walk
        max_depth: Deepest subdirectory level to enter (0 = root only)
        visited_dirs: Real paths already walked, shared across inputs

    Returns:
        File paths in discovery order
    """
    files: list[str] = []
    stack: list[tuple[str, int]] = [(root, 0)]

    while stack:
        directory, depth = stack.pop()

        real = os.path.realpath(directory)
        if real in visited_dirs:
            logger.debug(f"Skipping already walked directory: {directory}")
            continue
        visited_dirs.add(real)

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {directory}: {e}")
            continue

        subdirs: list[str] = []
        for entry in entries:
            try:
                if entry.is_file():
                    files.append(entry.path)
                elif entry.is_dir():
                    subdirs.append(entry.path)
                else:
                    logger.debug(f"Skipping non-regular entry: {entry.path}")
            except OSError as e:
                logger.debug(f"Skipping entry {entry.path}: {e}")

        if max_depth is not None and depth >= max_depth:
            continue

        # Reversed so the first subdirectory is popped first
        for subdir in reversed(subdirs):
            stack.append((subdir, depth + 1))

    return files


def discover(inputs: Iterable[str], max_depth: Optional[int] = None) -> list[str]:
    """
    Expand inputs into a flat, deduplicated list of regular files.

    Regular files are taken as given unless their name is in
    EXCLUDED_FILENAMES. Directories are walked recursively. Anything else
    (missing paths, broken links, sockets) is skipped silently.

    Args:
        inputs: File and directory paths, in order
        max_depth: Optional recursion limit for directory inputs

    Returns:
        File paths in input order, each listed once
    """
    files: list[str] = []
    seen: set[str] = set()
    visited_dirs: set[str] = set()

    def add(path: str) -> None:
        if path not in seen:
            seen.add(path)
            files.append(path)

    for path in inputs:
        path = os.fspath(path)
        if os.path.isfile(path):
            if is_excluded_input(path):
                logger.debug(f"Skipping excluded file: {path}")
                continue
            add(path)
        elif os.path.isdir(path):
            for found in _walk_directory(path, max_depth, visited_dirs):
                add(found)
        else:
            logger.debug(f"Skipping path that is neither file nor directory: {path}")

    return files
