"""Scan orchestration: fan files out to a worker pool, merge in input order."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Sequence

from .config import get_max_workers
from .matcher import scan_file_targets
from .models import Occurrence, ScanConfig
from .traversal import discover

logger = logging.getLogger(__name__)


class ScanError(Exception):
    """A discovered file could not be opened or read."""

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Error reading '{path}': {cause}")


def _scan_one(path: str, targets: Sequence[str], config: ScanConfig) -> list[Occurrence]:
    try:
        return scan_file_targets(path, targets, config.case_sensitive, config.escape_marker)
    except OSError as e:
        raise ScanError(path, e) from e


def run(files: Sequence[str], targets: Sequence[str], config: ScanConfig) -> list[Occurrence]:
    """
    Match every target against every file.

    Each file is one task on a bounded thread pool. Results are stored by
    the file's input index and concatenated in that order, so the output is
    the same as a sequential scan: file order, then target order, then line
    order.

    Args:
        files: Files to scan, in order
        targets: Target strings, in order
        config: Case mode, escape marker and worker bound

    Returns:
        All occurrences in deterministic order

    Raises:
        ScanError: If any file cannot be opened or read
    """
    if not files or not targets:
        return []

    max_workers = config.max_workers or get_max_workers()
    logger.info(f"Scanning {len(files)} file(s) for {len(targets)} target(s)")

    results: list[list[Occurrence]] = [[] for _ in files]
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="scan-worker") as executor:
        futures: list[Future] = [
            executor.submit(_scan_one, path, targets, config) for path in files
        ]
        for index, future in enumerate(futures):
            try:
                results[index] = future.result()
            except ScanError:
                for pending in futures[index + 1:]:
                    pending.cancel()
                raise

    occurrences = [occurrence for file_results in results for occurrence in file_results]
    logger.info(f"Found {len(occurrences)} occurrence(s)")
    return occurrences


def scan(config: ScanConfig) -> list[Occurrence]:
    """Discover files under config.paths and scan them for config.targets."""
    files = discover(config.paths, max_depth=config.max_depth)
    return run(files, config.targets, config)
