"""Per-file line matching for target strings."""

import functools
import logging
import re
from typing import Iterator, Sequence

from .config import FILE_ENCODING
from .models import Occurrence

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=None)
def compile_target(target: str, case_sensitive: bool) -> re.Pattern:
    """Compile target as a literal pattern. Cached per (target, case mode)."""
    flags = 0 if case_sensitive else re.IGNORECASE
    return re.compile(re.escape(target), flags)


def line_matches(line: str, target: str, case_sensitive: bool) -> bool:
    """Check if a line contains target under the given case mode."""
    if case_sensitive:
        return target in line
    return compile_target(target, False).search(line) is not None


def _read_lines(path: str) -> Iterator[str]:
    """
    Yield the decoded lines of a file without their terminators.

    Only '\\n' splits lines; a trailing '\\r' is dropped. Raises
    UnicodeDecodeError on the first line that is not valid text.
    """
    with open(path, "rb") as f:
        for raw in f:
            if raw.endswith(b"\n"):
                raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
            yield raw.decode(FILE_ENCODING)


def scan_file(
    path: str,
    target: str,
    case_sensitive: bool,
    escape_marker: str,
) -> list[Occurrence]:
    """
    Find every line of a file that contains target.

    Lines containing escape_marker are never reported. A line that matches
    several times still yields a single Occurrence. If any line fails to
    decode the file is treated as having no matches.

    Args:
        path: File to read
        target: Literal string to look for
        case_sensitive: Match letter case exactly
        escape_marker: Lines containing this substring are skipped

    Returns:
        Occurrences in line order

    Raises:
        OSError: If the file cannot be opened or read
    """
    return scan_file_targets(path, [target], case_sensitive, escape_marker)


def scan_file_targets(
    path: str,
    targets: Sequence[str],
    case_sensitive: bool,
    escape_marker: str,
) -> list[Occurrence]:
    """
    Scan one file for several targets in a single pass.

    Each line is read and decoded once and tested against every target.
    Matches are bucketed per target so the result is grouped by target
    order, then line order, as if each target were scanned separately.

    Raises:
        OSError: If the file cannot be opened or read
    """
    per_target: list[list[Occurrence]] = [[] for _ in targets]
    try:
        for line_number, line in enumerate(_read_lines(path), start=1):
            if escape_marker in line:
                continue
            for target, bucket in zip(targets, per_target):
                if line_matches(line, target, case_sensitive):
                    bucket.append(Occurrence(
                        file_path=path,
                        line_number=line_number,
                        target=target,
                        line_text=line,
                    ))
    except UnicodeDecodeError:
        logger.debug(f"Skipping {path}: not valid {FILE_ENCODING} text")
        return []
    return [occurrence for bucket in per_target for occurrence in bucket]
