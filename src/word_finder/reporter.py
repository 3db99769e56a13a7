"""Format occurrences for display and derive the exit code."""

from typing import Sequence

from .config import EXIT_CLEAN, EXIT_FOUND, HIGHLIGHT_END, HIGHLIGHT_START
from .matcher import compile_target
from .models import Occurrence


def highlight(line: str, target: str, start: str = HIGHLIGHT_START, end: str = HIGHLIGHT_END) -> str:
    """Wrap every case-insensitive match of target in start/end markers."""
    if not start and not end:
        return line
    return compile_target(target, False).sub(lambda m: f"{start}{m.group(0)}{end}", line)


def _location(occurrence: Occurrence) -> str:
    return f"{occurrence.file_path}:{occurrence.line_number}"


def label_width(occurrences: Sequence[Occurrence]) -> int:
    """Path length plus line-number digits plus one for the colon, or 0 when empty."""
    if not occurrences:
        return 0
    return max(len(o.file_path) + len(str(o.line_number)) + 1 for o in occurrences)


def exit_code_for(occurrences: Sequence[Occurrence]) -> int:
    return EXIT_FOUND if occurrences else EXIT_CLEAN


def render(
    occurrences: Sequence[Occurrence],
    highlight_start: str = HIGHLIGHT_START,
    highlight_end: str = HIGHLIGHT_END,
) -> tuple[list[str], int]:
    """
    Format one report line per occurrence.

    Lines look like ``path:line -> text`` with the '->' column aligned
    across the report. Highlighting ignores case even for case-sensitive
    scans.

    Returns:
        (lines, exit_code)
    """
    width = label_width(occurrences)
    lines = [
        f"{_location(o):<{width}} -> {highlight(o.line_text, o.target, highlight_start, highlight_end)}"
        for o in occurrences
    ]
    return lines, exit_code_for(occurrences)
