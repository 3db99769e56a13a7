"""Scanner policy constants and environment overrides."""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

# Lines containing this token are never reported
DEFAULT_ESCAPE_MARKER = "noqa:skip-line"

# Bold-on / reset
HIGHLIGHT_START = "\x1b[1m"
HIGHLIGHT_END = "\x1b[0m"

# Skipped when passed directly, so the hook config listing the forbidden
# words does not report itself. Still scanned when found inside a directory.
EXCLUDED_FILENAMES = frozenset({
    ".pre-commit-config.yaml",
    ".pre-commit-config.yml",
})

FILE_ENCODING = "utf-8"

EXIT_CLEAN = 0
EXIT_FOUND = 1
EXIT_ERROR = 2

MAX_WORKERS_ENV = "WORD_FINDER_MAX_WORKERS"


def get_max_workers() -> Optional[int]:
    """Worker bound from the environment, or None to use the pool default."""
    raw = os.environ.get(MAX_WORKERS_ENV)
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {MAX_WORKERS_ENV}={raw!r}: not an integer")
        return None
    if value < 1:
        logger.warning(f"Ignoring {MAX_WORKERS_ENV}={raw!r}: must be at least 1")
        return None
    return value
