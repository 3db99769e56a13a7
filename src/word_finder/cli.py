"""Command-line entry point for word-finder."""

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from .config import DEFAULT_ESCAPE_MARKER, EXIT_ERROR
from .models import ScanConfig
from .reporter import render
from .scanner import ScanError, scan

logger = logging.getLogger(__name__)

EPILOG = f"""\
Arguments naming an existing file or directory are scanned; everything else
is a word to search for. Directories are scanned recursively. Words that
start with a dash and clash with an option can be given as --word=-WORD.
With no words to search for nothing is reported and the exit status is 0.

Exit status is 0 when nothing is found, 1 when at least one line matches,
and 2 on usage errors or unreadable files.

Lines containing the escape marker ('{DEFAULT_ESCAPE_MARKER}' by default) are
never reported.
"""


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="word-finder",
        description="Report every line that contains any of the given words",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("arguments", nargs="*", metavar="FILE|DIR|WORD", help="Paths to scan and words to find")
    parser.add_argument(
        "-w", "--word", action="append", dest="words", metavar="WORD",
        help="Treat WORD as a search word even if it names a path (can be specified multiple times)",
    )
    parser.add_argument(
        "--casecheck", action="store_true", dest="case_sensitive", default=False,
        help="Match letter case exactly",
    )
    parser.add_argument(
        "--no-casecheck", action="store_false", dest="case_sensitive",
        help="Ignore letter case (this is the default)",
    )
    parser.add_argument(
        "--escape", default=DEFAULT_ESCAPE_MARKER, metavar="MARKER",
        help=f"Skip lines containing MARKER (default: {DEFAULT_ESCAPE_MARKER})",
    )
    parser.add_argument("--max-depth", type=int, default=None, dest="max_depth", help="Limit directory recursion depth")
    parser.add_argument("-j", "--jobs", type=int, default=None, dest="max_workers", help="Number of files scanned in parallel")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped files and scan progress")
    parser.add_argument("-h", "--help", action="store_true", help="Show this message and exit")
    return parser


def classify_arguments(arguments: Sequence[str]) -> tuple[list[str], list[str]]:
    """
    Split positional arguments into paths and target words.

    Returns:
        (paths, targets), each in argument order
    """
    paths: list[str] = []
    targets: list[str] = []
    for arg in arguments:
        if os.path.isfile(arg) or os.path.isdir(arg):
            paths.append(arg)
        else:
            targets.append(arg)
    return paths, targets


def _usage_error(parser: argparse.ArgumentParser, message: str) -> int:
    parser.print_usage(sys.stderr)
    print(f"{parser.prog}: error: {message}", file=sys.stderr)
    return EXIT_ERROR


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args, unknown = parser.parse_known_intermixed_args(argv)

    if args.help:
        parser.print_help(sys.stderr)
        return EXIT_ERROR
    if not args.arguments and not args.words and not unknown:
        return _usage_error(parser, "no files or words given")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dash-prefixed arguments argparse does not know are words too
    paths, targets = classify_arguments([*args.arguments, *unknown])
    targets.extend(args.words or [])
    logger.debug(f"Paths: {paths} targets: {targets}")

    try:
        config = ScanConfig(
            case_sensitive=args.case_sensitive,
            escape_marker=args.escape,
            targets=tuple(targets),
            paths=tuple(paths),
            max_workers=args.max_workers,
            max_depth=args.max_depth,
        )
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        return _usage_error(parser, f"invalid {field}: {error['msg']}")

    try:
        occurrences = scan(config)
    except ScanError as e:
        print(str(e), file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130

    lines, exit_code = render(occurrences)
    for line in lines:
        print(line)
    return exit_code
