"""
Command-line interface.

Reads text from stdin, checks it against a dictionary, and writes an HTML
document with misspelled words highlighted to stdout. Progress messages go
to stderr and never mix with the HTML.

Usage:
    redpen words.txt < input.txt > output.html

    # Built-in English word list instead of a file
    redpen --builtin en < input.txt > output.html

    # Force 8 worker processes, even for small inputs
    redpen words.txt --workers 8 --executor process --threshold 0 < big.txt > out.html

    # Show why a word is accepted or rejected
    redpen words.txt --explain "mid-1970s"
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import BinaryIO

from redpen import __version__
from redpen.classifier import classify_word
from redpen.config import VALID_EXECUTORS, CheckerConfig
from redpen.exceptions import RedpenError
from redpen.pipeline import create_pipeline

logger = logging.getLogger(__name__)

# Input bytes are decoded losslessly so any byte sequence round-trips
INPUT_ENCODING = "utf-8"
INPUT_ERRORS = "surrogateescape"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="redpen",
        description="Highlight misspelled words of stdin as HTML on stdout.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    # Optional at parser level so a missing dictionary exits with 1, not argparse's 2
    parser.add_argument(
        "dictionary",
        nargs="?",
        type=Path,
        help="Path to dictionary file (whitespace-separated words)",
    )
    parser.add_argument(
        "--builtin",
        metavar="LANG",
        help="Use pyspellchecker's word list for LANG instead of a dictionary file",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML configuration file",
    )
    parser.add_argument(
        "--workers",
        "-j",
        type=int,
        help="Number of workers (default: one per CPU)",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        help="Inputs shorter than this many characters use one worker (default: 100000)",
    )
    parser.add_argument(
        "--executor",
        choices=VALID_EXECUTORS,
        help="Worker pool type (default: thread)",
    )
    parser.add_argument(
        "--explain",
        metavar="WORD",
        help="Print the verdict and deciding rule for WORD instead of checking stdin",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Debug output")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Warnings only")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Send log records to stderr."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, stream=sys.stderr, format="%(message)s")


def run(args: argparse.Namespace, stdin: BinaryIO, stdout: BinaryIO) -> int:
    """
    Execute a parsed command line.

    Args:
        args: Parsed arguments.
        stdin: Binary stream holding the text to check.
        stdout: Binary stream receiving the HTML.

    Returns:
        Process exit code.
    """
    start_time = time.time()

    try:
        config = CheckerConfig.from_yaml(args.config) if args.config else CheckerConfig()
        config = config.merged(
            workers=args.workers,
            parallel_threshold=args.threshold,
            executor=args.executor,
        )

        logger.info("Loading dictionary...")
        pipeline = create_pipeline(args.dictionary, config, builtin_language=args.builtin)
    except RedpenError as e:
        logger.error("Error: %s", e)
        return 1

    if args.explain is not None:
        verdict = classify_word(args.explain, pipeline.dictionary)
        status = "valid" if verdict.valid else "invalid"
        line = f"{args.explain}: {status} ({verdict.rule.value})\n"
        stdout.write(line.encode(INPUT_ENCODING, INPUT_ERRORS))
        return 0

    logger.info("Reading input text...")
    text = stdin.read().decode(INPUT_ENCODING, INPUT_ERRORS)

    result = pipeline.check(text)
    output = pipeline.render(result)
    stdout.write(output.encode(INPUT_ENCODING, INPUT_ERRORS))
    stdout.flush()

    logger.info(
        "Done! %d words, %d misspelled, %.1fms",
        result.stats.words_checked,
        result.stats.errors_detected,
        (time.time() - start_time) * 1000,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    if args.dictionary is None and args.builtin is None:
        parser.print_usage(sys.stderr)
        logger.error("Error: a dictionary file or --builtin LANG is required")
        return 1

    return run(args, sys.stdin.buffer, sys.stdout.buffer)


if __name__ == "__main__":
    sys.exit(main())
