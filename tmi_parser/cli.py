"""Command line front end: decode TMI lines from files or stdin."""

from __future__ import annotations

import argparse
import contextlib
import json
import logging
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from .errors import ParseError
from .logging_config import LoggerConfigurator
from .logs.logger import logger
from .messages import Message
from .parser import parse

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tmi-parser",
        description="Decode raw Twitch TMI lines into JSON (or canonical wire form).",
    )
    parser.add_argument(
        "files",
        nargs="*",
        default=["-"],
        help="input files, one TMI line per line ('-' or nothing reads stdin)",
    )
    parser.add_argument(
        "--unparse",
        action="store_true",
        help="print the canonical wire line instead of JSON",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="stop at the first line that fails to parse",
    )
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser


def _iter_lines(paths: Sequence[str]) -> Iterator[tuple[str, int, str]]:
    for path in paths:
        if path == "-":
            yield from _numbered("<stdin>", sys.stdin)
            continue
        with open(path, encoding="utf-8") as handle:
            yield from _numbered(path, handle)


def _numbered(source: str, stream: TextIO) -> Iterator[tuple[str, int, str]]:
    for lineno, line in enumerate(stream, start=1):
        yield source, lineno, line


def _render(message: Message, unparse: bool) -> str:
    if unparse:
        return message.unparse()
    return json.dumps(message.to_dict(), ensure_ascii=False)


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """Run the decoder; returns the process exit status."""
    args = build_parser().parse_args(argv)
    out = out or sys.stdout
    LoggerConfigurator(level=logging.DEBUG if args.debug else None).configure()

    decoded = rejected = 0
    logger.log_event("cli", "start", level=logging.DEBUG, source=", ".join(args.files))
    try:
        with contextlib.closing(_iter_lines(args.files)) as lines:
            for source, lineno, raw in lines:
                if not raw.strip():
                    continue
                try:
                    rendered = _render(parse(raw), args.unparse)
                except (ParseError, ValueError) as e:
                    rejected += 1
                    logger.log_event(
                        "cli",
                        "line_rejected",
                        level=logging.WARNING,
                        source=source,
                        lineno=lineno,
                        error_type=type(e).__name__,
                        error=str(e),
                    )
                    if args.strict:
                        logger.log_event("cli", "strict_abort", level=logging.ERROR, lineno=lineno)
                        return EXIT_REJECTED
                    continue
                decoded += 1
                print(rendered, file=out)
    except OSError as e:
        logger.log_event(
            "cli", "input_error", level=logging.ERROR, source=e.filename, error=e.strerror
        )
        return EXIT_INPUT_ERROR

    logger.log_event("cli", "summary", decoded=decoded, rejected=rejected)
    return EXIT_REJECTED if rejected else EXIT_OK
