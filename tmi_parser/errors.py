"""Centralized parser error hierarchy.

Every failure surfaced by :func:`tmi_parser.parse` is a ``ParseError``
subclass, so a transport layer can catch one type and decide whether to
log, drop or disconnect.

Classes:
  TMIError              – Base for all package errors.
  ParseError            – Base for failures while decoding a line.
  TooShortError         – Line below the minimum viable length.
  MalformedTagsError    – Tag block unterminated or holding a bad token.
  MalformedCommandError – Command body missing a delimiter or numeric field.
  UnknownCommandError   – Command verb outside the recognized set.
"""

from __future__ import annotations

from collections.abc import Mapping


class TMIError(Exception):
    """Base class for all tmi_parser errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ParseError(TMIError):
    """Exception raised when a raw line cannot be decoded into a message.

    ``data["line"]`` carries the offending line once :func:`tmi_parser.parse`
    has seen the failure.
    """

    @property
    def line(self) -> str | None:
        line = self.data.get("line")
        return line if isinstance(line, str) else None


class TooShortError(ParseError):
    """Exception raised for lines shorter than the minimum viable length."""

    def __init__(self, length: int, minimum: int) -> None:
        super().__init__(
            f"Line too short ({length} < {minimum} characters)",
            data={"length": length, "minimum": minimum},
        )


class MalformedTagsError(ParseError):
    """Exception raised for an unterminated tag block or a token lacking ``=``."""


class MalformedCommandError(ParseError):
    """Exception raised when a command body misses a required field.

    Attributes:
        command: Verb whose body could not be extracted.
    """

    def __init__(self, command: str, reason: str | None = None) -> None:
        message = f"Malformed {command} command"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, data={"command": command})
        self.command = command


class UnknownCommandError(ParseError):
    """Exception raised for command verbs outside the recognized set.

    Attributes:
        command: The unrecognized verb, verbatim.
    """

    def __init__(self, command: str) -> None:
        super().__init__(f"Unknown command {command!r}", data={"command": command})
        self.command = command


__all__ = [
    "TMIError",
    "ParseError",
    "TooShortError",
    "MalformedTagsError",
    "MalformedCommandError",
    "UnknownCommandError",
]
