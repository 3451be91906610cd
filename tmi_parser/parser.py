"""Pure parsing helpers for TMI lines.

Keeps logic side‑effect free (apart from debug events) so it can be unit
tested easily. Every extractor locates fixed delimiters (``" :"``, ``#``,
spaces) and checks bounds before slicing; failures surface as
``MalformedCommandError`` rather than index errors.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .constants import (
    TAG_NUMBER_DIGITS,
    TAG_NUMBER_MAX,
    TMI_ENDPOINT_MARKER,
    TMI_MIN_LINE_LENGTH,
)
from .errors import MalformedCommandError, ParseError, TooShortError, UnknownCommandError
from .logs.logger import logger
from .messages import (
    CapAck,
    CapReq,
    Clearchat,
    Clearmsg,
    GlobalUserstate,
    HosttargetEnd,
    HosttargetStart,
    Join,
    Message,
    Nick,
    Notice,
    Part,
    Pass,
    Ping,
    Pong,
    Privmsg,
    Reconnect,
    Roomstate,
    Usernotice,
    Userstate,
)
from .tags import Tags, parse_tags

__all__ = ["parse", "preprocess", "dispatch", "EXTRACTORS"]

_TRAILING = " :"
_HOST_STOP = " :-"

Extractor = Callable[[str, str, Tags | None], Message]


def preprocess(line: str) -> tuple[Tags | None, str, str]:
    """Split a raw line into (tags, command, body).

    Strips surrounding whitespace (``\\r\\n`` included), consumes a leading
    tag block and skips the endpoint source token. A line without a space
    after the command yields an empty body.
    """
    text = line.strip()
    if len(text) < TMI_MIN_LINE_LENGTH:
        raise TooShortError(len(text), TMI_MIN_LINE_LENGTH)

    tags: Tags | None = None
    if text.startswith("@"):
        tags, consumed = parse_tags(text[1:])
        text = text[1 + consumed :]

    text = _skip_endpoint(text)
    command, _, body = text.partition(" ")
    return tags, command, body


def _skip_endpoint(text: str) -> str:
    # Only the leading source token may hold the marker; message text never does.
    idx = text.find(TMI_ENDPOINT_MARKER)
    if idx == -1 or " " in text[:idx]:
        return text
    return text[idx + len(TMI_ENDPOINT_MARKER) :]


def _channel(text: str, command: str) -> str:
    channel = text[1:] if text.startswith("#") else text
    if not channel:
        raise MalformedCommandError(command, "missing channel")
    return channel


def _split_trailing(body: str, command: str) -> tuple[str, str]:
    idx = body.find(_TRAILING)
    if idx == -1:
        raise MalformedCommandError(command, "missing ' :' delimiter")
    return body[:idx], body[idx + len(_TRAILING) :]


def _parse_count(text: str, command: str) -> int:
    if (
        not (text.isascii() and text.isdigit())
        or len(text) > TAG_NUMBER_DIGITS
        or int(text) > TAG_NUMBER_MAX
    ):
        raise MalformedCommandError(command, f"invalid viewer count {text!r}")
    return int(text)


def _bare(factory: Callable[[], Message]) -> Extractor:
    def extract(command: str, body: str, tags: Tags | None) -> Message:
        return factory()

    return extract


def _cap(command: str, body: str, tags: Tags | None) -> Message:
    head, capability = _split_trailing(body, command)
    if head == "REQ":
        return CapReq(capability)
    if head == "* ACK":
        return CapAck(capability)
    raise MalformedCommandError(command, f"unsupported subcommand {head!r}")


def _pass(command: str, body: str, tags: Tags | None) -> Message:
    return Pass(body)


def _nick(command: str, body: str, tags: Tags | None) -> Message:
    return Nick(body)


def _join(command: str, body: str, tags: Tags | None) -> Message:
    return Join(_channel(body, command))


def _part(command: str, body: str, tags: Tags | None) -> Message:
    return Part(_channel(body, command))


def _channel_message(cls: type[Message]) -> Extractor:
    """Extractor for the ``#<channel> :<message>`` family."""

    def extract(command: str, body: str, tags: Tags | None) -> Message:
        head, message = _split_trailing(body, command)
        return cls(_channel(head, command), message, tags)  # type: ignore[call-arg]

    return extract


def _clearchat(command: str, body: str, tags: Tags | None) -> Message:
    idx = body.find(_TRAILING)
    if idx == -1:
        return Clearchat(_channel(body, command), None, tags)
    return Clearchat(_channel(body[:idx], command), body[idx + len(_TRAILING) :], tags)


def _hosttarget(command: str, body: str, tags: Tags | None) -> Message:
    idx = body.find(_HOST_STOP)
    if idx != -1:
        host = _channel(body[:idx], command)
        rest = body[idx + len(_HOST_STOP) :]
        if not rest:
            return HosttargetEnd(host)
        if not rest.startswith(" "):
            raise MalformedCommandError(command, f"unexpected text after '-': {rest!r}")
        return HosttargetEnd(host, _parse_count(rest[1:], command))

    head, rest = _split_trailing(body, command)
    host = _channel(head, command)
    if not rest:
        raise MalformedCommandError(command, "missing target channel")
    channel, sep, count = rest.partition(" ")
    if not channel:
        raise MalformedCommandError(command, "missing target channel")
    viewers = _parse_count(count, command) if sep else None
    return HosttargetStart(host, channel, viewers)


def _channel_state(cls: type[Message]) -> Extractor:
    def extract(command: str, body: str, tags: Tags | None) -> Message:
        return cls(_channel(body, command), tags)  # type: ignore[call-arg]

    return extract


def _global_userstate(command: str, body: str, tags: Tags | None) -> Message:
    return GlobalUserstate(tags)


EXTRACTORS: dict[str, Extractor] = {
    "PING": _bare(Ping),
    "PONG": _bare(Pong),
    "CAP": _cap,
    "PASS": _pass,
    "NICK": _nick,
    "JOIN": _join,
    "PART": _part,
    "PRIVMSG": _channel_message(Privmsg),
    "CLEARCHAT": _clearchat,
    "CLEARMSG": _channel_message(Clearmsg),
    "HOSTTARGET": _hosttarget,
    "NOTICE": _channel_message(Notice),
    "RECONNECT": _bare(Reconnect),
    "ROOMSTATE": _channel_state(Roomstate),
    "USERNOTICE": _channel_message(Usernotice),
    "USERSTATE": _channel_state(Userstate),
    "GLOBALUSERSTATE": _global_userstate,
}


def dispatch(command: str, body: str, tags: Tags | None = None) -> Message:
    """Build the message for ``command`` from its body.

    Raises:
        UnknownCommandError: verb not in :data:`EXTRACTORS`.
        MalformedCommandError: body lacks a field the command requires.
    """
    extractor = EXTRACTORS.get(command)
    if extractor is None:
        raise UnknownCommandError(command)
    return extractor(command, body, tags)


def parse(line: str) -> Message:
    """Parse one raw TMI line into a Message.

    Accepts the line with or without trailing ``\\r\\n`` and surrounding
    whitespace. Raises a ``ParseError`` subclass carrying the raw line in
    its ``data``.
    """
    try:
        tags, command, body = preprocess(line)
        return dispatch(command, body, tags)
    except ParseError as e:
        e.data.setdefault("line", line)
        logger.log_event(
            "parse",
            "rejected",
            level=logging.DEBUG,
            command=e.data.get("command", ""),
            error_type=type(e).__name__,
            error=str(e),
        )
        raise
