"""Serialize Message values back into canonical TMI lines."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .constants import TAG_NUMBER_MAX, TMI_ENDPOINT, TMI_MIN_LINE_LENGTH
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
from .tags import unparse_tags

__all__ = ["unparse"]

_SOURCE = f":{TMI_ENDPOINT}"


def _viewers_suffix(viewers: int | None) -> str:
    return "" if viewers is None else f" {viewers}"


def _clearchat(m: Clearchat) -> str:
    line = f"{_SOURCE} CLEARCHAT #{m.channel}"
    return line if m.user is None else f"{line} :{m.user}"


def _channel_message(m: Clearmsg | Notice | Usernotice) -> str:
    return f"{_SOURCE} {m.command} #{m.channel} :{m.message}"


def _channel_state(m: Roomstate | Userstate) -> str:
    return f"{_SOURCE} {m.command} #{m.channel}"


_FORMATTERS: dict[type[Message], Callable[[Any], str]] = {
    Ping: lambda m: f"PING {_SOURCE}",
    Pong: lambda m: f"PONG {_SOURCE}",
    CapReq: lambda m: f"CAP REQ :{m.capability}",
    CapAck: lambda m: f"{_SOURCE} CAP * ACK :{m.capability}",
    Pass: lambda m: f"PASS {m.password}",
    Nick: lambda m: f"NICK {m.nick}",
    Join: lambda m: f"JOIN #{m.channel}",
    Part: lambda m: f"PART #{m.channel}",
    Privmsg: lambda m: f"PRIVMSG #{m.channel} :{m.message}",
    Clearchat: _clearchat,
    Clearmsg: _channel_message,
    HosttargetStart: lambda m: (
        f"{_SOURCE} HOSTTARGET #{m.host} :{m.channel}{_viewers_suffix(m.viewers)}"
    ),
    HosttargetEnd: lambda m: f"{_SOURCE} HOSTTARGET #{m.host} :-{_viewers_suffix(m.viewers)}",
    Notice: _channel_message,
    Reconnect: lambda m: "RECONNECT",
    Roomstate: _channel_state,
    Usernotice: _channel_message,
    Userstate: _channel_state,
    GlobalUserstate: lambda m: f"{_SOURCE} GLOBALUSERSTATE",
}


def _check_name(field: str, value: str) -> None:
    if not value or any(ch.isspace() for ch in value):
        raise ValueError(f"{field} {value!r} must be a non-empty name without whitespace")


def _check_fields(message: Message) -> None:
    for field in ("channel", "host"):
        value = getattr(message, field, None)
        if value is not None:
            _check_name(field, value)
    if isinstance(message, HosttargetStart) and message.channel.startswith("-"):
        raise ValueError(f"Host target {message.channel!r} would read back as a host end")
    viewers = getattr(message, "viewers", None)
    if viewers is not None and not 0 <= viewers <= TAG_NUMBER_MAX:
        raise ValueError(f"Viewer count {viewers} is outside 0..{TAG_NUMBER_MAX}")


def _check_line(line: str) -> None:
    if "\r" in line or "\n" in line:
        raise ValueError(f"Line {line!r} contains a line break")
    if line != line.strip():
        raise ValueError(f"Line {line!r} has whitespace the parser would strip")
    if len(line) < TMI_MIN_LINE_LENGTH:
        raise ValueError(f"Line {line!r} is shorter than {TMI_MIN_LINE_LENGTH} characters")


def unparse(message: Message) -> str:
    """Reconstruct the wire line for ``message`` (no trailing ``\\r\\n``).

    Tags are emitted in mapping order. A tagged line always carries the
    endpoint source, since the tag block has to end in ``" :"`` to parse.

    Raises:
        TypeError: ``message`` is not one of the known message classes.
        ValueError: a field holds text that would not parse back to an
            equal message (an empty ``Nick``, a channel with spaces, a
            tag value holding ``";"``, and the like).
    """
    formatter = _FORMATTERS.get(type(message))
    if formatter is None:
        raise TypeError(f"Cannot unparse {type(message).__name__!r}")
    _check_fields(message)
    line = formatter(message)
    prefix = unparse_tags(getattr(message, "tags", None))
    if prefix is not None:
        if not line.startswith(":"):
            line = f"{_SOURCE} {line}"
        line = f"{prefix} {line}"
    _check_line(line)
    return line
