"""TMI message model definitions.

One frozen dataclass per recognized command. Tags are optional on every
tagged shape, even where the server always sends them; checking which
tags a command must carry is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar

from .tags import Tags

__all__ = [
    "Message",
    "Ping",
    "Pong",
    "CapReq",
    "CapAck",
    "Pass",
    "Nick",
    "Join",
    "Part",
    "Privmsg",
    "Clearchat",
    "Clearmsg",
    "HosttargetStart",
    "HosttargetEnd",
    "Notice",
    "Reconnect",
    "Roomstate",
    "Usernotice",
    "Userstate",
    "GlobalUserstate",
]


class Message:
    """Base class of every parsed TMI message."""

    __slots__ = ()

    command: ClassVar[str]

    @classmethod
    def parse(cls, line: str) -> Message:
        # Local import to avoid cyclic import issues during module init.
        from .parser import parse

        return parse(line)

    def unparse(self) -> str:
        from .serializer import unparse

        return unparse(self)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly view keyed by field name plus ``command``."""
        out: dict[str, object] = {"command": self.command, "type": type(self).__name__}
        for field in fields(self):  # type: ignore[arg-type]
            value = getattr(self, field.name)
            if field.name == "tags" and value is not None:
                value = {key: tag.to_json() for key, tag in value.items()}
            out[field.name] = value
        return out


class _Tagged(Message):
    __slots__ = ()

    def __post_init__(self) -> None:
        # An empty tag block is represented as None, never as {}
        if self.tags is not None and not self.tags:  # type: ignore[attr-defined]
            object.__setattr__(self, "tags", None)


@dataclass(frozen=True, slots=True)
class Ping(Message):
    """``PING :<endpoint>``"""

    command: ClassVar[str] = "PING"


@dataclass(frozen=True, slots=True)
class Pong(Message):
    """``PONG :<endpoint>``"""

    command: ClassVar[str] = "PONG"


@dataclass(frozen=True, slots=True)
class CapReq(Message):
    """``CAP REQ :<capability>``"""

    command: ClassVar[str] = "CAP"

    capability: str


@dataclass(frozen=True, slots=True)
class CapAck(Message):
    """``:<endpoint> CAP * ACK :<capability>``"""

    command: ClassVar[str] = "CAP"

    capability: str


@dataclass(frozen=True, slots=True)
class Pass(Message):
    """``PASS oauth:<token>``"""

    command: ClassVar[str] = "PASS"

    password: str

    def __repr__(self) -> str:
        return "Pass(password='***')"


@dataclass(frozen=True, slots=True)
class Nick(Message):
    command: ClassVar[str] = "NICK"

    nick: str


@dataclass(frozen=True, slots=True)
class Join(Message):
    command: ClassVar[str] = "JOIN"

    channel: str


@dataclass(frozen=True, slots=True)
class Part(Message):
    command: ClassVar[str] = "PART"

    channel: str


@dataclass(frozen=True, slots=True)
class Privmsg(_Tagged):
    """``[@<tags>] PRIVMSG #<channel> :<message>``"""

    command: ClassVar[str] = "PRIVMSG"

    channel: str
    message: str
    tags: Tags | None = None


@dataclass(frozen=True, slots=True)
class Clearchat(_Tagged):
    """``[@<tags>] :<endpoint> CLEARCHAT #<channel> [:<user>]``

    ``user`` is None when the whole channel history was cleared.
    """

    command: ClassVar[str] = "CLEARCHAT"

    channel: str
    user: str | None = None
    tags: Tags | None = None


@dataclass(frozen=True, slots=True)
class Clearmsg(_Tagged):
    command: ClassVar[str] = "CLEARMSG"

    channel: str
    message: str
    tags: Tags | None = None


@dataclass(frozen=True, slots=True)
class HosttargetStart(Message):
    """``:<endpoint> HOSTTARGET #<host> :<channel> [<viewers>]``"""

    command: ClassVar[str] = "HOSTTARGET"

    host: str
    channel: str
    viewers: int | None = None


@dataclass(frozen=True, slots=True)
class HosttargetEnd(Message):
    """``:<endpoint> HOSTTARGET #<host> :- [<viewers>]``"""

    command: ClassVar[str] = "HOSTTARGET"

    host: str
    viewers: int | None = None


@dataclass(frozen=True, slots=True)
class Notice(_Tagged):
    command: ClassVar[str] = "NOTICE"

    channel: str
    message: str
    tags: Tags | None = None


@dataclass(frozen=True, slots=True)
class Reconnect(Message):
    command: ClassVar[str] = "RECONNECT"


@dataclass(frozen=True, slots=True)
class Roomstate(_Tagged):
    command: ClassVar[str] = "ROOMSTATE"

    channel: str
    tags: Tags | None = None


@dataclass(frozen=True, slots=True)
class Usernotice(_Tagged):
    command: ClassVar[str] = "USERNOTICE"

    channel: str
    message: str
    tags: Tags | None = None


@dataclass(frozen=True, slots=True)
class Userstate(_Tagged):
    command: ClassVar[str] = "USERSTATE"

    channel: str
    tags: Tags | None = None


@dataclass(frozen=True, slots=True)
class GlobalUserstate(_Tagged):
    command: ClassVar[str] = "GLOBALUSERSTATE"

    tags: Tags | None = None
