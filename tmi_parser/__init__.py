"""TMI message parsing library.

Converts raw lines of Twitch's tag-prefixed IRC dialect into typed message
values and back into wire form. Pure: takes one decoded line, returns a
value or raises a ``ParseError``; it never performs I/O.
"""

from .errors import (  # noqa: F401
    MalformedCommandError,
    MalformedTagsError,
    ParseError,
    TMIError,
    TooShortError,
    UnknownCommandError,
)
from .messages import (  # noqa: F401
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
from .parser import dispatch, parse, preprocess  # noqa: F401
from .serializer import unparse  # noqa: F401
from .tags import TagKind, Tags, TagValue, parse_tags, unparse_tags  # noqa: F401

__all__ = [
    "parse",
    "unparse",
    "preprocess",
    "dispatch",
    "parse_tags",
    "unparse_tags",
    "TagKind",
    "TagValue",
    "Tags",
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
    "TMIError",
    "ParseError",
    "TooShortError",
    "MalformedTagsError",
    "MalformedCommandError",
    "UnknownCommandError",
]
