"""Message tags: typed tag values and the ``@key=value;...`` block codec."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .constants import (
    TAG_COLOR_MAX,
    TAG_NUMBER_MAX,
    TAG_TIMESTAMP_DIGITS,
    TAG_TIMESTAMP_MAX,
)
from .errors import MalformedTagsError

__all__ = ["TagKind", "TagValue", "Tags", "parse_tags", "unparse_tags"]

_HEX_COLOR = re.compile(r"#([0-9A-Fa-f]+)")
_TAG_BLOCK_END = " :"


class TagKind(Enum):
    NONE = "none"
    BOOLEAN = "boolean"
    NUMBER = "number"
    TIMESTAMP = "timestamp"
    COLOR = "color"
    STRING = "string"


@dataclass(frozen=True, slots=True)
class TagValue:
    """Typed value of a single message tag.

    Classification is lossy: a single digit ``"0"``/``"1"`` becomes a
    Boolean even on tags that are really counters, so type conversion stays
    the caller's job.
    """

    kind: TagKind
    value: bool | int | str | None = None

    @classmethod
    def none(cls) -> TagValue:
        return cls(TagKind.NONE)

    @classmethod
    def boolean(cls, value: bool) -> TagValue:
        return cls(TagKind.BOOLEAN, value)

    @classmethod
    def number(cls, value: int) -> TagValue:
        return cls(TagKind.NUMBER, value)

    @classmethod
    def timestamp(cls, value: int) -> TagValue:
        return cls(TagKind.TIMESTAMP, value)

    @classmethod
    def color(cls, value: int) -> TagValue:
        return cls(TagKind.COLOR, value)

    @classmethod
    def string(cls, value: str) -> TagValue:
        return cls(TagKind.STRING, value)

    @classmethod
    def infer(cls, raw: str) -> TagValue:
        """Classify an untyped tag value string.

        Priority: empty → None, ``"0"``/``"1"`` → Boolean, 32-bit decimal →
        Number, 64-bit decimal → Timestamp, ``#`` + hex → Color, else String.
        Never raises.
        """
        if raw == "":
            return cls.none()
        if raw == "0":
            return cls.boolean(False)
        if raw == "1":
            return cls.boolean(True)
        # str.isdigit alone accepts non-ASCII digits that int() would decode
        if raw.isascii() and raw.isdigit():
            if len(raw) > TAG_TIMESTAMP_DIGITS:
                return cls.string(raw)
            number = int(raw)
            if number <= TAG_NUMBER_MAX:
                return cls.number(number)
            if number <= TAG_TIMESTAMP_MAX:
                return cls.timestamp(number)
            return cls.string(raw)
        match = _HEX_COLOR.fullmatch(raw)
        if match:
            color = int(match.group(1), 16)
            if color <= TAG_COLOR_MAX:
                return cls.color(color)
        return cls.string(raw)

    def __str__(self) -> str:
        if self.kind is TagKind.NONE:
            return ""
        if self.kind is TagKind.BOOLEAN:
            return "1" if self.value else "0"
        if self.kind is TagKind.COLOR:
            return f"#{self.value:06X}"
        return str(self.value)

    def to_json(self) -> dict[str, object]:
        return {"kind": self.kind.value, "value": self.value}


Tags = dict[str, TagValue]


def parse_tags(text: str) -> tuple[Tags | None, int]:
    """Tokenize a tag block into a Tags mapping.

    ``text`` is the line with its leading ``@`` already removed. The block
    must be terminated by ``" :"``; the returned offset points just past that
    terminator so the caller can slice the source/command remainder.

    Raises:
        MalformedTagsError: terminator missing, or a token without ``=``.
    """
    end = text.find(_TAG_BLOCK_END)
    if end == -1:
        raise MalformedTagsError("Tag block is missing its ' :' terminator")

    tags: Tags = {}
    for token in text[:end].split(";"):
        if not token:
            continue
        key, sep, value = token.partition("=")
        if not sep or not key:
            raise MalformedTagsError(
                f"Malformed tag token {token!r}", data={"token": token}
            )
        tags[key] = TagValue.infer(value)

    return (tags or None), end + len(_TAG_BLOCK_END)


def _render_tag(key: str, value: TagValue) -> str:
    if not key or any(ch in "=;" or ch.isspace() for ch in key):
        raise ValueError(f"Tag key {key!r} cannot be written to a tag block")
    text = str(value)
    if ";" in text or _TAG_BLOCK_END in text:
        raise ValueError(f"Tag {key!r} value {text!r} would split the tag block")
    if TagValue.infer(text) != value:
        raise ValueError(f"Tag {key!r} value {value!r} would not read back as itself")
    return f"{key}={text}"


def unparse_tags(tags: Tags | None) -> str | None:
    """Render tags as ``@key=value;...`` in mapping order, or None when empty.

    Raises:
        ValueError: a key or value that would read back differently, such as a
            ``STRING`` holding ``";"`` or a ``NUMBER(1)`` that reparses as a
            Boolean.
    """
    if not tags:
        return None
    return "@" + ";".join(_render_tag(key, value) for key, value in tags.items())
