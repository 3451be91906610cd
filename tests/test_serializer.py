"""Tests for Message -> wire line serialization."""

from __future__ import annotations

import pytest

from tmi_parser import (
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
    TagValue,
    Usernotice,
    Userstate,
    parse,
    unparse,
)

TAGS = {
    "badge-info": TagValue.none(),
    "color": TagValue.color(0x0D4200),
    "display-name": TagValue.string("ronni"),
    "mod": TagValue.boolean(False),
    "room-id": TagValue.number(1337),
    "tmi-sent-ts": TagValue.timestamp(1507246572675),
}


@pytest.mark.parametrize(
    ("message", "line"),
    [
        (Ping(), "PING :tmi.twitch.tv"),
        (Pong(), "PONG :tmi.twitch.tv"),
        (CapReq("twitch.tv/membership"), "CAP REQ :twitch.tv/membership"),
        (CapAck("twitch.tv/tags"), ":tmi.twitch.tv CAP * ACK :twitch.tv/tags"),
        (Pass("oauth:hello"), "PASS oauth:hello"),
        (Nick("justinfan123"), "NICK justinfan123"),
        (Join("dallas"), "JOIN #dallas"),
        (Part("dallas"), "PART #dallas"),
        (Privmsg("dallas", "Kappa Keepo"), "PRIVMSG #dallas :Kappa Keepo"),
        (Clearchat("dallas"), ":tmi.twitch.tv CLEARCHAT #dallas"),
        (Clearchat("dallas", "ronni"), ":tmi.twitch.tv CLEARCHAT #dallas :ronni"),
        (Clearmsg("dallas", "HeyGuys"), ":tmi.twitch.tv CLEARMSG #dallas :HeyGuys"),
        (HosttargetStart("host", "chan"), ":tmi.twitch.tv HOSTTARGET #host :chan"),
        (HosttargetStart("host", "chan", 10), ":tmi.twitch.tv HOSTTARGET #host :chan 10"),
        (HosttargetEnd("host"), ":tmi.twitch.tv HOSTTARGET #host :-"),
        (HosttargetEnd("host", 0), ":tmi.twitch.tv HOSTTARGET #host :- 0"),
        (Notice("dallas", "slow"), ":tmi.twitch.tv NOTICE #dallas :slow"),
        (Reconnect(), "RECONNECT"),
        (Roomstate("dallas"), ":tmi.twitch.tv ROOMSTATE #dallas"),
        (Usernotice("dallas", "hype"), ":tmi.twitch.tv USERNOTICE #dallas :hype"),
        (Userstate("dallas"), ":tmi.twitch.tv USERSTATE #dallas"),
        (GlobalUserstate(), ":tmi.twitch.tv GLOBALUSERSTATE"),
    ],
)
def test_unparse_untagged(message, line):
    assert unparse(message) == line
    assert message.unparse() == line


def test_unparse_tagged_emits_tags_in_order():
    line = unparse(Notice("dallas", "slow", {"msg-id": TagValue.string("slow_off"), "x": TagValue.number(5)}))
    assert line == "@msg-id=slow_off;x=5 :tmi.twitch.tv NOTICE #dallas :slow"


def test_tagged_privmsg_gains_endpoint_source():
    line = unparse(Privmsg("dallas", "hi", {"mod": TagValue.boolean(True)}))
    assert line == "@mod=1 :tmi.twitch.tv PRIVMSG #dallas :hi"


def test_empty_tags_are_omitted():
    assert unparse(Privmsg("dallas", "hi", {})) == "PRIVMSG #dallas :hi"


def test_unparse_rejects_foreign_objects():
    with pytest.raises(TypeError):
        unparse(object())  # type: ignore[arg-type]


ROUND_TRIP: list[Message] = [
    Ping(),
    Pong(),
    CapReq("twitch.tv/commands"),
    CapAck("twitch.tv/commands"),
    Pass("oauth:abc123"),
    Nick("ronni"),
    Join("dallas"),
    Part("dallas"),
    Privmsg("dallas", "Kappa Keepo Kappa"),
    Privmsg("dallas", "see tmi.twitch.tv for status :)", TAGS),
    Clearchat("dallas"),
    Clearchat("dallas", "ronni", {"ban-duration": TagValue.number(600)}),
    Clearmsg("dallas", "HeyGuys", {"login": TagValue.string("ronni")}),
    HosttargetStart("hosting_channel", "target"),
    HosttargetStart("hosting_channel", "target", 123456),
    HosttargetEnd("hosting_channel"),
    HosttargetEnd("hosting_channel", 4294967295),
    Notice("dallas", "This room is no longer in slow mode.", {"msg-id": TagValue.string("slow_off")}),
    Reconnect(),
    Roomstate("dallas", {"slow": TagValue.number(30), "r9k": TagValue.boolean(False)}),
    Roomstate("dallas"),
    Usernotice("dallas", "Great stream -- keep it up!", TAGS),
    Userstate("dallas", TAGS),
    GlobalUserstate(TAGS),
    GlobalUserstate(),
]


@pytest.mark.parametrize("message", ROUND_TRIP, ids=lambda m: type(m).__name__)
def test_round_trip(message):
    parsed = parse(unparse(message))
    assert parsed == message
    tags = getattr(message, "tags", None)
    if tags:
        assert list(parsed.tags) == list(tags)


@pytest.mark.parametrize(
    "message",
    [
        Nick(""),
        Pass(""),
        Nick("ronni "),
        Privmsg("dallas", "trailing space "),
        Privmsg("dallas", "two\r\nlines"),
        Join(""),
        Part("dal las"),
        Privmsg("dal :las", "hi"),
        Roomstate("dallas room"),
        HosttargetStart("host", "-"),
        HosttargetStart("host", "-chan"),
        HosttargetStart("host", "two words"),
        HosttargetStart("host", "chan", -1),
        HosttargetEnd("ho st"),
        HosttargetEnd("host", 2**32),
        Privmsg("dallas", "hi", {"emotes": TagValue.string("25:0-4;1902:6-10")}),
        Privmsg("dallas", "hi", {"msg": TagValue.string("a :b")}),
        Privmsg("dallas", "hi", {"count": TagValue.number(1)}),
        GlobalUserstate({"user-id": TagValue.string("1337")}),
    ],
    ids=repr,
)
def test_unparse_rejects_values_that_would_not_parse_back(message):
    with pytest.raises(ValueError):
        unparse(message)


@pytest.mark.parametrize(
    "message",
    [
        Privmsg("dallas", ""),
        Clearchat("dallas", ""),
        CapReq(""),
        Pass(" oauth:abc"),
        HosttargetStart("host", "#chan"),
        Privmsg("dallas", "hi", {"reply-parent-msg-body": TagValue.string("a=b c")}),
    ],
    ids=repr,
)
def test_unusual_but_valid_values_round_trip(message):
    assert parse(unparse(message)) == message
