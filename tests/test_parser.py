import pytest

from rovercore.parser import (
    Message,
    MessageParser,
    ParserState,
    extract_integer,
    next_value,
)


def test_parses_command_message():
    parser = MessageParser()
    assert parser.feed_all("$PCCMD,1,200*") == [Message("PCCMD", "1,200")]
    assert parser.state is ParserState.DOLLAR


def test_feed_returns_message_only_on_last_byte():
    parser = MessageParser()
    results = [parser.feed(c) for c in "$AB,x*"]
    assert results[:-1] == [None] * 5
    assert results[-1] == Message("AB", "x")


def test_accepts_bytes():
    parser = MessageParser()
    assert parser.feed_all(b"$PCCMD,2,10*") == [Message("PCCMD", "2,10")]


def test_noise_before_dollar_ignored():
    parser = MessageParser()
    assert parser.feed_all("garbage*,$T,p*") == [Message("T", "p")]


def test_message_without_payload():
    parser = MessageParser()
    assert parser.feed_all("$HELLO*") == [Message("HELLO", "")]


def test_six_character_type_accepted():
    parser = MessageParser()
    assert parser.feed_all("$ABCDEF,1*") == [Message("ABCDEF", "1")]


def test_type_too_long_is_discarded():
    parser = MessageParser()
    assert parser.feed_all("$ABCDEFG,1*") == []
    assert parser.feed_all("$OK,2*") == [Message("OK", "2")]


def test_six_character_type_without_payload_discarded():
    parser = MessageParser()
    assert parser.feed_all("$ABCDEF*") == []


def test_payload_limit():
    parser = MessageParser()
    full = "a" * 100
    assert parser.feed_all("$X," + full + "*") == [Message("X", full)]
    assert parser.feed_all("$X," + full + "b*") == []


def test_several_messages():
    parser = MessageParser()
    msgs = parser.feed_all("$A,1*$B,2*")
    assert [m.msg_type for m in msgs] == ["A", "B"]


def test_reset_drops_partial_message():
    parser = MessageParser()
    parser.feed_all("$PCC")
    parser.reset()
    assert parser.feed_all("MD,1*") == []


def test_rejects_multi_char_byte():
    with pytest.raises(ValueError):
        MessageParser().feed("ab")


@pytest.mark.parametrize(
    "text, expected",
    [("1,200", 1), ("200", 200), ("-45", -45), ("+7", 7), ("", 0)],
)
def test_extract_integer(text, expected):
    assert extract_integer(text) == expected


def test_next_value_documented_example():
    assert next_value("10,20,30", 0) == 3
    assert next_value("10,20,30", 3) == 6


def test_next_value_at_end():
    msg = "10,20,30"
    assert next_value(msg, 6) == len(msg)


def test_extract_with_next_value_round_trip():
    payload = "3,1500"
    assert extract_integer(payload) == 3
    assert extract_integer(payload[next_value(payload, 0):]) == 1500