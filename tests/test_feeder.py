import pytest

from aprilcommon.feeder import StringFeeder, StringFeederError


def test_initial_position():
    sf = StringFeeder("abc")
    assert sf.line == 1
    assert sf.column == 0
    assert sf.has_next()


def test_line_and_column_follow_documented_example():
    sf = StringFeeder("ab\nc\n")
    sf.next()
    assert (sf.line, sf.column) == (1, 1)
    sf.next()
    assert (sf.line, sf.column) == (1, 2)
    sf.next()
    assert (sf.line, sf.column) == (2, 0)
    sf.next()
    assert (sf.line, sf.column) == (2, 1)
    sf.next()
    assert (sf.line, sf.column) == (3, 0)


def test_next_reads_every_character_then_stops():
    text = "hello"
    sf = StringFeeder(text)
    read = []
    while sf.has_next():
        read.append(sf.next())
    assert "".join(read) == text
    with pytest.raises(StringFeederError):
        sf.next()


def test_empty_string_has_nothing():
    sf = StringFeeder("")
    assert not sf.has_next()
    assert sf.peek() == ""


def test_feeder_keeps_its_own_copy():
    text = "abc"
    sf = StringFeeder(text)
    text += "def"
    assert sf.next_length(10) == "abc"


def test_peek_does_not_advance():
    sf = StringFeeder("xy")
    assert sf.peek() == "x"
    assert sf.peek() == "x"
    assert sf.next() == "x"
    assert sf.peek() == "y"


def test_peek_length_clamps_and_does_not_advance():
    sf = StringFeeder("abcdef")
    sf.next()
    assert sf.peek_length(3) == "bcd"
    assert sf.peek_length(100) == "bcdef"
    assert sf.column == 1


def test_next_length_advances_and_clamps():
    sf = StringFeeder("abcdef")
    assert sf.next_length(2) == "ab"
    assert sf.next_length(100) == "cdef"
    assert not sf.has_next()
    assert sf.next_length(5) == ""


def test_next_length_matches_peek_length():
    sf = StringFeeder("one\ntwo")
    peeked = sf.peek_length(5)
    assert sf.next_length(5) == peeked
    assert sf.line == 2


def test_negative_length_rejected():
    sf = StringFeeder("abc")
    with pytest.raises(ValueError):
        sf.peek_length(-1)
    with pytest.raises(ValueError):
        sf.next_length(-1)


def test_starts_with():
    sf = StringFeeder("keyword rest")
    assert sf.starts_with("key")
    assert sf.starts_with("")
    assert not sf.starts_with("rest")
    sf.next_length(8)
    assert sf.starts_with("rest")
    assert not sf.starts_with("rest and more")


def test_require_consumes_matching_text():
    sf = StringFeeder("BEGIN body")
    sf.require("BEGIN")
    assert sf.peek_length(5) == " body"
    assert sf.column == 5


def test_require_mismatch_raises():
    sf = StringFeeder("BEGIN")
    with pytest.raises(StringFeederError):
        sf.require("BEG!N")


def test_require_past_end_raises():
    sf = StringFeeder("ab")
    with pytest.raises(StringFeederError):
        sf.require("abc")