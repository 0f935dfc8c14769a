import pytest

from aprilcommon import strutil


def test_sprintf_formats_like_printf():
    assert strutil.sprintf("%d-%s", 7, "x") == "7-x"
    assert strutil.sprintf("plain") == "plain"


def test_concat_joins_all():
    assert strutil.concat("a", "bc", "", "d") == "abcd"
    assert strutil.concat("only") == "only"


def test_diff_index_invariants():
    assert strutil.diff_index("haystack", "haystack") == len("haystack")
    assert strutil.diff_index("hay", "haystack") == len("hay")
    i = strutil.diff_index("string", "strung")
    assert "string"[:i] == "strung"[:i]
    assert "string"[i] != "strung"[i]


def test_split_documented_example():
    assert strutil.split("this is a haystack", " ") == ["this", "is", "a", "haystack"]


def test_split_drops_empty_parts():
    assert strutil.split("  a  b ", " ") == ["a", "b"]
    assert strutil.split(",,,", ",") == []
    assert strutil.split("a::b", "::") == ["a", "b"]


def test_split_empty_delimiter_keeps_whole_string():
    assert strutil.split("abc", "") == ["abc"]
    assert strutil.split("", "") == []


def test_split_spaces_only_spaces():
    assert strutil.split_spaces("  this is\ta ") == ["this", "is\ta"]
    assert strutil.split_spaces("    ") == []


def test_strcaseeq():
    assert strutil.strcaseeq("HayStack", "hAYsTACK")
    assert not strutil.strcaseeq("hay", "haystack")
    assert not strutil.strcaseeq("a1", "a2")


def test_strip_functions():
    text = " \t string \n"
    assert strutil.trim(text) == "string"
    assert strutil.lstrip(text) == "string \n"
    assert strutil.rstrip(text) == " \t string"
    assert strutil.trim("   ") == ""


def test_starts_and_ends_with():
    assert strutil.starts_with("string", "str")
    assert strutil.starts_with("string", "")
    assert not strutil.starts_with("str", "string")
    assert strutil.ends_with("string", "ing")
    assert strutil.ends_with("string", "")
    assert not strutil.ends_with("ing", "string")


def test_starts_with_any_and_matches_any():
    assert strutil.starts_with_any("string", ["foo", "st"])
    assert not strutil.starts_with_any("string", ["foo", "bar"])
    assert not strutil.starts_with_any("string", [])
    assert strutil.matches_any("string", ["str", "string"])
    assert not strutil.matches_any("string", ["str", "strings"])


def test_substring_documented_examples():
    assert strutil.substring("string", 1, 3) == "tr"
    assert strutil.substring("string", 2, -1) == "ring"
    assert strutil.substring("string", 3, 3) == ""


def test_substring_rejects_bad_bounds():
    with pytest.raises(ValueError):
        strutil.substring("string", 3, 2)
    with pytest.raises(ValueError):
        strutil.substring("string", 10, -1)
    with pytest.raises(ValueError):
        strutil.substring("string", 0, 20)


def test_index_of_and_last_index_of():
    hay = "singing"
    first = strutil.index_of(hay, "ing")
    last = strutil.last_index_of(hay, "ing")
    assert hay[first : first + 3] == "ing"
    assert hay[last : last + 3] == "ing"
    assert first < last
    assert "ing" not in hay[:first + 2]
    assert strutil.index_of(hay, "xyz") == -1
    assert strutil.last_index_of(hay, "xyz") == -1
    assert strutil.index_of("ab", "abc") == -1
    assert strutil.last_index_of("ab", "abc") == -1


def test_contains():
    assert strutil.contains("haystack", "st")
    assert not strutil.contains("haystack", "needle")


def test_case_conversion_ascii_only():
    assert strutil.to_lower("HayStack 42") == "haystack 42"
    assert strutil.to_upper("HayStack 42") == "HAYSTACK 42"
    assert strutil.to_upper("é") == "é"


def test_replace_documented_examples():
    assert strutil.replace("string", "ri", "u") == "stung"
    assert strutil.replace("singing", "ing", "") == "s"
    assert strutil.replace("string", "foo", "bar") == "string"


def test_replace_empty_needle():
    assert strutil.replace("", "", "bar") == "bar"
    assert strutil.replace("string", "", "bar") == "string"


def test_replace_many_applies_in_order():
    assert strutil.replace_many("string", "ri", "u", "u", "o") == "stong"
    assert strutil.replace_many("string") == "string"
    with pytest.raises(ValueError):
        strutil.replace_many("string", "ri")


def test_expand_envs(monkeypatch):
    monkeypatch.setenv("APRILCOMMON_TEST_DIR", "/home/user")
    monkeypatch.delenv("APRILCOMMON_UNSET_VAR", raising=False)
    assert strutil.expand_envs("$APRILCOMMON_TEST_DIR/abc") == "/home/user/abc"
    assert strutil.expand_envs("x$APRILCOMMON_UNSET_VAR/y") == "x/y"
    assert strutil.expand_envs("no variables") == "no variables"
    assert strutil.expand_envs("") == ""