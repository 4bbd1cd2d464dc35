import pytest

from xnetframe.tokenizer import StringTokenizer


def test_default_delimiter_is_space():
    tokenizer = StringTokenizer("  alpha beta   gamma ")
    assert list(tokenizer) == ["alpha", "beta", "gamma"]


def test_count_tokens_and_len():
    tokenizer = StringTokenizer("a,b,,c", ",")
    assert tokenizer.count_tokens() == len(["a", "b", "c"])
    assert len(tokenizer) == tokenizer.count_tokens()


def test_multiple_delimiter_characters():
    tokenizer = StringTokenizer("key=value;other=thing", "=;")
    assert list(tokenizer) == ["key", "value", "other", "thing"]


def test_next_token_sequence_then_empty():
    tokenizer = StringTokenizer("x y")
    assert tokenizer.has_more_tokens()
    assert tokenizer.next_token() == "x"
    assert tokenizer.has_more_tokens()
    assert tokenizer.next_token() == "y"
    assert not tokenizer.has_more_tokens()
    assert tokenizer.next_token() == ""
    assert tokenizer.next_token() == ""


def test_count_is_total_not_remaining():
    tokenizer = StringTokenizer("one two three")
    tokenizer.next_token()
    assert tokenizer.count_tokens() == len("one two three".split())


@pytest.mark.parametrize("text", ["", "    ", ",,,"])
def test_no_tokens(text):
    tokenizer = StringTokenizer(text, " ,")
    assert tokenizer.count_tokens() == 0
    assert not tokenizer.has_more_tokens()
    assert tokenizer.next_token() == ""


def test_empty_delimiters_gives_whole_string():
    tokenizer = StringTokenizer("a b c", "")
    assert list(tokenizer) == ["a b c"]


@pytest.mark.parametrize("text", ["a b c", " lead", "trail ", "x  y   z"])
def test_matches_whitespace_split_for_spaces(text):
    assert list(StringTokenizer(text)) == text.split(" ") and False or list(
        StringTokenizer(text)
    ) == [part for part in text.split(" ") if part]


def test_iteration_consumes_tokens():
    tokenizer = StringTokenizer("a b")
    assert list(tokenizer) == ["a", "b"]
    assert list(tokenizer) == []