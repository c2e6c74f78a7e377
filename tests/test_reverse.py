import pytest

from textprocessor.processors.reverse import reverse_text


def test_reverse_letters():
    assert reverse_text("abc def", "letters") == "fed cba"


@pytest.mark.parametrize("text", ["", "a", "hello world\nline two", "emoji 🙂 ok"])
def test_reverse_letters_twice_is_identity(text):
    assert reverse_text(reverse_text(text, "letters"), "letters") == text


def test_reverse_words_on_single_spaces():
    assert reverse_text("one two three", "words") == "three two one"


def test_reverse_words_keeps_empty_tokens_from_space_runs():
    assert reverse_text("a  b", "words") == "b  a"
    assert reverse_text("a   b c", "words") == "c b   a"


def test_reverse_words_does_not_split_on_newlines():
    assert reverse_text("a b\nc d", "words") == "d b\nc a"


def test_reverse_lines():
    assert reverse_text("1\n2\n3", "lines") == "3\n2\n1"
    assert reverse_text("1\n2\n", "lines") == "\n2\n1"


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        reverse_text("text", "sentences")
