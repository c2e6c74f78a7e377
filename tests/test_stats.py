import pytest

from textprocessor.stats import StatisticsRecord, compute_statistics, format_reading_time


def test_empty_text_is_all_zero():
    assert compute_statistics("") == StatisticsRecord(0, 0, 0, 0, 0, 0)


def test_whitespace_only_text_counts_only_raw_characters():
    stats = compute_statistics("  \n\t ")
    assert stats.word_count == 0
    assert stats.sentence_count == 0
    assert stats.paragraph_count == 0
    assert stats.char_count == 5
    assert stats.char_count_no_spaces == 0
    assert stats.reading_time_minutes == 0


def test_word_count_splits_on_any_whitespace_run():
    assert compute_statistics("Hello   world\n\nFoo").word_count == 3
    assert compute_statistics("\tone\t two  \n three ").word_count == 3


@pytest.mark.parametrize("text", ["", "a b", " tab\there \n", "x\u00a0y\r\nz"])
def test_char_count_is_no_spaces_plus_whitespace(text):
    stats = compute_statistics(text)
    whitespace = sum(1 for ch in text if ch.isspace())
    assert stats.char_count == len(text)
    assert stats.char_count == stats.char_count_no_spaces + whitespace


def test_sentence_count_uses_terminator_runs():
    assert compute_statistics("Hi! Bye? OK.").sentence_count == 3
    assert compute_statistics("Wait... what?!").sentence_count == 2
    assert compute_statistics("No terminator here").sentence_count == 1


def test_punctuation_only_text_has_no_sentences():
    assert compute_statistics("...").sentence_count == 0
    assert compute_statistics("?! .").sentence_count == 0


def test_paragraphs_are_separated_by_blank_lines():
    text = "First para\nstill first\n\nSecond\n \t \nThird\n\n\n"
    assert compute_statistics(text).paragraph_count == 3
    assert compute_statistics("single line").paragraph_count == 1


def test_reading_time_uses_ceiling_division():
    assert compute_statistics(" ".join(["w"] * 401)).reading_time_minutes == 3
    assert compute_statistics(" ".join(["w"] * 400)).reading_time_minutes == 2
    assert compute_statistics("one").reading_time_minutes == 1


def test_reading_time_respects_words_per_minute():
    text = " ".join(["w"] * 250)
    assert compute_statistics(text, words_per_minute=100).reading_time_minutes == 3
    assert compute_statistics(text, words_per_minute=1000).reading_time_minutes == 1


def test_invalid_words_per_minute_is_rejected():
    with pytest.raises(ValueError):
        compute_statistics("text", words_per_minute=0)


def test_reading_time_display():
    # zero words are shown as "0 min" rather than being rounded up
    assert format_reading_time(0) == "0 min"
    assert format_reading_time(1) == "1 min"
    assert format_reading_time(12) == "12 min"
