"""
Text statistics for Text Processor.

This module computes word, character, sentence and paragraph counts plus an
estimated reading time from a text snapshot. Tokenization is a simple
delimiter heuristic shared with the transformation processors, not a
linguistic segmenter.
"""

import re
from dataclasses import dataclass


WORD_SPLIT_PATTERN = re.compile(r'\s+')
WHITESPACE_PATTERN = re.compile(r'\s')
SENTENCE_SPLIT_PATTERN = re.compile(r'[.!?]+')
PARAGRAPH_SPLIT_PATTERN = re.compile(r'\n\s*\n')


@dataclass(frozen=True)
class StatisticsRecord:
    """Counts derived from a single text snapshot."""
    word_count: int = 0
    char_count: int = 0
    char_count_no_spaces: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0
    reading_time_minutes: int = 0


def _count_segments(pattern: 're.Pattern', text: str) -> int:
    return sum(1 for segment in pattern.split(text) if segment.strip())


def compute_statistics(text: str, words_per_minute: int = 200) -> StatisticsRecord:
    """
    Compute the full statistics record for a text.

    Words, sentences and paragraphs are counted on the trimmed text; the two
    character counts use the raw text. An empty or all-whitespace text yields
    zero for every count except the raw character count.

    Args:
        text: The text to analyse
        words_per_minute: Reading speed used for the reading time estimate

    Returns:
        StatisticsRecord for the given text

    Raises:
        ValueError: If words_per_minute is less than 1
    """
    if words_per_minute < 1:
        raise ValueError(f"words_per_minute must be at least 1, got {words_per_minute}")

    trimmed = text.strip()

    if trimmed:
        word_count = sum(1 for word in WORD_SPLIT_PATTERN.split(trimmed) if word)
        sentence_count = _count_segments(SENTENCE_SPLIT_PATTERN, trimmed)
        paragraph_count = _count_segments(PARAGRAPH_SPLIT_PATTERN, trimmed)
    else:
        word_count = sentence_count = paragraph_count = 0

    return StatisticsRecord(
        word_count=word_count,
        char_count=len(text),
        char_count_no_spaces=len(WHITESPACE_PATTERN.sub('', text)),
        sentence_count=sentence_count,
        paragraph_count=paragraph_count,
        reading_time_minutes=-(-word_count // words_per_minute),
    )


def format_reading_time(minutes: int) -> str:
    """Render a reading time for display, e.g. '0 min' or '3 min'."""
    return f"{minutes} min"
