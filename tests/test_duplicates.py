from textprocessor.context import TextProcessorContext
from textprocessor.processors.duplicates import DedupResult, deduplicate_lines, remove_duplicate_lines


def test_keeps_first_occurrence_in_order():
    assert deduplicate_lines("a\nb\na\nc\nb") == DedupResult("a\nb\nc", 2)


def test_lines_are_compared_exactly():
    result = deduplicate_lines("A\na\na \na")
    assert result.text == "A\na\na "
    assert result.removed_count == 1


def test_repeated_empty_lines_are_deduplicated():
    assert deduplicate_lines("x\n\n\ny\n") == DedupResult("x\n\ny", 2)


def test_empty_text():
    assert deduplicate_lines("") == DedupResult("", 0)


def test_processor_records_removed_count():
    ctx = remove_duplicate_lines(TextProcessorContext(text="1\n1\n1"))
    assert ctx.text == "1"
    assert ctx.removed_duplicates == 2
