from textprocessor.context import TextProcessorContext
from textprocessor.processors.whitespace import clean_whitespace, remove_extra_spaces


def test_collapses_spaces_tabs_and_blank_lines():
    assert clean_whitespace("a   b\t\tc\n\n\n\nd") == "a b c\n\nd"


def test_blank_lines_with_interleaved_whitespace_collapse_to_two():
    assert clean_whitespace("a\n \n\t\n  \nb") == "a\n\nb"


def test_single_blank_line_is_kept():
    assert clean_whitespace("a\n\nb") == "a\n\nb"


def test_trims_result():
    assert clean_whitespace("  \n padded \t ") == "padded"


def test_empty_text():
    assert clean_whitespace("") == ""


def test_remove_extra_spaces_processor():
    ctx = TextProcessorContext(text="a  b")
    ctx = remove_extra_spaces(ctx)
    assert ctx.text == "a b"
    assert ctx.processing_log[-1]["before_length"] == 4
    assert ctx.processing_log[-1]["after_length"] == 3
