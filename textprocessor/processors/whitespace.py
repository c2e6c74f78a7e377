"""
Whitespace cleanup processor for Text Processor.

This module collapses runs of spaces and tabs, limits consecutive blank
lines to one, and trims the whole text.
"""

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..context import TextProcessorContext


SPACE_RUN_PATTERN = re.compile(r'[ \t]+')
BLANK_LINE_RUN_PATTERN = re.compile(r'\n\s*\n\s*\n')


def clean_whitespace(text: str) -> str:
    """
    Removes extra spaces, tabs and line breaks from a text.

    Runs of spaces/tabs become a single space, three or more line breaks
    (with any whitespace between them) become exactly two, and leading and
    trailing whitespace is stripped.
    """
    cleaned = SPACE_RUN_PATTERN.sub(' ', text)
    cleaned = BLANK_LINE_RUN_PATTERN.sub('\n\n', cleaned)
    return cleaned.strip()


def remove_extra_spaces(ctx: 'TextProcessorContext') -> 'TextProcessorContext':
    """
    Removes extra whitespace from the context text.

    Args:
        ctx: TextProcessorContext object containing text

    Returns:
        Updated TextProcessorContext with whitespace normalized
    """
    from ..logging import log_message

    log_message("Removing extra whitespace...")
    original_text = ctx.text
    ctx.text = clean_whitespace(ctx.text)

    ctx.log_change('clean_whitespace',
                   f"Removed {len(original_text) - len(ctx.text)} whitespace characters",
                   len(original_text), len(ctx.text))

    log_message("Whitespace cleanup complete.")
    return ctx
