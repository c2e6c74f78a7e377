"""
Case conversion processors for Text Processor.

This module provides upper, lower, title and sentence case conversion.
Title case finds words with ASCII regex semantics, so letters after an
apostrophe start a new word ("o'brien" -> "O'Brien"). Sentence case
capitalizes an ASCII word character at the start of the text or after a
period and any run of Unicode whitespace.
"""

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..context import TextProcessorContext


CASE_KINDS = ('upper', 'lower', 'title', 'sentence')

TITLE_PATTERN = re.compile(r'\b\w', re.ASCII)
# Any Unicode whitespace may follow the period; only ASCII word characters start a sentence
SENTENCE_PATTERN = re.compile(r'(^[A-Za-z0-9_]|\.\s+[A-Za-z0-9_])')


def _upper_match(match: 're.Match') -> str:
    return match.group(0).upper()


def apply_case(text: str, kind: str) -> str:
    """
    Convert the case of a text.

    Args:
        text: Text to convert
        kind: One of 'upper', 'lower', 'title', 'sentence'

    Returns:
        The converted text

    Raises:
        ValueError: If kind is not a supported case kind
    """
    if kind == 'upper':
        return text.upper()
    if kind == 'lower':
        return text.lower()
    if kind == 'title':
        return TITLE_PATTERN.sub(_upper_match, text.lower())
    if kind == 'sentence':
        return SENTENCE_PATTERN.sub(_upper_match, text.lower())
    raise ValueError(f"Unknown case kind '{kind}', expected one of {CASE_KINDS}")


def convert_case(ctx: 'TextProcessorContext', kind: str) -> 'TextProcessorContext':
    """
    Converts the context text to the requested case.

    Args:
        ctx: TextProcessorContext object containing text
        kind: One of 'upper', 'lower', 'title', 'sentence'

    Returns:
        Updated TextProcessorContext with converted text
    """
    from ..logging import log_message

    log_message(f"Starting converting to {kind} case.")
    original_text = ctx.text
    ctx.text = apply_case(ctx.text, kind)

    ctx.log_change(f'case_{kind}',
                   f"Converted text to {kind} case",
                   len(original_text), len(ctx.text))

    log_message(f"Finished converting to {kind} case.")
    return ctx
