"""
Text reversal processors for Text Processor.

Word reversal splits on single spaces only: consecutive spaces produce empty
tokens which keep their positions in the reversed output.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..context import TextProcessorContext


REVERSE_KINDS = ('letters', 'words', 'lines')


def reverse_text(text: str, kind: str) -> str:
    """
    Reverse a text by letters, words or lines.

    Raises:
        ValueError: If kind is not a supported reversal kind
    """
    if kind == 'letters':
        return text[::-1]
    if kind == 'words':
        return ' '.join(reversed(text.split(' ')))
    if kind == 'lines':
        return '\n'.join(reversed(text.split('\n')))
    raise ValueError(f"Unknown reverse kind '{kind}', expected one of {REVERSE_KINDS}")


def reverse_content(ctx: 'TextProcessorContext', kind: str) -> 'TextProcessorContext':
    """Reverses the context text by the given kind."""
    from ..logging import log_message

    log_message(f"Reversing text by {kind}.")
    ctx.text = reverse_text(ctx.text, kind)
    ctx.log_change(f'reverse_{kind}', f"Reversed text by {kind}")
    return ctx
