"""
Duplicate line removal processor for Text Processor.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..context import TextProcessorContext


@dataclass(frozen=True)
class DedupResult:
    """Deduplicated text and the number of lines dropped."""
    text: str
    removed_count: int


def deduplicate_lines(text: str) -> DedupResult:
    """
    Keeps only the first occurrence of each line, preserving order.

    Lines are compared exactly, so lines differing only in case or trailing
    whitespace are distinct.
    """
    lines = text.split('\n')
    unique_lines = list(dict.fromkeys(lines))
    return DedupResult('\n'.join(unique_lines), len(lines) - len(unique_lines))


def remove_duplicate_lines(ctx: 'TextProcessorContext') -> 'TextProcessorContext':
    """
    Removes duplicate lines from the context text.

    Args:
        ctx: TextProcessorContext object containing text

    Returns:
        Updated TextProcessorContext with duplicates removed and
        removed_duplicates set to the number of dropped lines
    """
    from ..logging import log_message

    log_message("Removing duplicate lines...")
    original_text = ctx.text
    result = deduplicate_lines(ctx.text)
    ctx.text = result.text
    ctx.removed_duplicates = result.removed_count

    ctx.log_change('remove_duplicates',
                   f"Removed {result.removed_count} duplicate lines",
                   len(original_text), len(ctx.text))

    log_message("Duplicate line removal complete.")
    return ctx
