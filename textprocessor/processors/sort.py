"""
Line sorting processor for Text Processor.

This module sorts lines with a natural ordering: digit runs compare by
numeric value ("item2" < "item10") and the remaining text compares
case-insensitively with accents ignored. Punctuation and whitespace sort
before symbols, symbols before numbers, and numbers before letters.
"""

import re
import unicodedata
from typing import TYPE_CHECKING, List, Tuple, Union

if TYPE_CHECKING:
    from ..context import TextProcessorContext


SORT_ORDERS = ('ascending', 'descending')

DIGIT_RUN_PATTERN = re.compile(r'(\d+)')

# Token ranks
PUNCTUATION_RANK = 0
SYMBOL_RANK = 1
NUMBER_RANK = 2
LETTER_RANK = 3

SortToken = Tuple[int, Union[str, Tuple[int, str]]]


def _fold(chunk: str) -> str:
    """Case-fold a chunk and strip combining marks."""
    decomposed = unicodedata.normalize('NFKD', chunk.casefold())
    return ''.join(ch for ch in decomposed if not unicodedata.combining(ch))


def _number_value(digits: str) -> Tuple[int, str]:
    """
    Compare a digit run by value without converting it to int.

    After dropping leading zeros a shorter run is a smaller number, and runs
    of equal length compare as strings.
    """
    ascii_digits = ''.join(str(unicodedata.decimal(ch)) for ch in digits)
    stripped = ascii_digits.lstrip('0') or '0'
    return len(stripped), stripped


def _char_rank(ch: str) -> int:
    category = unicodedata.category(ch)
    if category[0] in 'PZC':
        return PUNCTUATION_RANK
    if category[0] == 'S':
        return SYMBOL_RANK
    return LETTER_RANK


def natural_sort_key(line: str) -> List[SortToken]:
    """
    Build a comparison key of ranked tokens.

    Every token is (rank, value); tokens of the same rank carry values of
    the same type, so keys of any two lines stay comparable.
    """
    key: List[SortToken] = []
    for i, chunk in enumerate(DIGIT_RUN_PATTERN.split(_fold(line))):
        if i % 2:
            key.append((NUMBER_RANK, _number_value(chunk)))
        else:
            key.extend((_char_rank(ch), ch) for ch in chunk)
    return key


def sort_lines(text: str, order: str) -> str:
    """
    Sort the lines of a text, keeping equal lines in their original order.

    Args:
        text: Text whose lines are sorted
        order: 'ascending' or 'descending'

    Returns:
        Text with lines sorted and rejoined with newlines

    Raises:
        ValueError: If order is not a supported sort order
    """
    if order not in SORT_ORDERS:
        raise ValueError(f"Unknown sort order '{order}', expected one of {SORT_ORDERS}")

    lines = text.split('\n')
    # sorted() stays stable with reverse=True
    sorted_lines = sorted(lines, key=natural_sort_key, reverse=(order == 'descending'))
    return '\n'.join(sorted_lines)


def sort_content(ctx: 'TextProcessorContext', order: str) -> 'TextProcessorContext':
    """
    Sorts the lines of the context text.

    Args:
        ctx: TextProcessorContext object containing text
        order: 'ascending' or 'descending'

    Returns:
        Updated TextProcessorContext with sorted lines
    """
    from ..logging import log_message

    log_message(f"Sorting lines {order}.")
    ctx.text = sort_lines(ctx.text, order)
    line_count = len(ctx.text.split('\n'))
    ctx.log_change(f'sort_{order}', f"Sorted {line_count} lines {order}")
    return ctx
