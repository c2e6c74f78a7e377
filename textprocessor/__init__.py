"""
Text Processor - A desktop text manipulation and statistics tool.

This package provides pure text transformations (case conversion, whitespace
cleanup, line deduplication, reversal, natural line sorting) and live text
statistics, together with a PyQt5 shell for interactive editing.
"""

from .stats import StatisticsRecord, compute_statistics, format_reading_time
from .processors.case import apply_case
from .processors.whitespace import clean_whitespace
from .processors.duplicates import DedupResult, deduplicate_lines
from .processors.reverse import reverse_text
from .processors.sort import sort_lines

__version__ = "1.0.0"
__author__ = "Text Processor Development Team"

__all__ = [
    "StatisticsRecord",
    "compute_statistics",
    "format_reading_time",
    "apply_case",
    "clean_whitespace",
    "DedupResult",
    "deduplicate_lines",
    "reverse_text",
    "sort_lines",
]
