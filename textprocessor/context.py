"""
Context and state management for Text Processor.

This module contains the TextProcessorContext dataclass that holds the
shell-owned state (current text, theme, configuration) and the
ProcessingStep type used by the command catalog.
"""

import datetime
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Any, Callable


LIGHT_THEME = "light"
DARK_THEME = "dark"

DEFAULT_WORDS_PER_MINUTE = 200
DEFAULT_AUTOSAVE_DELAY_MS = 1000
DEFAULT_NOTIFICATION_MS = 3000


@dataclass
class TextProcessorContext:
    """Central state object owned by the shell."""
    text: str = ""
    theme: str = LIGHT_THEME

    # Configuration data
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
    autosave_delay_ms: int = DEFAULT_AUTOSAVE_DELAY_MS
    notification_ms: int = DEFAULT_NOTIFICATION_MS
    default_file_directory: Optional[Path] = None

    # Side output of the last duplicate-line removal
    removed_duplicates: int = 0

    # Processing state
    processing_log: List[Dict[str, Any]] = field(default_factory=list)

    def log_change(self, step: str, description: str, before_length: int = None, after_length: int = None):
        """Log a processing step change."""
        self.processing_log.append({
            'step': step,
            'description': description,
            'before_length': len(self.text) if before_length is None else before_length,
            'after_length': len(self.text) if after_length is None else after_length,
            'timestamp': datetime.datetime.now()
        })

    def get_processing_summary(self) -> str:
        """Get a summary of all processing steps performed."""
        if not self.processing_log:
            return "No processing steps completed."

        summary = "Processing Summary:\n"
        for i, log_entry in enumerate(self.processing_log, 1):
            summary += f"{i}. {log_entry['step']}: {log_entry['description']}\n"
        return summary


@dataclass
class ProcessingStep:
    """Represents a single user command in the catalog."""
    name: str
    processor: Callable
    description: str
    group: str
    success_message: str
