"""
Session controller for Text Processor.

This module holds the shell policy that sits between the GUI and the pure
text functions: it refuses to operate on empty text, produces user
notifications, persists text and theme, and handles clipboard, download
and clear actions. It has no Qt dependency; the GUI wires its widgets in
through callbacks.
"""

import datetime
from pathlib import Path
from typing import Any, Callable, Optional, Union

from .context import TextProcessorContext, LIGHT_THEME, DARK_THEME
from .logging import log_message
from .pipeline import run_command as run_pipeline_command
from .stats import StatisticsRecord, compute_statistics
from .fileio import download_filename, write_text_file


# Persistence keys
TEXT_STORE_KEY = "textProcessorContent"
THEME_STORE_KEY = "textProcessorTheme"

# Notification kinds
SUCCESS = "success"
WARNING = "warning"
ERROR = "error"

EMPTY_TEXT_MESSAGE = "Please enter some text first!"


class TextProcessorSession:
    """
    Owns the current text and theme for one interactive session.

    The store is any mapping-like object offering ``get(key)`` and item
    assignment; a plain dict works, the GUI passes a QSettings adapter.
    """

    def __init__(self, ctx: Optional[TextProcessorContext] = None, store: Optional[Any] = None):
        self.ctx = ctx if ctx is not None else TextProcessorContext()
        self.store = store if store is not None else {}

        # GUI callbacks - set by the GUI framework
        self.notification_callback: Optional[Callable[[str, str], None]] = None
        self.text_update_callback: Optional[Callable[[str], None]] = None
        self.stats_callback: Optional[Callable[[StatisticsRecord], None]] = None
        self.theme_callback: Optional[Callable[[str], None]] = None
        self.clipboard_callback: Optional[Callable[[str], None]] = None

    @property
    def text(self) -> str:
        return self.ctx.text

    def has_text(self) -> bool:
        return bool(self.ctx.text.strip())

    def notify(self, message: str, kind: str = SUCCESS):
        level = {WARNING: "WARNING", ERROR: "ERROR"}.get(kind, "INFO")
        log_message(f"Notification ({kind}): {message}", level=level)
        if self.notification_callback:
            self.notification_callback(message, kind)

    def set_text(self, text: str):
        """Replace the current text (e.g. after user typing) and refresh stats."""
        self.ctx.text = text
        self.refresh_stats()

    def refresh_stats(self) -> StatisticsRecord:
        record = compute_statistics(self.ctx.text, self.ctx.words_per_minute)
        if self.stats_callback:
            self.stats_callback(record)
        return record

    def _publish_text(self):
        if self.text_update_callback:
            self.text_update_callback(self.ctx.text)
        self.refresh_stats()

    def run_command(self, name: str) -> bool:
        """
        Apply a catalog command to the current text.

        Returns:
            True if the command ran, False if the text was empty
        """
        if not self.has_text():
            self.notify(EMPTY_TEXT_MESSAGE, WARNING)
            return False

        self.ctx, message = run_pipeline_command(self.ctx, name)
        self._publish_text()
        self.notify(message, SUCCESS)
        return True

    def history(self) -> str:
        """Summary of the commands applied so far in this session."""
        summary = self.ctx.get_processing_summary()
        log_message(summary)
        return summary

    def copy_text(self) -> bool:
        """Copy the current text through the clipboard callback."""
        if not self.has_text():
            self.notify("No text to copy!", WARNING)
            return False

        try:
            if self.clipboard_callback is None:
                raise RuntimeError("clipboard is not available")
            self.clipboard_callback(self.ctx.text)
        except Exception as e:
            log_message(f"Clipboard error: {e}", level="ERROR")
            self.notify("Could not copy text to clipboard!", ERROR)
            return False

        self.notify("Text copied to clipboard!", SUCCESS)
        return True

    def download_text(self, directory: Union[str, Path],
                      today: Optional[datetime.date] = None) -> Optional[Path]:
        """
        Write the current text to a date-stamped file in a directory.

        Returns:
            The written path, or None if nothing was written
        """
        return self.save_text_as(Path(directory) / download_filename(today))

    def save_text_as(self, path: Union[str, Path]) -> Optional[Path]:
        """Write the current text to an explicit path."""
        if not self.has_text():
            self.notify("No text to download!", WARNING)
            return None

        try:
            written = write_text_file(path, self.ctx.text)
        except OSError as e:
            log_message(f"Error saving file {path}: {e}", level="ERROR")
            self.notify(f"Could not save file: {e}", ERROR)
            return None

        log_message(f"Output saved to: {written}")
        self.notify("Text file downloaded!", SUCCESS)
        return written

    def clear_text(self, confirm: Callable[[], bool]) -> bool:
        """Clear the text if the user confirms."""
        if not confirm():
            return False

        self.ctx.text = ""
        self._publish_text()
        self.save_text()
        self.notify("Text cleared!", SUCCESS)
        return True

    def apply_theme(self, theme: str):
        if theme not in (LIGHT_THEME, DARK_THEME):
            raise ValueError(f"Unknown theme '{theme}'")
        self.ctx.theme = theme
        if self.theme_callback:
            self.theme_callback(theme)

    def toggle_theme(self) -> str:
        theme = DARK_THEME if self.ctx.theme == LIGHT_THEME else LIGHT_THEME
        self.apply_theme(theme)
        self.store[THEME_STORE_KEY] = theme
        self.notify(f"Switched to {theme} mode!", SUCCESS)
        return theme

    def save_text(self):
        """Persist the current text; the GUI calls this after typing goes idle."""
        self.store[TEXT_STORE_KEY] = self.ctx.text

    def restore(self):
        """Load the persisted theme and text, keeping defaults where nothing is stored."""
        saved_theme = self.store.get(THEME_STORE_KEY)
        if saved_theme and saved_theme not in (LIGHT_THEME, DARK_THEME):
            log_message(f"Ignoring stored theme '{saved_theme}'", level="WARNING")
            saved_theme = None
        self.apply_theme(saved_theme or self.ctx.theme)

        saved_text = self.store.get(TEXT_STORE_KEY)
        if saved_text:
            self.ctx.text = saved_text
            if self.text_update_callback:
                self.text_update_callback(saved_text)
        self.refresh_stats()
