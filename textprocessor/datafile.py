"""
Data file handling for Text Processor.

This module provides functionality for loading and saving configuration data
from the .data.txt file: reading speed, autosave and notification timings,
the default theme and the default download directory.
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .context import TextProcessorContext


# Data file constants
DATA_FILE_NAME = ".data.txt"
WPM_SECTION_MARKER = "# WORDS_PER_MINUTE"
AUTOSAVE_SECTION_MARKER = "# AUTOSAVE_DELAY_MS"
NOTIFICATION_SECTION_MARKER = "# NOTIFICATION_MS"
THEME_SECTION_MARKER = "# DEFAULT_THEME"
DEFAULT_DIR_SECTION_MARKER = "# DEFAULT_FILE_DIR"

SECTION_NAMES = {
    WPM_SECTION_MARKER: 'words_per_minute',
    AUTOSAVE_SECTION_MARKER: 'autosave_delay_ms',
    NOTIFICATION_SECTION_MARKER: 'notification_ms',
    THEME_SECTION_MARKER: 'theme',
    DEFAULT_DIR_SECTION_MARKER: 'default_dir',
}

# Sections whose single value is a positive integer
INTEGER_SECTIONS = {'words_per_minute', 'autosave_delay_ms', 'notification_ms'}


def default_data_file_path() -> str:
    """Location of .data.txt, next to the textprocessor package directory."""
    script_dir = os.path.dirname(os.path.abspath(__file__))
    parent_dir = os.path.dirname(script_dir)
    return os.path.join(parent_dir, DATA_FILE_NAME)


def _apply_setting(ctx: 'TextProcessorContext', section: str, value: str):
    from .context import LIGHT_THEME, DARK_THEME
    from .logging import log_message

    if section in INTEGER_SECTIONS:
        try:
            number = int(value)
        except ValueError:
            log_message(f"Skipping non-integer value for {section}: '{value}'", level="WARNING")
            return
        if number < 1:
            log_message(f"Skipping non-positive value for {section}: {number}", level="WARNING")
            return
        setattr(ctx, section, number)
        log_message(f"DEBUG: Loaded {section} = {number}", level="DEBUG")

    elif section == 'theme':
        theme = value.lower()
        if theme in (LIGHT_THEME, DARK_THEME):
            ctx.theme = theme
        else:
            log_message(f"Skipping unknown theme '{value}'", level="WARNING")

    elif section == 'default_dir':
        potential_path = Path(value).expanduser()
        if potential_path.is_dir():
            ctx.default_file_directory = potential_path
            log_message(f"Loaded default file directory: {ctx.default_file_directory}")
        else:
            log_message(f"Invalid default directory path in file: '{value}'", level="WARNING")


def load_data_file(ctx: 'TextProcessorContext' = None,
                   data_file_path: Optional[str] = None) -> 'TextProcessorContext':
    """
    Loads configuration by parsing the .data.txt file based on # SECTION markers.

    Each section holds a single value on the first non-empty, non-comment
    line after its marker; later lines in the same section are ignored.
    Missing or malformed values leave the context defaults in place.

    Args:
        ctx: Optional TextProcessorContext to populate, creates new one if None
        data_file_path: Optional explicit path, defaults to .data.txt beside the package

    Returns:
        TextProcessorContext populated with data from the .data.txt file
    """
    from .context import TextProcessorContext
    from .logging import log_message

    if ctx is None:
        ctx = TextProcessorContext()

    if data_file_path is None:
        data_file_path = default_data_file_path()

    log_message(f"Attempting to load data file: {data_file_path}")

    if not os.path.exists(data_file_path):
        log_message(f"Data file '{DATA_FILE_NAME}' not found. Using default settings.", level="WARNING")
        return ctx

    try:
        with open(data_file_path, 'r', encoding='utf-8') as f:
            lines = f.readlines()
    except OSError as e:
        log_message(f"Error loading data file '{data_file_path}': {e}. Using default settings.", level="ERROR")
        return ctx

    current_section = None
    seen_sections = set()

    for line in lines:
        # strip out any leading BOM / ZERO-WIDTH chars
        stripped_line = line.strip().lstrip('\ufeff\u200b\u00A0')

        if stripped_line in SECTION_NAMES:
            current_section = SECTION_NAMES[stripped_line]
            continue

        if not current_section or not stripped_line or stripped_line.startswith('#'):
            continue

        if current_section in seen_sections:
            log_message(f"Ignoring extra value in section '{current_section}': '{stripped_line}'", level="WARNING")
            continue

        seen_sections.add(current_section)
        _apply_setting(ctx, current_section, stripped_line)

    log_message(f"Loaded settings: wpm={ctx.words_per_minute}, autosave={ctx.autosave_delay_ms}ms, "
                f"notification={ctx.notification_ms}ms, theme={ctx.theme}")
    return ctx


def save_default_directory_to_data_file(directory_path: str, data_file_path: Optional[str] = None):
    """
    Saves the given directory path to the # DEFAULT_FILE_DIR section in .data.txt.

    Other sections are preserved as written.

    Args:
        directory_path: Path to save as default directory
        data_file_path: Optional explicit path, defaults to .data.txt beside the package
    """
    from .logging import log_message

    if data_file_path is None:
        data_file_path = default_data_file_path()

    log_message(f"Attempting to save default directory '{directory_path}' to data file: {data_file_path}")

    original_lines = []
    if os.path.exists(data_file_path):
        try:
            with open(data_file_path, 'r', encoding='utf-8') as f:
                original_lines = f.readlines()
        except OSError as e:
            log_message(f"Could not read existing data file '{data_file_path}': {e}. "
                        f"Will write only the default directory section.", level="WARNING")
            original_lines = []

    new_lines = []
    in_default_dir_section = False
    default_dir_section_handled = False

    for line in original_lines:
        stripped_line = line.strip()

        if stripped_line in SECTION_NAMES:
            in_default_dir_section = stripped_line == DEFAULT_DIR_SECTION_MARKER
            new_lines.append(line)
            if in_default_dir_section:
                new_lines.append(str(directory_path) + '\n')
                default_dir_section_handled = True
            continue

        # Drop the previous value of the default directory section
        if in_default_dir_section and stripped_line and not stripped_line.startswith('#'):
            continue

        new_lines.append(line)

    if not default_dir_section_handled:
        if new_lines and new_lines[-1].strip() != '':
            new_lines.append('\n')
        new_lines.append(DEFAULT_DIR_SECTION_MARKER + '\n')
        new_lines.append(str(directory_path) + '\n')

    try:
        Path(data_file_path).parent.mkdir(parents=True, exist_ok=True)
        with open(data_file_path, 'w', encoding='utf-8') as f:
            f.writelines(new_lines)
        log_message(f"Default directory '{directory_path}' saved to '{DATA_FILE_NAME}'.")
    except OSError as e:
        log_message(f"Error saving default directory to data file '{data_file_path}': {e}", level="ERROR")
