"""
File input and output for Text Processor.

This module reads text from plain text and HTML/XHTML files and writes
processed text to date-stamped download files.
"""

import datetime
from pathlib import Path
from typing import Optional, Union

from bs4 import BeautifulSoup


HTML_SUFFIXES = ('.html', '.htm', '.xhtml')
DOWNLOAD_FILENAME_TEMPLATE = "text_processed_{date}.txt"


def download_filename(today: Optional[datetime.date] = None) -> str:
    """Default download name, e.g. text_processed_2024-03-07.txt."""
    if today is None:
        today = datetime.date.today()
    return DOWNLOAD_FILENAME_TEMPLATE.format(date=today.strftime("%Y-%m-%d"))


def html_to_text(markup: str) -> str:
    """Extract the visible text of an HTML document, one block per line."""
    soup = BeautifulSoup(markup, 'html.parser')
    for element in soup(['script', 'style']):
        element.decompose()
    return soup.get_text('\n').strip()


def read_text_file(path: Union[str, Path]) -> str:
    """
    Read a file for editing.

    HTML and XHTML files are reduced to their visible text; everything else
    is read as UTF-8 plain text.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        content = f.read()

    if path.suffix.lower() in HTML_SUFFIXES:
        return html_to_text(content)
    return content


def write_text_file(path: Union[str, Path], text: str) -> Path:
    """
    Write text to a UTF-8 file, returning the written path.

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(path)
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(text)
    return path
