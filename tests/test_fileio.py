import datetime

from textprocessor.fileio import download_filename, read_text_file, write_text_file


def test_download_filename_is_date_stamped():
    assert download_filename(datetime.date(2025, 1, 9)) == "text_processed_2025-01-09.txt"


def test_download_filename_defaults_to_today():
    assert download_filename() == f"text_processed_{datetime.date.today():%Y-%m-%d}.txt"


def test_write_and_read_plain_text_preserves_newlines(tmp_path):
    path = write_text_file(tmp_path / "notes.txt", "line one\r\nline two\n")
    assert read_text_file(path) == "line one\nline two\n"
    assert path.read_bytes() == b"line one\r\nline two\n"


def test_html_files_are_reduced_to_visible_text(tmp_path):
    html = tmp_path / "chapter.xhtml"
    html.write_text(
        "<html><head><style>p {color: red}</style></head>"
        "<body><h1>Title</h1><p>First paragraph.</p><script>var x;</script></body></html>",
        encoding="utf-8",
    )
    text = read_text_file(html)
    assert "Title" in text
    assert "First paragraph." in text
    assert "color" not in text
    assert "var x" not in text
