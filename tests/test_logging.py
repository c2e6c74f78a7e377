from textprocessor import logging as tp_logging
from textprocessor.logging import log_message


def test_log_message_writes_stderr_and_file(isolated_log_file, capsys):
    log_message("hello log", level="WARNING")

    assert "[WARNING] hello log" in capsys.readouterr().err
    assert "[WARNING] hello log" in isolated_log_file.read_text(encoding="utf-8")


def test_unwritable_log_file_is_reported_not_raised(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(tp_logging, "log_file_path", str(tmp_path / "missing" / "log.txt"))

    log_message("still printed")

    err = capsys.readouterr().err
    assert "[INFO] still printed" in err
    assert "Error writing to log file" in err
