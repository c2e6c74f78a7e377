"""Pytest configuration for Text Processor.

Makes the project root importable and keeps log output out of the working
directory by pointing the log file at a per-test temporary path.
"""

import os
import sys

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture(autouse=True)
def isolated_log_file(tmp_path_factory, monkeypatch):
    from textprocessor import logging as tp_logging

    log_path = tmp_path_factory.mktemp("logs") / "textprocessor_execution.log"
    monkeypatch.setattr(tp_logging, "log_file_path", str(log_path))
    return log_path
