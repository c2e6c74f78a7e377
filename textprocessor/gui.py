"""
PyQt5 GUI interface for Text Processor.

This module provides the desktop window: a text editor with live statistics,
a command panel built from the command catalog, clipboard/download/clear
actions, a light/dark theme toggle and toast notifications.
"""

import sys
from pathlib import Path
from typing import Dict, List, Optional

try:
    from PyQt5.QtWidgets import (
        QApplication, QMainWindow, QVBoxLayout, QHBoxLayout, QWidget,
        QPushButton, QPlainTextEdit, QLabel, QFileDialog, QMessageBox,
        QGroupBox, QGridLayout, QShortcut
    )
    from PyQt5.QtCore import Qt, QTimer, QSettings
    from PyQt5.QtGui import QFont, QKeySequence
except ImportError:
    print("PyQt5 not installed. Please install with: pip install PyQt5")
    sys.exit(1)

from .context import TextProcessorContext, LIGHT_THEME
from .logging import log_message
from .datafile import load_data_file, save_default_directory_to_data_file
from .fileio import download_filename, read_text_file
from .pipeline import get_available_processors
from .session import TextProcessorSession, SUCCESS, WARNING, ERROR
from .stats import StatisticsRecord, format_reading_time


GROUP_TITLES = {
    'case': "Case Conversion",
    'cleanup': "Text Cleanup",
    'reverse': "Reverse Text",
    'sort': "Sort Lines",
}

NOTIFICATION_COLORS = {
    SUCCESS: "#28a745",
    WARNING: "#ffc107",
    ERROR: "#dc3545",
}

LIGHT_STYLE = """
QMainWindow, QWidget {
    background-color: #f8f9fa;
    color: #212529;
}
QPlainTextEdit {
    background-color: #ffffff;
    border: 1px solid #ced4da;
    border-radius: 5px;
}
QGroupBox {
    font-weight: bold;
    border: 2px solid #dee2e6;
    border-radius: 5px;
    margin-top: 1ex;
    padding: 5px;
}
QGroupBox::title {
    subcontrol-origin: margin;
    left: 10px;
    padding: 0 5px 0 5px;
}
QPushButton {
    background-color: #e9ecef;
    border: 1px solid #adb5bd;
    border-radius: 3px;
    padding: 6px 12px;
}
QPushButton:hover {
    background-color: #dee2e6;
}
"""

DARK_STYLE = """
QMainWindow, QWidget {
    background-color: #1e1e1e;
    color: #e9ecef;
}
QPlainTextEdit {
    background-color: #2b2b2b;
    border: 1px solid #495057;
    border-radius: 5px;
}
QGroupBox {
    font-weight: bold;
    border: 2px solid #495057;
    border-radius: 5px;
    margin-top: 1ex;
    padding: 5px;
}
QGroupBox::title {
    subcontrol-origin: margin;
    left: 10px;
    padding: 0 5px 0 5px;
}
QPushButton {
    background-color: #343a40;
    border: 1px solid #6c757d;
    border-radius: 3px;
    padding: 6px 12px;
}
QPushButton:hover {
    background-color: #495057;
}
"""


class SettingsStore:
    """Mapping-style adapter over QSettings for the session."""

    def __init__(self, settings: QSettings):
        self.settings = settings

    def get(self, key: str, default=None):
        value = self.settings.value(key, default)
        return default if value is None else str(value)

    def __setitem__(self, key: str, value: str):
        self.settings.setValue(key, value)


class TextProcessorMainWindow(QMainWindow):
    """Main application window for Text Processor."""

    def __init__(self, ctx: Optional[TextProcessorContext] = None):
        super().__init__()
        ctx = ctx if ctx is not None else self.load_configuration()
        self.session = TextProcessorSession(ctx, SettingsStore(QSettings()))

        self.stat_labels: Dict[str, QLabel] = {}
        self.command_buttons: List[QPushButton] = []

        self.autosave_timer = QTimer(self)
        self.autosave_timer.setSingleShot(True)
        self.autosave_timer.timeout.connect(self.session.save_text)

        self.notification_timer = QTimer(self)
        self.notification_timer.setSingleShot(True)
        self.notification_timer.timeout.connect(self.hide_notification)

        self.init_ui()
        self.setup_callbacks()
        self.setup_shortcuts()
        self.session.restore()

    def load_configuration(self) -> TextProcessorContext:
        """Load configuration from .data.txt file."""
        try:
            ctx = load_data_file()
            log_message("Configuration loaded successfully")
            return ctx
        except Exception as e:
            log_message(f"Error loading configuration: {e}", level="ERROR")
            QMessageBox.warning(self, "Configuration Error",
                                f"Could not load configuration: {e}")
            return TextProcessorContext()

    def init_ui(self):
        """Initialize the user interface."""
        self.setWindowTitle("Text Processor")
        self.setGeometry(100, 100, 1100, 760)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout()
        central_widget.setLayout(main_layout)

        main_layout.addWidget(self.create_header_section())
        main_layout.addWidget(self.create_text_section(), 1)
        main_layout.addWidget(self.create_stats_section())
        main_layout.addWidget(self.create_commands_section())
        main_layout.addWidget(self.create_action_section())

        # Floating toast, positioned in resizeEvent
        self.notification_label = QLabel("", self)
        self.notification_label.setAlignment(Qt.AlignCenter)
        self.notification_label.setMinimumWidth(280)
        self.notification_label.hide()

    def create_header_section(self) -> QWidget:
        widget = QWidget()
        layout = QHBoxLayout()

        title = QLabel("Text Processor")
        title.setStyleSheet("font-size: 18px; font-weight: bold;")

        self.theme_button = QPushButton()
        self.theme_button.clicked.connect(self.session.toggle_theme)

        layout.addWidget(title)
        layout.addStretch()
        layout.addWidget(self.theme_button)

        widget.setLayout(layout)
        return widget

    def create_text_section(self) -> QWidget:
        """Create the text editing section."""
        widget = QWidget()
        layout = QVBoxLayout()

        layout.addWidget(QLabel("Enter or paste your text:"))

        self.text_edit = QPlainTextEdit()
        self.text_edit.setFont(QFont("Courier New", 11))
        self.text_edit.setPlaceholderText("Start typing or paste your text here...")
        self.text_edit.textChanged.connect(self.on_text_changed)
        layout.addWidget(self.text_edit)

        widget.setLayout(layout)
        return widget

    def create_stats_section(self) -> QGroupBox:
        """Create the live statistics grid."""
        group = QGroupBox("Statistics")
        layout = QGridLayout()

        fields = [
            ('word_count', "Words"),
            ('char_count', "Characters"),
            ('char_count_no_spaces', "No Spaces"),
            ('sentence_count', "Sentences"),
            ('paragraph_count', "Paragraphs"),
            ('reading_time_minutes', "Reading Time"),
        ]

        for col, (name, caption) in enumerate(fields):
            value_label = QLabel("0")
            value_label.setAlignment(Qt.AlignCenter)
            value_label.setStyleSheet("font-size: 16px; font-weight: bold;")
            caption_label = QLabel(caption)
            caption_label.setAlignment(Qt.AlignCenter)

            self.stat_labels[name] = value_label
            layout.addWidget(value_label, 0, col)
            layout.addWidget(caption_label, 1, col)

        group.setLayout(layout)
        return group

    def create_commands_section(self) -> QWidget:
        """Create one group box of command buttons per catalog group."""
        widget = QWidget()
        layout = QHBoxLayout()

        group_layouts: Dict[str, QVBoxLayout] = {}
        for processor in get_available_processors():
            group_name = processor['group']
            if group_name not in group_layouts:
                group = QGroupBox(GROUP_TITLES.get(group_name, group_name.title()))
                group_layouts[group_name] = QVBoxLayout()
                group.setLayout(group_layouts[group_name])
                layout.addWidget(group)

            button = QPushButton(processor['description'])
            button.clicked.connect(lambda checked, name=processor['name']: self.session.run_command(name))
            self.command_buttons.append(button)
            group_layouts[group_name].addWidget(button)

        widget.setLayout(layout)
        return widget

    def create_action_section(self) -> QWidget:
        """Create the action buttons section."""
        widget = QWidget()
        layout = QHBoxLayout()

        self.open_button = QPushButton("Open...")
        self.open_button.clicked.connect(self.open_file)

        self.copy_button = QPushButton("Copy")
        self.copy_button.setToolTip("Ctrl+Enter")
        self.copy_button.clicked.connect(self.session.copy_text)

        self.download_button = QPushButton("Download")
        self.download_button.setToolTip("Ctrl+D")
        self.download_button.clicked.connect(self.download_text)

        self.clear_button = QPushButton("Clear")
        self.clear_button.setToolTip("Ctrl+Shift+C")
        self.clear_button.clicked.connect(self.clear_text)

        self.history_button = QPushButton("History")
        self.history_button.clicked.connect(self.show_history)

        self.quit_button = QPushButton("Quit")
        self.quit_button.clicked.connect(self.close)

        layout.addWidget(self.open_button)
        layout.addWidget(self.copy_button)
        layout.addWidget(self.download_button)
        layout.addWidget(self.clear_button)
        layout.addWidget(self.history_button)
        layout.addStretch()
        layout.addWidget(self.quit_button)

        widget.setLayout(layout)
        return widget

    def setup_callbacks(self):
        """Connect the session callbacks to the widgets."""
        self.session.notification_callback = self.show_notification
        self.session.text_update_callback = self.update_text_display
        self.session.stats_callback = self.update_stats_display
        self.session.theme_callback = self.apply_theme
        self.session.clipboard_callback = self.write_clipboard

    def setup_shortcuts(self):
        QShortcut(QKeySequence("Ctrl+Return"), self, activated=self.session.copy_text)
        QShortcut(QKeySequence("Ctrl+D"), self, activated=self.download_text)
        QShortcut(QKeySequence("Ctrl+Shift+C"), self, activated=self.clear_text)

    def on_text_changed(self):
        """Refresh stats and restart the autosave debounce."""
        self.session.set_text(self.text_edit.toPlainText())
        self.autosave_timer.start(self.session.ctx.autosave_delay_ms)

    def update_text_display(self, text: str):
        if self.text_edit.toPlainText() != text:
            self.text_edit.setPlainText(text)

    def update_stats_display(self, record: StatisticsRecord):
        self.stat_labels['word_count'].setText(str(record.word_count))
        self.stat_labels['char_count'].setText(str(record.char_count))
        self.stat_labels['char_count_no_spaces'].setText(str(record.char_count_no_spaces))
        self.stat_labels['sentence_count'].setText(str(record.sentence_count))
        self.stat_labels['paragraph_count'].setText(str(record.paragraph_count))
        self.stat_labels['reading_time_minutes'].setText(format_reading_time(record.reading_time_minutes))

    def write_clipboard(self, text: str):
        QApplication.clipboard().setText(text)

    def apply_theme(self, theme: str):
        """Apply the style sheet and update the toggle icon."""
        self.setStyleSheet(LIGHT_STYLE if theme == LIGHT_THEME else DARK_STYLE)
        if theme == LIGHT_THEME:
            self.theme_button.setText("🌙")
            self.theme_button.setToolTip("Switch to Dark Mode")
        else:
            self.theme_button.setText("☀️")
            self.theme_button.setToolTip("Switch to Light Mode")

    def show_notification(self, message: str, kind: str = SUCCESS):
        """Show a toast that hides itself after the configured delay."""
        color = NOTIFICATION_COLORS.get(kind, NOTIFICATION_COLORS[SUCCESS])
        text_color = "#212529" if kind == WARNING else "#ffffff"
        self.notification_label.setStyleSheet(
            f"background-color: {color}; color: {text_color}; "
            f"border-radius: 5px; padding: 10px 16px; font-weight: bold;"
        )
        self.notification_label.setText(message)
        self.notification_label.adjustSize()
        self.position_notification()
        self.notification_label.show()
        self.notification_label.raise_()
        self.notification_timer.start(self.session.ctx.notification_ms)

    def hide_notification(self):
        self.notification_label.hide()

    def position_notification(self):
        margin = 20
        x = self.width() - self.notification_label.width() - margin
        self.notification_label.move(max(margin, x), margin)

    def open_file(self):
        """Handle file browser dialog."""
        default_dir = self.session.ctx.default_file_directory
        initial_dir = str(default_dir) if default_dir else str(Path.home())

        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Open text file",
            initial_dir,
            "Text files (*.txt);;HTML files (*.html *.htm *.xhtml);;All files (*.*)"
        )

        if not file_path:
            return

        try:
            content = read_text_file(file_path)
        except (OSError, UnicodeDecodeError) as e:
            error_msg = f"Error loading file: {e}"
            log_message(error_msg, level="ERROR")
            QMessageBox.critical(self, "File Error", error_msg)
            return

        self.text_edit.setPlainText(content)
        log_message(f"File loaded: {file_path}")
        self.show_notification(f"Loaded {Path(file_path).name}", SUCCESS)

    def download_text(self):
        """Save the text under a date-stamped name chosen in a save dialog."""
        if not self.session.has_text():
            self.session.notify("No text to download!", WARNING)
            return

        default_dir = self.session.ctx.default_file_directory or Path.home()
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Download text",
            str(Path(default_dir) / download_filename()),
            "Text files (*.txt);;All files (*.*)"
        )

        if not file_path:
            return

        if self.session.save_text_as(file_path):
            chosen_dir = Path(file_path).parent
            if chosen_dir != self.session.ctx.default_file_directory:
                self.session.ctx.default_file_directory = chosen_dir
                save_default_directory_to_data_file(str(chosen_dir))

    def show_history(self):
        QMessageBox.information(self, "Processing History", self.session.history())

    def clear_text(self):
        self.session.clear_text(self.confirm_clear)

    def confirm_clear(self) -> bool:
        reply = QMessageBox.question(
            self,
            "Clear Text",
            "Are you sure you want to clear all text?",
            QMessageBox.Yes | QMessageBox.No
        )
        return reply == QMessageBox.Yes

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if self.notification_label.isVisible():
            self.position_notification()

    def closeEvent(self, event):
        """Flush pending autosave on close."""
        if self.autosave_timer.isActive():
            self.autosave_timer.stop()
            self.session.save_text()

        log_message("Application closing")
        event.accept()


def main():
    """Main application entry point."""
    app = QApplication(sys.argv)
    app.setApplicationName("Text Processor")
    app.setOrganizationName("Text Processor")

    window = TextProcessorMainWindow()
    window.show()

    log_message("Text Processor PyQt5 application started")

    sys.exit(app.exec_())


if __name__ == '__main__':
    main()
