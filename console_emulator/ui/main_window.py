from __future__ import annotations

import threading
from typing import Optional, cast

from PySide6.QtCore import QObject, QThread, Signal, Slot
from PySide6.QtGui import QAction, QFontDatabase, QTextCursor
from PySide6.QtWidgets import (
    QApplication,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from console_emulator.container import container
from console_emulator.use_cases.console.console_emulator import ConsoleEmulator

from .theme import ThemeName, toggle_theme


class _CommandWorker(QObject):
    finished = Signal(str)
    error = Signal(str)

    def __init__(
        self, console: ConsoleEmulator, lock: threading.Lock, command: str
    ) -> None:
        super().__init__()
        self.console = console
        self.lock = lock
        self.command = command

    @Slot()
    def run(self) -> None:
        # execute() blocks until external commands exit, so it must stay off the GUI thread
        try:
            with self.lock:
                self.console.execute(self.command)
                content = self.console.get_content()
            self.finished.emit(content)
        except Exception as e:  # pragma: no cover
            self.error.emit(str(e))


class MainWindow(QMainWindow):
    def __init__(
        self,
        console: Optional[ConsoleEmulator] = None,
        lock: Optional[threading.Lock] = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Console Emulator")
        self.setMinimumSize(800, 500)

        self._console = console or container.get_console()
        self._lock = lock or container.get_console_lock()
        self._thread: Optional[QThread] = None
        self._worker: Optional[_CommandWorker] = None
        self._theme: ThemeName = "dark"
        app = QApplication.instance()
        prop = app.property("activeTheme") if app else None
        if prop in ("dark", "light"):
            self._theme = prop

        self._build_toolbar()
        self._build_layout()
        self._render(self._console.get_content())

    def _build_toolbar(self) -> None:
        toolbar = QToolBar("Main", self)
        toolbar.setMovable(False)
        self.action_theme = QAction("Toggle theme", self)
        self.action_theme.triggered.connect(self._on_toggle_theme)
        toolbar.addAction(self.action_theme)
        self.addToolBar(toolbar)

    def _build_layout(self) -> None:
        font = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)

        self.buffer_view = QPlainTextEdit(self)
        self.buffer_view.setReadOnly(True)
        self.buffer_view.setFont(font)
        self.buffer_view.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)

        self.input_edit = QLineEdit(self)
        self.input_edit.setFont(font)
        self.input_edit.setPlaceholderText("Type a command and press Enter")
        self.input_edit.returnPressed.connect(self._on_command_entered)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.addWidget(self.buffer_view, 1)
        layout.addWidget(self.input_edit)
        self.setCentralWidget(central)
        self.input_edit.setFocus()

    def _render(self, content: str) -> None:
        self.buffer_view.setPlainText(content)
        # Keep the latest prompt in view
        self.buffer_view.moveCursor(QTextCursor.MoveOperation.End)
        self.buffer_view.ensureCursorVisible()

    @Slot()
    def _on_command_entered(self) -> None:
        command = self.input_edit.text()
        if not command.strip():
            return

        self.input_edit.clear()
        # One command at a time: input comes back once the worker reports
        self.input_edit.setEnabled(False)

        self._thread = QThread(self)
        self._worker = _CommandWorker(self._console, self._lock, command)
        self._worker.moveToThread(self._thread)

        self._thread.started.connect(self._worker.run)
        self._worker.finished.connect(self._on_command_finished)
        self._worker.error.connect(self._on_command_error)
        self._worker.finished.connect(self._thread.quit)
        self._worker.error.connect(self._thread.quit)
        self._worker.finished.connect(self._worker.deleteLater)
        self._worker.error.connect(self._worker.deleteLater)
        self._thread.finished.connect(self._thread.deleteLater)

        self._thread.start()

    @Slot(str)
    def _on_command_finished(self, content: str) -> None:
        self._render(content)
        self.input_edit.setEnabled(True)
        self.input_edit.setFocus()

    @Slot(str)
    def _on_command_error(self, message: str) -> None:  # pragma: no cover
        self.input_edit.setEnabled(True)
        QMessageBox.critical(self, "Console error", message)

    @Slot()
    def _on_toggle_theme(self) -> None:
        app = QApplication.instance()
        if app is None:
            return
        self._theme = toggle_theme(cast(QApplication, app), self._theme)
