from __future__ import annotations

import sys
from typing import Optional

from PySide6.QtWidgets import QApplication, QMessageBox

from console_emulator.exceptions import ConsoleInitializationError

from .main_window import MainWindow
from .theme import apply_theme


def main(argv: Optional[list[str]] = None) -> int:
    argv = argv if argv is not None else sys.argv

    app = QApplication(argv)
    # Theme from CONSOLE_UI_THEME ('light' or 'dark')
    apply_theme(app)

    try:
        win = MainWindow()
    except ConsoleInitializationError as e:
        QMessageBox.critical(None, "Console Emulator", str(e))
        return 2
    win.show()
    return app.exec()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
