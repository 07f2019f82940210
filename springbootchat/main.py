from __future__ import annotations

import os
import sys
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication, QMainWindow, QVBoxLayout, QWidget

from .config import STYLE_PATH
from .constants import APP_NAME
from .modules.login import MODULE_TITLE, create_module
from .modules.login.controller import LoginController
from .utils.loggers import get_logger

log = get_logger(__name__)


def load_qss(path: Path = STYLE_PATH) -> str:
    qss = ""
    if path.exists():
        qss = path.read_text(encoding="utf-8")
    return qss


def wrap_center(w: QWidget) -> QWidget:
    host = QWidget()
    lay = QVBoxLayout(host)
    lay.addStretch(1)
    lay.addWidget(w, 0, Qt.AlignCenter)
    lay.addStretch(1)
    return host


class MainWindow(QMainWindow):
    def __init__(self, login: LoginController | None = None):
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.setMinimumSize(420, 320)

        self.login = login or create_module(parent=self)
        self.statusBar().showMessage(MODULE_TITLE)
        self.setCentralWidget(wrap_center(self.login.get_widget()))

        self.login.submit_started.connect(self._on_submit_started)
        self.login.login_finished.connect(self._on_login_finished)

    def _on_submit_started(self, nickname: str, host: str) -> None:
        self.statusBar().showMessage(f"Signing in as {nickname} at {host}…")

    def _on_login_finished(self, success: bool) -> None:
        if success:
            self.statusBar().showMessage("Signed in", 5000)
        else:
            self.statusBar().showMessage("Sign in failed", 5000)

    def closeEvent(self, event):
        self.login.teardown()
        super().closeEvent(event)


def main():
    # Check if QApplication already exists (for dev_launcher.py compatibility)
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    qss = load_qss()
    if qss:
        app.setStyleSheet(qss)

    win = MainWindow()
    win.resize(480, 360)
    win.show()
    log.info("%s started", APP_NAME)

    # Only call exec() when running standalone; under dev_launcher.py the
    # launcher owns the event loop and must keep a reference to the window.
    if os.environ.get("__DEV_LAUNCHER__") != "1":
        sys.exit(app.exec())
    return win


if __name__ == "__main__":
    main()
