"""
Development launcher: runs the app and restarts it whenever a .py file in the
package changes.

    springbootchat-dev
    python -m springbootchat.dev_launcher
"""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path

from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QApplication
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from .utils.loggers import get_logger

log = get_logger(__name__)

PACKAGE_ROOT = Path(__file__).parent.resolve()
_IGNORED_PARTS = ("__pycache__", ".git")


class Restarter(QObject):

    restart_signal = Signal()

    def __init__(self, path_to_watch: str, debounce_time: float = 1.0):
        super().__init__()
        self.path_to_watch = path_to_watch
        self.last_restart = 0.0
        self.debounce_time = debounce_time

        self.observer = Observer()
        self.event_handler = Handler(self.restart_signal)
        self.observer.schedule(self.event_handler, self.path_to_watch, recursive=True)

    def start(self):
        self.observer.start()

    def stop(self):
        self.observer.stop()
        self.observer.join()

    def should_restart(self, now: float | None = None) -> bool:
        """Debounce: at most one restart per `debounce_time` seconds."""
        now = time.time() if now is None else now
        if now - self.last_restart > self.debounce_time:
            self.last_restart = now
            return True
        return False


class Handler(FileSystemEventHandler):
    """
    Handles events from the watchdog observer.
    """
    def __init__(self, restart_signal):
        self.restart_signal = restart_signal

    def on_modified(self, event):
        if event.is_directory or not str(event.src_path).endswith(".py"):
            return

        changed_file = Path(event.src_path).resolve()
        if any(part in changed_file.parts for part in _IGNORED_PARTS):
            return

        log.info("Change detected in: %s", changed_file)
        self.restart_signal.emit()


def _restart_argv() -> list[str]:
    return [sys.executable, "-m", "springbootchat.dev_launcher", *sys.argv[1:]]


def main():
    app = QApplication.instance() or QApplication(sys.argv)

    restarter = Restarter(path_to_watch=str(PACKAGE_ROOT))

    def trigger_restart():
        if restarter.should_restart():
            log.info("Restarting application...")
            restarter.stop()
            app.quit()
            os.execv(sys.executable, _restart_argv())

    restarter.restart_signal.connect(trigger_restart)
    restarter.start()

    os.environ["__DEV_LAUNCHER__"] = "1"
    try:
        from .main import main as main_app
        # keep the window referenced for the lifetime of the event loop
        window = main_app()
    except Exception:
        log.exception("Error running main application")
        restarter.stop()
        sys.exit(1)
    finally:
        os.environ.pop("__DEV_LAUNCHER__", None)

    exit_code = app.exec()
    del window

    restarter.stop()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
