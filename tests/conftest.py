# springbootchat/tests/conftest.py
# ---------------------------------------------------------------------
# Ground rules:
# - pytest-qt owns QApplication (use qapp/qtbot fixtures)
# - Qt runs headless on the offscreen platform
# - Every controller gets its own QThreadPool, drained after each test
# - Views are replaced by a recording fake unless a test needs widgets
# ---------------------------------------------------------------------

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import logging
import threading
from typing import Callable, Optional

import pytest
from PySide6.QtCore import QThreadPool

from springbootchat.modules.login.controller import LoginController
from springbootchat.modules.login.model import LoginField

# Short latency for tests that don't check the real one
FAST_DELAY_MS = 50


# ---------- Qt: let pytest-qt own the app ----------
@pytest.fixture(scope="session")
def app(qapp):
    return qapp


# ---------- Recording view ----------
class FakeView:
    """
    Stand-in for LoginView: records every call the controller makes, and the
    thread on_after_submit ran on.
    """

    def __init__(self, nickname: str = "", host: str = "") -> None:
        self.nickname = nickname
        self.host = host
        self.calls: list[tuple] = []
        self.after_thread: Optional[int] = None
        self.before_hook: Optional[Callable[[], None]] = None

    def get_values(self) -> tuple[str, str]:
        return self.nickname, self.host

    def clear_field_errors(self) -> None:
        self.calls.append(("clear",))

    def report_field_error(self, field: LoginField, message: str) -> None:
        self.calls.append(("error", field, message))

    def focus_field(self, field: LoginField) -> None:
        self.calls.append(("focus", field))

    def on_before_submit(self) -> None:
        self.calls.append(("before",))
        if self.before_hook is not None:
            self.before_hook()

    def on_after_submit(self, success: bool) -> None:
        self.after_thread = threading.get_ident()
        self.calls.append(("after", success))

    # helpers
    def names(self) -> list[str]:
        return [c[0] for c in self.calls]

    def count(self, name: str) -> int:
        return self.names().count(name)


@pytest.fixture()
def fake_view() -> FakeView:
    return FakeView()


@pytest.fixture()
def test_logger() -> logging.Logger:
    return logging.getLogger("springbootchat.tests")


@pytest.fixture()
def pool():
    p = QThreadPool()
    yield p
    p.waitForDone(10_000)


@pytest.fixture()
def make_controller(qapp, pool, test_logger):
    """Factory: LoginController wired to a private pool and a test logger."""
    made: list[LoginController] = []

    def _make(view=None, delay_ms: int = FAST_DELAY_MS) -> LoginController:
        ctrl = LoginController(view=view, delay_ms=delay_ms, logger=test_logger, pool=pool)
        made.append(ctrl)
        return ctrl

    yield _make

    for ctrl in made:
        ctrl.cancel()


@pytest.fixture()
def controller(make_controller, fake_view) -> LoginController:
    return make_controller(view=fake_view)
