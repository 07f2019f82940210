"""
springbootchat/modules/login/service.py

Purpose
-------
Run the (simulated) network login off the UI thread and hand the result back
through a Qt signal.

Public interface
----------------
- LoginJob(request, delay_ms, logger=None, pool=None)
- LoginJob.run_async() -> None
- LoginJob.cancel() -> None
- LoginJob.finished: Signal(bool)

`finished` is emitted from the worker thread. Receivers that live on the GUI
thread therefore get it through a queued connection, i.e. on the GUI thread.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from ...constants import LOGIN_DELAY_MS
from .logging_utils import log_event
from .model import LoginRequest


class _JobRunnable(QRunnable):
    """
    Thin QRunnable wrapper that executes a callable on a pool thread.
    """
    def __init__(self, work: Callable[[], None]) -> None:
        super().__init__()
        self.setAutoDelete(True)
        self._work = work

    @Slot()
    def run(self) -> None:  # type: ignore[override]
        self._work()


class LoginJob(QObject):
    """
    One login attempt.

    The cancellation token is a threading.Event: the worker blocks on it for
    the simulated latency, so cancel() wakes the worker immediately and the
    attempt resolves to False.
    """

    finished = Signal(bool)

    def __init__(
        self,
        request: LoginRequest,
        delay_ms: int = LOGIN_DELAY_MS,
        logger: Optional[logging.Logger] = None,
        pool: Optional[QThreadPool] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.request = request
        self._delay_ms = max(0, int(delay_ms))
        self._cancelled = threading.Event()
        self._pool = pool if pool is not None else QThreadPool.globalInstance()
        self._log = logger or logging.getLogger(__name__)

    # ---- public ----

    def run_async(self) -> None:
        self._pool.start(_JobRunnable(self._run))

    def cancel(self) -> None:
        self._cancelled.set()

    # ---- core workflow (runs in worker thread) ----

    def _run(self) -> None:
        self.finished.emit(self.login_in_background(self.request))

    def login_in_background(self, request: LoginRequest) -> bool:
        """
        Simulated login. Returns True after the fixed delay, False if the wait
        was interrupted by cancel().
        """
        log_event(
            self._log, "login", "background",
            "login_in_background()",
            {"nickname": request.nickname, "host": request.host},
            level=logging.DEBUG,
        )

        # TODO: authenticate against the chat service at request.host once it exposes a login endpoint.
        interrupted = self._cancelled.wait(self._delay_ms / 1000.0)
        if interrupted:
            return False

        return True
