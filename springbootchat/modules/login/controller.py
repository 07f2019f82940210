# springbootchat/modules/login/controller.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from PySide6.QtCore import QObject, QThread, QThreadPool, Signal, Slot
from PySide6.QtWidgets import QWidget

from ...constants import LOGIN_DELAY_MS
from ..base_module import BaseModule
from .logging_utils import get_logger, log_event
from .model import LoginField, LoginRequest, SubmissionState, ValidationOutcome
from .service import LoginJob
from .validators import validate_login_fields


class LoginViewLike(Protocol):
    """What the controller needs from the UI layer."""
    def get_values(self) -> tuple[str, str]: ...
    def clear_field_errors(self) -> None: ...
    def report_field_error(self, field: LoginField, message: str) -> None: ...
    def focus_field(self, field: LoginField) -> None: ...
    def on_before_submit(self) -> None: ...
    def on_after_submit(self, success: bool) -> None: ...


@dataclass
class _PendingLogin:
    request: LoginRequest
    job: LoginJob


class LoginController(BaseModule):
    """
    Login form flow: validate the two fields, then run one login at a time
    on a worker thread.

    The pending handle is only read and written on the thread that owns the
    controller; the worker talks back through LoginJob.finished (queued).

    Public attrs (set after each validate()):
      - last_error_code: str | None
      - last_error_message: str | None
    """

    submit_started = Signal(str, str)   # nickname, host
    login_finished = Signal(bool)       # result of the login

    TITLE = "Sign in"

    def __init__(
        self,
        view: Optional[LoginViewLike] = None,
        delay_ms: int = LOGIN_DELAY_MS,
        logger: Optional[logging.Logger] = None,
        pool: Optional[QThreadPool] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.delay_ms = delay_ms
        self._view = view
        self._log = logger or get_logger()
        self._pool = pool
        self._pending: Optional[_PendingLogin] = None

        self.last_error_code: Optional[str] = None
        self.last_error_message: Optional[str] = None

        if isinstance(view, QWidget):
            self._wire_view(view)

    # ----------------------------- Shell API -----------------------------

    def get_widget(self) -> QWidget:
        if self._view is None:
            from .view import LoginView  # lazy import to keep UI deps local
            self._view = LoginView()
            self._wire_view(self._view)
        if not isinstance(self._view, QWidget):
            raise TypeError("The injected login view is not a QWidget.")
        return self._view

    def get_title(self) -> str:
        return self.TITLE

    def teardown(self) -> None:
        self.cancel()
        # view is released now; the cancelled result still clears the handle but is not shown
        self._view = None

    @property
    def view(self) -> LoginViewLike:
        if self._view is None:
            self.get_widget()
        return self._view  # type: ignore[return-value]

    # ----------------------------- Public API -----------------------------

    @property
    def state(self) -> SubmissionState:
        return SubmissionState.PENDING if self._pending is not None else SubmissionState.IDLE

    def is_pending(self) -> bool:
        return self._pending is not None

    @Slot()
    def attempt_login(self) -> None:
        """
        Sign-in action. If there are form errors (missing fields, invalid
        nickname or host) they are presented and no login is attempted.
        """
        if self.is_pending():
            return

        nickname, host = self.view.get_values()
        outcome = self.validate(nickname, host)
        if outcome.ok and outcome.request is not None:
            self.submit(outcome.request)

    def validate(self, nickname: str, host: str) -> ValidationOutcome:
        """
        Clear previous field errors, validate, and on failure flag every bad
        field and focus the first one.
        """
        view = self.view
        view.clear_field_errors()
        self._reset_last_error()

        outcome = validate_login_fields(nickname, host)
        if outcome.ok:
            log_event(self._log, "login", "validate", "form valid",
                      {"nickname": nickname, "host": host}, level=logging.DEBUG)
            return outcome

        for err in outcome.errors:
            view.report_field_error(err.field, err.message)
        first = outcome.error
        self.last_error_code = first.code.value
        self.last_error_message = first.message
        view.focus_field(first.field)

        log_event(self._log, "login", "validate", "form rejected",
                  {"errors": [f"{e.field.value}:{e.code.value}" for e in outcome.errors]})
        return outcome

    def submit(self, request: LoginRequest) -> bool:
        """
        Start the login for `request` on a worker thread.

        Returns False (and does nothing) while another login is pending.
        """
        self._ensure_owner_thread()
        if self._pending is not None:
            log_event(self._log, "login", "skip", "login already pending; request dropped",
                      {"nickname": request.nickname, "host": request.host}, level=logging.DEBUG)
            return False

        job = LoginJob(request, delay_ms=self.delay_ms, logger=self._log, pool=self._pool)
        job.finished.connect(self._on_job_finished)
        # Set before the callback so a re-entrant submit is skipped
        self._pending = _PendingLogin(request=request, job=job)

        self.view.on_before_submit()
        self.submit_started.emit(request.nickname, request.host)

        log_event(self._log, "login", "dispatch", "login dispatched",
                  {"nickname": request.nickname, "host": request.host, "delay_ms": self.delay_ms})
        job.run_async()
        return True

    def cancel(self) -> bool:
        """
        Interrupt the pending login. Its result resolves to False and the
        usual completion path runs once the worker wakes up.
        """
        pending = self._pending
        if pending is None:
            return False
        log_event(self._log, "login", "cancel", "login cancelled",
                  {"nickname": pending.request.nickname})
        pending.job.cancel()
        return True

    # ----------------------------- Internals -----------------------------

    @Slot(bool)
    def _on_job_finished(self, success: bool) -> None:
        job = self.sender()
        pending = self._pending
        if pending is None or (job is not None and job is not pending.job):
            # stale result of a job that is no longer current
            return

        log_event(self._log, "login", "complete", "login finished",
                  {"nickname": pending.request.nickname, "success": bool(success)})
        try:
            if self._view is not None:
                self._view.on_after_submit(bool(success))
        finally:
            self._pending = None
        self.login_finished.emit(bool(success))

    def _wire_view(self, view: QWidget) -> None:
        signal = getattr(view, "sign_in_requested", None)
        if signal is not None:
            signal.connect(self.attempt_login)

    def _ensure_owner_thread(self) -> None:
        if QThread.currentThread() is not self.thread():
            raise RuntimeError("LoginController.submit() must be called from the controller's thread.")

    def _reset_last_error(self) -> None:
        self.last_error_code = None
        self.last_error_message = None
