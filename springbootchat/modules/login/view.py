# springbootchat/modules/login/view.py
from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFormLayout,
    QLabel,
    QLineEdit,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .model import LoginField


class LoginView(QWidget):
    """
    Login form (UI-only).

    Implements the view capability the controller drives:
      - get_values() -> tuple[str, str]
      - clear_field_errors()
      - report_field_error(field, message)
      - focus_field(field)
      - on_before_submit() / on_after_submit(success)

    Emits sign_in_requested when the button is clicked or Return is pressed
    in the host field. No validation or login logic here.
    """

    sign_in_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("login_view")

        root = QVBoxLayout(self)
        root.setContentsMargins(24, 24, 24, 24)
        root.setSpacing(8)

        # Busy indicator (indeterminate), hidden until a login is running
        self.progress = QProgressBar()
        self.progress.setRange(0, 0)
        self.progress.setTextVisible(False)
        self.progress.setVisible(False)
        root.addWidget(self.progress)

        # Form
        self.form = QWidget()
        form = QFormLayout(self.form)
        form.setLabelAlignment(Qt.AlignRight)
        form.setFormAlignment(Qt.AlignHCenter | Qt.AlignTop)
        form.setContentsMargins(0, 0, 0, 0)

        self.nickname = QLineEdit()
        self.nickname.setObjectName("nickname")
        self.nickname.setPlaceholderText("Nickname")
        self.nickname.setClearButtonEnabled(True)
        self.lbl_nickname_error = self._make_error_label()
        form.addRow("Nickname", self.nickname)
        form.addRow("", self.lbl_nickname_error)

        self.host = QLineEdit()
        self.host.setObjectName("host")
        self.host.setPlaceholderText("https://chat.example.com")
        self.host.setClearButtonEnabled(True)
        self.lbl_host_error = self._make_error_label()
        form.addRow("Host", self.host)
        form.addRow("", self.lbl_host_error)

        self.btn_sign_in = QPushButton("Sign in")
        self.btn_sign_in.setObjectName("sign_in_button")
        self.btn_sign_in.setDefault(True)
        form.addRow("", self.btn_sign_in)

        root.addWidget(self.form)
        root.addStretch(1)

        self.btn_sign_in.clicked.connect(self.sign_in_requested)
        self.host.returnPressed.connect(self.sign_in_requested)
        self.nickname.returnPressed.connect(self.host.setFocus)

        self._inputs = {
            LoginField.NICKNAME: (self.nickname, self.lbl_nickname_error),
            LoginField.HOST: (self.host, self.lbl_host_error),
        }

        self.nickname.setFocus()

    # ---------- Public API ----------

    def get_values(self) -> tuple[str, str]:
        """
        Returns (nickname, host) exactly as typed.
        """
        return self.nickname.text(), self.host.text()

    def clear_field_errors(self) -> None:
        for field in self._inputs:
            self._set_field_error(field, None)

    def report_field_error(self, field: LoginField, message: str) -> None:
        self._set_field_error(field, message)

    def focus_field(self, field: LoginField) -> None:
        self._inputs[field][0].setFocus()

    def field_error(self, field: LoginField) -> str | None:
        lbl = self._inputs[field][1]
        return lbl.text() if lbl.isVisibleTo(self) else None

    def on_before_submit(self) -> None:
        self.show_busy(True)

    def on_after_submit(self, success: bool) -> None:
        self.show_busy(False)

    def show_busy(self, is_busy: bool) -> None:
        """Show the progress bar and hide the form, or the reverse."""
        self.progress.setVisible(is_busy)
        self.form.setVisible(not is_busy)
        self.form.setEnabled(not is_busy)

    # ---------- Internals ----------

    @staticmethod
    def _make_error_label() -> QLabel:
        lbl = QLabel()
        lbl.setProperty("role", "field-error")
        lbl.setWordWrap(True)
        lbl.setVisible(False)
        return lbl

    def _set_field_error(self, field: LoginField, msg: str | None) -> None:
        edit, lbl = self._inputs[field]
        if msg:
            lbl.setText(msg)
            lbl.setVisible(True)
        else:
            lbl.clear()
            lbl.setVisible(False)
        # re-polish so the [invalid="true"] style rule applies
        edit.setProperty("invalid", bool(msg))
        edit.style().unpolish(edit)
        edit.style().polish(edit)
