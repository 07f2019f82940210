# tests/test_login_view.py
import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import Qt

from springbootchat.modules.login.model import LoginField, SubmissionState
from springbootchat.modules.login.view import LoginView


@pytest.fixture()
def view(qtbot):
    v = LoginView()
    qtbot.addWidget(v)
    v.show()
    qtbot.waitExposed(v)
    return v


def test_get_values_returns_raw_text(view):
    view.nickname.setText(" Jo ")
    view.host.setText("https://example.com")
    assert view.get_values() == (" Jo ", "https://example.com")


def test_report_and_clear_field_errors(view):
    view.report_field_error(LoginField.HOST, "This host is invalid")
    assert view.field_error(LoginField.HOST) == "This host is invalid"
    assert view.field_error(LoginField.NICKNAME) is None
    assert view.host.property("invalid") is True

    view.clear_field_errors()
    assert view.field_error(LoginField.HOST) is None
    assert view.host.property("invalid") is False


def test_busy_state_toggles_progress_and_form(view):
    assert view.progress.isHidden()
    assert not view.form.isHidden()

    view.on_before_submit()
    assert not view.progress.isHidden()
    assert view.form.isHidden()

    view.on_after_submit(True)
    assert view.progress.isHidden()
    assert not view.form.isHidden()
    assert view.form.isEnabled()


def test_sign_in_button_emits_request(view, qtbot):
    with qtbot.waitSignal(view.sign_in_requested, timeout=1000):
        qtbot.mouseClick(view.btn_sign_in, Qt.LeftButton)


def test_return_in_host_emits_request(view, qtbot):
    with qtbot.waitSignal(view.sign_in_requested, timeout=1000):
        view.host.returnPressed.emit()


# ---------------- wired to the controller ----------------

def test_controller_flags_invalid_fields_on_the_form(make_controller, view, qtbot):
    controller = make_controller(view=view)
    view.nickname.setText("J")
    view.host.setText("")

    qtbot.mouseClick(view.btn_sign_in, Qt.LeftButton)

    assert view.field_error(LoginField.NICKNAME) == "This nickname is invalid"
    assert view.field_error(LoginField.HOST) == "This field is required"
    assert controller.state is SubmissionState.IDLE


def test_controller_full_login_round_trip(make_controller, view, qtbot):
    controller = make_controller(view=view)
    assert controller.get_widget() is view

    view.report_field_error(LoginField.NICKNAME, "stale")
    view.nickname.setText("Jo")
    view.host.setText("https://example.com")

    with qtbot.waitSignal(controller.login_finished, timeout=5000) as blocker:
        qtbot.mouseClick(view.btn_sign_in, Qt.LeftButton)
        assert view.form.isHidden()
        assert not view.progress.isHidden()

    assert blocker.args == [True]
    assert view.field_error(LoginField.NICKNAME) is None
    assert not view.form.isHidden()
    assert view.progress.isHidden()


def test_controller_builds_its_own_view(make_controller, qtbot):
    controller = make_controller()
    w = controller.get_widget()
    qtbot.addWidget(w)
    assert isinstance(w, LoginView)
    assert controller.get_widget() is w
