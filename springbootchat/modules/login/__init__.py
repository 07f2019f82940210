# springbootchat/modules/login/__init__.py

"""
Login module package exports.

- LoginController: validates the form and runs one login at a time off the UI thread.
- LoginView: the nickname/host form widget (Qt), imported lazily by the controller.
- validate_login_fields: pure validation, usable without a view.
"""

from .controller import LoginController, LoginViewLike
from .model import (
    FieldError,
    LoginField,
    LoginRequest,
    SubmissionState,
    ValidationCode,
    ValidationOutcome,
)
from .validators import validate_login_fields

MODULE_TITLE: str = LoginController.TITLE


def create_module(**kwargs) -> LoginController:
    """Factory used by the app shell."""
    return LoginController(**kwargs)


__all__ = [
    "MODULE_TITLE",
    "create_module",
    "LoginController",
    "LoginViewLike",
    "FieldError",
    "LoginField",
    "LoginRequest",
    "SubmissionState",
    "ValidationCode",
    "ValidationOutcome",
    "validate_login_fields",
]
