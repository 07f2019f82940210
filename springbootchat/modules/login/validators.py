"""
springbootchat/modules/login/validators.py

Purpose
-------
Pure validation of the login form. No UI side effects; the controller decides
how failures are shown.

Public API
----------
- validate_login_fields(nickname: str, host: str) -> ValidationOutcome
"""

from __future__ import annotations

from typing import Optional

from ...utils.validators import is_host_valid, is_nickname_valid, non_empty
from .model import (
    FieldError,
    LoginField,
    LoginRequest,
    ValidationCode,
    ValidationOutcome,
)


def _error(field: LoginField, code: ValidationCode) -> FieldError:
    return FieldError(field=field, code=code, message=code.default_message)


def check_nickname(nickname: str) -> Optional[FieldError]:
    if not non_empty(nickname):
        return _error(LoginField.NICKNAME, ValidationCode.FIELD_REQUIRED)
    if not is_nickname_valid(nickname):
        return _error(LoginField.NICKNAME, ValidationCode.INVALID_NICKNAME)
    return None


def check_host(host: str) -> Optional[FieldError]:
    if not non_empty(host):
        return _error(LoginField.HOST, ValidationCode.FIELD_REQUIRED)
    if not is_host_valid(host):
        return _error(LoginField.HOST, ValidationCode.INVALID_HOST)
    return None


def validate_login_fields(nickname: str, host: str) -> ValidationOutcome:
    """
    Validate both fields, nickname first.

    Every failing field gets its own error so the view can flag all of them;
    `outcome.error` is the first one in field order.
    """
    errors = tuple(
        e for e in (check_nickname(nickname), check_host(host)) if e is not None
    )
    if errors:
        return ValidationOutcome(request=None, errors=errors)
    return ValidationOutcome(request=LoginRequest(nickname=nickname, host=host))
