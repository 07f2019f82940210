# springbootchat/modules/login/model.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class LoginField(Enum):
    """The two inputs of the login form, in validation order."""
    NICKNAME = "nickname"
    HOST = "host"


class ValidationCode(str, Enum):
    FIELD_REQUIRED = "field_required"
    INVALID_NICKNAME = "invalid_nickname"
    INVALID_HOST = "invalid_host"

    @property
    def default_message(self) -> str:
        return _DEFAULT_MESSAGES[self]


_DEFAULT_MESSAGES = {
    ValidationCode.FIELD_REQUIRED: "This field is required",
    ValidationCode.INVALID_NICKNAME: "This nickname is invalid",
    ValidationCode.INVALID_HOST: "This host is invalid",
}


class SubmissionState(Enum):
    IDLE = "idle"
    PENDING = "pending"


@dataclass(frozen=True)
class LoginRequest:
    """
    Values of the form at the time of the login attempt.

    Built once per attempt and discarded after its result is delivered.
    """
    nickname: str
    host: str

    @classmethod
    def from_mapping(cls, m: Mapping[str, Any]) -> "LoginRequest":
        """
        Build from any dict/mapping with `nickname` and `host` keys.
        Missing keys become empty strings.
        """
        return cls(
            nickname=str(m.get("nickname") or ""),
            host=str(m.get("host") or ""),
        )


@dataclass(frozen=True)
class FieldError:
    field: LoginField
    code: ValidationCode
    message: str


@dataclass(frozen=True)
class ValidationOutcome:
    """
    Result of validating the form.

    `errors` is ordered by field (nickname first); `request` is set only when
    there are no errors.
    """
    request: Optional[LoginRequest] = None
    errors: tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def error(self) -> Optional[FieldError]:
        return self.errors[0] if self.errors else None

    @property
    def first_field(self) -> Optional[LoginField]:
        return self.errors[0].field if self.errors else None

    def error_for(self, field: LoginField) -> Optional[FieldError]:
        for e in self.errors:
            if e.field is field:
                return e
        return None
