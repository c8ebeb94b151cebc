"""Validation at System Boundaries

Validators return errors as values. At the edge of a system (an API handler,
a config loader) callers usually want one of:
- a Result: ``check(validator, value)`` -> ``Ok(value)`` or ``Err(ValidationFailed)``
- an exception: ``ensure_valid(validator, value)`` raises ``ValidationFailed``
- a JSON-ready report: ``ValidationFailed.to_report()`` / ``ErrorReport.from_errors``

Report format:
{
    "message": "Validation failed",
    "error_count": 2,
    "errors": [
        {"field": "Age", "code": "min", "params": {"actual": 15, "min": 18}, "fatal": false}
    ]
}
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from valtree.config import get_settings
from valtree.errors import Err, Error, Errors, Ok, Result
from valtree.logging import boundary_logger
from .base import Validator

T = TypeVar("T")

REDACTED = "[REDACTED]"


class ErrorDetail(BaseModel):
    """Serializable form of one ``Error``."""
    model_config = ConfigDict(frozen=True)

    field: str = ""
    code: str
    params: dict[str, Any] = Field(default_factory=dict)
    fatal: bool = False

    @classmethod
    def from_error(cls, error: Error, *, sensitive_fields: frozenset[str] | None = None) -> ErrorDetail:
        params = dict(error.params)
        if sensitive_fields and _is_sensitive(error.field, sensitive_fields):
            params = {k: REDACTED for k in params}
        return cls(field=error.field, code=error.code, params=params, fatal=error.fatal)


class ErrorReport(BaseModel):
    """Serializable report of a failed validation."""
    model_config = ConfigDict(frozen=True)

    message: str = "Validation failed"
    error_count: int = 0
    errors: list[ErrorDetail] = Field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: Errors, *, message: str = "Validation failed",
                    sensitive_fields: frozenset[str] | None = None) -> ErrorReport:
        details = [ErrorDetail.from_error(e, sensitive_fields=sensitive_fields) for e in errors]
        return cls(message=message, error_count=len(details), errors=details)


def _is_sensitive(path: str, sensitive_fields: frozenset[str]) -> bool:
    lowered = {s.lower() for s in sensitive_fields}
    return any(part.lower() in lowered for part in path.split("."))


@dataclass(eq=False)
class ValidationFailed(Exception):
    """Raised at a boundary when a validator reported errors."""
    message: str
    errors: Errors
    sensitive_fields: frozenset[str] | None = None

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        if len(self.errors) == 1:
            return f"{self.message}: {self.errors[0].describe()}"
        return f"{self.message} ({len(self.errors)} errors)"

    @property
    def field_errors(self) -> dict[str, list[Error]]:
        return self.errors.field_errors

    @property
    def first_error(self) -> Error | None:
        return self.errors.first_error

    def to_report(self) -> ErrorReport:
        sensitive = self.sensitive_fields
        if sensitive is None:
            sensitive = get_settings().SENSITIVE_FIELDS
        return ErrorReport.from_errors(self.errors, message=self.message, sensitive_fields=sensitive)

    def to_dict(self) -> dict[str, Any]:
        return self.to_report().model_dump(mode="json")


def check(validator: Validator[T], value: T, *, message: str = "Validation failed",
          sensitive_fields: frozenset[str] | None = None) -> Result[T, ValidationFailed]:
    """Validate ``value`` and wrap the outcome in a Result."""
    errors = validator.validate(value)
    if not errors:
        return Ok(value)
    _log_failure(validator, errors)
    return Err(ValidationFailed(message=message, errors=errors, sensitive_fields=sensitive_fields))


def ensure_valid(validator: Validator[T], value: T, *, message: str = "Validation failed",
                 sensitive_fields: frozenset[str] | None = None) -> T:
    """Return ``value`` unchanged if valid, otherwise raise ``ValidationFailed``."""
    return check(validator, value, message=message, sensitive_fields=sensitive_fields).unwrap()


def _log_failure(validator: Validator[Any], errors: Errors) -> None:
    if not get_settings().LOG_FAILURES:
        return
    boundary_logger().info(
        "validation_failed",
        validator=type(validator).__name__,
        error_count=len(errors),
        fatal=errors.has_fatal_errors(),
        first_code=errors[0].code,
        first_field=errors[0].field,
    )
