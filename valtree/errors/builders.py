"""Error Builders

Ergonomic constructors for the structured errors produced by the built-in
rules. Leaf rule authors can use ``new_errors`` or build ``Error`` directly.
"""
from typing import Any

from .types import Error, ErrorCode, Errors


def new_errors(field: str, code: str, params: dict[str, Any] | None = None, fatal: bool = False) -> Errors:
    """Create an ``Errors`` holding a single error."""
    return Errors([Error(code=code, field=field, params=dict(params or {}), fatal=fatal)])


def no_errors() -> Errors:
    return Errors()


# =============================================================================
# Structural
# =============================================================================

def not_found(key: Any) -> Error:
    return Error(ErrorCode.NOT_FOUND, params={"key": key})


def index_out_of_range(index: int) -> Error:
    return Error(ErrorCode.INDEX, field=str(index), params={"index": index})


# =============================================================================
# Constraint
# =============================================================================

def required() -> Error:
    return Error(ErrorCode.REQUIRED)


def zero() -> Error:
    return Error(ErrorCode.ZERO)


def below_min(minimum: Any, actual: Any, *, field: str = "") -> Error:
    return Error(ErrorCode.MIN, field=field, params={"min": minimum, "actual": actual})


def above_max(maximum: Any, actual: Any, *, field: str = "") -> Error:
    return Error(ErrorCode.MAX, field=field, params={"max": maximum, "actual": actual})


def out_of_range(minimum: Any, maximum: Any, actual: Any, *, actual_key: str = "actual") -> Error:
    return Error(ErrorCode.BETWEEN, params={"min": minimum, "max": maximum, actual_key: actual})


def wrong_length(length: int, actual: int) -> Error:
    return Error(ErrorCode.LENGTH, params={"length": length, "actual": actual})


def not_allowed(value: Any, *, field: str = "") -> Error:
    return Error(ErrorCode.ONE_OF, field=field, params={"value": value})


def disallowed(value: Any, *, field: str = "") -> Error:
    return Error(ErrorCode.NOT_ONE_OF, field=field, params={"value": value})


# =============================================================================
# Combinator
# =============================================================================

def negated() -> Error:
    return Error(ErrorCode.NOT)
