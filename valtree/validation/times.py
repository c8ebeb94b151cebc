"""Time rules for ``datetime``/``date`` values.

Comparison follows Python's own semantics: mixing naive and aware datetimes
raises ``TypeError``, which is a caller error and propagates.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import TypeVar

from valtree.errors import Error, ErrorCode, builders
from .rules import Rule

D = TypeVar("D", datetime, date)


def before(other: D) -> Rule[D]:
    """Value must be strictly before ``other``."""
    def check(value: D) -> Error | None:
        return None if value < other else Error(ErrorCode.BEFORE, params={"value": other})
    return check


def before_or_equal(other: D) -> Rule[D]:
    def check(value: D) -> Error | None:
        return None if value <= other else Error(ErrorCode.BEFORE, params={"value": other})
    return check


def after(other: D) -> Rule[D]:
    """Value must be strictly after ``other``."""
    def check(value: D) -> Error | None:
        return None if value > other else Error(ErrorCode.AFTER, params={"value": other})
    return check


def after_or_equal(other: D) -> Rule[D]:
    def check(value: D) -> Error | None:
        return None if value >= other else Error(ErrorCode.AFTER, params={"value": other})
    return check


def between(minimum: D, maximum: D) -> Rule[D]:
    """Value must lie in ``[minimum, maximum]`` inclusive."""
    def check(value: D) -> Error | None:
        if value < minimum or value > maximum:
            return builders.out_of_range(minimum, maximum, value, actual_key="value")
        return None
    return check
