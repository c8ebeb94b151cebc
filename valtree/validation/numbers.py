"""Numeric rules.

Any ordered type works for ``min``/``max``/``between`` (ints, floats,
Decimals, or anything supporting ``<``). Sign rules compare against zero.
"""
from __future__ import annotations

from typing import Any, TypeVar

from valtree.errors import Error, ErrorCode, builders
from .rules import Rule

N = TypeVar("N")


def min(minimum: N) -> Rule[N]:
    """Value must be ``>= minimum``."""
    def check(value: N) -> Error | None:
        return builders.below_min(minimum, value) if value < minimum else None
    return check


def max(maximum: N) -> Rule[N]:
    """Value must be ``<= maximum``."""
    def check(value: N) -> Error | None:
        return builders.above_max(maximum, value) if value > maximum else None
    return check


def between(minimum: N, maximum: N) -> Rule[N]:
    """Value must lie in ``[minimum, maximum]`` inclusive."""
    def check(value: N) -> Error | None:
        if value < minimum or value > maximum:
            return builders.out_of_range(minimum, maximum, value)
        return None
    return check


def _sign_rule(code: ErrorCode, passes) -> Rule[Any]:
    def check(value: Any) -> Error | None:
        return None if passes(value) else Error(code, params={"value": value})
    return check


def positive() -> Rule[N]:
    """Value must be ``> 0``."""
    return _sign_rule(ErrorCode.POSITIVE, lambda v: v > 0)


def non_negative() -> Rule[N]:
    return _sign_rule(ErrorCode.NON_NEGATIVE, lambda v: v >= 0)


def negative() -> Rule[N]:
    """Value must be ``< 0``."""
    return _sign_rule(ErrorCode.NEGATIVE, lambda v: v < 0)


def non_positive() -> Rule[N]:
    return _sign_rule(ErrorCode.NON_POSITIVE, lambda v: v <= 0)
