"""Rules and Rule Combinators

A rule is a pure function ``value -> Error | None``. ``None`` means valid.
Combinators wrap rules into new rules; none of them raise for an ordinary
validation failure.

Features:
- negate / stop_on_error / or_ / when / unless combinators
- explicit emptiness predicates for required-style rules
- set membership rules built on frozensets
"""
from __future__ import annotations

from collections.abc import Hashable, Sized
from decimal import Decimal
from typing import Any, Callable, Optional, TypeVar

from valtree.errors import Error, builders

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

Rule = Callable[[T], Optional[Error]]
Predicate = Callable[[T], bool]


# ============================================================================
# Combinators
# ============================================================================

def negate(rule: Rule[T]) -> Rule[T]:
    """Pass exactly when ``rule`` fails; fail with code ``not`` otherwise."""
    def check(value: T) -> Error | None:
        if rule(value) is not None:
            return None
        return builders.negated()
    return check


def stop_on_error(rule: Rule[T]) -> Rule[T]:
    """Mark any error from ``rule`` as fatal."""
    def check(value: T) -> Error | None:
        if (error := rule(value)) is not None:
            return error.as_fatal()
        return None
    return check


def or_(*rules: Rule[T]) -> Rule[T]:
    """At least one rule must pass. If all fail, the last error is returned."""
    def check(value: T) -> Error | None:
        last_error = None
        for rule in rules:
            if (error := rule(value)) is None:
                return None
            last_error = error
        return last_error
    return check


def when(condition: Predicate[T], rule: Rule[T]) -> Rule[T]:
    """Apply ``rule`` only if ``condition(value)`` is true."""
    def check(value: T) -> Error | None:
        return rule(value) if condition(value) else None
    return check


def unless(condition: Predicate[T], rule: Rule[T]) -> Rule[T]:
    """Apply ``rule`` only if ``condition(value)`` is false."""
    def check(value: T) -> Error | None:
        return None if condition(value) else rule(value)
    return check


def apply_rules(rules: tuple[Rule[T], ...] | list[Rule[T]], value: T, path: str) -> list[Error]:
    """Run a scalar rule chain, tagging each error with ``path``.

    Stops after the first fatal error.
    """
    out: list[Error] = []
    for rule in rules:
        if (error := rule(value)) is None:
            continue
        out.append(error.with_field(path))
        if error.fatal:
            break
    return out


# ============================================================================
# Emptiness
# ============================================================================

def is_zero(value: Any) -> bool:
    """Default "missing value" predicate.

    ``None``, ``""``, numeric zero, ``False``, empty sized containers, and
    objects whose ``is_zero()`` method returns true.
    """
    if value is None:
        return True
    if isinstance(value, (bool, int, float, complex, Decimal)):
        return value == 0
    if isinstance(value, Sized):
        return len(value) == 0
    if callable(probe := getattr(value, "is_zero", None)):
        return bool(probe())
    return False


def required(is_empty: Predicate[T] = is_zero) -> Rule[T]:
    """Fail with ``required`` when ``is_empty(value)`` holds."""
    def check(value: T) -> Error | None:
        return builders.required() if is_empty(value) else None
    return check


def required_zeroable() -> Rule[T]:
    """Fail with ``required`` when the value's own ``is_zero()`` returns true."""
    return required(lambda value: bool(value.is_zero()))


def not_zero(is_empty: Predicate[T] = is_zero) -> Rule[T]:
    """Fail with ``zero`` when ``is_empty(value)`` holds."""
    def check(value: T) -> Error | None:
        return builders.zero() if is_empty(value) else None
    return check


# ============================================================================
# Membership
# ============================================================================

def one_of(*allowed: H) -> Rule[H]:
    """Value must be one of ``allowed``."""
    allowed_set = frozenset(allowed)

    def check(value: H) -> Error | None:
        return None if value in allowed_set else builders.not_allowed(value)
    return check


def not_one_of(*disallowed: H) -> Rule[H]:
    """Value must not be one of ``disallowed``."""
    disallowed_set = frozenset(disallowed)

    def check(value: H) -> Error | None:
        return builders.disallowed(value) if value in disallowed_set else None
    return check
