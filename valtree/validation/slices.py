"""Slice Validation

Whole-sequence rules and element-wise rules for lists and tuples. A slice
rule receives the entire sequence and returns an ``Errors`` list whose field
paths are relative to the sequence (an element index, or empty).
"""
from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import Callable, TypeVar

from valtree.errors import Errors, builders
from .base import Validator
from .rules import Rule, apply_rules

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

SliceRule = Callable[[Sequence[T]], Errors]


@dataclass(frozen=True, slots=True)
class SliceValidator(Validator[Sequence[T]]):
    """Validator for sequences of values.

    Rules run in the order given. A fatal error from any rule stops the
    remaining rules for this sequence.
    """
    rules: tuple[SliceRule[T], ...]

    def __init__(self, *rules: SliceRule[T]):
        object.__setattr__(self, "rules", tuple(rules))

    def validate_with_prefix(self, values: Sequence[T], prefix: str) -> Errors:
        out = Errors()
        for rule in self.rules:
            for error in rule(values):
                out.append(error.prefixed(prefix))
                if error.fatal:
                    return out
        return out


# ============================================================================
# Length
# ============================================================================

def min_length(minimum: int) -> SliceRule[T]:
    def check(values: Sequence[T]) -> Errors:
        if len(values) < minimum:
            return Errors([builders.below_min(minimum, len(values))])
        return Errors()
    return check


def max_length(maximum: int) -> SliceRule[T]:
    def check(values: Sequence[T]) -> Errors:
        if len(values) > maximum:
            return Errors([builders.above_max(maximum, len(values))])
        return Errors()
    return check


def length(expected: int) -> SliceRule[T]:
    def check(values: Sequence[T]) -> Errors:
        if len(values) != expected:
            return Errors([builders.wrong_length(expected, len(values))])
        return Errors()
    return check


def length_between(minimum: int, maximum: int) -> SliceRule[T]:
    """Length within ``[minimum, maximum]`` inclusive."""
    def check(values: Sequence[T]) -> Errors:
        if not minimum <= len(values) <= maximum:
            return Errors([builders.out_of_range(minimum, maximum, len(values))])
        return Errors()
    return check


# ============================================================================
# Elements
# ============================================================================

def for_each(*rules: Rule[T]) -> SliceRule[T]:
    """Apply ``rules`` to every element in index order.

    Errors are tagged with the element index. A fatal error stops the whole
    iteration; no further elements are checked.
    """
    def check(values: Sequence[T]) -> Errors:
        errors = Errors()
        for i, value in enumerate(values):
            for rule in rules:
                if (error := rule(value)) is None:
                    continue
                errors.append(error.with_field(str(i)))
                if error.fatal:
                    return errors
        return errors
    return check


def at_index(index: int, *rules: Rule[T]) -> SliceRule[T]:
    """Apply ``rules`` to the element at ``index``.

    An out-of-range index (negative or past the end) yields an ``index``
    error instead of raising.
    """
    def check(values: Sequence[T]) -> Errors:
        if index < 0 or index >= len(values):
            return Errors([builders.index_out_of_range(index)])
        return Errors(apply_rules(rules, values[index], str(index)))
    return check


def unique() -> SliceRule[H]:
    """Elements must be distinct; the first repeated index is reported."""
    def check(values: Sequence[H]) -> Errors:
        seen: set[H] = set()
        for i, value in enumerate(values):
            if value in seen:
                return builders.new_errors(str(i), "unique")
            seen.add(value)
        return Errors()
    return check


def contains(expected: T) -> SliceRule[T]:
    def check(values: Sequence[T]) -> Errors:
        if expected in values:
            return Errors()
        return builders.new_errors("", "contains", {"value": expected})
    return check


def one_of(*allowed: H) -> SliceRule[H]:
    """Every element must be one of ``allowed``; the first offender is reported."""
    allowed_set = frozenset(allowed)

    def check(values: Sequence[H]) -> Errors:
        for i, value in enumerate(values):
            if value not in allowed_set:
                return Errors([builders.not_allowed(value, field=str(i))])
        return Errors()
    return check


def not_one_of(*disallowed: H) -> SliceRule[H]:
    """No element may be one of ``disallowed``; the first offender is reported."""
    disallowed_set = frozenset(disallowed)

    def check(values: Sequence[H]) -> Errors:
        for i, value in enumerate(values):
            if value in disallowed_set:
                return Errors([builders.disallowed(value, field=str(i))])
        return Errors()
    return check
