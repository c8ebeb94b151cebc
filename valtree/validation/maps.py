"""Map Validation

Mirrors slice validation over key/value pairs. Entry-wise errors are tagged
with ``str(key)``. Iteration follows the mapping's own order; callers must not
rely on it for anything beyond determinism of a single call.
"""
from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from valtree.errors import Error, Errors, builders
from .base import Validator
from .rules import Rule, apply_rules

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
H = TypeVar("H", bound=Hashable)

MapRule = Callable[[Mapping[K, V]], Errors]
EntryRule = Callable[[K, V], Optional[Error]]


@dataclass(frozen=True, slots=True)
class MapValidator(Validator[Mapping[K, V]]):
    """Validator for mappings.

    Rules run in the order given. A fatal error from any rule stops the
    remaining rules for this mapping.
    """
    rules: tuple[MapRule[K, V], ...]

    def __init__(self, *rules: MapRule[K, V]):
        object.__setattr__(self, "rules", tuple(rules))

    def validate_with_prefix(self, values: Mapping[K, V], prefix: str) -> Errors:
        out = Errors()
        for rule in self.rules:
            for error in rule(values):
                out.append(error.prefixed(prefix))
                if error.fatal:
                    return out
        return out


# ============================================================================
# Size
# ============================================================================

def min_keys(minimum: int) -> MapRule[K, V]:
    def check(values: Mapping[K, V]) -> Errors:
        if len(values) < minimum:
            return Errors([builders.below_min(minimum, len(values))])
        return Errors()
    return check


def max_keys(maximum: int) -> MapRule[K, V]:
    def check(values: Mapping[K, V]) -> Errors:
        if len(values) > maximum:
            return Errors([builders.above_max(maximum, len(values))])
        return Errors()
    return check


def length(expected: int) -> MapRule[K, V]:
    def check(values: Mapping[K, V]) -> Errors:
        if len(values) != expected:
            return Errors([builders.wrong_length(expected, len(values))])
        return Errors()
    return check


def length_between(minimum: int, maximum: int) -> MapRule[K, V]:
    """Key count within ``[minimum, maximum]`` inclusive."""
    def check(values: Mapping[K, V]) -> Errors:
        if not minimum <= len(values) <= maximum:
            return Errors([builders.out_of_range(minimum, maximum, len(values))])
        return Errors()
    return check


# ============================================================================
# Key and value sets
# ============================================================================

def keys_one_of(*allowed: K) -> MapRule[K, V]:
    allowed_set = frozenset(allowed)

    def check(values: Mapping[K, V]) -> Errors:
        for key in values:
            if key not in allowed_set:
                return Errors([builders.not_allowed(key)])
        return Errors()
    return check


def keys_not_one_of(*disallowed: K) -> MapRule[K, V]:
    disallowed_set = frozenset(disallowed)

    def check(values: Mapping[K, V]) -> Errors:
        for key in values:
            if key in disallowed_set:
                return Errors([builders.disallowed(key)])
        return Errors()
    return check


def values_one_of(*allowed: H) -> MapRule[K, H]:
    allowed_set = frozenset(allowed)

    def check(values: Mapping[K, H]) -> Errors:
        for value in values.values():
            if value not in allowed_set:
                return Errors([builders.not_allowed(value)])
        return Errors()
    return check


def values_not_one_of(*disallowed: H) -> MapRule[K, H]:
    disallowed_set = frozenset(disallowed)

    def check(values: Mapping[K, H]) -> Errors:
        for value in values.values():
            if value in disallowed_set:
                return Errors([builders.disallowed(value)])
        return Errors()
    return check


# ============================================================================
# Entries
# ============================================================================

def for_each(*rules: EntryRule[K, V]) -> MapRule[K, V]:
    """Apply entry rules to every ``(key, value)`` pair.

    Errors are tagged with ``str(key)``. A fatal error stops all further
    iteration, including over the remaining entries.
    """
    def check(values: Mapping[K, V]) -> Errors:
        errors = Errors()
        for key, value in values.items():
            for rule in rules:
                if (error := rule(key, value)) is None:
                    continue
                errors.append(error.with_field(str(key)))
                if error.fatal:
                    return errors
        return errors
    return check


def key(name: K, *rules: Rule[V]) -> MapRule[K, V]:
    """Apply a scalar rule chain to the value stored under ``name``.

    A missing key yields a single ``not_found`` error on the map itself.
    """
    def check(values: Mapping[K, V]) -> Errors:
        if name not in values:
            return Errors([builders.not_found(name)])
        return Errors(apply_rules(rules, values[name], str(name)))
    return check
