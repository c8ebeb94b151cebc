"""Struct Validation

A struct validator is an ordered list of field accessors over one record
type. Each accessor extracts a sub-value with its getter and hands it either
to a scalar rule chain or to a nested validator, then prefixes the resulting
error paths with its own name.

Every field is always attempted: a fatal error only ends the rule chain of
the field that produced it.

Usage:
    employee = StructValidator(
        field("Name", lambda e: e.name, required()),
        struct_field("Company", lambda e: e.company, StructValidator(
            field("Name", lambda c: c.name, required()),
        )),
        slice_field("Tags", lambda e: e.tags, slices.max_length(5)),
    )
    errors = employee.validate(record)
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable, Generic, TypeVar

from valtree.errors import Errors
from .base import Validator
from .maps import MapRule, MapValidator
from .rules import Rule, apply_rules
from .slices import SliceRule, SliceValidator

P = TypeVar("P")
F = TypeVar("F")
E = TypeVar("E")
K = TypeVar("K")
V = TypeVar("V")

Getter = Callable[[P], F]


@dataclass(frozen=True, slots=True)
class StructValidator(Validator[P]):
    """Validator for a record type, composed of field validators."""
    fields: tuple[Validator[P], ...]

    def __init__(self, *fields: Validator[P]):
        object.__setattr__(self, "fields", tuple(fields))

    def validate_with_prefix(self, value: P, prefix: str) -> Errors:
        out = Errors()
        for field_validator in self.fields:
            out.extend(field_validator.validate_with_prefix(value, prefix))
        return out


@dataclass(frozen=True, slots=True)
class FieldAccessor(Validator[P], Generic[P, F]):
    """Named field of a record, backed by a rule chain or a nested validator."""
    name: str
    getter: Getter[P, F]
    rules: tuple[Rule[F], ...] = ()
    inner: Validator[F] | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Field name must not be empty")
        if self.rules and self.inner is not None:
            raise ValueError(f"Field {self.name!r} takes either rules or a nested validator, not both")

    def path(self, prefix: str) -> str:
        return f"{prefix}.{self.name}" if prefix else self.name

    def validate_with_prefix(self, parent: P, prefix: str) -> Errors:
        field_path = self.path(prefix)
        value = self.getter(parent)

        if self.inner is not None:
            return self.inner.validate_with_prefix(value, "").prefixed(field_path)

        return Errors(apply_rules(self.rules, value, field_path))


def _resolve(getter: Getter[P, F] | str) -> Getter[P, F]:
    return attrgetter(getter) if isinstance(getter, str) else getter


# ============================================================================
# Builders
# ============================================================================

def field(name: str, getter: Getter[P, F] | str, *rules: Rule[F]) -> FieldAccessor[P, F]:
    """Field validated by a scalar rule chain.

    ``getter`` may be a callable or a dotted attribute name.
    """
    return FieldAccessor(name, _resolve(getter), rules=tuple(rules))


def struct_field(name: str, getter: Getter[P, F] | str, validator: Validator[F]) -> FieldAccessor[P, F]:
    """Field validated by a nested validator (struct, slice, or map)."""
    return FieldAccessor(name, _resolve(getter), inner=validator)


def slice_field(name: str, getter: Getter[P, Sequence[E]] | str, *rules: SliceRule[E]) -> FieldAccessor[P, Sequence[E]]:
    return FieldAccessor(name, _resolve(getter), inner=SliceValidator(*rules))


def map_field(name: str, getter: Getter[P, Mapping[K, V]] | str, *rules: MapRule[K, V]) -> FieldAccessor[P, Mapping[K, V]]:
    return FieldAccessor(name, _resolve(getter), inner=MapValidator(*rules))


def item(key: Any) -> Getter[Mapping[Any, F], F]:
    """Getter reading ``record[key]``, for records held as plain dicts."""
    return lambda record: record[key]
