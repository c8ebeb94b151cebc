"""Validation Error Types

Errors are values, not exceptions: every rule failure is recovered locally
into an ``Error`` and appended to an ``Errors`` list. Field paths are built
bottom-up by joining segments with ``.`` as errors propagate toward the root.

The Result type is used at system boundaries to hand a validated value or
the collected failures back to the caller without raising.
"""
from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field, replace
from enum import Enum
from typing import Any, Callable, Generic, Iterable, Iterator, NoReturn, TypeVar, Union, final

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class ErrorCode(str, Enum):
    """Built-in failure codes.

    Structural codes signal a shape mismatch, constraint codes a value that
    exists but violates a rule, and combinator codes are synthesized by rule
    combinators. Leaf rule authors may use any other non-empty string.
    """
    # Structural
    NOT_FOUND = "not_found"
    INDEX = "index"

    # Constraint
    REQUIRED = "required"
    ZERO = "zero"
    NOT_EMPTY = "not_empty"
    MIN = "min"
    MAX = "max"
    BETWEEN = "between"
    LENGTH = "length"
    ONE_OF = "one_of"
    NOT_ONE_OF = "not_one_of"
    UNIQUE = "unique"
    CONTAINS = "contains"
    REGEX = "regex"
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NON_NEGATIVE = "non_negative"
    NON_POSITIVE = "non_positive"
    BEFORE = "before"
    AFTER = "after"

    # Combinator
    NOT = "not"

    @property
    def category(self) -> str:
        if self in (ErrorCode.NOT_FOUND, ErrorCode.INDEX):
            return "structural"
        if self is ErrorCode.NOT:
            return "combinator"
        return "constraint"

    @classmethod
    def category_of(cls, code: str) -> str:
        """Category for any code string; unknown codes are ``custom``."""
        try:
            return cls(code).category
        except ValueError:
            return "custom"


@dataclass(frozen=True, slots=True)
class Error:
    """A single validation failure.

    - code: failure kind, never empty
    - field: dotted path from the validation root, empty for "this value"
    - params: formatting parameters, e.g. ``{"min": 5, "actual": 3}``
    - fatal: stop the current rule chain or iteration after this error
    """
    code: str
    field: str = ""
    params: dict[str, Any] = dataclass_field(default_factory=dict)
    fatal: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.code, Enum):
            object.__setattr__(self, "code", self.code.value)
        if not self.code:
            raise ValueError("Error code must not be empty")

    def with_field(self, path: str) -> Error:
        """Copy with the field path replaced."""
        return self if path == self.field else replace(self, field=path)

    def prefixed(self, prefix: str) -> Error:
        """Copy with ``prefix`` joined in front of the current field path."""
        return self.with_field(join_field(prefix, self.field))

    def as_fatal(self) -> Error:
        return self if self.fatal else replace(self, fatal=True)

    @property
    def category(self) -> str:
        return ErrorCode.category_of(self.code)

    def describe(self) -> str:
        """Render as ``code (field: path) {k: v, ...}`` with params sorted by key."""
        parts = [self.code]
        if self.field:
            parts.append(f" (field: {self.field})")
        if self.params:
            rendered = ", ".join(f"{k}: {self.params[k]}" for k in sorted(self.params))
            parts.append(f" {{{rendered}}}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "code": self.code, "params": dict(self.params), "fatal": self.fatal}

    def __str__(self) -> str:
        return self.describe()


class Errors(list[Error]):
    """Ordered collection of validation errors.

    Insertion order is evaluation order. Duplicates are kept. An empty
    ``Errors`` is falsy, so ``if errors:`` reads as "validation failed".
    """

    def has_errors(self) -> bool:
        return len(self) > 0

    def has_fatal_errors(self) -> bool:
        return any(e.fatal for e in self)

    def format(self, formatter: Callable[[Error], str], separator: str) -> str:
        """Render each error with ``formatter`` and join with ``separator``."""
        if not self:
            return ""
        if len(self) == 1:
            return formatter(self[0])
        return separator.join(formatter(e) for e in self)

    def describe(self, separator: str | None = None) -> str:
        if separator is None:
            from valtree.config import get_settings
            separator = get_settings().ERROR_SEPARATOR
        return self.format(Error.describe, separator)

    def prefixed(self, prefix: str) -> Errors:
        """New collection with every field path joined onto ``prefix``."""
        return Errors(e.prefixed(prefix) for e in self)

    @property
    def first_error(self) -> Error | None:
        return self[0] if self else None

    @property
    def field_errors(self) -> dict[str, list[Error]]:
        """Group errors by field path."""
        result: dict[str, list[Error]] = {}
        for e in self:
            result.setdefault(e.field, []).append(e)
        return result

    def get_errors_for_field(self, path: str) -> list[Error]:
        return [e for e in self if e.field == path]

    def codes(self) -> list[str]:
        return [e.code for e in self]

    def to_list(self) -> list[dict[str, Any]]:
        return [e.to_dict() for e in self]

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"Errors({list.__repr__(self)})"


def join_field(base: str, child: str) -> str:
    """Join two field paths with ``.``; an empty side yields the other."""
    if not base:
        return child
    if not child:
        return base
    return f"{base}.{child}"


def collect(errors: Iterable[Error]) -> Errors:
    return errors if isinstance(errors, Errors) else Errors(errors)


# =============================================================================
# Result
# =============================================================================

@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Called unwrap_err on Ok: {self.value!r}")

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], F]) -> Ok[T]:
        return self

    def and_then(self, f: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        return f(self.value)

    def match(self, ok: Callable[[T], U], err: Callable[[Any], U]) -> U:
        return ok(self.value)

    def __iter__(self) -> Iterator[T]:
        yield self.value


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable[[Any], U]) -> Err[E]:
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def and_then(self, f: Callable[[Any], Result[U, E]]) -> Err[E]:
        return self

    def match(self, ok: Callable[[Any], U], err: Callable[[E], U]) -> U:
        return err(self.error)

    def __iter__(self) -> Iterator[Any]:
        return iter([])


Result = Union[Ok[T], Err[E]]
