"""Validator base class.

Anything exposing ``validate_with_prefix(value, prefix)`` can be nested
inside another validator. Each concrete validator is bound to one input type
and holds only configuration captured at construction time.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from valtree.errors import Errors

T = TypeVar("T")


class Validator(ABC, Generic[T]):
    """Validates a whole value and reports path-qualified errors."""

    __slots__ = ()

    @abstractmethod
    def validate_with_prefix(self, value: T, prefix: str) -> Errors:
        """Validate ``value``, joining every error field onto ``prefix``."""

    def validate(self, value: T) -> Errors:
        return self.validate_with_prefix(value, "")
