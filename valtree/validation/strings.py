"""String rules. Lengths are counted in code points, not bytes."""
from __future__ import annotations

import re

from valtree.errors import Error, ErrorCode, builders
from .rules import Rule


def not_empty() -> Rule[str]:
    def check(value: str) -> Error | None:
        return Error(ErrorCode.NOT_EMPTY) if value == "" else None
    return check


def min_length(minimum: int) -> Rule[str]:
    def check(value: str) -> Error | None:
        if (n := len(value)) < minimum:
            return builders.below_min(minimum, n)
        return None
    return check


def max_length(maximum: int) -> Rule[str]:
    def check(value: str) -> Error | None:
        if (n := len(value)) > maximum:
            return builders.above_max(maximum, n)
        return None
    return check


def length_between(minimum: int, maximum: int) -> Rule[str]:
    def check(value: str) -> Error | None:
        if not minimum <= (n := len(value)) <= maximum:
            return builders.out_of_range(minimum, maximum, n)
        return None
    return check


def matches_regex(pattern: str, flags: int = 0) -> Rule[str]:
    """Value must contain a match for ``pattern`` (``re.search`` semantics).

    The pattern is compiled once; an invalid pattern raises ``re.error`` here.
    """
    compiled = re.compile(pattern, flags)

    def check(value: str) -> Error | None:
        if compiled.search(value) is None:
            return Error(ErrorCode.REGEX, params={"pattern": pattern})
        return None
    return check


def contains(substring: str) -> Rule[str]:
    def check(value: str) -> Error | None:
        if substring not in value:
            return Error(ErrorCode.CONTAINS, params={"substring": substring})
        return None
    return check
