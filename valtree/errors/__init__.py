"""Validation Error Model

Key components:
- Error: one structured failure (code, field path, params, fatal flag)
- Errors: ordered failure list with formatting and fatal checks
- ErrorCode: built-in code taxonomy (structural, constraint, combinator)
- Result[T, E]: Ok/Err container used at system boundaries
- Builder functions: constructors for the built-in failures

Usage:
    from valtree.errors import Error, Errors, new_errors

    def even(n: int) -> Error | None:
        if n % 2:
            return Error("even", params={"actual": n})
        return None
"""
from .types import (
    Error,
    Errors,
    ErrorCode,
    Result,
    Ok,
    Err,
    join_field,
    collect,
)

from .builders import (
    new_errors,
    no_errors,
    not_found,
    index_out_of_range,
    required,
    zero,
    below_min,
    above_max,
    out_of_range,
    wrong_length,
    not_allowed,
    disallowed,
    negated,
)

__all__ = [
    # Core types
    "Error",
    "Errors",
    "ErrorCode",
    "Result",
    "Ok",
    "Err",
    "join_field",
    "collect",
    # Builders
    "new_errors",
    "no_errors",
    "not_found",
    "index_out_of_range",
    "required",
    "zero",
    "below_min",
    "above_max",
    "out_of_range",
    "wrong_length",
    "not_allowed",
    "disallowed",
    "negated",
]
