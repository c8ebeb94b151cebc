"""Composable Validation

Rules are pure functions ``value -> Error | None``. Validators compose rules
over sequences, mappings and records and return every failure as a
path-qualified ``Error`` instead of raising at the first one.

Key Features:
- Rule combinators: negate, stop_on_error, or_, when, unless
- Slice, map and struct validators that nest to any depth
- Dotted field paths built as errors propagate ("Company.Address.Street")
- Fatal errors that end only the current rule chain or iteration
- Boundary helpers returning a Result or raising ValidationFailed

Usage:
    from valtree.validation import (
        StructValidator, field, slice_field, map_field,
        required, numbers, strings, slices, maps,
    )

    user = StructValidator(
        field("Name", lambda u: u.name, required(), strings.max_length(50)),
        field("Age", lambda u: u.age, numbers.min(18)),
        slice_field("Tags", lambda u: u.tags, slices.for_each(strings.not_empty())),
        map_field("Settings", lambda u: u.settings, maps.max_keys(5)),
    )

    errors = user.validate(record)
    if errors:
        print(errors.describe())
"""

from . import maps, numbers, slices, strings, times

from .base import Validator

from .rules import (
    Rule,
    Predicate,
    # Combinators
    negate,
    stop_on_error,
    or_,
    when,
    unless,
    apply_rules,
    # Emptiness
    is_zero,
    required,
    required_zeroable,
    not_zero,
    # Membership
    one_of,
    not_one_of,
)

from .slices import SliceRule, SliceValidator
from .maps import EntryRule, MapRule, MapValidator

from .structs import (
    StructValidator,
    FieldAccessor,
    field,
    struct_field,
    slice_field,
    map_field,
    item,
)

from .boundaries import (
    ValidationFailed,
    ErrorDetail,
    ErrorReport,
    check,
    ensure_valid,
)

__all__ = [
    # Rule modules
    "maps",
    "numbers",
    "slices",
    "strings",
    "times",
    # Core
    "Validator",
    "Rule",
    "Predicate",
    # Combinators
    "negate",
    "stop_on_error",
    "or_",
    "when",
    "unless",
    "apply_rules",
    # Emptiness
    "is_zero",
    "required",
    "required_zeroable",
    "not_zero",
    # Membership
    "one_of",
    "not_one_of",
    # Containers
    "SliceRule",
    "SliceValidator",
    "EntryRule",
    "MapRule",
    "MapValidator",
    # Structs
    "StructValidator",
    "FieldAccessor",
    "field",
    "struct_field",
    "slice_field",
    "map_field",
    "item",
    # Boundaries
    "ValidationFailed",
    "ErrorDetail",
    "ErrorReport",
    "check",
    "ensure_valid",
]
