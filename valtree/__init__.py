"""valtree - composable, path-reporting validation for in-memory data."""

__version__ = "0.1.0"

from valtree.config import Settings, get_settings
from valtree.errors import Error, ErrorCode, Errors, Err, Ok, Result, join_field, new_errors
from valtree.logging import configure_logging, get_logger, bind_context, clear_context, unbind_context
from valtree.validation import (
    FieldAccessor,
    MapValidator,
    SliceValidator,
    StructValidator,
    ValidationFailed,
    Validator,
    check,
    ensure_valid,
    field,
    map_field,
    maps,
    negate,
    not_one_of,
    not_zero,
    numbers,
    one_of,
    or_,
    required,
    slice_field,
    slices,
    stop_on_error,
    strings,
    struct_field,
    times,
    unless,
    when,
)

__all__ = [
    "__version__",
    # Config
    "Settings",
    "get_settings",
    # Errors
    "Error",
    "ErrorCode",
    "Errors",
    "Err",
    "Ok",
    "Result",
    "join_field",
    "new_errors",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "unbind_context",
    # Validation
    "Validator",
    "SliceValidator",
    "MapValidator",
    "StructValidator",
    "FieldAccessor",
    "field",
    "struct_field",
    "slice_field",
    "map_field",
    "negate",
    "stop_on_error",
    "or_",
    "when",
    "unless",
    "required",
    "not_zero",
    "one_of",
    "not_one_of",
    "maps",
    "numbers",
    "slices",
    "strings",
    "times",
    "ValidationFailed",
    "check",
    "ensure_valid",
]
