"""Utility functions."""

from bloomwell.utils.parsing import (
    ValidationFailed,
    parse_date,
    parse_datetime,
    parse_int,
)
from bloomwell.utils.response import (
    conflict,
    error_response,
    not_found,
    success_response,
    validation_error,
)

__all__ = [
    "success_response",
    "error_response",
    "not_found",
    "conflict",
    "validation_error",
    "ValidationFailed",
    "parse_int",
    "parse_date",
    "parse_datetime",
]
