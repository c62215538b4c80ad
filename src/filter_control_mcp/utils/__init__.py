"""Utility modules for filter control operations."""

from .decorators import error_response, handle_filter_errors
from .validators import (
    validate_applied_filter,
    validate_applied_filters,
    validate_filter_definition,
    validate_filter_key,
)

__all__ = [
    "error_response",
    "handle_filter_errors",
    "validate_applied_filter",
    "validate_applied_filters",
    "validate_filter_definition",
    "validate_filter_key",
]
