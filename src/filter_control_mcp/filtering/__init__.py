"""
Filter Control Filtering Module

This module reconciles the filters applied to a resource list and resolves the
labels they are displayed with.

Key Components:
- FilterLibrary: Catalog of filter definitions and key lookup
- FilterManager: Applied filter add/remove with change notification
- resolve_label: Display label of an applied filter
- Filter types: select, date selector, text field filters

Usage:
    from filter_control_mcp.filtering import AppliedFilter, FilterManager

    manager = FilterManager(library, on_filters_change=save)
    manager.handle_add_filter(applied_filters, AppliedFilter("status", "open"))
"""

from .filter_library import (
    FilterDefinition,
    FilterLibrary,
    FilterType,
    LabeledOption,
    PlainOption,
    find_definition,
    option_label,
    option_value,
)
from .filter_manager import (
    AdditionalAction,
    AppliedFilter,
    AppliedFilterTag,
    FilterManager,
    add_filter,
    derive_disabled,
    id_from_filter,
    remove_filter,
)
from .labels import format_date_for_display, resolve_label, search_field_label

__version__ = "1.0.0"
__all__ = [
    "AdditionalAction",
    "AppliedFilter",
    "AppliedFilterTag",
    "FilterDefinition",
    "FilterLibrary",
    "FilterManager",
    "FilterType",
    "LabeledOption",
    "PlainOption",
    "add_filter",
    "derive_disabled",
    "find_definition",
    "format_date_for_display",
    "id_from_filter",
    "option_label",
    "option_value",
    "remove_filter",
    "resolve_label",
    "search_field_label",
]
