"""Common exceptions for the filter-control-mcp package."""

from typing import Optional


class FilterControlError(Exception):
    """Base class for filter control errors."""


class InvalidFilterError(FilterControlError):
    """Raised when an applied filter or filter definition is malformed."""

    def __init__(self, message: str, errors: Optional[list[str]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class TranslationError(FilterControlError):
    """Raised when a translation cannot be produced."""

    def __init__(self, message: str, key: str) -> None:
        super().__init__(message)
        self.key = key


class MissingTranslationError(TranslationError):
    """Raised when a translation key is not in the catalog."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Missing translation for key: {key}", key)


class MissingReplacementError(TranslationError):
    """Raised when a translation placeholder has no replacement value."""

    def __init__(self, key: str, placeholder: str) -> None:
        super().__init__(f"No replacement found for '{placeholder}' in translation {key}", key)
        self.placeholder = placeholder
