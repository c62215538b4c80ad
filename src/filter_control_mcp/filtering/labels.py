"""
Label resolution for applied filters.

An applied filter is displayed as ``"<definition label> <operator text> <value label>"``.
The value label depends on the kind of the governing definition: select
filters show the matching option label, date selector filters show a
translated relative-date phrase or an "on or before" / "on or after" phrase
for the edges of a date range. Any other filter shows its raw value.
"""

import logging
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from dateutil import parser as date_parser

from ..constants import (
    DATE_SELECTOR_LABEL_PREFIX,
    DEFAULT_LOCALE,
    ON_OR_AFTER_KEY,
    ON_OR_BEFORE_KEY,
    SEARCH_FIELD_LABEL_KEY,
    SHORT_DATE_FORMATS,
)
from ..exceptions import MissingReplacementError
from .filter_library import FilterDefinition, FilterType, find_definition, option_label, option_value

if TYPE_CHECKING:
    from .filter_manager import AppliedFilter

logger = logging.getLogger(__name__)

TranslateFn = Callable[..., str]
KeyExistsFn = Callable[[str], bool]


def format_date_for_display(raw: str, locale: str = DEFAULT_LOCALE) -> str:
    """Format a date value for display in a filter label.

    ``raw`` is parsed once to check that it is a date at all; values that do
    not parse are returned unchanged. Valid values are parsed again with
    dashes replaced by slashes so a bare ``YYYY-MM-DD`` reads as a calendar
    date rather than a UTC instant, then rendered in the locale's short form.
    """
    try:
        date_parser.parse(raw)
    except (ValueError, OverflowError, TypeError):
        return raw

    try:
        parsed = date_parser.parse(raw.replace("-", "/"))
    except (ValueError, OverflowError):
        logger.debug(f"Date {raw!r} is not parseable with slash separators")
        return raw

    date_format = SHORT_DATE_FORMATS.get(locale, SHORT_DATE_FORMATS[DEFAULT_LOCALE])
    return date_format.format(day=parsed.day, month=parsed.month, year=parsed.year)


def _select_label(definition: FilterDefinition, value: str) -> Optional[str]:
    for option in definition.options:
        if option_value(option) == value:
            return option_label(option)
    return None


def _date_selector_label(
    definition: FilterDefinition,
    applied_filter: "AppliedFilter",
    translate: TranslateFn,
    translation_key_exists: KeyExistsFn,
    locale: str,
) -> Optional[str]:
    if definition.key == applied_filter.key:
        label_key = f"{DATE_SELECTOR_LABEL_PREFIX}.{applied_filter.value}"
        if translation_key_exists(label_key):
            try:
                return translate(label_key, {})
            except MissingReplacementError:
                # Range phrases such as on_or_before need a date
                logger.debug(f"Translation {label_key} needs replacements, showing raw value")
        return applied_filter.value

    if applied_filter.key == definition.max_key:
        return translate(ON_OR_BEFORE_KEY, {"date": format_date_for_display(applied_filter.value, locale)})

    if applied_filter.key == definition.min_key:
        return translate(ON_OR_AFTER_KEY, {"date": format_date_for_display(applied_filter.value, locale)})

    return None


def label_for_type(
    definition: FilterDefinition,
    applied_filter: "AppliedFilter",
    translate: TranslateFn,
    translation_key_exists: KeyExistsFn,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Value fragment of the label, chosen by the definition's kind."""
    if definition.type is FilterType.SELECT:
        label = _select_label(definition, applied_filter.value)
    elif definition.type is FilterType.DATE_SELECTOR:
        label = _date_selector_label(definition, applied_filter, translate, translation_key_exists, locale)
    elif definition.type in (FilterType.TEXT_FIELD, FilterType.OTHER):
        label = None
    else:
        raise AssertionError(f"Unhandled filter type: {definition.type}")

    if label is None:
        return applied_filter.value
    return label


def resolve_label(
    applied_filter: "AppliedFilter",
    catalog: Sequence[FilterDefinition],
    translate: TranslateFn,
    translation_key_exists: KeyExistsFn,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Compute the display label of an applied filter.

    Args:
        applied_filter: The filter to label
        catalog: Filter definitions in catalog order
        translate: ``translate(key, params)`` returning the translated string
        translation_key_exists: Whether a translation key is in the catalog
        locale: Locale used for date formatting

    Returns:
        The filter's own label when set, its raw value when no definition
        governs its key, otherwise the definition label, operator text and
        value label joined by single spaces
    """
    if applied_filter.label:
        return applied_filter.label

    definition = find_definition(catalog, applied_filter.key)
    if definition is None:
        logger.debug(f"No filter definition for key {applied_filter.key!r}")
        return applied_filter.value

    type_label = label_for_type(definition, applied_filter, translate, translation_key_exists, locale)
    # Fragments are joined positionally; a missing operator text leaves a double space
    return " ".join([definition.label, definition.operator_text or "", type_label])


def search_field_label(resource_name_plural: str, translate: TranslateFn) -> str:
    """Label and placeholder of the search text field."""
    return translate(SEARCH_FIELD_LABEL_KEY, {"resourceNamePlural": resource_name_plural.lower()})
