"""Constants and configuration for filter label resolution."""

# Translation keys
DATE_SELECTOR_LABEL_PREFIX = "ResourceList.DateSelector.FilterLabelForValue"
ON_OR_BEFORE_KEY = f"{DATE_SELECTOR_LABEL_PREFIX}.on_or_before"
ON_OR_AFTER_KEY = f"{DATE_SELECTOR_LABEL_PREFIX}.on_or_after"
SEARCH_FIELD_LABEL_KEY = "ResourceList.FilterControl.textFieldLabel"

# Relative date values that carry their own translated label
DATE_SELECTOR_VALUES = [
    "past_week",
    "past_month",
    "past_quarter",
    "past_year",
    "coming_week",
    "coming_month",
    "coming_quarter",
    "coming_year",
]

# Locale configuration
DEFAULT_LOCALE = "en"
FALLBACK_LOCALE = "en"

# Short date patterns by locale, filled with day/month/year of the parsed date
SHORT_DATE_FORMATS = {
    "en": "{month}/{day}/{year}",
    "fr": "{day:02d}/{month:02d}/{year}",
}

# Environment variables read by the server
ENV_LOCALE = "FILTER_CONTROL_LOCALE"
ENV_CATALOG_PATH = "FILTER_CONTROL_CATALOG_PATH"

# Server metadata
SERVER_NAME = "filter-control-mcp"
SERVER_VERSION = "1.0.0"
