"""Unit tests for applied filter label resolution."""

from unittest.mock import Mock, patch

import pytest

from filter_control_mcp.constants import ON_OR_AFTER_KEY, ON_OR_BEFORE_KEY
from filter_control_mcp.filtering import (
    AppliedFilter,
    FilterDefinition,
    FilterType,
    format_date_for_display,
    option_label,
    resolve_label,
    search_field_label,
)
from filter_control_mcp.i18n import Translator


@pytest.fixture
def translator():
    return Translator("en")


@pytest.fixture
def catalog():
    """Catalog with one definition of each kind."""
    return [
        FilterDefinition(
            key="status",
            label="Status",
            operator_text="is",
            type=FilterType.SELECT,
            options=({"value": "open", "label": "Open"}, {"value": "archived", "label": "Archived"}),
        ),
        FilterDefinition(key="type", label="Type", type=FilterType.SELECT, options=("small", "large")),
        FilterDefinition(
            key="createdAt",
            label="Created",
            type=FilterType.DATE_SELECTOR,
            min_key="createdAtMin",
            max_key="createdAtMax",
        ),
        FilterDefinition(key="tag", label="Tagged with", type=FilterType.TEXT_FIELD),
    ]


def label(applied_filter, catalog, translator):
    return resolve_label(applied_filter, catalog, translator.translate, translator.translation_key_exists)


class TestFormatDateForDisplay:
    """Test date formatting for range labels."""

    def test_iso_date(self):
        assert format_date_for_display("2020-01-15") == "1/15/2020"

    def test_slash_date(self):
        """Test that dates without dashes are reformatted too."""
        assert format_date_for_display("2020/01/15") == "1/15/2020"

    def test_unparseable_passthrough(self):
        assert format_date_for_display("not-a-date") == "not-a-date"

    def test_empty_passthrough(self):
        assert format_date_for_display("") == ""

    def test_french_locale(self):
        assert format_date_for_display("2020-01-15", locale="fr") == "15/01/2020"

    def test_unknown_locale_uses_default(self):
        assert format_date_for_display("2020-01-15", locale="xx") == "1/15/2020"


class TestResolveLabel:
    """Test label resolution by filter kind."""

    def test_label_override(self, catalog, translator):
        """Test that an explicit label wins regardless of the catalog."""
        assert label(AppliedFilter("status", "open", label="Custom"), catalog, translator) == "Custom"
        assert label(AppliedFilter("unknown", "x", label="Custom"), [], translator) == "Custom"

    def test_empty_label_is_not_an_override(self, catalog, translator):
        assert label(AppliedFilter("status", "open", label=""), catalog, translator) == "Status is Open"

    def test_unmatched_key_returns_value(self, catalog, translator):
        assert label(AppliedFilter("vendor", "Acme"), catalog, translator) == "Acme"

    def test_select_labeled_option(self, catalog, translator):
        assert label(AppliedFilter("status", "archived"), catalog, translator) == "Status is Archived"

    def test_select_plain_option(self, catalog, translator):
        """Test plain options, including the double space left by missing operator text."""
        assert label(AppliedFilter("type", "small"), catalog, translator) == "Type  small"

    def test_select_unknown_option_returns_value(self, catalog, translator):
        assert label(AppliedFilter("status", "draft"), catalog, translator) == "Status is draft"

    def test_date_selector_relative_value(self, catalog, translator):
        assert label(AppliedFilter("createdAt", "past_week"), catalog, translator) == "Created  in the last week"

    @pytest.mark.parametrize("value", ["on_or_before", "on_or_after"])
    def test_date_selector_range_phrase_as_value(self, catalog, translator, value):
        """Test that a value naming a phrase that needs a date shows the raw value."""
        assert label(AppliedFilter("createdAt", value), catalog, translator) == f"Created  {value}"

    def test_select_uses_option_helpers(self):
        """Test select resolution through the option normalization helpers."""
        catalog = [
            FilterDefinition(
                key="size", label="Size", type=FilterType.SELECT, options=("s", {"value": "l", "label": "Large"})
            )
        ]
        with patch("filter_control_mcp.filtering.labels.option_label", wraps=option_label) as wrapped_label:
            result = resolve_label(AppliedFilter("size", "l"), catalog, Mock(), Mock())
        wrapped_label.assert_called_once()
        assert result == "Size  Large"

    def test_date_selector_untranslated_value(self, catalog, translator):
        assert label(AppliedFilter("createdAt", "yesterday"), catalog, translator) == "Created  yesterday"

    def test_date_selector_on_or_before(self, catalog, translator):
        assert label(AppliedFilter("createdAtMax", "2020-01-15"), catalog, translator) == "Created  before 1/15/2020"

    def test_date_selector_on_or_after(self, catalog, translator):
        assert label(AppliedFilter("createdAtMin", "2020-01-15"), catalog, translator) == "Created  after 1/15/2020"

    def test_date_selector_unparseable_edge(self, catalog, translator):
        assert label(AppliedFilter("createdAtMin", "someday"), catalog, translator) == "Created  after someday"

    def test_range_edge_translation_params(self):
        """Test the translation key and params used for range edges."""
        catalog = [FilterDefinition(key="date", label="Date", type=FilterType.DATE_SELECTOR, max_key="before")]
        translate = Mock(return_value="on or before 1/15/2020")
        key_exists = Mock(return_value=False)

        result = resolve_label(AppliedFilter("before", "2020-01-15"), catalog, translate, key_exists)

        translate.assert_called_once_with(ON_OR_BEFORE_KEY, {"date": "1/15/2020"})
        key_exists.assert_not_called()
        assert result == "Date  on or before 1/15/2020"

    def test_range_uses_min_key_translation(self):
        catalog = [FilterDefinition(key="date", label="Date", type=FilterType.DATE_SELECTOR, min_key="after")]
        translate = Mock(return_value="x")
        resolve_label(AppliedFilter("after", "not-a-date"), catalog, translate, Mock())
        translate.assert_called_once_with(ON_OR_AFTER_KEY, {"date": "not-a-date"})

    def test_other_kinds_return_value(self, catalog, translator):
        assert label(AppliedFilter("tag", "vip"), catalog, translator) == "Tagged with  vip"

    def test_first_definition_wins(self, translator):
        """Test that the first definition claiming a key is used."""
        catalog = [
            FilterDefinition(key="a", label="First", type=FilterType.DATE_SELECTOR, max_key="shared"),
            FilterDefinition(key="shared", label="Second", type=FilterType.OTHER),
        ]
        assert label(AppliedFilter("shared", "2020-01-15"), catalog, translator) == "First  before 1/15/2020"

    def test_min_max_only_match_for_range_definitions(self, translator):
        """Test that a definition without range keys matches on its key alone."""
        catalog = [FilterDefinition(key="date", label="Date", type=FilterType.DATE_SELECTOR)]
        assert label(AppliedFilter("dateMax", "2020-01-15"), catalog, translator) == "2020-01-15"


def test_search_field_label(translator):
    """Test that the plural resource name is lower-cased into the label."""
    assert search_field_label("Orders", translator.translate) == "Search orders"
