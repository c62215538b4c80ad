"""
Filter manager for reconciling the collection of applied filters.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Sequence

from ..exceptions import InvalidFilterError
from ..i18n.translator import Translator
from ..utils.validators import validate_applied_filter
from .filter_library import FilterLibrary
from .labels import resolve_label

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppliedFilter:
    """A live filter instance attached to a list."""

    key: str
    value: str
    label: Optional[str] = None  # Overrides the resolved label when set

    @property
    def filter_id(self) -> str:
        return id_from_filter(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AppliedFilter":
        is_valid, errors = validate_applied_filter(data)
        if not is_valid:
            raise InvalidFilterError("Invalid applied filter", errors)
        return cls(key=data["key"], value=data["value"], label=data.get("label"))

    def to_dict(self) -> dict[str, Any]:
        data = {"key": self.key, "value": self.value}
        if self.label is not None:
            data["label"] = self.label
        return data


def id_from_filter(applied_filter: AppliedFilter) -> str:
    """Composite identity of an applied filter: ``key-value``."""
    return f"{applied_filter.key}-{applied_filter.value}"


def add_filter(current: Sequence[AppliedFilter], new_filter: AppliedFilter) -> Sequence[AppliedFilter]:
    """Append ``new_filter`` unless an entry with the same id is already applied.

    The first applied entry wins: on an id collision ``current`` is returned
    unchanged and ``new_filter`` is dropped.
    """
    new_id = id_from_filter(new_filter)
    if any(id_from_filter(applied_filter) == new_id for applied_filter in current):
        logger.debug(f"Filter {new_id} already applied")
        return current

    return [*current, new_filter]


def remove_filter(current: Sequence[AppliedFilter], filter_id: str) -> list[AppliedFilter]:
    """Remove the first applied entry whose id is ``filter_id``.

    Always returns a new list; when no entry matches it is a shallow copy of
    ``current``.
    """
    for index, applied_filter in enumerate(current):
        if id_from_filter(applied_filter) == filter_id:
            return [*current[:index], *current[index + 1 :]]

    logger.debug(f"Filter {filter_id} not applied, nothing to remove")
    return list(current)


@dataclass(frozen=True)
class AdditionalAction:
    """Secondary action rendered next to the search field."""

    content: str
    url: Optional[str] = None
    disabled: bool = False


def derive_disabled(action: Optional[AdditionalAction], select_mode: bool) -> Optional[AdditionalAction]:
    """Return a copy of ``action`` disabled while the list is in select mode."""
    if action is None:
        return None
    return replace(action, disabled=select_mode)


@dataclass(frozen=True)
class AppliedFilterTag:
    """Display data for one applied filter."""

    filter_id: str
    label: str
    disabled: bool = False


class FilterManager:
    """Reconciles applied filters against a filter library for a host control."""

    def __init__(
        self,
        filter_library: Optional[FilterLibrary] = None,
        translator: Optional[Translator] = None,
        on_filters_change: Optional[Callable[[list[AppliedFilter]], None]] = None,
    ):
        self.filter_library = filter_library if filter_library is not None else FilterLibrary()
        self.translator = translator or Translator()
        self.on_filters_change = on_filters_change

    @property
    def filter_creator_enabled(self) -> bool:
        """Whether there are definitions to create new filters from."""
        return len(self.filter_library) > 0

    def add(self, applied_filters: Sequence[AppliedFilter], new_filter: AppliedFilter) -> Sequence[AppliedFilter]:
        return add_filter(applied_filters, new_filter)

    def remove(self, applied_filters: Sequence[AppliedFilter], filter_id: str) -> list[AppliedFilter]:
        return remove_filter(applied_filters, filter_id)

    def get_filter_label(self, applied_filter: AppliedFilter) -> str:
        return resolve_label(
            applied_filter,
            self.filter_library.definitions,
            self.translator.translate,
            self.translator.translation_key_exists,
            locale=self.translator.locale,
        )

    def build_tags(self, applied_filters: Sequence[AppliedFilter], select_mode: bool = False) -> list[AppliedFilterTag]:
        """Build display tags for applied filters, in collection order."""
        return [
            AppliedFilterTag(
                filter_id=id_from_filter(applied_filter),
                label=self.get_filter_label(applied_filter),
                disabled=select_mode,
            )
            for applied_filter in applied_filters
        ]

    def handle_add_filter(
        self, applied_filters: Sequence[AppliedFilter], new_filter: AppliedFilter
    ) -> Optional[list[AppliedFilter]]:
        """Add a filter produced by the filter creator and notify the consumer.

        Returns the new collection, or None when nothing was notified because
        no consumer is registered or the filter is already applied.
        """
        if not self.on_filters_change:
            return None

        next_filters = self.add(applied_filters, new_filter)
        if next_filters is applied_filters:
            return None

        logger.info(f"Added filter {new_filter.filter_id}")
        self.on_filters_change(next_filters)
        return next_filters

    def handle_remove_filter(
        self, applied_filters: Sequence[AppliedFilter], filter_id: str
    ) -> Optional[list[AppliedFilter]]:
        """Remove a filter by id and notify the consumer."""
        if not self.on_filters_change:
            return None

        next_filters = self.remove(applied_filters, filter_id)
        logger.info(f"Removed filter {filter_id}")
        self.on_filters_change(next_filters)
        return next_filters
