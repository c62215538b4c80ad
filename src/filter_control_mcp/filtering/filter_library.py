"""
Filter library for managing filter definitions and catalog lookups.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Sequence, Union

from ..exceptions import InvalidFilterError
from ..utils.validators import validate_filter_definition

logger = logging.getLogger(__name__)


class FilterType(str, Enum):
    """Kinds of filter definition, each with its own label strategy."""

    SELECT = "select"
    DATE_SELECTOR = "dateSelector"
    TEXT_FIELD = "textField"
    OTHER = "other"

    @classmethod
    def from_value(cls, value: Any) -> "FilterType":
        """Map an external type value onto the closed set of kinds."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        return cls.OTHER


@dataclass(frozen=True)
class PlainOption:
    """Select option whose value doubles as its label."""

    value: str

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class LabeledOption:
    """Select option with a distinct display label."""

    value: str
    label: str


Option = Union[PlainOption, LabeledOption]


def normalize_option(option: Union[str, dict[str, Any], Option]) -> Option:
    """Turn a bare string or ``{"value", "label"}`` mapping into an Option."""
    if isinstance(option, (PlainOption, LabeledOption)):
        return option
    if isinstance(option, str):
        return PlainOption(option)
    if isinstance(option, dict):
        return LabeledOption(value=option["value"], label=option["label"])
    raise InvalidFilterError(f"Unsupported option: {option!r}")


def option_value(option: Option) -> str:
    return option.value


def option_label(option: Option) -> str:
    return option.label


@dataclass(frozen=True)
class FilterDefinition:
    """Filter definition data model."""

    key: str
    label: str
    type: FilterType = FilterType.OTHER
    operator_text: Optional[str] = None
    options: tuple[Option, ...] = field(default_factory=tuple)
    min_key: Optional[str] = None  # Only for date selector filters
    max_key: Optional[str] = None  # Only for date selector filters

    def __post_init__(self) -> None:
        # Frozen dataclass, so normalization goes through object.__setattr__
        object.__setattr__(self, "type", FilterType.from_value(self.type))
        object.__setattr__(self, "options", tuple(normalize_option(option) for option in self.options))

    @property
    def is_range(self) -> bool:
        """Whether this definition also governs min/max range-edge keys."""
        return bool(self.min_key or self.max_key)

    def matches(self, key: str) -> bool:
        if self.is_range:
            return self.key == key or self.min_key == key or self.max_key == key
        return self.key == key

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FilterDefinition":
        """Create FilterDefinition from catalog data."""
        is_valid, errors = validate_filter_definition(data)
        if not is_valid:
            filter_key = data.get("key", "unknown") if isinstance(data, dict) else "unknown"
            raise InvalidFilterError(f"Invalid filter definition: {filter_key}", errors)

        return cls(
            key=data["key"],
            label=data["label"],
            type=FilterType.from_value(data.get("type")),
            operator_text=data.get("operatorText"),
            options=tuple(data.get("options", [])),
            min_key=data.get("minKey"),
            max_key=data.get("maxKey"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"key": self.key, "label": self.label, "type": self.type.value}
        if self.operator_text is not None:
            data["operatorText"] = self.operator_text
        if self.options:
            data["options"] = [
                option.value if isinstance(option, PlainOption) else {"value": option.value, "label": option.label}
                for option in self.options
            ]
        if self.min_key is not None:
            data["minKey"] = self.min_key
        if self.max_key is not None:
            data["maxKey"] = self.max_key
        return data


def find_definition(catalog: Sequence[FilterDefinition], key: str) -> Optional[FilterDefinition]:
    """Find the definition governing ``key``.

    Range definitions match on their own key as well as their min and max
    keys. The first match in catalog order wins.

    Args:
        catalog: Filter definitions in catalog order
        key: Key of an applied filter

    Returns:
        The matching definition, or None when no definition claims the key
    """
    for definition in catalog:
        if definition.matches(key):
            return definition
    return None


class FilterLibrary:
    """High-level operations over a catalog of filter definitions."""

    def __init__(self, definitions: Optional[Sequence[FilterDefinition]] = None):
        self._definitions: list[FilterDefinition] = list(definitions or [])

    @property
    def definitions(self) -> list[FilterDefinition]:
        return list(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self):
        return iter(self._definitions)

    def find_definition(self, key: str) -> Optional[FilterDefinition]:
        """Get the definition governing an applied filter key."""
        return find_definition(self._definitions, key)

    @classmethod
    def from_dicts(cls, filters_data: Sequence[dict[str, Any]]) -> "FilterLibrary":
        return cls([FilterDefinition.from_dict(filter_data) for filter_data in filters_data])

    def import_filters_from_json(self, json_file_path: str) -> dict[str, Any]:
        """Import filter definitions from a JSON catalog file."""
        try:
            with open(json_file_path, encoding="utf-8") as f:
                data = json.load(f)

            imported = 0
            failed = 0
            errors = []

            if not isinstance(data, dict) or not isinstance(data.get("filters", []), list):
                logger.warning(f"Catalog {json_file_path} has no filters list")
                return {
                    "success": False,
                    "error": "Catalog must be an object with a \"filters\" list",
                    "source_file": json_file_path,
                }

            for filter_data in data.get("filters", []):
                try:
                    self._definitions.append(FilterDefinition.from_dict(filter_data))
                    imported += 1
                except InvalidFilterError as e:
                    failed += 1
                    filter_key = filter_data.get("key", "unknown") if isinstance(filter_data, dict) else "unknown"
                    errors.append(f"Failed to import filter {filter_key}: {'; '.join(e.errors)}")

            logger.info(f"Import completed: {imported} successful, {failed} failed")

            return {
                "success": True,
                "imported_count": imported,
                "failed_count": failed,
                "errors": errors,
                "source_file": json_file_path,
            }

        except (OSError, json.JSONDecodeError) as e:
            logger.exception(f"Failed to import from {json_file_path}: {e}")
            return {"success": False, "error": str(e), "source_file": json_file_path}

    def export_filters_to_json(self, output_file_path: str) -> dict[str, Any]:
        """Export filter definitions to JSON format."""
        try:
            export_data = {
                "metadata": {
                    "version": "1.0.0",
                    "exported_at": datetime.now().isoformat(),
                    "filter_count": len(self._definitions),
                },
                "filters": [definition.to_dict() for definition in self._definitions],
            }

            with open(output_file_path, "w", encoding="utf-8") as f:
                json.dump(export_data, f, indent=2, ensure_ascii=False)

            logger.info(f"Exported {len(self._definitions)} filters to {output_file_path}")

            return {"success": True, "exported_count": len(self._definitions), "output_file": output_file_path}

        except OSError as e:
            logger.exception(f"Failed to export to {output_file_path}: {e}")
            return {"success": False, "error": str(e)}
