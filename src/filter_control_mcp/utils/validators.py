"""Input validation utilities for filter catalog and applied filter data."""

from typing import Any, Dict, List


def validate_filter_key(key: Any) -> bool:
    """Validate a filter key.

    Args:
        key: The key to validate

    Returns:
        True if key is a non-empty string
    """
    return isinstance(key, str) and len(key.strip()) > 0


def validate_applied_filter(data: Dict[str, Any]) -> tuple[bool, List[str]]:
    """Validate an applied filter payload.

    Args:
        data: Mapping with ``key``, ``value`` and an optional ``label``

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    if not isinstance(data, dict):
        return False, ["Applied filter must be an object"]

    if "key" not in data:
        errors.append("Missing required field 'key'")
    elif not validate_filter_key(data["key"]):
        errors.append("Field 'key' must be a non-empty string")

    if "value" not in data:
        errors.append("Missing required field 'value'")
    elif not isinstance(data["value"], str):
        errors.append("Field 'value' must be a string")

    if data.get("label") is not None and not isinstance(data["label"], str):
        errors.append("Field 'label' must be a string")

    return len(errors) == 0, errors


def validate_applied_filters(items: List[Dict[str, Any]]) -> tuple[bool, List[str]]:
    """Validate a list of applied filter payloads.

    Args:
        items: List of applied filter mappings

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    if not isinstance(items, list):
        return False, ["Applied filters must be a list"]

    errors = []
    for idx, item in enumerate(items):
        _, item_errors = validate_applied_filter(item)
        errors.extend(f"Item {idx}: {error}" for error in item_errors)

    return len(errors) == 0, errors


def validate_filter_definition(data: Dict[str, Any]) -> tuple[bool, List[str]]:
    """Validate a filter definition payload.

    Args:
        data: Catalog entry mapping

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    if not isinstance(data, dict):
        return False, ["Filter definition must be an object"]

    if not validate_filter_key(data.get("key")):
        errors.append("Filter key is required")
    if not isinstance(data.get("label"), str):
        errors.append("Filter label is required")

    for optional_key in ("operatorText", "minKey", "maxKey"):
        if data.get(optional_key) is not None and not isinstance(data[optional_key], str):
            errors.append(f"Field '{optional_key}' must be a string")

    options = data.get("options", [])
    if not isinstance(options, list):
        errors.append("Field 'options' must be a list")
    else:
        for idx, option in enumerate(options):
            if isinstance(option, str):
                continue
            if not isinstance(option, dict) or not isinstance(option.get("value"), str) or not isinstance(
                option.get("label"), str
            ):
                errors.append(f"Option {idx}: must be a string or an object with 'value' and 'label'")

    return len(errors) == 0, errors
