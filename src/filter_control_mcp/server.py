#!/usr/bin/env python3
"""MCP Server for resource list filter controls using FastMCP.

This server exposes the applied-filter reconciliation and label resolution
engine as tools: adding and removing applied filters with deduplication, and
resolving the labels applied filters are displayed with.
"""

import json
import logging
import os
from pathlib import Path
from typing import Annotated, Any, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

from .constants import DEFAULT_LOCALE, ENV_CATALOG_PATH, ENV_LOCALE, SERVER_NAME, SERVER_VERSION
from .exceptions import InvalidFilterError
from .filtering import AppliedFilter, FilterLibrary, FilterManager, search_field_label
from .i18n import Translator
from .utils.decorators import handle_filter_errors
from .utils.validators import validate_applied_filters

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "filtering" / "seed_data" / "default_filters.json"

mcp: FastMCP = FastMCP(
    SERVER_NAME,
    instructions="Reconciles the filters applied to a resource list and resolves their display labels.",
    version=SERVER_VERSION,
)


def initialize_filter_library(catalog_path: Optional[str] = None) -> FilterLibrary:
    """Load filter definitions from the configured catalog file."""
    catalog_path = catalog_path or os.getenv(ENV_CATALOG_PATH) or str(DEFAULT_CATALOG_PATH)

    filter_library = FilterLibrary()
    result = filter_library.import_filters_from_json(catalog_path)
    if result["success"]:
        logger.info(f"Imported {result['imported_count']} filter definitions from {catalog_path}")
        for error in result["errors"]:
            logger.warning(error)
    else:
        logger.warning(f"Failed to import {catalog_path}: {result.get('error', 'Unknown error')}")

    return filter_library


translator = Translator(os.getenv(ENV_LOCALE, DEFAULT_LOCALE))

# Filter manager for applied filter reconciliation and labels
filter_manager = FilterManager(initialize_filter_library(), translator)


def parse_applied_filters(applied_filters_json: str) -> list[AppliedFilter]:
    """Parse a JSON array of applied filters."""
    data = json.loads(applied_filters_json) if applied_filters_json else []
    is_valid, errors = validate_applied_filters(data)
    if not is_valid:
        raise InvalidFilterError("Invalid applied filters", errors)
    return [AppliedFilter.from_dict(item) for item in data]


def success_response(data: Any) -> str:
    return json.dumps({"success": True, "data": data}, indent=2, ensure_ascii=False)


@handle_filter_errors
def list_filter_definitions() -> str:
    """List the filter definitions applied filters are resolved against.

    Date selector definitions list the minKey and maxKey of the range they govern
    in addition to their own key.
    """
    return success_response([definition.to_dict() for definition in filter_manager.filter_library])


@handle_filter_errors
def add_applied_filter(
    applied_filters: Annotated[str, "JSON array of applied filters, each {\"key\", \"value\", \"label\"?}"],
    new_filter: Annotated[str, "JSON object for the filter to add: {\"key\", \"value\", \"label\"?}"],
) -> str:
    """Add a filter to the applied filters.

    Applied filters are identified by "<key>-<value>". If a filter with the same
    identity is already applied the collection is returned unchanged and the new
    filter is dropped. Otherwise the new filter is appended at the end.
    """
    current = parse_applied_filters(applied_filters)
    candidate = AppliedFilter.from_dict(json.loads(new_filter))

    next_filters = filter_manager.add(current, candidate)
    return success_response({
        "applied_filters": [applied_filter.to_dict() for applied_filter in next_filters],
        "added": next_filters is not current,
    })


@handle_filter_errors
def remove_applied_filter(
    applied_filters: Annotated[str, "JSON array of applied filters, each {\"key\", \"value\", \"label\"?}"],
    filter_id: Annotated[str, "Identity of the filter to remove, formatted as \"<key>-<value>\""],
) -> str:
    """Remove the first applied filter with the given identity.

    Removing an identity that is not applied returns the same filters.
    """
    current = parse_applied_filters(applied_filters)
    next_filters = filter_manager.remove(current, filter_id)
    return success_response({
        "applied_filters": [applied_filter.to_dict() for applied_filter in next_filters],
        "removed": len(next_filters) < len(current),
    })


@handle_filter_errors
def resolve_applied_filter_labels(
    applied_filters: Annotated[str, "JSON array of applied filters, each {\"key\", \"value\", \"label\"?}"],
    select_mode: Annotated[bool, "Whether the list is in bulk selection mode; tags are disabled while it is"] = False,
) -> str:
    """Resolve the display label of each applied filter, in order.

    Each entry carries the filter identity used to remove it, its label and
    whether its tag is disabled.
    """
    current = parse_applied_filters(applied_filters)
    tags = filter_manager.build_tags(current, select_mode=select_mode)
    return success_response([
        {"filter_id": tag.filter_id, "label": tag.label, "disabled": tag.disabled} for tag in tags
    ])


@handle_filter_errors
def get_search_field_label(
    resource_name_plural: Annotated[str, "Plural name of the listed resource, e.g. 'Orders'"],
) -> str:
    """Get the label and placeholder of the resource list search field."""
    return success_response({
        "label": search_field_label(resource_name_plural, translator.translate),
        "filter_creator_enabled": filter_manager.filter_creator_enabled,
    })


# Registered here rather than with @mcp.tool() so the module names stay plain callables for tests
for tool in (
    list_filter_definitions,
    add_applied_filter,
    remove_applied_filter,
    resolve_applied_filter_labels,
    get_search_field_label,
):
    mcp.tool()(tool)


def main() -> None:
    """Entry point for the MCP server."""
    mcp.run()


if __name__ == "__main__":
    main()
