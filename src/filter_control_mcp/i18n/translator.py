"""
Translation lookup backed by JSON locale catalogs.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Optional

from ..constants import DEFAULT_LOCALE, FALLBACK_LOCALE
from ..exceptions import MissingReplacementError, MissingTranslationError

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).parent / "locales"
REPLACE_REGEX = re.compile(r"\{([^}]*)\}")


def load_catalog(locale: str, locales_dir: Path = LOCALES_DIR) -> dict[str, Any]:
    """Load the catalog for ``locale``, or an empty one when it is not shipped."""
    catalog_path = locales_dir / f"{locale}.json"
    if not catalog_path.exists():
        logger.warning(f"No translation catalog for locale {locale!r}")
        return {}

    with open(catalog_path, encoding="utf-8") as f:
        return json.load(f)


def merge_catalogs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge ``override`` over ``base`` without mutating either."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_catalogs(merged[key], value)
        else:
            merged[key] = value
    return merged


class Translator:
    """Looks up dotted translation keys and fills ``{placeholder}`` replacements."""

    def __init__(self, locale: str = DEFAULT_LOCALE, translations: Optional[dict[str, Any]] = None):
        self.locale = locale
        if translations is None:
            translations = load_catalog(FALLBACK_LOCALE)
            if locale != FALLBACK_LOCALE:
                translations = merge_catalogs(translations, load_catalog(locale))
        self.translations = translations

    def _lookup(self, key: str) -> Optional[str]:
        node: Any = self.translations
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None

    def translation_key_exists(self, key: str) -> bool:
        return self._lookup(key) is not None

    def translate(self, key: str, replacements: Optional[dict[str, Any]] = None) -> str:
        """Translate ``key``, filling placeholders from ``replacements``.

        Raises:
            MissingTranslationError: The key is not in the catalog
            MissingReplacementError: A placeholder has no replacement value
        """
        text = self._lookup(key)
        if text is None:
            raise MissingTranslationError(key)

        replacements = replacements or {}

        def replace(match: re.Match) -> str:
            placeholder = match.group(1)
            if placeholder not in replacements:
                raise MissingReplacementError(key, placeholder)
            return str(replacements[placeholder])

        return REPLACE_REGEX.sub(replace, text)
