"""Translation catalogs for filter labels."""

from .translator import Translator, load_catalog, merge_catalogs

__all__ = ["Translator", "load_catalog", "merge_catalogs"]
