"""Catalog factory.

Provides get_catalog() / set_catalog() to swap implementations:
- RepositoryCatalog, reading the protean repositories (default)
- FakeCatalog for tests and local experiments
"""

from bundles.catalog.port import Catalog
from bundles.catalog.repository_adapter import RepositoryCatalog

_current_catalog: Catalog | None = None


def get_catalog() -> Catalog:
    """Return the current catalog. Defaults to RepositoryCatalog."""
    global _current_catalog
    if _current_catalog is None:
        _current_catalog = RepositoryCatalog()
    return _current_catalog


def set_catalog(catalog: Catalog) -> None:
    """Override the active catalog (useful for tests)."""
    global _current_catalog
    _current_catalog = catalog


def reset_catalog() -> None:
    """Reset to the default catalog."""
    global _current_catalog
    _current_catalog = None
