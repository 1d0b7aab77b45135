"""Catalog port (abstract interface).

Defines the read-only lookups the bundle rules need. The validator is handed
an implementation at construction time, so it runs the same against the
protean repositories (RepositoryCatalog) and an in-memory fake (FakeCatalog).
"""

from abc import ABC, abstractmethod

from bundles.bundle.configuration import BundleConfiguration
from bundles.product.product import Product


class CatalogUnavailable(Exception):
    """Raised by a catalog adapter when a lookup cannot be performed at all."""


class Catalog(ABC):
    """Abstract catalog lookup interface.

    Single-record lookups return None when the record does not exist. Any
    other problem is raised.
    """

    @abstractmethod
    def get_bundle_configuration(self, bundle_product_id: str) -> BundleConfiguration | None:
        """Return the configuration of a bundle product."""
        ...

    @abstractmethod
    def list_bundle_configurations(self) -> list[BundleConfiguration]:
        """Return every bundle configuration, ordered by required quantity."""
        ...

    @abstractmethod
    def get_product(self, product_id: str) -> Product | None:
        """Return a product by identifier."""
        ...

    @abstractmethod
    def list_products(self, category: str, in_stock: bool = False) -> list[Product]:
        """Return the products of a category, optionally only those in stock."""
        ...
