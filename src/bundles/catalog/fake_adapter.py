"""In-memory catalog for development and testing.

Holds products and bundle configurations in plain dicts, records every
lookup, and can be switched into a failing mode to exercise the validator's
fault handling.
"""

from bundles.bundle.configuration import BundleConfiguration
from bundles.catalog.port import Catalog, CatalogUnavailable
from bundles.product.product import Product


class FakeCatalog(Catalog):
    """Configurable fake catalog."""

    def __init__(
        self,
        products: list[Product] | None = None,
        configurations: list[BundleConfiguration] | None = None,
    ) -> None:
        self.products: dict[str, Product] = {}
        self.configurations: dict[str, BundleConfiguration] = {}
        self.should_fail: bool = False
        self.failure_reason: str = "Catalog unavailable"
        self.calls: list[dict] = []

        for product in products or []:
            self.add_product(product)
        for configuration in configurations or []:
            self.add_configuration(configuration)

    def configure(self, should_fail: bool, failure_reason: str = "Catalog unavailable") -> None:
        """Configure catalog behavior at runtime."""
        self.should_fail = should_fail
        self.failure_reason = failure_reason

    def add_product(self, product: Product) -> Product:
        self.products[str(product.id)] = product
        return product

    def add_configuration(self, configuration: BundleConfiguration) -> BundleConfiguration:
        self.configurations[str(configuration.bundle_product_id)] = configuration
        return configuration

    def _record(self, method: str, **kwargs) -> None:
        self.calls.append({"method": method, **kwargs})
        if self.should_fail:
            raise CatalogUnavailable(self.failure_reason)

    def get_bundle_configuration(self, bundle_product_id: str) -> BundleConfiguration | None:
        self._record("get_bundle_configuration", bundle_product_id=bundle_product_id)
        return self.configurations.get(bundle_product_id)

    def list_bundle_configurations(self) -> list[BundleConfiguration]:
        self._record("list_bundle_configurations")
        return sorted(self.configurations.values(), key=lambda c: c.required_quantity)

    def get_product(self, product_id: str) -> Product | None:
        self._record("get_product", product_id=product_id)
        return self.products.get(product_id)

    def list_products(self, category: str, in_stock: bool = False) -> list[Product]:
        self._record("list_products", category=category, in_stock=in_stock)
        return [
            product
            for product in self.products.values()
            if product.category == category and (not in_stock or product.stock > 0)
        ]
