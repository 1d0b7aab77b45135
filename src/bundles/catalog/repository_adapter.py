"""Catalog adapter backed by the protean repositories of the active domain."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from bundles.bundle.configuration import BundleConfiguration
from bundles.catalog.port import Catalog
from bundles.product.product import Product


class RepositoryCatalog(Catalog):
    """Reads products and bundle configurations through `current_domain`.

    Must be used inside a domain context (the API middleware pushes one per
    request).
    """

    def get_bundle_configuration(self, bundle_product_id: str) -> BundleConfiguration | None:
        try:
            return current_domain.repository_for(BundleConfiguration).get(bundle_product_id)
        except ObjectNotFoundError:
            return None

    def list_bundle_configurations(self) -> list[BundleConfiguration]:
        return current_domain.repository_for(BundleConfiguration).find_all()

    def get_product(self, product_id: str) -> Product | None:
        try:
            return current_domain.repository_for(Product).get(product_id)
        except ObjectNotFoundError:
            return None

    def list_products(self, category: str, in_stock: bool = False) -> list[Product]:
        return current_domain.repository_for(Product).find_by_category(category, in_stock=in_stock)
