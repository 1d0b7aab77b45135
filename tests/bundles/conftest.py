"""Shared fixtures for the bundles tests."""

import pytest
from bundles.bundle.configuration import BundleConfiguration
from bundles.catalog.fake_adapter import FakeCatalog
from bundles.product.product import Product
from bundles.selection.validator import BundleValidator


def _build_product(name="Lavender Oil", category="lavender", price=89.0, stock=10, is_active=True, sku=None):
    product = Product.create(
        name=name,
        category=category,
        price=price,
        stock=stock,
        is_active=is_active,
        sku=sku,
    )
    product._events.clear()
    return product


def _build_configuration(bundle_product_id, allowed_category="lavender", required_quantity=3, discount_percentage=0.0):
    configuration = BundleConfiguration.create(
        bundle_product_id=bundle_product_id,
        allowed_category=allowed_category,
        required_quantity=required_quantity,
        discount_percentage=discount_percentage,
    )
    configuration._events.clear()
    return configuration


@pytest.fixture()
def make_product():
    """Factory for products with their creation events cleared."""
    return _build_product


@pytest.fixture()
def make_configuration():
    """Factory for bundle configurations with their creation events cleared."""
    return _build_configuration


@pytest.fixture()
def catalog():
    return FakeCatalog()


@pytest.fixture()
def validator(catalog):
    return BundleValidator(catalog)


@pytest.fixture()
def trio_bundle(catalog):
    """A 3-item lavender bundle priced at 239."""
    bundle_product = catalog.add_product(_build_product(name="Trio Pack", category="bundles", price=239.0, stock=999))
    catalog.add_configuration(_build_configuration(str(bundle_product.id), "lavender", 3, 10.49))
    return bundle_product
