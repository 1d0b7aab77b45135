"""Application tests for bundle configuration command handlers."""

import pytest
from bundles.bundle.configuration import BundleConfiguration
from bundles.bundle.management import ConfigureBundle, UpdateBundleConfiguration
from bundles.product.creation import AddProduct
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain


def _add_bundle_product(name="Duo Pack", price=169.0):
    return current_domain.process(
        AddProduct(name=name, category="bundles", price=price, stock=999),
        asynchronous=False,
    )


def _configure(bundle_product_id, **overrides):
    defaults = {
        "bundle_product_id": bundle_product_id,
        "allowed_category": "essential-oils",
        "required_quantity": 2,
        "discount_percentage": 5.06,
    }
    defaults.update(overrides)
    return current_domain.process(ConfigureBundle(**defaults), asynchronous=False)


class TestConfigureBundleHandler:
    def test_configure_bundle(self):
        bundle_product_id = _add_bundle_product()

        result = _configure(bundle_product_id)

        assert result == bundle_product_id
        configuration = current_domain.repository_for(BundleConfiguration).get(bundle_product_id)
        assert configuration.allowed_category == "essential-oils"
        assert configuration.required_quantity == 2
        assert configuration.discount_percentage == 5.06

    def test_unknown_bundle_product_rejected(self):
        with pytest.raises(ObjectNotFoundError):
            _configure("no-such-product")

    def test_second_configuration_rejected(self):
        bundle_product_id = _add_bundle_product()
        _configure(bundle_product_id)

        with pytest.raises(ValidationError) as exc:
            _configure(bundle_product_id, required_quantity=3)
        assert "bundle_product_id" in exc.value.messages

        configuration = current_domain.repository_for(BundleConfiguration).get(bundle_product_id)
        assert configuration.required_quantity == 2

    def test_invalid_quantity_rejected(self):
        bundle_product_id = _add_bundle_product()

        with pytest.raises(ValidationError):
            _configure(bundle_product_id, required_quantity=0)


class TestUpdateBundleConfigurationHandler:
    def test_update_configuration(self):
        bundle_product_id = _add_bundle_product()
        _configure(bundle_product_id)

        current_domain.process(
            UpdateBundleConfiguration(bundle_product_id=bundle_product_id, required_quantity=3),
            asynchronous=False,
        )

        configuration = current_domain.repository_for(BundleConfiguration).get(bundle_product_id)
        assert configuration.required_quantity == 3
        assert configuration.allowed_category == "essential-oils"

    def test_update_unknown_bundle_rejected(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                UpdateBundleConfiguration(bundle_product_id="ghost", required_quantity=3),
                asynchronous=False,
            )


class TestBundleConfigurationRepository:
    def test_find_all_ordered_by_required_quantity(self):
        trio = _add_bundle_product(name="Trio Pack", price=239.0)
        duo = _add_bundle_product(name="Duo Pack", price=169.0)
        quad = _add_bundle_product(name="Quad Pack", price=299.0)
        _configure(trio, required_quantity=3)
        _configure(quad, required_quantity=4)
        _configure(duo, required_quantity=2)

        configurations = current_domain.repository_for(BundleConfiguration).find_all()

        assert [c.bundle_product_id for c in configurations] == [duo, trio, quad]
