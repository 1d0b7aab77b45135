"""BundleConfiguration aggregate root — the rules of one bundle offer."""

from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String

from bundles.domain import bundles


@bundles.aggregate
class BundleConfiguration:
    """How a bundle product is filled.

    A bundle is completed by choosing exactly `required_quantity` items, all
    from `allowed_category`. The same product may be chosen more than once.
    `discount_percentage` is what the storefront advertises; the bundle's
    actual price is the listed price of the bundle product.
    """

    bundle_product_id: Identifier(identifier=True, required=True)
    allowed_category: String(required=True, max_length=100)
    required_quantity: Integer(required=True)
    discount_percentage: Float(default=0.0)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def required_quantity_must_be_positive(self):
        if self.required_quantity is not None and self.required_quantity <= 0:
            raise ValidationError({"required_quantity": ["Required quantity must be greater than zero"]})

    @invariant.post
    def discount_must_be_a_percentage(self):
        discount = self.discount_percentage or 0.0
        if discount < 0 or discount > 100:
            raise ValidationError({"discount_percentage": ["Discount percentage must be between 0 and 100"]})

    @classmethod
    def create(cls, bundle_product_id, allowed_category, required_quantity, discount_percentage=0.0):
        from bundles.bundle.events import BundleConfigured

        now = datetime.now()
        configuration = cls(
            bundle_product_id=bundle_product_id,
            allowed_category=allowed_category,
            required_quantity=required_quantity,
            discount_percentage=discount_percentage or 0.0,
            created_at=now,
            updated_at=now,
        )
        configuration.raise_(
            BundleConfigured(
                bundle_product_id=bundle_product_id,
                allowed_category=allowed_category,
                required_quantity=required_quantity,
                discount_percentage=configuration.discount_percentage,
                configured_at=now,
            )
        )
        return configuration

    def update(self, allowed_category=None, required_quantity=None, discount_percentage=None):
        from bundles.bundle.events import BundleConfigurationUpdated

        if allowed_category is not None:
            self.allowed_category = allowed_category
        if required_quantity is not None:
            self.required_quantity = required_quantity
        if discount_percentage is not None:
            self.discount_percentage = discount_percentage

        self.updated_at = datetime.now()

        self.raise_(
            BundleConfigurationUpdated(
                bundle_product_id=self.bundle_product_id,
                allowed_category=self.allowed_category,
                required_quantity=self.required_quantity,
                discount_percentage=self.discount_percentage,
            )
        )
