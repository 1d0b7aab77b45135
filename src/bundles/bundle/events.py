"""Domain events for the BundleConfiguration aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from bundles.domain import bundles


@bundles.event(part_of="BundleConfiguration")
class BundleConfigured:
    """A bundle product was given its selection rules."""

    __version__ = 1

    bundle_product_id: Identifier(required=True)
    allowed_category: String(required=True)
    required_quantity: Integer(required=True)
    discount_percentage: Float(required=True)
    configured_at: DateTime(required=True)


@bundles.event(part_of="BundleConfiguration")
class BundleConfigurationUpdated:
    """A bundle's selection rules changed."""

    __version__ = 1

    bundle_product_id: Identifier(required=True)
    allowed_category: String(required=True)
    required_quantity: Integer(required=True)
    discount_percentage: Float(required=True)
