"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from bundles.domain import bundles


@bundles.event(part_of="Product")
class ProductAdded:
    """A new product was added to the catalog."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    sku: String()
    category: String(required=True)
    price: Float(required=True)
    stock: Integer(required=True)
    created_at: DateTime(required=True)


@bundles.event(part_of="Product")
class ProductPriceChanged:
    """A product's listed price was updated."""

    __version__ = 1

    product_id: Identifier(required=True)
    previous_price: Float(required=True)
    new_price: Float(required=True)


@bundles.event(part_of="Product")
class ProductStockAdjusted:
    """Units were added to or removed from a product's stock."""

    __version__ = 1

    product_id: Identifier(required=True)
    previous_stock: Integer(required=True)
    new_stock: Integer(required=True)
    reason: String(max_length=255)


@bundles.event(part_of="Product")
class ProductDeactivated:
    """A product was withdrawn from sale."""

    __version__ = 1

    product_id: Identifier(required=True)
    deactivated_at: DateTime(required=True)


@bundles.event(part_of="Product")
class ProductReactivated:
    """A withdrawn product was put back on sale."""

    __version__ = 1

    product_id: Identifier(required=True)
    reactivated_at: DateTime(required=True)
