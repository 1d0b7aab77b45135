"""Product creation — command and handler."""

from protean import handle
from protean.fields import Boolean, Float, Integer, String
from protean.utils.globals import current_domain

from bundles.domain import bundles
from bundles.product.product import Product


@bundles.command(part_of="Product")
class AddProduct:
    name: String(required=True, max_length=255)
    sku: String(max_length=50)
    category: String(required=True, max_length=100)
    price: Float(required=True, min_value=0.0)
    stock: Integer(default=0, min_value=0)
    is_active: Boolean(default=True)


@bundles.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(
            name=command.name,
            sku=command.sku,
            category=command.category,
            price=command.price,
            stock=command.stock or 0,
            is_active=command.is_active if command.is_active is not None else True,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
