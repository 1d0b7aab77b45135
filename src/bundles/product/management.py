"""Product maintenance — price, stock and availability commands and handler."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from bundles.domain import bundles
from bundles.product.product import Product


@bundles.command(part_of="Product")
class UpdateProductPrice:
    product_id: Identifier(required=True)
    price: Float(required=True, min_value=0.0)


@bundles.command(part_of="Product")
class AdjustProductStock:
    product_id: Identifier(required=True)
    delta: Integer(required=True)
    reason: String(max_length=255)


@bundles.command(part_of="Product")
class DeactivateProduct:
    product_id: Identifier(required=True)


@bundles.command(part_of="Product")
class ReactivateProduct:
    product_id: Identifier(required=True)


@bundles.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(UpdateProductPrice)
    def update_price(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.change_price(command.price)
        repo.add(product)

    @handle(AdjustProductStock)
    def adjust_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.adjust_stock(command.delta, reason=command.reason)
        repo.add(product)

    @handle(DeactivateProduct)
    def deactivate_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.deactivate()
        repo.add(product)

    @handle(ReactivateProduct)
    def reactivate_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.reactivate()
        repo.add(product)
