"""Product aggregate root — the sellable items bundles are filled with."""

from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, String

from bundles.domain import bundles


@bundles.aggregate
class Product:
    """A catalog product.

    Bundle offers are products too: their `price` is the price of the whole
    bundle and their `category` is usually "bundles".
    """

    name: String(required=True, max_length=255)
    sku: String(max_length=50)
    category: String(required=True, max_length=100)
    price: Float(required=True, min_value=0.0)
    stock: Integer(default=0, min_value=0)
    is_active: Boolean(default=True)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, category, price, sku=None, stock=0, is_active=True):
        from bundles.product.events import ProductAdded

        now = datetime.now()
        product = cls(
            name=name,
            sku=sku,
            category=category,
            price=price,
            stock=stock,
            is_active=is_active,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=name,
                sku=sku,
                category=category,
                price=price,
                stock=stock,
                created_at=now,
            )
        )
        return product

    def change_price(self, new_price):
        from bundles.product.events import ProductPriceChanged

        if new_price < 0:
            raise ValidationError({"price": ["Price cannot be negative"]})

        previous_price = self.price
        self.price = new_price
        self.updated_at = datetime.now()

        self.raise_(
            ProductPriceChanged(
                product_id=self.id,
                previous_price=previous_price,
                new_price=new_price,
            )
        )

    def adjust_stock(self, delta, reason=None):
        from bundles.product.events import ProductStockAdjusted

        new_stock = self.stock + delta
        if new_stock < 0:
            raise ValidationError(
                {"stock": [f"Cannot adjust stock by {delta}: only {self.stock} available"]}
            )

        previous_stock = self.stock
        self.stock = new_stock
        self.updated_at = datetime.now()

        self.raise_(
            ProductStockAdjusted(
                product_id=self.id,
                previous_stock=previous_stock,
                new_stock=new_stock,
                reason=reason,
            )
        )

    def deactivate(self):
        from bundles.product.events import ProductDeactivated

        if not self.is_active:
            raise ValidationError({"is_active": ["Product is already inactive"]})

        self.is_active = False
        now = datetime.now()
        self.updated_at = now

        self.raise_(ProductDeactivated(product_id=self.id, deactivated_at=now))

    def reactivate(self):
        from bundles.product.events import ProductReactivated

        if self.is_active:
            raise ValidationError({"is_active": ["Product is already active"]})

        self.is_active = True
        now = datetime.now()
        self.updated_at = now

        self.raise_(ProductReactivated(product_id=self.id, reactivated_at=now))
