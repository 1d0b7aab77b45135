"""Repository for the Product aggregate."""

from bundles.domain import bundles
from bundles.product.product import Product


@bundles.repository(part_of=Product)
class ProductRepository:
    def find_by_category(self, category: str, in_stock: bool = False) -> list[Product]:
        """Products of a category, optionally only those with stock left."""
        criteria = {"category": category}
        if in_stock:
            criteria["stock__gt"] = 0
        return self._dao.query.filter(**criteria).all().items
