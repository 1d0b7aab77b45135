"""Bundle selection rules.

A bundle is bought by picking exactly `required_quantity` items from the
bundle's allowed category. Picking the same product several times is allowed
and means buying several units of it, so selections are never deduplicated.
"""

import structlog

from bundles.catalog.port import Catalog
from bundles.product.product import Product
from bundles.selection.results import (
    LOOKUP_FAILED,
    NOT_FOUND,
    PriceBreakdown,
    ServiceResult,
    ValidationResult,
)

logger = structlog.get_logger(__name__)

# Products at or below this stock level get a low-stock warning
LOW_STOCK_THRESHOLD = 5

# Quantity assumed for a selected product missing from `quantities`
DEFAULT_REQUESTED_QUANTITY = 1


class BundleValidator:
    """Checks and prices bundle selections against a catalog.

    Construct one per request with the catalog to read from. Nothing is
    written back to the catalog.
    """

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog

    def validate_selection(
        self,
        bundle_product_id: str,
        selected_product_ids: list[str],
        quantities: dict[str, int] | None = None,
    ) -> ServiceResult:
        """Decide whether `selected_product_ids` may be bought as the bundle.

        Rule violations are reported inside a successful result
        (`is_valid=False`); only catalog faults produce a failed result.
        """
        quantities = quantities or {}
        try:
            configuration = self.catalog.get_bundle_configuration(bundle_product_id)
            if configuration is None:
                return ServiceResult.ok(ValidationResult(errors=["Invalid bundle configuration"]))

            errors: list[str] = []
            warnings: list[str] = []

            if len(selected_product_ids) != configuration.required_quantity:
                errors.append(
                    f"Bundle requires exactly {configuration.required_quantity} products, "
                    f"but {len(selected_product_ids)} were selected"
                )

            for product_id in selected_product_ids:
                product = self.catalog.get_product(product_id)
                if product is None:
                    errors.append(f"Product {product_id} not found")
                    continue

                if product.category != configuration.allowed_category:
                    errors.append(f'Product "{product.name}" is not eligible for this bundle (wrong category)')

                if not product.is_active:
                    errors.append(f'Product "{product.name}" is no longer available')

                requested = quantities.get(product_id)
                if requested is None:
                    requested = DEFAULT_REQUESTED_QUANTITY

                if product.stock < requested:
                    errors.append(
                        f'Product "{product.name}" has insufficient stock '
                        f"({product.stock} available, {requested} requested)"
                    )
                elif 0 < product.stock <= LOW_STOCK_THRESHOLD:
                    warnings.append(f'Product "{product.name}" is low in stock (only {product.stock} left)')
        except Exception as exc:
            logger.exception("Bundle selection validation failed", bundle_product_id=bundle_product_id)
            return ServiceResult.failed(LOOKUP_FAILED, f"Failed to validate bundle selection: {exc}", cause=exc)

        result = ValidationResult(errors=errors, warnings=warnings)
        logger.debug(
            "Bundle selection validated",
            bundle_product_id=bundle_product_id,
            selected_count=len(selected_product_ids),
            is_valid=result.is_valid,
            error_count=len(errors),
            warning_count=len(warnings),
        )
        return ServiceResult.ok(result)

    def compute_eligible_products(self, bundle_product_id: str) -> ServiceResult:
        """Products a customer may pick for the bundle: right category, active, in stock."""
        try:
            configuration = self.catalog.get_bundle_configuration(bundle_product_id)
            if configuration is None:
                return ServiceResult.failed(NOT_FOUND, "Bundle configuration not found")

            candidates = self.catalog.list_products(configuration.allowed_category, in_stock=True)
        except Exception as exc:
            logger.exception("Eligible product lookup failed", bundle_product_id=bundle_product_id)
            return ServiceResult.failed(LOOKUP_FAILED, f"Failed to get eligible products: {exc}", cause=exc)

        eligible: list[Product] = [p for p in candidates if p.is_active and p.stock > 0]
        return ServiceResult.ok(eligible)

    def compute_price(self, bundle_product_id: str, selected_product_ids: list[str]) -> ServiceResult:
        """Compare the bundle's own price with the selected items bought separately.

        Savings are reported as-is, negative when the bundle costs more.
        """
        try:
            bundle_product = self.catalog.get_product(bundle_product_id)
            if bundle_product is None:
                return ServiceResult.failed(NOT_FOUND, "Bundle product not found")

            individual_total = 0.0
            for product_id in selected_product_ids:
                product = self.catalog.get_product(product_id)
                if product is None:
                    # TODO: confirm with the storefront team whether an unknown product should fail pricing
                    logger.warning(
                        "Unknown product ignored in bundle price",
                        bundle_product_id=bundle_product_id,
                        product_id=product_id,
                    )
                    continue
                individual_total += product.price
        except Exception as exc:
            logger.exception("Bundle price calculation failed", bundle_product_id=bundle_product_id)
            return ServiceResult.failed(LOOKUP_FAILED, f"Failed to calculate bundle price: {exc}", cause=exc)

        return ServiceResult.ok(PriceBreakdown(bundle_price=bundle_product.price, individual_total=individual_total))
