"""FastAPI endpoints for the Bundles domain — catalog products and bundle selection."""

from fastapi import APIRouter, HTTPException
from protean.utils.globals import current_domain

from bundles.api.schemas import (
    AddProductRequest,
    AdjustProductStockRequest,
    BundleConfigurationResponse,
    BundleIdResponse,
    ConfigureBundleRequest,
    PriceBreakdownResponse,
    PriceSelectionRequest,
    ProductIdResponse,
    ProductResponse,
    StatusResponse,
    UpdateBundleConfigurationRequest,
    UpdateProductPriceRequest,
    ValidateSelectionRequest,
    ValidationResultResponse,
)
from bundles.bundle.management import ConfigureBundle, UpdateBundleConfiguration
from bundles.catalog import get_catalog
from bundles.product.creation import AddProduct
from bundles.product.management import (
    AdjustProductStock,
    DeactivateProduct,
    ReactivateProduct,
    UpdateProductPrice,
)
from bundles.product.product import Product
from bundles.selection.results import NOT_FOUND, ServiceResult
from bundles.selection.validator import BundleValidator

product_router = APIRouter(prefix="/products", tags=["products"])
bundle_router = APIRouter(prefix="/bundles", tags=["bundles"])


def _product_response(product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        sku=product.sku,
        category=product.category,
        price=product.price,
        stock=product.stock,
        is_active=product.is_active,
    )


def _configuration_response(configuration) -> BundleConfigurationResponse:
    return BundleConfigurationResponse(
        bundle_product_id=str(configuration.bundle_product_id),
        allowed_category=configuration.allowed_category,
        required_quantity=configuration.required_quantity,
        discount_percentage=configuration.discount_percentage or 0.0,
        created_at=configuration.created_at,
        updated_at=configuration.updated_at,
    )


def _raise_for_failure(result: ServiceResult) -> None:
    if result.success:
        return
    status_code = 404 if result.error.kind == NOT_FOUND else 400
    raise HTTPException(
        status_code=status_code,
        detail={"kind": result.error.kind, "message": result.error.message},
    )


# --- Product endpoints ---


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: AddProductRequest) -> ProductIdResponse:
    command = AddProduct(
        name=body.name,
        sku=body.sku,
        category=body.category,
        price=body.price,
        stock=body.stock,
        is_active=body.is_active,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).get(product_id)
    return _product_response(product)


@product_router.put("/{product_id}/price", response_model=StatusResponse)
async def update_product_price(product_id: str, body: UpdateProductPriceRequest) -> StatusResponse:
    command = UpdateProductPrice(product_id=product_id, price=body.price)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.put("/{product_id}/stock", response_model=StatusResponse)
async def adjust_product_stock(product_id: str, body: AdjustProductStockRequest) -> StatusResponse:
    command = AdjustProductStock(product_id=product_id, delta=body.delta, reason=body.reason)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.put("/{product_id}/deactivate", response_model=StatusResponse)
async def deactivate_product(product_id: str) -> StatusResponse:
    command = DeactivateProduct(product_id=product_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.put("/{product_id}/reactivate", response_model=StatusResponse)
async def reactivate_product(product_id: str) -> StatusResponse:
    command = ReactivateProduct(product_id=product_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# --- Bundle endpoints ---


@bundle_router.get("", response_model=list[BundleConfigurationResponse])
async def list_bundles() -> list[BundleConfigurationResponse]:
    configurations = get_catalog().list_bundle_configurations()
    return [_configuration_response(c) for c in configurations]


@bundle_router.post("", status_code=201, response_model=BundleIdResponse)
async def configure_bundle(body: ConfigureBundleRequest) -> BundleIdResponse:
    command = ConfigureBundle(
        bundle_product_id=body.bundle_product_id,
        allowed_category=body.allowed_category,
        required_quantity=body.required_quantity,
        discount_percentage=body.discount_percentage,
    )
    result = current_domain.process(command, asynchronous=False)
    return BundleIdResponse(bundle_product_id=result)


@bundle_router.get("/{bundle_product_id}", response_model=BundleConfigurationResponse)
async def get_bundle(bundle_product_id: str) -> BundleConfigurationResponse:
    configuration = get_catalog().get_bundle_configuration(bundle_product_id)
    if configuration is None:
        raise HTTPException(
            status_code=404,
            detail={"kind": NOT_FOUND, "message": "Bundle configuration not found"},
        )
    return _configuration_response(configuration)


@bundle_router.put("/{bundle_product_id}", response_model=StatusResponse)
async def update_bundle(bundle_product_id: str, body: UpdateBundleConfigurationRequest) -> StatusResponse:
    command = UpdateBundleConfiguration(
        bundle_product_id=bundle_product_id,
        allowed_category=body.allowed_category,
        required_quantity=body.required_quantity,
        discount_percentage=body.discount_percentage,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@bundle_router.get("/{bundle_product_id}/eligible-products", response_model=list[ProductResponse])
async def eligible_products(bundle_product_id: str) -> list[ProductResponse]:
    result = BundleValidator(get_catalog()).compute_eligible_products(bundle_product_id)
    _raise_for_failure(result)
    return [_product_response(p) for p in result.data]


@bundle_router.post("/{bundle_product_id}/validate", response_model=ValidationResultResponse)
async def validate_selection(bundle_product_id: str, body: ValidateSelectionRequest) -> ValidationResultResponse:
    """Check a selection before it is added to the cart.

    Rule violations come back with status 200 and `is_valid=false`.
    """
    result = BundleValidator(get_catalog()).validate_selection(
        bundle_product_id,
        body.selected_product_ids,
        body.quantities,
    )
    _raise_for_failure(result)
    return ValidationResultResponse(**result.data.to_dict())


@bundle_router.post("/{bundle_product_id}/price", response_model=PriceBreakdownResponse)
async def price_selection(bundle_product_id: str, body: PriceSelectionRequest) -> PriceBreakdownResponse:
    result = BundleValidator(get_catalog()).compute_price(bundle_product_id, body.selected_product_ids)
    _raise_for_failure(result)
    return PriceBreakdownResponse(**result.data.to_dict())
