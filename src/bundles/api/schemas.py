"""Pydantic request/response schemas for the Bundles API.

These are external contracts, kept separate from the protean commands and
aggregates.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Product schemas
# ---------------------------------------------------------------------------
class AddProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Lavender Oil 10ml",
                    "sku": "OIL-LAV-10",
                    "category": "essential-oils",
                    "price": 89.0,
                    "stock": 40,
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    sku: str | None = Field(None, max_length=50)
    category: str = Field(..., max_length=100)
    price: float = Field(ge=0)
    stock: int = Field(0, ge=0)
    is_active: bool = True


class UpdateProductPriceRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"price": 79.0}]}}

    price: float = Field(ge=0)


class AdjustProductStockRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"delta": -2, "reason": "Damaged in storage"}]}}

    delta: int
    reason: str | None = Field(None, max_length=255)


class ProductResponse(BaseModel):
    id: str
    name: str
    sku: str | None = None
    category: str
    price: float
    stock: int
    is_active: bool


class ProductIdResponse(BaseModel):
    product_id: str


# ---------------------------------------------------------------------------
# Bundle schemas
# ---------------------------------------------------------------------------
class ConfigureBundleRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "bundle_product_id": "5f1c0a7e-duo-pack",
                    "allowed_category": "essential-oils",
                    "required_quantity": 2,
                    "discount_percentage": 5.06,
                }
            ]
        }
    }

    bundle_product_id: str
    allowed_category: str = Field(..., max_length=100)
    required_quantity: int = Field(gt=0)
    discount_percentage: float = Field(0.0, ge=0, le=100)


class UpdateBundleConfigurationRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"required_quantity": 3, "discount_percentage": 10.49}]}}

    allowed_category: str | None = Field(None, max_length=100)
    required_quantity: int | None = Field(None, gt=0)
    discount_percentage: float | None = Field(None, ge=0, le=100)


class BundleConfigurationResponse(BaseModel):
    bundle_product_id: str
    allowed_category: str
    required_quantity: int
    discount_percentage: float
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BundleIdResponse(BaseModel):
    bundle_product_id: str


class ValidateSelectionRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "selected_product_ids": ["prod-lavender", "prod-lavender", "prod-eucalyptus"],
                    "quantities": {"prod-lavender": 2},
                }
            ]
        }
    }

    selected_product_ids: list[str]
    quantities: dict[str, Annotated[int, Field(ge=1)]] = Field(default_factory=dict)


class ValidationResultResponse(BaseModel):
    is_valid: bool
    errors: list[str]
    warnings: list[str]


class PriceSelectionRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"selected_product_ids": ["prod-lavender", "prod-mint"]}]}}

    selected_product_ids: list[str]


class PriceBreakdownResponse(BaseModel):
    bundle_price: float
    individual_total: float
    savings: float


class StatusResponse(BaseModel):
    status: str = "ok"
