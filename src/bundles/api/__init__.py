"""Bundles domain API package."""

from bundles.api.routes import bundle_router, product_router

__all__ = ["product_router", "bundle_router"]
