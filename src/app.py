"""Storefront bundles FastAPI application.

Processes catalog commands synchronously via HTTP and serves the bundle
selection rules. Every request to a domain route runs inside the bundles
domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from bundles/domain.toml.
from bundles.domain import bundles
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from bundles.utils.logging import add_context, clear_context, get_logger

bundles.init()

logger = get_logger(__name__)

_DOMAIN_ROUTE_PREFIXES = ("/products", "/bundles")


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront Bundles API",
    description="Catalog products and mix-and-match bundle selection",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the bundles domain context for domain routes."""
    if not request.url.path.startswith(_DOMAIN_ROUTE_PREFIXES):
        # Health check, docs, etc.
        return await call_next(request)

    add_context(method=request.method, path=request.url.path)
    try:
        with bundles.domain_context():
            return await call_next(request)
    finally:
        clear_context()


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.info("Domain validation failed", path=request.url.path, messages=exc.messages)
    return JSONResponse(status_code=422, content={"error": "Validation failed", "detail": exc.messages})


@app.exception_handler(ObjectNotFoundError)
async def not_found_handler(request: Request, exc: ObjectNotFoundError):
    logger.info("Object not found", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=404, content={"error": "Not found", "detail": str(exc)})


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from bundles.api import bundle_router, product_router  # noqa: E402

app.include_router(product_router)
app.include_router(bundle_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": bundles.name})
