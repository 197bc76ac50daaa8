"""Storefront HTTP API."""

from fastapi import FastAPI

from storefront.api.errors import register_error_handlers
from storefront.api.middleware import domain_context_middleware, no_cache_middleware
from storefront.api.routes import (
    auth_router,
    cart_router,
    health_router,
    order_router,
    product_router,
    review_router,
    user_router,
    wishlist_router,
)

ROUTERS = [
    auth_router,
    user_router,
    product_router,
    cart_router,
    order_router,
    review_router,
    wishlist_router,
    health_router,
]


def include_api(app: FastAPI) -> FastAPI:
    """Mount every router with the shared error handling and middleware."""
    for router in ROUTERS:
        app.include_router(router)
    register_error_handlers(app)
    # Registered last so the domain context wraps the cache-header middleware
    app.middleware("http")(no_cache_middleware)
    app.middleware("http")(domain_context_middleware)
    return app


__all__ = ["include_api", "ROUTERS"]
