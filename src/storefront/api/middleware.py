"""Request middleware: domain context, request ids and cache headers."""

from uuid import uuid4

import structlog
from fastapi import Request

from storefront.domain import storefront
from storefront.utils.logging import add_context, clear_context

logger = structlog.get_logger(__name__)

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


async def no_cache_middleware(request: Request, call_next):
    """Mark every API response, errors included, as uncacheable."""
    response = await call_next(request)
    for header, value in NO_CACHE_HEADERS.items():
        response.headers[header] = value
    return response


async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context and bind a request id for logging."""
    clear_context()
    add_context(request_id=request.headers.get("X-Request-ID") or uuid4().hex)
    with storefront.domain_context():
        response = await call_next(request)
    logger.debug("request_handled", method=request.method, path=request.url.path, status=response.status_code)
    return response
