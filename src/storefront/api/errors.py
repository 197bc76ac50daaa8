"""HTTP error mapping shared by every router.

Domain exceptions go through Protean's FastAPI integration (ValidationError
→ 400, ObjectNotFoundError → 404). Malformed request bodies become 400
instead of FastAPI's default 422, and anything unexpected is logged and
answered with a generic 500.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from storefront.channel.email_port import EmailDeliveryError

logger = structlog.get_logger(__name__)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": jsonable_encoder(exc.errors())})


async def email_delivery_handler(request: Request, exc: EmailDeliveryError):
    logger.error("email_delivery_error", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=500, content={"error": "Email could not be sent"})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled_error", path=request.url.path, method=request.method)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(EmailDeliveryError, email_delivery_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
