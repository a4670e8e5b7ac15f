"""Translate core errors into JSON responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from storefront.errors import StorefrontError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    logger.info(
        "request_failed",
        path=request.url.path,
        kind=exc.kind,
        status_code=exc.status_code,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_error_handlers(app: FastAPI) -> None:
    """Install handlers for storefront errors and Protean's own exceptions."""
    register_exception_handlers(app)
    app.add_exception_handler(StorefrontError, storefront_error_handler)
