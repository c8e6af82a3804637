import logging

from fastapi import Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.receipts.errors import (
    INVALID_RECEIPT_MSG,
    NOT_FOUND_MSG,
    NotFoundError,
    ValidationError,
)

LOG = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    LOG.warning("Responding with error status=%s message=%r", status_code, message)
    return JSONResponse(status_code=status_code, content={"error": message})


async def receipt_validation_handler(request: Request, exc: ValidationError):
    LOG.warning("Receipt validation failed: %s", exc.reason)
    return error_response(400, exc.public_message)


async def receipt_not_found_handler(request: Request, exc: NotFoundError):
    LOG.warning("Receipt lookup failed: %s", exc.reason)
    return error_response(404, exc.public_message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    LOG.warning("Failed to decode receipt JSON: %s", exc.errors())
    return error_response(400, INVALID_RECEIPT_MSG)


async def not_found_route_handler(request: Request, exc: StarletteHTTPException):
    # Paths like /receipts//points never reach the lookup route.
    if exc.status_code == 404 and request.url.path.startswith("/receipts/"):
        LOG.warning("Invalid ID format requested path=%s", request.url.path)
        return error_response(404, NOT_FOUND_MSG)
    return await http_exception_handler(request, exc)


def register_exception_handlers(app) -> None:
    app.add_exception_handler(ValidationError, receipt_validation_handler)
    app.add_exception_handler(NotFoundError, receipt_not_found_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, not_found_route_handler)
