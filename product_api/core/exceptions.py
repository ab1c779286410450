"""
Custom exceptions and their HTTP mapping

Validation problems become 400 with a field -> message object, missing
entities become 404. Anything else is left to FastAPI's default 500.
"""
import logging
from typing import Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ProductApiError(Exception):
    """Base class for errors raised by this service."""
    pass


class EntityValidationError(ProductApiError):
    """An entity failed its declared field constraints."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__(f"Validation failed for fields: {', '.join(sorted(errors))}")


class EntityNotFoundError(ProductApiError):
    """A lookup by id yielded nothing."""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


def request_errors_to_fields(exc: RequestValidationError) -> Dict[str, str]:
    """Flatten FastAPI request errors into a field -> message mapping"""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        # ("query", "price") -> "price"; ("body", 12) for broken JSON -> "body"
        field = next(
            (part for part in reversed(error.get("loc", ())) if isinstance(part, str)),
            "request",
        )
        errors.setdefault(field, error.get("msg", "Invalid value"))
    return errors


async def entity_validation_handler(request: Request, exc: EntityValidationError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.errors}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.errors)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = request_errors_to_fields(exc)
    logger.warning(f"{request.method} {request.url.path} malformed request: {errors}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)


async def entity_not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EntityValidationError, entity_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(EntityNotFoundError, entity_not_found_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
