"""
Explicit validation for write requests

Each entity has a ``validate_*`` function returning a field -> message
mapping (empty when the payload is acceptable) and a ``parse_*`` function
that returns the validated schema or raises EntityValidationError. The
routers call ``parse_*`` before handing anything to the service layer.
"""
from typing import Any, Dict, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from product_api.core.exceptions import EntityValidationError
from product_api.domain.app_user import AppUserCreate
from product_api.domain.product import ProductCreate


PRODUCT_MESSAGES = {
    "name": "Name must be between 2 and 50 characters",
    "description": "Description must be text",
    "price": "Price must be a non-negative number",
}

APP_USER_MESSAGES = {
    "name": "Name must be between 2 and 50 characters",
    "email": "Email should be valid",
    "age": "Age must be at least 18",
}


def _run(
    schema: Type[BaseModel],
    payload: Any,
    messages: Dict[str, str],
) -> Tuple[Optional[BaseModel], Dict[str, str]]:
    if not isinstance(payload, dict):
        return None, {"body": "Request body must be a JSON object"}

    try:
        return schema.model_validate(payload), {}
    except ValidationError as e:
        errors: Dict[str, str] = {}
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "body"
            if error["type"] == "missing":
                message = f"{field.capitalize()} is required"
            elif error["type"] == "blank":
                message = error["msg"]
            else:
                message = messages.get(field, error["msg"])
            # First error per field wins
            errors.setdefault(field, message)
        return None, errors


def validate_product(payload: Any) -> Dict[str, str]:
    """Return field -> message for every constraint the payload breaks"""
    _, errors = _run(ProductCreate, payload, PRODUCT_MESSAGES)
    return errors


def parse_product(payload: Any) -> ProductCreate:
    data, errors = _run(ProductCreate, payload, PRODUCT_MESSAGES)
    if errors:
        raise EntityValidationError(errors)
    return data


def validate_app_user(payload: Any) -> Dict[str, str]:
    """Return field -> message for every constraint the payload breaks"""
    _, errors = _run(AppUserCreate, payload, APP_USER_MESSAGES)
    return errors


def parse_app_user(payload: Any) -> AppUserCreate:
    data, errors = _run(AppUserCreate, payload, APP_USER_MESSAGES)
    if errors:
        raise EntityValidationError(errors)
    return data
