"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities and
the validation applied before they are written.
"""
from product_api.domain.product import Product, ProductCreate
from product_api.domain.app_user import AppUser, AppUserCreate, normalize_email
from product_api.domain.validation import (
    validate_product,
    parse_product,
    validate_app_user,
    parse_app_user,
)

__all__ = [
    'Product',
    'ProductCreate',
    'AppUser',
    'AppUserCreate',
    'normalize_email',
    'validate_product',
    'parse_product',
    'validate_app_user',
    'parse_app_user',
]
