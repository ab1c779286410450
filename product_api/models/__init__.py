"""
Modelos de base de datos
"""
from .product import Product
from .app_user import AppUser

__all__ = [
    "Product",
    "AppUser",
]
