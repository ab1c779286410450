"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from business logic.
"""
from product_api.repositories.base import CrudRepository
from product_api.repositories.product_repository import (
    ProductRepository,
    SqlAlchemyProductRepository,
    InMemoryProductRepository,
)
from product_api.repositories.app_user_repository import (
    AppUserRepository,
    SqlAlchemyAppUserRepository,
    InMemoryAppUserRepository,
)

__all__ = [
    'CrudRepository',
    'ProductRepository',
    'SqlAlchemyProductRepository',
    'InMemoryProductRepository',
    'AppUserRepository',
    'SqlAlchemyAppUserRepository',
    'InMemoryAppUserRepository',
]
