"""
Product Repository - Data Access Layer for Products

Handles all database queries for products and returns Product domain models.
"""
from abc import abstractmethod
from typing import List

from sqlalchemy import func

from product_api import models
from product_api.domain.product import Product
from product_api.repositories.base import (
    CrudRepository,
    InMemoryRepository,
    SqlAlchemyRepository,
)


class ProductRepository(CrudRepository[Product]):
    """
    Repository for Product data access

    Adds the two derived lookups on top of the CRUD operations.
    """

    @abstractmethod
    def find_by_name_containing(self, name: str) -> List[Product]:
        """
        Find products whose name contains ``name`` anywhere

        Args:
            name: Substring to look for

        Returns:
            Matching products ordered by id
        """

    @abstractmethod
    def find_by_price_less_than(self, price: float) -> List[Product]:
        """
        Find products strictly cheaper than ``price``

        Args:
            price: Exclusive upper bound

        Returns:
            Matching products ordered by id
        """


class SqlAlchemyProductRepository(SqlAlchemyRepository[Product], ProductRepository):
    """
    ProductRepository backed by the ``products`` table

    Name matching is case-sensitive on every engine. SQLite's LIKE folds
    ASCII case, so there the match goes through instr() instead.
    """

    model = models.Product
    schema = Product
    entity_name = "Product"

    def find_by_name_containing(self, name: str) -> List[Product]:
        if self.db.get_bind().dialect.name == "sqlite":
            return self._find_where(func.instr(models.Product.name, name) > 0)
        return self._find_where(models.Product.name.contains(name, autoescape=True))

    def find_by_price_less_than(self, price: float) -> List[Product]:
        return self._find_where(models.Product.price < price)


class InMemoryProductRepository(InMemoryRepository[Product], ProductRepository):
    """ProductRepository kept in a dict (case-sensitive name matching)"""

    entity_name = "Product"

    def find_by_name_containing(self, name: str) -> List[Product]:
        return self._find_where(lambda product: product.name is not None and name in product.name)

    def find_by_price_less_than(self, price: float) -> List[Product]:
        return self._find_where(lambda product: product.price is not None and product.price < price)
