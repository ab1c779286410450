"""
Product Service - pass-through façade over ProductRepository

Kept as its own layer so routers depend on a service that tests can swap
for a mock, independent of how products are stored.
"""
from typing import List, Optional

from product_api.domain.product import Product
from product_api.repositories.product_repository import ProductRepository


class ProductService:
    """Service for product operations"""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def get_all_products(self) -> List[Product]:
        return self.repository.find_all()

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        return self.repository.find_by_id(product_id)

    def save_product(self, product: Product) -> Product:
        return self.repository.save(product)

    def delete_product(self, product_id: int) -> bool:
        return self.repository.delete_by_id(product_id)

    def find_products_by_name(self, name: str) -> List[Product]:
        return self.repository.find_by_name_containing(name)

    def find_products_by_price_less_than(self, price: float) -> List[Product]:
        return self.repository.find_by_price_less_than(price)
