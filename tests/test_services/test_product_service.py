"""
Unit tests for ProductService and AppUserService

The services are pass-throughs, so these tests only check that each call
reaches the matching repository method with the same arguments and that
the result comes back untouched.
"""
from unittest.mock import Mock

from product_api.domain.app_user import AppUser
from product_api.domain.product import Product
from product_api.repositories.app_user_repository import AppUserRepository
from product_api.repositories.product_repository import ProductRepository
from product_api.services.app_user_service import AppUserService
from product_api.services.product_service import ProductService


class TestProductService:
    """Test ProductService delegation"""

    def setup_method(self):
        self.repo = Mock(spec=ProductRepository)
        self.service = ProductService(self.repo)

    def test_get_all_products(self):
        products = [Product(id=1, name="Pen", price=1.5)]
        self.repo.find_all.return_value = products

        assert self.service.get_all_products() is products
        self.repo.find_all.assert_called_once_with()

    def test_get_product_by_id(self):
        self.repo.find_by_id.return_value = None

        assert self.service.get_product_by_id(7) is None
        self.repo.find_by_id.assert_called_once_with(7)

    def test_save_product(self):
        product = Product(name="Pen", price=1.5)
        saved = Product(id=1, name="Pen", price=1.5)
        self.repo.save.return_value = saved

        assert self.service.save_product(product) is saved
        self.repo.save.assert_called_once_with(product)

    def test_delete_product(self):
        self.repo.delete_by_id.return_value = False

        assert self.service.delete_product(3) is False
        self.repo.delete_by_id.assert_called_once_with(3)

    def test_find_products_by_name(self):
        self.repo.find_by_name_containing.return_value = []

        assert self.service.find_products_by_name("Pen") == []
        self.repo.find_by_name_containing.assert_called_once_with("Pen")

    def test_find_products_by_price_less_than(self):
        self.repo.find_by_price_less_than.return_value = []

        assert self.service.find_products_by_price_less_than(9.99) == []
        self.repo.find_by_price_less_than.assert_called_once_with(9.99)


class TestAppUserService:
    """Test AppUserService delegation"""

    def setup_method(self):
        self.repo = Mock(spec=AppUserRepository)
        self.service = AppUserService(self.repo)

    def test_save_and_lookup(self):
        user = AppUser(id=1, name="Ada", email="ada@example.com", age=36)
        self.repo.save.return_value = user
        self.repo.find_by_id.return_value = user
        self.repo.find_by_email.return_value = user

        assert self.service.save_user(user) is user
        assert self.service.get_user_by_id(1) is user
        assert self.service.find_user_by_email("ada@example.com") is user
        self.repo.find_by_email.assert_called_once_with("ada@example.com")

    def test_get_all_and_delete(self):
        self.repo.find_all.return_value = []
        self.repo.delete_by_id.return_value = True

        assert self.service.get_all_users() == []
        assert self.service.delete_user(1) is True
        self.repo.delete_by_id.assert_called_once_with(1)
