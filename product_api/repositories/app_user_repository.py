"""
AppUser Repository - Data Access Layer for application users
"""
from abc import abstractmethod
from typing import Optional

from product_api import models
from product_api.domain.app_user import AppUser
from product_api.repositories.base import (
    CrudRepository,
    InMemoryRepository,
    SqlAlchemyRepository,
)


class AppUserRepository(CrudRepository[AppUser]):
    """Repository for AppUser data access"""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[AppUser]:
        """Return the first user (lowest id) with exactly this email, or None."""


class SqlAlchemyAppUserRepository(SqlAlchemyRepository[AppUser], AppUserRepository):
    model = models.AppUser
    schema = AppUser
    entity_name = "AppUser"

    def find_by_email(self, email: str) -> Optional[AppUser]:
        matches = self._find_where(models.AppUser.email == email)
        return matches[0] if matches else None


class InMemoryAppUserRepository(InMemoryRepository[AppUser], AppUserRepository):
    entity_name = "AppUser"

    def find_by_email(self, email: str) -> Optional[AppUser]:
        matches = self._find_where(lambda user: user.email == email)
        return matches[0] if matches else None
