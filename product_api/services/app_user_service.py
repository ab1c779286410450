"""
AppUser Service - pass-through façade over AppUserRepository
"""
from typing import List, Optional

from product_api.domain.app_user import AppUser
from product_api.repositories.app_user_repository import AppUserRepository


class AppUserService:
    """Service for application user operations"""

    def __init__(self, repository: AppUserRepository):
        self.repository = repository

    def get_all_users(self) -> List[AppUser]:
        return self.repository.find_all()

    def get_user_by_id(self, user_id: int) -> Optional[AppUser]:
        return self.repository.find_by_id(user_id)

    def save_user(self, user: AppUser) -> AppUser:
        return self.repository.save(user)

    def delete_user(self, user_id: int) -> bool:
        return self.repository.delete_by_id(user_id)

    def find_user_by_email(self, email: str) -> Optional[AppUser]:
        return self.repository.find_by_email(email)
