"""
Tabla de usuarios de la aplicación
"""
from sqlalchemy import Column, Integer, String
from product_api.core.database import Base


class AppUser(Base):
    """
    Usuario de la aplicación
    """
    __tablename__ = "app_users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    name = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    age = Column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<AppUser(id={self.id!r}, email={self.email!r})>"
