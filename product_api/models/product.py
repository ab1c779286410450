"""
Tabla de productos
"""
from sqlalchemy import Column, Integer, String, Text, Float
from product_api.core.database import Base


class Product(Base):
    """
    Producto del catálogo

    Constraints on name length and price sign are enforced before writes by
    product_api.domain.validation; the columns only carry storage limits.
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    name = Column(String(50), nullable=False, index=True)
    description = Column(Text)
    price = Column(Float, nullable=False, default=0.0, index=True)

    def __repr__(self) -> str:
        return f"<Product(id={self.id!r}, name={self.name!r}, price={self.price!r})>"
