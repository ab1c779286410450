"""
Product Domain Model

Represents a product in the catalog as it flows between the repository,
the service layer and the API.
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic_core import PydanticCustomError
from typing import Optional


class Product(BaseModel):
    """
    Product domain model

    Every field is optional so an empty ``Product()`` can be built and
    filled in later; ``id`` stays None until the product is persisted.
    Constraints are checked by ``ProductCreate`` before any write.

    Fields:
        id: Internal product ID (assigned by the database)
        name: Product name
        description: Free text description (optional)
        price: Unit price
    """

    id: Optional[int] = Field(None, description="Internal product ID")
    name: Optional[str] = Field(None, description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    price: Optional[float] = Field(None, description="Unit price")

    model_config = ConfigDict(from_attributes=True)


class ProductCreate(BaseModel):
    """Schema for creating or replacing a product"""

    name: str = Field(..., min_length=2, max_length=50)
    description: Optional[str] = None
    price: float = Field(..., ge=0, allow_inf_nan=False)

    # Strict: "12.5" is not a price and 3 is not a name
    model_config = ConfigDict(strict=True, extra="ignore")

    @field_validator("name", mode="before")
    @classmethod
    def name_not_blank(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            raise PydanticCustomError("blank", "Name is required")
        return value

    def to_product(self, product_id: Optional[int] = None) -> Product:
        return Product(id=product_id, **self.model_dump())
