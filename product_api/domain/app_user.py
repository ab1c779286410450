"""
AppUser Domain Model
"""
from pydantic import BaseModel, EmailStr, Field, ConfigDict, TypeAdapter, ValidationError, field_validator
from pydantic_core import PydanticCustomError
from typing import Optional


_email_adapter = TypeAdapter(EmailStr)


def normalize_email(email: str) -> str:
    """
    Normalise an address the way stored users were normalised (EmailStr
    lowercases the domain). Invalid input is returned unchanged; it cannot
    match a stored user anyway.
    """
    try:
        return _email_adapter.validate_python(email)
    except ValidationError:
        return email


class AppUser(BaseModel):
    """
    Application user

    Same lifecycle as Product: built without id, persisted copy has one.
    """

    id: Optional[int] = Field(None, description="Internal user ID")
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Contact email")
    age: Optional[int] = Field(None, description="Age in years")

    model_config = ConfigDict(from_attributes=True)


class AppUserCreate(BaseModel):
    """Schema for creating or replacing a user"""

    name: str = Field(..., min_length=2, max_length=50)
    email: EmailStr
    age: int = Field(..., ge=18)

    model_config = ConfigDict(strict=True, extra="ignore")

    @field_validator("name", mode="before")
    @classmethod
    def name_not_blank(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            raise PydanticCustomError("blank", "Name is required")
        return value

    @field_validator("email", mode="before")
    @classmethod
    def email_not_blank(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            raise PydanticCustomError("blank", "Email is required")
        return value

    def to_user(self, user_id: Optional[int] = None) -> AppUser:
        return AppUser(id=user_id, **self.model_dump())
