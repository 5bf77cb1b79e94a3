"""
User Pydantic Schemas

Schemas:
- UserBase: Shared user fields
- UserCreate: Registration data
- UserResponse: User data for API responses
"""

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserBase(BaseModel):
    """Base schema with shared user fields."""

    login_name: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Unique login name (letters, numbers and underscores)",
        examples=["jane_doe"],
    )
    email_address: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["jane.doe@uni-heidelberg.de"],
    )
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)

    @field_validator("login_name")
    @classmethod
    def login_name_must_be_valid(cls, v: str) -> str:
        """
        Validate login name format.

        Rules:
        - Only alphanumeric and underscores
        - Must start with a letter
        """
        if not re.match(r"^[a-zA-Z][a-zA-Z0-9_]*$", v):
            raise ValueError(
                "Login name must start with a letter and contain only "
                "letters, numbers, and underscores"
            )
        return v.lower()


class UserCreate(UserBase):
    """Schema for user registration."""

    pass


class UserResponse(UserBase):
    """Schema for user responses."""

    id: int = Field(..., description="Unique user identifier")
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
