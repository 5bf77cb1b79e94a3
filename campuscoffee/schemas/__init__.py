"""
Pydantic Schemas Package

Request/response validation models, kept separate from the SQLAlchemy
models so the API shape can evolve independently of the tables.

Schema Naming Convention:
- XxxBase: Shared fields between create/update
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields allowed when updating
- XxxResponse: Fields returned in API responses
- XxxInDB: Internal representation (not exposed)
"""

from campuscoffee.schemas.pos import PosBase, PosCreate, PosResponse
from campuscoffee.schemas.user import UserBase, UserCreate, UserResponse
from campuscoffee.schemas.review import (
    ReviewBase,
    ReviewCreate,
    ReviewInDB,
    ReviewResponse,
    ReviewUpdate,
)

__all__ = [
    # POS schemas
    "PosBase",
    "PosCreate",
    "PosResponse",
    # User schemas
    "UserBase",
    "UserCreate",
    "UserResponse",
    # Review schemas
    "ReviewBase",
    "ReviewCreate",
    "ReviewUpdate",
    "ReviewResponse",
    "ReviewInDB",
]
