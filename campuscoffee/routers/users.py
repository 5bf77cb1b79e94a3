"""
Users Router

Endpoints:
- GET /users - List all users
- GET /users/{user_id} - Get a user
- POST /users - Create a user (login name and email are unique)
"""

from typing import List

from fastapi import APIRouter, HTTPException, Request, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from campuscoffee.config import get_settings
from campuscoffee.dependencies import DbSession
from campuscoffee.models import User
from campuscoffee.schemas import UserCreate, UserResponse
from campuscoffee.services.rate_limiter import limiter
from campuscoffee.services.stores import UserStore

settings = get_settings()

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={
        404: {"description": "User not found"},
    },
)


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List all users",
)
@limiter.limit(settings.rate_limit_default)
def list_users(request: Request, db: DbSession) -> List[UserResponse]:
    stmt = select(User).order_by(User.login_name)
    return [UserResponse.model_validate(u) for u in db.execute(stmt).scalars()]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get a user by ID",
)
@limiter.limit(settings.rate_limit_default)
def get_user(request: Request, user_id: int, db: DbSession) -> UserResponse:
    return UserResponse.model_validate(UserStore(db).get_by_id(user_id))


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
)
@limiter.limit(settings.rate_limit_write)
def create_user(request: Request, user_data: UserCreate, db: DbSession) -> UserResponse:
    """
    Create a new user.

    Returns 409 Conflict if the login name or email address is taken.
    """
    user = User(**user_data.model_dump())

    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Login name or email address already registered",
        )

    return UserResponse.model_validate(user)
