"""
POS Router

Endpoints for points of sale.

Endpoints:
- GET /pos - List all POS
- GET /pos/{pos_id} - Get a POS
- POST /pos - Create a POS (names are unique)
"""

from typing import List

from fastapi import APIRouter, HTTPException, Request, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from campuscoffee.config import get_settings
from campuscoffee.dependencies import DbSession
from campuscoffee.models import Pos
from campuscoffee.schemas import PosCreate, PosResponse
from campuscoffee.services.rate_limiter import limiter
from campuscoffee.services.stores import PosStore

settings = get_settings()

router = APIRouter(
    prefix="/pos",
    tags=["POS"],
    responses={
        404: {"description": "POS not found"},
    },
)


@router.get(
    "",
    response_model=List[PosResponse],
    summary="List all POS",
)
@limiter.limit(settings.rate_limit_default)
def list_pos(request: Request, db: DbSession) -> List[PosResponse]:
    """List all points of sale ordered by name."""
    stmt = select(Pos).order_by(Pos.name)
    return [PosResponse.model_validate(p) for p in db.execute(stmt).scalars()]


@router.get(
    "/{pos_id}",
    response_model=PosResponse,
    summary="Get a POS by ID",
)
@limiter.limit(settings.rate_limit_default)
def get_pos(request: Request, pos_id: int, db: DbSession) -> PosResponse:
    """Get a single POS by ID."""
    return PosResponse.model_validate(PosStore(db).get_by_id(pos_id))


@router.post(
    "",
    response_model=PosResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a POS",
)
@limiter.limit(settings.rate_limit_write)
def create_pos(request: Request, pos_data: PosCreate, db: DbSession) -> PosResponse:
    """
    Create a new point of sale.

    POS names must be unique. If a POS with the same name exists,
    a 409 Conflict error is returned.
    """
    data = pos_data.model_dump()
    data["pos_type"] = pos_data.pos_type.value
    data["campus"] = pos_data.campus.value
    pos = Pos(**data)

    try:
        db.add(pos)
        db.commit()
        db.refresh(pos)
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Pos with name '{pos_data.name}' already exists",
        )

    return PosResponse.model_validate(pos)
