"""
FastAPI Dependencies Module

Reusable components injected into route handlers with Depends().

- DbSession: one SQLAlchemy session per request
- ReviewService: ReviewApprovalService bound to the request's session,
  configured with the approval quorum from settings
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from campuscoffee.config import Settings, get_settings
from campuscoffee.database import get_db
from campuscoffee.services.reviews import ReviewApprovalService

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
DbSession = Annotated[Session, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_settings)]


# =============================================================================
# Services
# =============================================================================
def get_review_service(db: DbSession, settings: AppSettings) -> ReviewApprovalService:
    """
    Build the review service for the current request.

    The approval quorum is passed in explicitly so tests can override
    get_settings (or this dependency) without touching global state.
    """
    return ReviewApprovalService.for_session(db, settings.approval_min_count)


ReviewService = Annotated[ReviewApprovalService, Depends(get_review_service)]
