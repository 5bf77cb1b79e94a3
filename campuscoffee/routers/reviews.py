"""
Reviews Router

Endpoints for POS reviews and their approval.

Endpoints:
- GET /reviews - List all reviews
- GET /reviews/filter?pos_id=&approved= - Reviews of a POS by approval state
- GET /reviews/{review_id} - Get a review
- POST /reviews - Create a review
- PUT /reviews/{review_id} - Replace the text of a review
- DELETE /reviews/{review_id} - Delete a review
- PUT /reviews/{review_id}/approve?user_id= - Approve a review

Business Rules (enforced by ReviewApprovalService):
- One review per user per POS
- Authors cannot approve their own review
- Each user approves a review at most once
"""

import logging
from typing import List

from fastapi import APIRouter, Query, Request, status

from campuscoffee.config import get_settings
from campuscoffee.database import unit_of_work
from campuscoffee.dependencies import ReviewService
from campuscoffee.schemas import ReviewCreate, ReviewInDB, ReviewResponse, ReviewUpdate
from campuscoffee.services.rate_limiter import limiter

logger = logging.getLogger(__name__)

settings = get_settings()

router = APIRouter(
    prefix="/reviews",
    tags=["Reviews"],
    responses={
        400: {"description": "Business rule violated"},
        404: {"description": "Review, POS or user not found"},
    },
)


@router.get(
    "",
    response_model=List[ReviewResponse],
    summary="List all reviews",
)
@limiter.limit(settings.rate_limit_default)
def list_reviews(request: Request, service: ReviewService) -> List[ReviewResponse]:
    return [ReviewResponse.model_validate(r) for r in service.reviews.get_all()]


# Must come before /{review_id} for route matching
@router.get(
    "/filter",
    response_model=List[ReviewResponse],
    summary="Filter reviews of a POS",
    description="Get the reviews of a POS that are (or are not yet) approved.",
)
@limiter.limit(settings.rate_limit_default)
def filter_reviews(
    request: Request,
    service: ReviewService,
    pos_id: int = Query(..., description="ID of the POS"),
    approved: bool = Query(..., description="Approval state to match"),
) -> List[ReviewResponse]:
    """
    Raises:
        NotFoundError: 404 if the POS does not exist
    """
    return [ReviewResponse.model_validate(r) for r in service.filter(pos_id, approved)]


@router.get(
    "/{review_id}",
    response_model=ReviewResponse,
    summary="Get a review by ID",
)
@limiter.limit(settings.rate_limit_default)
def get_review(request: Request, review_id: int, service: ReviewService) -> ReviewResponse:
    return ReviewResponse.model_validate(service.reviews.get_by_id(review_id))


@router.post(
    "",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a review",
    description="Create a review of a POS. Each user may review a POS only once.",
)
@limiter.limit(settings.rate_limit_write)
def create_review(
    request: Request,
    review_data: ReviewCreate,
    service: ReviewService,
) -> ReviewResponse:
    """
    Create a new review.

    Raises:
        NotFoundError: 404 if the POS or author does not exist
        ValidationError: 400 if the author already reviewed this POS
    """
    review = ReviewInDB(
        pos_id=review_data.pos_id,
        author_id=review_data.author_id,
        review=review_data.review,
    )
    return ReviewResponse.model_validate(service.upsert(review))


@router.put(
    "/{review_id}",
    response_model=ReviewResponse,
    summary="Update a review",
    description="Replace the text of a review. Approvals are kept.",
)
@limiter.limit(settings.rate_limit_write)
def update_review(
    request: Request,
    review_id: int,
    review_data: ReviewUpdate,
    service: ReviewService,
) -> ReviewResponse:
    existing = service.reviews.get_by_id(review_id)
    return ReviewResponse.model_validate(service.upsert(existing.with_text(review_data.review)))


@router.delete(
    "/{review_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a review",
)
@limiter.limit(settings.rate_limit_write)
def delete_review(request: Request, review_id: int, service: ReviewService) -> None:
    with unit_of_work(service.db):
        service.reviews.delete(review_id)
    logger.info(f"Deleted review {review_id}")


@router.put(
    "/{review_id}/approve",
    response_model=ReviewResponse,
    summary="Approve a review",
    description=(
        "Record an approval of the review by another user. "
        "The review is approved once it reaches the configured number of approvals."
    ),
)
@limiter.limit(settings.rate_limit_write)
def approve_review(
    request: Request,
    review_id: int,
    service: ReviewService,
    user_id: int = Query(..., description="ID of the approving user"),
) -> ReviewResponse:
    """
    Raises:
        NotFoundError: 404 if the review does not exist
        ValidationError: 400 if the user does not exist, is the author,
            or has already approved this review
    """
    review = service.reviews.get_by_id(review_id)
    return ReviewResponse.model_validate(service.approve(review, user_id))
