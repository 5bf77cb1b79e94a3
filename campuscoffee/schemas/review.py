"""
Review Pydantic Schemas

Schemas:
- ReviewBase: Shared review text field with validation
- ReviewCreate: Create a new review for a POS
- ReviewUpdate: Replace the text of an existing review
- ReviewResponse: Full review data for API responses
- ReviewInDB: Immutable review value passed between stores and services

Business Rules:
- Review text must be 1-2000 characters and not blank (schema level)
- One review per user per POS (service and database level)
- Approval counters are never set by clients
"""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

REVIEW_MAX_LENGTH = 2000


# =============================================================================
# Review Schemas
# =============================================================================


class ReviewBase(BaseModel):
    """Base schema with the review text."""

    review: str = Field(
        ...,
        min_length=1,
        max_length=REVIEW_MAX_LENGTH,
        description="Review text (1-2000 characters)",
        examples=["Great espresso, friendly staff, a bit crowded at noon."],
    )

    @field_validator("review")
    @classmethod
    def review_must_not_be_blank(cls, v: str) -> str:
        """Reject text that is only whitespace."""
        if not v.strip():
            raise ValueError("Review cannot be empty.")
        return v


class ReviewCreate(ReviewBase):
    """
    Schema for creating a new review.

    Example request body:
    {
        "pos_id": 1,
        "author_id": 7,
        "review": "Best cappuccino on campus."
    }
    """

    pos_id: int = Field(..., ge=1, description="ID of the reviewed POS")
    author_id: int = Field(..., ge=1, description="ID of the user writing the review")


class ReviewUpdate(ReviewBase):
    """
    Schema for updating an existing review.

    Only the text can change; POS, author and approvals are kept.
    """

    pass


class ReviewResponse(ReviewBase):
    """Schema for review responses."""

    id: int = Field(..., description="Unique review identifier")
    pos_id: int = Field(..., description="ID of the reviewed POS")
    author_id: int = Field(..., description="ID of the user who wrote the review")
    approval_count: int = Field(default=0, description="Number of approvals from other users")
    approved: bool = Field(default=False, description="Whether the approval quorum is reached")
    created_at: datetime = Field(..., description="When the review was created")
    updated_at: datetime = Field(..., description="When the review was last updated")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "pos_id": 3,
                "author_id": 7,
                "review": "Best cappuccino on campus.",
                "approval_count": 2,
                "approved": False,
                "created_at": "2025-10-01T10:30:00Z",
                "updated_at": "2025-10-02T08:15:00Z",
            }
        },
    )


# =============================================================================
# Internal Representation
# =============================================================================


class ReviewInDB(BaseModel):
    """
    Immutable review value used by the stores and the review service.

    id and the timestamps are None until the review is first stored.
    Instances are frozen; derive changed copies with with_approvals().
    """

    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    pos_id: int
    author_id: int
    review: str
    approval_count: int = Field(default=0, ge=0)
    approved: bool = False

    model_config = ConfigDict(from_attributes=True, frozen=True)

    def with_approvals(self, approval_count: int, approved: bool) -> "ReviewInDB":
        """Return a copy with approval_count and approved replaced, all else unchanged."""
        return self.model_copy(update={"approval_count": approval_count, "approved": approved})

    def with_text(self, review: str) -> "ReviewInDB":
        """Return a copy with new review text."""
        return self.model_copy(update={"review": review})
