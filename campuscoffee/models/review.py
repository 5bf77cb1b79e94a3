"""
Review Model

Represents a user's review of a point of sale.

Business Rules:
- One review per user per POS (unique constraint)
- Review text is 1-2000 characters (validated at schema level)
- approval_count never goes below zero
- approved is true once approval_count reaches the configured quorum
- A user approves a given review at most once (unique constraint)
"""

from datetime import UTC, datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from campuscoffee.database import Base


class Review(Base):
    """
    Review model for POS reviews.

    Attributes:
        id: Primary key
        pos_id: Foreign key to pos table
        author_id: Foreign key to users table
        review: Review text content
        approval_count: Number of approvals from other users
        approved: Whether the approval quorum has been reached
        created_at: When the review was created
        updated_at: When the review was last updated
    """

    __tablename__ = "reviews"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    # Foreign keys
    pos_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("pos.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Review content
    review: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Review text content",
    )

    # Approval fields
    approval_count: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
        comment="Number of approvals from other users",
    )
    approved: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        index=True,
        comment="True once approval_count reaches the quorum",
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    # Relationships
    pos = relationship("Pos", back_populates="reviews")
    author = relationship("User", back_populates="reviews")
    approvals = relationship(
        "ReviewApproval",
        back_populates="review",
        cascade="all, delete-orphan",
    )

    # Constraints
    __table_args__ = (
        # One review per user per POS
        UniqueConstraint("pos_id", "author_id", name="uq_review_pos_author"),
        CheckConstraint("approval_count >= 0", name="ck_review_approval_count_non_negative"),
    )

    def __repr__(self) -> str:
        return (
            f"<Review(id={self.id}, pos_id={self.pos_id}, author_id={self.author_id}, "
            f"approval_count={self.approval_count}, approved={self.approved})>"
        )


class ReviewApproval(Base):
    """
    One approval of a review by a user.

    approval_count on the review equals the number of rows here.
    """

    __tablename__ = "review_approvals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    review_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("reviews.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    review = relationship("Review", back_populates="approvals")

    __table_args__ = (
        UniqueConstraint("review_id", "user_id", name="uq_review_approval_review_user"),
    )

    def __repr__(self) -> str:
        return f"<ReviewApproval(review_id={self.review_id}, user_id={self.user_id})>"
