"""
Data Stores

Thin data-access objects over a SQLAlchemy session, one per entity the
review service needs.

Lookups come in two flavours:
- find_by_id(): returns None when the row is missing
- get_by_id(): raises NotFoundError when the row is missing

Stores only flush; committing is left to the caller's unit_of_work so that
a sequence of store calls is all-or-nothing.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from campuscoffee.models import Pos, Review, ReviewApproval, User
from campuscoffee.schemas.review import ReviewInDB
from campuscoffee.services.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class PosStore:
    """Read access to points of sale."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, pos_id: int) -> Pos | None:
        return self.db.get(Pos, pos_id)

    def get_by_id(self, pos_id: int) -> Pos:
        pos = self.find_by_id(pos_id)
        if pos is None:
            raise NotFoundError("Pos", pos_id)
        return pos


class UserStore:
    """Read access to users."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def get_by_id(self, user_id: int) -> User:
        user = self.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user


class ReviewStore:
    """
    Read/write access to reviews and their approvals.

    Rows are converted to frozen ReviewInDB values on the way out, so callers
    never hold live ORM objects.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------
    def find_by_id(self, review_id: int, for_update: bool = False) -> ReviewInDB | None:
        """
        Look up a review by id.

        Args:
            review_id: ID of the review
            for_update: Lock the row until the transaction ends and bypass
                the session's identity map so the stored values are current

        Returns:
            The review, or None if it does not exist
        """
        stmt = select(Review).where(Review.id == review_id)
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        row = self.db.execute(stmt).scalar_one_or_none()
        return ReviewInDB.model_validate(row) if row is not None else None

    def get_by_id(self, review_id: int) -> ReviewInDB:
        review = self.find_by_id(review_id)
        if review is None:
            raise NotFoundError("Review", review_id)
        return review

    def get_all(self) -> list[ReviewInDB]:
        stmt = select(Review).order_by(Review.id)
        return [ReviewInDB.model_validate(r) for r in self.db.execute(stmt).scalars()]

    def filter_by_author(self, pos_id: int, author_id: int) -> list[ReviewInDB]:
        """Reviews of one POS written by one author (at most one in a consistent store)."""
        stmt = (
            select(Review)
            .where(Review.pos_id == pos_id, Review.author_id == author_id)
            .order_by(Review.id)
        )
        return [ReviewInDB.model_validate(r) for r in self.db.execute(stmt).scalars()]

    def filter_by_approval(self, pos_id: int, approved: bool) -> list[ReviewInDB]:
        """Reviews of one POS with the given approval state, oldest first."""
        stmt = (
            select(Review)
            .where(Review.pos_id == pos_id, Review.approved == approved)
            .order_by(Review.id)
        )
        return [ReviewInDB.model_validate(r) for r in self.db.execute(stmt).scalars()]

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------
    def upsert(self, review: ReviewInDB) -> ReviewInDB:
        """
        Insert a review without id, or replace the stored review with the same id.

        Timestamps are managed by the model defaults and never copied from
        the incoming value.

        Raises:
            NotFoundError: If review.id is set but no such review exists
        """
        if review.id is None:
            row = Review(
                pos_id=review.pos_id,
                author_id=review.author_id,
                review=review.review,
                approval_count=review.approval_count,
                approved=review.approved,
            )
            self.db.add(row)
        else:
            row = self.db.get(Review, review.id)
            if row is None:
                raise NotFoundError("Review", review.id)
            row.pos_id = review.pos_id
            row.author_id = review.author_id
            row.review = review.review
            row.approval_count = review.approval_count
            row.approved = review.approved

        self.db.flush()
        self.db.refresh(row)
        logger.debug(f"Stored review {row.id} (approval_count={row.approval_count})")
        return ReviewInDB.model_validate(row)

    def delete(self, review_id: int) -> None:
        row = self.db.get(Review, review_id)
        if row is None:
            raise NotFoundError("Review", review_id)
        self.db.delete(row)
        self.db.flush()

    # -------------------------------------------------------------------------
    # Approvals
    # -------------------------------------------------------------------------
    def has_approval(self, review_id: int, user_id: int) -> bool:
        stmt = select(ReviewApproval.id).where(
            ReviewApproval.review_id == review_id,
            ReviewApproval.user_id == user_id,
        )
        return self.db.execute(stmt).first() is not None

    def add_approval(self, review_id: int, user_id: int) -> None:
        """Record that user_id approved review_id. Raises IntegrityError on a repeat."""
        self.db.add(ReviewApproval(review_id=review_id, user_id=user_id))
        self.db.flush()
