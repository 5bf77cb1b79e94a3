"""
Review Approval Service

Business rules for POS reviews:
- A review must reference an existing POS
- A user reviews a given POS at most once
- A review is approved once enough other users have approved it;
  authors cannot approve their own review and nobody approves twice

Every write operation runs as one unit of work: either all of its checks
pass and its writes commit together, or nothing is persisted.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from campuscoffee.database import unit_of_work
from campuscoffee.schemas.review import ReviewInDB
from campuscoffee.services.exceptions import NotFoundError, ValidationError
from campuscoffee.services.stores import PosStore, ReviewStore, UserStore

logger = logging.getLogger(__name__)

DUPLICATE_REVIEW_MESSAGE = "A POS may be reviewed only once by a given user."
UNKNOWN_USER_MESSAGE = "User does not exist."
UNKNOWN_REVIEW_MESSAGE = "Review does not exist."
SELF_APPROVAL_MESSAGE = "A user cannot approve their own review."
REPEAT_APPROVAL_MESSAGE = "User has already approved this review."


class ReviewApprovalService:
    """
    Validates and persists reviews and their approvals.

    Args:
        db: Session whose transaction scopes each operation
        reviews: Review store bound to db
        users: User store bound to db
        pos: POS store bound to db
        min_approval_count: Approvals a review needs to become approved
    """

    def __init__(
        self,
        db: Session,
        reviews: ReviewStore,
        users: UserStore,
        pos: PosStore,
        min_approval_count: int,
    ) -> None:
        if min_approval_count < 1:
            raise ValueError("min_approval_count must be at least 1")
        self.db = db
        self.reviews = reviews
        self.users = users
        self.pos = pos
        self.min_approval_count = min_approval_count

    @classmethod
    def for_session(cls, db: Session, min_approval_count: int) -> "ReviewApprovalService":
        """Build a service with stores bound to the given session."""
        return cls(
            db=db,
            reviews=ReviewStore(db),
            users=UserStore(db),
            pos=PosStore(db),
            min_approval_count=min_approval_count,
        )

    # -------------------------------------------------------------------------
    # Create / Update
    # -------------------------------------------------------------------------
    def upsert(self, review: ReviewInDB) -> ReviewInDB:
        """
        Create a review (no id) or replace an existing one (id set).

        An update may keep its own (pos, author) pair; only a different
        review for the same pair counts as a duplicate.

        Approvals are owned by approve(): a new review starts at zero and an
        update keeps the stored approval_count, read under a row lock, so an
        approval committed after the caller loaded the review is not lost.

        Raises:
            NotFoundError: POS or author does not exist, or id is set but unknown
            ValidationError: Another review exists for the same POS and author
        """
        with unit_of_work(self.db):
            if self.pos.find_by_id(review.pos_id) is None:
                raise NotFoundError("Pos", review.pos_id)

            if self.users.find_by_id(review.author_id) is None:
                raise NotFoundError("User", review.author_id)

            if review.id is None:
                review = review.with_approvals(0, False)
            else:
                current = self.reviews.find_by_id(review.id, for_update=True)
                if current is None:
                    raise NotFoundError("Review", review.id)
                review = review.with_approvals(current.approval_count, current.approved)

            duplicates = [
                existing
                for existing in self.reviews.filter_by_author(review.pos_id, review.author_id)
                if existing.id != review.id
            ]
            if duplicates:
                logger.warning(
                    f"Rejected review of POS {review.pos_id} by user {review.author_id}: "
                    f"review {duplicates[0].id} already exists"
                )
                raise ValidationError(DUPLICATE_REVIEW_MESSAGE)

            try:
                stored = self.reviews.upsert(self.update_approval_status(review))
            except IntegrityError:
                # Lost a race against a concurrent create for the same pair
                raise ValidationError(DUPLICATE_REVIEW_MESSAGE) from None

        logger.info(f"Saved review {stored.id} of POS {stored.pos_id} by user {stored.author_id}")
        return stored

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def filter(self, pos_id: int, approved: bool) -> list[ReviewInDB]:
        """
        List the reviews of a POS with the given approval state.

        Raises:
            NotFoundError: POS does not exist
        """
        if self.pos.find_by_id(pos_id) is None:
            raise NotFoundError("Pos", pos_id)
        return self.reviews.filter_by_approval(pos_id, approved)

    # -------------------------------------------------------------------------
    # Approval
    # -------------------------------------------------------------------------
    def approve(self, review: ReviewInDB, user_id: int) -> ReviewInDB:
        """
        Record an approval of a review by user_id.

        The counter is incremented from the stored row, locked for the rest
        of the transaction, not from the passed-in value, so concurrent
        approvals of the same review each count once.

        Missing users and reviews are reported as ValidationError, not
        NotFoundError.

        Raises:
            ValidationError: Unknown user or review, self-approval, or a
                repeat approval by the same user
        """
        logger.info(f"Processing approval request for review {review.id} by user {user_id}...")

        with unit_of_work(self.db):
            if self.users.find_by_id(user_id) is None:
                raise ValidationError(UNKNOWN_USER_MESSAGE)

            stored = self.reviews.find_by_id(review.id) if review.id is not None else None
            if stored is None:
                raise ValidationError(UNKNOWN_REVIEW_MESSAGE)

            if stored.author_id == user_id:
                logger.warning(f"User {user_id} tried to approve their own review {stored.id}")
                raise ValidationError(SELF_APPROVAL_MESSAGE)

            if self.reviews.has_approval(stored.id, user_id):
                raise ValidationError(REPEAT_APPROVAL_MESSAGE)

            try:
                self.reviews.add_approval(stored.id, user_id)
            except IntegrityError:
                raise ValidationError(REPEAT_APPROVAL_MESSAGE) from None

            current = self.reviews.find_by_id(stored.id, for_update=True)
            if current is None:
                raise ValidationError(UNKNOWN_REVIEW_MESSAGE)

            updated = self.update_approval_status(
                current.with_approvals(current.approval_count + 1, current.approved)
            )
            result = self.reviews.upsert(updated)

        if result.approved and not current.approved:
            logger.info(f"Review {result.id} reached {self.min_approval_count} approvals and is now approved")
        return result

    def update_approval_status(self, review: ReviewInDB) -> ReviewInDB:
        """
        Recompute the approved flag from approval_count.

        Does not change approval_count and does not persist.
        """
        logger.debug(f"Updating approval status of review {review.id}...")
        return review.with_approvals(review.approval_count, self.is_approved(review))

    def is_approved(self, review: ReviewInDB) -> bool:
        return review.approval_count >= self.min_approval_count
