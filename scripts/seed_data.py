#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample POS, users and reviews for development.

USAGE:
    python scripts/seed_data.py

Reviews are created and approved through ReviewApprovalService so the
seeded data obeys the same rules as data created through the API.
"""

import logging

from sqlalchemy.orm import Session

from campuscoffee.config import get_settings
from campuscoffee.database import SessionLocal, create_tables
from campuscoffee.models import CampusType, Pos, PosType, Review, ReviewApproval, User
from campuscoffee.schemas.review import ReviewInDB
from campuscoffee.services.reviews import ReviewApprovalService

logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")
logger = logging.getLogger("seed_data")


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    logger.info("Clearing existing data...")
    db.query(ReviewApproval).delete()
    db.query(Review).delete()
    db.query(User).delete()
    db.query(Pos).delete()
    db.commit()


def create_pos(db: Session) -> list[Pos]:
    """Create sample points of sale."""
    logger.info("Creating POS...")
    pos_data = [
        {
            "name": "Schmelzpunkt",
            "description": "Great waffles",
            "pos_type": PosType.CAFE.value,
            "campus": CampusType.ALTSTADT.value,
            "street": "Hauptstrasse",
            "house_number": "90",
            "postal_code": 69117,
            "city": "Heidelberg",
        },
        {
            "name": "Bäcker Görtz",
            "description": "Walking distance to lecture hall",
            "pos_type": PosType.BAKERY.value,
            "campus": CampusType.INF.value,
            "street": "Berliner Str.",
            "house_number": "43",
            "postal_code": 69120,
            "city": "Heidelberg",
        },
        {
            "name": "Café Botanik",
            "description": "Outdoor seating next to the botanical garden",
            "pos_type": PosType.CAFE.value,
            "campus": CampusType.INF.value,
            "street": "Im Neuenheimer Feld",
            "house_number": "304",
            "postal_code": 69120,
            "city": "Heidelberg",
        },
    ]
    pos_list = [Pos(**data) for data in pos_data]
    db.add_all(pos_list)
    db.commit()
    return pos_list


def create_users(db: Session) -> list[User]:
    """Create sample users."""
    logger.info("Creating users...")
    users_data = [
        ("jane_doe", "jane.doe@uni-heidelberg.de", "Jane", "Doe"),
        ("maxmustermann", "max.mustermann@uni-heidelberg.de", "Max", "Mustermann"),
        ("student2023", "student2023@uni-heidelberg.de", "Student", "2023"),
    ]
    users = [
        User(login_name=login, email_address=email, first_name=first, last_name=last)
        for login, email, first, last in users_data
    ]
    db.add_all(users)
    db.commit()
    return users


def create_reviews(service: ReviewApprovalService, pos_list: list[Pos], users: list[User]) -> None:
    """Create one review per user for the first POS and approve the first one."""
    logger.info("Creating reviews...")
    reviews = [
        service.upsert(ReviewInDB(pos_id=pos_list[0].id, author_id=user.id, review=text))
        for user, text in zip(
            users,
            ["Best waffles in town.", "Coffee is fine, queue is long.", "Cozy place to study."],
        )
    ]
    for approver in users[1:]:
        service.approve(reviews[0], approver.id)


def main() -> None:
    settings = get_settings()
    create_tables()

    db = SessionLocal()
    try:
        clear_data(db)
        pos_list = create_pos(db)
        users = create_users(db)
        service = ReviewApprovalService.for_session(db, settings.approval_min_count)
        create_reviews(service, pos_list, users)
        logger.info("Seeding complete.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
