"""
SQLAlchemy Models Package

This package contains all database models for the CampusCoffee API.

Model Relationships:
- Pos <-> Review: One-to-Many (a POS collects reviews)
- User <-> Review: One-to-Many (a user authors reviews)
- Review <-> ReviewApproval: One-to-Many (one row per approving user)

Import all models here so Alembic discovers them for migrations.
"""

# The order matters for SQLAlchemy to resolve relationships
from campuscoffee.models.pos import CampusType, Pos, PosType
from campuscoffee.models.user import User
from campuscoffee.models.review import Review, ReviewApproval

__all__ = [
    "CampusType",
    "Pos",
    "PosType",
    "User",
    "Review",
    "ReviewApproval",
]
