"""
Services Package

Business logic that sits between the routers and the database:
- reviews: ReviewApprovalService (review uniqueness and approval quorum)
- stores: data-access objects for POS, users and reviews
- exceptions: domain errors mapped to HTTP responses in main.py
- rate_limiter: slowapi limiter shared by all routers
"""

from campuscoffee.services.exceptions import CampusCoffeeError, NotFoundError, ValidationError

__all__ = [
    "CampusCoffeeError",
    "NotFoundError",
    "ValidationError",
]
