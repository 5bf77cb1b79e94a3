"""
API Routers Package

Router Structure:
- pos.py: /api/v1/pos/* endpoints
- users.py: /api/v1/users/* endpoints
- reviews.py: /api/v1/reviews/* endpoints (create, filter, approve)

Each router is imported and registered in main.py.
"""

from campuscoffee.routers.pos import router as pos_router
from campuscoffee.routers.reviews import router as reviews_router
from campuscoffee.routers.users import router as users_router

__all__ = [
    "pos_router",
    "reviews_router",
    "users_router",
]
