"""Demo server routers"""

from . import auth_router, users_router

__all__ = [
    "auth_router",
    "users_router",
]
