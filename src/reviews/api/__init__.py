"""Reviews API package."""

from reviews.api.errors import register_exception_handlers
from reviews.api.routes import review_router

__all__ = ["review_router", "register_exception_handlers"]
