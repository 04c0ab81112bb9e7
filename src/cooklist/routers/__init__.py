"""API routers for the cooklist server."""

from cooklist.routers.recipes import router as recipes_router
from cooklist.routers.shopping_list import router as shopping_list_router

__all__ = [
    "recipes_router",
    "shopping_list_router",
]
