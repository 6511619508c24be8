"""API route modules."""

from linkshelf.infrastructure.api.routes.collections_router import router as collections_router

__all__ = ["collections_router"]
