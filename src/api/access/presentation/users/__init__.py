"""User endpoints."""

from access.presentation.users.routes import router

__all__ = ["router"]
