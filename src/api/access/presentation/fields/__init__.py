"""Custom field endpoints."""

from access.presentation.fields.routes import router

__all__ = ["router"]
