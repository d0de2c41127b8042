"""Access record endpoints."""

from access.presentation.access_records.routes import router

__all__ = ["router"]
