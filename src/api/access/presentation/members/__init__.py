"""System membership endpoints."""

from access.presentation.members.routes import router

__all__ = ["router"]
