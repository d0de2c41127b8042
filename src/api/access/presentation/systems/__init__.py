"""System management endpoints."""

from access.presentation.systems.routes import router

__all__ = ["router"]
