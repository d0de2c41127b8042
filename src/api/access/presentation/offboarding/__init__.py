"""Offboarding endpoints."""

from access.presentation.offboarding.routes import router

__all__ = ["router"]
