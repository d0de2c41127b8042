"""Endpoints scoped to the calling user."""

from access.presentation.me.routes import router

__all__ = ["router"]
