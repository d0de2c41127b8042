"""Observability probes for access infrastructure."""

from access.infrastructure.observability.repository_probe import (
    DefaultRepositoryProbe,
    RepositoryProbe,
)

__all__ = ["DefaultRepositoryProbe", "RepositoryProbe"]
