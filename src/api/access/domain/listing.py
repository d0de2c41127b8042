"""Reconciliation and filtering helpers for listing views.

Everything here is pure and independent of storage: the functions take
entities that were already loaded and return new collections.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, TypeVar

from access.domain.aggregates import AccessRecord, System, User

ALL_CATEGORIES = "All"

T = TypeVar("T")


def matches_search(query: str | None, *fields: str | None) -> bool:
    """Case-insensitive substring match of ``query`` against any field.

    An empty query matches everything; ``None`` fields are ignored.
    """
    if not query or not query.strip():
        return True
    needle = query.strip().lower()
    return any(value is not None and needle in value.lower() for value in fields)


def matches_category(category: str, selected: str | None) -> bool:
    """Exact category match, with ``"All"`` (or no selection) as a wildcard."""
    if selected is None or selected == ALL_CATEGORIES:
        return True
    return category == selected


def sort_key(value: Any) -> tuple[int, str]:
    """Sort key ordering empty values first, then case-insensitively."""
    if value is None or value == "":
        return (0, "")
    return (1, str(value).lower())


def sort_by(items: Iterable[T], key: Callable[[T], Any], descending: bool = False) -> list[T]:
    """Sort items by an attribute with empty values first.

    Descending order reverses the whole list, so empty values come last.
    """
    return sorted(items, key=lambda item: sort_key(key(item)), reverse=descending)


@dataclass(frozen=True)
class DashboardBuckets:
    """Systems grouped for a user's dashboard. The buckets are disjoint."""

    owned: list[System] = field(default_factory=list)
    assigned: list[System] = field(default_factory=list)
    other: list[System] = field(default_factory=list)


def dashboard_buckets(
    user: User,
    systems: Iterable[System],
    records: Iterable[AccessRecord],
) -> DashboardBuckets:
    """Partition systems into owned, assigned and (for admins) other.

    - owned: systems whose owner is the user
    - assigned: systems the user has an access record for but does not own
    - other: every remaining system, populated for administrators only

    Owned wins over assigned. Records pointing at systems absent from
    ``systems`` are ignored.
    """
    assigned_ids = {record.system_id for record in records if record.user_id == user.id}

    owned: list[System] = []
    assigned: list[System] = []
    other: list[System] = []
    for system in systems:
        if system.owner_id == user.id:
            owned.append(system)
        elif system.id in assigned_ids:
            assigned.append(system)
        elif user.is_admin:
            other.append(system)

    return DashboardBuckets(owned=owned, assigned=assigned, other=other)
