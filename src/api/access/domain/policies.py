"""Authorization policies over users and systems.

Pure predicates: they read the entities they are given and have no side
effects. Callers resolve ids to entities first; a missing user or system is
represented by ``None`` and never grants anything.
"""

from __future__ import annotations

from access.domain.aggregates import System, User


def is_global_admin(user: User | None) -> bool:
    """Check whether the user holds the global administrator role."""
    return user is not None and user.is_admin


def is_owner_or_co_owner(user: User | None, system: System | None) -> bool:
    """Check whether the user owns or co-owns the system."""
    if user is None or system is None:
        return False
    return system.is_owner_or_co_owner(user.id)


def can_manage_system(user: User | None, system: System | None) -> bool:
    """Editing metadata, co-owners, access records and custom fields."""
    if system is None:
        return False
    return is_global_admin(user) or is_owner_or_co_owner(user, system)


def can_delete_system(user: User | None) -> bool:
    """Owners curate membership but only administrators delete systems."""
    return is_global_admin(user)


def can_create_system(user: User | None) -> bool:
    return is_global_admin(user)


def can_approve_system(user: User | None) -> bool:
    return is_global_admin(user)


def can_view_system(user: User | None, system: System | None) -> bool:
    """Approved systems are visible to every user; others only to managers."""
    if user is None or system is None:
        return False
    return system.approved or can_manage_system(user, system)
