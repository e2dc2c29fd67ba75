"""
Role-based sidebar links and route access checks.
"""
from __future__ import annotations

import enum
from typing import Iterable, NamedTuple, Optional, Tuple

from hoteladmin.models import User

ALL_ROLES = "all"


class NavLink(NamedTuple):
    to: str
    label: str


ADMIN_LINKS: Tuple[NavLink, ...] = (
    NavLink("/admin/dashboard", "Dashboard"),
    NavLink("/admin/staff", "Staff Management"),
    NavLink("/admin/financials", "Financials"),
    NavLink("/rooms", "Rooms"),
    NavLink("/bookings", "Bookings"),
)

STAFF_LINKS: Tuple[NavLink, ...] = (
    NavLink("/staff/dashboard", "Dashboard"),
    NavLink("/staff/tasks", "My Tasks"),
    NavLink("/rooms", "Rooms"),
    NavLink("/bookings", "Bookings"),
)


def links_for_role(role: Optional[str]) -> Tuple[NavLink, ...]:
    """Admins get the admin sidebar; every other role falls back to the staff one."""
    return ADMIN_LINKS if role == User.ROLE_ADMIN else STAFF_LINKS


class AccessDecision(str, enum.Enum):
    ALLOW = "allow"
    LOADING = "loading"
    LOGIN = "login"
    UNAUTHORIZED = "unauthorized"


def check_access(
    user: Optional[User],
    allowed_roles: Iterable[str],
    is_loading: bool = False,
) -> AccessDecision:
    if is_loading:
        return AccessDecision.LOADING
    if user is None:
        return AccessDecision.LOGIN

    allowed = set(allowed_roles)
    if ALL_ROLES in allowed or user.role in allowed:
        return AccessDecision.ALLOW
    return AccessDecision.UNAUTHORIZED
