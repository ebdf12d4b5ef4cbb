"""Signed-in session and role-based navigation.

The session is a plain value passed to the use cases that need to know
who is acting. Menu sections are a static list filtered by role.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from autopos.domain.exceptions import EntityNotFoundError, PermissionDenied, ValidationError


class Role(Enum):
    STORE_OWNER = "store_owner"
    WAREHOUSE_ADMIN = "warehouse_admin"
    SHOPKEEPER = "shopkeeper"


@dataclass(frozen=True)
class Session:
    user_id: str
    full_name: str
    role: Role

    def __post_init__(self) -> None:
        if not self.user_id or not self.user_id.strip():
            raise ValidationError("User ID is required")


@dataclass(frozen=True)
class MenuItem:
    id: str
    label: str
    roles: frozenset[Role]


_ALL = frozenset(Role)
_OWNER = Role.STORE_OWNER
_WAREHOUSE = Role.WAREHOUSE_ADMIN
_SHOP = Role.SHOPKEEPER

MENU: tuple[MenuItem, ...] = (
    MenuItem("dashboard", "Dashboard", _ALL),
    MenuItem("pos", "Cashier", frozenset({_OWNER, _SHOP})),
    MenuItem("products", "Products", frozenset({_OWNER, _SHOP})),
    MenuItem("product-management", "Manage Products", frozenset({_OWNER, _WAREHOUSE})),
    MenuItem("stock", "Stock", frozenset({_OWNER, _WAREHOUSE})),
    MenuItem("shift", "Shift", frozenset({_OWNER, _SHOP})),
    MenuItem("customers", "Customers", frozenset({_OWNER, _SHOP})),
    MenuItem("reports", "Reports", frozenset({_OWNER})),
)


def visible_menu(role: Role | None) -> list[MenuItem]:
    if role is None:
        return []
    return [item for item in MENU if role in item.roles]


def ensure_allowed(session: Session, section: str) -> None:
    for item in MENU:
        if item.id == section:
            if session.role not in item.roles:
                raise PermissionDenied(
                    f"Role '{session.role.value}' cannot access '{item.label}'"
                )
            return
    raise EntityNotFoundError(f"Unknown menu section '{section}'")
