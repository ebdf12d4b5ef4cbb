"""Unit tests for sessions and role-based navigation."""

import pytest

from autopos.domain.exceptions import EntityNotFoundError, PermissionDenied, ValidationError
from autopos.domain.model.session import Role, Session, ensure_allowed, visible_menu


def _ids(role):
    return [item.id for item in visible_menu(role)]


class TestVisibleMenu:

    def test_store_owner_sees_everything(self):
        assert _ids(Role.STORE_OWNER) == [
            "dashboard",
            "pos",
            "products",
            "product-management",
            "stock",
            "shift",
            "customers",
            "reports",
        ]

    def test_warehouse_admin(self):
        assert _ids(Role.WAREHOUSE_ADMIN) == ["dashboard", "product-management", "stock"]

    def test_shopkeeper(self):
        assert _ids(Role.SHOPKEEPER) == [
            "dashboard",
            "pos",
            "products",
            "shift",
            "customers",
        ]

    def test_no_role_sees_nothing(self):
        assert visible_menu(None) == []


class TestEnsureAllowed:

    def test_allowed(self):
        ensure_allowed(Session("u1", "Sari", Role.SHOPKEEPER), "pos")

    def test_denied(self):
        session = Session("u2", "Budi", Role.WAREHOUSE_ADMIN)
        with pytest.raises(PermissionDenied, match="cannot access 'Cashier'"):
            ensure_allowed(session, "pos")

    def test_customers_closed_to_warehouse(self):
        session = Session("u2", "Budi", Role.WAREHOUSE_ADMIN)
        with pytest.raises(PermissionDenied, match="cannot access 'Customers'"):
            ensure_allowed(session, "customers")

    def test_unknown_section(self):
        with pytest.raises(EntityNotFoundError, match="Unknown menu section"):
            ensure_allowed(Session("u1", "Sari", Role.STORE_OWNER), "payroll")


def test_session_requires_user_id():
    with pytest.raises(ValidationError, match="User ID is required"):
        Session("", "Nobody", Role.SHOPKEEPER)
