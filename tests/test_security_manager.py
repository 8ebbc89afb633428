"""Tests for the access predicates."""

import pytest

from bookshelf.managers.security_manager import (
    AllowAllSecurityManager,
    SecurityManager,
)
from bookshelf.protocols import AccessPredicate


class TestSecurityManager:
    """Tests for the admin-only predicate."""

    def test_admin_is_allowed(self):
        assert SecurityManager().can_access("admin") is True

    @pytest.mark.parametrize(
        "username", [None, "", "Admin", "ADMIN", " admin", "bob"]
    )
    def test_everybody_else_is_denied(self, username):
        assert SecurityManager().can_access(username) is False

    def test_custom_admin_username(self):
        manager = SecurityManager(admin_username="root")

        assert manager.can_access("root") is True
        assert manager.can_access("admin") is False

    def test_satisfies_protocol(self):
        assert isinstance(SecurityManager(), AccessPredicate)


class TestAllowAllSecurityManager:
    """Tests for the development predicate."""

    @pytest.mark.parametrize("username", [None, "", "bob", "admin"])
    def test_everybody_is_allowed(self, username):
        assert AllowAllSecurityManager().can_access(username) is True

    def test_satisfies_protocol(self):
        assert isinstance(AllowAllSecurityManager(), AccessPredicate)
