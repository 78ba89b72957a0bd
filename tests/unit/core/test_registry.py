# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Unit tests for TokenRegistry."""

import pytest

from clinic_check.core.errors import MissingTokenError
from clinic_check.core.models import Role
from clinic_check.core.registry import TokenRegistry


class TestTokenKeys:
    def test_primary_key_is_role_name(self) -> None:
        assert TokenRegistry.primary_key(Role.ADMIN) == "admin"

    def test_secondary_key_has_suffix(self) -> None:
        assert TokenRegistry.secondary_key(Role.PATIENT) == "patient_regular"


class TestTokenRegistry:
    """Tests for recording and reading tokens."""

    def test_record_and_get(self) -> None:
        registry = TokenRegistry()
        registry.record_token("admin", "tok-admin")

        assert registry.get_token("admin") == "tok-admin"
        assert registry.has_token("admin")

    def test_secondary_token_does_not_replace_primary(self) -> None:
        """Credential login for a role keeps the demo-login token intact."""
        registry = TokenRegistry()
        registry.record_token(TokenRegistry.primary_key(Role.ADMIN), "demo-token")
        registry.record_token(TokenRegistry.secondary_key(Role.ADMIN), "login-token")

        assert registry.get_token("admin") == "demo-token"
        assert registry.get_token("admin_regular") == "login-token"
        assert registry.keys() == ["admin", "admin_regular"]

    def test_missing_token_raises(self) -> None:
        registry = TokenRegistry()

        with pytest.raises(MissingTokenError) as exc_info:
            registry.get_token("patient")

        assert exc_info.value.key == "patient"
        assert "patient" in str(exc_info.value)
        assert not registry.has_token("patient")

    def test_empty_token_is_rejected(self) -> None:
        registry = TokenRegistry()

        with pytest.raises(MissingTokenError):
            registry.record_token("admin", "")

        assert registry.keys() == []
