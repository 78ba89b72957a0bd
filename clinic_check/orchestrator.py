# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Sequenced role-based verification of the clinic API.

Phases run strictly in order because later phases read the tokens recorded
by the authentication phases:

    health -> primary auth -> secondary auth -> role endpoints
        -> notifications -> cross-role denial -> mutation + verification

No phase is skipped when an earlier one fails; its cases fail on their own
(for example with a missing token) so the report is always complete.
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from clinic_check.checks import (
    require_fields_equal,
    require_mapping_field,
    require_present,
    require_sequence_field,
    require_success,
    require_truthy,
)
from clinic_check.config import load_credentials
from clinic_check.core.constants import SEPARATOR_WIDTH
from clinic_check.core.errors import HttpError, ResponseAssertionError
from clinic_check.core.models import CaseResult, Credential, Role
from clinic_check.core.registry import TokenRegistry
from clinic_check.http.client import ApiClient
from clinic_check.runner import CaseRunner
from clinic_check.utils.terminal import LogType, log

logger = logging.getLogger(__name__)

# Written by the update case and expected back verbatim by the verify case
NOTIFICATION_PREFERENCES_UPDATE: dict[str, Any] = {
    "email": True,
    "push": False,
    "sms": True,
    "types": {
        "appointment": True,
        "reminder": False,
        "billing": True,
        "system": True,
        "marketing": False,
    },
}

Validator = Callable[[Any, str], object]


def _has_dashboard_totals(payload: Any, context: str) -> None:
    require_present(payload, "totalPractitioners", context)


def _has_user_id(payload: Any, context: str) -> None:
    require_truthy(payload, "userId", context)


def _has_patient(payload: Any, context: str) -> None:
    require_success(payload, context)
    require_mapping_field(payload, "patient", context)


def _has_preferences(payload: Any, context: str) -> None:
    require_success(payload, context)
    require_mapping_field(payload, "preferences", context)


@dataclass(frozen=True)
class RoleResource:
    """A role-scoped resource read with the role's own token."""

    role: Role
    description: str
    path: str
    validate: Validator


ROLE_RESOURCES: tuple[RoleResource, ...] = (
    RoleResource(Role.ADMIN, "Admin Dashboard", "/admin/dashboard", _has_dashboard_totals),
    RoleResource(
        Role.ADMIN,
        "Admin Notification Settings",
        "/admin/notification-settings",
        _has_preferences,
    ),
    RoleResource(
        Role.PRACTITIONER, "Practitioner Profile", "/practitioner/profile", _has_user_id
    ),
    RoleResource(
        Role.PRACTITIONER,
        "Practitioner Notification Settings",
        "/practitioner/notification-settings",
        _has_preferences,
    ),
    RoleResource(Role.PATIENT, "Patient Profile", "/patient/profile", _has_patient),
    RoleResource(
        Role.PATIENT,
        "Patient Notification Settings",
        "/patient/notification-settings",
        _has_preferences,
    ),
)


@dataclass(frozen=True)
class CrossRoleDenial:
    """A resource of one role that another role's token must not open."""

    description: str
    intruder: Role
    path: str


CROSS_ROLE_DENIALS: tuple[CrossRoleDenial, ...] = (
    CrossRoleDenial(
        "Patient Cannot Access Admin Dashboard", Role.PATIENT, "/admin/dashboard"
    ),
    CrossRoleDenial(
        "Practitioner Cannot Access Patient Profile",
        Role.PRACTITIONER,
        "/patient/profile",
    ),
)


class SuiteOrchestrator:
    """Run every phase of the API verification against one backend.

    The orchestrator owns all run state: the HTTP client, the token registry
    and the case runner holding the accumulated results.
    """

    def __init__(
        self,
        base_url: str,
        credentials: Mapping[Role, Credential] | None = None,
        request_timeout: float | None = None,
        case_timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the orchestrator.

        Args:
            base_url: API origin plus path prefix
            credentials: Credentials for the credential-login phase; defaults
                to the demo accounts with environment overrides
            request_timeout: Per-request timeout in seconds (httpx default if None)
            case_timeout: Per-case timeout in seconds (no limit if None)
            transport: Alternative httpx transport, used to stub the backend
        """
        self.base_url = base_url
        self.credentials = dict(credentials or load_credentials())
        self.request_timeout = request_timeout
        self.transport = transport
        self.tokens = TokenRegistry()
        self.runner = CaseRunner(case_timeout=case_timeout)
        self._client: ApiClient | None = None

    @property
    def client(self) -> ApiClient:
        if self._client is None:
            raise RuntimeError("API client is only available while the suite runs")
        return self._client

    def phases(self) -> list[tuple[str, Callable[[], Awaitable[None]]]]:
        """Phases in execution order."""
        return [
            ("health", self.check_health),
            ("primary-auth", self.check_demo_logins),
            ("secondary-auth", self.check_credential_logins),
            ("role-endpoints", self.check_role_endpoints),
            ("notifications", self.check_notification_listings),
            ("cross-role", self.check_cross_role_denials),
            ("mutations", self.check_notification_preferences_update),
        ]

    async def run(self) -> list[CaseResult]:
        """Run all phases and return the results in execution order.

        Case failures are recorded, never raised. An exception escaping a
        phase outside any case propagates to the caller as a fatal error.
        """
        log("Starting clinic API connection tests...", LogType.INFO)
        log("=" * SEPARATOR_WIDTH, LogType.INFO)

        async with ApiClient(
            self.base_url, timeout=self.request_timeout, transport=self.transport
        ) as client:
            self._client = client
            try:
                for name, phase in self.phases():
                    logger.debug("Entering phase %s", name)
                    self.runner.phase = name
                    await phase()
            finally:
                self.runner.phase = None
                self._client = None

        return self.runner.results

    async def _get(self, path: str, role: Role) -> Any:
        token = self.tokens.get_token(TokenRegistry.primary_key(role))
        return await self.client.request("GET", path, token=token)

    async def check_health(self) -> None:
        async def action() -> None:
            response = await self.client.request("GET", "/health")
            if not isinstance(response, Mapping) or response.get("status") != "ok":
                raise ResponseAssertionError("Server health check failed")

        await self.runner.run("Server Health Check", action)

    async def check_demo_logins(self) -> None:
        for role in Role:
            await self.runner.run(f"Demo Login - {role.value}", self._demo_login(role))

    def _demo_login(self, role: Role) -> Callable[[], Awaitable[None]]:
        async def action() -> None:
            response = await self.client.request("POST", f"/auth/demo-login/{role.value}")
            token = self._require_login(response, f"Demo login failed for {role.value}")
            self.tokens.record_token(TokenRegistry.primary_key(role), token)

        return action

    async def check_credential_logins(self) -> None:
        for role, credential in self.credentials.items():
            await self.runner.run(
                f"Regular Login - {role.value}", self._credential_login(credential)
            )

    def _credential_login(self, credential: Credential) -> Callable[[], Awaitable[None]]:
        async def action() -> None:
            response = await self.client.request(
                "POST", "/auth/login", body=credential.as_payload()
            )
            token = self._require_login(
                response, f"Regular login failed for {credential.role.value}"
            )
            self.tokens.record_token(TokenRegistry.secondary_key(credential.role), token)

        return action

    @staticmethod
    def _require_login(response: Any, message: str) -> str:
        if not isinstance(response, Mapping):
            raise ResponseAssertionError(message)
        token = response.get("token")
        if not response.get("success") or not token or not isinstance(token, str):
            raise ResponseAssertionError(message)
        return token

    async def check_role_endpoints(self) -> None:
        for resource in ROLE_RESOURCES:
            await self.runner.run(resource.description, self._read_resource(resource))

    def _read_resource(self, resource: RoleResource) -> Callable[[], Awaitable[None]]:
        async def action() -> None:
            response = await self._get(resource.path, resource.role)
            resource.validate(response, resource.description)

        return action

    async def check_notification_listings(self) -> None:
        for role in Role:
            await self.runner.run(
                f"{role.value} Notifications List", self._list_notifications(role)
            )

    def _list_notifications(self, role: Role) -> Callable[[], Awaitable[None]]:
        async def action() -> None:
            context = f"{role.value} notifications endpoint"
            response = await self._get(f"/{role.value}/notifications", role)
            require_success(response, context)
            require_sequence_field(response, "notifications", context)

        return action

    async def check_cross_role_denials(self) -> None:
        for denial in CROSS_ROLE_DENIALS:
            await self.runner.run(denial.description, self._expect_forbidden(denial))

    def _expect_forbidden(self, denial: CrossRoleDenial) -> Callable[[], Awaitable[None]]:
        async def action() -> None:
            try:
                await self._get(denial.path, denial.intruder)
            except HttpError as e:
                if e.is_forbidden:
                    return
                raise
            raise ResponseAssertionError(
                f"{denial.intruder.value.capitalize()} should not have access to "
                f"{denial.path}"
            )

        return action

    async def check_notification_preferences_update(self) -> None:
        path = "/admin/notification-settings"

        async def update() -> None:
            token = self.tokens.get_token(TokenRegistry.primary_key(Role.ADMIN))
            response = await self.client.request(
                "PUT", path, body=NOTIFICATION_PREFERENCES_UPDATE, token=token
            )
            if not isinstance(response, Mapping) or not response.get("success"):
                raise ResponseAssertionError(
                    "Failed to update admin notification preferences"
                )

        async def verify() -> None:
            context = "Admin notification preferences not updated correctly"
            response = await self._get(path, Role.ADMIN)
            require_success(response, context)
            preferences = require_mapping_field(response, "preferences", context)
            require_fields_equal(NOTIFICATION_PREFERENCES_UPDATE, preferences, context)

        # verify always runs after update and reports its own failure reason
        await self.runner.run("Update Admin Notification Preferences", update)
        await self.runner.run("Verify Admin Notification Preferences Update", verify)
