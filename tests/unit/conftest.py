# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Shared fixtures for unit tests.

FakeClinicBackend stands in for the clinic API through httpx.MockTransport,
so the orchestrator runs end to end without a server.
"""

import asyncio
import copy
import json
import os
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from _pytest.monkeypatch import MonkeyPatch

from clinic_check.config import load_credentials
from clinic_check.core.models import CaseResult
from clinic_check.orchestrator import SuiteOrchestrator

BASE_URL = "http://clinic.test/api"
ROLES = ("admin", "practitioner", "patient")

DEFAULT_PREFERENCES: dict[str, Any] = {
    "email": False,
    "push": True,
    "sms": False,
    "types": {
        "appointment": True,
        "reminder": True,
        "billing": False,
        "system": True,
        "marketing": True,
    },
}

Handler = Callable[[httpx.Request], httpx.Response]


def _json(status_code: int, payload: Any) -> httpx.Response:
    return httpx.Response(status_code, json=payload)


class FakeClinicBackend:
    """In-memory clinic API with role-scoped resources.

    Routes can be replaced per test through overrides, keyed by
    (method, path below /api).
    """

    def __init__(self) -> None:
        self.preferences: dict[str, dict[str, Any]] = {
            role: copy.deepcopy(DEFAULT_PREFERENCES) for role in ROLES
        }
        self.accounts = {f"{role}@panchakarma.com": ("demo123", role) for role in ROLES}
        self.tokens: dict[str, str] = {}
        self.requests: list[httpx.Request] = []
        self.overrides: dict[tuple[str, str], Handler] = {}

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def requests_to(self, method: str, path: str) -> list[httpx.Request]:
        return [
            r
            for r in self.requests
            if r.method == method and r.url.path == f"/api{path}"
        ]

    def _issue_token(self, role: str, kind: str) -> str:
        token = f"{kind}-{role}-token-0123456789abcdef"
        self.tokens[token] = role
        return token

    def _role_of(self, request: httpx.Request) -> str | None:
        header = request.headers.get("Authorization", "")
        if not header.startswith("Bearer "):
            return None
        return self.tokens.get(header[len("Bearer ") :])

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        override = self.overrides.get((request.method, path))
        if override is not None:
            return override(request)

        if request.method == "GET" and path == "/health":
            return _json(200, {"status": "ok"})

        if request.method == "POST" and path.startswith("/auth/demo-login/"):
            role = path.rsplit("/", 1)[-1]
            if role not in ROLES:
                return _json(400, {"success": False, "message": "Invalid role"})
            token = self._issue_token(role, "demo")
            return _json(200, {"success": True, "token": token, "user": {"role": role}})

        if request.method == "POST" and path == "/auth/login":
            body = json.loads(request.content)
            password, role = self.accounts.get(body.get("email"), (None, None))
            if role is None or body.get("password") != password:
                return _json(401, {"success": False, "message": "Invalid credentials"})
            token = self._issue_token(role, "login")
            return _json(200, {"success": True, "token": token, "user": {"role": role}})

        return self._handle_scoped(request, path)

    def _handle_scoped(self, request: httpx.Request, path: str) -> httpx.Response:
        owner, _, resource = path.strip("/").partition("/")
        if owner not in ROLES:
            return _json(404, {"success": False, "message": "Not found"})

        role = self._role_of(request)
        if role is None:
            return _json(401, {"success": False, "message": "Access token required"})
        if role != owner:
            return _json(403, {"success": False, "message": "Access denied"})

        if resource == "notification-settings":
            if request.method == "PUT":
                self.preferences[role] = json.loads(request.content)
                return _json(200, {"success": True, "message": "Preferences updated"})
            return _json(200, {"success": True, "preferences": self.preferences[role]})
        if resource == "notifications":
            return _json(200, {"success": True, "notifications": [{"id": 1}]})
        if resource == "dashboard" and role == "admin":
            return _json(200, {"totalPractitioners": 4, "totalPatients": 12})
        if resource == "profile" and role == "practitioner":
            return _json(200, {"userId": "prac-1", "name": "Dr. Rao"})
        if resource == "profile" and role == "patient":
            return _json(200, {"success": True, "patient": {"id": "pat-1"}})
        return _json(404, {"success": False, "message": "Not found"})


@pytest.fixture()
def backend() -> FakeClinicBackend:
    return FakeClinicBackend()


@pytest.fixture()
def run_suite() -> Callable[..., list[CaseResult]]:
    """Run the full suite against a transport and return its results."""

    def _run(transport: httpx.AsyncBaseTransport, **kwargs: Any) -> list[CaseResult]:
        kwargs.setdefault("credentials", load_credentials({}))
        orchestrator = SuiteOrchestrator(BASE_URL, transport=transport, **kwargs)
        return asyncio.run(orchestrator.run())

    return _run


@pytest.fixture()
def clean_clinic_env(monkeypatch: MonkeyPatch) -> None:
    """Clear all clinic-related environment variables.

    Ensures tests run in isolation regardless of the caller's shell environment.
    """
    for key in list(os.environ.keys()):
        if key.startswith("CLINIC_"):
            monkeypatch.delenv(key, raising=False)
