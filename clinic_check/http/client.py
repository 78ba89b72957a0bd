# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Async JSON client for the clinic REST API.

Wraps a single httpx.AsyncClient bound to the API base address. Requests are
sent once: there is no retry logic, and failures surface immediately to the
calling check as TransportError (no response) or HttpError (non-2xx).
"""

import json
import logging
from typing import Any

import httpx

from clinic_check.core.errors import HttpError, TransportError
from clinic_check.core.http_constants import (
    HTTP_STATUS_SUCCESS_MAX,
    HTTP_STATUS_SUCCESS_MIN,
)
from clinic_check.utils.url import normalize_base_url

logger = logging.getLogger(__name__)


def _decode_body(response: httpx.Response) -> Any:
    """Decode a response body as JSON, falling back to text.

    Returns:
        Parsed JSON, the raw text for non-JSON bodies, or None for empty bodies.
    """
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text


def _error_message(response: httpx.Response, body: Any) -> str:
    """Prefer the backend-provided message over the reason phrase."""
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    if isinstance(body, str) and body.strip():
        return body.strip()
    return response.reason_phrase


class ApiClient:
    """Issue JSON requests against the clinic API, optionally as a bearer.

    Example:
        async with ApiClient("http://localhost:8001/api") as client:
            health = await client.request("GET", "/health")
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create the client.

        Args:
            base_url: Origin plus path prefix, e.g. "http://localhost:8001/api".
            timeout: Per-request timeout in seconds; None keeps the httpx default.
            transport: Alternative transport (used by tests to stub the backend).
        """
        self.base_url = normalize_base_url(base_url)
        client_kwargs: dict[str, Any] = {}
        if timeout is not None:
            client_kwargs["timeout"] = httpx.Timeout(timeout)
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        body: Any | None = None,
        token: str | None = None,
    ) -> Any:
        """Send one request and return the decoded 2xx body.

        Args:
            method: HTTP method.
            path: Path below the base address, e.g. "/auth/login".
            body: JSON payload, sent when not None.
            token: Bearer token, sent as the Authorization header when given.

        Returns:
            The decoded response body.

        Raises:
            TransportError: If no response was received.
            HttpError: If the response status is not 2xx.
        """
        url = self.url_for(path)
        headers: dict[str, str] = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        request_kwargs: dict[str, Any] = {"headers": headers}
        if body is not None:
            request_kwargs["json"] = body

        logger.debug("%s %s (auth=%s)", method.upper(), url, bool(token))
        try:
            response = await self._client.request(method.upper(), url, **request_kwargs)
        except httpx.TransportError as e:
            raise TransportError(f"{e.__class__.__name__}: {str(e) or url}") from e

        payload = _decode_body(response)
        logger.debug("%s %s -> %s", method.upper(), url, response.status_code)

        if not (
            HTTP_STATUS_SUCCESS_MIN <= response.status_code <= HTTP_STATUS_SUCCESS_MAX
        ):
            raise HttpError(
                response.status_code,
                _error_message(response, payload),
                body=payload,
            )
        return payload
