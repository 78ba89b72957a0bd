# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Exception classes raised while checking the clinic API.

Every exception a check can raise derives from ClinicCheckError so the case
runner can record it as a failed case. Anything else escaping a check is
still caught by the runner, but is classified as unexpected.
"""

from typing import Any

from clinic_check.core.http_constants import HTTP_FORBIDDEN


class ClinicCheckError(Exception):
    """Base exception class for all clinic-check errors."""

    pass


class TransportError(ClinicCheckError):
    """Raised when no HTTP response was received (refused, DNS, reset, timeout)."""

    status_code: int | None = None

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class HttpError(ClinicCheckError):
    """Raised when the backend answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        message: str | None = None,
        *,
        body: Any | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.body = body
        super().__init__(str(self))

    @property
    def is_forbidden(self) -> bool:
        return self.status_code == HTTP_FORBIDDEN

    def __str__(self) -> str:
        if self.message:
            return f"HTTP {self.status_code}: {self.message}"
        return f"HTTP {self.status_code}"


class ResponseAssertionError(ClinicCheckError, AssertionError):
    """Raised when a response arrived but failed a required shape or value check."""

    pass


class MissingTokenError(ClinicCheckError):
    """Raised when a check needs a token that authentication never recorded."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"token not available for '{key}'")
