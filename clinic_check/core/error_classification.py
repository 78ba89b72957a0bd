# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""Failure classification for check errors.

This module converts the exception that ended a case into a FailureKind so
the summary and the xunit report can say why a case failed, not only that
it failed.
"""

import asyncio
import re
from enum import Enum

from clinic_check.core.errors import (
    HttpError,
    MissingTokenError,
    ResponseAssertionError,
    TransportError,
)


class FailureKind(str, Enum):
    """Classification of a failed case."""

    TRANSPORT = "transport"
    HTTP = "http"
    ASSERTION = "assertion"
    MISSING_TOKEN = "missing_token"
    TIMEOUT = "timeout"
    UNEXPECTED = "unexpected"


# Matches 3-digit HTTP status codes (100-599) with word boundaries
_HTTP_STATUS_CODE_PATTERN: re.Pattern[str] = re.compile(r"\b([1-5]\d{2})\b")

# Network-level error indicators for unreachable classification
_UNREACHABLE_INDICATORS: tuple[str, ...] = (
    "timed out",
    "timeout",
    "connection refused",
    "connection reset",
    "unreachable",
    "connect error",
    "could not connect",
    "network is unreachable",
    "no route to host",
    "name or service not known",
    "getaddrinfo failed",
    "temporary failure in name resolution",
)


def classify_failure(error: BaseException) -> FailureKind:
    """Classify the exception that ended a case.

    Uses a two-tier strategy:
    1. Typed harness exceptions map directly to their kind
    2. Anything else is inspected for network indicators, then HTTP status codes

    Network indicators are checked before status codes to avoid false
    positives from port numbers (e.g., "port 443" matching as HTTP 443).

    Args:
        error: The exception raised by the case action.

    Returns:
        The FailureKind for the case.
    """
    if isinstance(error, asyncio.TimeoutError):
        return FailureKind.TIMEOUT
    if isinstance(error, TransportError):
        return FailureKind.TRANSPORT
    if isinstance(error, HttpError):
        return FailureKind.HTTP
    if isinstance(error, MissingTokenError):
        return FailureKind.MISSING_TOKEN
    if isinstance(error, (ResponseAssertionError, AssertionError)):
        return FailureKind.ASSERTION

    error_msg_lower = str(error).lower()
    if any(indicator in error_msg_lower for indicator in _UNREACHABLE_INDICATORS):
        return FailureKind.TRANSPORT
    if _HTTP_STATUS_CODE_PATTERN.search(error_msg_lower):
        return FailureKind.HTTP

    return FailureKind.UNEXPECTED
