# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""URL parsing utilities for clinic-check.

This module provides generic URL manipulation utilities used for building
request URLs and for the connectivity hints shown when the API is down.
"""

from urllib.parse import urlparse


def extract_host(url: str) -> str:
    """Extract the host (and optional port) from a URL.

    Handles URLs with or without scheme prefixes.

    Args:
        url: A URL string (e.g., "http://localhost:8001/api").

    Returns:
        The host portion of the URL (e.g., "localhost:8001").
        Returns empty string for empty input.

    Examples:
        extract_host("http://localhost:8001/api")
        # Returns: 'localhost:8001'

        extract_host("clinic.local/api")
        # Returns: 'clinic.local'
    """
    if not url:
        return ""

    parsed = urlparse(url)
    if parsed.netloc:
        return parsed.netloc

    # Handle URLs without scheme (urlparse puts them in path)
    return parsed.path.split("/")[0]


def extract_hostname(url: str) -> str:
    """Extract the host name without port, suitable for ping."""
    return extract_host(url).rsplit("@", 1)[-1].split(":", 1)[0]


def normalize_base_url(url: str) -> str:
    """Strip trailing slashes so paths can be appended with a leading slash."""
    return url.rstrip("/")
