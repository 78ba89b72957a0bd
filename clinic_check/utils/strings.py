# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""String utility functions for clinic-check."""


def mask_token(token: str, visible_chars: int = 8) -> str:
    """Mask a bearer token for safe logging.

    Args:
        token: Token string to mask
        visible_chars: Number of characters to show at start/end

    Returns:
        Masked token string (e.g., "eyJhbGci...xyz123ab")

    Examples:
        >>> mask_token("short")
        '***'
    """
    if len(token) <= visible_chars * 2:
        return "***"
    return f"{token[:visible_chars]}...{token[-visible_chars:]}"
