# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""HTTP access to the clinic API."""

from clinic_check.http.client import ApiClient

__all__ = [
    "ApiClient",
]
