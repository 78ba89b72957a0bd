# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""HTTP status code constants shared across the clinic-check harness."""

# HTTP status code range boundaries - single source of truth
HTTP_STATUS_SUCCESS_MIN: int = 200
HTTP_STATUS_SUCCESS_MAX: int = 299

# Status a role-protected resource answers with when the role does not match
HTTP_FORBIDDEN: int = 403
