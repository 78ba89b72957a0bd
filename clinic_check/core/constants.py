# -*- coding: utf-8 -*-

"""Core constants shared across the clinic-check harness."""

# Backend location
DEFAULT_BASE_URL = "http://localhost:8001/api"

# Demo accounts seeded by the backend
DEMO_EMAIL_DOMAIN = "panchakarma.com"
DEMO_PASSWORD = "demo123"

# Key suffix for tokens obtained through the credential login
SECONDARY_TOKEN_SUFFIX = "_regular"

# Summary banner threshold (percent), informational only
SUCCESS_RATE_THRESHOLD = 90

# Process exit codes
EXIT_OK = 0
EXIT_FAILURE = 1

# Console layout
SEPARATOR_WIDTH = 50
