# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""CLI user interface components for clinic-check.

Currently contains:
    - banners.py: Closing banners of the run summary
"""

from clinic_check.cli.ui.banners import (
    display_success_banner,
    display_unreachable_banner,
    display_warning_banner,
)

__all__ = [
    "display_success_banner",
    "display_unreachable_banner",
    "display_warning_banner",
]
