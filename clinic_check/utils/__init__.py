# -*- coding: utf-8 -*-

"""Utility modules for clinic-check."""

from clinic_check.utils.terminal import terminal

__all__ = [
    "terminal",
]
