# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Run reporting: console summary and JUnit XML export."""

from clinic_check.reporting.reporter import ResultReporter
from clinic_check.reporting.xunit import build_xunit, write_xunit

__all__ = ["ResultReporter", "build_xunit", "write_xunit"]
