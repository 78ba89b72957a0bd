# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Console summary of a finished run."""

import logging

from clinic_check.cli.ui.banners import (
    display_success_banner,
    display_unreachable_banner,
    display_warning_banner,
)
from clinic_check.core.constants import SEPARATOR_WIDTH
from clinic_check.core.models import CaseResult
from clinic_check.core.types import RunSummary, SummaryBanner
from clinic_check.utils.terminal import LogType, log, terminal

logger = logging.getLogger(__name__)


class ResultReporter:
    """Aggregate case results and print the summary block."""

    def __init__(self, base_url: str | None = None) -> None:
        self.base_url = base_url

    @staticmethod
    def summarize(results: list[CaseResult]) -> RunSummary:
        return RunSummary.from_results(results)

    def report(self, summary: RunSummary) -> None:
        """Print totals, every failure and the closing banner.

        The banner reflects the success rate only; the process exit code is
        decided separately from summary.exit_code.
        """
        separator = "=" * SEPARATOR_WIDTH
        log(separator, LogType.INFO)
        log("TEST SUMMARY", LogType.INFO)
        log(separator, LogType.INFO)
        log(f"Total Tests: {summary.total}", LogType.INFO)
        log(f"Passed: {summary.passed}", LogType.SUCCESS)
        log(
            f"Failed: {summary.failed}",
            LogType.ERROR if summary.has_failures else LogType.INFO,
        )

        if summary.failures:
            log("Failed Tests:", LogType.ERROR)
            for result in summary.failures:
                log(f"  - {result.description}: {result.error}", LogType.ERROR)

        log(f"Success Rate: {summary.success_rate}%", LogType.INFO)
        logger.info("Run summary (total/passed/failed): %s", summary)
        log(terminal.format_test_summary(summary), LogType.INFO)

        if summary.all_unreachable and self.base_url:
            display_unreachable_banner(self.base_url, summary.failures[0].error or "")

        if summary.banner is SummaryBanner.SUCCESS:
            display_success_banner()
        else:
            display_warning_banner(summary.failed)
