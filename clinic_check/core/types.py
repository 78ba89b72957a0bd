# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Summary types for clinic-check runs."""

import math
from dataclasses import dataclass, field
from enum import Enum

from clinic_check.core.constants import (
    EXIT_FAILURE,
    EXIT_OK,
    SUCCESS_RATE_THRESHOLD,
)
from clinic_check.core.error_classification import FailureKind
from clinic_check.core.models import CaseResult


class SummaryBanner(str, Enum):
    """Terminal state shown at the end of a run.

    SUCCESS: the API is mostly working (success rate at or above threshold)
    WARNING: some issues need attention
    """

    SUCCESS = "success"
    WARNING = "warning"


@dataclass
class RunSummary:
    """Aggregated results of one run.

    Derived from the ordered case results; never stored. The banner is purely
    informational: the exit code depends only on whether any case failed.

    Attributes:
        passed: Number of cases that passed
        failed: Number of cases that failed
        failures: The failed case results, in execution order

    Properties:
        total: passed + failed
        success_rate: round(100 * passed / total), 0 when nothing ran
    """

    passed: int = 0
    failed: int = 0
    failures: list[CaseResult] = field(default_factory=list)

    @classmethod
    def from_results(cls, results: list[CaseResult]) -> "RunSummary":
        """Build a summary from the runner's result sequence."""
        failures = [r for r in results if r.failed]
        return cls(
            passed=len(results) - len(failures),
            failed=len(failures),
            failures=failures,
        )

    @property
    def total(self) -> int:
        """Total number of cases (always computed from counts)."""
        return self.passed + self.failed

    @property
    def success_rate(self) -> int:
        """Success rate as a whole percentage, rounding halves up."""
        if self.total == 0:
            return 0
        return math.floor(100 * self.passed / self.total + 0.5)

    @property
    def banner(self) -> SummaryBanner:
        if self.success_rate >= SUCCESS_RATE_THRESHOLD:
            return SummaryBanner.SUCCESS
        return SummaryBanner.WARNING

    @property
    def has_failures(self) -> bool:
        """Check if any case failed."""
        return self.failed > 0

    @property
    def all_unreachable(self) -> bool:
        """Check if every case failed because the API could not be reached.

        Cases that never sent a request because login produced no token count
        as unreachable too, as long as at least one case hit a transport error.
        """
        if self.total == 0 or self.failed != self.total:
            return False
        kinds = {r.kind for r in self.failures}
        if FailureKind.TRANSPORT not in kinds:
            return False
        return kinds <= {FailureKind.TRANSPORT, FailureKind.MISSING_TOKEN}

    @property
    def exit_code(self) -> int:
        """Exit code: 1 if any case failed, otherwise 0."""
        return EXIT_FAILURE if self.has_failures else EXIT_OK

    def __str__(self) -> str:
        """Concise string representation: total/passed/failed."""
        return f"{self.total}/{self.passed}/{self.failed}"
