# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Isolated execution of individual cases."""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

from clinic_check.core.error_classification import FailureKind, classify_failure
from clinic_check.core.models import CaseResult, CaseStatus
from clinic_check.utils.terminal import LogType, log

logger = logging.getLogger(__name__)

CaseAction = Callable[[], Awaitable[object]]


def _error_message(error: BaseException) -> str:
    return str(error) or error.__class__.__name__


class CaseRunner:
    """Run cases one at a time and record exactly one result per case.

    A failing case never stops the run: whatever the action raises (harness
    errors, HTTP errors, or any unexpected Exception) is turned into a FAILED
    result. Only BaseException subclasses outside Exception (interrupts,
    cancellation, SystemExit) propagate.
    """

    def __init__(self, case_timeout: float | None = None) -> None:
        """
        Args:
            case_timeout: Seconds a single case may take; None waits indefinitely.
        """
        self.case_timeout = case_timeout
        self._results: list[CaseResult] = []
        self.phase: str | None = None

    @property
    def results(self) -> list[CaseResult]:
        """Results in execution order (a copy; the runner owns the sequence)."""
        return list(self._results)

    async def _invoke(self, action: CaseAction) -> None:
        if self.case_timeout is None:
            await action()
        else:
            await asyncio.wait_for(action(), timeout=self.case_timeout)

    async def run(self, description: str, action: CaseAction) -> CaseResult:
        """Execute one case and record its result.

        Args:
            description: Human-readable case name, also its identity in reports.
            action: Zero-argument coroutine function; raising means failure.

        Returns:
            The recorded CaseResult.
        """
        log(f"Testing: {description}", LogType.INFO)
        started = time.monotonic()
        try:
            await self._invoke(action)
        except Exception as e:
            if isinstance(e, asyncio.TimeoutError) and self.case_timeout is not None:
                message = f"timed out after {self.case_timeout}s"
                kind = FailureKind.TIMEOUT
            else:
                message = _error_message(e)
                kind = classify_failure(e)
            result = self._record_failure(description, message, kind, started, e)
        else:
            result = CaseResult(
                description=description,
                status=CaseStatus.PASSED,
                phase=self.phase,
                duration=time.monotonic() - started,
            )
            self._results.append(result)
            log(f"✓ {description}", LogType.SUCCESS)
        return result

    def _record_failure(
        self,
        description: str,
        message: str,
        kind: FailureKind,
        started: float,
        error: BaseException,
    ) -> CaseResult:
        result = CaseResult(
            description=description,
            status=CaseStatus.FAILED,
            error=message,
            kind=kind,
            phase=self.phase,
            duration=time.monotonic() - started,
        )
        self._results.append(result)
        logger.debug("Case %r failed (%s)", description, kind.value, exc_info=error)
        log(f"✗ {description}: {message}", LogType.ERROR)
        return result
