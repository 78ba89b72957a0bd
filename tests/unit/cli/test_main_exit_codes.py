# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Tests for main.py exit code handling."""

from pathlib import Path
from unittest.mock import AsyncMock, Mock, patch

import pytest
from typer.testing import CliRunner

from clinic_check.cli.main import app
from clinic_check.core.error_classification import FailureKind
from clinic_check.core.models import CaseResult, CaseStatus

from .conftest import run_cli


def _mock_orchestrator(results: list[CaseResult]) -> Mock:
    mock_orchestrator = Mock()
    mock_orchestrator.run = AsyncMock(return_value=results)
    return mock_orchestrator


def _results(passed: int, failed: int) -> list[CaseResult]:
    return [
        CaseResult(f"ok {i}", CaseStatus.PASSED, phase="health") for i in range(passed)
    ] + [
        CaseResult(
            f"bad {i}",
            CaseStatus.FAILED,
            error="HTTP 500",
            kind=FailureKind.HTTP,
            phase="health",
        )
        for i in range(failed)
    ]


class TestMainExitCodes:
    """Tests for exit code handling in main.py CLI."""

    @patch("clinic_check.cli.main.SuiteOrchestrator")
    def test_exit_code_0_all_tests_passed(self, mock_orchestrator_cls: Mock) -> None:
        mock_orchestrator_cls.return_value = _mock_orchestrator(_results(20, 0))

        result = run_cli()

        assert result.exit_code == 0
        assert "Success Rate: 100%" in result.output
        assert "All systems are working correctly!" in result.output

    @patch("clinic_check.cli.main.SuiteOrchestrator")
    def test_exit_code_1_even_above_threshold(self, mock_orchestrator_cls: Mock) -> None:
        """A single failure exits 1 although the success banner is shown."""
        mock_orchestrator_cls.return_value = _mock_orchestrator(_results(9, 1))

        result = run_cli()

        assert result.exit_code == 1
        assert "Success Rate: 90%" in result.output
        assert "All systems are working correctly!" in result.output

    @patch("clinic_check.cli.main.SuiteOrchestrator")
    def test_exit_code_1_below_threshold(self, mock_orchestrator_cls: Mock) -> None:
        mock_orchestrator_cls.return_value = _mock_orchestrator(_results(8, 2))

        result = run_cli()

        assert result.exit_code == 1
        assert "Some issues detected" in result.output

    @patch("clinic_check.cli.main.SuiteOrchestrator")
    def test_fatal_error(self, mock_orchestrator_cls: Mock) -> None:
        mock_orchestrator = Mock()
        mock_orchestrator.run = AsyncMock(side_effect=RuntimeError("setup exploded"))
        mock_orchestrator_cls.return_value = mock_orchestrator

        result = run_cli()

        assert result.exit_code == 1
        assert "Fatal error: setup exploded" in result.output
        assert "TEST SUMMARY" not in result.output

    @patch("clinic_check.cli.main.asyncio.run", side_effect=KeyboardInterrupt)
    @patch("clinic_check.cli.main.SuiteOrchestrator")
    def test_interrupt(self, mock_orchestrator_cls: Mock, mock_run: Mock) -> None:
        result = run_cli()

        assert result.exit_code == 1
        assert "Test interrupted by user" in result.output

    @patch("clinic_check.cli.main.write_xunit", side_effect=OSError("read-only"))
    @patch("clinic_check.cli.main.SuiteOrchestrator")
    def test_xunit_write_failure_exits_1(
        self, mock_orchestrator_cls: Mock, mock_write: Mock, tmp_path: Path
    ) -> None:
        mock_orchestrator_cls.return_value = _mock_orchestrator(_results(3, 0))

        result = run_cli(["--xunit", str(tmp_path / "xunit.xml")])

        assert result.exit_code == 1
        mock_write.assert_called_once()


class TestMainOptions:
    """Tests for option parsing and wiring."""

    @patch("clinic_check.cli.main.SuiteOrchestrator")
    def test_options_passed_to_orchestrator(self, mock_orchestrator_cls: Mock) -> None:
        mock_orchestrator_cls.return_value = _mock_orchestrator(_results(1, 0))

        result = run_cli(["--request-timeout", "2.5", "--case-timeout", "10"])

        assert result.exit_code == 0
        mock_orchestrator_cls.assert_called_once_with(
            base_url="http://clinic.test/api",
            request_timeout=2.5,
            case_timeout=10.0,
        )

    @patch("clinic_check.cli.main.SuiteOrchestrator")
    def test_base_url_from_environment(
        self, mock_orchestrator_cls: Mock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CLINIC_CHECK_BASE_URL", "http://env.test/api")
        mock_orchestrator_cls.return_value = _mock_orchestrator(_results(1, 0))

        result = CliRunner().invoke(app, [])

        assert result.exit_code == 0
        assert mock_orchestrator_cls.call_args.kwargs["base_url"] == "http://env.test/api"

    @patch("clinic_check.cli.main.SuiteOrchestrator")
    def test_defaults(self, mock_orchestrator_cls: Mock, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CLINIC_CHECK_BASE_URL", raising=False)
        mock_orchestrator_cls.return_value = _mock_orchestrator(_results(1, 0))

        CliRunner().invoke(app, [])

        mock_orchestrator_cls.assert_called_once_with(
            base_url="http://localhost:8001/api",
            request_timeout=None,
            case_timeout=None,
        )

    @patch("clinic_check.cli.main.SuiteOrchestrator")
    def test_writes_xunit(self, mock_orchestrator_cls: Mock, tmp_path: Path) -> None:
        mock_orchestrator_cls.return_value = _mock_orchestrator(_results(2, 1))
        output = tmp_path / "xunit.xml"

        result = run_cli(["--xunit", str(output)])

        assert result.exit_code == 1
        assert output.is_file()
        assert 'failures="1"' in output.read_text(encoding="utf-8")

    def test_version(self) -> None:
        result = run_cli(["--version"])

        assert result.exit_code == 0
        assert result.output.startswith("clinic-check, version ")

    def test_rejects_unknown_verbosity(self) -> None:
        result = run_cli(["-v", "LOUD"])

        assert result.exit_code == 2
