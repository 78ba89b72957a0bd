# -*- coding: utf-8 -*-

# Copyright: (c) 2025, Daniel Schmidt <danischm@cisco.com>

import asyncio
import logging
from pathlib import Path

import errorhandler

import typer
from typing_extensions import Annotated

import clinic_check
from clinic_check.core.constants import DEFAULT_BASE_URL, EXIT_FAILURE
from clinic_check.core.types import RunSummary
from clinic_check.orchestrator import SuiteOrchestrator
from clinic_check.reporting import ResultReporter, write_xunit
from clinic_check.utils.logging import configure_logging, VerbosityLevel
from clinic_check.utils.terminal import LogType, log


app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)

error_handler = errorhandler.ErrorHandler()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"clinic-check, version {clinic_check.__version__}")
        raise typer.Exit()


Verbosity = Annotated[
    VerbosityLevel,
    typer.Option(
        "-v",
        "--verbosity",
        help="Verbosity level.",
        envvar="CLINIC_CHECK_VERBOSITY",
        is_eager=True,
    ),
]


BaseUrl = Annotated[
    str,
    typer.Option(
        "-u",
        "--base-url",
        help="Base URL of the clinic API, including the path prefix.",
        envvar="CLINIC_CHECK_BASE_URL",
    ),
]


RequestTimeout = Annotated[
    float | None,
    typer.Option(
        "--request-timeout",
        help="Timeout in seconds for each HTTP request.",
        envvar="CLINIC_CHECK_REQUEST_TIMEOUT",
        min=0.1,
    ),
]


CaseTimeout = Annotated[
    float | None,
    typer.Option(
        "--case-timeout",
        help="Timeout in seconds for each test case. Unlimited if not specified.",
        envvar="CLINIC_CHECK_CASE_TIMEOUT",
        min=0.1,
    ),
]


XUnit = Annotated[
    Path | None,
    typer.Option(
        "--xunit",
        dir_okay=False,
        file_okay=True,
        help="Write results to a JUnit XML file.",
        envvar="CLINIC_CHECK_XUNIT",
    ),
]


Version = Annotated[
    bool,
    typer.Option(
        "--version",
        callback=version_callback,
        help="Display version number.",
        is_eager=True,
    ),
]


@app.command()
def main(
    base_url: BaseUrl = DEFAULT_BASE_URL,
    request_timeout: RequestTimeout = None,
    case_timeout: CaseTimeout = None,
    xunit: XUnit = None,
    verbosity: Verbosity = VerbosityLevel.WARNING,
    version: Version = False,
) -> None:
    """A CLI tool to verify the role-based behaviour of the clinic REST API."""
    configure_logging(verbosity, error_handler)

    orchestrator = SuiteOrchestrator(
        base_url=base_url,
        request_timeout=request_timeout,
        case_timeout=case_timeout,
    )
    reporter = ResultReporter(base_url=base_url)

    try:
        results = asyncio.run(orchestrator.run())
    except KeyboardInterrupt:
        log("Test interrupted by user", LogType.WARNING)
        raise typer.Exit(EXIT_FAILURE)
    except Exception as e:
        logger.debug("Fatal error", exc_info=True)
        log(f"Fatal error: {str(e) or e.__class__.__name__}", LogType.ERROR)
        raise typer.Exit(EXIT_FAILURE)

    summary = reporter.summarize(results)
    reporter.report(summary)

    if xunit is not None:
        try:
            write_xunit(results, xunit)
        except OSError as e:
            logger.error(f"Failed to write JUnit XML to {xunit}: {e}")

    exit(summary)


def exit(summary: RunSummary) -> None:
    if error_handler.fired:
        raise typer.Exit(1)
    else:
        raise typer.Exit(summary.exit_code)
