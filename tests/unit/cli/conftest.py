# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
from click.testing import Result
from typer.testing import CliRunner

from clinic_check.cli.main import app

runner = CliRunner()


def run_cli(additional_args: list[str] | None = None) -> Result:
    """Run the CLI against a placeholder base URL."""
    args = additional_args or []
    return runner.invoke(app, ["--base-url", "http://clinic.test/api"] + args)
