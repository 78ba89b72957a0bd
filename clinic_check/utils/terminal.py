"""Centralized terminal formatting utilities for clinic-check."""

from enum import Enum

from colorama import Fore, Style, init
import os
import re

import typer

from clinic_check.core.types import RunSummary

# autoreset=True means colors reset after each print
init(autoreset=True)


class LogType(str, Enum):
    """Kinds of console lines emitted during a run."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"


class TerminalColors:
    """Centralized color scheme for consistent terminal output.

    This class provides semantic color mappings and formatting methods
    to ensure consistent terminal output across the clinic-check codebase.
    """

    # Semantic color mapping for different message types
    ERROR = Fore.RED
    WARNING = Fore.YELLOW
    SUCCESS = Fore.GREEN
    INFO = Fore.CYAN
    RESET = Style.RESET_ALL

    # Check if colors should be disabled (for CI/CD environments)
    NO_COLOR = os.environ.get("NO_COLOR") is not None

    # Regex pattern to match ANSI escape sequences
    ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

    @classmethod
    def strip_ansi(cls, text: str) -> str:
        """Remove all ANSI escape sequences from text.

        Args:
            text: Text potentially containing ANSI color codes

        Returns:
            Clean text without any ANSI escape sequences
        """
        return cls.ANSI_ESCAPE_PATTERN.sub("", text)

    @classmethod
    def _colorize(cls, color: str, text: str) -> str:
        if cls.NO_COLOR:
            return text
        return f"{color}{text}{cls.RESET}"

    @classmethod
    def error(cls, text: str) -> str:
        """Format error text in red."""
        return cls._colorize(cls.ERROR, text)

    @classmethod
    def warning(cls, text: str) -> str:
        """Format warning text in yellow."""
        return cls._colorize(cls.WARNING, text)

    @classmethod
    def success(cls, text: str) -> str:
        """Format success text in green."""
        return cls._colorize(cls.SUCCESS, text)

    @classmethod
    def info(cls, text: str) -> str:
        """Format info text in cyan."""
        return cls._colorize(cls.INFO, text)

    @classmethod
    def log_line(cls, message: str, log_type: LogType = LogType.INFO) -> str:
        """Format a run log line as "[TYPE] message" in the type's color.

        Args:
            message: Message to display
            log_type: One of info, success, error, warning

        Returns:
            The prefixed, colored line
        """
        log_type = LogType(log_type)
        formatter = {
            LogType.INFO: cls.info,
            LogType.SUCCESS: cls.success,
            LogType.ERROR: cls.error,
            LogType.WARNING: cls.warning,
        }[log_type]
        return formatter(f"[{log_type.value.upper()}] {message}")

    @classmethod
    def format_test_summary(cls, summary: RunSummary) -> str:
        """Format a one-line summary: 'N tests, N passed, N failed.'

        Numbers are colored only when greater than zero; labels never are.
        """
        passed = (
            cls.success(str(summary.passed)) if summary.passed else str(summary.passed)
        )
        failed = cls.error(str(summary.failed)) if summary.failed else str(summary.failed)
        return f"{summary.total} tests, {passed} passed, {failed} failed."


# Single instance for use across the codebase
terminal = TerminalColors()


def log(message: str, log_type: LogType = LogType.INFO) -> None:
    """Echo a "[TYPE] message" run line to stdout."""
    typer.echo(TerminalColors.log_line(message, log_type))
