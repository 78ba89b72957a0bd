# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""Terminal banner components for the end-of-run summary.

Supports both Unicode (interactive terminals) and ASCII (NO_COLOR/CI
environments) output modes.
"""

from dataclasses import dataclass

import typer

from clinic_check.utils.terminal import TerminalColors
from clinic_check.utils.url import extract_hostname

# Type alias for typer color values
ColorValue = str | int | tuple[int, int, int]

# Leaves room for 2-char border within 80-column terminal
BANNER_CONTENT_WIDTH: int = 78
# Emojis display as 2 chars wide but len() returns 1
EMOJI_DISPLAY_WIDTH_ADJUSTMENT: int = 2


@dataclass(frozen=True)
class BoxStyle:
    """Terminal box-drawing style configuration.

    Attributes:
        top_left: Top-left corner character.
        top_right: Top-right corner character.
        bottom_left: Bottom-left corner character.
        bottom_right: Bottom-right corner character.
        horizontal: Horizontal line character.
        vertical: Vertical line character.
        mid_left: Middle-left junction character.
        mid_right: Middle-right junction character.
        emoji_adjustment: Width adjustment for emoji characters (0 for ASCII, 2 for Unicode).
    """

    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str
    mid_left: str
    mid_right: str
    emoji_adjustment: int


ASCII_BOX_STYLE = BoxStyle(
    top_left="+",
    top_right="+",
    bottom_left="+",
    bottom_right="+",
    horizontal="=",
    vertical="|",
    mid_left="+",
    mid_right="+",
    emoji_adjustment=0,
)

UNICODE_BOX_STYLE = BoxStyle(
    top_left="╔",
    top_right="╗",
    bottom_left="╚",
    bottom_right="╝",
    horizontal="═",
    vertical="║",
    mid_left="╠",
    mid_right="╣",
    emoji_adjustment=EMOJI_DISPLAY_WIDTH_ADJUSTMENT,
)


def _get_box_style(no_color: bool) -> BoxStyle:
    """Return ASCII or Unicode box style based on color mode."""
    return ASCII_BOX_STYLE if no_color else UNICODE_BOX_STYLE


def _build_bordered_line(content: str, width: int, style: BoxStyle) -> str:
    padded = content + " " * (width - len(content))
    return style.vertical + padded + style.vertical


def _build_title_line(title: str, width: int, style: BoxStyle) -> str:
    """Center title accounting for emoji display width adjustment."""
    title_display_width = len(title) + style.emoji_adjustment
    title_padding = (width - title_display_width) // 2
    remaining = width - title_padding - title_display_width
    return (
        style.vertical + " " * title_padding + title + " " * remaining + style.vertical
    )


def _render_banner(
    title: str,
    content_lines: list[str],
    border_color: ColorValue = typer.colors.RED,
    text_color: ColorValue = typer.colors.WHITE,
) -> None:
    """Render a styled terminal banner with box borders.

    Args:
        title: The banner title text. For Unicode mode, can include emoji.
        content_lines: List of content strings (one per line inside the box).
        border_color: Typer color for borders in color mode.
        text_color: Typer color for content text in color mode.
    """
    width = BANNER_CONTENT_WIDTH
    no_color = TerminalColors.NO_COLOR
    style = _get_box_style(no_color)

    h_border = style.horizontal * width
    top_border = style.top_left + h_border + style.top_right
    separator = style.mid_left + h_border + style.mid_right
    bottom_border = style.bottom_left + h_border + style.bottom_right
    title_line = _build_title_line(title, width, style)

    bordered_content = [
        _build_bordered_line(line, width, style) for line in content_lines
    ]

    if no_color:
        typer.echo(top_border)
        typer.echo(title_line)
        typer.echo(separator)
        for line in bordered_content:
            typer.echo(line)
        typer.echo(bottom_border)
    else:
        typer.echo(typer.style(top_border, fg=border_color))
        typer.echo(typer.style(title_line, fg=border_color))
        typer.echo(typer.style(separator, fg=border_color))
        for line in bordered_content:
            typer.echo(
                typer.style(style.vertical, fg=border_color)
                + typer.style(line[1:-1], fg=text_color)
                + typer.style(style.vertical, fg=border_color)
            )
        typer.echo(typer.style(bottom_border, fg=border_color))


def display_success_banner() -> None:
    """Display the closing banner for a mostly healthy API."""
    no_color = TerminalColors.NO_COLOR
    title = "ALL SYSTEMS OPERATIONAL" if no_color else "✅ ALL SYSTEMS OPERATIONAL"
    content_lines = [
        "",
        "All systems are working correctly!",
        "",
    ]
    _render_banner(title, content_lines, border_color=typer.colors.GREEN)


def display_warning_banner(failed: int) -> None:
    """Display the closing banner when the success rate is below threshold.

    Args:
        failed: Number of failed cases, shown in the hint.
    """
    no_color = TerminalColors.NO_COLOR
    title = "!!! ISSUES DETECTED !!!" if no_color else "⚠ ISSUES DETECTED"
    content_lines = [
        "",
        "Some issues detected. Please check the failed tests above.",
        f"{failed} case(s) need attention.",
        "",
    ]
    _render_banner(title, content_lines, border_color=typer.colors.YELLOW)


def display_unreachable_banner(base_url: str, detail: str) -> None:
    """Display a prominent banner when the API could not be reached at all.

    Shown when every case failed with a transport error (connection refused,
    DNS failure, timeout). It provides connectivity debugging steps.

    Args:
        base_url: The API base URL that was attempted.
        detail: Human-readable error detail from the first failure.
    """
    host = extract_hostname(base_url)
    no_color = TerminalColors.NO_COLOR
    title = "!!! API UNREACHABLE !!!" if no_color else "⛔ API UNREACHABLE"
    content_lines = [
        "",
        f"Could not connect to the clinic API at {base_url}",
        f"{detail}"[: BANNER_CONTENT_WIDTH - 1],
        "",
        "Verify the backend is running and the URL is correct:",
        f"  curl {base_url.rstrip('/')}/health",
        f"  ping {host}",
        "",
    ]
    _render_banner(title, content_lines)
