"""Shared utilities for CLI commands (console output, async helpers, argument parsing)."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, NoReturn, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from collections.abc import Coroutine

    from github_v3.response import Pages, Rate

console = Console()

T = TypeVar("T")


def run_async(coro: Coroutine[object, object, T]) -> T:
    """Run a coroutine from a sync CLI command.

    Raises:
        typer.Exit: With code 130 on KeyboardInterrupt (standard SIGINT exit code).
    """
    try:
        return asyncio.run(coro)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(130) from None


def exit_error(error: BaseException) -> NoReturn:
    """Print an error message and exit with code 1."""
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(1) from None


def parse_repo_slug(slug: str) -> tuple[str, str]:
    """Split `OWNER/NAME` into its parts.

    Raises:
        typer.Exit: With code 2 when the slug is not of the form `OWNER/NAME`.
    """
    owner, sep, name = slug.strip().partition("/")
    if not sep or not owner or not name or "/" in name:
        console.print(f"[red]Error:[/red] Invalid repository '{escape(slug)}'.")
        console.print("[dim]Expected OWNER/NAME, e.g. octocat/Hello-World.[/dim]")
        raise typer.Exit(2)
    return owner, name


def format_pages(pages: Pages) -> str:
    return f"first={pages.first} prev={pages.prev} next={pages.next} last={pages.last}"


def format_rate(rate: Rate) -> str:
    reset = rate.reset_clock() if rate.reset else "-"
    return f"limit={rate.limit} used={rate.used} remaining={rate.remaining} reset={reset}"
