"""Typer CLI commands for repository lookup."""

from __future__ import annotations

from typing import Annotated

import httpx
import typer
from rich.table import Table

from github_v3.cli.utils import (
    console,
    exit_error,
    format_pages,
    format_rate,
    parse_repo_slug,
    run_async,
)
from github_v3.exceptions import GitHubError
from github_v3.request import RequestContext


def repo_get(
    slug: Annotated[str, typer.Argument(metavar="OWNER/NAME", help="Repository to fetch.")],
) -> None:
    """Show a repository."""
    from github_v3.cli.client_factory import github_client

    owner, name = parse_repo_slug(slug)

    async def _get() -> None:
        try:
            async with github_client() as gh:
                repository, _ = await gh.repo(owner, name).get(RequestContext.background())
        except (GitHubError, httpx.HTTPError, ValueError) as e:
            exit_error(e)

        table = Table(title=f"Repository: {repository.full_name}")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Description", repository.description or "-")
        table.add_row("Owner", repository.owner.login)
        table.add_row("Default Branch", repository.default_branch)
        table.add_row("Private", "yes" if repository.private else "no")
        table.add_row("Fork", "yes" if repository.fork else "no")
        table.add_row("Archived", "yes" if repository.archived else "no")
        table.add_row("Topics", ", ".join(repository.topics) or "-")
        table.add_row("URL", repository.html_url)
        console.print(table)

    run_async(_get())


def repo_commits(
    slug: Annotated[str, typer.Argument(metavar="OWNER/NAME", help="Repository to list.")],
    per_page: Annotated[int, typer.Option("--per-page", help="Commits per page.")] = 10,
    page: Annotated[int, typer.Option("--page", help="Page number (1-based).")] = 1,
) -> None:
    """List commits of a repository, with pagination and rate-limit status."""
    from github_v3.cli.client_factory import github_client

    owner, name = parse_repo_slug(slug)

    async def _list() -> None:
        try:
            async with github_client() as gh:
                commits, response = await gh.repo(owner, name).commits(
                    RequestContext.background(), per_page, page
                )
        except (GitHubError, httpx.HTTPError, ValueError) as e:
            exit_error(e)

        table = Table(title=f"Commits: {owner}/{name}")
        table.add_column("SHA", style="cyan", no_wrap=True)
        table.add_column("Author")
        table.add_column("Message", style="green")

        for commit in commits:
            message = commit.commit.message.splitlines()[0] if commit.commit.message else ""
            table.add_row(commit.sha[:7], commit.commit.author.name, message)

        console.print(table)
        console.print(f"Pages: {format_pages(response.pages)}")
        console.print(f"Rate: {format_rate(response.rate)}")

    run_async(_list())
