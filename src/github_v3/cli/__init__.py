"""
CLI application for the GitHub v3 client.

Provides commands for looking up users, repositories, commits and releases.
"""

from __future__ import annotations

from typing import Annotated

import httpx
import typer
from dotenv import find_dotenv, load_dotenv
from rich.markup import escape
from rich.table import Table

from github_v3.cli.release import app as release_app
from github_v3.cli.repo import repo_commits, repo_get
from github_v3.cli.utils import console, exit_error, format_rate, run_async
from github_v3.exceptions import GitHubError
from github_v3.request import RequestContext

app = typer.Typer(
    name="github-v3",
    help="GitHub v3 CLI - Query the GitHub REST API.",
    add_completion=False,
)

app.add_typer(release_app, name="release")
app.command("repo")(repo_get)
app.command("commits")(repo_commits)


@app.callback()
def main() -> None:
    """GitHub v3 CLI.

    Reads GITHUB_TOKEN (and the other GITHUB_* settings) from the environment or a
    .env file.
    """
    load_dotenv(find_dotenv(usecwd=True))


@app.command()
def version() -> None:
    """Show version information."""
    from github_v3 import __version__

    console.print(f"github-v3 v{__version__}")


@app.command()
def user(
    username: Annotated[
        str | None,
        typer.Argument(help="Login to look up. Defaults to the authenticated user."),
    ] = None,
) -> None:
    """Show a GitHub user."""
    from github_v3.cli.client_factory import github_client

    async def _get() -> None:
        ctx = RequestContext.background()
        try:
            async with github_client() as gh:
                if username:
                    found, response = await gh.users.get(ctx, username)
                else:
                    found, response = await gh.users.user(ctx)
        except (GitHubError, httpx.HTTPError, ValueError) as e:
            exit_error(e)

        table = Table(title=f"User: {found.login}")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("ID", str(found.id))
        table.add_row("Name", found.name or "-")
        table.add_row("Type", found.type or "-")
        table.add_row("Email", found.email or "-")
        created = found.created_at.isoformat() if found.created_at else "-"
        table.add_row("Created", created)
        table.add_row("URL", found.html_url)
        console.print(table)
        console.print(f"Rate: {format_rate(response.rate)}")

    run_async(_get())


@app.command()
def scopes(
    required: Annotated[
        list[str],
        typer.Argument(metavar="SCOPE...", help="OAuth scopes the token must have."),
    ],
) -> None:
    """Check that the access token has every given OAuth scope."""
    from github_v3.cli.client_factory import github_client

    async def _check() -> None:
        try:
            async with github_client() as gh:
                await gh.ensure_scopes(RequestContext.background(), *required)
        except (GitHubError, httpx.HTTPError, ValueError) as e:
            exit_error(e)

        console.print(f"[green]✓[/green] Token has scopes: {escape(', '.join(required))}")

    run_async(_check())
