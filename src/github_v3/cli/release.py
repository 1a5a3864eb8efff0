"""Typer CLI commands for releases."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import httpx
import typer
from rich.markup import escape
from rich.table import Table

from github_v3.cli.utils import console, exit_error, parse_repo_slug, run_async
from github_v3.exceptions import GitHubError
from github_v3.request import RequestContext

app = typer.Typer(help="Release commands.")


@app.command("latest")
def release_latest(
    slug: Annotated[str, typer.Argument(metavar="OWNER/NAME", help="Repository.")],
) -> None:
    """Show the latest published release."""
    from github_v3.cli.client_factory import github_client

    owner, name = parse_repo_slug(slug)

    async def _latest() -> None:
        try:
            async with github_client() as gh:
                release, _ = await gh.repo(owner, name).latest_release(
                    RequestContext.background()
                )
        except (GitHubError, httpx.HTTPError, ValueError) as e:
            exit_error(e)

        table = Table(title=f"Release: {release.tag_name}")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Name", release.name or "-")
        table.add_row("Tag", release.tag_name)
        table.add_row("Author", release.author.login)
        published = release.published_at.isoformat() if release.published_at else "-"
        table.add_row("Published", published)
        table.add_row("URL", release.html_url)
        console.print(table)

        if release.assets:
            assets = Table(title="Assets")
            assets.add_column("Name", style="cyan")
            assets.add_column("Size", justify="right")
            assets.add_column("Downloads", justify="right")
            for asset in release.assets:
                assets.add_row(asset.name, str(asset.size), str(asset.download_count))
            console.print(assets)

    run_async(_latest())


@app.command("download")
def release_download(
    slug: Annotated[str, typer.Argument(metavar="OWNER/NAME", help="Repository.")],
    tag: Annotated[str, typer.Argument(help="Release tag.")],
    asset: Annotated[str, typer.Argument(help="Asset file name.")],
    out: Annotated[Path, typer.Argument(help="Where to write the asset.")],
) -> None:
    """Download a release asset to a local file."""
    from github_v3.cli.client_factory import github_client

    owner, name = parse_repo_slug(slug)

    async def _download() -> None:
        try:
            async with github_client() as gh:
                await gh.repo(owner, name).download_release_asset(
                    RequestContext.background(), tag, asset, out
                )
        except (GitHubError, httpx.HTTPError, OSError, ValueError) as e:
            exit_error(e)

        size = out.stat().st_size
        console.print(
            f"[green]✓[/green] Downloaded {escape(asset)} ({size} bytes) to {escape(str(out))}"
        )

    run_async(_download())
