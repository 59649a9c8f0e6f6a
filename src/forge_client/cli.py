"""Command line entry point."""

import asyncio
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from forge_client.clients.http import HttpGithubClient, HttpxTransport, build_async_client
from forge_client.errors import ClientError
from forge_client.logging_config import configure_logging
from forge_client.models.page import Pagination
from forge_client.models.release import Release
from forge_client.models.repository import parse_repository_ref
from forge_client.pagination import iter_releases
from forge_client.queries import GetReleaseListQuery
from forge_client.settings import ClientSettings

app = typer.Typer(no_args_is_help=True, help="Read release listings from a forge REST API.")

_console = Console()
_err_console = Console(stderr=True)


@app.callback()
def main() -> None:
    """Read release listings from a forge REST API."""


async def _collect(
    settings: ClientSettings,
    query: GetReleaseListQuery,
    max_pages: int | None,
) -> list[Release]:
    releases: list[Release] = []
    async with HttpGithubClient(HttpxTransport(build_async_client(settings))) as client:
        async for release, _cursor in iter_releases(client, query, max_pages=max_pages):
            releases.append(release)
    return releases


def _render_table(repository: str, releases: list[Release]) -> Table:
    table = Table(title=f"Releases of {repository}")
    table.add_column("Tag", style="bright_green", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Published", style="dim")
    table.add_column("Assets", justify="right")
    for release in releases:
        flags = " (draft)" if release.draft else " (pre)" if release.prerelease else ""
        published = release.published_at.date().isoformat() if release.published_at else "-"
        table.add_row(release.tag_name + flags, release.name or "", published, str(len(release.assets)))
    return table


@app.command()
def releases(
    repository: Annotated[str, typer.Argument(help="Numeric repository id or `owner/name`.")],
    per_page: Annotated[int | None, typer.Option(min=1, help="Page size hint.")] = None,
    max_pages: Annotated[int | None, typer.Option(min=1, help="Stop after this many pages.")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print one JSON object per release.")] = False,
) -> None:
    """List every release of a repository, following pagination cursors."""
    try:
        repository_ref = parse_repository_ref(repository)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="REPOSITORY") from e

    settings = ClientSettings()
    configure_logging(settings.log_level, json_output=settings.log_json)

    query = GetReleaseListQuery.new(repository_ref).set_context(settings.context())
    query.auth = settings.auth()
    if per_page is not None:
        query.pagination = Pagination(per_page=per_page)

    try:
        found = asyncio.run(_collect(settings, query, max_pages))
    except ClientError as e:
        _err_console.print(f"[red]Error ({e.kind}):[/red] {e.message}")
        raise typer.Exit(code=1) from e

    if as_json:
        for release in found:
            typer.echo(release.model_dump_json())
        return
    _console.print(_render_table(repository, found))
