"""CLI command implementations"""

from typing import Annotated, Optional

import typer

from mdblog.config import Settings, load_config
from mdblog.errors import BlogError
from mdblog.service import BlogService
from mdblog.web import create_app


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _service(settings: Settings) -> BlogService:
    try:
        return BlogService.from_settings(settings)
    except ValueError as e:
        _fail(str(e))


def list_cmd(
    page: Annotated[int, typer.Option("--page", "-p", help="Page number (1-indexed)")] = 1,
    posts_dir: Annotated[Optional[str], typer.Option("--posts-dir", help="Posts directory")] = None,
    page_size: Annotated[Optional[int], typer.Option("--page-size", help="Items per page")] = None,
    ):
    """List one page of posts, newest first."""
    settings = _settings(overrides={"posts_directory": posts_dir, "page_size": page_size})
    service = _service(settings)
    try:
        result = service.get_page(page)
    except BlogError as e:
        _fail(type(e).__name__, e)

    for record in result.items:
        date = record.date if record.date is not None else "-"
        typer.echo(f"  {record.identifier}  {date}  {record.title or ''}".rstrip())
    if not result.items:
        typer.echo("No posts on this page.")
    typer.echo(f"Page {result.page_number}/{result.total_pages} ({result.total_items} posts)")


def show_cmd(
    identifier: Annotated[str, typer.Argument(help="Post identifier (filename without extension)")],
    posts_dir: Annotated[Optional[str], typer.Option("--posts-dir", help="Posts directory")] = None,
    ):
    """Print the rendered HTML of a single post."""
    settings = _settings(overrides={"posts_directory": posts_dir})
    service = _service(settings)
    try:
        record = service.get_item(identifier)
    except BlogError as e:
        _fail(type(e).__name__, e)
    if record is None:
        _fail(f"Not found: {identifier}")
    typer.echo(record.html)


def serve_cmd(
    posts_dir: Annotated[Optional[str], typer.Option("--posts-dir", help="Posts directory")] = None,
    host: Annotated[Optional[str], typer.Option("--host", help="Bind address")] = None,
    port: Annotated[Optional[int], typer.Option("--port", help="Port to listen on")] = None,
    ):
    """Serve the blog over HTTP."""
    settings = _settings(overrides={"posts_directory": posts_dir, "host": host, "port": port})
    service = _service(settings)
    app = create_app(service, settings.page_template, settings.post_template)
    typer.echo(f"Serving {settings.posts_directory} on http://{settings.host}:{settings.port}/")
    app.run(host=settings.host, port=settings.port)
