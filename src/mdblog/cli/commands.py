"""CLI command implementations"""

import asyncio
import json
from typing import Annotated, Optional

import typer

from mdblog.config import Settings, load_config
from mdblog.core.components import prose_components
from mdblog.core.errors import ContentError, ContentNotFoundError
from mdblog.core.pipeline import get_post, list_posts
from mdblog.core.render import PostRenderer


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


def list_cmd(
    content_dir: Annotated[Optional[str], typer.Option("--content-dir", help="Directory holding the posts")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print metadata as JSON")] = False,
    ):
    """List all posts, newest first."""
    settings = _settings(overrides={"content_dir": content_dir})
    try:
        posts = asyncio.run(list_posts(settings.content_dir, settings.file_extension))
    except ContentError as e:
        _fail("Could not list posts", e)

    if as_json:
        typer.echo(json.dumps([p.model_dump() for p in posts], indent=2, ensure_ascii=False))
        return
    if not posts:
        typer.echo(f"No posts found in {settings.content_dir}/")
        return
    for p in posts:
        typer.echo(f"{p.id}  {p.date}  {p.slug}  {p.title}")


def show_cmd(
    slug: Annotated[str, typer.Argument(help="Post slug, e.g. 001-hello-world")],
    content_dir: Annotated[Optional[str], typer.Option("--content-dir", help="Directory holding the posts")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print metadata and HTML as JSON")] = False,
    ):
    """Render a single post to HTML."""
    settings = _settings(overrides={"content_dir": content_dir})
    renderer = PostRenderer(
        prose_components(),
        settings.parser_config,
        settings.anchor_min_level,
        settings.anchor_max_level,
    )
    try:
        post = asyncio.run(get_post(settings.content_dir, slug, renderer, settings.file_extension))
    except ContentNotFoundError as e:
        _fail(f"No post for slug '{slug}'", e)
    except ContentError as e:
        _fail(f"Could not load post '{slug}'", e)

    if as_json:
        typer.echo(json.dumps({"meta": post.meta.model_dump(), "content": post.content}, indent=2, ensure_ascii=False))
    else:
        typer.echo(post.content, nl=False)
