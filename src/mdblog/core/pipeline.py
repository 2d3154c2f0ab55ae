"""Post listing and detail fetch: read -> parse header -> validate -> derive id/slug -> render"""

import asyncio
import logging
import os
from collections.abc import Iterable
from typing import Any

from mdblog.core.models import PostMeta, RenderedPost
from mdblog.core.parse import list_filenames, read_source, split_frontmatter
from mdblog.core.render import PostRenderer
from mdblog.core.schema import validate_frontmatter, validate_meta
from mdblog.core.utils.slug import FILE_EXTENSION, filename_to_id, slug_to_filename, slugify


logger = logging.getLogger(__name__)


def _sort_key(meta: PostMeta) -> tuple[bool, int, str]:
    """Numeric ids rank above non-numeric ones and compare by value; ties fall back to the id text."""
    numeric = meta.id.isdigit()
    return numeric, int(meta.id) if numeric else 0, meta.id


def sort_posts(posts: Iterable[PostMeta]) -> list[PostMeta]:
    """Sort posts newest first (descending id)."""
    return sorted(posts, key=_sort_key, reverse=True)


def build_meta(filename: str, frontmatter: dict[str, Any], extension: str = FILE_EXTENSION) -> PostMeta:
    """Validate a parsed header, attach the filename-derived id and slug, and re-validate."""
    header = validate_frontmatter(frontmatter)
    return validate_meta({
        **header.model_dump(),
        "id": filename_to_id(filename, extension),
        "slug": slugify(filename, header.title, extension),
    })


async def _load_meta(directory: str | os.PathLike, filename: str, extension: str) -> PostMeta:
    source = await asyncio.to_thread(read_source, directory, filename)
    frontmatter, _ = split_frontmatter(source)
    meta = build_meta(filename, frontmatter, extension)
    logger.debug("Loaded post %s (%s)", meta.slug, filename)
    return meta


async def list_posts(directory: str | os.PathLike, extension: str = FILE_EXTENSION) -> list[PostMeta]:
    """Load metadata for every file in directory, sorted newest first.

    Files are processed concurrently. Any failure cancels the remaining work
    and is re-raised as-is; there are no partial results.
    """
    filenames = list_filenames(directory)
    failures: tuple[BaseException, ...] = ()
    try:
        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(_load_meta(directory, f, extension)) for f in filenames]
    except ExceptionGroup as e:
        failures = e.exceptions
    if failures:
        raise failures[0]

    posts = sort_posts(task.result() for task in tasks)
    logger.info("Listed %d post(s) from %s", len(posts), directory)
    return posts


async def get_post(
    directory: str | os.PathLike,
    slug: str,
    renderer: PostRenderer,
    extension: str = FILE_EXTENSION,
    ) -> RenderedPost:
    """Fetch one post by slug; only the id segment of the slug locates the file."""
    filename = slug_to_filename(slug, extension)
    source = await asyncio.to_thread(read_source, directory, filename)
    frontmatter, body = split_frontmatter(source)
    meta = build_meta(filename, frontmatter, extension)
    content = renderer.render(body)
    logger.info("Rendered post %s from %s", meta.slug, filename)
    return RenderedPost(meta=meta, content=content)
