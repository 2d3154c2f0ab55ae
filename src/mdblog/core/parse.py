"""Content directory listing, post file reads, and frontmatter extraction"""

import logging
import os
import re
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from mdblog.core.errors import ContentNotFoundError, ContentReadError, SchemaError


logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r'\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)', re.DOTALL | re.MULTILINE)


def list_filenames(directory: str | os.PathLike) -> list[str]:
    """Return entry names of directory in filesystem order, unfiltered."""
    path = Path(directory)
    try:
        names = os.listdir(path)
    except FileNotFoundError as e:
        raise ContentNotFoundError(f"Content directory not found: {path}", path) from e
    except OSError as e:
        raise ContentReadError(f"Cannot list content directory {path}: {e}", path) from e
    logger.debug("Found %d entries in %s", len(names), path)
    return names


def read_source(directory: str | os.PathLike, filename: str) -> str:
    """Read a post file as UTF-8 text (single attempt)."""
    path = Path(directory) / filename
    try:
        return path.read_text(encoding='utf-8')
    except FileNotFoundError as e:
        raise ContentNotFoundError(f"Post file not found: {path}", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ContentReadError(f"Cannot read post file {path}: {e}", path) from e


def _normalize(value: Any) -> Any:
    """YAML decodes bare dates; keep them as ISO strings like any other text field."""
    if isinstance(value, date):
        return value.isoformat()
    return value


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with the YAML header removed.

    A file without a header yields ({}, text). A header that is not valid
    YAML, or not a mapping, raises SchemaError("Post not found").
    """
    text = text.removeprefix('\ufeff')
    m = FRONTMATTER_RE.match(text)
    if not m:
        return {}, text
    try:
        fm = yaml.safe_load(m.group(1))
    except yaml.YAMLError as e:
        raise SchemaError("Post not found") from e
    if fm is None:
        fm = {}
    if not isinstance(fm, dict):
        raise SchemaError("Post not found")
    return {k: _normalize(v) for k, v in fm.items()}, text[m.end():]
