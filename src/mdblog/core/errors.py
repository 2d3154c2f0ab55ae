"""Error types raised by the post loading and rendering pipeline"""

from pathlib import Path
from typing import Optional


class ContentError(Exception):
    """Base class for every failure surfaced by list_posts / get_post."""


class ContentNotFoundError(ContentError):
    """The content directory or a post file does not exist."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class ContentReadError(ContentError):
    """The target exists but could not be read (permissions, encoding, not a file)."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class SchemaError(ContentError, ValueError):
    """Post metadata, or the id embedded in a slug, failed validation.

    `field` names the offending key; it is None when the header as a whole
    is unusable ("Post not found").
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field
