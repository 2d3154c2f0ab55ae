"""Post id and slug derivation from filenames and titles"""

import re

from mdblog.core.schema import parse_id


FILE_EXTENSION = ".mdx"

_TITLE_RE = re.compile(r'[^a-z0-9]+')
_ID_SEGMENT_RE = re.compile(r'^[^-]*')


def filename_to_id(filename: str, extension: str = FILE_EXTENSION) -> str:
    """Lowercase filename with the extension suffix removed ('001.MDX' -> '001')."""
    return filename.lower().removesuffix(extension.lower())


def slugify(filename: str, title: str, extension: str = FILE_EXTENSION) -> str:
    """Join the post id and a hyphenated title ('001.mdx', 'Hello World' -> '001-hello-world')."""
    slugged_title = _TITLE_RE.sub('-', title.lower())
    return f"{filename_to_id(filename, extension)}-{slugged_title}"


def slug_to_filename(slug: str, extension: str = FILE_EXTENSION) -> str:
    """Recover the post filename from the id segment preceding the first hyphen.

    Raises SchemaError if that segment is not a valid post id.
    """
    segment = _ID_SEGMENT_RE.match(slug).group(0)
    return parse_id(segment) + extension
