"""Frontmatter and post metadata validation.

Checks run over plain mappings and raise SchemaError for the first bad
field; the pydantic models are only built from headers that passed.
"""

import re
from collections.abc import Mapping
from typing import Any

from mdblog.core.errors import SchemaError
from mdblog.core.models import FrontMatter, PostMeta


ID_RE = re.compile(r'[a-z0-9_]+')

# Checked in this order; the first failing field is reported.
REQUIRED_FIELDS = (
    ("title",       "Title"),
    ("date",        "Date"),
    ("description", "Description"),
    ("author",      "Author"),
)


def parse_id(token: Any) -> str:
    """Return token if it is a valid post id, else raise SchemaError."""
    if not isinstance(token, str) or not ID_RE.fullmatch(token):
        raise SchemaError(f"Invalid post id: {token!r}", field="id")
    return token


def _require_text(raw: Mapping, key: str, label: str) -> str:
    value = raw.get(key)
    if value is None or (key == "title" and value == ""):
        raise SchemaError(f"{label} is required", field=key)
    if not isinstance(value, str):
        raise SchemaError(f"{label} must be a string", field=key)
    return value


def _check_fields(raw: Any) -> dict[str, Any]:
    """Shared header checks; returns the validated base fields."""
    if not isinstance(raw, Mapping):
        raise SchemaError("Post not found")

    fields = {key: _require_text(raw, key, label) for key, label in REQUIRED_FIELDS}

    github = raw.get("github")
    if github is not None and not isinstance(github, str):
        raise SchemaError("Github must be a string", field="github")
    fields["github"] = github
    return fields


def validate_frontmatter(raw: Any) -> FrontMatter:
    """Validate a raw header mapping into FrontMatter."""
    return FrontMatter(**_check_fields(raw))


def validate_meta(raw: Any) -> PostMeta:
    """Validate a header that also carries derived id and slug into PostMeta."""
    fields = _check_fields(raw)
    fields["id"] = parse_id(_require_text(raw, "id", "Id"))
    fields["slug"] = _require_text(raw, "slug", "Slug")
    return PostMeta(**fields)
