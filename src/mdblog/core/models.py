"""Post metadata models and render-time data contracts"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field


class FrontMatter(BaseModel):
    """Validated frontmatter header of a post."""
    model_config = ConfigDict(frozen=True, strict=True)

    title:       str = Field(..., min_length=1)
    date:        str
    description: str
    author:      str
    github:      Optional[str] = None


class PostMeta(FrontMatter):
    """Frontmatter plus the identifiers derived from the post's filename."""
    id:   str   # filename without extension, lowercased
    slug: str   # id + "-" + slugified title


@dataclass(frozen=True)
class RenderedPost:
    """A post's metadata and its body rendered to HTML; never cached."""
    meta:    PostMeta
    content: str


@dataclass(frozen=True)
class Element:
    """A structural element handed to a Component for rendering."""
    kind:     str                                   # h1..h6, p, a, strong, blockquote, ul, code
    attrs:    dict[str, str] = field(default_factory=dict)
    children: str = ""                              # inner HTML, already rendered


Component = Callable[[Element], str]
