"""Shared fixtures for core unit tests"""

import pytest
from markdown_it import MarkdownIt
from mdit_py_plugins.anchors import anchors_plugin

from mdblog.core.components import prose_components
from mdblog.core.render import PostRenderer


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text, `inline <code>` and a [link](https://example.com "Example").

## Heading 2

- item one
- item two
  - nested *item*

1. first
2. second

> quoted **text**
>
> - loose

```python
print("hello")
```

![alt text](img.png)

---

Footer paragraph.<br>
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="plain_parser")
def plain_parser_fixture():
    """markdown-it configured the way PostRenderer configures it, without components."""
    return MarkdownIt("commonmark").use(anchors_plugin, min_level=1, max_level=6)


@pytest.fixture(name="renderer")
def renderer_fixture():
    return PostRenderer(prose_components())
