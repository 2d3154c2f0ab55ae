"""Root test configuration: post directory fixtures shared by unit and integration tests"""

import pytest
import yaml


DEFAULT_BODY = """\
# Hello

A paragraph with **bold** text.
"""

DEFAULT_FIELDS = {
    "title": "Hello World",
    "date": "2024-01-01",
    "description": "d",
    "author": "a",
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep MDBLOG_* settings from the outer environment out of tests."""
    for name in ("CONTENT_DIR", "FILE_EXTENSION", "PARSER_CONFIG", "ANCHOR_MIN_LEVEL", "ANCHOR_MAX_LEVEL"):
        monkeypatch.delenv(f"MDBLOG_{name}", raising=False)


@pytest.fixture(name="post_dir")
def post_dir_fixture(tmp_path):
    d = tmp_path / "blog"
    d.mkdir()
    return d


@pytest.fixture(name="write_post")
def write_post_fixture(post_dir):
    """Factory writing a post file; pass field=None to omit a default header field."""
    def _write(filename: str, body: str = DEFAULT_BODY, **fields):
        header = {**DEFAULT_FIELDS, **fields}
        header = {k: v for k, v in header.items() if v is not None}
        text = f"---\n{yaml.safe_dump(header, sort_keys=False)}---\n\n{body}"
        path = post_dir / filename
        path.write_text(text, encoding="utf-8")
        return path
    return _write
