"""Default element renderers ("prose" typography) for post bodies"""

from markdown_it.common.utils import escapeHtml

from mdblog.core.models import Component, Element


EXTERNAL_PREFIXES = ('http://', 'https://', '//')


def _format_attrs(attrs: dict[str, str]) -> str:
    return ''.join(f' {name}="{escapeHtml(str(value))}"' for name, value in attrs.items())


def prose(tag: str, class_name: str) -> Component:
    """Build a component that wraps children in tag with a CSS class."""
    def render(element: Element) -> str:
        attrs = {"class": class_name, **element.attrs}
        return f"<{tag}{_format_attrs(attrs)}>{element.children}</{tag}>"
    return render


def prose_anchor(element: Element) -> str:
    """Link component; external links open in a new tab."""
    attrs = {"class": "prose-a", **element.attrs}
    if attrs.get("href", "").startswith(EXTERNAL_PREFIXES):
        attrs.setdefault("target", "_blank")
        attrs.setdefault("rel", "noopener noreferrer")
    return f"<a{_format_attrs(attrs)}>{element.children}</a>"


def prose_components() -> dict[str, Component]:
    """Return the standard element -> component mapping used for post pages."""
    return {
        "h1":         prose("h1", "prose-h1"),
        "h2":         prose("h2", "prose-h2"),
        "h3":         prose("h3", "prose-h3"),
        "h4":         prose("h4", "prose-h4"),
        "p":          prose("p", "prose-p"),
        "a":          prose_anchor,
        "strong":     prose("strong", "prose-strong"),
        "blockquote": prose("blockquote", "prose-blockquote"),
        "ul":         prose("ul", "prose-ul"),
        "code":       prose("code", "prose-code"),
    }
