"""Unit tests for core/render.py and core/components.py"""

from mdblog.core.components import prose_anchor, prose_components
from mdblog.core.models import Element
from mdblog.core.render import PostRenderer


def test_empty_mapping_matches_markdown_it(sample_md, plain_parser):
    """Without components the output is identical to markdown-it's own HTML."""
    assert PostRenderer({}).render(sample_md) == plain_parser.render(sample_md)


def test_heading_gets_anchor_and_component(renderer):
    """Headings get an anchor id and are rendered by their component."""
    html = renderer.render("# Hello World\n")
    assert html == '<h1 class="prose-h1" id="hello-world">Hello World</h1>\n'


def test_paragraph_with_strong(renderer):
    """Nested inline components render inside the paragraph component."""
    html = renderer.render("Some **bold** text.\n")
    assert html == '<p class="prose-p">Some <strong class="prose-strong">bold</strong> text.</p>\n'


def test_inline_code_is_escaped(renderer):
    """Inline code content is HTML-escaped before reaching the component."""
    html = renderer.render("Use `a < b`.\n")
    assert '<code class="prose-code">a &lt; b</code>' in html


def test_fenced_code_is_not_inline_code(renderer):
    """Only inline code maps to the code component; fences keep markdown-it output."""
    html = renderer.render("```py\nprint(1)\n```\n")
    assert html == '<pre><code class="language-py">print(1)\n</code></pre>\n'


def test_external_link_opens_new_tab(renderer):
    """Absolute links get target and rel attributes."""
    html = renderer.render("[site](https://example.com)\n")
    assert 'href="https://example.com"' in html
    assert 'target="_blank"' in html
    assert 'rel="noopener noreferrer"' in html
    assert 'class="prose-a"' in html


def test_internal_link_stays_in_tab(renderer):
    """Relative links keep only their href and class."""
    html = renderer.render("[next](/blog/002-next)\n")
    assert '<a class="prose-a" href="/blog/002-next">next</a>' in html


def test_tight_list_items_are_bare_text(renderer):
    """Hidden paragraphs inside tight lists are not wrapped by the p component."""
    html = renderer.render("- one\n- two\n")
    assert html.startswith('<ul class="prose-ul">')
    assert "<li>one</li>" in html
    assert "prose-p" not in html


def test_blockquote_component(renderer):
    """Blockquotes wrap their rendered paragraphs."""
    html = renderer.render("> quoted\n")
    assert html.startswith('<blockquote class="prose-blockquote">')
    assert '<p class="prose-p">quoted</p>' in html


def test_unmapped_heading_level_uses_default(renderer):
    """Heading levels without a component use markdown-it's HTML with the anchor id."""
    html = renderer.render("##### Small\n")
    assert html == '<h5 id="small">Small</h5>\n'


def test_ordered_list_uses_default(renderer):
    """Ordered lists have no component and render as plain HTML."""
    html = renderer.render("1. first\n")
    assert html.startswith("<ol>\n<li>first</li>")


def test_anchor_levels_are_configurable():
    """Headings above anchor_max_level get no id."""
    html = PostRenderer({}, anchor_max_level=2).render("## Kept\n\n### Dropped\n")
    assert '<h2 id="kept">Kept</h2>' in html
    assert "<h3>Dropped</h3>" in html


def test_custom_component_receives_children_and_attrs():
    """A component receives the element kind, attrs, and rendered children."""
    seen = []

    def capture(element: Element) -> str:
        seen.append(element)
        return f"[{element.kind}:{element.children}]"

    html = PostRenderer({"h2": capture}).render("## Title *here*\n")
    assert html == "[h2:Title <em>here</em>]\n"
    assert seen[0].attrs == {"id": "title-here"}


def test_raw_html_is_preserved(renderer):
    """Raw HTML blocks pass through untouched."""
    html = renderer.render("<div>raw</div>\n")
    assert html == "<div>raw</div>\n"


def test_prose_components_cover_structural_elements():
    """The default mapping covers h1-h4, p, a, strong, blockquote, ul and code."""
    assert set(prose_components()) == {"h1", "h2", "h3", "h4", "p", "a", "strong", "blockquote", "ul", "code"}


def test_prose_anchor_escapes_attributes():
    """Attribute values are HTML-escaped."""
    html = prose_anchor(Element("a", {"href": '/x?a=1&b="2"'}, "x"))
    assert 'href="/x?a=1&amp;b=&quot;2&quot;"' in html
    assert "target" not in html


def test_gfm_like_preset_renders_without_linkify():
    """The gfm-like preset renders strikethrough and leaves bare URLs as text."""
    html = PostRenderer({}, parser_config="gfm-like").render("~~gone~~ see https://example.com\n")
    assert "<s>gone</s>" in html
    assert "<a" not in html
