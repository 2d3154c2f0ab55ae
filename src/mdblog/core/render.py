"""Markdown body rendering with heading anchors and injected element components"""

from collections.abc import Mapping
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml
from markdown_it.token import Token
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.anchors import anchors_plugin

from mdblog.core.models import Component, Element


# Syntax tree node type -> element kind; headings use their tag (h1..h6).
ELEMENT_KINDS: dict[str, str] = {
    'paragraph':   'p',
    'link':        'a',
    'strong':      'strong',
    'blockquote':  'blockquote',
    'bullet_list': 'ul',
    'code_inline': 'code',
}


def _element_kind(node: SyntaxTreeNode) -> str | None:
    if node.type == 'heading':
        return node.tag
    return ELEMENT_KINDS.get(node.type)


def _index_tokens(tokens: list[Token]) -> dict[int, tuple[list[Token], int]]:
    """Map each token (block and inline) to its sibling list and index within it."""
    positions: dict[int, tuple[list[Token], int]] = {}
    for i, tok in enumerate(tokens):
        positions[id(tok)] = (tokens, i)
        if tok.type == 'inline' and tok.children:
            for j, child in enumerate(tok.children):
                positions[id(child)] = (tok.children, j)
    return positions


class PostRenderer:
    """Renders post bodies to HTML.

    Built once at start-up and passed to get_post. Elements whose kind has an
    entry in `components` are rendered by that component; everything else
    goes through markdown-it's HTML rules, so an empty mapping reproduces
    MarkdownIt.render exactly.
    """

    def __init__(
        self,
        components: Mapping[str, Component],
        parser_config: str = 'commonmark',
        anchor_min_level: int = 1,
        anchor_max_level: int = 6,
        ):
        self.components = dict(components)
        self.md = MarkdownIt(parser_config, options_update={"linkify": False}).use(
            anchors_plugin, min_level=anchor_min_level, max_level=anchor_max_level,
        )

    def render(self, body: str) -> str:
        """Render a markdown body (frontmatter already stripped) to HTML."""
        env: dict[str, Any] = {}
        tokens = self.md.parse(body, env)
        positions = _index_tokens(tokens)
        return self._render_node(SyntaxTreeNode(tokens), positions, env)

    def _render_token(self, token: Token, positions: dict, env: dict) -> str:
        tokens, idx = positions[id(token)]
        renderer = self.md.renderer
        rule = renderer.rules.get(token.type)
        if rule is not None:
            return rule(tokens, idx, self.md.options, env)
        return renderer.renderToken(tokens, idx, self.md.options, env)

    def _render_children(self, node: SyntaxTreeNode, positions: dict, env: dict) -> str:
        return ''.join(self._render_node(child, positions, env) for child in node.children)

    def _render_node(self, node: SyntaxTreeNode, positions: dict, env: dict) -> str:
        if node.type in ('root', 'inline'):
            return self._render_children(node, positions, env)

        kind = _element_kind(node)
        component = self.components.get(kind) if kind else None

        if node.token is not None:
            if component is not None:
                return component(Element(kind, _attrs(node), escapeHtml(node.content)))
            return self._render_token(node.token, positions, env)

        opening, closing = node.nester_tokens.opening, node.nester_tokens.closing
        children = self._render_children(node, positions, env)
        # Tight list paragraphs render as bare text.
        if component is None or opening.hidden:
            return (
                self._render_token(opening, positions, env)
                + children
                + self._render_token(closing, positions, env)
            )
        html = component(Element(kind, _attrs(node), children))
        return html + '\n' if opening.block else html


def _attrs(node: SyntaxTreeNode) -> dict[str, str]:
    return {name: str(value) for name, value in node.attrs.items()}
