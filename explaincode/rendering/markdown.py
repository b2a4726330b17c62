"""Markdown to HTML rendering for explanation viewers.

The renderer is a fixed, ordered pipeline of regex substitutions. Each stage
runs exactly once over the output of the previous one, so the order matters:
line endings are normalized before any line-anchored pattern runs,
escaping must happen before any tag is generated, bold markers must be
consumed before italic ones, list items must exist before they are wrapped,
and paragraph wrapping must come after every block-level tag is in place.

Unmatched markdown syntax is left in the output as (escaped) literal text.
"""

import re
from dataclasses import dataclass
from typing import Callable

from explaincode.rendering.escaping import escape_html, normalize_newlines
from explaincode.rendering.theme import body_open_tag, stylesheet_rules

HEADER_PATTERN = re.compile(r"^(#{1,6}) (.*)$", re.MULTILINE)

BOLD_PATTERNS = (
    re.compile(r"\*\*(.*?)\*\*"),
    re.compile(r"__(.*?)__"),
)
ITALIC_PATTERNS = (
    re.compile(r"\*(.*?)\*"),
    re.compile(r"_(.*?)_"),
)

FENCED_CODE_PATTERN = re.compile(r"```(.*?)```", re.DOTALL)
INLINE_CODE_PATTERN = re.compile(r"`([^`]*?)`")

LIST_ITEM_PATTERNS = (
    re.compile(r"^- (.*)$", re.MULTILINE),
    re.compile(r"^\* (.*)$", re.MULTILINE),
    re.compile(r"^\d+\. (.*)$", re.MULTILINE),
)
# A maximal run of consecutive lines that are each a single <li> element
LIST_RUN_PATTERN = re.compile(r"^<li>.*</li>$(?:\n<li>.*</li>$)*", re.MULTILINE)

LINK_PATTERN = re.compile(r"\[(.*?)\]\((.*?)\)")

PARAGRAPH_PATTERN = re.compile(r"^([^<\n].*)$", re.MULTILINE)
EMPTY_PARAGRAPH_PATTERN = re.compile(r"<p>\s*</p>")


@dataclass(frozen=True)
class Stage:
    """One named step of the rendering pipeline."""

    name: str
    apply: Callable[[str], str]


def convert_headers(text: str) -> str:
    """Turn ``# Title`` .. ``###### Title`` lines into <h1>..<h6>."""

    def _header(match: re.Match) -> str:
        level = len(match.group(1))
        return f"<h{level}>{match.group(2)}</h{level}>"

    return HEADER_PATTERN.sub(_header, text)


def _wrap(tag: str) -> Callable[[re.Match], str]:
    # Callables keep the replacement literal: "$" or "\" in content is inert
    def _replace(match: re.Match) -> str:
        return f"<{tag}>{match.group(1)}</{tag}>"

    return _replace


def convert_bold(text: str) -> str:
    """Convert ``**text**`` and ``__text__`` spans to <strong>."""
    for pattern in BOLD_PATTERNS:
        text = pattern.sub(_wrap("strong"), text)
    return text


def convert_italic(text: str) -> str:
    """Convert ``*text*`` and ``_text_`` spans to <em>."""
    for pattern in ITALIC_PATTERNS:
        text = pattern.sub(_wrap("em"), text)
    return text


def convert_fenced_code(text: str) -> str:
    """Convert closed triple-backtick fences to <pre><code> blocks.

    An opening fence without a matching close is left untouched.
    """

    def _block(match: re.Match) -> str:
        return f"<pre><code>{match.group(1).strip()}</code></pre>"

    return FENCED_CODE_PATTERN.sub(_block, text)


def convert_inline_code(text: str) -> str:
    return INLINE_CODE_PATTERN.sub(_wrap("code"), text)


def convert_list_items(text: str) -> str:
    """Turn ``- item``, ``* item`` and ``1. item`` lines into <li> elements."""
    for pattern in LIST_ITEM_PATTERNS:
        text = pattern.sub(_wrap("li"), text)
    return text


def wrap_lists(text: str) -> str:
    """Wrap each run of consecutive <li> lines in a single <ul>.

    Ordered and unordered items share the same wrapper and nesting is not
    supported.
    """

    def _list(match: re.Match) -> str:
        return "<ul>" + match.group(0).replace("\n", "") + "</ul>"

    return LIST_RUN_PATTERN.sub(_list, text)


def convert_links(text: str) -> str:
    def _link(match: re.Match) -> str:
        return f'<a href="{match.group(2)}">{match.group(1)}</a>'

    return LINK_PATTERN.sub(_link, text)


def wrap_paragraphs(text: str) -> str:
    """Wrap every non-empty line that does not start with a tag in <p>."""
    return PARAGRAPH_PATTERN.sub(_wrap("p"), text)


def clean_up(text: str) -> str:
    """Drop blank paragraphs and unwrap list items caught by paragraph wrapping."""
    text = EMPTY_PARAGRAPH_PATTERN.sub("", text)
    return text.replace("<p><li>", "<li>").replace("</li></p>", "</li>")


PIPELINE: tuple[Stage, ...] = (
    Stage("normalize_newlines", normalize_newlines),
    Stage("escape_html", escape_html),
    Stage("headers", convert_headers),
    Stage("bold", convert_bold),
    Stage("italic", convert_italic),
    Stage("fenced_code", convert_fenced_code),
    Stage("inline_code", convert_inline_code),
    Stage("list_items", convert_list_items),
    Stage("list_wrapping", wrap_lists),
    Stage("links", convert_links),
    Stage("paragraphs", wrap_paragraphs),
    Stage("cleanup", clean_up),
)


def apply_stages(markdown: str, stages: tuple[Stage, ...] = PIPELINE) -> str:
    """Run ``markdown`` through ``stages`` in order and return the HTML fragment."""
    html = markdown
    for stage in stages:
        html = stage.apply(html)
    return html


def render(markdown: str | None, dark_theme: bool = False) -> str:
    """Render markdown into a complete ``<html><body>`` document.

    Args:
        markdown: Markdown text; ``None`` is treated as empty
        dark_theme: Style the body with the dark palette

    Returns:
        HTML document string. Never raises for malformed markdown.
    """
    fragment = apply_stages(markdown) if markdown else ""
    return f"<html>{body_open_tag(dark_theme)}{fragment}</body></html>"


def render_document(markdown: str | None, dark_theme: bool = False, include_stylesheet: bool = True) -> str:
    """Render markdown as a standalone page with the viewer stylesheet embedded.

    Args:
        markdown: Markdown text to render
        dark_theme: Use the dark palette
        include_stylesheet: Add a <head><style> block with ``stylesheet_rules``

    Returns:
        HTML document; identical to ``render`` when the stylesheet is omitted
    """
    html = render(markdown, dark_theme)
    if not include_stylesheet:
        return html

    css = "\n".join(stylesheet_rules(dark_theme))
    return html.replace("<html>", f"<html><head><style>\n{css}\n</style></head>", 1)
