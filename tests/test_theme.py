"""Tests for theme helpers."""

from explaincode.rendering import (
    ANALYZING_MESSAGE,
    LOADING_MESSAGE,
    body_open_tag,
    placeholder_page,
    render,
    render_document,
    stylesheet_rules,
)
from explaincode.rendering.theme import COMMON_RULES


class TestBodyTag:
    """Tests for the body opening tag."""

    def test_dark(self):
        assert body_open_tag(True) == '<body style="background-color: #2b2b2b; color: #a9b7c6;">'

    def test_light(self):
        assert body_open_tag(False) == "<body>"


class TestStylesheetRules:
    """Tests for viewer stylesheet rules."""

    def test_common_rules_first(self):
        """Test layout rules precede the palette so the palette wins."""
        rules = stylesheet_rules(False)
        assert rules[: len(COMMON_RULES)] == COMMON_RULES

    def test_dark_palette(self):
        rules = stylesheet_rules(True)
        assert any("#2b2b2b" in rule for rule in rules)
        assert any(rule.startswith("pre {") and "#2d2d2d" in rule for rule in rules)
        assert not any("#ffffff" in rule for rule in rules)

    def test_light_palette(self):
        rules = stylesheet_rules(False)
        assert any("#ffffff" in rule for rule in rules)
        assert any(rule.startswith("a {") and "#0366d6" in rule for rule in rules)

    def test_returns_fresh_list(self):
        """Test callers may mutate the returned list safely."""
        rules = stylesheet_rules(True)
        rules.append("extra")
        assert "extra" not in stylesheet_rules(True)


class TestPlaceholderPage:
    """Tests for loading and analyzing pages."""

    def test_loading_light(self):
        assert placeholder_page(LOADING_MESSAGE) == "<html><body>Loading explanation...</body></html>"

    def test_analyzing_dark(self):
        page = placeholder_page(ANALYZING_MESSAGE, dark_theme=True)
        assert page.startswith('<html><body style="background-color: #2b2b2b;')
        assert ANALYZING_MESSAGE in page

    def test_message_escaped(self):
        assert "&lt;b&gt;" in placeholder_page("<b>")


class TestRenderDocument:
    """Tests for standalone documents with an embedded stylesheet."""

    def test_embeds_stylesheet(self):
        html = render_document("# Title", dark_theme=True)
        assert html.startswith("<html><head><style>\n")
        assert "#d0d0ff" in html
        assert "<h1>Title</h1>" in html
        assert html.count("<html>") == 1

    def test_without_stylesheet_matches_render(self):
        assert render_document("*x*", include_stylesheet=False) == render("*x*", False)

    def test_empty_markdown(self):
        html = render_document(None)
        assert html.endswith("<body></body></html>")


class TestModuleLayout:
    """Tests for the import direction between rendering modules."""

    def test_theme_does_not_depend_on_markdown(self):
        """Test the theme module resolves escaping without reaching into the renderer."""
        from explaincode.rendering import escaping, markdown, theme

        assert theme.escape_html is escaping.escape_html
        assert not hasattr(theme, "render_document")
        assert markdown.body_open_tag is theme.body_open_tag
        assert markdown.stylesheet_rules is theme.stylesheet_rules
