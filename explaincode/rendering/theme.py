"""Light and dark presentation for rendered explanations."""

from explaincode.rendering.escaping import escape_html

DARK_BACKGROUND = "#2b2b2b"
DARK_FOREGROUND = "#a9b7c6"

DARK_BODY_STYLE = f"background-color: {DARK_BACKGROUND}; color: {DARK_FOREGROUND};"

LOADING_MESSAGE = "Loading explanation..."
ANALYZING_MESSAGE = "Analyzing your code. This may take a few seconds."

COMMON_RULES = [
    "body { font-family: sans-serif; font-size: 12pt; margin: 10px; }",
    "h1, h2, h3, h4, h5, h6 { margin: 8px; }",
    "p { margin: 8px; }",
    "ul, ol { margin: 4px; }",
]

DARK_RULES = [
    f"body {{ background-color: {DARK_BACKGROUND}; color: {DARK_FOREGROUND}; }}",
    "pre { background-color: #2d2d2d; color: #f8f8f2; padding: 10px; font-family: monospace; }",
    "code { background-color: #2d2d2d; color: #f8f8f2; padding: 2px 4px; font-family: monospace; }",
    "a { color: #589df6; }",
    "h1, h2, h3, h4, h5, h6 { color: #d0d0ff; }",
]

LIGHT_RULES = [
    "body { background-color: #ffffff; color: #000000; }",
    "pre { background-color: #f5f5f5; color: #000000; padding: 10px; font-family: monospace; }",
    "code { background-color: #f5f5f5; color: #000000; padding: 2px 4px; font-family: monospace; }",
    "a { color: #0366d6; }",
    "h1, h2, h3, h4, h5, h6 { color: #000000; }",
]


def body_open_tag(dark_theme: bool) -> str:
    """Return the opening <body> tag, inline-styled for the dark theme."""
    if dark_theme:
        return f'<body style="{DARK_BODY_STYLE}">'
    return "<body>"


def stylesheet_rules(dark_theme: bool) -> list[str]:
    """CSS rules for an HTML viewer showing rendered explanations.

    Common layout rules come first so the palette rules override them.
    """
    palette = DARK_RULES if dark_theme else LIGHT_RULES
    return [*COMMON_RULES, *palette]


def placeholder_page(message: str, dark_theme: bool = False) -> str:
    """Full HTML page showing a plain status message (loading, analyzing)."""
    return f"<html>{body_open_tag(dark_theme)}{escape_html(message)}</body></html>"
