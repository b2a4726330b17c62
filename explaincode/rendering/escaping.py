"""Text normalization shared by the renderer and the placeholder pages."""


def escape_html(text: str) -> str:
    """Escape &, < and > (ampersand first so entities are not double-escaped)."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")
