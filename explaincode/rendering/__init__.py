"""Rendering of markdown explanations to HTML."""

from explaincode.rendering.escaping import escape_html, normalize_newlines
from explaincode.rendering.markdown import PIPELINE, Stage, apply_stages, render, render_document
from explaincode.rendering.theme import (
    ANALYZING_MESSAGE,
    LOADING_MESSAGE,
    body_open_tag,
    placeholder_page,
    stylesheet_rules,
)

__all__ = [
    "PIPELINE",
    "Stage",
    "apply_stages",
    "escape_html",
    "normalize_newlines",
    "render",
    "render_document",
    "ANALYZING_MESSAGE",
    "LOADING_MESSAGE",
    "body_open_tag",
    "placeholder_page",
    "stylesheet_rules",
]
