"""Explanation API client and selection helpers."""

from explaincode.services.analyzer import CodeAnalyzerService
from explaincode.services.context import select_lines, surrounding_context

__all__ = ["CodeAnalyzerService", "select_lines", "surrounding_context"]
