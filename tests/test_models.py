"""Tests for explanation API models."""

import pytest
from pydantic import ValidationError

from explaincode.models import CodeAnalysisRequest, ExplanationResponse, ExplanationResult


class TestCodeAnalysisRequest:
    """Tests for CodeAnalysisRequest."""

    def test_payload_uses_api_field_names(self):
        req = CodeAnalysisRequest(selected_code="x = 1", context="x = 1\ny = 2")
        assert req.to_payload() == {
            "selectedCode": "x = 1",
            "context": "x = 1\ny = 2",
            "format": "markdown",
        }

    def test_populate_by_alias(self):
        req = CodeAnalysisRequest(selectedCode="f()", context="", format="text")
        assert req.selected_code == "f()"
        assert req.format == "text"

    def test_selected_code_required(self):
        with pytest.raises(ValidationError):
            CodeAnalysisRequest(context="ctx")


class TestExplanationResponse:
    """Tests for ExplanationResponse."""

    def test_extra_fields_ignored(self):
        resp = ExplanationResponse.model_validate({"explanation": "# Hi", "model": "x", "tokens": 12})
        assert resp.explanation == "# Hi"

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError):
            ExplanationResponse.model_validate({"explanation": ["a", "b"]})


class TestExplanationResult:
    """Tests for ExplanationResult."""

    def test_status_code_optional(self):
        result = ExplanationResult(explanation="Error: boom", success=False)
        assert result.status_code is None

    def test_serialization(self):
        result = ExplanationResult(explanation="ok", success=True, status_code=200)
        assert result.model_dump() == {"explanation": "ok", "success": True, "status_code": 200}
