"""Request and response models for the explanation API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CodeAnalysisRequest(BaseModel):
    """Payload sent to the explanation API."""

    model_config = ConfigDict(populate_by_name=True)

    selected_code: str = Field(alias="selectedCode", description="Code selected by the user")
    context: str = Field(description="Surrounding text of the selection")
    format: str = Field(default="markdown", description="Requested explanation format")

    def to_payload(self) -> dict[str, Any]:
        """Serialize with the API's camelCase field names."""
        return self.model_dump(by_alias=True)


class ExplanationResponse(BaseModel):
    """Successful API response body."""

    model_config = ConfigDict(extra="ignore")

    explanation: str = Field(description="Markdown explanation of the selected code")


class ExplanationResult(BaseModel):
    """Outcome of one analysis request, successful or not."""

    explanation: str = Field(description="Markdown explanation or an 'Error: ...' message")
    success: bool = Field(description="Whether the API returned an explanation")
    status_code: int | None = Field(default=None, description="HTTP status, if a response was received")
