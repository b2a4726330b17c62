"""Client for the remote code explanation API."""

import asyncio
import logging
import time
from types import TracebackType

import httpx
from pydantic import ValidationError

from explaincode.config import DEFAULT_API_URL
from explaincode.models import CodeAnalysisRequest, ExplanationResponse, ExplanationResult

logger = logging.getLogger(__name__)


class CodeAnalyzerService:
    """Sends selected code and its context to the explanation API.

    Network and API failures never raise; they come back as an
    ``ExplanationResult`` with ``success=False`` and a readable message.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        connect_timeout: float = 10.0,
        request_timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_url = api_url
        self.timeout = httpx.Timeout(request_timeout, connect=connect_timeout)
        self._owns_client = client is None
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def analyze_code(self, selected_text: str, context: str) -> ExplanationResult:
        """Request an explanation of ``selected_text``.

        Args:
            selected_text: The code the user selected
            context: Surrounding text (usually the whole file)

        Returns:
            ExplanationResult with the markdown explanation or an error message
        """
        request = CodeAnalysisRequest(selected_code=selected_text, context=context)
        started = time.monotonic()

        try:
            response = await self.client.post(
                self.api_url,
                json=request.to_payload(),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            logger.error(f"Explanation request to {self.api_url} failed: {e}")
            return ExplanationResult(
                explanation=f"Error: Failed to get explanation from API. Exception: {e}",
                success=False,
            )

        duration_ms = (time.monotonic() - started) * 1000
        body = response.text

        if response.status_code != 200:
            logger.warning(
                "Explanation API returned an error",
                extra={
                    "api_url": self.api_url,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )
            return ExplanationResult(
                explanation=(
                    f"Error: Failed to get explanation from API. Status code: {response.status_code}"
                    f"\nResponse: {body}"
                ),
                success=False,
                status_code=response.status_code,
            )

        explanation = self.extract_explanation(body)
        if explanation is None:
            logger.warning(
                "Explanation API response had no explanation field",
                extra={
                    "api_url": self.api_url,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )
            return ExplanationResult(
                explanation=f"Error: Could not extract explanation from API response: {body}",
                success=False,
                status_code=response.status_code,
            )

        logger.info(
            "Received explanation",
            extra={
                "api_url": self.api_url,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
                "selection_chars": len(selected_text),
            },
        )
        return ExplanationResult(explanation=explanation, success=True, status_code=response.status_code)

    def analyze_code_sync(self, selected_text: str, context: str) -> ExplanationResult:
        """Blocking variant of ``analyze_code`` for callers without an event loop.

        Closes the owned client afterwards, since it is bound to the loop
        that ``asyncio.run`` tears down.
        """

        async def _run() -> ExplanationResult:
            try:
                return await self.analyze_code(selected_text, context)
            finally:
                await self.aclose()

        return asyncio.run(_run())

    @staticmethod
    def extract_explanation(body: str | None) -> str | None:
        """Pull the ``explanation`` string out of a JSON response body.

        Returns None for empty bodies, invalid JSON, non-object JSON, or a
        missing or non-string field.
        """
        if not body:
            return None

        try:
            return ExplanationResponse.model_validate_json(body).explanation
        except ValidationError:
            logger.debug("Explanation response is not a JSON object with a string explanation")
            return None

    async def aclose(self) -> None:
        """Close the HTTP client if this service created it."""
        if self._owns_client and self._client is not None:
            logger.debug("Closing explanation API client")
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "CodeAnalyzerService":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
