"""
Gemini text generation client for wallet insights.

Calls the generateContent REST endpoint with httpx. Every call runs
through this generator's own Retry instance.
"""

import asyncio
import time
from typing import Any, Optional

import httpx

from augure.domain.entities.investment_preferences import InvestmentPreferences
from augure.domain.exceptions import InsightGenerationError
from augure.domain.services.i_insight_generator import IInsightGenerator
from augure.domain.value_objects.blockchain import Blockchain
from augure.infrastructure.ai.prompts import (
    QUICK_SUMMARY_FALLBACK,
    build_insights_prompt,
    build_summary_prompt,
)
from augure.infrastructure.monitoring import metrics
from augure.infrastructure.resilience.retry import Retry


def extract_text(payload: Any) -> str:
    """
    Concatenate text parts of the first candidate.

    Returns:
        Generated text, empty string if the payload carries none
    """
    if not isinstance(payload, dict):
        return ""

    candidates = payload.get("candidates") or []
    if not candidates:
        return ""

    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(part.get("text", "") for part in parts if isinstance(part, dict))


class GeminiInsightGenerator(IInsightGenerator):
    """
    Insight generator backed by Google Gemini.

    Design:
    - Client is lazily initialized on first use
    - Model is fixed by configuration
    - Blank output is treated as a failure and retried
    """

    SERVICE_NAME = "gemini"

    def __init__(
        self,
        api_key: Optional[str],
        retry: Retry,
        model: str = "gemini-1.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize generator.

        Args:
            api_key: Gemini API key; calls fail when missing
            retry: Retry policy for outbound requests
            model: Model name
            base_url: API base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests)
        """
        self.api_key = api_key
        self.retry = retry
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._lock = asyncio.Lock()

    def _require_api_key(self) -> None:
        """Fail fast, without retries, when no API key is configured."""
        if not self.api_key:
            raise InsightGenerationError("Missing GEMINI_API_KEY")

    async def _ensure_client(self) -> httpx.AsyncClient:
        """
        Ensure HTTP client is initialized.

        Raises:
            InsightGenerationError: If no API key is configured
        """
        self._require_api_key()

        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self.base_url,
                        headers={"x-goog-api-key": self.api_key},
                        timeout=self.timeout,
                        transport=self._transport,
                    )
        return self._client

    async def close(self) -> None:
        """Close HTTP client and cleanup resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _generate(self, prompt: str) -> str:
        """
        Single generateContent attempt.

        Returns:
            Raw generated text (possibly blank)

        Raises:
            InsightGenerationError: On HTTP or network failure
        """
        client = await self._ensure_client()
        start_time = time.time()

        try:
            response = await client.post(
                f"/models/{self.model}:generateContent",
                json={"contents": [{"parts": [{"text": prompt}]}]},
            )
        except httpx.RequestError as e:
            metrics.external_requests_total.labels(
                service=self.SERVICE_NAME, status="network_error"
            ).inc()
            raise InsightGenerationError(f"Gemini request failed: {e}") from e
        finally:
            metrics.external_request_duration_seconds.labels(
                service=self.SERVICE_NAME
            ).observe(time.time() - start_time)

        metrics.external_requests_total.labels(
            service=self.SERVICE_NAME, status=str(response.status_code)
        ).inc()

        if not response.is_success:
            raise InsightGenerationError(f"Gemini API error: {response.status_code}")

        try:
            return extract_text(response.json())
        except ValueError as e:
            raise InsightGenerationError(f"Invalid Gemini response: {e}") from e

    async def _generate_non_blank(self, prompt: str) -> str:
        text = (await self._generate(prompt)).strip()
        if not text:
            raise InsightGenerationError("Empty response from text generation API")
        return text

    async def generate_insights(
        self,
        analysis_data: dict[str, Any],
        preferences: InvestmentPreferences,
        blockchain: Blockchain,
    ) -> str:
        """
        Generate personalised insights for an analysed wallet.

        Raises:
            InsightGenerationError: If generation fails after retries
        """
        self._require_api_key()
        prompt = build_insights_prompt(analysis_data, preferences, blockchain)
        return await self.retry.execute_async(self._generate_non_blank, prompt)

    async def generate_quick_summary(
        self, profit_loss: float, blockchain: Blockchain
    ) -> str:
        """
        Generate a one-sentence summary of net profit or loss.

        Blank output falls back to a fixed sentence instead of failing.

        Raises:
            InsightGenerationError: If the API fails after retries
        """
        self._require_api_key()
        prompt = build_summary_prompt(profit_loss, blockchain)
        text = await self.retry.execute_async(self._generate, prompt)
        return text.strip() or QUICK_SUMMARY_FALLBACK
