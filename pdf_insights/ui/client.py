"""HTTP client for the analysis API.

Transport problems are reported as ActionResult errors, the same shape the API
uses for its own failures.
"""

import logging
import os

import httpx

from pdf_insights.models.schemas import ActionResult

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 120.0


def default_base_url() -> str:
    """API location from API_BASE_URL, else the local server on PORT."""
    explicit = os.getenv("API_BASE_URL")
    if explicit:
        return explicit
    return f"http://localhost:{os.getenv('PORT', '8000')}"


class AnalysisClient:
    """Calls POST /analysis/summary and POST /analysis/answer."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = REQUEST_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url or default_base_url()
        self._timeout = timeout
        self._transport = transport

    async def _post(self, path: str, body: dict[str, str]) -> ActionResult:
        async with httpx.AsyncClient(
            base_url=self._base_url, timeout=self._timeout, transport=self._transport
        ) as client:
            try:
                response = await client.post(path, json=body)
                response.raise_for_status()
                return ActionResult.model_validate(response.json())
            except httpx.HTTPStatusError as e:
                logger.error(f"{path} returned HTTP {e.response.status_code}")
                return ActionResult.failure(f"HTTP {e.response.status_code}")
            except httpx.RequestError as e:
                logger.error(f"{path} request failed: {e}")
                return ActionResult.failure(f"Connection failed: {e}")
            except ValueError as e:
                logger.error(f"{path} returned an unexpected body: {e}")
                return ActionResult.failure("The server returned an unexpected response.")

    async def summarize(self, pdf_data_uri: str) -> ActionResult:
        return await self._post("/analysis/summary", {"pdf_data_uri": pdf_data_uri})

    async def answer(self, question: str, pdf_data_uri: str) -> ActionResult:
        return await self._post(
            "/analysis/answer", {"question": question, "pdf_data_uri": pdf_data_uri}
        )
