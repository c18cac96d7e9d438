"""Pytest fixtures and shared test configuration.

Fixtures:
    - sample_pdf_bytes: Minimal one-page PDF
    - pdf_data_uri: The same PDF as a Base64 data URI
    - fake_service: Stand-in for DocumentAnalysisService
    - async_client: HTTPX client for API testing
"""

import base64
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from pdf_insights.agent.analysis_agent import GatewayError, GenerationFailure
from pdf_insights.api import app
from pdf_insights.models.schemas import AnswerOutput, SummaryOutput

MINIMAL_PDF = (
    b"%PDF-1.4\n"
    b"1 0 obj << /Type /Catalog /Pages 2 0 R >> endobj\n"
    b"2 0 obj << /Type /Pages /Kids [3 0 R] /Count 1 >> endobj\n"
    b"3 0 obj << /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] >> endobj\n"
    b"trailer << /Root 1 0 R >>\n"
    b"%%EOF\n"
)


class FakeAnalysisService:
    """Records calls and returns canned text, empty text, or raises."""

    def __init__(self, text: str = "Generated text", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.summarize_calls: list = []
        self.answer_calls: list = []

    def _result(self) -> str:
        if self.error is not None:
            raise self.error
        if not self.text:
            raise GenerationFailure("empty")
        return self.text

    async def summarize(self, document):
        self.summarize_calls.append(document)
        return SummaryOutput(summary=self._result())

    async def answer(self, document, question):
        self.answer_calls.append((document, question))
        return AnswerOutput(answer=self._result())


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """Return a minimal valid PDF."""
    return MINIMAL_PDF


@pytest.fixture
def pdf_data_uri(sample_pdf_bytes: bytes) -> str:
    """Return the sample PDF as a data URI."""
    return "data:application/pdf;base64," + base64.b64encode(sample_pdf_bytes).decode()


@pytest.fixture
def fake_service() -> FakeAnalysisService:
    return FakeAnalysisService(text="## Summary\n\nThe report covers **revenue**.")


@pytest.fixture
def failing_service() -> FakeAnalysisService:
    return FakeAnalysisService(error=GatewayError("connection reset"))


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
