"""Unit tests for the UI's API client."""

import json
from unittest.mock import patch

import httpx
import pytest
import pytest_check as check

from pdf_insights.ui.client import AnalysisClient, default_base_url


def make_client(handler) -> AnalysisClient:
    return AnalysisClient(base_url="http://test", transport=httpx.MockTransport(handler))


class TestAnalysisClient:
    async def test_summary_posts_data_uri(self, pdf_data_uri: str) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"data": "Summary"})

        result = await make_client(handler).summarize(pdf_data_uri)

        assert result.data == "Summary"
        assert seen[0].url.path == "/analysis/summary"
        assert json.loads(seen[0].content) == {"pdf_data_uri": pdf_data_uri}

    async def test_answer_posts_question(self, pdf_data_uri: str) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"error": "Failed to generate an answer."})

        result = await make_client(handler).answer("What is the total revenue?", pdf_data_uri)

        assert result.error == "Failed to generate an answer."
        assert seen[0].url.path == "/analysis/answer"
        assert json.loads(seen[0].content)["question"] == "What is the total revenue?"

    async def test_http_error_becomes_error_result(self, pdf_data_uri: str) -> None:
        result = await make_client(lambda request: httpx.Response(502)).summarize(pdf_data_uri)

        assert result.error == "HTTP 502"

    async def test_connection_error_becomes_error_result(self, pdf_data_uri: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        result = await make_client(handler).summarize(pdf_data_uri)

        assert result.error.startswith("Connection failed")

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="<html>not json</html>"),
            httpx.Response(200, json={"data": ""}),
            httpx.Response(200, json={}),
        ],
    )
    async def test_unexpected_body_becomes_error_result(
        self, pdf_data_uri: str, response: httpx.Response
    ) -> None:
        result = await make_client(lambda request: response).summarize(pdf_data_uri)

        assert result.error == "The server returned an unexpected response."


class TestBaseUrl:
    def test_follows_server_port(self) -> None:
        with patch.dict("os.environ", {"PORT": "9000"}, clear=True):
            client = AnalysisClient()

        assert client._base_url == "http://localhost:9000"

    def test_defaults_to_port_8000(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            assert default_base_url() == "http://localhost:8000"

    def test_explicit_api_base_url_wins(self) -> None:
        env = {"PORT": "9000", "API_BASE_URL": "http://api.internal:7000"}
        with patch.dict("os.environ", env, clear=True):
            client = AnalysisClient()

        assert client._base_url == "http://api.internal:7000"

    def test_read_at_construction_time(self) -> None:
        with patch.dict("os.environ", {"PORT": "9001"}, clear=True):
            first = AnalysisClient()
        with patch.dict("os.environ", {"PORT": "9002"}, clear=True):
            second = AnalysisClient()

        check.equal(first._base_url, "http://localhost:9001")
        check.equal(second._base_url, "http://localhost:9002")
