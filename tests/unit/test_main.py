"""Unit tests for the entry point's server settings."""

import os
from unittest.mock import patch

import pytest_check as check

from pdf_insights.main import api_port, publish_api_location, ui_port
from pdf_insights.ui.client import AnalysisClient


class TestPorts:
    def test_defaults(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            check.equal(api_port(), 8000)
            check.equal(ui_port(), 8080)

    def test_from_environment(self) -> None:
        with patch.dict("os.environ", {"PORT": "9000", "UI_PORT": "9100"}, clear=True):
            check.equal(api_port(), 9000)
            check.equal(ui_port(), 9100)


class TestPublishApiLocation:
    def test_page_client_follows_integrated_port(self) -> None:
        with patch.dict("os.environ", {"PORT": "9000"}, clear=True):
            url = publish_api_location(api_port())
            client = AnalysisClient()

            check.equal(url, "http://localhost:9000")
            check.equal(os.environ["API_BASE_URL"], "http://localhost:9000")
            check.equal(client._base_url, "http://localhost:9000")

    def test_explicit_api_base_url_is_kept(self) -> None:
        env = {"PORT": "9000", "API_BASE_URL": "https://insights.example.com"}
        with patch.dict("os.environ", env, clear=True):
            url = publish_api_location(api_port())

            check.equal(url, "https://insights.example.com")
            check.equal(AnalysisClient()._base_url, "https://insights.example.com")
