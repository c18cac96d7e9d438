"""FastAPI endpoints for PDF Insights.

Endpoints:
    - GET /health: Service health status
    - POST /analysis/summary: Summarize a PDF data URI
    - POST /analysis/answer: Answer a question about a PDF data URI
"""

from pdf_insights.api.app import app, create_app

__all__ = ["app", "create_app"]
