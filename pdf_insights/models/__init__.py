"""Pydantic models for analysis requests and results.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - SummaryRequest / AnswerRequest: validated action inputs
    - SummaryPayload / AnswerPayload: raw HTTP request bodies
    - SummaryOutput / AnswerOutput: generated text from the analysis service
    - ActionResult: uniform {data} or {error} result
"""

from pdf_insights.models.schemas import (
    ActionResult,
    AnswerOutput,
    AnswerPayload,
    AnswerRequest,
    SummaryOutput,
    SummaryPayload,
    SummaryRequest,
)

__all__ = [
    "ActionResult",
    "AnswerOutput",
    "AnswerPayload",
    "AnswerRequest",
    "SummaryOutput",
    "SummaryPayload",
    "SummaryRequest",
]
