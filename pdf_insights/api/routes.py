"""Document analysis endpoints.

Thin HTTP wrappers over the summary and answer actions. Validation and error
translation live in the actions, so every well-formed body gets a 200 with an
ActionResult.
"""

import logging

from fastapi import APIRouter

from pdf_insights.api.actions import get_answer, get_summary
from pdf_insights.models.schemas import ActionResult, AnswerPayload, SummaryPayload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.post("/summary", response_model=ActionResult, response_model_exclude_none=True)
async def summarize_pdf(payload: SummaryPayload) -> ActionResult:
    """Summarize a PDF document.

    Args:
        payload: Body with the PDF as a Base64 data URI.

    Returns:
        ActionResult with ``data`` (summary) or ``error``.
    """
    logger.info("Summary requested")
    return await get_summary(payload.pdf_data_uri)


@router.post("/answer", response_model=ActionResult, response_model_exclude_none=True)
async def answer_question(payload: AnswerPayload) -> ActionResult:
    """Answer a question about a PDF document.

    Args:
        payload: Body with the question and the PDF as a Base64 data URI.

    Returns:
        ActionResult with ``data`` (Markdown answer) or ``error``.
    """
    logger.info("Answer requested")
    return await get_answer(payload.question, payload.pdf_data_uri)
