"""Request validation and error translation for the analysis actions.

Every outcome becomes an ActionResult: generated text as ``data`` or a message
safe to show to the user as ``error``. No exception leaves this module.
"""

import logging

from pydantic import ValidationError

from pdf_insights.agent.analysis_agent import (
    DocumentAnalysisService,
    GenerationFailure,
    get_analysis_service,
)
from pdf_insights.documents.data_uri import EncodedDocument, InvalidDocumentError
from pdf_insights.models.schemas import ActionResult, AnswerRequest, SummaryRequest

logger = logging.getLogger(__name__)

SUMMARY_EMPTY_ERROR = "Failed to generate summary. The document might be empty or unreadable."
SUMMARY_UNEXPECTED_ERROR = "An unexpected error occurred while generating the summary."
ANSWER_EMPTY_ERROR = "Failed to generate an answer."
ANSWER_UNEXPECTED_ERROR = "An unexpected error occurred while generating the answer."


def _format_validation_error(error: ValidationError) -> str:
    """Join validation messages the way they are shown to the user."""
    return ", ".join(e["msg"] for e in error.errors())


async def get_summary(
    pdf_data_uri: str,
    service: DocumentAnalysisService | None = None,
) -> ActionResult:
    """Validate a document and summarize it.

    Args:
        pdf_data_uri: The PDF as a data URI.
        service: Analysis service; the global one is used if not provided.

    Returns:
        ActionResult with the summary or an error message.
    """
    try:
        request = SummaryRequest(pdf_data_uri=pdf_data_uri)
        document = EncodedDocument.from_data_uri(request.pdf_data_uri)
    except ValidationError as e:
        logger.warning(f"Rejected summary request: {e.error_count()} validation error(s)")
        return ActionResult.failure(_format_validation_error(e))
    except InvalidDocumentError as e:
        logger.warning(f"Rejected summary request: {e}")
        return ActionResult.failure(str(e))

    try:
        service = service or get_analysis_service()
        result = await service.summarize(document)
    except GenerationFailure:
        return ActionResult.failure(SUMMARY_EMPTY_ERROR)
    except Exception:
        logger.exception("Error in get_summary")
        return ActionResult.failure(SUMMARY_UNEXPECTED_ERROR)

    if not result.summary:
        return ActionResult.failure(SUMMARY_EMPTY_ERROR)
    return ActionResult.success(result.summary)


async def get_answer(
    question: str,
    pdf_data_uri: str,
    service: DocumentAnalysisService | None = None,
) -> ActionResult:
    """Validate a question and document, then answer the question.

    Args:
        question: The user's question.
        pdf_data_uri: The PDF as a data URI.
        service: Analysis service; the global one is used if not provided.

    Returns:
        ActionResult with the Markdown answer or an error message.
    """
    try:
        request = AnswerRequest(question=question, pdf_data_uri=pdf_data_uri)
        document = EncodedDocument.from_data_uri(request.pdf_data_uri)
    except ValidationError as e:
        logger.warning(f"Rejected answer request: {e.error_count()} validation error(s)")
        return ActionResult.failure(_format_validation_error(e))
    except InvalidDocumentError as e:
        logger.warning(f"Rejected answer request: {e}")
        return ActionResult.failure(str(e))

    try:
        service = service or get_analysis_service()
        result = await service.answer(document, request.question)
    except GenerationFailure:
        return ActionResult.failure(ANSWER_EMPTY_ERROR)
    except Exception:
        logger.exception("Error in get_answer")
        return ActionResult.failure(ANSWER_UNEXPECTED_ERROR)

    if not result.answer:
        return ActionResult.failure(ANSWER_EMPTY_ERROR)
    return ActionResult.success(result.answer)
