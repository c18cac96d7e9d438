"""Upload and question handling for the insights page.

Turns user events into session transitions and API calls. The page only wires
widgets to these methods and re-renders on change.
"""

import logging
from collections.abc import Callable
from typing import Protocol

from pdf_insights.documents.data_uri import (
    MAX_FILE_SIZE,
    PDF_MIME_TYPE,
    EncodedDocument,
    InvalidDocumentError,
    looks_like_pdf,
)
from pdf_insights.models.schemas import ActionResult
from pdf_insights.ui.session import DocumentSession

logger = logging.getLogger(__name__)

MIN_QUESTION_LENGTH = 10
SUMMARY_FALLBACK = "Could not generate a summary for this document."
EMPTY_SUMMARY_FALLBACK = "No summary could be generated."
ANSWER_FALLBACK = "Sorry, I could not find an answer to your question."


class AnalysisBackend(Protocol):
    async def summarize(self, pdf_data_uri: str) -> ActionResult: ...

    async def answer(self, question: str, pdf_data_uri: str) -> ActionResult: ...


Notifier = Callable[[str, str], None]


class InsightsController:
    """Drives a DocumentSession from upload and question events.

    Args:
        backend: Object providing summarize() and answer().
        notify: Called with (title, description) for user-facing warnings.
        on_change: Called after every session change so the view can refresh.
        session: Session to drive; a new one is created if not provided.
    """

    def __init__(
        self,
        backend: AnalysisBackend,
        notify: Notifier,
        on_change: Callable[[], None] | None = None,
        session: DocumentSession | None = None,
    ) -> None:
        self.backend = backend
        self.session = session or DocumentSession()
        self._notify = notify
        self._on_change = on_change or (lambda: None)

    def _reject_upload(self, content_type: str | None, content: bytes) -> str | None:
        """Return a warning for an unusable upload, or None if it is acceptable."""
        if content_type != PDF_MIME_TYPE:
            return "Please upload a PDF document."
        if not content:
            return "The selected file is empty."
        if len(content) > MAX_FILE_SIZE:
            size_mb = len(content) / (1024 * 1024)
            return f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)"
        if not looks_like_pdf(content):
            return "The selected file is not a valid PDF."
        return None

    async def upload(self, name: str, content_type: str | None, content: bytes) -> bool:
        """Load a new document and summarize it.

        Returns:
            False if the upload was rejected; the session is then unchanged.
        """
        if problem := self._reject_upload(content_type, content):
            logger.info(f"Rejected upload {name!r}: {problem}")
            self._notify("Invalid File Type", problem)
            return False

        try:
            document = EncodedDocument.from_bytes(content, content_type)
        except InvalidDocumentError as e:
            self._notify("Invalid File Type", str(e))
            return False

        token = self.session.load(name, document)
        self._on_change()

        result = await self.backend.summarize(document.data_uri)
        if result.error:
            self._notify("Summarization Failed", result.error)
            text = SUMMARY_FALLBACK
        else:
            text = result.data or EMPTY_SUMMARY_FALLBACK

        if self.session.complete_summary(token, text):
            self._on_change()
        return True

    async def ask(self, question: str) -> bool:
        """Submit a question about the loaded document.

        Returns:
            False if the question was rejected without contacting the API.
        """
        question = (question or "").strip()
        loaded = self.session.document

        if loaded is None:
            self._notify("No PDF found", "Please upload a PDF file first.")
            return False
        if self.session.summarizing:
            self._notify("Summary in progress", "Please wait for the summary to finish.")
            return False
        if len(question) < MIN_QUESTION_LENGTH:
            self._notify(
                "Question too short",
                f"Question must be at least {MIN_QUESTION_LENGTH} characters.",
            )
            return False

        entry_id = self.session.ask(question)
        self._on_change()

        result = await self.backend.answer(question, loaded.document.data_uri)
        if result.error:
            self._notify("Failed to get answer", result.error)
            text = ANSWER_FALLBACK
        else:
            text = result.data or ANSWER_FALLBACK

        if self.session.resolve_answer(entry_id, text):
            self._on_change()
        return True

    def clear(self) -> None:
        self.session.clear()
        self._on_change()
