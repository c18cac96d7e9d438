"""Per-browser document session state.

One session holds at most one document, its summary and the question/answer
transcript. Results are tied to the request that produced them: summaries by
document token, answers by transcript entry id. A result whose document was
replaced or cleared in the meantime is dropped.
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from pdf_insights.documents.data_uri import EncodedDocument

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """Lifecycle of the document slot."""

    EMPTY = "empty"
    SUMMARIZING = "summarizing"
    READY = "ready"
    ANSWERING = "answering"


class SessionError(Exception):
    """Raised when an event is not allowed in the current state."""

    pass


@dataclass
class ChatMessage:
    """A transcript entry. ``content`` is None while an answer is pending."""

    role: str
    content: str | None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    time: str = field(default_factory=lambda: datetime.now().strftime("%I:%M %p"))

    @property
    def pending(self) -> bool:
        return self.content is None


@dataclass
class LoadedDocument:
    name: str
    document: EncodedDocument
    token: str = field(default_factory=lambda: uuid.uuid4().hex)


class DocumentSession:
    """Manages document, summary and transcript for a user session."""

    def __init__(self) -> None:
        self.document: LoadedDocument | None = None
        self.summary: str | None = None
        self.summarizing: bool = False
        self.messages: list[ChatMessage] = []

    @property
    def state(self) -> SessionState:
        if self.document is None:
            return SessionState.EMPTY
        if self.summarizing:
            return SessionState.SUMMARIZING
        if self.pending_count:
            return SessionState.ANSWERING
        return SessionState.READY

    @property
    def pending_count(self) -> int:
        return sum(1 for m in self.messages if m.pending)

    def load(self, name: str, document: EncodedDocument) -> str:
        """Replace the current document and start summarizing the new one.

        Returns:
            Token identifying this document for complete_summary().
        """
        self.clear()
        self.document = LoadedDocument(name=name, document=document)
        self.summarizing = True
        logger.info(f"Loaded document {name}")
        return self.document.token

    def complete_summary(self, token: str, text: str) -> bool:
        """Store the summary for the document identified by ``token``.

        Returns:
            False if the document was replaced or cleared meanwhile.
        """
        if self.document is None or self.document.token != token:
            logger.info("Dropping summary for a document that is no longer loaded")
            return False
        self.summary = text
        self.summarizing = False
        return True

    def ask(self, question: str) -> str:
        """Record a question and a pending answer entry.

        Returns:
            Id of the pending assistant entry.

        Raises:
            SessionError: If no document is loaded or the summary is in progress.
        """
        if self.document is None:
            raise SessionError("No document loaded")
        if self.summarizing:
            raise SessionError("Summary in progress")

        self.messages.append(ChatMessage(role="user", content=question))
        pending = ChatMessage(role="assistant", content=None)
        self.messages.append(pending)
        return pending.id

    def resolve_answer(self, entry_id: str, text: str) -> bool:
        """Fill in the pending entry ``entry_id``.

        Returns:
            False if the entry no longer exists.
        """
        for message in self.messages:
            if message.id == entry_id:
                message.content = text
                return True
        logger.info("Dropping answer for a transcript entry that no longer exists")
        return False

    def clear(self) -> None:
        self.document = None
        self.summary = None
        self.summarizing = False
        self.messages.clear()
