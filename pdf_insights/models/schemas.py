from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from pdf_insights.documents.data_uri import PDF_DATA_URI_PREFIX


def _check_pdf_marker(v: str) -> str:
    if not v.startswith(PDF_DATA_URI_PREFIX):
        raise PydanticCustomError("invalid_pdf_data", "Invalid PDF data format.")
    return v


class SummaryRequest(BaseModel):
    """Validated input for the summary action.

    Attributes:
        pdf_data_uri: The PDF document as a Base64 data URI.
    """

    pdf_data_uri: str

    @field_validator("pdf_data_uri")
    @classmethod
    def check_pdf_marker(cls, v: str) -> str:
        """Require the ``data:application/pdf;base64,`` marker."""
        return _check_pdf_marker(v)


class AnswerRequest(BaseModel):
    """Validated input for the answer action.

    Attributes:
        question: The question to answer from the document.
        pdf_data_uri: The PDF document as a Base64 data URI.
    """

    question: str
    pdf_data_uri: str

    @field_validator("pdf_data_uri")
    @classmethod
    def check_pdf_marker(cls, v: str) -> str:
        return _check_pdf_marker(v)

    @field_validator("question", mode="before")
    @classmethod
    def strip_question(cls, v: str) -> str:
        """Strip whitespace from question before validation."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("question")
    @classmethod
    def check_not_empty(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError("empty_question", "Question cannot be empty.")
        return v


class SummaryPayload(BaseModel):
    """HTTP body for POST /analysis/summary. Validation happens in the action."""

    pdf_data_uri: str


class AnswerPayload(BaseModel):
    """HTTP body for POST /analysis/answer. Validation happens in the action."""

    question: str
    pdf_data_uri: str


class SummaryOutput(BaseModel):
    """Summary text generated for a document."""

    summary: str


class AnswerOutput(BaseModel):
    """Markdown answer generated for a question."""

    answer: str


class ActionResult(BaseModel):
    """Uniform result of an analysis action.

    Exactly one of the fields is set. ``data`` is never an empty string.

    Attributes:
        data: Generated text on success.
        error: User-facing message on failure.
    """

    data: str | None = None
    error: str | None = None

    @model_validator(mode="after")
    def check_exactly_one(self) -> "ActionResult":
        if (self.data is None) == (self.error is None):
            raise ValueError("ActionResult requires exactly one of data or error")
        if self.data is not None and not self.data:
            raise ValueError("ActionResult data must not be empty")
        if self.error is not None and not self.error:
            raise ValueError("ActionResult error must not be empty")
        return self

    @classmethod
    def success(cls, data: str) -> "ActionResult":
        return cls(data=data)

    @classmethod
    def failure(cls, error: str) -> "ActionResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None
