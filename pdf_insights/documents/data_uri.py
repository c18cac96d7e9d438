"""Encoded document references.

A document travels between the browser, the API and the model gateway as a
data URI (``data:application/pdf;base64,<payload>``). This module builds and
validates those references. The PDF content itself is never parsed.
"""

import base64
import binascii
import logging

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# Constants
PDF_MIME_TYPE = "application/pdf"
PDF_DATA_URI_PREFIX = f"data:{PDF_MIME_TYPE};base64,"
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"


class InvalidDocumentError(Exception):
    """Raised when a document reference is malformed."""

    pass


class EncodedDocument(BaseModel):
    """A document payload with its declared media type.

    Attributes:
        mime_type: Declared media type, always application/pdf.
        data: Base64-encoded document bytes.
    """

    mime_type: str = PDF_MIME_TYPE
    data: str = Field(..., min_length=1)

    @classmethod
    def from_bytes(cls, content: bytes, mime_type: str = PDF_MIME_TYPE) -> "EncodedDocument":
        """Encode raw file bytes.

        Args:
            content: Raw bytes of the uploaded file.
            mime_type: Declared media type of the upload.

        Returns:
            EncodedDocument holding the Base64 payload.

        Raises:
            InvalidDocumentError: If the file is empty or too large.
        """
        _validate_size(content)
        if mime_type != PDF_MIME_TYPE:
            raise InvalidDocumentError(f"Unsupported media type: {mime_type}")
        return cls(mime_type=mime_type, data=base64.b64encode(content).decode("ascii"))

    @classmethod
    def from_data_uri(cls, uri: str) -> "EncodedDocument":
        """Parse and validate a PDF data URI.

        Args:
            uri: Data URI of the form ``data:application/pdf;base64,<payload>``.

        Returns:
            The parsed EncodedDocument.

        Raises:
            InvalidDocumentError: If the marker, payload or size is invalid.
        """
        if not isinstance(uri, str) or not uri.startswith(PDF_DATA_URI_PREFIX):
            raise InvalidDocumentError("Invalid PDF data format.")

        payload = uri[len(PDF_DATA_URI_PREFIX):]
        if not payload:
            raise InvalidDocumentError("PDF data is empty.")

        try:
            content = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidDocumentError("PDF data is not valid Base64.") from e

        _validate_size(content)
        return cls(mime_type=PDF_MIME_TYPE, data=payload)

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"

    def to_bytes(self) -> bytes:
        """Decode the payload for hand-off to the model gateway."""
        return base64.b64decode(self.data)


def _validate_size(content: bytes) -> None:
    if not content:
        raise InvalidDocumentError("Empty file provided")

    if len(content) > MAX_FILE_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise InvalidDocumentError(
            f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)"
        )


def looks_like_pdf(content: bytes) -> bool:
    """Check for the PDF header within the first bytes of the file."""
    return content.lstrip()[:10].startswith(PDF_MAGIC_BYTES)
