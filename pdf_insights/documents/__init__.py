"""Encoded document references passed between the UI, API and model gateway.

Documents are never parsed or indexed here. Uploads are wrapped into
self-describing data URIs and handed to the model untouched.
"""

from pdf_insights.documents.data_uri import (
    EncodedDocument,
    InvalidDocumentError,
    looks_like_pdf,
)

__all__ = ["EncodedDocument", "InvalidDocumentError", "looks_like_pdf"]
