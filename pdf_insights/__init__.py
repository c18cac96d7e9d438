"""PDF Insights - summaries and question answering for uploaded PDF documents.

Combines FastAPI for the HTTP API, Agno for model calls,
NiceGUI for the browser interface, and Pydantic for data validation.

Components:
    - api: HTTP endpoints and request validation
    - agent: Prompt templates and model calls
    - documents: Encoded PDF references (data URIs)
    - ui: Session state machine and web interface
    - models: Request/response schemas
"""

__version__ = "0.1.0"
