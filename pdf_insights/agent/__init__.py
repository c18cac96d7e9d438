"""Agno agent logic for document analysis.

Responsibilities:
    - Model selection (OpenAI-compatible or Gemini) from configuration
    - Fixed prompt templates for summaries and answers
    - One stateless model call per operation with the PDF attached
    - Translation of model failures into GenerationFailure / GatewayError
"""

from pdf_insights.agent.analysis_agent import (
    AnalysisError,
    DocumentAnalysisService,
    GatewayError,
    GenerationFailure,
    get_analysis_service,
)
from pdf_insights.agent.config import AgentConfig, get_agent_config

__all__ = [
    "AgentConfig",
    "AnalysisError",
    "DocumentAnalysisService",
    "GatewayError",
    "GenerationFailure",
    "get_agent_config",
    "get_analysis_service",
]
