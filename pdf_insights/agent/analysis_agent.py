"""Agno agent service for PDF summaries and question answering.

Core module for the application's document understanding.

Design notes:

1. **Stateless agent** - No storage and no history. Every call sees only the
   prompt and the attached document, so earlier questions never leak into
   later answers.

2. **Singleton Pattern** - Model client construction is done once. The
   singleton reuses the same agent instance across all requests.

3. **Service Wrapper** - Decouples the API from Agno's interface and is the one
   place where gateway errors become GenerationFailure or GatewayError.

4. **Inline document** - The PDF is attached as an ``agno.media.File`` with its
   raw bytes and MIME type. Nothing is extracted or chunked locally.
"""

import logging

from agno.agent import Agent
from agno.media import File
from agno.models.google import Gemini
from agno.models.openai import OpenAIChat
from agno.run.base import RunStatus

from pdf_insights.agent.config import AgentConfig, get_agent_config
from pdf_insights.agent.prompts import render_answer_prompt, render_summary_prompt
from pdf_insights.documents.data_uri import EncodedDocument
from pdf_insights.models.schemas import AnswerOutput, SummaryOutput

logger = logging.getLogger(__name__)


class AnalysisError(Exception):
    """Base class for document analysis failures."""

    pass


class GenerationFailure(AnalysisError):
    """Raised when the model call succeeds but yields no usable text."""

    pass


class GatewayError(AnalysisError):
    """Raised when the model call itself fails."""

    pass


class DocumentAnalysisService:
    """Service for summarizing PDFs and answering questions about them.

    Wraps Agno's Agent with:
    - OpenAI or Gemini model selection from configuration
    - Inline PDF attachment per call
    - Singleton lifecycle management
    - Centralized translation of model errors
    """

    def __init__(self, config: AgentConfig | None = None) -> None:
        """Initialize the analysis service.

        Args:
            config: Optional agent configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_agent_config()
        self._agent = self._create_agent()

    def _create_model(self) -> OpenAIChat | Gemini:
        """Create the model client for the configured provider."""
        if self._config.provider == "google":
            return Gemini(
                id=self._config.model_name,
                api_key=self._config.api_key,
                temperature=self._config.temperature,
                max_output_tokens=self._config.max_tokens,
            )

        return OpenAIChat(
            id=self._config.model_name,
            api_key=self._config.api_key,
            base_url=self._config.base_url,
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
        )

    def _create_agent(self) -> Agent:
        """Create the Agno agent instance.

        Returns:
            Configured Agent without storage or history.
        """
        return Agent(
            model=self._create_model(),
            description="An assistant that reads PDF documents and reports on their content.",
            instructions=[
                "Base every statement on the attached document.",
                "If the document does not contain the answer, say so plainly.",
            ],
            add_history_to_context=False,
            # Output as markdown for rich formatting in UI
            markdown=True,
        )

    async def _generate(self, prompt: str, document: EncodedDocument, kind: str) -> str:
        """Run the agent once with the prompt and the attached document.

        Args:
            prompt: Rendered instruction text.
            document: The PDF to attach.
            kind: Label used in log and error messages ("summary" or "answer").

        Returns:
            The generated text, unmodified.

        Raises:
            GatewayError: If the model call raises or the run ends in error.
            GenerationFailure: If the model returns no text.
        """
        attachment = File(content=document.to_bytes(), mime_type=document.mime_type)

        try:
            response = await self._agent.arun(prompt, files=[attachment])
        except Exception as e:
            raise GatewayError(f"Model call for {kind} failed: {e}") from e

        # Agno reports model failures on the run instead of raising
        status = getattr(response, "status", None)
        if status in (RunStatus.error, RunStatus.cancelled):
            logger.error(f"Model run for {kind} ended with status {status}")
            raise GatewayError(f"Model call for {kind} failed: {response.content}")

        content = getattr(response, "content", None)
        if not isinstance(content, str) or not content.strip():
            logger.warning(f"Model returned no {kind} text")
            raise GenerationFailure(f"Model returned an empty {kind}")

        return content

    async def summarize(self, document: EncodedDocument) -> SummaryOutput:
        """Summarize a PDF document.

        Args:
            document: The encoded PDF.

        Returns:
            SummaryOutput with the generated summary.
        """
        summary = await self._generate(render_summary_prompt(), document, "summary")
        logger.info(f"Generated summary ({len(summary)} chars)")
        return SummaryOutput(summary=summary)

    async def answer(self, document: EncodedDocument, question: str) -> AnswerOutput:
        """Answer a question from the content of a PDF document.

        Args:
            document: The encoded PDF.
            question: Non-empty question text.

        Returns:
            AnswerOutput with a Markdown-formatted answer.
        """
        answer = await self._generate(render_answer_prompt(question), document, "answer")
        logger.info(f"Generated answer ({len(answer)} chars)")
        return AnswerOutput(answer=answer)


# Module-level singleton instance
_analysis_service: DocumentAnalysisService | None = None


def get_analysis_service() -> DocumentAnalysisService:
    """Get or create the global analysis service.

    Returns:
        The DocumentAnalysisService instance.
    """
    global _analysis_service
    if _analysis_service is None:
        _analysis_service = DocumentAnalysisService()
    return _analysis_service
