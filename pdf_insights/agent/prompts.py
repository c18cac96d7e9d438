"""Fixed prompt templates for the two document analysis calls.

The document is attached to each call as inline media; the templates only
carry the instruction text and, for answers, the question.
"""

SUMMARY_PROMPT = """You are an AI assistant that summarizes PDF documents.

Read the attached PDF document and write a concise summary of its content.
Cover the main topic, the key points and any conclusions. Use short paragraphs
and keep the summary faithful to the document."""

ANSWER_PROMPT = """You are an AI assistant that answers questions based on the content of a PDF document.

Use the attached document to answer the question. Your answer should be formatted in Markdown, using headings, bold text, lists, and paragraphs to improve readability.

Question: {question}"""


def render_summary_prompt() -> str:
    return SUMMARY_PROMPT


def render_answer_prompt(question: str) -> str:
    return ANSWER_PROMPT.format(question=question)
