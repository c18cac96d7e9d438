"""NiceGUI page: PDF upload, summary and question transcript."""

import html
import os

from nicegui import events, ui

from pdf_insights.ui.client import AnalysisClient
from pdf_insights.ui.controller import InsightsController
from pdf_insights.ui.markdown import markdown_to_html
from pdf_insights.ui.session import ChatMessage, SessionState

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<link href="https://fonts.googleapis.com/icon?family=Material+Icons" rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .card {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        border: 2px solid transparent;
        transition: border-color 0.3s;
    }
    .card:hover { border-color: rgba(102, 126, 234, 0.5); }
    .card-disabled { opacity: 0.5; pointer-events: none; }

    .header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }

    .message-user {
        background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .avatar-user { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }
    .avatar-assistant { background: #6b7280; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #667eea;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .ask-btn { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%) !important; }

    /* Markdown styling */
    .markdown strong { font-weight: 600; }
    .markdown em { font-style: italic; }
    .markdown pre { margin: 0.5rem 0; }
    .markdown code { font-family: 'Menlo', 'Monaco', monospace; }
    .markdown a { color: #4f46e5; }
</style>
"""


@ui.page("/")
def insights_page() -> None:
    """Main page."""
    ui.add_head_html(CUSTOM_CSS)

    document_container: ui.column
    messages_container: ui.column
    question_card: ui.column
    question_field: ui.textarea
    ask_btn: ui.button

    def notify(title: str, description: str) -> None:
        ui.notify(f"{title}: {description}", type="negative")

    def refresh() -> None:
        render_document()
        render_messages()
        render_controls()

    controller = InsightsController(AnalysisClient(), notify, on_change=refresh)
    session = controller.session

    def render_skeleton(last_width: str) -> None:
        with ui.column().classes("w-full gap-2"):
            ui.skeleton().classes("w-full h-4")
            ui.skeleton().classes("w-full h-4")
            ui.skeleton().classes(f"{last_width} h-4")

    async def handle_upload(e: events.UploadEventArguments) -> None:
        content = await e.file.read()
        await controller.upload(e.file.name, e.file.content_type, content)

    def render_document() -> None:
        document_container.clear()
        with document_container:
            if session.document is None:
                with ui.column().classes("w-full items-center gap-2 py-6"):
                    ui.icon("cloud_upload").classes("text-5xl text-gray-400")
                    ui.label("Click to upload your PDF").classes("text-lg font-semibold")
                    ui.label("Or drag and drop").classes("text-sm text-gray-500")
                    (
                        ui.upload(on_upload=handle_upload, auto_upload=True, max_files=1)
                        .props("accept=application/pdf flat bordered")
                        .classes("w-full")
                    )
                return

            with ui.column().classes("w-full p-4 bg-gray-100 rounded-lg gap-0"):
                ui.label(session.document.name).classes("font-semibold truncate w-full")
                ui.button("Upload another file", on_click=controller.clear).props(
                    "flat dense no-caps size=sm"
                ).classes("p-0")

            ui.label("Summary").classes("font-semibold mt-4")
            if session.state == SessionState.SUMMARIZING:
                render_skeleton("w-3/4")
            else:
                ui.html(markdown_to_html(session.summary or ""), sanitize=False).classes(
                    "markdown text-sm text-gray-600"
                )

    def render_avatar(is_user: bool) -> None:
        css = "avatar-user" if is_user else "avatar-assistant"
        icon = "person" if is_user else "smart_toy"
        avatar_classes = f"w-9 h-9 rounded-full flex items-center justify-center {css}"
        with ui.element("div").classes(avatar_classes):
            ui.icon(icon).classes("text-white text-lg")

    def render_message(msg: ChatMessage) -> None:
        is_user = msg.role == "user"
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant markdown"

        with ui.row().classes(f"w-full {align} gap-3 items-end"):
            if not is_user:
                render_avatar(False)
            with ui.column().classes("max-w-[80%] gap-1"):
                with ui.element("div").classes(f"px-4 py-3 {bubble}"):
                    if msg.pending:
                        with ui.row().classes("items-center gap-2"):
                            with ui.row().classes("gap-1"):
                                for _ in range(3):
                                    ui.element("div").classes("typing-dot")
                            ui.label("Getting answer...").classes("text-sm text-gray-500 italic")
                    else:
                        # Render markdown for assistant, plain text for user
                        if is_user:
                            content = html.escape(msg.content).replace("\n", "<br>")
                        else:
                            content = markdown_to_html(msg.content)
                        ui.html(content, sanitize=False).classes("text-sm leading-relaxed")
                ui.label(msg.time).classes(
                    f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                )
            if is_user:
                render_avatar(True)

    def render_messages() -> None:
        messages_container.clear()
        with messages_container:
            for msg in session.messages:
                render_message(msg)

    def render_controls() -> None:
        state = session.state
        if state == SessionState.EMPTY:
            question_card.classes(add="card-disabled")
            question_field.value = ""
        else:
            question_card.classes(remove="card-disabled")

        if state == SessionState.ANSWERING:
            ask_btn.props(add="loading")
        else:
            ask_btn.props(remove="loading")
        ask_btn.set_enabled(state == SessionState.READY)

    async def ask() -> None:
        await controller.ask(question_field.value or "")

    # === UI Layout ===
    with ui.row().classes("w-full header px-5 py-4 items-center gap-3"):
        ui.icon("psychology").classes("text-white text-3xl")
        ui.label("PDF Insights").classes("text-xl font-bold tracking-tight text-white")

    with ui.element("div").classes("w-full p-4 md:p-8"):
        with ui.element("div").classes("w-full grid gap-12 lg:grid-cols-2"):
            # Document
            with ui.column().classes("card p-6 gap-2"):
                with ui.row().classes("items-center gap-2"):
                    ui.icon("description").classes("text-xl text-indigo-500")
                    ui.label("Document").classes("text-lg font-semibold")
                ui.label("Upload your PDF document to get started.").classes(
                    "text-sm text-gray-500"
                )
                document_container = ui.column().classes("w-full gap-2")

            # Question
            with ui.column().classes("card p-6 gap-4") as question_card:
                with ui.row().classes("items-center gap-2"):
                    ui.icon("auto_awesome").classes("text-xl text-indigo-500")
                    ui.label("Ask a Question").classes("text-lg font-semibold")
                ui.label("Get answers based on the content of your document.").classes(
                    "text-sm text-gray-500"
                )
                question_field = (
                    ui.textarea(
                        label="Your Question",
                        placeholder="e.g., What are the main conclusions of the report?",
                    )
                    .props("outlined rows=4")
                    .classes("w-full")
                )
                ask_btn = (
                    ui.button("Ask", on_click=ask)
                    .props("unelevated color=primary")
                    .classes("w-full ask-btn text-white")
                )
                messages_container = ui.column().classes("w-full gap-4 mt-4")

    refresh()


def main() -> None:
    ui.run(title="PDF Insights", port=int(os.getenv("UI_PORT", "8080")), reload=False)


if __name__ == "__main__":
    main()
