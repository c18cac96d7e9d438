"""NiceGUI interface for uploading PDFs, reading summaries and asking questions.

Responsibilities:
    - Document session state (empty, summarizing, ready, answering)
    - Upload checks and warnings before any request is sent
    - Summary display with loading placeholders
    - Question transcript with Markdown-rendered answers

Page code only wires widgets. Session transitions live in session.py and
controller.py; API access in client.py.
"""
