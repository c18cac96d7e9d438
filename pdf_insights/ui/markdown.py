"""Markdown to HTML conversion for summaries and answers.

Covers what the model is asked to produce: headings, bold, italic, inline code,
code blocks, links, bulleted and numbered lists. Input is HTML-escaped first.
"""

import re

_HEADING_CLASSES = {
    1: "text-lg font-semibold mt-3 mb-1",
    2: "text-base font-semibold mt-3 mb-1",
    3: "text-sm font-semibold mt-2 mb-1",
}

_LIST_STYLES = (
    (r"^[-*+]\s+", "ul", "list-disc"),
    (r"^\d+[.)]\s+", "ol", "list-decimal"),
)


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _render_heading(line: str) -> str | None:
    match = re.match(r"^(#{1,6})\s+(.*?)\s*#*\s*$", line.strip())
    if not match:
        return None
    level = min(len(match.group(1)), 3)
    return f'<h{level} class="{_HEADING_CLASSES[level]}">{match.group(2)}</h{level}>'


def _render_blocks(text: str) -> str:
    """Render headings and group consecutive list items into <ul>/<ol>."""
    result: list[str] = []
    open_tag: str | None = None

    for line in text.split("\n"):
        stripped = line.strip()

        item_tag = None
        for pattern, tag, style in _LIST_STYLES:
            if re.match(pattern, stripped):
                item_tag = tag
                if open_tag != tag:
                    if open_tag:
                        result.append(f"</{open_tag}>")
                    result.append(f'<{tag} class="{style} list-inside my-2 space-y-1">')
                    open_tag = tag
                result.append(f"<li>{re.sub(pattern, '', stripped)}</li>")
                break

        if item_tag:
            continue

        if open_tag:
            result.append(f"</{open_tag}>")
            open_tag = None

        heading = _render_heading(line)
        result.append(heading if heading is not None else line)

    if open_tag:
        result.append(f"</{open_tag}>")

    return "\n".join(result)


def markdown_to_html(text: str) -> str:
    """Convert model Markdown to HTML for display."""
    text = _escape(text)

    # Code blocks (```code```)
    text = re.sub(
        r"```(\w*)\n?([\s\S]*?)```",
        r'<pre class="bg-gray-800 text-gray-100 rounded-lg p-3 my-2 overflow-x-auto text-xs"><code>\2</code></pre>',
        text,
    )

    # Inline code (`code`)
    text = re.sub(
        r"`([^`]+)`",
        r'<code class="bg-gray-200 text-pink-600 px-1.5 py-0.5 rounded text-xs">\1</code>',
        text,
    )

    # Bold must run before italic
    text = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", text)
    text = re.sub(r"__(.+?)__", r"<strong>\1</strong>", text)

    # Links [text](url)
    text = re.sub(
        r"\[([^\]]+)\]\(([^)]+)\)",
        r'<a href="\2" class="text-blue-600 underline" target="_blank">\1</a>',
        text,
    )

    text = _render_blocks(text)

    # Italic last; list markers are already consumed
    text = re.sub(r"(?<![\w*])\*([^*\n]+)\*(?![\w*])", r"<em>\1</em>", text)
    text = re.sub(r"(?<![\w_])_([^_\n]+)_(?![\w_])", r"<em>\1</em>", text)

    # Headings and lists carry their own spacing
    text = re.sub(r"(</?(?:ul|ol|li|h\d)[^>]*>)\n", r"\1", text)
    text = re.sub(r"\n(</?(?:ul|ol|li|h\d)[^>]*>)", r"\1", text)

    return text.replace("\n", "<br>")
