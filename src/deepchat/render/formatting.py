"""Markdown rendering for chat transcripts.

Hides the details of markdown parsing, HTML escaping and code highlighting.
Every function here is pure: the same input always yields the same output,
and the highlighter is passed in rather than configured on shared state.
"""

import re
from collections.abc import Callable, Iterable
from html import escape

from markdown_it import MarkdownIt
from pydantic import BaseModel, ConfigDict
from pygments import highlight as pygments_render
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

from ..llm.models import ChatMessage

Highlighter = Callable[[str, str], str]

PLAINTEXT = "plaintext"

# Reasoning models wrap their chain of thought in a leading <think> block
_THINK_BLOCK = re.compile(r"\A\s*<think>(.*?)</think>\s*", re.DOTALL)


class RenderedMessage(BaseModel):
    """A transcript message with its content rendered to safe HTML."""

    model_config = ConfigDict(frozen=True)

    role: str
    html: str


def _guess_lexer(code: str):
    try:
        return guess_lexer(code)
    except ClassNotFound:
        return TextLexer()


def pygments_highlight(code: str, language: str) -> str:
    """Highlight a code block with Pygments.

    Unknown or missing languages are guessed from the code, falling back to
    plain text; either way the block is tagged ``plaintext``. The code is
    HTML-escaped by the formatter.

    Returns:
        A complete ``<pre><code>`` block
    """
    try:
        lexer = get_lexer_by_name(language)
        css_language = language
    except ClassNotFound:
        lexer = _guess_lexer(code)
        css_language = PLAINTEXT

    highlighted = pygments_render(code, lexer, HtmlFormatter(nowrap=True))
    return f'<pre><code class="hljs {escape(css_language)}">{highlighted}</code></pre>'


def render_content(markup: str, highlight: Highlighter | None = None) -> str:
    """Render message markdown to safe HTML.

    Raw HTML in the input is escaped, not passed through. Fenced code blocks
    go through ``highlight(code, language)``.

    Args:
        markup: Raw message content
        highlight: Code highlighter (default: pygments_highlight)

    Returns:
        HTML fragment
    """
    highlighter = highlight or pygments_highlight

    def _fence(code: str, lang_name: str, lang_attrs: str) -> str:
        return highlighter(code, lang_name)

    md = MarkdownIt("commonmark", {"html": False, "highlight": _fence})
    return md.render(markup)


def split_reasoning(content: str) -> tuple[str, str]:
    """Separate a leading ``<think>...</think>`` block from the answer.

    Returns:
        (reasoning, answer); reasoning is empty when there is no block
    """
    match = _THINK_BLOCK.match(content)
    if match is None:
        return "", content
    return match.group(1).strip(), content[match.end():]


def render_message(message: ChatMessage, highlight: Highlighter | None = None) -> RenderedMessage:
    """Render one message; assistant reasoning goes into a collapsed block."""
    reasoning, answer = split_reasoning(message.content)
    html = render_content(answer, highlight)
    if reasoning:
        html = (
            '<details class="reasoning"><summary>Reasoning</summary>\n'
            f"{render_content(reasoning, highlight)}</details>\n{html}"
        )
    return RenderedMessage(role=message.role.value, html=html)


def render_transcript(
    transcript: Iterable[ChatMessage],
    highlight: Highlighter | None = None
) -> list[RenderedMessage]:
    """Render every message of a transcript, preserving order."""
    return [render_message(msg, highlight) for msg in transcript]


def render_html_document(
    transcript: Iterable[ChatMessage],
    highlight: Highlighter | None = None,
    title: str = "DeepSeek Chat"
) -> str:
    """Render a transcript as a standalone HTML page.

    Includes the Pygments stylesheet scoped to ``.hljs`` so highlighted code
    blocks are colored.
    """
    styles = HtmlFormatter().get_style_defs(".hljs")
    body = "\n".join(
        f'<div class="message {escape(msg.role)}">{msg.html}</div>'
        for msg in render_transcript(transcript, highlight)
    )
    return (
        "<!DOCTYPE html>\n"
        "<html>\n<head>\n"
        '<meta charset="UTF-8">\n'
        f"<title>{escape(title)}</title>\n"
        f"<style>\n{styles}\n"
        ".message { margin-bottom: 24px; padding: 16px; border-radius: 8px; }\n"
        ".user { margin-left: 15%; }\n"
        ".assistant { margin-right: 15%; border: 1px solid #ccc; }\n"
        "</style>\n</head>\n<body>\n"
        f'<div class="messages">\n{body}\n</div>\n'
        "</body>\n</html>\n"
    )
