"""Rendering of raw transcript content to safe, highlighted HTML."""

from .formatting import (
    Highlighter,
    RenderedMessage,
    pygments_highlight,
    render_content,
    render_html_document,
    render_message,
    render_transcript,
    split_reasoning,
)

__all__ = [
    "Highlighter",
    "RenderedMessage",
    "pygments_highlight",
    "render_content",
    "render_html_document",
    "render_message",
    "render_transcript",
    "split_reasoning",
]
