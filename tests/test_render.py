"""Unit tests for the render module."""
from hypothesis import given
from hypothesis import strategies as st

from deepchat.llm import ChatMessage
from deepchat.render import (
    pygments_highlight,
    render_content,
    render_html_document,
    render_message,
    render_transcript,
    split_reasoning,
)


class TestRenderContent:
    """Tests for markdown to HTML rendering."""

    def test_renders_markdown(self):
        """Test basic inline markdown."""
        html = render_content("**bold** and *italic*")

        assert "<strong>bold</strong>" in html
        assert "<em>italic</em>" in html

    def test_raw_html_escaped(self):
        """Test that raw HTML is escaped, not passed through."""
        html = render_content("<script>alert(1)</script>")

        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_javascript_links_dropped(self):
        """Test that javascript: links are not rendered as anchors."""
        html = render_content("[click](javascript:alert(1))")
        assert 'href="javascript:' not in html

    def test_code_block_highlighted(self):
        """Test that fenced code goes through the default highlighter."""
        html = render_content("```python\ndef add(a, b):\n    return a + b\n```")

        assert '<pre><code class="hljs python">' in html
        assert "<span" in html
        assert "add" in html

    def test_unknown_language_tagged_plaintext(self):
        """Test that unknown languages are tagged plaintext and stay escaped."""
        html = render_content("```notalanguage\n<x> & y\n```")

        assert '<code class="hljs plaintext">' in html
        assert "<x>" not in html
        assert "&lt;" in html

    def test_custom_highlighter(self):
        """Test that the highlighter is an explicit parameter."""
        calls = []

        def highlighter(code: str, language: str) -> str:
            calls.append((code, language))
            return f"<pre><code>{language.upper()}</code></pre>"

        html = render_content("```rust\nfn main() {}\n```", highlight=highlighter)

        assert calls == [("fn main() {}\n", "rust")]
        assert "<pre><code>RUST</code></pre>" in html

    def test_rendering_does_not_leak_between_calls(self):
        """Test that a custom highlighter does not stick to later calls."""
        render_content("```py\nx\n```", highlight=lambda code, lang: "<pre>custom</pre>")
        html = render_content("```py\nx\n```")

        assert "custom" not in html

    @given(st.text())
    def test_render_is_pure(self, markup: str):
        """Property test: Rendering the same markup twice gives the same HTML."""
        assert render_content(markup) == render_content(markup)

    @given(st.text(alphabet=st.characters(blacklist_characters="`~")))
    def test_no_raw_tags_survive(self, markup: str):
        """Property test: Angle brackets from input never become tags."""
        html = render_content(f"<img src=x onerror=alert(1)>{markup}")
        assert "<img src=x" not in html


class TestPygmentsHighlight:
    """Tests for the default highlighter."""

    def test_known_language(self):
        """Test highlighting a known language."""
        html = pygments_highlight("print('hi')\n", "python")
        assert html.startswith('<pre><code class="hljs python">')
        assert html.endswith("</code></pre>")

    def test_empty_language(self):
        """Test that an empty language name is plain text."""
        assert pygments_highlight("x\n", "").startswith('<pre><code class="hljs plaintext">')

    def test_unlabelled_code_is_auto_detected(self):
        """Test that code without a language is guessed, not left unhighlighted."""
        html = pygments_highlight("#!/usr/bin/env python\nimport os\nprint(os.name)\n", "")

        assert html.startswith('<pre><code class="hljs plaintext">')
        assert "<span" in html


class TestReasoning:
    """Tests for <think> block handling."""

    def test_split_reasoning(self):
        """Test separating reasoning from the answer."""
        reasoning, answer = split_reasoning("<think>\nLet me think.\n</think>\n\nHello!")

        assert reasoning == "Let me think."
        assert answer == "Hello!"

    def test_no_reasoning(self):
        """Test content without a think block."""
        assert split_reasoning("Hello!") == ("", "Hello!")

    def test_reasoning_rendered_collapsed(self):
        """Test that reasoning renders inside a details element."""
        rendered = render_message(ChatMessage(role="assistant", content="<think>hmm</think>Answer"))

        assert rendered.role == "assistant"
        assert '<details class="reasoning">' in rendered.html
        assert "<p>Answer</p>" in rendered.html


class TestRenderTranscript:
    """Tests for whole-transcript rendering."""

    def test_preserves_order_and_roles(self):
        """Test that rendered messages follow transcript order."""
        transcript = (
            ChatMessage(role="user", content="hello"),
            ChatMessage(role="assistant", content="hi"),
        )

        rendered = render_transcript(transcript)

        assert [m.role for m in rendered] == ["user", "assistant"]
        assert rendered[0].html == "<p>hello</p>\n"

    def test_source_messages_unchanged(self):
        """Test that rendering leaves the raw content alone."""
        message = ChatMessage(role="user", content="**raw**")
        render_transcript([message])
        assert message.content == "**raw**"

    def test_html_document(self):
        """Test the standalone page."""
        page = render_html_document([ChatMessage(role="user", content="hello")], title="<Chat>")

        assert page.startswith("<!DOCTYPE html>")
        assert '<div class="message user"><p>hello</p>\n</div>' in page
        assert "<title>&lt;Chat&gt;</title>" in page
        assert ".hljs" in page
