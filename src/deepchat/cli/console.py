"""Session listeners used by the CLI.

Hides how transcript updates and failure advisories reach the terminal
or an HTML file.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

from ..llm.models import Role
from ..render import render_html_document, split_reasoning
from ..session import ExchangeFailure, SessionListener, Transcript

logger = logging.getLogger(__name__)


class ConsoleTranscriptListener(SessionListener):
    """Prints assistant replies to a Rich console as they are appended.

    The user's own turns are already on screen from the input prompt, so
    only assistant messages are printed.
    """

    def __init__(self, console: Console, show_reasoning: bool = False) -> None:
        self.console = console
        self.show_reasoning = show_reasoning
        self._printed = 0

    def on_transcript_updated(self, transcript: Transcript) -> None:
        for message in transcript[self._printed:]:
            if message.role == Role.ASSISTANT:
                self._print_reply(message.content)
        self._printed = len(transcript)

    def on_exchange_failed(self, failure: ExchangeFailure) -> None:
        self.console.print(f"[red]{failure.message}[/red]")
        self.console.print(failure.detail, style="dim", markup=False)

    def _print_reply(self, content: str) -> None:
        reasoning, answer = split_reasoning(content)
        if reasoning and self.show_reasoning:
            self.console.print(Panel(Markdown(reasoning), title="Reasoning", border_style="dim"))
        self.console.print("[bold green]DeepSeek:[/bold green]")
        self.console.print(Markdown(answer))
        self.console.print()


class HtmlTranscriptWriter(SessionListener):
    """Rewrites an HTML rendering of the transcript after every update."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def on_transcript_updated(self, transcript: Transcript) -> None:
        try:
            self.path.write_text(render_html_document(transcript), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not write HTML transcript to %s: %s", self.path, e)

    def on_exchange_failed(self, failure: ExchangeFailure) -> None:
        pass  # Advisories are shown on the console only


class ListenerGroup(SessionListener):
    """Forwards every notification to several listeners in order."""

    def __init__(self, *listeners: SessionListener) -> None:
        self.listeners = listeners

    def on_transcript_updated(self, transcript: Transcript) -> None:
        for listener in self.listeners:
            listener.on_transcript_updated(transcript)

    def on_exchange_failed(self, failure: ExchangeFailure) -> None:
        for listener in self.listeners:
            listener.on_exchange_failed(failure)
