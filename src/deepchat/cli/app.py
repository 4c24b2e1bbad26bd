"""Main CLI application using Typer."""
import asyncio
import logging
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import COMMAND_EXIT, COMMAND_MODEL
from ..llm import DEEPSEEK_MODELS, is_supported_model
from ..session import ConversationSession, SessionRegistry
from .console import ConsoleTranscriptListener, HtmlTranscriptWriter, ListenerGroup
from .providers import get_client

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="deepchat",
    help="Chat with a DeepSeek model served by a local Ollama backend",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


def configure_logging(verbose: bool) -> None:
    """Route library logs through Rich; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _switch_model(session: ConversationSession, command: str) -> None:
    """Handle ``/model <id>`` inside the chat loop."""
    parts = command.split(maxsplit=1)
    if len(parts) < 2:
        console.print(f"[dim]Current model: {session.model}[/dim]")
        console.print(f"[dim]Available: {', '.join(DEEPSEEK_MODELS)}[/dim]")
        return

    identifier = parts[1].strip()
    if not is_supported_model(identifier):
        console.print(f"[red]Unsupported model: {identifier}[/red]")
        return

    session.set_model(identifier)
    console.print(f"[dim]Switched to {identifier}[/dim]")


@app.command()
def chat(
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help=f"Model variant to chat with ({', '.join(DEEPSEEK_MODELS)})"
    ),
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        "-u",
        help="Backend base URL (default: $DEEPCHAT_BASE_URL or http://127.0.0.1:3000)"
    ),
    html_out: Path | None = typer.Option(
        None,
        "--html-out",
        help="Keep an HTML rendering of the conversation in this file"
    ),
    show_reasoning: bool = typer.Option(
        False,
        "--show-reasoning",
        "-r",
        help="Print the model's <think> reasoning above each reply"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logs"
    ),
):
    """Interactive chat with the selected model."""
    configure_logging(verbose)

    if html_out is not None and not html_out.parent.is_dir():
        console.print(f"[red]Error: directory for --html-out does not exist: {html_out.parent}[/red]")
        raise typer.Exit(code=1)

    async def _chat():
        client = get_client(model=model, base_url=base_url, console=console)
        registry = SessionRegistry()
        handle = None

        try:
            if not await client.check_model_availability():
                console.print(f"[yellow]{client.model} model is not available.[/yellow]")
                if not typer.confirm("Would you like to pull it from Ollama?"):
                    return

                if not await client.pull_model():
                    console.print("[red]Failed to connect to Ollama. Please make sure Ollama is running.[/red]")
                    raise typer.Exit(code=1)

                console.print(
                    f"[green]Pulling {client.model} model. "
                    f"Please try again after the download is complete.[/green]"
                )
                return

            listener = ConsoleTranscriptListener(console, show_reasoning=show_reasoning)
            if html_out is not None:
                listener = ListenerGroup(listener, HtmlTranscriptWriter(html_out))

            handle = registry.open(client, listener)
            session = registry.get(handle)

            console.print(f"[bold cyan]DeepSeek Chat[/bold cyan] [dim]({client.model})[/dim]")
            console.print(f"[dim]Type '{COMMAND_EXIT}' to leave, '{COMMAND_MODEL} <id>' to switch models[/dim]\n")

            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                command = user_input.strip()
                if not command:
                    continue

                if command.lower() == COMMAND_EXIT:
                    console.print("[dim]Goodbye![/dim]")
                    break

                if command.split()[0] == COMMAND_MODEL:
                    _switch_model(session, command)
                    continue

                await session.send_user_message(user_input)

        finally:
            if handle is not None:
                registry.close(handle)
            await client.close()

    asyncio.run(_chat())


@app.command()
def models(
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        "-u",
        help="Backend base URL"
    ),
):
    """List supported models and whether the backend has them installed."""
    async def _models():
        client = get_client(base_url=base_url, console=console)

        try:
            table = Table(title="DeepSeek Models")
            table.add_column("Model", style="cyan")
            table.add_column("Installed", justify="center")

            for identifier in DEEPSEEK_MODELS:
                client.set_model(identifier)
                available = await client.check_model_availability()
                table.add_row(identifier, "[green]yes[/green]" if available else "[red]no[/red]")

            console.print(table)
        finally:
            await client.close()

    asyncio.run(_models())


@app.command()
def pull(
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model variant to pull"
    ),
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        "-u",
        help="Backend base URL"
    ),
):
    """Ask the backend to download a model."""
    async def _pull():
        client = get_client(model=model, base_url=base_url, console=console)

        try:
            console.print(f"[dim]Requesting {client.model} from {client.base_url}...[/dim]")
            if not await client.pull_model():
                console.print("[red]Pull request failed. Please make sure Ollama is running.[/red]")
                raise typer.Exit(code=1)
            console.print(f"[green]Pull of {client.model} accepted.[/green]")
        finally:
            await client.close()

    asyncio.run(_pull())


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
