"""Client factory functions for CLI.

Centralizes creation of the inference client from environment variables.
Hides configuration details from command implementations.
"""

import os

import typer
from rich.console import Console

from ..config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, ENV_BASE_URL, ENV_MODEL, ENV_TIMEOUT
from ..llm import DEEPSEEK_MODELS, DEFAULT_MODEL, InferenceClient, create_inference_client, is_supported_model

# Default console for output
_console = Console()


def resolve_model_option(model: str | None, console: Console | None = None) -> str:
    """Pick the model from the option, then the environment, then the catalog default.

    Raises:
        SystemExit: If the chosen model is not in the catalog
    """
    con = console or _console
    chosen = model or os.getenv(ENV_MODEL) or DEFAULT_MODEL
    if not is_supported_model(chosen):
        con.print(f"[red]Error: Unsupported model: {chosen}[/red]")
        con.print(f"[dim]Supported models: {', '.join(DEEPSEEK_MODELS)}[/dim]")
        raise typer.Exit(code=1)
    return chosen


def get_client(
    model: str | None = None,
    base_url: str | None = None,
    console: Console | None = None
) -> InferenceClient:
    """Create the inference client from options and environment variables.

    Args:
        model: Model identifier (overrides DEEPCHAT_MODEL)
        base_url: Backend URL (overrides DEEPCHAT_BASE_URL)
        console: Optional Rich console for output

    Returns:
        Ollama inference client

    Raises:
        SystemExit: If the model or timeout is invalid

    Environment variables:
        DEEPCHAT_BASE_URL: Backend base URL (default: http://127.0.0.1:3000)
        DEEPCHAT_MODEL: Model identifier (default: deepseek-r1:1.5b)
        DEEPCHAT_TIMEOUT: Request timeout in seconds (default: 120)
    """
    con = console or _console
    chosen_model = resolve_model_option(model, con)

    raw_timeout = os.getenv(ENV_TIMEOUT)
    try:
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_SECONDS
    except ValueError:
        con.print(f"[red]Error: {ENV_TIMEOUT} must be a number, got {raw_timeout!r}[/red]")
        raise typer.Exit(code=1)

    return create_inference_client(
        "ollama",
        base_url=base_url or os.getenv(ENV_BASE_URL, DEFAULT_BASE_URL),
        model=chosen_model,
        timeout=timeout,
    )
