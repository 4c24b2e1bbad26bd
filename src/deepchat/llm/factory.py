from typing import Any

from .base import InferenceClient
from .providers import OllamaClient


def create_inference_client(backend: str = "ollama", **config: Any) -> InferenceClient:
    """Create an inference client instance.

    This factory function hides the instantiation logic for different backends.

    Args:
        backend: Backend type ('ollama')
        **config: Backend-specific configuration
            For Ollama:
                - base_url: str (default: 'http://127.0.0.1:3000')
                - model: str (default: 'deepseek-r1:1.5b')
                - timeout: float (default: 120.0)

    Returns:
        Initialized inference client

    Raises:
        ValueError: If backend type is not supported

    Examples:
        >>> client = create_inference_client(
        ...     "ollama",
        ...     base_url="http://127.0.0.1:11434",
        ...     model="deepseek-r1:1.5b"
        ... )
    """
    if backend.lower() == "ollama":
        return OllamaClient(**config)

    raise ValueError(
        f"Unsupported backend: {backend}. "
        f"Supported backends: 'ollama'"
    )
