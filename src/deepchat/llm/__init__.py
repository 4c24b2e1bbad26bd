from .base import InferenceClient
from .catalog import DEEPSEEK_MODELS, DEFAULT_MODEL, DeepSeekModel, is_supported_model
from .errors import BackendError, BackendUnreachable, InferenceError
from .factory import create_inference_client
from .models import ChatMessage, Role
from .providers import OllamaClient

__all__ = [
    "InferenceClient",
    "create_inference_client",
    "ChatMessage",
    "Role",
    "DEEPSEEK_MODELS",
    "DEFAULT_MODEL",
    "DeepSeekModel",
    "is_supported_model",
    "BackendError",
    "BackendUnreachable",
    "InferenceError",
    "OllamaClient",
]
