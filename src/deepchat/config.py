"""Configuration constants.

Centralizes default values shared by the client, the session and the CLI.
"""

# Backend configuration
DEFAULT_BASE_URL = "http://127.0.0.1:3000"
DEFAULT_TIMEOUT_SECONDS = 120.0  # Full-response generation on a local model can be slow

# Backend endpoints
CHAT_ENDPOINT = "/api/chat"
TAGS_ENDPOINT = "/api/tags"
PULL_ENDPOINT = "/api/pull"

# Environment variables read by the CLI
ENV_BASE_URL = "DEEPCHAT_BASE_URL"
ENV_MODEL = "DEEPCHAT_MODEL"
ENV_TIMEOUT = "DEEPCHAT_TIMEOUT"

# User-facing failure advisory
FAILURE_MESSAGE_TEMPLATE = "Failed to get response from {model} model"

# CLI chat commands
COMMAND_EXIT = "/exit"
COMMAND_MODEL = "/model"
