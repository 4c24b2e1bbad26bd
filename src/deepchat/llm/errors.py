"""Errors raised by inference clients.

Only the chat operation raises; availability checks and pulls report
failures as ``False``.
"""


class InferenceError(Exception):
    """Base class for failures talking to the inference backend.

    Attributes:
        detail: Underlying transport or server message, for diagnostics
    """

    kind = "inference_error"

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.detail = detail or message


class BackendUnreachable(InferenceError):
    """The request produced no response (connection refused, timeout)."""

    kind = "backend_unreachable"


class BackendError(InferenceError):
    """The backend responded, but with an error status or a malformed envelope."""

    kind = "backend_error"

    def __init__(self, message: str, detail: str | None = None, status_code: int | None = None):
        super().__init__(message, detail)
        self.status_code = status_code
