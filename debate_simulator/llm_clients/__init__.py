"""LLM client implementations and failure taxonomy."""

from .base_client import BaseLLMClient
from .groq_client import GroqClient
from .errors import (
    FALLBACK_STATUS_CODES,
    CompletionError,
    TransportError,
    ServerRejectionError,
    MalformedResponseError
)

__all__ = [
    "BaseLLMClient",
    "GroqClient",
    "FALLBACK_STATUS_CODES",
    "CompletionError",
    "TransportError",
    "ServerRejectionError",
    "MalformedResponseError"
]
