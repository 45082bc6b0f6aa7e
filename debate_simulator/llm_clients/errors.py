"""
Failure taxonomy for chat-completion calls.

TransportError is retried in place, ServerRejectionError may trigger a model
fallback, and MalformedResponseError is always terminal.
"""

from typing import FrozenSet, Optional

# Statuses that indicate the model is missing, rate limited, or overloaded
FALLBACK_STATUS_CODES = frozenset({404, 429, 503})

_STATUS_REASONS = {
    404: "not found",
    429: "rate-limited",
    503: "unavailable"
}


class CompletionError(Exception):
    """Base class for failures of a chat-completion call."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        # Filled in by the orchestrator when the failure becomes terminal
        self.tried_models: FrozenSet[str] = frozenset()
        self.calls = 0


class TransportError(CompletionError):
    """Timeout, refused or reset connection, or DNS failure."""


class ServerRejectionError(CompletionError):
    """The endpoint answered with a non-success status."""

    def __init__(
        self,
        status_code: int,
        body: str = "",
        model_id: Optional[str] = None,
        alias: Optional[str] = None
    ):
        self.status_code = status_code
        self.body = body
        self.model_id = model_id
        self.alias = alias
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        model = f" ({self.model_id})" if self.model_id else ""
        return f"Groq API error{model}: {self.status_code} - {self.body}"

    def attach_model(self, alias: str, model_id: str) -> None:
        """Record which model was rejected and name it in the message."""
        self.alias = alias
        self.model_id = model_id
        self.message = self._build_message()
        self.args = (self.message,)

    @property
    def fallback_eligible(self) -> bool:
        return self.status_code in FALLBACK_STATUS_CODES

    @property
    def reason(self) -> str:
        return _STATUS_REASONS.get(self.status_code, "rejected")


class MalformedResponseError(CompletionError):
    """Success status but the body carries no generated text."""
