"""Pydantic models for completions and debate transcripts."""

from .schemas import (
    ResponseLengthTier,
    Side,
    CompletionResult,
    DebateRound,
    DebateTranscript
)

__all__ = [
    "ResponseLengthTier",
    "Side",
    "CompletionResult",
    "DebateRound",
    "DebateTranscript"
]
