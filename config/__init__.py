"""Configuration package for the AI Debate Simulator."""

from .config import (
    ProviderConfig,
    SystemConfig,
    ResponseLength,
    Personality,
    GROQ_CONFIG,
    SYSTEM_CONFIG,
    FREE_MODELS,
    MODEL_FALLBACK_ORDER,
    DEFAULT_MODEL,
    RESPONSE_LENGTHS,
    DEFAULT_MAX_TOKENS,
    AGENT_PERSONALITIES,
    MAX_ROUNDS,
    validate_api_keys
)

__all__ = [
    "ProviderConfig",
    "SystemConfig",
    "ResponseLength",
    "Personality",
    "GROQ_CONFIG",
    "SYSTEM_CONFIG",
    "FREE_MODELS",
    "MODEL_FALLBACK_ORDER",
    "DEFAULT_MODEL",
    "RESPONSE_LENGTHS",
    "DEFAULT_MAX_TOKENS",
    "AGENT_PERSONALITIES",
    "MAX_ROUNDS",
    "validate_api_keys"
]
