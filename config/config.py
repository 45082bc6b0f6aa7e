"""
Configuration module for the AI Debate Simulator.
Handles the API key, model tables, personalities, and retry settings.
"""

import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass(frozen=True)
class ProviderConfig:
    """Configuration for the chat-completion provider."""
    name: str
    api_key: Optional[str]
    base_url: str
    temperature: float = 0.7


@dataclass(frozen=True)
class SystemConfig:
    """System-wide configuration settings."""
    # Wall-clock timeout for a single API call in seconds
    api_timeout: float = 60.0

    # Maximum retries for transport failures on one model
    max_retries: int = 3

    # Initial delay before the first retry in seconds (doubles each retry)
    retry_delay: float = 1.0

    # Whether to run in debug mode
    debug: bool = False

    # Transcript output directory
    results_dir: str = "results"


@dataclass(frozen=True)
class ResponseLength:
    """Token budget for one response length tier."""
    tokens: int
    description: str


@dataclass(frozen=True)
class Personality:
    """System-level instruction for one side of the debate."""
    name: str
    role: str
    style: str


# Provider configuration (Groq exposes an OpenAI-compatible API)
GROQ_CONFIG = ProviderConfig(
    name="Groq",
    api_key=os.getenv("GROQ_API_KEY"),
    base_url="https://api.groq.com/openai/v1",
    temperature=0.7
)

# System configuration
SYSTEM_CONFIG = SystemConfig(
    api_timeout=60.0,
    max_retries=3,
    retry_delay=1.0,
    debug=os.getenv("DEBUG", "false").lower() == "true",
    results_dir="results"
)

# Available free models on Groq, keyed by short alias
FREE_MODELS = MappingProxyType({
    "llama33": "llama-3.3-70b-versatile",      # Best overall - 70B parameters
    "llama31": "llama-3.1-8b-instant",         # Extremely fast
    "llama3": "llama3-70b-8192",               # Stable high performance
    "mixtral": "mixtral-8x7b-32768",           # Good reasoning
    "gemma2": "gemma2-9b-it",                  # Google's efficient model
    "llama32": "llama-3.2-90b-text-preview"    # Latest large model
})

# Try models in this order when the current one is rejected
MODEL_FALLBACK_ORDER = ("llama33", "llama32", "llama3", "mixtral", "llama31", "gemma2")

DEFAULT_MODEL = "llama33"

RESPONSE_LENGTHS = MappingProxyType({
    "short": ResponseLength(tokens=150, description="1-2 paragraphs"),
    "medium": ResponseLength(tokens=300, description="3-4 paragraphs"),
    "long": ResponseLength(tokens=500, description="5-6 paragraphs")
})

# Used when a length tier is not in RESPONSE_LENGTHS
DEFAULT_MAX_TOKENS = 300

AGENT_PERSONALITIES = MappingProxyType({
    "pro": Personality(
        name="Pro Agent",
        role="advocate",
        style=(
            "You are a skilled debater arguing in FAVOR of the topic. Be persuasive, "
            "use logical arguments, provide examples, and maintain a professional but "
            "passionate tone. Always support the affirmative position."
        )
    ),
    "con": Personality(
        name="Con Agent",
        role="opponent",
        style=(
            "You are a skilled debater arguing AGAINST the topic. Be critical, challenge "
            "assumptions, present counterarguments, and maintain a professional but firm "
            "tone. Always support the negative position."
        )
    )
})

# Upper bound on debate rounds
MAX_ROUNDS = 10


def validate_api_keys() -> dict[str, bool]:
    """Check which API keys are configured."""
    return {
        GROQ_CONFIG.name.lower(): GROQ_CONFIG.api_key is not None and len(GROQ_CONFIG.api_key) > 0
    }
