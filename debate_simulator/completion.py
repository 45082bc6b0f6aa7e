"""
Resilient completion orchestrator.

Wraps a single-call LLM client with two nested failure loops:
- an inner loop retrying transport failures on one model with exponential backoff
- an outer loop falling back to the next model when the endpoint rejects
  the current one as missing, rate limited, or unavailable

Every alias is sent to the endpoint at most once per complete() call.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional, Set, Union

from config.config import (
    GROQ_CONFIG,
    SYSTEM_CONFIG,
    RESPONSE_LENGTHS,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    Personality,
    SystemConfig
)
from .llm_clients.base_client import BaseLLMClient
from .llm_clients.errors import CompletionError, ServerRejectionError, TransportError
from .models.schemas import CompletionResult, ResponseLengthTier
from .registry import ModelRegistry

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


@dataclass
class AttemptState:
    """Per-call bookkeeping. Never shared between calls."""
    # Aliases rejected with a fallback-eligible status; only grows
    tried: Set[str] = field(default_factory=set)
    # Transport retries on the current model; reset on fallback
    retries: int = 0
    # Remote calls issued so far
    calls: int = 0


class CompletionOrchestrator:
    """Issues chat completions with timeout, retry, and model fallback."""

    def __init__(
        self,
        client: BaseLLMClient,
        registry: Optional[ModelRegistry] = None,
        system_config: SystemConfig = SYSTEM_CONFIG,
        temperature: float = GROQ_CONFIG.temperature,
        sleep: SleepFunc = asyncio.sleep
    ):
        """
        Initialize the orchestrator.

        Args:
            client: Client performing one remote call per generate()
            registry: Model registry, defaults to the configured free models
            system_config: Retry count and backoff settings
            temperature: Sampling temperature sent with every request
            sleep: Coroutine used to wait between retries
        """
        self.client = client
        self.registry = registry or ModelRegistry()
        self.system_config = system_config
        self.temperature = temperature
        self._sleep = sleep

    async def complete(
        self,
        prompt: str,
        persona: Personality,
        length_tier: Union[ResponseLengthTier, str],
        start_alias: str = DEFAULT_MODEL
    ) -> str:
        """Generate text for the prompt, returning only the text."""
        result = await self.run(prompt, persona, length_tier, start_alias)
        return result.text

    async def run(
        self,
        prompt: str,
        persona: Personality,
        length_tier: Union[ResponseLengthTier, str],
        start_alias: str = DEFAULT_MODEL
    ) -> CompletionResult:
        """
        Generate text for the prompt with retry and fallback.

        Args:
            prompt: User-role message
            persona: Persona whose style becomes the system-role message
            length_tier: Response length tier selecting the token budget
            start_alias: Model alias to try first

        Returns:
            CompletionResult with the text and the model that produced it

        Raises:
            CompletionError: Terminal failure, with tried_models and calls set
        """
        state = AttemptState()
        max_tokens = self.max_tokens_for(length_tier)
        alias = start_alias

        while True:
            model_id = self.registry.resolve(alias)
            state.retries = 0
            try:
                text = await self._call_with_retry(state, model_id, prompt, persona, max_tokens)
            except ServerRejectionError as e:
                e.attach_model(alias, model_id)
                next_alias = self._next_fallback(alias, e, state)
                if next_alias is None:
                    self._mark_terminal(e, state)
                    raise
                logger.warning(
                    "Model %s %s (%s). Trying fallback model: %s",
                    model_id, e.reason, e.status_code, self.registry.resolve(next_alias)
                )
                alias = next_alias
                continue
            except CompletionError as e:
                self._mark_terminal(e, state)
                raise

            return CompletionResult(
                text=text,
                model_alias=alias,
                model_id=model_id,
                tried_models=frozenset(state.tried),
                calls=state.calls
            )

    @staticmethod
    def max_tokens_for(length_tier: Union[ResponseLengthTier, str]) -> int:
        """Token budget for a length tier; unknown tiers get the default."""
        key = length_tier.value if isinstance(length_tier, ResponseLengthTier) else length_tier
        length = RESPONSE_LENGTHS.get(key)
        return length.tokens if length else DEFAULT_MAX_TOKENS

    async def _call_with_retry(
        self,
        state: AttemptState,
        model_id: str,
        prompt: str,
        persona: Personality,
        max_tokens: int
    ) -> str:
        max_retries = self.system_config.max_retries
        while True:
            if state.retries > 0:
                logger.info("Retry attempt %d/%d...", state.retries, max_retries)
            state.calls += 1
            try:
                return await self.client.generate(
                    model_id=model_id,
                    prompt=prompt,
                    system_prompt=persona.style,
                    temperature=self.temperature,
                    max_tokens=max_tokens
                )
            except TransportError as e:
                label = "Initial attempt" if state.retries == 0 else f"Retry {state.retries}/{max_retries}"
                logger.warning("%s failed on %s: %s", label, model_id, e.message)
                if state.retries >= max_retries:
                    raise
                delay = self.system_config.retry_delay * (2 ** state.retries)
                logger.info("Waiting %.1fs before retry...", delay)
                await self._sleep(delay)
                state.retries += 1

    def _next_fallback(
        self,
        alias: str,
        error: ServerRejectionError,
        state: AttemptState
    ) -> Optional[str]:
        if not error.fallback_eligible or alias not in self.registry or alias in state.tried:
            return None
        state.tried.add(alias)
        return self.registry.fallback_candidate(state.tried)

    @staticmethod
    def _mark_terminal(error: CompletionError, state: AttemptState) -> None:
        error.tried_models = frozenset(state.tried)
        error.calls = state.calls
        logger.error("Completion failed after %d call(s): %s", state.calls, error.message)
