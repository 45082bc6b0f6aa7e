"""
Groq client implementation.
Uses the OpenAI-compatible API endpoint.
"""

import asyncio
from typing import Optional

import httpx
from openai import AsyncOpenAI, APIConnectionError, APIStatusError

from .base_client import BaseLLMClient
from .errors import MalformedResponseError, ServerRejectionError, TransportError
from config.config import ProviderConfig, GROQ_CONFIG, SYSTEM_CONFIG


class GroqClient(BaseLLMClient):
    """Client for Groq's chat-completion API (OpenAI-compatible)."""

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the Groq client.

        Args:
            config: Provider configuration, defaults to GROQ_CONFIG
            timeout: Wall-clock limit per request in seconds, defaults to SYSTEM_CONFIG.api_timeout
            http_client: Optional httpx client passed through to the OpenAI SDK
        """
        config = config or GROQ_CONFIG
        super().__init__(config)

        if not config.api_key:
            raise ValueError("Groq API key not configured")

        self.timeout = timeout if timeout is not None else SYSTEM_CONFIG.api_timeout

        # Retries are owned by the completion orchestrator, not the SDK
        self.client = AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=self.timeout,
            max_retries=0,
            http_client=http_client
        )

    async def generate(
        self,
        model_id: str,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> str:
        """
        Generate a response using a Groq-hosted model.

        Args:
            model_id: Groq model identifier
            prompt: The user prompt
            system_prompt: Optional system prompt
            temperature: Override temperature
            max_tokens: Maximum tokens to generate

        Returns:
            Generated text response
        """
        messages = []

        if system_prompt:
            messages.append({
                "role": "system",
                "content": system_prompt
            })

        messages.append({
            "role": "user",
            "content": prompt
        })

        kwargs = {
            "model": model_id,
            "messages": messages,
            "temperature": temperature if temperature is not None else self.config.temperature
        }
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens

        try:
            response = await asyncio.wait_for(
                self.client.chat.completions.create(**kwargs),
                timeout=self.timeout
            )
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request to {model_id} timed out after {self.timeout}s") from e
        except APIStatusError as e:
            raise ServerRejectionError(
                status_code=e.status_code,
                body=e.response.text,
                model_id=model_id
            ) from e
        except APIConnectionError as e:
            # Covers APITimeoutError as well
            raise TransportError(f"Connection to Groq failed: {e}") from e
        except ValueError as e:
            # Success status with an unparseable body (JSONDecodeError)
            raise MalformedResponseError(f"Invalid response from Groq API: {e}") from e

        content = self._extract_content(response)
        if not content:
            raise MalformedResponseError("Invalid response from Groq API: missing content")
        return content

    @staticmethod
    def _extract_content(response) -> Optional[str]:
        choices = getattr(response, "choices", None)
        if not choices:
            return None
        message = getattr(choices[0], "message", None)
        return getattr(message, "content", None)

    async def close(self) -> None:
        await self.client.close()
