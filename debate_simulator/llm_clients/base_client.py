"""
Abstract base class for chat-completion clients.
A client performs exactly one remote call per generate() and classifies
failures into the errors defined in errors.py.
"""

from abc import ABC, abstractmethod
from typing import Optional

from config.config import ProviderConfig


class BaseLLMClient(ABC):
    """Abstract base class for chat-completion API clients."""

    def __init__(self, config: ProviderConfig):
        """
        Initialize the LLM client.

        Args:
            config: Provider configuration including API key and settings
        """
        self.config = config
        self.name = config.name

    @abstractmethod
    async def generate(
        self,
        model_id: str,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> str:
        """
        Issue a single chat-completion request.

        Args:
            model_id: Provider model identifier
            prompt: The user prompt
            system_prompt: Optional system prompt to set context
            temperature: Override default temperature
            max_tokens: Maximum tokens to generate

        Returns:
            The generated text response

        Raises:
            TransportError: The request timed out or never reached the server
            ServerRejectionError: The server answered with a non-success status
            MalformedResponseError: The response carried no generated text
        """
        pass

    async def close(self) -> None:
        """Release any network resources held by the client."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
