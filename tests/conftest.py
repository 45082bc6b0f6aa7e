"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from typing import Callable, List, Optional, Union

import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.config import ProviderConfig  # noqa: E402
from debate_simulator.llm_clients.base_client import BaseLLMClient  # noqa: E402


Outcome = Union[str, Exception]


class ScriptedClient(BaseLLMClient):
    """
    Fake client that replays a script of outcomes, one per call.

    A string outcome is returned as generated text, an exception is raised.
    When a responder is given, it is called with (model_id, call_index)
    instead of reading the script.
    """

    def __init__(
        self,
        script: Optional[List[Outcome]] = None,
        responder: Optional[Callable[[str, int], Outcome]] = None
    ):
        super().__init__(ProviderConfig(name="Fake", api_key="test-key", base_url="http://fake.local"))
        self.script = list(script or [])
        self.responder = responder
        self.calls: List[dict] = []

    @property
    def models_called(self) -> List[str]:
        return [call["model_id"] for call in self.calls]

    async def generate(self, model_id, prompt, system_prompt=None, temperature=None, max_tokens=None):
        self.calls.append({
            "model_id": model_id,
            "prompt": prompt,
            "system_prompt": system_prompt,
            "temperature": temperature,
            "max_tokens": max_tokens
        })
        if self.responder is not None:
            outcome = self.responder(model_id, len(self.calls) - 1)
        else:
            if not self.script:
                raise AssertionError(f"Unexpected extra call to {model_id}")
            outcome = self.script.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class RecordingSleep:
    """Stand-in for asyncio.sleep that records delays without waiting."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def make_client():
    return ScriptedClient
