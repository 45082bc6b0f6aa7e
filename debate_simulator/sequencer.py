"""
Debate Sequencer.
Drives the completion orchestrator round by round, threading the growing
conversation context between the Pro and Con sides.
"""

import time
from typing import List, Mapping, Union

from config.config import AGENT_PERSONALITIES, MAX_ROUNDS, DEFAULT_MODEL, Personality
from .completion import CompletionOrchestrator
from .llm_clients.errors import CompletionError
from .models.schemas import DebateRound, DebateTranscript, ResponseLengthTier, Side


class DebateError(Exception):
    """A debate could not be generated; no partial transcript exists."""

    def __init__(self, details: str, message: str = "Failed to generate debate"):
        super().__init__(f"{message}: {details}")
        self.message = message
        self.details = details


class DebateSequencer:
    """
    Runs a Pro/Con debate for a fixed number of rounds.

    Each round:
    1. Pro argues for the topic given the context so far
    2. Con answers the Pro argument given the same context
    3. Both arguments are appended to the context for the next round
    """

    def __init__(
        self,
        orchestrator: CompletionOrchestrator,
        personalities: Mapping[str, Personality] = AGENT_PERSONALITIES,
        verbose: bool = True
    ):
        """
        Initialize the sequencer.

        Args:
            orchestrator: Completion orchestrator used for every argument
            personalities: Personas keyed by side ("pro", "con")
            verbose: Whether to print progress messages
        """
        self.orchestrator = orchestrator
        self.personalities = personalities
        self.verbose = verbose

    def _log(self, message: str):
        """Print message if verbose mode is enabled."""
        if self.verbose:
            print(f"[Sequencer] {message}")

    @staticmethod
    def validate(topic: str, rounds: int, response_length: Union[ResponseLengthTier, str]) -> ResponseLengthTier:
        """
        Check debate parameters.

        Returns:
            The response length as a ResponseLengthTier

        Raises:
            ValueError: If any parameter is out of range
        """
        if not topic or not topic.strip():
            raise ValueError("Topic is required")

        if isinstance(rounds, bool) or not isinstance(rounds, int) or rounds < 1 or rounds > MAX_ROUNDS:
            raise ValueError(f"Rounds must be between 1 and {MAX_ROUNDS}")

        try:
            tier = ResponseLengthTier(response_length)
        except ValueError:
            raise ValueError("Invalid response length") from None
        return tier

    async def run_debate(
        self,
        topic: str,
        rounds: int,
        response_length: Union[ResponseLengthTier, str],
        model: str = DEFAULT_MODEL
    ) -> DebateTranscript:
        """
        Run the complete debate.

        Args:
            topic: The debate topic
            rounds: Number of rounds, 1 to MAX_ROUNDS
            response_length: Length tier for every argument
            model: Model alias each argument starts from

        Returns:
            DebateTranscript with every round in order

        Raises:
            ValueError: If the parameters are invalid
            DebateError: If any argument could not be generated
        """
        tier = self.validate(topic, rounds, response_length)
        start_time = time.time()

        pro_persona = self.personalities[Side.PRO.value]
        con_persona = self.personalities[Side.CON.value]

        debate_rounds: List[DebateRound] = []
        context = f"Debate Topic: {topic}\n\n"

        try:
            for i in range(1, rounds + 1):
                self._log(f"Generating round {i}...")

                pro_prompt = f'{context}Round {i}: Present your argument in favor of: "{topic}"'
                pro = await self.orchestrator.run(pro_prompt, pro_persona, tier, model)

                con_prompt = (
                    f'{context}Round {i}: The Pro side just argued:\n"{pro.text}"\n\n'
                    f'Now present your counter-argument against: "{topic}"'
                )
                con = await self.orchestrator.run(con_prompt, con_persona, tier, model)

                debate_rounds.append(DebateRound(
                    round=i,
                    pro=pro.text,
                    con=con.text,
                    pro_model=pro.model_alias,
                    con_model=con.model_alias
                ))

                context += f"Round {i}:\nPro: {pro.text}\nCon: {con.text}\n\n"
        except CompletionError as e:
            self._log(f"Debate error: {e.message}")
            raise DebateError(e.message) from e

        execution_time = time.time() - start_time
        self._log(f"Debate complete: {rounds} round(s) in {execution_time:.2f}s")

        return DebateTranscript(
            topic=topic,
            rounds=debate_rounds,
            total_rounds=rounds,
            response_length=tier,
            model=model,
            execution_time_seconds=execution_time
        )
