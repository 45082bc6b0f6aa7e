"""
AI Debate Simulator
Main entry point for running a debate from the command line.

Usage:
    python main.py --topic "Remote work beats office work"   # Run a 3-round debate
    python main.py --check-keys                              # Check API key configuration
    python main.py --list-models                             # Show models, lengths, and agents
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from config.config import (
    validate_api_keys,
    SYSTEM_CONFIG,
    FREE_MODELS,
    RESPONSE_LENGTHS,
    AGENT_PERSONALITIES,
    DEFAULT_MODEL,
    MAX_ROUNDS
)
from debate_simulator.completion import CompletionOrchestrator
from debate_simulator.llm_clients.groq_client import GroqClient
from debate_simulator.models.schemas import DebateTranscript
from debate_simulator.registry import ModelRegistry
from debate_simulator.sequencer import DebateError, DebateSequencer


def check_api_keys() -> bool:
    """Check and report API key status."""
    print("\n" + "=" * 60)
    print("API Key Status")
    print("=" * 60)

    status = validate_api_keys()
    all_configured = True

    for provider, configured in status.items():
        status_str = "[OK] Configured" if configured else "[X] Missing"
        print(f"  {provider.upper()}: {status_str}")
        if not configured:
            all_configured = False

    print(f"  Available models: {', '.join(FREE_MODELS)}")

    if not all_configured:
        print("\nWarning: GROQ_API_KEY not set.")
        print("Create a .env file with your API key:")
        print("  GROQ_API_KEY=your_key")

    return all_configured


def list_models():
    """Print the model table, response lengths, and agent names."""
    print("\n" + "=" * 60)
    print("Configuration")
    print("=" * 60)

    print("Models:")
    for alias, model_id in FREE_MODELS.items():
        marker = " (default)" if alias == DEFAULT_MODEL else ""
        print(f"  {alias:<10} {model_id}{marker}")

    print("\nResponse lengths:")
    for name, length in RESPONSE_LENGTHS.items():
        print(f"  {name:<10} {length.tokens} tokens, {length.description}")

    print("\nAgents:")
    for side, personality in AGENT_PERSONALITIES.items():
        print(f"  {side:<10} {personality.name}")


def print_transcript(transcript: DebateTranscript):
    """Print every round of a debate transcript."""
    print("\n" + "#" * 60)
    print(f"DEBATE: {transcript.topic}")
    print("#" * 60)

    for debate_round in transcript.rounds:
        print(f"\n--- Round {debate_round.round} ---")
        print(f"\n[{AGENT_PERSONALITIES['pro'].name} / {debate_round.pro_model}]")
        print(debate_round.pro)
        print(f"\n[{AGENT_PERSONALITIES['con'].name} / {debate_round.con_model}]")
        print(debate_round.con)

    print(f"\n{'=' * 60}")
    print("DEBATE COMPLETE")
    print(f"  Rounds: {transcript.total_rounds}")
    print(f"  Response length: {transcript.response_length.value}")
    print(f"  Time: {transcript.execution_time_seconds:.2f}s")
    print(f"{'=' * 60}")


def save_transcript(transcript: DebateTranscript, path: Optional[str] = None) -> Path:
    """Save a debate transcript to a JSON file."""
    if path is None:
        path = Path(SYSTEM_CONFIG.results_dir) / "debate_transcript.json"
    else:
        path = Path(path)

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(transcript.model_dump(mode="json"), f, indent=2, ensure_ascii=False)

    print(f"Transcript saved to {path}")
    return path


async def run_debate(
    topic: str,
    rounds: int,
    response_length: str,
    model: str,
    verbose: bool = True
) -> DebateTranscript:
    """
    Run one debate against the Groq API.

    Args:
        topic: The debate topic
        rounds: Number of rounds
        response_length: Length tier name
        model: Starting model alias

    Returns:
        The debate transcript
    """
    client = GroqClient()
    orchestrator = CompletionOrchestrator(client, ModelRegistry())
    sequencer = DebateSequencer(orchestrator, verbose=verbose)
    try:
        return await sequencer.run_debate(topic, rounds, response_length, model)
    finally:
        await client.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="AI Debate Simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python main.py --topic "Cats are better than dogs"                  # 3 medium rounds
    python main.py --topic "AI will replace programmers" --rounds 5 --length long
    python main.py --topic "Nuclear power is green" --model mixtral --output results/nuclear.json
    python main.py --check-keys                                         # Check API key configuration
    python main.py --list-models                                        # Show models and lengths
        """
    )

    parser.add_argument('--topic', type=str, default=None,
                        help='Debate topic')
    parser.add_argument('--rounds', type=int, default=3,
                        help=f'Number of rounds (1-{MAX_ROUNDS}, default: 3)')
    parser.add_argument('--length', type=str, default='medium', choices=list(RESPONSE_LENGTHS),
                        help='Response length per argument (default: medium)')
    parser.add_argument('--model', type=str, default=DEFAULT_MODEL,
                        help=f'Starting model alias (default: {DEFAULT_MODEL})')
    parser.add_argument('--output', type=str, nargs='?', const='', default=None,
                        help=f'Save the transcript as JSON (default path: '
                             f'{SYSTEM_CONFIG.results_dir}/debate_transcript.json)')
    parser.add_argument('--quiet', action='store_true',
                        help='Suppress progress messages')
    parser.add_argument('--check-keys', action='store_true',
                        help='Check API key configuration')
    parser.add_argument('--list-models', action='store_true',
                        help='List models, response lengths, and agents')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if SYSTEM_CONFIG.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if args.check_keys:
        return 0 if check_api_keys() else 1

    if args.list_models:
        list_models()
        return 0

    if not args.topic:
        parser.error("--topic is required to run a debate")

    if not validate_api_keys()["groq"]:
        print("Groq API key not configured. Please set GROQ_API_KEY in .env file.")
        return 1

    try:
        DebateSequencer.validate(args.topic, args.rounds, args.length)
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    try:
        transcript = asyncio.run(run_debate(
            topic=args.topic,
            rounds=args.rounds,
            response_length=args.length,
            model=args.model,
            verbose=not args.quiet
        ))
    except DebateError as e:
        print(f"Error: {e.message}")
        print(f"  Details: {e.details}")
        return 1

    print_transcript(transcript)

    if args.output is not None:
        # A bare --output saves under SYSTEM_CONFIG.results_dir
        save_transcript(transcript, args.output or None)

    return 0


if __name__ == "__main__":
    sys.exit(main())
