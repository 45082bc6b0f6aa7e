"""
AI Debate Simulator

Two LLM personas argue for and against a topic over several rounds. Every
argument goes through a completion orchestrator that retries transient
network failures and falls back to alternate models when one is rejected.
"""

__version__ = "1.0.0"
__author__ = "AI Debate Simulator Team"
