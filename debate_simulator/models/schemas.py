"""
Pydantic models for completion results and debate transcripts.
"""

from typing import List, Optional, FrozenSet
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum


class ResponseLengthTier(str, Enum):
    """Desired length of each generated argument."""
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class Side(str, Enum):
    """Sides of the debate."""
    PRO = "pro"
    CON = "con"


# ============== Completion Models ==============

class CompletionResult(BaseModel):
    """Outcome of one successful orchestrated completion."""
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    text: str = Field(..., description="The generated text")
    model_alias: str = Field(..., description="Alias of the model that answered")
    model_id: str = Field(..., description="Provider identifier of the model that answered")
    tried_models: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Aliases rejected by the endpoint before the answer"
    )
    calls: int = Field(..., ge=1, description="Number of remote calls made")


# ============== Debate Transcript Models ==============

class DebateRound(BaseModel):
    """One round of the debate: a Pro argument and the Con reply."""
    round: int = Field(..., ge=1, description="Round number, starting at 1")
    pro: str = Field(..., description="Pro side argument")
    con: str = Field(..., description="Con side counter-argument")
    pro_model: Optional[str] = Field(default=None, description="Model alias that produced the Pro argument")
    con_model: Optional[str] = Field(default=None, description="Model alias that produced the Con argument")


class DebateTranscript(BaseModel):
    """Complete transcript of one debate."""
    topic: str = Field(..., description="The debate topic")
    rounds: List[DebateRound] = Field(..., description="Rounds in order")
    total_rounds: int = Field(..., description="Number of rounds requested")
    response_length: ResponseLengthTier = Field(..., description="Length tier used for every argument")
    model: str = Field(..., description="Starting model alias requested by the caller")
    execution_time_seconds: float = Field(default=0.0, description="Total execution time")
