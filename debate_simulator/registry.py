"""
Model registry: maps short model aliases to provider model identifiers
and picks fallback candidates in a fixed priority order.
"""

from typing import AbstractSet, Mapping, Optional, Sequence, Tuple
from types import MappingProxyType

from config.config import FREE_MODELS, MODEL_FALLBACK_ORDER, DEFAULT_MODEL


class ModelRegistry:
    """Immutable alias table plus fallback priority list."""

    def __init__(
        self,
        models: Mapping[str, str] = FREE_MODELS,
        fallback_order: Sequence[str] = MODEL_FALLBACK_ORDER,
        default_alias: str = DEFAULT_MODEL
    ):
        """
        Initialize the registry.

        Args:
            models: Mapping of alias to provider model identifier
            fallback_order: Aliases to try, in order, when a model is rejected
            default_alias: Alias whose identifier unknown aliases resolve to
        """
        if default_alias not in models:
            raise ValueError(f"Default model '{default_alias}' is not in the model table")
        unknown = [alias for alias in fallback_order if alias not in models]
        if unknown:
            raise ValueError(f"Fallback order references unknown models: {unknown}")

        self._models = MappingProxyType(dict(models))
        self._fallback_order: Tuple[str, ...] = tuple(fallback_order)
        self.default_alias = default_alias

    @property
    def models(self) -> Mapping[str, str]:
        return self._models

    @property
    def aliases(self) -> Tuple[str, ...]:
        return tuple(self._models)

    @property
    def fallback_order(self) -> Tuple[str, ...]:
        return self._fallback_order

    def __contains__(self, alias: object) -> bool:
        return alias in self._models

    def resolve(self, alias: str) -> str:
        """Return the model identifier for an alias, or the default identifier."""
        return self._models.get(alias, self._models[self.default_alias])

    def fallback_candidate(self, tried: AbstractSet[str]) -> Optional[str]:
        """Return the first alias in the fallback order not yet tried."""
        return next((alias for alias in self._fallback_order if alias not in tried), None)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(models={list(self._models)}, default={self.default_alias})"
