"""Data models for intent classification."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

FALLBACK_PATTERN = "Default Fallback"


class RuleSet(BaseModel):
    """
    Ordered classification rules.

    ``actions_order`` defines priority: an action earlier in the list always
    wins over a later one. ``rules`` maps each action to its patterns, tried
    in the order given. Actions without an entry have no patterns.
    """

    model_config = {"frozen": True}

    actions_order: tuple[str, ...] = ()
    rules: dict[str, tuple[str, ...]] = Field(default_factory=dict)

    @field_validator("actions_order", mode="before")
    @classmethod
    def _coerce_actions_order(cls, value: Any) -> Any:
        if not isinstance(value, (list, tuple)):
            return ()
        return tuple(str(action) for action in value)

    @field_validator("rules", mode="before")
    @classmethod
    def _coerce_rules(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return {}
        coerced = {}
        for action, patterns in value.items():
            if isinstance(patterns, (list, tuple)):
                coerced[str(action)] = tuple(str(p) for p in patterns)
            else:
                coerced[str(action)] = ()
        return coerced

    def patterns_for(self, action: str) -> tuple[str, ...]:
        """Return the patterns configured for an action (empty if absent)."""
        return self.rules.get(action, ())


class ClassificationResult(BaseModel):
    """Predicted action and the pattern that selected it."""

    model_config = {"frozen": True}

    action: str
    pattern: str

    @property
    def is_fallback(self) -> bool:
        return self.pattern == FALLBACK_PATTERN
