"""Ordered-priority intent classification engine."""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .models import FALLBACK_PATTERN, ClassificationResult, RuleSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvalidPattern:
    """A configured pattern that could not be compiled."""

    action: str
    pattern: str
    error: str


def compile_pattern(pattern: str) -> Optional[re.Pattern]:
    """Compile a pattern case-insensitively, returning None if it is invalid."""
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error:
        return None


def _match_subject(trigger: Optional[str], recommended: Optional[str]) -> str:
    return f"{trigger or ''} {recommended or ''}".strip()


def classify(
    trigger: Optional[str],
    recommended: Optional[str],
    rule_set: RuleSet,
    fallback_action: str,
) -> ClassificationResult:
    """
    Classify a trigger phrase against an ordered rule set.

    The trigger and recommended phrases are joined with a single space and
    searched (unanchored) by each pattern. Actions are tried in
    ``actions_order`` and patterns in their listed order; the first hit
    wins. Patterns that fail to compile never match. When nothing matches,
    ``fallback_action`` is returned with the "Default Fallback" pattern.
    """
    subject = _match_subject(trigger, recommended)

    for action in rule_set.actions_order:
        for pattern in rule_set.patterns_for(action):
            compiled = compile_pattern(pattern)
            if compiled is None:
                continue
            if compiled.search(subject):
                return ClassificationResult(action=action, pattern=pattern)

    return ClassificationResult(action=fallback_action, pattern=FALLBACK_PATTERN)


class IntentClassifier:
    """
    Classifier bound to one rule set for the duration of an audit run.

    Patterns are compiled once, in priority order. Patterns that fail to
    compile are dropped and kept in ``invalid_patterns`` for diagnostics.
    Results are identical to :func:`classify` with the same inputs.
    """

    def __init__(self, rule_set: RuleSet, fallback_action: str):
        self.rule_set = rule_set
        self.fallback_action = fallback_action
        self.invalid_patterns: list[InvalidPattern] = []
        self._compiled: list[tuple[str, str, re.Pattern]] = []

        for action in rule_set.actions_order:
            for pattern in rule_set.patterns_for(action):
                try:
                    compiled = re.compile(pattern, re.IGNORECASE)
                except re.error as e:
                    self.invalid_patterns.append(InvalidPattern(action, pattern, str(e)))
                    logger.warning(f"Skipping invalid pattern for '{action}': {pattern!r} ({e})")
                    continue
                self._compiled.append((action, pattern, compiled))

        logger.info(
            f"Compiled {len(self._compiled)} patterns across "
            f"{len(rule_set.actions_order)} actions "
            f"({len(self.invalid_patterns)} invalid)"
        )

    @property
    def actions(self) -> tuple[str, ...]:
        return self.rule_set.actions_order

    def classify(self, trigger: Optional[str], recommended: Optional[str] = None) -> ClassificationResult:
        """Classify a trigger phrase, optionally disambiguated by a recommended phrase."""
        subject = _match_subject(trigger, recommended)

        for action, pattern, compiled in self._compiled:
            if compiled.search(subject):
                return ClassificationResult(action=action, pattern=pattern)

        return ClassificationResult(action=self.fallback_action, pattern=FALLBACK_PATTERN)
