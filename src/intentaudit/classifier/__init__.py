"""Ordered rule-based intent classification."""

from .engine import IntentClassifier, InvalidPattern, classify, compile_pattern
from .loader import RuleSourceError, load_rule_set
from .models import FALLBACK_PATTERN, ClassificationResult, RuleSet

__all__ = [
    "IntentClassifier",
    "InvalidPattern",
    "classify",
    "compile_pattern",
    "RuleSourceError",
    "load_rule_set",
    "FALLBACK_PATTERN",
    "ClassificationResult",
    "RuleSet",
]
