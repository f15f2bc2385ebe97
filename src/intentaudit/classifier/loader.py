"""Loading rule sets from JSON documents."""

import json
import logging
from pathlib import Path
from typing import Any, Union

from .models import RuleSet

logger = logging.getLogger(__name__)


class RuleSourceError(Exception):
    """Exception raised when a rule source cannot be read or parsed."""

    pass


def load_rule_set(source: Union[dict[str, Any], str, Path]) -> RuleSet:
    """
    Build a RuleSet from a mapping, a JSON string or a path to a JSON file.

    The expected shape is ``{"actions_order": [...], "rules": {...}}``.
    Missing or wrongly typed members degrade to empty values.

    Raises:
        RuleSourceError: If the file is missing or the JSON is invalid
    """
    if isinstance(source, dict):
        data = source
    elif isinstance(source, Path):
        data = _read_json_file(source)
    else:
        text = source.strip()
        if text.startswith(("{", "[")):
            data = _parse_json(text, "<string>")
        else:
            data = _read_json_file(Path(source))

    if not isinstance(data, dict):
        raise RuleSourceError(f"Rule source must be a JSON object, got {type(data).__name__}")

    rule_set = RuleSet(
        actions_order=data.get("actions_order", []),
        rules=data.get("rules", {}),
    )
    logger.info(f"Loaded rule set with actions: {', '.join(rule_set.actions_order) or 'none'}")
    return rule_set


def _read_json_file(path: Path) -> Any:
    if not path.exists():
        raise RuleSourceError(f"Rule file not found at {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise RuleSourceError(f"Failed to read rule file {path}: {e}")
    return _parse_json(text, str(path))


def _parse_json(text: str, origin: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise RuleSourceError(f"Invalid JSON in rule source {origin}: {e}")
