"""Configuration management for Intent Audit."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .headers.models import ColumnKeys
from .headers.normalizer import normalize_key

load_dotenv()


def _parse_skip_sheets() -> list[str]:
    """Parse sheet names to skip from environment variable."""
    skip_env = os.getenv("SKIP_SHEETS")
    if skip_env:
        return [name.strip() for name in skip_env.split(",") if name.strip()]
    return ["Dashboard", "Instructions", "Rules"]


def _optional_env(name: str, default: Optional[str]) -> Optional[str]:
    """Read an optional environment variable; an empty value disables it."""
    value = os.getenv(name, default)
    return value or None


class AuditConfig(BaseModel):
    """Explicit configuration passed into header qualification and auditing."""

    model_config = {"frozen": True}

    skip_names: frozenset[str] = Field(default_factory=frozenset)
    legacy_marker: str = ""
    column_keys: ColumnKeys
    fallback_action: str = "Search/Query"
    max_rows_per_table: int = 5000


class Settings(BaseModel):
    """Application settings."""

    # Google Sheets API credentials
    google_credentials_path: Path = Path(os.getenv("GOOGLE_CREDENTIALS_PATH", "credentials.json"))
    google_token_path: Path = Path(os.getenv("GOOGLE_TOKEN_PATH", "token.json"))

    # Rule source (JSON document with actions_order and rules)
    rules_path: Path = Path(os.getenv("INTENT_RULES_PATH", "rules/intent_rules.json"))

    # Table qualification
    skip_sheets: list[str] = _parse_skip_sheets()
    legacy_marker: str = os.getenv("LEGACY_MARKER", "(Legacy)")

    # Column headers, raw or already normalized
    trigger_column_key: str = os.getenv("TRIGGER_COLUMN_KEY", "automationtriggerphrase")
    action_column_key: str = os.getenv("ACTION_COLUMN_KEY", "actiontype")
    recommended_column_key: Optional[str] = _optional_env(
        "RECOMMENDED_COLUMN_KEY", "recommendeddisambiguatedphrase"
    )
    override_column_key: Optional[str] = _optional_env("OVERRIDE_COLUMN_KEY", "actionoverride")

    # Classification
    fallback_action: str = os.getenv("FALLBACK_ACTION", "Search/Query")

    # Work limits per table
    max_rows_per_table: int = int(os.getenv("MAX_ROWS_PER_TABLE", "5000"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def audit_config(self) -> AuditConfig:
        """Build the explicit audit configuration from these settings."""
        column_keys = ColumnKeys(
            trigger=normalize_key(self.trigger_column_key),
            action=normalize_key(self.action_column_key),
            recommended=normalize_key(self.recommended_column_key) or None,
            override=normalize_key(self.override_column_key) or None,
        )
        return AuditConfig(
            skip_names=frozenset(self.skip_sheets),
            legacy_marker=self.legacy_marker,
            column_keys=column_keys,
            fallback_action=self.fallback_action,
            max_rows_per_table=self.max_rows_per_table,
        )


settings = Settings()
