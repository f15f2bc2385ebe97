"""Tests for the config module."""

from pathlib import Path

from intentaudit.config import AuditConfig, Settings, _optional_env, _parse_skip_sheets


class TestParseSkipSheets:
    """Test skip list parsing."""

    def test_parse_skip_sheets_with_value(self, monkeypatch):
        monkeypatch.setenv("SKIP_SHEETS", "Dashboard, Archive ,,Notes")
        assert _parse_skip_sheets() == ["Dashboard", "Archive", "Notes"]

    def test_parse_skip_sheets_without_value(self, monkeypatch):
        monkeypatch.delenv("SKIP_SHEETS", raising=False)
        assert _parse_skip_sheets() == ["Dashboard", "Instructions", "Rules"]


class TestOptionalEnv:
    """Test optional environment values."""

    def test_empty_value_disables(self, monkeypatch):
        monkeypatch.setenv("OVERRIDE_COLUMN_KEY", "")
        assert _optional_env("OVERRIDE_COLUMN_KEY", "actionoverride") is None

    def test_default_used_when_unset(self, monkeypatch):
        monkeypatch.delenv("OVERRIDE_COLUMN_KEY", raising=False)
        assert _optional_env("OVERRIDE_COLUMN_KEY", "actionoverride") == "actionoverride"


class TestSettings:
    """Test Settings configuration."""

    def test_settings_explicit_values(self, tmp_path):
        settings = Settings(
            google_credentials_path=tmp_path / "creds.json",
            rules_path=tmp_path / "rules.json",
            skip_sheets=["Summary"],
            legacy_marker="OLD",
            fallback_action="Needs Review",
            max_rows_per_table=10,
        )

        assert isinstance(settings.rules_path, Path)
        assert settings.skip_sheets == ["Summary"]
        assert settings.legacy_marker == "OLD"
        assert settings.fallback_action == "Needs Review"
        assert settings.max_rows_per_table == 10

    def test_audit_config_normalizes_column_keys(self):
        """Test raw header names are normalized into keys."""
        settings = Settings(
            trigger_column_key="Automation Trigger Phrase",
            action_column_key="Action Type (Intent)",
            recommended_column_key="Recommended Disambiguated Phrase",
            override_column_key=None,
        )

        config = settings.audit_config()

        assert isinstance(config, AuditConfig)
        assert config.column_keys.trigger == "automationtriggerphrase"
        assert config.column_keys.action == "actiontypeintent"
        assert config.column_keys.recommended == "recommendeddisambiguatedphrase"
        assert config.column_keys.override is None

    def test_audit_config_carries_qualification_settings(self):
        settings = Settings(
            skip_sheets=["Dashboard", "Rules"],
            legacy_marker="(Legacy)",
            fallback_action="Search/Query",
            max_rows_per_table=250,
        )

        config = settings.audit_config()

        assert config.skip_names == frozenset({"Dashboard", "Rules"})
        assert config.legacy_marker == "(Legacy)"
        assert config.fallback_action == "Search/Query"
        assert config.max_rows_per_table == 250

    def test_blank_optional_key_becomes_none(self):
        settings = Settings(recommended_column_key="!!!")
        assert settings.audit_config().column_keys.recommended is None
