"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest

from intentaudit.classifier import IntentClassifier, RuleSet
from intentaudit.config import AuditConfig
from intentaudit.headers import ColumnKeys
from intentaudit.sheets import GoogleSheetsClient


@pytest.fixture
def basic_rules() -> dict:
    """Rule document with three actions in priority order."""
    return {
        "actions_order": ["Create Record", "Update Record", "Search/Query"],
        "rules": {
            "Create Record": ["new", "add", "create", "insert"],
            "Update Record": ["change", "update", "modify", "edit"],
            "Search/Query": ["find", "search", "get", "lookup"],
        },
    }


@pytest.fixture
def rule_set(basic_rules) -> RuleSet:
    return RuleSet(**basic_rules)


@pytest.fixture
def classifier(rule_set) -> IntentClassifier:
    return IntentClassifier(rule_set, fallback_action="Search/Query")


@pytest.fixture
def column_keys() -> ColumnKeys:
    return ColumnKeys(
        trigger="automationtriggerphrase",
        action="actiontype",
        recommended="recommendeddisambiguatedphrase",
        override="actionoverride",
    )


@pytest.fixture
def audit_config(column_keys) -> AuditConfig:
    return AuditConfig(
        skip_names=frozenset({"Dashboard", "Rules"}),
        legacy_marker="(Legacy)",
        column_keys=column_keys,
        fallback_action="Search/Query",
        max_rows_per_table=100,
    )


@pytest.fixture
def mock_sheets_client() -> Mock:
    """Create a mocked Google Sheets client."""
    client = Mock(spec=GoogleSheetsClient)

    client.get_spreadsheet_info = Mock(
        return_value={
            "id": "test-sheet-123",
            "title": "Test Sheet",
            "sheets": [{"title": "Sheet1", "id": 0, "row_count": 10, "col_count": 4}],
        }
    )

    return client
