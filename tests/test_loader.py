"""Tests for loading rule sets."""

import json

import pytest

from intentaudit.classifier import RuleSourceError, load_rule_set


class TestLoadRuleSet:
    """Test rule set loading from different sources."""

    def test_from_mapping(self, basic_rules):
        rule_set = load_rule_set(basic_rules)
        assert rule_set.actions_order == ("Create Record", "Update Record", "Search/Query")
        assert rule_set.patterns_for("Update Record") == ("change", "update", "modify", "edit")

    def test_from_json_string(self, basic_rules):
        rule_set = load_rule_set(json.dumps(basic_rules))
        assert rule_set.actions_order[0] == "Create Record"

    def test_from_path(self, tmp_path, basic_rules):
        rules_file = tmp_path / "rules.json"
        rules_file.write_text(json.dumps(basic_rules))

        rule_set = load_rule_set(rules_file)
        assert len(rule_set.actions_order) == 3

    def test_from_path_string(self, tmp_path, basic_rules):
        rules_file = tmp_path / "rules.json"
        rules_file.write_text(json.dumps(basic_rules))

        rule_set = load_rule_set(str(rules_file))
        assert rule_set.patterns_for("Search/Query")[-1] == "lookup"

    def test_missing_members_default_to_empty(self):
        """Test a document without actions_order or rules."""
        rule_set = load_rule_set({})
        assert rule_set.actions_order == ()
        assert rule_set.rules == {}

    def test_null_members_default_to_empty(self):
        rule_set = load_rule_set('{"actions_order": null, "rules": null}')
        assert rule_set.actions_order == ()
        assert rule_set.rules == {}

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(RuleSourceError, match="not found"):
            load_rule_set(tmp_path / "absent.json")

    def test_invalid_json_raises(self, tmp_path):
        rules_file = tmp_path / "rules.json"
        rules_file.write_text("{not json")

        with pytest.raises(RuleSourceError, match="Invalid JSON"):
            load_rule_set(rules_file)

    def test_non_object_document_raises(self, tmp_path):
        rules_file = tmp_path / "rules.json"
        rules_file.write_text("[1, 2, 3]")

        with pytest.raises(RuleSourceError, match="JSON object"):
            load_rule_set(rules_file)

    def test_inline_json_array_is_parsed_not_treated_as_path(self):
        """Test inline non-object JSON reports the shape error."""
        with pytest.raises(RuleSourceError, match="JSON object"):
            load_rule_set("[1, 2]")

    def test_bundled_rules_file(self):
        """Test the shipped rules file loads and compiles cleanly."""
        from pathlib import Path

        from intentaudit.classifier import IntentClassifier

        rules_path = Path(__file__).parent.parent / "rules" / "intent_rules.json"
        rule_set = load_rule_set(rules_path)
        classifier = IntentClassifier(rule_set, fallback_action="Search/Query")

        assert classifier.invalid_patterns == []
        assert classifier.classify("Remove the old lead").action == "Delete Record"
        assert classifier.classify("Email the owner").action == "Send Notification"
