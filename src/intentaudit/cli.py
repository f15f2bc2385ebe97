"""Command-line interface for Intent Audit."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import settings


def main(argv: Optional[list[str]] = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Intent Audit - check recorded automation actions against trigger phrases"
    )
    rules_parser = argparse.ArgumentParser(add_help=False)
    rules_parser.add_argument(
        "--rules", type=Path, default=None, help="Path to the rules JSON (default: INTENT_RULES_PATH)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Audit command
    audit_parser = subparsers.add_parser(
        "audit", parents=[rules_parser], help="Audit every sheet of a spreadsheet"
    )
    audit_parser.add_argument("--spreadsheet", "-s", required=True, help="Spreadsheet ID to audit")
    audit_parser.add_argument("--output", "-o", type=Path, help="Write the full report as JSON")

    # Classify command
    classify_parser = subparsers.add_parser(
        "classify", parents=[rules_parser], help="Classify a single trigger phrase"
    )
    classify_parser.add_argument("trigger", help="Trigger phrase to classify")
    classify_parser.add_argument(
        "--recommended", "-r", default="", help="Recommended disambiguated phrase"
    )

    # Auth command
    subparsers.add_parser("auth", help="Authenticate with Google Sheets API")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "audit":
        run_audit(args.spreadsheet, args.rules, args.output)
    elif args.command == "classify":
        run_classify(args.trigger, args.recommended, args.rules)
    elif args.command == "auth":
        run_auth()
    else:
        parser.print_help()
        sys.exit(1)


def _build_classifier(rules_path: Optional[Path]):
    from .classifier import IntentClassifier, RuleSourceError, load_rule_set

    try:
        rule_set = load_rule_set(rules_path or settings.rules_path)
    except RuleSourceError as e:
        print(f"Error: {e}")
        sys.exit(1)
    return IntentClassifier(rule_set, settings.fallback_action)


def run_audit(spreadsheet_id: str, rules_path: Optional[Path], output: Optional[Path]):
    """Audit a spreadsheet and print a summary of mismatches."""
    from .audit import IntentAuditor
    from .sheets import GoogleSheetsClient

    classifier = _build_classifier(rules_path)
    auditor = IntentAuditor(classifier, settings.audit_config())

    try:
        report = auditor.audit_spreadsheet(GoogleSheetsClient(), spreadsheet_id)
    except (RuntimeError, FileNotFoundError) as e:
        print(f"Audit failed: {e}")
        sys.exit(1)

    summary = report.summary()
    print(f"Tables audited: {summary['audited_tables']}")
    print(f"Tables skipped: {summary['skipped_tables']}")
    for table in report.skipped_tables:
        print(f"  - {table.table_name}: {table.check.reason}")
    print(f"Rows audited:   {summary['total_rows']}")
    print(f"Mismatches:     {summary['total_mismatches']}")
    for row in report.mismatches():
        print(
            f"  {row.table_name}!{row.row_number}: current '{row.current_action}' "
            f"-> expected '{row.expected_action}' (pattern: {row.matched_pattern})"
        )

    if classifier.invalid_patterns:
        print(f"Invalid patterns skipped: {len(classifier.invalid_patterns)}")

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(report.model_dump_json(indent=2), encoding="utf-8")
        print(f"Report written to {output}")


def run_classify(trigger: str, recommended: str, rules_path: Optional[Path]):
    """Classify a single phrase and print the result."""
    classifier = _build_classifier(rules_path)
    result = classifier.classify(trigger, recommended)
    print(f"Action:  {result.action}")
    print(f"Pattern: {result.pattern}")


def run_auth():
    """Run the Google authentication flow."""
    from .sheets import GoogleSheetsClient

    print("Authenticating with Google Sheets API...")
    try:
        client = GoogleSheetsClient()
        # Accessing the service property triggers auth
        _ = client.service
        print("Authentication successful!")
        print("Token saved. You can now run audits against Google Sheets.")
    except Exception as e:
        print(f"Authentication failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
