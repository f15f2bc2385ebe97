"""Audit runner: classifies table rows and compares them with recorded actions."""

import logging
from typing import Iterable, Optional

from ..classifier import IntentClassifier
from ..config import AuditConfig
from ..headers import (
    IntegrationCheck,
    build_header_map,
    is_qualifying_table,
    resolve_columns,
)
from ..headers.models import ResolvedColumns
from ..sheets import GoogleSheetsClient, SheetTable
from .models import AuditReport, RowAudit, TableAudit

logger = logging.getLogger(__name__)


def _same_action(left: str, right: str) -> bool:
    return left.strip().lower() == right.strip().lower()


class IntentAuditor:
    """
    Audits tables of automation rows against a rule-based classifier.

    Each table is qualified by name and headers, its columns are resolved
    once, and every row with a trigger phrase is classified. A row matches
    when its recorded action equals the expected action: the override
    value when one is present, otherwise the predicted action.
    """

    def __init__(self, classifier: IntentClassifier, config: AuditConfig):
        self.classifier = classifier
        self.config = config

    def check_table(self, table: SheetTable) -> IntegrationCheck:
        """Decide whether a table qualifies for auditing."""
        return is_qualifying_table(
            table.name,
            table.header_row,
            skip_names=self.config.skip_names,
            legacy_marker=self.config.legacy_marker,
            required_keys=self.config.column_keys,
        )

    def audit_table(self, table: SheetTable) -> TableAudit:
        """Audit every data row of a single table."""
        check = self.check_table(table)
        if not check.is_valid:
            logger.debug(f"Skipping table '{table.name}': {check.reason}")
            return TableAudit(table_name=table.name, check=check)

        columns = resolve_columns(build_header_map(table.header_row), self.config.column_keys)

        limit = self.config.max_rows_per_table
        rows: list[RowAudit] = []
        truncated = False

        for offset, row in enumerate(table.rows):
            row_audit = self._audit_row(table.name, offset + 2, row, columns)
            if row_audit is None:
                continue

            if len(rows) >= limit:
                truncated = True
                logger.warning(f"Reached limit of {limit} rows in table '{table.name}'")
                break
            rows.append(row_audit)

        audit = TableAudit(table_name=table.name, check=check, rows=rows, rows_truncated=truncated)
        logger.info(
            f"Audited table '{table.name}': {audit.row_count} rows, "
            f"{audit.mismatch_count} mismatches"
        )
        return audit

    def _audit_row(
        self,
        table_name: str,
        row_number: int,
        row: list,
        columns: ResolvedColumns,
    ) -> Optional[RowAudit]:
        trigger = SheetTable.cell(row, columns.trigger)
        if not trigger:
            return None

        recommended = SheetTable.cell(row, columns.recommended)
        current = SheetTable.cell(row, columns.action)
        override = SheetTable.cell(row, columns.override) or None

        result = self.classifier.classify(trigger, recommended)
        expected = override or result.action

        return RowAudit(
            table_name=table_name,
            row_number=row_number,
            trigger=trigger,
            recommended=recommended,
            current_action=current,
            predicted_action=result.action,
            matched_pattern=result.pattern,
            override_action=override,
            expected_action=expected,
            is_match=_same_action(current, expected),
        )

    def audit_tables(self, tables: Iterable[SheetTable]) -> AuditReport:
        """Audit tables in the given order."""
        report = AuditReport()
        for table in tables:
            report.tables.append(self.audit_table(table))
        self._finish(report)
        return report

    def audit_spreadsheet(self, client: GoogleSheetsClient, spreadsheet_id: str) -> AuditReport:
        """
        Audit every sheet of a spreadsheet.

        Sheets that cannot be read are recorded as rejected tables with the
        read error as reason; the remaining sheets are still audited.
        """
        info = client.get_spreadsheet_info(spreadsheet_id)
        logger.info(f"Auditing spreadsheet '{info['title']}' ({len(info['sheets'])} sheets)")

        report = AuditReport()
        for sheet in info["sheets"]:
            sheet_name = sheet["title"]
            try:
                table = client.read_table(spreadsheet_id, sheet_name)
            except RuntimeError as e:
                logger.warning(f"Failed to read sheet '{sheet_name}': {e}")
                report.tables.append(
                    TableAudit(
                        table_name=sheet_name,
                        check=IntegrationCheck.reject(f"read failed: {e}"),
                    )
                )
                continue
            report.tables.append(self.audit_table(table))

        self._finish(report)
        return report

    @staticmethod
    def _finish(report: AuditReport) -> None:
        report.finish()
        logger.info(
            f"Audit finished: {len(report.audited_tables)} tables audited, "
            f"{len(report.skipped_tables)} skipped, {report.total_mismatches} mismatches"
        )
