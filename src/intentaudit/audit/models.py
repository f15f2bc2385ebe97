"""Data models for audit results."""

from collections import Counter
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

from ..headers.models import IntegrationCheck


def _utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


class RowAudit(BaseModel):
    """Audit outcome for a single data row."""

    table_name: str
    row_number: int  # 1-based sheet row, header is row 1
    trigger: str
    recommended: str = ""
    current_action: str
    predicted_action: str
    matched_pattern: str
    override_action: Optional[str] = None
    expected_action: str
    is_match: bool

    @property
    def is_overridden(self) -> bool:
        return self.override_action is not None


class TableAudit(BaseModel):
    """Audit outcome for one table."""

    table_name: str
    check: IntegrationCheck
    rows: list[RowAudit] = Field(default_factory=list)
    rows_truncated: bool = False

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def mismatch_count(self) -> int:
        return sum(1 for row in self.rows if not row.is_match)


class AuditReport(BaseModel):
    """Report of an audit run across tables, in processing order."""

    tables: list[TableAudit] = Field(default_factory=list)
    started_at: datetime = Field(default_factory=_utc_now)
    finished_at: Optional[datetime] = None

    @property
    def audited_tables(self) -> list[TableAudit]:
        return [table for table in self.tables if table.check.is_valid]

    @property
    def skipped_tables(self) -> list[TableAudit]:
        return [table for table in self.tables if not table.check.is_valid]

    @property
    def total_rows(self) -> int:
        return sum(table.row_count for table in self.tables)

    @property
    def total_mismatches(self) -> int:
        return sum(table.mismatch_count for table in self.tables)

    def mismatches(self) -> list[RowAudit]:
        """All rows whose current action differs from the expected one."""
        return [row for table in self.tables for row in table.rows if not row.is_match]

    def action_counts(self) -> dict[str, int]:
        """Number of rows per predicted action."""
        counts = Counter(row.predicted_action for table in self.tables for row in table.rows)
        return dict(counts)

    def finish(self) -> None:
        """Mark the run as finished."""
        self.finished_at = _utc_now()

    def summary(self) -> dict:
        """Calculate summary statistics for this report."""
        return {
            "audited_tables": len(self.audited_tables),
            "skipped_tables": len(self.skipped_tables),
            "total_rows": self.total_rows,
            "total_mismatches": self.total_mismatches,
            "action_counts": self.action_counts(),
        }
