"""Batch auditing of recorded actions against predicted intents."""

from .models import AuditReport, RowAudit, TableAudit
from .runner import IntentAuditor

__all__ = [
    "AuditReport",
    "RowAudit",
    "TableAudit",
    "IntentAuditor",
]
