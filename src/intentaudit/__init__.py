"""Intent Audit - rule-based intent classification audits for spreadsheet tables."""

__version__ = "0.1.0"
