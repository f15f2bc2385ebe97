"""Data models for header resolution."""

from typing import Optional

from pydantic import BaseModel

# Normalized header key -> 0-based column index
HeaderMap = dict[str, int]


class ColumnKeys(BaseModel):
    """Normalized header keys designating the columns of interest."""

    model_config = {"frozen": True}

    trigger: str
    action: str
    recommended: Optional[str] = None
    override: Optional[str] = None


class IntegrationCheck(BaseModel):
    """Outcome of deciding whether a table is in scope for auditing."""

    model_config = {"frozen": True}

    is_valid: bool
    reason: Optional[str] = None  # Set only when is_valid is False

    @classmethod
    def accept(cls) -> "IntegrationCheck":
        return cls(is_valid=True)

    @classmethod
    def reject(cls, reason: str) -> "IntegrationCheck":
        return cls(is_valid=False, reason=reason)


class ResolvedColumns(BaseModel):
    """Column indices for one table, resolved once from its header row."""

    model_config = {"frozen": True}

    trigger: int
    action: int
    recommended: Optional[int] = None
    override: Optional[int] = None
