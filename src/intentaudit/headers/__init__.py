"""Header normalization and table qualification."""

from .models import ColumnKeys, HeaderMap, IntegrationCheck, ResolvedColumns
from .normalizer import (
    build_header_map,
    is_qualifying_table,
    normalize_key,
    resolve_columns,
)

__all__ = [
    "ColumnKeys",
    "HeaderMap",
    "IntegrationCheck",
    "ResolvedColumns",
    "build_header_map",
    "is_qualifying_table",
    "normalize_key",
    "resolve_columns",
]
