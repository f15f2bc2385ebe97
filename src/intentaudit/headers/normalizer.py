"""Header normalization for inconsistently named spreadsheet columns."""

import logging
import re
from typing import Any, Iterable, Optional, Sequence

from .models import ColumnKeys, HeaderMap, IntegrationCheck, ResolvedColumns

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]")

SKIP_LIST_REASON = "in skip list"
LEGACY_REASON = "marked legacy"


def normalize_key(raw: Any) -> str:
    """
    Convert a raw header value into a canonical lookup key.

    Lowercases the value and drops every character that is not an ASCII
    letter or digit, so "Action Type (Intent)" becomes "actiontypeintent".
    """
    if raw is None:
        return ""
    return _NON_ALNUM.sub("", str(raw).lower())


def build_header_map(header_row: Sequence[Any]) -> HeaderMap:
    """
    Map normalized header keys to 0-based column indices.

    Blank cells and headers that normalize to an empty key are dropped.
    When two headers normalize to the same key, the later column wins.
    """
    header_map: HeaderMap = {}
    for index, value in enumerate(header_row):
        if not value:
            continue
        key = normalize_key(value)
        if key:
            header_map[key] = index
    return header_map


def is_qualifying_table(
    table_name: str,
    header_row: Sequence[Any],
    skip_names: Iterable[str],
    legacy_marker: str,
    required_keys: ColumnKeys,
) -> IntegrationCheck:
    """
    Decide whether a table is an integration table that should be audited.

    Name-based rejections (skip list, legacy marker) take precedence over
    header content. A table qualifies only when both the trigger and the
    action columns are present.
    """
    if table_name in set(skip_names):
        return IntegrationCheck.reject(SKIP_LIST_REASON)

    if legacy_marker and legacy_marker in table_name:
        return IntegrationCheck.reject(LEGACY_REASON)

    header_map = build_header_map(header_row)
    if required_keys.trigger in header_map and required_keys.action in header_map:
        return IntegrationCheck.accept()

    found = ", ".join(header_map) or "none"
    return IntegrationCheck.reject(
        f"missing required columns '{required_keys.trigger}' and/or "
        f"'{required_keys.action}'; found: {found}"
    )


def resolve_columns(header_map: HeaderMap, column_keys: ColumnKeys) -> Optional[ResolvedColumns]:
    """Look up the configured columns in a header map.

    Returns None when either required column is missing.
    """
    if column_keys.trigger not in header_map or column_keys.action not in header_map:
        return None

    return ResolvedColumns(
        trigger=header_map[column_keys.trigger],
        action=header_map[column_keys.action],
        recommended=header_map.get(column_keys.recommended) if column_keys.recommended else None,
        override=header_map.get(column_keys.override) if column_keys.override else None,
    )
