"""Pattern detectors for telemetry-relevant SQL statements.

Each detector inspects one statement and returns an event or ``None``.
Matching is case-insensitive and tolerates any run of Unicode whitespace
between keywords. Identifiers are limited to ASCII characters.

Every pattern is bounded so a single search runs in linear time. Constructs
that need an open-ended gap (``SELECT ... INTO`` and ``ALTER TABLE ...
ENABLE RLS``) are resolved in two passes instead of with a lazy wildcard:
the leading keyword is located once, then the trailing keyword is searched
from that offset.
"""

import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Optional

from typing_extensions import TypeAlias

from sqlevents.core.identifiers import IDENTIFIER, QUALIFIED_NAME, extract_identifiers
from sqlevents.events import ObjectEvent, SQLEvent, SQLEventKind, TableEvent

if TYPE_CHECKING:
    from re import Match, Pattern

__all__ = (
    "DETECTORS",
    "Detector",
    "detect_copy",
    "detect_create_function",
    "detect_create_table",
    "detect_create_trigger",
    "detect_create_view",
    "detect_enable_rls",
    "detect_insert",
    "detect_select_into",
)

Detector: TypeAlias = Callable[[str], Optional[SQLEvent]]

_FLAGS = re.IGNORECASE
_IF_NOT_EXISTS = r"(?:IF\s+NOT\s+EXISTS\s+)?"

CREATE_TABLE_PATTERNS: "tuple[Pattern[str], ...]" = (
    re.compile(rf"CREATE\s+TABLE\s+{_IF_NOT_EXISTS}{QUALIFIED_NAME}", _FLAGS),
    re.compile(rf"CREATE\s+TEMP(?:ORARY)?\s+TABLE\s+{_IF_NOT_EXISTS}{QUALIFIED_NAME}", _FLAGS),
    re.compile(rf"CREATE\s+UNLOGGED\s+TABLE\s+{_IF_NOT_EXISTS}{QUALIFIED_NAME}", _FLAGS),
)
CREATE_TABLE_AS_SELECT_PATTERN = re.compile(
    rf"CREATE\s+TABLE\s+{_IF_NOT_EXISTS}{QUALIFIED_NAME}\s+AS\s+SELECT", _FLAGS
)
SELECT_KEYWORD_PATTERN = re.compile(r"SELECT\s", _FLAGS)
INTO_TARGET_PATTERN = re.compile(rf"\sINTO\s+{QUALIFIED_NAME}", _FLAGS)
INSERT_PATTERN = re.compile(rf"INSERT\s+INTO\s+{QUALIFIED_NAME}", _FLAGS)
COPY_FROM_PATTERN = re.compile(rf"COPY\s+{QUALIFIED_NAME}\s+FROM", _FLAGS)
ALTER_TABLE_PATTERN = re.compile(rf"ALTER\s+TABLE\s+{QUALIFIED_NAME}", _FLAGS)
ENABLE_RLS_PATTERNS: "tuple[Pattern[str], ...]" = (
    re.compile(r"ENABLE\s+ROW\s+LEVEL\s+SECURITY", _FLAGS),
    re.compile(r"ENABLE\s+RLS", _FLAGS),
)
CREATE_FUNCTION_PATTERN = re.compile(rf"CREATE\s+(?:OR\s+REPLACE\s+)?FUNCTION\s+{QUALIFIED_NAME}", _FLAGS)
CREATE_TRIGGER_PATTERN = re.compile(rf"CREATE\s+(?:OR\s+REPLACE\s+)?TRIGGER\s+(?P<name>{IDENTIFIER})", _FLAGS)
CREATE_VIEW_PATTERN = re.compile(
    rf"CREATE\s+(?:OR\s+REPLACE\s+)?(?:MATERIALIZED\s+)?VIEW\s+{QUALIFIED_NAME}", _FLAGS
)


def _table_event(kind: SQLEventKind, match: "Match[str]") -> TableEvent:
    schema, name = extract_identifiers(match)
    return TableEvent(kind=kind, schema=schema, table_name=name)


def _object_event(kind: SQLEventKind, match: "Match[str]") -> ObjectEvent:
    schema, name = extract_identifiers(match)
    return ObjectEvent(kind=kind, schema=schema, object_name=name)


def _search_select_into(sql: str) -> "Optional[Match[str]]":
    # Later SELECT keywords only see a suffix of what the first one sees, so
    # the first occurrence decides.
    select = SELECT_KEYWORD_PATTERN.search(sql)
    if select is None:
        return None
    return INTO_TARGET_PATTERN.search(sql, select.end())


def _last_match_start(pattern: "Pattern[str]", sql: str) -> int:
    last = -1
    for match in pattern.finditer(sql):
        last = match.start()
    return last


def detect_create_table(sql: str) -> Optional[TableEvent]:
    """Detect ``CREATE [TEMP|TEMPORARY|UNLOGGED] TABLE [IF NOT EXISTS] [schema.]name``.

    Example:
        >>> detect_create_table("CREATE TABLE users (id INT)")
        TableEvent(kind=<SQLEventKind.TABLE_CREATED: 'table_created'>, schema=None, table_name='users')
    """
    for pattern in CREATE_TABLE_PATTERNS:
        match = pattern.search(sql)
        if match is not None:
            return _table_event(SQLEventKind.TABLE_CREATED, match)
    return None


def detect_select_into(sql: str) -> Optional[TableEvent]:
    """Detect ``SELECT ... INTO [schema.]name`` and ``CREATE TABLE ... AS SELECT``."""
    match = _search_select_into(sql) or CREATE_TABLE_AS_SELECT_PATTERN.search(sql)
    if match is None:
        return None
    return _table_event(SQLEventKind.TABLE_CREATED, match)


def detect_insert(sql: str) -> Optional[TableEvent]:
    """Detect ``INSERT INTO [schema.]name``."""
    match = INSERT_PATTERN.search(sql)
    if match is None:
        return None
    return _table_event(SQLEventKind.TABLE_DATA_INSERTED, match)


def detect_copy(sql: str) -> Optional[TableEvent]:
    """Detect bulk loads with ``COPY [schema.]name FROM``.

    ``COPY ... TO`` exports data and is not reported.
    """
    match = COPY_FROM_PATTERN.search(sql)
    if match is None:
        return None
    return _table_event(SQLEventKind.TABLE_DATA_INSERTED, match)


def detect_enable_rls(sql: str) -> Optional[TableEvent]:
    """Detect ``ALTER TABLE [schema.]name ... ENABLE ROW LEVEL SECURITY`` (or ``ENABLE RLS``).

    Any clauses may sit between the table name and the ``ENABLE`` keyword.
    """
    alter = ALTER_TABLE_PATTERN.search(sql)
    if alter is None:
        return None
    # Later ALTER TABLE headers end further right, so only the first one can
    # be followed by an ENABLE clause that the others could not reach.
    for pattern in ENABLE_RLS_PATTERNS:
        if _last_match_start(pattern, sql) >= alter.end():
            return _table_event(SQLEventKind.TABLE_RLS_ENABLED, alter)
    return None


def detect_create_function(sql: str) -> Optional[ObjectEvent]:
    """Detect ``CREATE [OR REPLACE] FUNCTION [schema.]name``."""
    match = CREATE_FUNCTION_PATTERN.search(sql)
    if match is None:
        return None
    return _object_event(SQLEventKind.FUNCTION_CREATED, match)


def detect_create_trigger(sql: str) -> Optional[ObjectEvent]:
    """Detect ``CREATE [OR REPLACE] TRIGGER name``; trigger names carry no schema."""
    match = CREATE_TRIGGER_PATTERN.search(sql)
    if match is None:
        return None
    return _object_event(SQLEventKind.TRIGGER_CREATED, match)


def detect_create_view(sql: str) -> Optional[ObjectEvent]:
    """Detect ``CREATE [OR REPLACE] [MATERIALIZED] VIEW [schema.]name``."""
    match = CREATE_VIEW_PATTERN.search(sql)
    if match is None:
        return None
    return _object_event(SQLEventKind.VIEW_CREATED, match)


# Priority order; the first detector that matches a statement wins.
DETECTORS: "tuple[Detector, ...]" = (
    detect_create_table,
    detect_select_into,
    detect_insert,
    detect_copy,
    detect_enable_rls,
    detect_create_function,
    detect_create_trigger,
    detect_create_view,
)
