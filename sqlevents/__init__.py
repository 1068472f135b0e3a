"""sqlevents: telemetry event detection for SQL text."""

from collections.abc import Iterable
from typing import Union

from sqlevents import config, core, events, exceptions, utils
from sqlevents.__metadata__ import __version__
from sqlevents.config import ParserConfig
from sqlevents.core.parser import SQLEventParser
from sqlevents.events import (
    OBJECT_EVENT_KINDS,
    TABLE_EVENT_ACTIONS,
    TABLE_EVENT_KINDS,
    ObjectEvent,
    SQLEvent,
    SQLEventKind,
    TableEvent,
    event_name,
    is_table_event,
)
from sqlevents.exceptions import ImproperConfigurationError, MissingDependencyError, SQLEventsError

sql_event_parser = SQLEventParser()


def parse_sql_events(sql: str) -> list[SQLEvent]:
    """Parse SQL text with the shared parser. See :meth:`SQLEventParser.parse_sql_events`."""
    return sql_event_parser.parse_sql_events(sql)


def get_table_events(sql: str) -> list[TableEvent]:
    """Parse SQL text with the shared parser and keep only table events."""
    return sql_event_parser.get_table_events(sql)


def contains_event_kind(sql: str, kinds: Iterable[Union[SQLEventKind, str]]) -> bool:
    """Check SQL text with the shared parser for events of the given kinds."""
    return sql_event_parser.contains_event_kind(sql, kinds)


__all__ = (
    "OBJECT_EVENT_KINDS",
    "TABLE_EVENT_ACTIONS",
    "TABLE_EVENT_KINDS",
    "ImproperConfigurationError",
    "MissingDependencyError",
    "ObjectEvent",
    "ParserConfig",
    "SQLEvent",
    "SQLEventKind",
    "SQLEventParser",
    "SQLEventsError",
    "TableEvent",
    "__version__",
    "config",
    "contains_event_kind",
    "core",
    "event_name",
    "events",
    "exceptions",
    "get_table_events",
    "is_table_event",
    "parse_sql_events",
    "sql_event_parser",
    "utils",
)
