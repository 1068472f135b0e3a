"""SQL event parser.

Splits SQL text into statements, runs the detectors over each statement and
returns the deduplicated list of telemetry events. The parser keeps no state
between calls; the same input always yields the same events.
"""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Optional

from mypy_extensions import mypyc_attr

from sqlevents.config import ParserConfig
from sqlevents.core.detectors import DETECTORS
from sqlevents.core.splitter import split_statements
from sqlevents.events import SQLEvent, SQLEventKind, TableEvent, event_key, is_table_event
from sqlevents.utils.logging import get_logger, log_with_context
from sqlevents.utils.text import hash_sql, truncate_sql

if TYPE_CHECKING:
    from sqlevents.core.detectors import Detector

__all__ = ("SQLEventParser", "deduplicate_events", "detect_statement")

logger = get_logger("core.parser")


def detect_statement(statement: str, detectors: "Iterable[Detector]" = DETECTORS) -> Optional[SQLEvent]:
    """Run detectors over one statement in priority order.

    Args:
        statement: A single SQL statement.
        detectors: Ordered detectors to try.

    Returns:
        The event from the first matching detector, or ``None``.
    """
    for detector in detectors:
        event = detector(statement)
        if event is not None:
            return event
    return None


def deduplicate_events(events: "Iterable[SQLEvent]") -> list[SQLEvent]:
    """Drop repeated events, keeping the first occurrence of each key.

    Events are keyed on ``(kind, schema, name)`` with missing values treated
    as empty strings.

    Args:
        events: Events in statement order.

    Returns:
        Events in first-seen order with later duplicates removed.
    """
    seen: set[tuple[SQLEventKind, str, str]] = set()
    deduplicated: list[SQLEvent] = []
    for event in events:
        key = event_key(event)
        if key in seen:
            continue
        seen.add(key)
        deduplicated.append(event)
    return deduplicated


@mypyc_attr(allow_interpreted_subclasses=True)
class SQLEventParser:
    """Detects telemetry-relevant operations in SQL text.

    Example:
        >>> parser = SQLEventParser()
        >>> [event.kind.value for event in parser.parse_sql_events("CREATE TABLE users (id INT); INSERT INTO users VALUES (1);")]
        ['table_created', 'table_data_inserted']
    """

    __slots__ = ("_config",)

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        self._config = config.copy() if config is not None else ParserConfig()

    @property
    def config(self) -> ParserConfig:
        return self._config

    def parse_sql_events(self, sql: str) -> list[SQLEvent]:
        """Parse SQL text for telemetry-relevant operations.

        Malformed or unrecognized statements contribute no event.

        Args:
            sql: SQL text, possibly holding many statements.

        Raises:
            TypeError: If ``sql`` is not a string.

        Returns:
            Deduplicated events in statement order.
        """
        if not isinstance(sql, str):
            msg = f"Expected SQL text as str, got {type(sql).__name__}"
            raise TypeError(msg)

        statements = split_statements(sql)
        detected: list[SQLEvent] = []
        for statement in statements:
            event = detect_statement(statement)
            if event is None:
                continue
            detected.append(event)
            if self._config.log_statements:
                log_with_context(
                    logger,
                    logging.DEBUG,
                    "Detected SQL event",
                    event=event.to_dict(),
                    statement=truncate_sql(statement, self._config.sql_truncation_length),
                )

        events = deduplicate_events(detected)
        if logger.isEnabledFor(logging.DEBUG):
            self._log_summary(sql, len(statements), len(detected), len(events))
        return events

    def get_table_events(self, sql: str) -> list[TableEvent]:
        """Parse SQL text and keep only table events."""
        return [event for event in self.parse_sql_events(sql) if is_table_event(event)]

    def contains_event_kind(self, sql: str, kinds: "Iterable[SQLEventKind | str]") -> bool:
        """Check whether SQL text produces any event of the given kinds.

        Args:
            sql: SQL text to inspect.
            kinds: Event kinds, as enum members or their string values.

        Returns:
            True if at least one detected event has one of the kinds.
        """
        wanted = {SQLEventKind(kind) for kind in kinds}
        if not wanted:
            return False
        return any(event.kind in wanted for event in self.parse_sql_events(sql))

    def _log_summary(self, sql: str, statement_count: int, detected_count: int, event_count: int) -> None:
        fields: dict[str, object] = {
            "statement_count": statement_count,
            "detected_count": detected_count,
            "event_count": event_count,
            "sql": truncate_sql(sql, self._config.sql_truncation_length),
        }
        if self._config.include_sql_hash:
            fields["sql_hash"] = hash_sql(sql)
        log_with_context(logger, logging.DEBUG, "Parsed SQL events", **fields)
