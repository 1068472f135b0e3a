"""Telemetry event types produced by the SQL event parser.

Two event families share a ``kind`` discriminant:

- ``TableEvent`` for table creation, data insertion and row level security changes.
- ``ObjectEvent`` for function, trigger and view creation.

Consumers branch on the kind through :func:`is_table_event` instead of probing
for ``table_name`` / ``object_name`` attributes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from typing_extensions import TypeAlias, TypeGuard

from sqlevents.utils.text import camelize

__all__ = (
    "OBJECT_EVENT_KINDS",
    "TABLE_EVENT_ACTIONS",
    "TABLE_EVENT_KINDS",
    "ObjectEvent",
    "SQLEvent",
    "SQLEventKind",
    "TableEvent",
    "event_key",
    "event_name",
    "is_table_event",
)


class SQLEventKind(str, Enum):
    """Kinds of telemetry events detected in SQL text."""

    TABLE_CREATED = "table_created"
    TABLE_DATA_INSERTED = "table_data_inserted"
    TABLE_RLS_ENABLED = "table_rls_enabled"
    FUNCTION_CREATED = "function_created"
    TRIGGER_CREATED = "trigger_created"
    VIEW_CREATED = "view_created"

    def __str__(self) -> str:
        return self.value


TABLE_EVENT_KINDS: frozenset[SQLEventKind] = frozenset({
    SQLEventKind.TABLE_CREATED,
    SQLEventKind.TABLE_DATA_INSERTED,
    SQLEventKind.TABLE_RLS_ENABLED,
})
OBJECT_EVENT_KINDS: frozenset[SQLEventKind] = frozenset({
    SQLEventKind.FUNCTION_CREATED,
    SQLEventKind.TRIGGER_CREATED,
    SQLEventKind.VIEW_CREATED,
})

# Analytics action names keyed the way the telemetry constants are published.
TABLE_EVENT_ACTIONS: "dict[str, SQLEventKind]" = {kind.name: kind for kind in SQLEventKind}


def _payload(kind: SQLEventKind, schema: Optional[str], name_field: str, name: Optional[str]) -> "dict[str, Any]":
    payload: dict[str, Any] = {"type": kind.value}
    if schema is not None:
        payload["schema"] = schema
    if name is not None:
        payload[camelize(name_field)] = name
    return payload


@dataclass(frozen=True, slots=True)
class TableEvent:
    """A table-level event (creation, data insertion, RLS enablement)."""

    kind: SQLEventKind
    schema: Optional[str] = None
    table_name: Optional[str] = None

    def __post_init__(self) -> None:
        kind = SQLEventKind(self.kind)
        if kind not in TABLE_EVENT_KINDS:
            msg = f"{kind.value!r} is not a table event kind"
            raise ValueError(msg)
        object.__setattr__(self, "kind", kind)

    @property
    def name(self) -> Optional[str]:
        return self.table_name

    def to_dict(self) -> "dict[str, Any]":
        """Render the analytics payload for this event.

        Returns:
            Mapping with ``type``, ``schema`` and ``tableName`` keys, absent values omitted.
        """
        return _payload(self.kind, self.schema, "table_name", self.table_name)


@dataclass(frozen=True, slots=True)
class ObjectEvent:
    """A non-table object event (function, trigger or view creation)."""

    kind: SQLEventKind
    schema: Optional[str] = None
    object_name: Optional[str] = None

    def __post_init__(self) -> None:
        kind = SQLEventKind(self.kind)
        if kind not in OBJECT_EVENT_KINDS:
            msg = f"{kind.value!r} is not an object event kind"
            raise ValueError(msg)
        object.__setattr__(self, "kind", kind)

    @property
    def name(self) -> Optional[str]:
        return self.object_name

    def to_dict(self) -> "dict[str, Any]":
        """Render the analytics payload for this event.

        Returns:
            Mapping with ``type``, ``schema`` and ``objectName`` keys, absent values omitted.
        """
        return _payload(self.kind, self.schema, "object_name", self.object_name)


SQLEvent: TypeAlias = Union[TableEvent, ObjectEvent]


def is_table_event(event: SQLEvent) -> TypeGuard[TableEvent]:
    """Check whether an event belongs to the table family.

    The decision is made on the ``kind`` tag alone; both event classes reject
    kinds of the other family at construction.
    """
    return event.kind in TABLE_EVENT_KINDS


def event_name(event: SQLEvent) -> Optional[str]:
    """Return the table name of a table event or the object name of an object event."""
    if is_table_event(event):
        return event.table_name
    return event.object_name  # type: ignore[union-attr]


def event_key(event: SQLEvent) -> "tuple[SQLEventKind, str, str]":
    """Build the deduplication key ``(kind, schema or "", name or "")``."""
    return (event.kind, event.schema or "", event_name(event) or "")
