"""Quote-aware SQL statement splitter.

Splits a SQL script on ``;`` terminators that sit outside single or double
quoted literals. Doubled delimiters (``''`` / ``""``) inside a literal are kept
as escaped quotes. Comments and dollar-quoted bodies get no special treatment.
"""

from collections.abc import Iterator

from sqlevents.utils.logging import get_logger

__all__ = ("QUOTE_CHARS", "STATEMENT_TERMINATOR", "iter_statements", "split_statements")

logger = get_logger("core.splitter")

QUOTE_CHARS = frozenset({"'", '"'})
STATEMENT_TERMINATOR = ";"


def iter_statements(sql: str) -> Iterator[str]:
    """Yield trimmed, non-empty statements from a SQL script.

    Args:
        sql: SQL text containing zero or more statements.

    Yields:
        Each statement with surrounding whitespace removed, in input order.
    """
    current: list[str] = []
    in_string = False
    delimiter = ""
    index = 0
    length = len(sql)

    while index < length:
        char = sql[index]

        if char in QUOTE_CHARS:
            if not in_string:
                in_string = True
                delimiter = char
            elif char == delimiter:
                if index + 1 < length and sql[index + 1] == char:
                    current.append(char * 2)
                    index += 2
                    continue
                in_string = False
                delimiter = ""
            current.append(char)
        elif char == STATEMENT_TERMINATOR and not in_string:
            statement = "".join(current).strip()
            if statement:
                yield statement
            current = []
        else:
            current.append(char)
        index += 1

    statement = "".join(current).strip()
    if statement:
        yield statement


def split_statements(sql: str) -> list[str]:
    """Split a SQL script into individual statements.

    Args:
        sql: SQL text containing zero or more statements.

    Returns:
        Ordered list of trimmed, non-empty statements.
    """
    statements = list(iter_statements(sql))
    logger.debug("Split SQL script into %d statement(s)", len(statements))
    return statements
