"""General utility functions."""

import hashlib

__all__ = ("camelize", "hash_sql", "truncate_sql")

_ELLIPSIS = "..."


def camelize(string: str) -> str:
    """Convert a string to camel case.

    Args:
        string (str): The string to convert.

    Returns:
        str: The converted string.
    """
    return "".join(word if index == 0 else word.capitalize() for index, word in enumerate(string.split("_")))


def truncate_sql(sql: str, max_length: int) -> str:
    """Truncate SQL text to a maximum length for log output.

    Args:
        sql: The SQL text to truncate.
        max_length: Maximum number of characters to keep, ellipsis included.

    Returns:
        The SQL unchanged when it fits, otherwise the cut text suffixed with ``...``.
    """
    if len(sql) <= max_length:
        return sql
    if max_length <= len(_ELLIPSIS):
        return _ELLIPSIS[:max_length]
    return sql[: max_length - len(_ELLIPSIS)] + _ELLIPSIS


def hash_sql(sql: str, length: int = 12) -> str:
    """Return a short, stable SHA-256 digest of SQL text."""
    return hashlib.sha256(sql.encode("utf-8")).hexdigest()[:length]
