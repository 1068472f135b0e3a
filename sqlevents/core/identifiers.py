"""Identifier extraction for matched SQL object references."""

import re
from typing import TYPE_CHECKING, NamedTuple, Optional

if TYPE_CHECKING:
    from re import Match

__all__ = ("IDENTIFIER", "QUALIFIED_NAME", "ExtractedIdentifiers", "clean_identifier", "extract_identifiers")

# ASCII word characters plus the identifier quote characters; quoted names are
# captured whole and cleaned afterwards. Case folding is switched off for the
# class so IGNORECASE cannot admit non-ASCII letters such as U+212A.
IDENTIFIER = r"(?-i:[A-Za-z0-9_\"`])+"

# Optional ``schema.`` prefix (separator included in the capture) followed by the name.
QUALIFIED_NAME = rf"(?P<schema>{IDENTIFIER}\.)?(?P<name>{IDENTIFIER})"

_QUOTE_CHARS_RE = re.compile(r"[\"`']")


class ExtractedIdentifiers(NamedTuple):
    schema: Optional[str]
    name: Optional[str]


def clean_identifier(identifier: Optional[str]) -> Optional[str]:
    """Normalize a raw identifier token into a bare name.

    Every ``"``, backtick and ``'`` character is removed, so doubled quotes
    inside a quoted identifier are dropped rather than collapsed. One trailing
    ``.`` is removed afterwards.

    Args:
        identifier: The captured token, possibly ``None`` or empty.

    Returns:
        The cleaned name, or ``None`` when there is nothing to clean.
    """
    if not identifier:
        return None
    cleaned = _QUOTE_CHARS_RE.sub("", identifier)
    if cleaned.endswith("."):
        cleaned = cleaned[:-1]
    return cleaned or None


def extract_identifiers(match: "Match[str]") -> ExtractedIdentifiers:
    """Extract cleaned ``schema`` and ``name`` captures from a detector match."""
    groups = match.groupdict()
    return ExtractedIdentifiers(clean_identifier(groups.get("schema")), clean_identifier(groups.get("name")))
