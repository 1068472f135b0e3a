"""Core SQL event detection.

Architecture Overview:
- splitter.py: quote-aware statement splitter
- identifiers.py: identifier capture patterns and cleaning
- detectors.py: ordered pattern detectors, one per SQL construct
- parser.py: SQLEventParser tying splitter, detectors and deduplication together
"""

from sqlevents.core.detectors import (
    DETECTORS,
    detect_copy,
    detect_create_function,
    detect_create_table,
    detect_create_trigger,
    detect_create_view,
    detect_enable_rls,
    detect_insert,
    detect_select_into,
)
from sqlevents.core.identifiers import clean_identifier, extract_identifiers
from sqlevents.core.parser import SQLEventParser, deduplicate_events, detect_statement
from sqlevents.core.splitter import iter_statements, split_statements

__all__ = (
    "DETECTORS",
    "SQLEventParser",
    "clean_identifier",
    "deduplicate_events",
    "detect_copy",
    "detect_create_function",
    "detect_create_table",
    "detect_create_trigger",
    "detect_create_view",
    "detect_enable_rls",
    "detect_insert",
    "detect_select_into",
    "detect_statement",
    "extract_identifiers",
    "iter_statements",
    "split_statements",
)
