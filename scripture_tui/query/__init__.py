"""Reference parsing and verse matching for scripture-tui."""

from scripture_tui.query.types import (
    Exact,
    ExactSet,
    PatternError,
    Query,
    QueryError,
    Range,
    RangeExt,
    ReferenceSyntaxError,
    Search,
)
from scripture_tui.query.parser import parse_reference
from scripture_tui.query.matcher import find_matches, matches, next_match

__all__ = [
    "Exact",
    "ExactSet",
    "PatternError",
    "Query",
    "QueryError",
    "Range",
    "RangeExt",
    "ReferenceSyntaxError",
    "Search",
    "parse_reference",
    "find_matches",
    "matches",
    "next_match",
]
