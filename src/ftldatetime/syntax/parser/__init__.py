"""Fluent FTL parser module.

Module Organization:
- core.py: FluentParserV1, which drives entry-level parsing and Junk recovery
- primitives.py: Basic parsers (identifiers, numbers, strings)
- rules.py: Grammar rules (patterns, placeables, calls, messages)

Public API:
    FluentParserV1: Main parser class
    ParseContext: Parse context for depth tracking (advanced usage)
"""

from ftldatetime.syntax.parser.core import FluentParserV1
from ftldatetime.syntax.parser.rules import ParseContext

__all__ = ["FluentParserV1", "ParseContext"]
