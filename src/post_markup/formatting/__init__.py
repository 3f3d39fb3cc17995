"""Formatting utilities for parsing and rendering post markup."""

from post_markup.formatting.ir import (
    TextStyle,
    StyledRun,
    TextLeaf,
    StyledNode,
    MarkupNode,
)
from post_markup.formatting.delimiters import (
    Delimiter,
    DelimiterSet,
    DEFAULT_DELIMITERS,
    LEGACY_DELIMITERS,
    get_delimiters,
)
from post_markup.formatting.parser import StyleMarkupParser, parse

__all__ = [
    "TextStyle",
    "StyledRun",
    "TextLeaf",
    "StyledNode",
    "MarkupNode",
    "Delimiter",
    "DelimiterSet",
    "DEFAULT_DELIMITERS",
    "LEGACY_DELIMITERS",
    "get_delimiters",
    "StyleMarkupParser",
    "parse",
]
