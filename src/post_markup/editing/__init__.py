"""Editing helpers for the post composer toolbar."""

from post_markup.editing.inserter import (
    MarkupEditingInserter,
    SelectionError,
    SelectionRange,
    ToolbarAction,
    insert_or_wrap,
)

__all__ = [
    "MarkupEditingInserter",
    "SelectionError",
    "SelectionRange",
    "ToolbarAction",
    "insert_or_wrap",
]
