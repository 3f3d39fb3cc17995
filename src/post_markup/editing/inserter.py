"""Toolbar-side insertion of markup tokens into an edited post."""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from post_markup.config import get_settings
from post_markup.formatting.delimiters import DelimiterSet, get_delimiters
from post_markup.formatting.ir import TextStyle

logger = logging.getLogger(__name__)


class SelectionError(ValueError):
    """Selection offsets fall outside the edited text."""

    pass


class ToolbarAction(Enum):
    """Formatting buttons offered by the editor toolbar."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"

    @property
    def style(self) -> TextStyle:
        return TextStyle[self.name]


@dataclass(frozen=True)
class SelectionRange:
    """Selection reported by the text input, as character offsets.

    Attributes:
        start: Offset of the first selected character
        end: Offset just past the last selected character
    """

    start: int
    end: int

    @property
    def is_caret(self) -> bool:
        """Check if nothing is selected."""
        return self.start == self.end

    def validate(self, text: str) -> "SelectionRange":
        """Check the range against text and return it unchanged."""
        if not 0 <= self.start <= self.end <= len(text):
            raise SelectionError(
                f"Selection ({self.start}, {self.end}) out of range "
                f"for text of length {len(text)}"
            )
        return self


# Stripped before counting visible characters, longest markers first
STRIP_PATTERNS = (
    re.compile(r"\*\*(.+?)\*\*"),
    re.compile(r"__(.+?)__"),
    re.compile(r"\*(.+?)\*"),
    re.compile(r"_(.+?)_"),
)
BARE_RUN_PATTERN = re.compile(r"[*_]{2,}")


class MarkupEditingInserter:
    """Insert or wrap markup tokens around the current selection."""

    def __init__(
        self,
        delimiters: Optional[DelimiterSet] = None,
        max_post_length: Optional[int] = None,
    ) -> None:
        """Initialize the inserter.

        Args:
            delimiters: Delimiter set for toolbar tokens (default: configured)
            max_post_length: Visible character budget (default: configured)
        """
        settings = get_settings()
        if delimiters is None:
            delimiters = get_delimiters(settings.convention)
        self.delimiters = delimiters
        if max_post_length is None:
            max_post_length = settings.max_post_length
        self.max_post_length = max_post_length

    def insert_or_wrap(self, text: str, start: int, end: int, token: str) -> str:
        """Insert a token pair at a caret or wrap the selected text.

        No balancing is attempted; toggling twice adds a second pair.

        Args:
            text: Current editable text
            start: Selection start offset
            end: Selection end offset
            token: Marker to insert

        Returns:
            The replacement text
        """
        SelectionRange(start, end).validate(text)

        if start == end:
            result = text[:start] + token + token + text[start:]
        else:
            result = text[:start] + token + text[start:end] + token + text[end:]

        logger.debug("Applied %r at (%d, %d)", token, start, end)
        return result

    def apply(
        self,
        text: str,
        selection: SelectionRange,
        action: ToolbarAction,
    ) -> str:
        """Apply a toolbar action using the active delimiter set."""
        token = self.delimiters.token_for(action.style)
        return self.insert_or_wrap(text, selection.start, selection.end, token)

    def caret_after(self, selection: SelectionRange, token: str) -> int:
        """Offset where the caret lands after inserting a token.

        A caret insert puts the caret between the two tokens; a wrap puts
        it after the closing token.
        """
        if selection.is_caret:
            return selection.start + len(token)
        return selection.end + 2 * len(token)

    def visible_length(self, text: str) -> int:
        """Approximate the number of characters a reader will see."""
        for pattern in STRIP_PATTERNS:
            text = pattern.sub(r"\1", text)
        text = BARE_RUN_PATTERN.sub("", text)
        return len(text)

    def remaining_characters(self, text: str) -> int:
        """Characters left in the post budget; negative when over."""
        return self.max_post_length - self.visible_length(text)


def insert_or_wrap(text: str, start: int, end: int, token: str) -> str:
    """Insert or wrap a token with the configured inserter."""
    return MarkupEditingInserter().insert_or_wrap(text, start, end, token)
