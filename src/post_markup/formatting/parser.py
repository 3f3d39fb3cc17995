"""Markup parser for converting stored post content to styled runs."""

import logging
from typing import Optional

from post_markup.config import get_settings
from post_markup.formatting.delimiters import DelimiterSet, get_delimiters
from post_markup.formatting.ir import (
    MarkupNode,
    StyledNode,
    StyledRun,
    TextLeaf,
    TextStyle,
)

logger = logging.getLogger(__name__)


class StyleMarkupParser:
    """Parse inline emphasis markers into structured IR.

    Each delimiter layer is resolved over the text left to it by the layer
    before: bold over the whole string, italic inside bold interiors and
    unmatched literal spans, underline inside italic interiors and what is
    still literal after that. Candidates too short to be styling stay in
    the text as literal characters.
    """

    def __init__(self, delimiters: Optional[DelimiterSet] = None) -> None:
        """Initialize the parser.

        Args:
            delimiters: Delimiter set to use (default: configured convention)
        """
        if delimiters is None:
            delimiters = get_delimiters(get_settings().convention)
        self.delimiters = delimiters

    def parse(self, content: str) -> list[StyledRun]:
        """Convert markup to an ordered list of styled runs.

        Args:
            content: Stored post content

        Returns:
            Runs in document order; empty input gives an empty list
        """
        return self.flatten(self.parse_tree(content))

    def parse_tree(self, content: str) -> list[MarkupNode]:
        """Build the nested markup tree for content."""
        return self._split(content, 0)

    def _split(self, text: str, depth: int) -> list[MarkupNode]:
        """Resolve one delimiter layer and recurse into the next."""
        if not text:
            return []
        if depth >= len(self.delimiters.delimiters):
            return [TextLeaf(text)]

        delimiter = self.delimiters.delimiters[depth]
        nodes: list[MarkupNode] = []
        pos = 0

        for match in delimiter.pattern.finditer(text):
            if not delimiter.accepts(match):
                # Left in place; it becomes part of the next literal span
                logger.debug(
                    "Keeping %r literal, too short for %s",
                    match.group(0),
                    delimiter.style.name,
                )
                continue

            nodes.extend(self._split(text[pos : match.start()], depth + 1))
            children = self._split(match.group(1), depth + 1)
            nodes.append(
                StyledNode(
                    style=delimiter.style,
                    delimiter=delimiter.token,
                    children=tuple(children),
                )
            )
            pos = match.end()

        nodes.extend(self._split(text[pos:], depth + 1))
        return nodes

    def flatten(
        self,
        nodes: list[MarkupNode],
        inherited: TextStyle = TextStyle.NONE,
    ) -> list[StyledRun]:
        """Flatten a markup tree, accumulating styles top-down."""
        runs: list[StyledRun] = []
        for node in nodes:
            if isinstance(node, TextLeaf):
                if node.text:
                    runs.append(StyledRun(text=node.text, style=inherited))
            else:
                runs.extend(self.flatten(list(node.children), inherited | node.style))
        return runs

    def to_plain_text(self, runs: list[StyledRun]) -> str:
        """Convert styled runs back to displayed text."""
        return "".join(run.text for run in runs)

    def to_markup(self, runs: list[StyledRun]) -> str:
        """Convert styled runs back to markup.

        Styles are nested outermost first, so a bold italic run is written
        as bold around italic. Inputs that relied on ambiguous pairings may
        not come back byte for byte.
        """
        parts: list[str] = []
        for run in runs:
            text = run.text
            for delimiter in reversed(self.delimiters.delimiters):
                if delimiter.style in run.style:
                    text = f"{delimiter.token}{text}{delimiter.token}"
            parts.append(text)
        return "".join(parts)


def parse(content: str) -> list[StyledRun]:
    """Parse content with the configured delimiter convention."""
    return StyleMarkupParser().parse(content)
