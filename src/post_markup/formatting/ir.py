"""Intermediate Representation for styled post content.

This module defines the data structures that sit between raw post markup
and whatever surface renders it. Parsing first builds a tree of markup
nodes, then flattens that tree into styled runs.
"""

from dataclasses import dataclass
from enum import Flag, auto
from typing import Union


class TextStyle(Flag):
    """Text styling flags (combinable with |)."""

    NONE = 0
    BOLD = auto()
    ITALIC = auto()
    UNDERLINE = auto()


@dataclass(frozen=True)
class StyledRun:
    """A contiguous run of text with consistent styling.

    Attributes:
        text: The text content
        style: Combined style flags (BOLD, ITALIC, UNDERLINE)
    """

    text: str
    style: TextStyle = TextStyle.NONE

    @property
    def bold(self) -> bool:
        """Check if this run is bold."""
        return TextStyle.BOLD in self.style

    @property
    def italic(self) -> bool:
        """Check if this run is italic."""
        return TextStyle.ITALIC in self.style

    @property
    def underline(self) -> bool:
        """Check if this run is underlined."""
        return TextStyle.UNDERLINE in self.style

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class TextLeaf:
    """Literal text, delimiters included when they were not consumed."""

    text: str

    @property
    def plain_text(self) -> str:
        return self.text

    @property
    def source(self) -> str:
        return self.text


@dataclass(frozen=True)
class StyledNode:
    """A matched style region.

    Attributes:
        style: The single style this region adds
        delimiter: The token that opened and closed the region
        children: Nodes making up the interior, in document order
    """

    style: TextStyle
    delimiter: str
    children: tuple["MarkupNode", ...] = ()

    @property
    def plain_text(self) -> str:
        """Interior text with every consumed delimiter removed."""
        return "".join(child.plain_text for child in self.children)

    @property
    def source(self) -> str:
        """The exact markup this node was parsed from."""
        inner = "".join(child.source for child in self.children)
        return f"{self.delimiter}{inner}{self.delimiter}"


MarkupNode = Union[TextLeaf, StyledNode]


def tree_source(nodes: list[MarkupNode]) -> str:
    """Rebuild the original markup from a parsed tree."""
    return "".join(node.source for node in nodes)


def tree_plain_text(nodes: list[MarkupNode]) -> str:
    """Get the displayed text of a parsed tree."""
    return "".join(node.plain_text for node in nodes)
