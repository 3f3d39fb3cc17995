"""Delimiter tables shared by the parser and the editing toolbar.

The order of a delimiter set is its precedence: the first entry is matched
over the whole string, each following entry only inside the interiors and
literal segments left by the one before it.
"""

import re
from dataclasses import dataclass, field

from post_markup.formatting.ir import TextStyle


@dataclass(frozen=True)
class Delimiter:
    """A fixed marker bounding one style region.

    Attributes:
        style: Style applied to the interior of a match
        token: Marker written before and after the interior
        min_length: Shortest accepted match, delimiters included
    """

    style: TextStyle
    token: str
    min_length: int
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # A closing token followed by a partial token keeps extending, so
        # "**x***" closes on its last two characters. A full token after
        # it opens the next region, as in "**a****b**".
        token = re.escape(self.token)
        char = re.escape(self.token[0])
        closing = ""
        if len(self.token) > 1:
            closing = f"(?!{char}{{1,{len(self.token) - 1}}}(?!{char}))"
        object.__setattr__(
            self, "pattern", re.compile(f"{token}(.+?){token}{closing}")
        )

    def accepts(self, match: re.Match) -> bool:
        """Check whether a pattern match is long enough to be styling."""
        interior = match.group(1)
        if len(match.group(0)) < self.min_length:
            return False
        return bool(interior.strip(self.token[0]))


@dataclass(frozen=True)
class DelimiterSet:
    """Ordered delimiters, outermost first."""

    name: str
    delimiters: tuple[Delimiter, ...]

    def for_style(self, style: TextStyle) -> Delimiter:
        """Get the delimiter that produces a single style."""
        for delimiter in self.delimiters:
            if delimiter.style == style:
                return delimiter
        raise ValueError(f"No delimiter for style: {style}")

    def token_for(self, style: TextStyle) -> str:
        return self.for_style(style).token

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(d.token for d in self.delimiters)


BOLD = Delimiter(TextStyle.BOLD, "**", 4)
ITALIC = Delimiter(TextStyle.ITALIC, "*", 2)

# Underline written the way the editing toolbar inserts it.
DEFAULT_DELIMITERS = DelimiterSet(
    name="double",
    delimiters=(BOLD, ITALIC, Delimiter(TextStyle.UNDERLINE, "__", 5)),
)

# Underline as the stored-content renderer originally matched it. Text
# underlined with "__x__" reads as "_x" underlined plus a stray "_" here,
# and a one-character selection wrapped as "_a_" is below the minimum.
LEGACY_DELIMITERS = DelimiterSet(
    name="single",
    delimiters=(BOLD, ITALIC, Delimiter(TextStyle.UNDERLINE, "_", 4)),
)

CONVENTIONS: dict[str, DelimiterSet] = {
    DEFAULT_DELIMITERS.name: DEFAULT_DELIMITERS,
    LEGACY_DELIMITERS.name: LEGACY_DELIMITERS,
}

SUPPORTED_CONVENTIONS = tuple(CONVENTIONS.keys())


def get_delimiters(convention: str) -> DelimiterSet:
    """Get the delimiter set for a convention name."""
    key = convention.lower()
    if key not in CONVENTIONS:
        raise ValueError(
            f"Unsupported markup convention: {convention}. "
            f"Supported conventions: {', '.join(SUPPORTED_CONVENTIONS)}"
        )
    return CONVENTIONS[key]
