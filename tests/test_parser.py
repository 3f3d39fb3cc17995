"""Tests for the style markup parser."""

import dataclasses
import logging

import pytest

from post_markup.formatting import parse
from post_markup.formatting.delimiters import DEFAULT_DELIMITERS, LEGACY_DELIMITERS
from post_markup.formatting.ir import (
    StyledNode,
    StyledRun,
    TextLeaf,
    TextStyle,
    tree_plain_text,
    tree_source,
)
from post_markup.formatting.parser import StyleMarkupParser

B = TextStyle.BOLD
It = TextStyle.ITALIC
U = TextStyle.UNDERLINE
N = TextStyle.NONE


def pairs(runs: list[StyledRun]) -> list[tuple[str, TextStyle]]:
    return [(run.text, run.style) for run in runs]


class TestStyleMarkupParser:
    """Tests for the StyleMarkupParser class."""

    @pytest.fixture
    def parser(self) -> StyleMarkupParser:
        """Create a parser with the default delimiter set."""
        return StyleMarkupParser(DEFAULT_DELIMITERS)

    def test_empty_input(self, parser: StyleMarkupParser):
        assert parser.parse("") == []

    def test_plain_text(self, parser: StyleMarkupParser):
        """Test parsing text without markers."""
        assert pairs(parser.parse("hello")) == [("hello", N)]

    def test_bold(self, parser: StyleMarkupParser):
        assert pairs(parser.parse("**bold**")) == [("bold", B)]

    def test_empty_bold_stays_literal(self, parser: StyleMarkupParser):
        """Test that four asterisks are not styling at any layer."""
        assert pairs(parser.parse("****")) == [("****", N)]

    def test_italic(self, parser: StyleMarkupParser):
        assert pairs(parser.parse("*a*")) == [("a", It)]

    def test_bold_resolved_before_italic(self, parser: StyleMarkupParser):
        """Test that the bold match extends over trailing asterisks."""
        runs = parser.parse("**bo*ld***")

        assert pairs(runs) == [("bo", B), ("ld", B | It)]

    def test_bold_italic(self, parser: StyleMarkupParser):
        runs = parser.parse("This is ***important*** stuff")

        assert pairs(runs) == [
            ("This is ", N),
            ("important", B | It),
            (" stuff", N),
        ]

    def test_surrounding_text(self, parser: StyleMarkupParser):
        """Test bold text between plain text."""
        runs = parser.parse("This is **bold** text")

        assert runs[0].text == "This is "
        assert runs[0].bold is False
        assert runs[1].text == "bold"
        assert runs[1].bold is True
        assert runs[2].text == " text"
        assert runs[2].bold is False

    def test_underline(self, parser: StyleMarkupParser):
        assert pairs(parser.parse("__hi__")) == [("hi", U)]

    def test_underline_inside_italic(self, parser: StyleMarkupParser):
        assert pairs(parser.parse("*__hi__*")) == [("hi", It | U)]

    def test_underline_inside_bold_literal(self, parser: StyleMarkupParser):
        """Test that bold interiors outside italic still get underline."""
        runs = parser.parse("**a *b* __c__**")

        assert pairs(runs) == [
            ("a ", B),
            ("b", B | It),
            (" ", B),
            ("c", B | U),
        ]

    def test_mixed_post(self, parser: StyleMarkupParser, sample_post: str):
        runs = parser.parse(sample_post)

        assert pairs(runs) == [
            ("Shipping ", N),
            ("today", B),
            (": ", N),
            ("finally", It),
            (" got ", N),
            ("underline", U),
            (" working ", N),
            ("for ", B),
            ("real", B | It),
        ]

    def test_adjacent_italic_spans(self, parser: StyleMarkupParser):
        """Test that a full token right after a close opens a new span."""
        assert pairs(parser.parse("*a**b*")) == [("a", It), ("b", It)]

    def test_adjacent_bold_spans(self, parser: StyleMarkupParser):
        assert pairs(parser.parse("**a****b**")) == [("a", B), ("b", B)]

    def test_adjacent_underline_spans(self, parser: StyleMarkupParser):
        assert pairs(parser.parse("__a____b__")) == [("a", U), ("b", U)]

    def test_unterminated_markers_stay_literal(self, parser: StyleMarkupParser):
        assert pairs(parser.parse("**open")) == [("**open", N)]
        assert pairs(parser.parse("a * b")) == [("a * b", N)]

    def test_styling_does_not_cross_lines(self, parser: StyleMarkupParser):
        assert pairs(parser.parse("**a\nb**")) == [("**a\nb**", N)]

    def test_single_underscores_literal_by_default(self, parser: StyleMarkupParser):
        assert pairs(parser.parse("snake_case_name")) == [("snake_case_name", N)]
        assert pairs(parser.parse("_hi_")) == [("_hi_", N)]

    def test_parse_is_deterministic(
        self, parser: StyleMarkupParser, sample_post: str
    ):
        assert parser.parse(sample_post) == parser.parse(sample_post)

    def test_no_empty_runs(self, parser: StyleMarkupParser, edge_cases: list[str]):
        for content in edge_cases:
            assert all(run.text for run in parser.parse(content))

    def test_runs_are_immutable(self, parser: StyleMarkupParser):
        run = parser.parse("**x**")[0]

        with pytest.raises(dataclasses.FrozenInstanceError):
            run.text = "y"

    def test_rejected_match_logged(self, parser: StyleMarkupParser, caplog):
        caplog.set_level(logging.DEBUG, logger="post_markup")

        parser.parse("****")

        assert "Keeping '***' literal" in caplog.text


class TestLegacyConvention:
    """Tests for single-underscore underline matching."""

    @pytest.fixture
    def parser(self) -> StyleMarkupParser:
        return StyleMarkupParser(LEGACY_DELIMITERS)

    def test_single_underscore_underline(self, parser: StyleMarkupParser):
        assert pairs(parser.parse("_hi_")) == [("hi", U)]

    def test_short_underline_stays_literal(self, parser: StyleMarkupParser):
        """Test that _a_ is shorter than the underline minimum."""
        assert pairs(parser.parse("_a_")) == [("_a_", N)]

    def test_double_underscore_keeps_inner_markers(self, parser: StyleMarkupParser):
        """Test that the first single underscore pair closes the match."""
        assert pairs(parser.parse("__hi__")) == [("_hi", U), ("_", N)]


class TestMarkupTree:
    """Tests for the intermediate markup tree."""

    @pytest.fixture
    def parser(self) -> StyleMarkupParser:
        return StyleMarkupParser(DEFAULT_DELIMITERS)

    def test_tree_shape(self, parser: StyleMarkupParser):
        tree = parser.parse_tree("a **b *c***")

        assert tree == [
            TextLeaf("a "),
            StyledNode(
                style=B,
                delimiter="**",
                children=(
                    TextLeaf("b "),
                    StyledNode(style=It, delimiter="*", children=(TextLeaf("c"),)),
                ),
            ),
        ]

    def test_source_round_trip(self, parser: StyleMarkupParser, edge_cases, sample_post):
        for content in edge_cases + [sample_post]:
            assert tree_source(parser.parse_tree(content)) == content

    def test_runs_match_plain_text(self, parser: StyleMarkupParser, edge_cases):
        for content in edge_cases:
            tree = parser.parse_tree(content)
            runs = parser.flatten(tree)
            assert parser.to_plain_text(runs) == tree_plain_text(tree)

    def test_literal_input_round_trips_through_runs(self, parser: StyleMarkupParser):
        content = "nothing to see * here _"

        assert parser.to_plain_text(parser.parse(content)) == content


class TestToMarkup:
    """Tests for serializing runs back to markup."""

    @pytest.fixture
    def parser(self) -> StyleMarkupParser:
        return StyleMarkupParser(DEFAULT_DELIMITERS)

    def test_simple_styles(self, parser: StyleMarkupParser):
        content = "say **hi** *there* __now__"

        assert parser.to_markup(parser.parse(content)) == content

    def test_nested_styles_outermost_first(self, parser: StyleMarkupParser):
        runs = [StyledRun("x", B | It | U)]

        assert parser.to_markup(runs) == "***__x__***"
        assert pairs(parser.parse("***__x__***")) == [("x", B | It | U)]


class TestModuleParse:
    """Tests for the configured module-level parse."""

    def test_uses_default_convention(self):
        assert pairs(parse("__u__")) == [("u", U)]

    def test_uses_configured_convention(self, monkeypatch):
        monkeypatch.setenv("POST_MARKUP_CONVENTION", "single")

        assert pairs(parse("_u_ ")) == [("_u_ ", N)]
        assert pairs(parse("_uu_")) == [("uu", U)]
