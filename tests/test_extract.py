"""
Extraction tests - line ranges and anchored blocks

Tests clamping, inverted ranges, newline handling and the anchor state
machine (nested markers, missing markers).
"""

import pytest

from webinclude.lib.extract import anchor_extract, lines_split, range_extract
from webinclude.models.directives import Bounded, From, Full, To


SOURCE = "one\ntwo\nthree\nfour\nfive\n"


class TestLinesSplit:
    """Test newline splitting"""

    def test_empty_text(self):
        """Empty text yields nothing"""
        assert lines_split("") == []

    def test_trailing_newline_adds_no_line(self):
        """Trailing newline adds no empty line"""
        assert lines_split("a\nb\n") == ["a", "b"]

    def test_no_trailing_newline(self):
        """Last line without newline is kept"""
        assert lines_split("a\nb") == ["a", "b"]

    def test_blank_lines_kept(self):
        """Blank lines in the middle and end are kept"""
        assert lines_split("a\n\nb\n\n") == ["a", "", "b", ""]

    def test_crlf_endings(self):
        """CRLF endings lose their carriage return"""
        assert lines_split("a\r\nb\r\n") == ["a", "b"]


class TestRangeExtract:
    """Test range_extract() for every LineRange variant"""

    def test_full_returns_text(self):
        """Full range returns the text minus the trailing newline"""
        assert range_extract(SOURCE, Full()) == SOURCE.rstrip("\n")

    def test_full_without_trailing_newline_is_identity(self):
        """Full range of text without trailing newline is identity"""
        text = "alpha\nbeta"
        assert range_extract(text, Full()) == text

    def test_single_line(self):
        """Bounded range of length one selects one line"""
        assert range_extract(SOURCE, Bounded(4, 5)) == "five"

    def test_bounded(self):
        """Bounded range has exclusive end"""
        assert range_extract(SOURCE, Bounded(1, 4)) == "two\nthree\nfour"

    def test_from(self):
        """From range runs to end of text"""
        assert range_extract(SOURCE, From(3)) == "four\nfive"

    def test_to(self):
        """To range starts at the first line"""
        assert range_extract(SOURCE, To(2)) == "one\ntwo"

    @pytest.mark.parametrize("start,end", [(3, 3), (4, 1), (10, 2)])
    def test_inverted_or_empty_bounded_yields_empty(self, start, end):
        """Inverted or empty bounded range yields an empty string"""
        assert range_extract(SOURCE, Bounded(start, end)) == ""

    def test_end_past_eof_is_clamped(self):
        """End past the last line is clamped"""
        assert range_extract(SOURCE, Bounded(3, 100)) == "four\nfive"

    def test_start_past_eof_yields_empty(self):
        """Start past the last line yields an empty string"""
        assert range_extract(SOURCE, From(42)) == ""
        assert range_extract(SOURCE, Bounded(42, 50)) == ""

    def test_empty_text(self):
        """Empty text yields nothing"""
        assert range_extract("", Full()) == ""
        assert range_extract("", Bounded(0, 1)) == ""


class TestAnchorExtract:
    """Test anchor_extract() state machine"""

    def test_simple_block(self):
        """Lines between the markers are returned"""
        text = "x\nANCHOR: foo\nA\nB\nANCHOR_END: foo\ny"
        assert anchor_extract(text, "foo") == "A\nB"

    def test_markers_inside_comments(self):
        """Markers are found anywhere in the line"""
        text = (
            "fn main() {\n"
            "    // ANCHOR: body\n"
            "    println!(\"hi\");\n"
            "    // ANCHOR_END: body\n"
            "}\n"
        )
        assert anchor_extract(text, "body") == '    println!("hi");'

    def test_missing_anchor_yields_empty(self):
        """Unknown anchor yields an empty string"""
        text = "ANCHOR: foo\nA\nANCHOR_END: foo\n"
        assert anchor_extract(text, "bar") == ""

    def test_missing_end_collects_to_eof(self):
        """Missing end marker collects to end of text"""
        text = "ANCHOR: foo\nA\nB\n"
        assert anchor_extract(text, "foo") == "A\nB"

    def test_nested_open_markers_skipped(self):
        """Open markers of any anchor inside the block are not collected"""
        text = (
            "ANCHOR: outer\n"
            "a\n"
            "ANCHOR: inner\n"
            "b\n"
            "ANCHOR_END: inner\n"
            "c\n"
            "ANCHOR_END: outer\n"
        )
        assert anchor_extract(text, "outer") == "a\nb\nANCHOR_END: inner\nc"

    def test_inner_anchor_alone(self):
        """Inner anchor can be selected on its own"""
        text = (
            "ANCHOR: outer\n"
            "a\n"
            "ANCHOR: inner\n"
            "b\n"
            "ANCHOR_END: inner\n"
            "c\n"
            "ANCHOR_END: outer\n"
        )
        assert anchor_extract(text, "inner") == "b"

    def test_stops_at_first_matching_end(self):
        """Collection stops at the first matching end marker"""
        text = "ANCHOR: foo\nA\nANCHOR_END: foo\nB\nANCHOR: foo\nC\nANCHOR_END: foo\n"
        assert anchor_extract(text, "foo") == "A"

    def test_name_must_match_exactly(self):
        """Anchor names must match exactly, not by prefix"""
        text = "ANCHOR: foobar\nX\nANCHOR_END: foobar\nANCHOR: foo\nY\nANCHOR_END: foo\n"
        assert anchor_extract(text, "foo") == "Y"

    def test_hyphenated_names(self):
        """Hyphenated anchor names are recognized"""
        text = "ANCHOR: my-block\nZ\nANCHOR_END: my-block\n"
        assert anchor_extract(text, "my-block") == "Z"

    def test_empty_block(self):
        """Adjacent markers yield an empty string"""
        assert anchor_extract("ANCHOR: foo\nANCHOR_END: foo\n", "foo") == ""
