"""
Tests for listing_scraper.text — whitespace normalization and dedup.
"""

from listing_scraper.text import clean, uniq


class TestClean:
    def test_none_is_empty(self):
        assert clean(None) == ""

    def test_collapses_internal_whitespace(self):
        assert clean("  The   Maple\n\tResidences  ") == "The Maple Residences"

    def test_no_double_spaces_or_outer_whitespace(self):
        samples = ["  a  b\r\n c ", "\n\n", "x", "  $1,450 -   $1,600 "]
        for s in samples:
            out = clean(s)
            assert "  " not in out
            assert out == out.strip()

    def test_whitespace_only_is_empty(self):
        assert clean(" \n\t ") == ""


class TestUniq:
    def test_first_seen_order(self):
        assert uniq(["A", "B", "A", "C"]) == ["A", "B", "C"]

    def test_drops_empty_strings(self):
        assert uniq(["", "Pool", "", "Pool", "Gym"]) == ["Pool", "Gym"]

    def test_empty_input(self):
        assert uniq([]) == []
