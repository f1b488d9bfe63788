"""Tests for alphanumeric normalization and locating."""

import pytest

from datahandling.utils.text_normalizer import (
    ALPHANUMERIC_CHARACTERS,
    locate,
    normalize_alphanumeric,
    starts_with_alphanumeric
)


ASCII_SAMPLES = [
    " Asdf. aSD f-",
    "irrelevant-text.match-text,,irrelevant-text---match-text--",
    "Hello, World!",
    "__init__.py",
    "a",
    "...",
    "1 + 1 = 2",
    "AAaA._.ABa._Ab_._",
]


class TestNormalizeAlphanumeric:
    """Test normalize_alphanumeric()."""

    def test_removal_map_records_discarded_runs(self):
        """Test the removal map for leading, inner and trailing runs."""
        normalized, mapping = normalize_alphanumeric(" Asdf. aSD f-")

        assert normalized == "asdfasdf"
        assert mapping == [(0, 1), (4, 2), (7, 1), (8, 1)]

    def test_empty_input(self):
        """Test that empty input yields an empty result and map."""
        assert normalize_alphanumeric("") == ("", [])

    def test_clean_input_has_empty_map(self):
        """Test that already normalized text is untouched."""
        assert normalize_alphanumeric("abc123") == ("abc123", [])

    def test_fully_discarded_input(self):
        """Test that input without alphanumerics yields one trailing entry."""
        assert normalize_alphanumeric("---") == ("", [(0, 3)])

    def test_accents_are_folded(self):
        """Test accent folding including multi-character targets."""
        normalized, mapping = normalize_alphanumeric("ßÈÿžÐ")

        assert normalized == "sseyzdj"
        assert mapping == []

    def test_accented_words_keep_original_coordinates(self):
        """Test that removed lengths count original characters."""
        normalized, mapping = normalize_alphanumeric("Café au lait!")

        assert normalized == "cafeaulait"
        assert mapping == [(4, 1), (6, 1), (10, 1)]

    def test_extra_allowed_chars_survive(self):
        """Test that extra allowed characters are kept in place."""
        normalized, mapping = normalize_alphanumeric("*.txt?", extra_allowed_chars="*?")

        assert normalized == "*txt?"
        assert mapping == [(1, 1)]

    @pytest.mark.parametrize("text", ASCII_SAMPLES)
    def test_output_only_contains_alphanumerics(self, text):
        """Test that nothing outside [a-z0-9] survives."""
        normalized, _ = normalize_alphanumeric(text)
        assert set(normalized) <= ALPHANUMERIC_CHARACTERS

    @pytest.mark.parametrize("text", ASCII_SAMPLES)
    def test_removed_lengths_add_up_to_original(self, text):
        """Test that kept and removed lengths reconstruct the original length."""
        normalized, mapping = normalize_alphanumeric(text)
        assert len(normalized) + sum(length for _, length in mapping) == len(text)

    @pytest.mark.parametrize("text", ASCII_SAMPLES)
    def test_map_positions_are_ordered(self, text):
        """Test that map positions increase and never exceed the result length."""
        normalized, mapping = normalize_alphanumeric(text)
        positions = [position for position, _ in mapping]

        assert positions == sorted(set(positions))
        assert all(position <= len(normalized) for position in positions)
        assert all(length > 0 for _, length in mapping)


class TestLocate:
    """Test locate()."""

    HAYSTACK = "irrelevant-text.match-text,,irrelevant-text---match-text--"
    NEEDLE = "-mat---chtext--"

    def test_match_skips_filler_inside_and_before(self):
        """Test translation of a match surrounded by filler."""
        span = locate("AAaA._.ABa._Ab_._", "ABaa")
        assert span.as_tuple() == (7, 6)

    def test_first_match_without_expansion(self):
        """Test that the leftmost match excludes adjacent filler."""
        span = locate(self.HAYSTACK, self.NEEDLE)

        assert span.as_tuple() == (16, 10)
        assert span.extract(self.HAYSTACK) == "match-text"
        remainder = self.HAYSTACK[:span.offset] + self.HAYSTACK[span.end:]
        assert remainder == "irrelevant-text.,,irrelevant-text---match-text--"

    def test_first_match_with_expansion(self):
        """Test that expansion absorbs filler touching both edges."""
        span = locate(self.HAYSTACK, self.NEEDLE, expand_boundaries=True)

        assert span.as_tuple() == (15, 13)
        remainder = self.HAYSTACK[:span.offset] + self.HAYSTACK[span.end:]
        assert remainder == "irrelevant-textirrelevant-text---match-text--"

    def test_accented_haystack(self):
        """Test locating an ASCII needle in accented text."""
        haystack = "Le Café Noir"

        assert locate(haystack, "cafe").extract(haystack) == "Café"
        assert locate(haystack, "cafe", True).extract(haystack) == " Café "

    def test_no_match(self):
        """Test that a missing needle yields None."""
        assert locate(self.HAYSTACK, "missing") is None

    def test_empty_needle(self):
        """Test that an empty needle matches at the start with zero length."""
        assert locate("  abc", "").as_tuple() == (2, 0)
        assert locate("  abc", "", expand_boundaries=True).as_tuple() == (0, 2)

    def test_one_to_many_fold_shifts_later_spans(self):
        """Test that a 'ß' before the match moves the span one character right.

        The removal map only records dropped characters, so the extra
        normalized character from 'ß' -> "ss" is counted as original text.
        """
        haystack = "Straße Haus"
        span = locate(haystack, "haus")

        assert span.as_tuple() == (8, 4)
        assert span.extract(haystack) == "aus"

    @pytest.mark.parametrize("haystack,needle", [
        ("irrelevant-text.match-text,,irrelevant-text", "match text"),
        ("The  quick, brown fox!", "QUICK brown"),
        ("a-b-c-d-e", "b.c.d"),
        ("__init__.py", "init"),
    ])
    def test_span_normalizes_back_to_needle(self, haystack, needle):
        """Test that a non-expanded span holds exactly the needle's characters."""
        span = locate(haystack, needle)
        expanded = locate(haystack, needle, expand_boundaries=True)

        matched = span.extract(haystack)

        assert normalize_alphanumeric(matched)[0] == normalize_alphanumeric(needle)[0]
        assert matched[0].isalnum() and matched[-1].isalnum()
        assert expanded.offset <= span.offset
        assert expanded.end >= span.end


class TestStartsWithAlphanumeric:
    """Test starts_with_alphanumeric()."""

    def test_matches_ignoring_case_and_filler(self):
        """Test matching while ignoring spaces and case."""
        assert starts_with_alphanumeric(" So meString", ["s OmEs"]) is True

    def test_no_match(self):
        """Test a prefix that is not present."""
        assert starts_with_alphanumeric(" So meString", ["son"]) is False

    def test_any_option(self):
        """Test that any of several options may match."""
        assert starts_with_alphanumeric("Élan vital", ["foo", "elan"]) is True
