"""Position-preserving alphanumeric normalization and fuzzy locating."""

import string
from typing import FrozenSet, List, Optional, Sequence, Tuple

from datahandling.core.accents import ACCENT_TABLE
from datahandling.core.schemas import MatchSpan, RemovalMap
from datahandling.utils.logger import setup_logger

logger = setup_logger(__name__)

ALPHANUMERIC_CHARACTERS: FrozenSet[str] = frozenset(string.ascii_lowercase + string.digits)


class AlphanumericNormalizer:
    """
    Deterministic alphanumeric normalizer that remembers what it removed.

    Normalized text only contains lowercase ASCII letters and digits (plus any
    explicitly allowed characters). The removal map records every discarded
    run so a match in normalized text can be projected back onto the original.
    """

    @staticmethod
    def _fold(text: str) -> List[Tuple[str, int]]:
        """Accent-fold and lowercase `text`, pairing each output character with its source index."""
        folded = []
        for index, char in enumerate(text):
            for folded_char in ACCENT_TABLE.get(char, char).lower():
                folded.append((folded_char, index))
        return folded

    @staticmethod
    def normalize(text: str, extra_allowed_chars: str = "") -> Tuple[str, RemovalMap]:
        """
        Reduce text to lowercase alphanumerics and record the removed runs.

        Transformations:
        1. Accent folding through ACCENT_TABLE
        2. Lowercase
        3. Drop every character outside [a-z0-9] and `extra_allowed_chars`

        Each removal map entry is (position_in_result, removed_length): the
        number of original characters dropped right before the character now
        at position_in_result. A trailing entry at len(result) covers
        characters dropped after the last kept one.

        Args:
            text: Raw text to normalize
            extra_allowed_chars: Additional characters that survive normalization

        Returns:
            Tuple of (normalized text, removal map)
        """
        if not text:
            return "", []

        allowed = ALPHANUMERIC_CHARACTERS | frozenset(extra_allowed_chars)

        result: List[str] = []
        mapping: RemovalMap = []
        position_in_original = 0

        for char, index in AlphanumericNormalizer._fold(text):
            if char not in allowed:
                continue

            # Characters folded from an already consumed original character
            # (e.g. the second "s" of "ß") add no removal.
            if index >= position_in_original:
                removed_length = index - position_in_original
                if removed_length:
                    mapping.append((len(result), removed_length))
                position_in_original = index + 1

            result.append(char)

        remainder = len(text) - position_in_original
        if remainder:
            mapping.append((len(result), remainder))

        return "".join(result), mapping

    @staticmethod
    def locate(
        haystack: str,
        needle: str,
        expand_boundaries: bool = False
    ) -> Optional[MatchSpan]:
        """
        Find needle in haystack comparing only their normalized forms.

        The first normalized match is translated back to original coordinates
        by walking the haystack's removal map once:
        - runs before the match shift the offset
        - runs inside the match grow the length
        - with expand_boundaries, runs touching either edge grow the length

        Args:
            haystack: Original text to search in
            needle: Text to look for
            expand_boundaries: Include adjacent removed runs in the span

        Returns:
            MatchSpan in original coordinates, or None if there is no match
        """
        alpha_haystack, haystack_mapping = AlphanumericNormalizer.normalize(haystack)
        alpha_needle, _ = AlphanumericNormalizer.normalize(needle)

        match_pos = alpha_haystack.find(alpha_needle)
        if match_pos == -1:
            logger.debug(f"No match for needle prefix '{needle[:30]}'")
            return None

        match_end = match_pos + len(alpha_needle)
        offset = match_pos
        length = len(alpha_needle)

        for position, removed_length in haystack_mapping:
            if position <= match_pos:
                if expand_boundaries and position == match_pos:
                    length += removed_length
                else:
                    offset += removed_length
            elif position < match_end:
                length += removed_length
            elif expand_boundaries and position == match_end:
                length += removed_length
            else:
                break

        return MatchSpan(offset=offset, length=length)

    @staticmethod
    def starts_with(value: str, options: Sequence[str]) -> bool:
        """
        Check whether the normalized value starts with any normalized option.

        Args:
            value: Text to test
            options: Candidate prefixes

        Returns:
            True if any option matches
        """
        alpha_value, _ = AlphanumericNormalizer.normalize(value)
        for option in options:
            alpha_option, _ = AlphanumericNormalizer.normalize(option)
            if alpha_value.startswith(alpha_option):
                return True
        return False


# Module-level entry points
normalize_alphanumeric = AlphanumericNormalizer.normalize
locate = AlphanumericNormalizer.locate
starts_with_alphanumeric = AlphanumericNormalizer.starts_with
