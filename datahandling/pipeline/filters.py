"""
Wildcard filter matching and byte size formatting.

Filters use "*" (any run of characters) and "?" (exactly one character) and
are matched against the alphanumeric normalization of a value, so
"Über*" matches "uber-cool" and "ubercool" alike.
"""

import re
from typing import Iterable, List

from datahandling.utils.text_normalizer import normalize_alphanumeric

WILDCARDS = "*?"

BYTE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")


def filter_to_pattern(filter_text: str) -> re.Pattern:
    """
    Translate a wildcard filter into a compiled regular expression.

    Args:
        filter_text: Filter using * and ? wildcards

    Returns:
        Pattern to full-match against normalized values
    """
    normalized, _ = normalize_alphanumeric(filter_text, extra_allowed_chars=WILDCARDS)

    translated = []
    for char in normalized:
        if char == "*":
            translated.append(".*")
        elif char == "?":
            translated.append(".")
        else:
            translated.append(re.escape(char))

    return re.compile("".join(translated))


def matches_filter(value: str, filter_text: str) -> bool:
    """Whether the normalized value fully matches the wildcard filter."""
    normalized, _ = normalize_alphanumeric(value)
    return filter_to_pattern(filter_text).fullmatch(normalized) is not None


def filter_values(values: Iterable[str], filter_text: str) -> List[str]:
    """Keep the values matching the wildcard filter, in their original order."""
    pattern = filter_to_pattern(filter_text)
    return [
        value for value in values
        if pattern.fullmatch(normalize_alphanumeric(value)[0]) is not None
    ]


def format_bytes(size: float, precision: int = 2) -> str:
    """
    Format a byte count with binary (1024) unit steps.

    Args:
        size: Number of bytes
        precision: Decimals shown for units above bytes

    Returns:
        Human readable size, e.g. "512 B" or "1.50 KB"
    """
    if size < 0:
        return "-" + format_bytes(-size, precision)

    value = float(size)
    unit_index = 0
    while value >= 1024 and unit_index < len(BYTE_UNITS) - 1:
        value /= 1024
        unit_index += 1

    if unit_index == 0:
        return f"{int(value)} B"

    return f"{value:.{precision}f} {BYTE_UNITS[unit_index]}"
