"""
Stateless text sanitizers.

Sanitizers coerce loosely formatted input into the shape a caller expects.
Input that cannot be coerced yields None (or an empty result) instead of
raising, so sanitizers can be chained without exception handling.
"""

import html
import re
from typing import Any, Iterable, List, Optional, Sequence

from datahandling.core.accents import fold_accents

DEFAULT_EXPLODE_CHARACTERS = ";>|/\\<"
DEFAULT_IMPLODE_SEPARATOR = " > "

LINE_BREAK_PATTERN = re.compile(r"\r\n|\n|\r")
# "<" only opens a tag when followed by a letter, "/", "!" or "?"
TAG_PATTERN = re.compile(r"<[a-zA-Z/!?][^>]*(?:>|$)")
URL_SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)
NUMBER_PREFIX_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
DIGIT_FILLER_PATTERN = re.compile(r"[ \-.]")
DIGIT_PREFIX_PATTERN = re.compile(r"^\d+")
SLUG_SEPARATOR_PATTERN = re.compile(r"[\s\-_]+")
SLUG_INVALID_PATTERN = re.compile(r"[^a-z0-9\-.]")

FORMATTING_TAG_NAMES = ("b", "strong", "i", "em", "br")
FORMATTING_MARKER = "\x00fmt\x00"
FORMATTING_TAG_PATTERN = re.compile(
    r"<(/?)(" + "|".join(FORMATTING_TAG_NAMES) + r")(\s*/?)>",
    re.IGNORECASE
)
PROTECTED_TAG_PATTERN = re.compile(
    re.escape(FORMATTING_MARKER) + r"(/?)(" + "|".join(FORMATTING_TAG_NAMES) + r")(\s*/?)"
    + re.escape(FORMATTING_MARKER)
)

FALSE_WORDS = frozenset(["false", "null", "0", "", "no", "nee", "niet", "none", "geen", "incorrect"])
TRUE_WORDS = frozenset(["true", "1", "yes", "ja", "wel", "correct"])


def sanitize_string(value: Optional[str]) -> Optional[str]:
    """
    Trim a string and remove HTML tags and line breaks.

    Args:
        value: Raw string

    Returns:
        Sanitized single-line string, or None when nothing is left
    """
    if not value:
        return None

    value = LINE_BREAK_PATTERN.sub(" ", value)
    value = html.unescape(value)
    value = TAG_PATTERN.sub("", value).strip()

    return value or None


def sanitize_text(value: Optional[str]) -> Optional[str]:
    """
    Same as sanitize_string() but keeps bold, italic and line break tags.

    Args:
        value: Raw text

    Returns:
        Sanitized text, or None when nothing is left
    """
    if not value:
        return None

    def protect(match: "re.Match[str]") -> str:
        slash, name, tail = match.groups()
        return f"{FORMATTING_MARKER}{slash}{name.lower()}{tail}{FORMATTING_MARKER}"

    value = sanitize_string(FORMATTING_TAG_PATTERN.sub(protect, value))
    if value is None:
        return None

    return PROTECTED_TAG_PATTERN.sub(r"<\1\2\3>", value)


def sanitize_url(value: Optional[str]) -> Optional[str]:
    """Prefix a url with http:// when it has no scheme, preventing local lookups."""
    if value is None:
        return None

    value = value.strip()
    if not value:
        return None

    if not URL_SCHEME_PATTERN.match(value):
        value = "http://" + value

    return sanitize_string(value)


def sanitize_number(value: Any) -> float:
    """Leading numeric part of a value as float, 0.0 when there is none."""
    if isinstance(value, (int, float)):
        return float(value)
    if value is None:
        return 0.0

    match = NUMBER_PREFIX_PATTERN.match(str(value).strip())
    return float(match.group(0)) if match else 0.0


def sanitize_digits(value: Any) -> Optional[int]:
    """
    Read an integer from a string that may contain separators.

    Spaces, dashes and dots are ignored; reading stops at the first other
    non-digit character.

    Returns:
        Parsed integer, or None when the value does not start with a digit
    """
    value = sanitize_string(None if value is None else str(value))
    if value is None:
        return None

    match = DIGIT_PREFIX_PATTERN.match(DIGIT_FILLER_PATTERN.sub("", value))
    return int(match.group(0)) if match else None


def sanitize_boolean(value: Any) -> bool:
    """Interpret common (English and Dutch) yes/no words as a boolean."""
    if isinstance(value, bool):
        return value

    text = "" if value is None else str(value).strip().lower()

    if text in FALSE_WORDS:
        return False
    if text in TRUE_WORDS:
        return True

    return bool(text)


def sanitize_url_part(part: Optional[str]) -> str:
    """
    SEO-ify a single url part.

    The result only contains lowercase alphanumerics, dashes and dots.
    """
    part = fold_accents(sanitize_string(part) or "")
    part = SLUG_SEPARATOR_PATTERN.sub("-", part).lower()
    part = SLUG_INVALID_PATTERN.sub("", part)
    return part.strip("-")


def sanitize_url_parts(parts: Sequence[Optional[str]]) -> str:
    """SEO-ify each url part and join them with slashes."""
    return "/".join(sanitize_url_part(part) for part in parts)


def explode(value: Optional[str], characters: str = DEFAULT_EXPLODE_CHARACTERS) -> List[str]:
    """
    Split a string on any of the given characters.

    Each element is sanitized and empty elements are dropped.

    Args:
        value: Delimited string
        characters: Every character in this string acts as a delimiter

    Returns:
        List of sanitized elements
    """
    value = sanitize_string(value)
    if value is None:
        return []

    if not characters:
        return [value]

    split_pattern = "[" + "".join(re.escape(char) for char in characters) + "]"

    elements = []
    for raw_element in re.split(split_pattern, value):
        element = sanitize_string(raw_element)
        if element is not None:
            elements.append(element)

    return elements


def implode(values: Optional[Iterable[Optional[str]]], separator: str = DEFAULT_IMPLODE_SEPARATOR) -> str:
    """Sanitize values, drop empty ones and join the rest with separator."""
    if values is None:
        return ""

    elements = []
    for raw_element in values:
        element = sanitize_string(raw_element)
        if element is not None:
            elements.append(element)

    return separator.join(elements)


def starts_with(value: str, options: Sequence[str]) -> bool:
    """Whether value literally starts with any of the options."""
    return any(value.startswith(option) for option in options)
