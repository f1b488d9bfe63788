"""Fixed Latin accent folding table."""

from types import MappingProxyType
from typing import Mapping


ACCENT_TABLE: Mapping[str, str] = MappingProxyType({
    "È": "e", "É": "e", "Ê": "e", "Ë": "e", "è": "e", "é": "e", "ê": "e", "ë": "e",
    "Ì": "i", "Í": "i", "Î": "i", "Ï": "i", "ì": "i", "í": "i", "î": "i", "ï": "i",
    "À": "a", "Á": "a", "Â": "a", "Ã": "a", "Ä": "a", "Å": "a", "Æ": "a",
    "à": "a", "á": "a", "â": "a", "ã": "a", "ä": "a", "å": "a", "æ": "a",
    "Ù": "u", "Ú": "u", "Û": "u", "Ü": "u", "ù": "u", "ú": "u", "û": "u",
    "ò": "o", "ó": "o", "ô": "o", "õ": "o", "ö": "o", "ø": "o", "ð": "o",
    "Ò": "o", "Ó": "o", "Ô": "o", "Õ": "o", "Ö": "o", "Ø": "o",
    "Ý": "y", "ý": "y", "ÿ": "y",
    "Ç": "c", "ç": "c",
    "Ñ": "n", "ñ": "n",
    "Š": "s", "š": "s",
    "Ž": "z", "ž": "z",
    "Þ": "b", "þ": "b",
    "Ð": "dj",
    "ß": "ss",
    "ƒ": "f",
})


def fold_accents(text: str) -> str:
    """Replace every character found in ACCENT_TABLE by its ASCII folding."""
    return "".join(ACCENT_TABLE.get(char, char) for char in text)
