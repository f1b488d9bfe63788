"""Range and membership validators that raise on invalid input."""

from typing import Any, Iterable, Optional

from datahandling.utils.exceptions import InvalidOptionError, ValueOutOfRangeError


def validate_in_range(
    number: Optional[float],
    minimum: float,
    maximum: float,
    name: str = "value"
) -> None:
    """
    Ensure a number lies within inclusive bounds.

    Raises:
        ValueOutOfRangeError: If number is None or outside [minimum, maximum]
    """
    if number is None or number < minimum or number > maximum:
        raise ValueOutOfRangeError(
            f'"{name}" is not in the range of {minimum}-{maximum}.',
            detail=f"got {number!r}"
        )


def _loosely_contains(options: Iterable[Any], value: Any) -> bool:
    # 5 and "5" are considered equal
    for option in options:
        if option is None:
            continue
        if option == value or str(option) == str(value):
            return True
    return False


def validate_in_array(value: Any, options: Iterable[Any], name: str = "value") -> None:
    """
    Ensure a value is one of the allowed options.

    Raises:
        InvalidOptionError: If value is None or not among the options
    """
    if value is None or not _loosely_contains(options, value):
        raise InvalidOptionError(f'"{value}" is not a valid value for "{name}".')
