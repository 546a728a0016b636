"""Ordinal formatter: 1 → "1st", 22 → "22nd", 113 → "113th"."""

from typing import Final

DEFAULT_SUFFIX: Final[str] = "th"

# Суффиксы по последней цифре (кроме 11..13)
LAST_DIGIT_SUFFIXES: Final[dict[int, str]] = {1: "st", 2: "nd", 3: "rd"}


def ordinal_suffix(n: int) -> str:
    """Суффикс по abs(n): 11..13 (mod 100) всегда "th"."""
    magnitude = abs(n)
    if 11 <= magnitude % 100 <= 13:
        return DEFAULT_SUFFIX
    return LAST_DIGIT_SUFFIXES.get(magnitude % 10, DEFAULT_SUFFIX)


def ordinal(n: int | None) -> str | None:
    """
    Порядковое числительное с сохранением знака.

    Examples:
        >>> ordinal(-3)
        '-3rd'
        >>> ordinal(0)
        '0th'
        >>> ordinal(None) is None
        True
    """
    if n is None:
        return None
    return f"{n}{ordinal_suffix(n)}"
