"""Input patterns and parsers for raw console text.

Every parser here is pure: it never prints, never prompts, and never
raises on bad input. A rejected value is reported as ``None`` (or
``False`` for :func:`validate_identifier`) so callers can re-prompt.
"""

from __future__ import annotations

import re
from decimal import Decimal

INPUT_PATTERNS: dict[str, re.Pattern[str]] = {
    "integer": re.compile(r"[+-]?[0-9]+"),
    "decimal": re.compile(r"[0-9]+(\.[0-9]{1,2})?"),
    "identifier": re.compile(r"[A-Za-z0-9]+"),
}


def parse_integer(text: str) -> int | None:
    """Parse *text* as a base-10 integer, or return None.

    The whole string must be consumed: no surrounding whitespace, no
    digit separators, no trailing garbage. A single leading sign is allowed.
    """
    if INPUT_PATTERNS["integer"].fullmatch(text) is None:
        return None
    return int(text)


def parse_menu_choice(text: str, minimum: int, maximum: int) -> int | None:
    """Parse a menu selection within ``[minimum, maximum]``, or return None.

    Examples:
        >>> parse_menu_choice("3", 1, 5)
        3
        >>> parse_menu_choice(" 3", 1, 5) is None
        True
        >>> parse_menu_choice("6", 1, 5) is None
        True
    """
    if " " in text:
        return None
    value = parse_integer(text)
    if value is None or not minimum <= value <= maximum:
        return None
    return value


def parse_decimal(text: str) -> Decimal | None:
    """Parse an unsigned amount with at most two fractional digits.

    ``"12"``, ``"12.5"`` and ``"12.50"`` are accepted; ``"12."``, ``".5"``,
    ``"-1"``, ``"1e3"`` and ``"12.345"`` are not.
    """
    if INPUT_PATTERNS["decimal"].fullmatch(text) is None:
        return None
    return Decimal(text)


def validate_identifier(text: str) -> bool:
    """Check that *text* is a non-empty run of ASCII letters and digits."""
    if not text or any(ch.isspace() for ch in text):
        return False
    return INPUT_PATTERNS["identifier"].fullmatch(text) is not None
