"""
Culture-aware number parsing for command values.
"""
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Dict

from ..core.errors import FormatError


@dataclass(frozen=True)
class Culture:
    """Numeric conventions used when parsing command values."""
    name: str
    decimal_separator: str = "."
    group_separator: str = ","

    @classmethod
    def get(cls, name: str) -> "Culture":
        """Look up a known culture by name (case-insensitive)."""
        try:
            return _CULTURES[name.strip().lower()]
        except KeyError:
            raise KeyError(f"Unknown culture: {name!r}") from None


INVARIANT = Culture("")

_CULTURES: Dict[str, Culture] = {
    culture.name.lower(): culture
    for culture in (
        INVARIANT,
        Culture("en-US"),
        Culture("en-GB"),
        Culture("ja-JP"),
        Culture("de-DE", ",", "."),
        Culture("es-ES", ",", "."),
        Culture("it-IT", ",", "."),
        Culture("nl-NL", ",", "."),
        Culture("pt-BR", ",", "."),
        Culture("fr-FR", ",", " "),
        Culture("ru-RU", ",", " "),
        Culture("de-CH", ".", "’"),
    )
}


def _number_pattern(culture: Culture) -> "re.Pattern[str]":
    decimal = re.escape(culture.decimal_separator)
    group = re.escape(culture.group_separator)
    return re.compile(
        rf"^[+-]?(?:(?:\d{{1,3}}(?:{group}\d{{3}})+|\d+)(?:{decimal}\d*)?|{decimal}\d+)"
        r"(?:[eE][+-]?\d+)?$",
        re.ASCII,
    )


_PATTERNS: Dict[Culture, "re.Pattern[str]"] = {}


def parse_decimal(value: str, culture: Culture = INVARIANT) -> Decimal:
    """
    Parse value using the culture's separators.

    Raises:
        FormatError: If value is not a plain finite number
    """
    text = value.strip()
    pattern = _PATTERNS.get(culture)
    if pattern is None:
        pattern = _PATTERNS.setdefault(culture, _number_pattern(culture))

    if not pattern.match(text):
        raise FormatError(value, "number")

    text = text.replace(culture.group_separator, "")
    text = text.replace(culture.decimal_separator, ".")
    try:
        return Decimal(text)
    except InvalidOperation:
        raise FormatError(value, "number") from None
