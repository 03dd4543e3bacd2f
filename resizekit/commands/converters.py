"""
Command converters and the registry that selects them by value type.
Follows Strategy Pattern: one stateless converter per semantic type.
"""
import logging
import math
import re
import threading
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum, Flag
from functools import lru_cache, reduce
from typing import Any, Dict, Optional, Tuple, Type

from PIL import ImageColor

from ..core.errors import FormatError, UnsupportedTypeError
from ..core.interfaces import ICommandConverter
from .culture import Culture, parse_decimal

logger = logging.getLogger(__name__)

LIST_DELIMITER = ","


class ValueType(Enum):
    """Semantic types a command value can be converted to."""
    UINT = "uint"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    FLOAT_ARRAY = "float[]"
    INT_ARRAY = "int[]"
    ENUM = "enum"
    COLOR = "color"


class IntegralNumberConverter(ICommandConverter):
    """
    Parses whole numbers.

    Fractional input is rounded to the nearest integer with midpoints rounded
    away from zero. Values outside the range of the integer width fail.
    Unsigned converters reject any negative input, including values such as
    "-0.4" that would round to zero.
    """

    def __init__(self, value_type: ValueType = ValueType.UINT, signed: bool = False, bits: int = 32):
        self.value_type = value_type
        self.signed = signed
        if signed:
            self.minimum = -(1 << (bits - 1))
            self.maximum = (1 << (bits - 1)) - 1
        else:
            self.minimum = 0
            self.maximum = (1 << bits) - 1

    def convert(self, value: str, culture: Culture, target: Any = None) -> int:
        number = parse_decimal(value, culture)
        if not self.signed and number < 0:
            raise FormatError(value, "unsigned integer")

        if not self.minimum - 1 < number < self.maximum + 1:
            raise FormatError(value, f"integer in [{self.minimum}, {self.maximum}]")

        rounded = int(number.quantize(Decimal(1), rounding=ROUND_HALF_UP))
        if not self.minimum <= rounded <= self.maximum:
            raise FormatError(value, f"integer in [{self.minimum}, {self.maximum}]")
        return rounded


class FloatConverter(ICommandConverter):
    """Parses a single floating point number."""

    value_type = ValueType.FLOAT

    def convert(self, value: str, culture: Culture, target: Any = None) -> float:
        number = float(parse_decimal(value, culture))
        if not math.isfinite(number):
            raise FormatError(value, "finite number")
        return number


class BoolConverter(ICommandConverter):
    """Parses 'true' or 'false' in any letter case."""

    value_type = ValueType.BOOL

    _VALUES = {"true": True, "false": False}

    def convert(self, value: str, culture: Culture, target: Any = None) -> bool:
        try:
            return self._VALUES[value.strip().lower()]
        except KeyError:
            raise FormatError(value, "boolean") from None


class ArrayConverter(ICommandConverter):
    """Splits a comma separated value and converts each element."""

    def __init__(self, value_type: ValueType, element: ICommandConverter):
        self.value_type = value_type
        self.element = element

    def convert(self, value: str, culture: Culture, target: Any = None) -> Tuple[Any, ...]:
        if not value.strip():
            return ()
        return tuple(
            self.element.convert(part.strip(), culture, target)
            for part in value.split(LIST_DELIMITER)
        )


@lru_cache(maxsize=None)
def _enum_lookup(enum_type: Type[Enum]) -> Dict[str, Enum]:
    """Case-insensitive name table for an enum, built once per type."""
    table: Dict[str, Enum] = {}
    for name, member in enum_type.__members__.items():
        table.setdefault(name.lower(), member)
        table.setdefault(name.replace("_", "").lower(), member)
        if isinstance(member.value, str):
            table.setdefault(member.value.lower(), member)
    return table


class EnumConverter(ICommandConverter):
    """
    Matches a value against the members of the requested enum type.

    Matching ignores letter case and accepts member names with or without
    underscores as well as string values. Flag enums accept several
    comma separated names which are combined.
    """

    value_type = ValueType.ENUM

    def convert(self, value: str, culture: Culture, target: Any = None) -> Enum:
        if not (isinstance(target, type) and issubclass(target, Enum)):
            raise UnsupportedTypeError(target)

        table = _enum_lookup(target)
        names = [part.strip().lower() for part in value.split(LIST_DELIMITER)]
        if len(names) > 1 and not issubclass(target, Flag):
            raise FormatError(value, target.__name__)

        try:
            members = [table[name] for name in names]
        except KeyError:
            raise FormatError(value, target.__name__) from None
        return reduce(lambda a, b: a | b, members)


class ColorConverter(ICommandConverter):
    """
    Parses colors into RGBA tuples.

    Accepts CSS names and '#' hex (via Pillow), bare hex digits and
    comma separated 'r,g,b' or 'r,g,b,a' integer lists.
    """

    value_type = ValueType.COLOR

    _BARE_HEX = re.compile(r"^(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

    def __init__(self):
        self._component = IntegralNumberConverter(bits=8)

    def convert(self, value: str, culture: Culture, target: Any = None) -> Tuple[int, int, int, int]:
        text = value.strip()

        if LIST_DELIMITER in text:
            parts = [self._component.convert(p, culture) for p in text.split(LIST_DELIMITER)]
            if len(parts) == 3:
                parts.append(255)
            if len(parts) != 4:
                raise FormatError(value, "color")
            return tuple(parts)

        if self._BARE_HEX.match(text):
            text = f"#{text}"

        try:
            return ImageColor.getcolor(text, "RGBA")
        except ValueError:
            raise FormatError(value, "color") from None


class ConverterRegistry:
    """
    Maps value types to converters.

    Registration is expected at start-up; after freeze() the registry is
    read-only and safe to share between threads.
    """

    def __init__(self, converters=None):
        self._converters: Dict[ValueType, ICommandConverter] = {}
        self._frozen = False
        for converter in converters or ():
            self.register(converter)

    def register(self, converter: ICommandConverter) -> None:
        """Register converter for its value type, replacing any previous one."""
        if self._frozen:
            raise RuntimeError("Converter registry is frozen")
        if not isinstance(converter.value_type, ValueType):
            raise TypeError(f"{type(converter).__name__} does not declare a value type")
        self._converters[converter.value_type] = converter

    def freeze(self) -> "ConverterRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @staticmethod
    def value_type_of(target: Any) -> ValueType:
        """Map a ValueType or an Enum subclass to its value type."""
        if isinstance(target, ValueType):
            return target
        if isinstance(target, type) and issubclass(target, Enum):
            return ValueType.ENUM
        raise UnsupportedTypeError(target)

    def resolve(self, target: Any) -> ICommandConverter:
        """
        Get the converter for target.

        Raises:
            UnsupportedTypeError: If no converter handles target
        """
        value_type = self.value_type_of(target)
        try:
            return self._converters[value_type]
        except KeyError:
            raise UnsupportedTypeError(target) from None

    def __contains__(self, target: Any) -> bool:
        try:
            self.resolve(target)
        except UnsupportedTypeError:
            return False
        return True

    def __len__(self) -> int:
        return len(self._converters)


def standard_converters():
    """Fresh instances of every built-in converter."""
    return [
        IntegralNumberConverter(ValueType.UINT),
        IntegralNumberConverter(ValueType.INT, signed=True),
        FloatConverter(),
        BoolConverter(),
        ArrayConverter(ValueType.FLOAT_ARRAY, FloatConverter()),
        ArrayConverter(ValueType.INT_ARRAY, IntegralNumberConverter(ValueType.INT, signed=True)),
        EnumConverter(),
        ColorConverter(),
    ]


_default_registry: Optional[ConverterRegistry] = None
_default_lock = threading.Lock()


def default_registry() -> ConverterRegistry:
    """Process-wide registry of the standard converters, built once."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = ConverterRegistry(standard_converters()).freeze()
                logger.debug(f"Default converter registry built with {len(_default_registry)} converters")
    return _default_registry
