"""
Request command handling for resizekit.
"""
from .collection import CommandParameter, CommandCollection
from .culture import Culture, INVARIANT, parse_decimal
from .converters import (
    ValueType,
    IntegralNumberConverter,
    FloatConverter,
    BoolConverter,
    ArrayConverter,
    EnumConverter,
    ColorConverter,
    ConverterRegistry,
    standard_converters,
    default_registry,
)
from .parser import CommandParser
from .query import parse_query

__all__ = [
    'CommandParameter',
    'CommandCollection',
    'Culture',
    'INVARIANT',
    'parse_decimal',
    'ValueType',
    'IntegralNumberConverter',
    'FloatConverter',
    'BoolConverter',
    'ArrayConverter',
    'EnumConverter',
    'ColorConverter',
    'ConverterRegistry',
    'standard_converters',
    'default_registry',
    'CommandParser',
    'parse_query',
]
