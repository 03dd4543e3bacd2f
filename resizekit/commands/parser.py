"""
Typed access to request commands.
"""
import logging
from typing import Any, Optional, Sequence, Union

from ..core.errors import CommandError
from .collection import CommandCollection
from .converters import ConverterRegistry, default_registry
from .culture import INVARIANT, Culture

logger = logging.getLogger(__name__)


class CommandParser:
    """
    Converts named commands into typed values.

    Missing commands and values that fail to convert both yield the caller's
    default, so a malformed request degrades instead of failing.

    Example:
        parser = CommandParser()
        width = parser.get_value(commands, "width", ValueType.UINT, 0)
        mode = parser.get_value(commands, ("rmode", "mode"), ResizeMode, ResizeMode.CROP)
    """

    def __init__(self, registry: Optional[ConverterRegistry] = None):
        self.registry = registry or default_registry()

    def get_value(
        self,
        commands: CommandCollection,
        name: Union[str, Sequence[str]],
        target: Any,
        default: Any = None,
        culture: Culture = INVARIANT
    ) -> Any:
        """
        Get a command value converted to target.

        Args:
            commands: Request commands
            name: Command name, or several alias names checked in order
            target: A ValueType or an Enum subclass
            default: Value returned when the command is absent or invalid
            culture: Numeric conventions for parsing

        Returns:
            The converted value, or default
        """
        names = (name,) if isinstance(name, str) else tuple(name)
        parameter = commands.first(*names)
        if parameter is None:
            return default

        try:
            converter = self.registry.resolve(target)
            return converter.convert(parameter.value, culture, target)
        except CommandError as e:
            logger.debug(f"Ignoring command {parameter.name}={parameter.value!r}: {e}")
            return default
