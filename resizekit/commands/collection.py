"""
Request commands: named raw string values prior to type conversion.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class CommandParameter:
    """A single (name, raw value) pair from a request."""
    name: str
    value: str = ""

    @property
    def key(self) -> str:
        return normalize(self.name)


def normalize(name: str) -> str:
    """Case-insensitive key for a command name."""
    return name.strip().casefold()


class CommandCollection:
    """
    Ordered, case-insensitive set of commands.

    Adding a command whose name is already present replaces the value but keeps
    the position of the first insertion.
    """

    def __init__(self, parameters: Optional[Iterable[CommandParameter]] = None):
        self._items: Dict[str, CommandParameter] = {}
        for parameter in parameters or ():
            self.add(parameter)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "CommandCollection":
        return cls(CommandParameter(name, value) for name, value in pairs)

    def add(self, parameter: CommandParameter) -> None:
        """Insert or overwrite by normalized name."""
        self._items[parameter.key] = parameter

    def set(self, name: str, value: str) -> None:
        self.add(CommandParameter(name, value))

    def try_get(self, name: str) -> Optional[CommandParameter]:
        """Case-insensitive lookup, None when absent."""
        return self._items.get(normalize(name))

    def first(self, *names: str) -> Optional[CommandParameter]:
        """Return the first of several alias names that is present."""
        for name in names:
            parameter = self.try_get(name)
            if parameter is not None:
                return parameter
        return None

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        parameter = self.try_get(name)
        return parameter.value if parameter is not None else default

    def index_of(self, name: str) -> int:
        """Position of name in insertion order, -1 when absent."""
        key = normalize(name)
        for index, existing in enumerate(self._items):
            if existing == key:
                return index
        return -1

    def remove(self, name: str) -> bool:
        return self._items.pop(normalize(name), None) is not None

    @property
    def names(self) -> List[str]:
        return [parameter.name for parameter in self._items.values()]

    def to_dict(self) -> Dict[str, str]:
        return {key: parameter.value for key, parameter in self._items.items()}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize(name) in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CommandParameter]:
        return iter(list(self._items.values()))

    def __repr__(self) -> str:
        pairs = ", ".join(f"{p.name}={p.value!r}" for p in self._items.values())
        return f"CommandCollection({pairs})"
