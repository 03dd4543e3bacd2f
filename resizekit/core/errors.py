class ResizeKitException(Exception):
    """base class for all custom exceptions in resizekit package."""


class CommandError(ResizeKitException):
    """a request command could not be turned into a typed value."""


class FormatError(CommandError, ValueError):
    """raw command value does not parse as the requested type."""

    def __init__(self, value: str, expected: str):
        self.value = value
        self.expected = expected
        super().__init__(f"Cannot convert '{value}' to {expected}")


class UnsupportedTypeError(CommandError, TypeError):
    """no converter is registered for the requested type."""

    def __init__(self, target):
        self.target = target
        name = getattr(target, "__name__", None) or str(target)
        super().__init__(f"No converter registered for {name}")
