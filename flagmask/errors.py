"""Exceptions raised by flagmask.

Each error also derives from the built-in exception a caller would catch for
the same mistake, so ``except ValueError`` keeps working.
"""


class FlagError(Exception):
    """Base for all flagmask errors."""


class InvalidArgumentError(FlagError, ValueError):
    """An argument is missing, out of range, or of the wrong kind."""


class TypeMismatchError(FlagError, ValueError):
    """The stored value has no counterpart in the requested enum type."""

    def __init__(self, value: int, enum_type: type):
        super().__init__(
            f"Value {value:#x} does not correspond to any member of {enum_type.__name__}"
        )
        self.value = value
        self.enum_type = enum_type


class FlagFormatError(FlagError, TypeError, ValueError):
    """A value could not be converted to an unsigned 64-bit integer."""

    def __init__(self, value, detail: str):
        super().__init__(
            f"Unable to convert {type(value).__name__} {value!r} to Flag type: {detail}"
        )
        self.value = value
        self.detail = detail
