"""The Flag value type: a set of indicators packed into one 64-bit word."""

import logging as log
import operator
from enum import Enum, Flag as EnumFlag
from functools import reduce
from typing import Any, Iterator, Type, TypeVar

from .coercion import as_bits, combine, enum_to_bits
from .constants import MASK, VALID_BIT_INDEXES
from .errors import InvalidArgumentError, TypeMismatchError
from .results import MatchResult

E = TypeVar('E', bound=Enum)


class Flag:
    """A 64-bit unsigned bit pattern with containment and exact matching.

    Every method that takes flag values accepts any mix of Flag instances,
    enum members, integers and integer literal strings; multiple inputs are
    OR-ed into a single pattern first.

    Matching comes in three strengths:
        match(p)        every bit of p is set here (subset containment)
        match_exact(p)  the stored value is exactly p
        match_any(...)  at least one input matches on its own

    The ``==`` operator is exact equality so Flags behave in sets and dicts.
    It compares against Flags and ints (IntEnum/IntFlag members included);
    ``==`` against a plain Enum member is always False, use match_exact()
    for those. The containment relation is available as ``pattern in flag`` and through
    equals(), which is NOT symmetric:

        Flag(0b110).equals(0b100)  -> True
        Flag(0b100).equals(0b110)  -> False

    hash() agrees with ``==`` only. Two flags for which equals() is true may
    hash differently.

    Operators (+, -, ~) always return a new Flag. set(), merge(), remove()
    and invert() mutate in place and return self; a Flag shared between
    threads must be locked by the caller around those calls.

    Usage:
        perms = Flag(Perm.READ, Perm.WRITE)
        perms.merge(Perm.EXEC).remove(Perm.WRITE)
        if Perm.READ in perms:
            ...
    """

    __slots__ = ("_value",)

    def __init__(self, *values: Any):
        """Create a flag from zero or more inputs.

        No inputs gives an empty flag (0); several inputs are OR-ed.
        """
        self._value = combine(*values)

    @classmethod
    def from_enum(cls, *members: Enum) -> "Flag":
        """Create a flag strictly from enum members."""
        flag = cls()
        for member in members:
            flag._value |= enum_to_bits(member)
        return flag

    @property
    def value(self) -> int:
        """The stored 64-bit pattern."""
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = as_bits(value)

    # ========================================================================
    # Mutation
    # ========================================================================

    def set(self, *values: Any) -> "Flag":
        """Replace the stored value with the combination of values.

        Prior state is discarded; no inputs clears the flag.
        """
        self._value = combine(*values)
        return self

    def merge(self, *values: Any) -> "Flag":
        """Add the bits of values, leaving existing bits untouched."""
        self._value |= combine(*values)
        return self

    def remove(self, *values: Any) -> "Flag":
        """Clear exactly the bits of the combined pattern."""
        self._value &= ~combine(*values) & MASK
        return self

    def invert(self) -> "Flag":
        """Flip all 64 bits."""
        self._value ^= MASK
        return self

    def merged(self, *values: Any) -> "Flag":
        """Return a new Flag with the bits of values added."""
        return Flag(self._value | combine(*values))

    def copy(self) -> "Flag":
        return Flag(self._value)

    __copy__ = copy

    # ========================================================================
    # Matching
    # ========================================================================

    def match(self, *values: Any) -> bool:
        """True if every bit of the combined pattern is set in this flag.

        match(0) is always true.

        Raises:
            InvalidArgumentError: If no values are given
        """
        pattern = combine(*values, require=True)
        return (self._value & pattern) == pattern

    def match_exact(self, *values: Any) -> bool:
        """True if the stored value equals the combined pattern.

        Raises:
            InvalidArgumentError: If no values are given
        """
        return self._value == combine(*values, require=True)

    def match_any(self, *values: Any) -> bool:
        """True if at least one value matches when tested on its own.

        Every value is converted before testing, so a bad input raises even
        when an earlier one matches.
        """
        return self.match_first(*values).matched

    def match_first(self, *values: Any) -> MatchResult:
        """Return the first value, in argument order, that matches.

        Only the first hit is reported even when several values match.
        """
        patterns = [as_bits(value) for value in values]
        for value, pattern in zip(values, patterns):
            if (self._value & pattern) == pattern:
                return MatchResult(True, value)
        return MatchResult.none()

    def __contains__(self, pattern: Any) -> bool:
        return self.match(pattern)

    # ========================================================================
    # Equality
    # ========================================================================

    def equals(self, other: Any) -> bool:
        """Containment comparison against any convertible value.

        Equivalent to self.match(other). This relation is neither symmetric
        nor consistent with hash(); use ``==`` or match_exact() for true
        equality.

        Raises:
            FlagFormatError: If other cannot be converted to a 64-bit integer
        """
        return self.match(other)

    def not_equals(self, other: Any) -> bool:
        return not self.equals(other)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Flag):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    # ========================================================================
    # Operators
    # ========================================================================

    def __add__(self, other: Any) -> "Flag":
        return self.merged(other)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "Flag":
        return self.copy().remove(other)

    def __rsub__(self, other: Any) -> "Flag":
        return Flag(other).remove(self)

    def __invert__(self) -> "Flag":
        return self.copy().invert()

    # ========================================================================
    # Conversion
    # ========================================================================

    def to_enum(self, enum_type: Type[E]) -> E:
        """Convert the stored value back into a member of enum_type.

        For enum.Flag/IntFlag types a composite of several members is a valid
        result, but bits outside every member are not, and 0 is only valid
        when a member has the value 0.

        Raises:
            InvalidArgumentError: If enum_type is not an Enum subclass
            TypeMismatchError: If no member corresponds to the stored value
        """
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise InvalidArgumentError(
                f"to_enum() expects an Enum type, got {enum_type!r}"
            )

        if issubclass(enum_type, EnumFlag):
            # IntFlag keeps unknown bits as unnamed pseudo-members
            values = [m.value for m in enum_type.__members__.values()]
            known = reduce(operator.or_, values, 0)
            if self._value & ~known or (self._value == 0 and 0 not in values):
                log.debug(f"Value {self._value:#x} has bits outside {enum_type.__name__}")
                raise TypeMismatchError(self._value, enum_type)

        try:
            return enum_type(self._value)
        except ValueError as e:
            log.debug(f"No member of {enum_type.__name__} for value {self._value:#x}")
            raise TypeMismatchError(self._value, enum_type) from e

    def bit(self, index: int) -> int:
        """Return 1 if bit index (0 = least significant) is set, else 0.

        Raises:
            IndexError: If index is outside 0..63
        """
        index = operator.index(index)
        if index not in VALID_BIT_INDEXES:
            raise IndexError(f"Bit index {index} out of range")
        return (self._value >> index) & 1

    __getitem__ = bit

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    __index__ = __int__

    def __len__(self) -> int:
        """Number of set bits."""
        return self._value.bit_count()

    def __iter__(self) -> Iterator[int]:
        """Yield the positions of set bits, lowest first."""
        mask = self._value
        while mask:
            lsb = mask & -mask
            yield lsb.bit_length() - 1
            mask ^= lsb

    def __str__(self) -> str:
        return format(self._value, "b")

    def __repr__(self) -> str:
        return f"Flag(0b{self._value:b})"
