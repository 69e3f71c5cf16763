"""Conversion of flag inputs into raw 64-bit patterns.

Every Flag operation accepts the same kinds of input: other Flag instances,
enum members, integers and integer literals in text form. They all pass
through as_bits() so each operation is written once.
"""

import logging as log
import operator
from enum import Enum
from typing import Any

from .constants import MASK, WIDTH
from .errors import FlagFormatError, InvalidArgumentError


def _check_range(bits: int, source: Any) -> int:
    if bits < 0 or bits > MASK:
        log.debug(f"Rejected out-of-range flag value {source!r}")
        raise InvalidArgumentError(
            f"Value {bits} does not fit in an unsigned {WIDTH}-bit integer"
        )
    return bits


def enum_to_bits(member: Enum) -> int:
    """Return the unsigned integer behind an enum member.

    Works for IntEnum, IntFlag and enum.Flag members as well as plain Enum
    members whose value is an integer.

    Raises:
        InvalidArgumentError: If member is not an enum member or does not fit
            in 64 bits
        FlagFormatError: If the member's value is not an integer
    """
    if not isinstance(member, Enum):
        raise InvalidArgumentError(
            f"Expected an enum member, got {type(member).__name__}"
        )

    try:
        bits = operator.index(member.value)
    except TypeError as e:
        log.debug(f"Enum member {member!r} has a non-integer value")
        raise FlagFormatError(member, "enum value is not an integer") from e

    return _check_range(bits, member)


def as_bits(value: Any) -> int:
    """Coerce a single flag input into its raw 64-bit pattern.

    Args:
        value: A Flag, an enum member, an int (or anything with __index__),
            or a string holding an integer literal such as "5" or "0b101".
            Decimal text may carry leading zeros ("010" is ten).

    Raises:
        FlagFormatError: If the value cannot be converted to an integer
        InvalidArgumentError: If the integer is negative or wider than 64 bits
    """
    if isinstance(value, Enum):
        return enum_to_bits(value)

    if isinstance(value, str):
        try:
            bits = int(value, 0)
        except ValueError:
            # Base 0 refuses leading zeros in decimal text
            try:
                bits = int(value, 10)
            except ValueError as e:
                log.debug(f"Could not parse {value!r} as an integer")
                raise FlagFormatError(value, "not an integer literal") from e
        return _check_range(bits, value)

    try:
        bits = operator.index(value)
    except TypeError as e:
        log.debug(f"Could not convert {type(value).__name__} to flag bits")
        raise FlagFormatError(value, "not convertible to an integer") from e

    return _check_range(bits, value)


def combine(*values: Any, require: bool = False) -> int:
    """OR together the patterns of all inputs.

    Returns 0 when no inputs are given, unless require is set.

    Raises:
        InvalidArgumentError: If require is True and no inputs were given
    """
    if require and not values:
        raise InvalidArgumentError("At least one flag value is required")

    bits = 0
    for value in values:
        bits |= as_bits(value)
    return bits
