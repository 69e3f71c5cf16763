"""
64-bit flag value type with containment and exact matching.

Key features:
- Build flags from enum members, raw integers or other flags, in any mix
- Merge, remove, set and invert bits in place, or via + - ~ on copies
- Subset containment (match, ``in``), exact equality (match_exact, ==)
  and existential matching (match_any, match_first)
- Round-trip back into the enum type with to_enum
"""

from .coercion import as_bits, combine, enum_to_bits
from .constants import MASK, WIDTH
from .errors import FlagError, FlagFormatError, InvalidArgumentError, TypeMismatchError
from .flag import Flag
from .results import MatchResult
from .version import __version__

__all__ = [
    'Flag',
    'MatchResult',
    'as_bits',
    'combine',
    'enum_to_bits',
    'FlagError',
    'FlagFormatError',
    'InvalidArgumentError',
    'TypeMismatchError',
    'MASK',
    'WIDTH',
    '__version__',
]
