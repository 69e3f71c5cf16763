"""Result type for first-match queries."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class MatchResult:
    """Outcome of Flag.match_first().

    ``value`` is the first input (as passed by the caller) whose bits were all
    present in the flag, or None when nothing matched.
    """
    matched: bool
    value: Optional[Any] = None

    @classmethod
    def none(cls) -> "MatchResult":
        return cls(False, None)

    def __bool__(self) -> bool:
        return self.matched
