from __future__ import annotations

import re
from typing import Any, Pattern, Union

from .ports import Matcher

PatternLike = Union[str, Pattern[str], Matcher]


class RegexMatcher:
    """Matcher accepting values that match the whole regular expression.

    Partial matches never count: ``RegexMatcher("Manager")`` rejects
    ``"BranchManager"``, which keeps entries from leaking onto similarly
    named roles, classes or methods.
    """

    __slots__ = ("pattern",)

    def __init__(self, pattern: str | Pattern[str]) -> None:
        self.pattern: Pattern[str] = re.compile(pattern) if isinstance(pattern, str) else pattern

    def matches(self, value: str) -> bool:
        return self.pattern.fullmatch(value) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegexMatcher):
            return NotImplemented
        return self.pattern == other.pattern

    def __hash__(self) -> int:
        return hash(self.pattern)

    def __repr__(self) -> str:
        return f"RegexMatcher({self.pattern.pattern!r})"


ANY = RegexMatcher(".*")


def as_matcher(value: Any) -> Matcher:
    """Coerce a pattern string, compiled pattern or matcher into a Matcher."""
    if isinstance(value, (str, re.Pattern)):
        return RegexMatcher(value)
    if isinstance(value, Matcher):
        return value
    raise TypeError(f"expected a pattern string, compiled pattern or matcher, got {type(value).__name__}")


__all__ = ["ANY", "PatternLike", "RegexMatcher", "as_matcher"]
