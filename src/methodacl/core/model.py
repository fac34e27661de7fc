from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence, Union

from .errors import StrategyNotCallableError
from .matchers import as_matcher
from .ports import AccessStrategy, Matcher


@dataclass(frozen=True)
class StaticStrategy:
    """Fixed answer: True grants, False denies."""

    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise StrategyNotCallableError(
                f"static strategy value must be a bool, got {type(self.value).__name__}"
            )


@dataclass(frozen=True)
class PredicateStrategy:
    """Dynamic answer computed by ``fn(role, clazz, method, data)``."""

    fn: AccessStrategy

    def __post_init__(self) -> None:
        if not callable(self.fn):
            raise StrategyNotCallableError(
                f"predicate strategy must be callable, got {type(self.fn).__name__}"
            )


@dataclass(frozen=True)
class ReferenceStrategy:
    """Lookup key resolved through a StrategyRegistry at evaluation time."""

    ref: str

    def __post_init__(self) -> None:
        if not isinstance(self.ref, str):
            raise StrategyNotCallableError(
                f"strategy reference must be a string, got {type(self.ref).__name__}"
            )


Strategy = Union[StaticStrategy, PredicateStrategy, ReferenceStrategy]


def as_strategy(value: Any) -> Strategy:
    """Coerce a raw ``bool``, callable or reference string into a Strategy variant."""
    if isinstance(value, (StaticStrategy, PredicateStrategy, ReferenceStrategy)):
        return value
    if isinstance(value, bool):
        return StaticStrategy(value)
    if isinstance(value, str):
        return ReferenceStrategy(value)
    if callable(value):
        return PredicateStrategy(value)
    raise StrategyNotCallableError(
        f"strategy must be a bool, a callable or a reference string, got {type(value).__name__}"
    )


@dataclass(frozen=True)
class PolicyEntry:
    """One line of a security policy.

    ``roles``, ``classes`` and ``methods`` accept pattern strings, compiled
    patterns or any object with a ``matches(value)`` method; ``strategy``
    accepts a Strategy variant or a raw bool / callable / reference string.
    """

    roles: Matcher
    classes: Matcher
    methods: Matcher
    strategy: Strategy
    id: Optional[str] = None

    def __post_init__(self) -> None:
        # frozen: coerce through object.__setattr__
        object.__setattr__(self, "roles", as_matcher(self.roles))
        object.__setattr__(self, "classes", as_matcher(self.classes))
        object.__setattr__(self, "methods", as_matcher(self.methods))
        object.__setattr__(self, "strategy", as_strategy(self.strategy))

    def applies_to(self, role: str, clazz: str, method: str) -> bool:
        return (
            self.roles.matches(role)
            and self.classes.matches(clazz)
            and self.methods.matches(method)
        )


@dataclass(frozen=True)
class AccessRequest:
    role: Union[str, Iterable[str]]
    clazz: str
    method: str
    data: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        # one-shot iterables are read exactly once
        if not isinstance(self.role, str):
            object.__setattr__(self, "role", tuple(self.role))

    @property
    def roles(self) -> tuple[str, ...]:
        """The requested roles as a tuple; a plain string is a single role."""
        if isinstance(self.role, str):
            return (self.role,)
        return self.role  # type: ignore[return-value]

    @property
    def is_multi_role(self) -> bool:
        return not isinstance(self.role, str)


SecurityPolicy = Sequence[PolicyEntry]

__all__ = [
    "AccessRequest",
    "PolicyEntry",
    "PredicateStrategy",
    "ReferenceStrategy",
    "SecurityPolicy",
    "StaticStrategy",
    "Strategy",
    "as_strategy",
]
