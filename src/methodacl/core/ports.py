from __future__ import annotations

from typing import Any, Callable, Dict, Protocol, runtime_checkable

# (role, clazz, method, data) -> bool
AccessStrategy = Callable[[str, str, str, Any], bool]


@runtime_checkable
class Matcher(Protocol):
    def matches(self, value: str) -> bool: ...


@runtime_checkable
class StrategyRegistry(Protocol):
    """Resolves a strategy reference to a value.

    Implementations raise StrategyResolutionError when the reference is unknown.
    The returned value is validated by the caller.
    """

    def resolve(self, ref: str) -> Any: ...


class DecisionLogSink(Protocol):
    def log(self, payload: Dict[str, Any]) -> None: ...


class MetricsSink(Protocol):
    def inc(self, name: str, labels: Dict[str, str] | None = None) -> None: ...

    def observe(self, name: str, value: float, labels: Dict[str, str] | None = None) -> None: ...
