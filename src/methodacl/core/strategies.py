from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Union

from .errors import StrategyNotCallableError, StrategyResolutionError
from .model import PredicateStrategy, ReferenceStrategy, StaticStrategy, Strategy
from .ports import AccessStrategy, StrategyRegistry

logger = logging.getLogger("methodacl.strategies")

ResolvedStrategy = Union[bool, AccessStrategy]


class ImportStrategyRegistry(StrategyRegistry):
    """Resolve references of the form ``"pkg.mod:attr"`` or ``"pkg.mod.attr"``.

    The colon form names the module explicitly; the dotted form splits on the
    last dot. Attribute paths after the colon may be nested (``"pkg.mod:Cls.fn"``).
    Modules are cached by the import system, so repeated lookups are cheap.
    """

    def resolve(self, ref: str) -> Any:
        module_path, attr_path = self._split(ref)
        try:
            target: Any = importlib.import_module(module_path)
        except ImportError as e:
            raise StrategyResolutionError(f"cannot import module {module_path!r} for strategy {ref!r}") from e
        for part in attr_path.split("."):
            try:
                target = getattr(target, part)
            except AttributeError as e:
                raise StrategyResolutionError(
                    f"module {module_path!r} has no attribute {attr_path!r} (strategy {ref!r})"
                ) from e
        return target

    @staticmethod
    def _split(ref: str) -> tuple[str, str]:
        if ":" in ref:
            module_path, _, attr_path = ref.partition(":")
        else:
            module_path, _, attr_path = ref.rpartition(".")
        if not module_path or not attr_path:
            raise StrategyResolutionError(f"invalid strategy reference {ref!r}; expected 'module:attr' or 'module.attr'")
        return module_path, attr_path


class MappingStrategyRegistry(StrategyRegistry):
    """Resolve references from a fixed mapping of names to strategies."""

    def __init__(self, strategies: Mapping[str, Any]) -> None:
        self._strategies = dict(strategies)

    def resolve(self, ref: str) -> Any:
        try:
            return self._strategies[ref]
        except KeyError:
            raise StrategyResolutionError(f"unknown strategy {ref!r}") from None

    def __contains__(self, ref: object) -> bool:
        return ref in self._strategies


class StrategyResolver:
    """Turn a Strategy variant into either a fixed boolean or a decision function."""

    def __init__(self, registry: StrategyRegistry | None = None) -> None:
        self.registry: StrategyRegistry = registry if registry is not None else ImportStrategyRegistry()

    def resolve(self, strategy: Strategy) -> ResolvedStrategy:
        if isinstance(strategy, StaticStrategy):
            return strategy.value
        if isinstance(strategy, PredicateStrategy):
            return strategy.fn
        if isinstance(strategy, ReferenceStrategy):
            value = self.registry.resolve(strategy.ref)
            logger.debug("methodacl: resolved strategy %r to %r", strategy.ref, value)
            return _check_resolved(value, strategy.ref)
        raise StrategyNotCallableError(f"unsupported strategy {strategy!r}")


def _check_resolved(value: Any, ref: str) -> ResolvedStrategy:
    if isinstance(value, bool):
        return value
    if callable(value):
        return value
    raise StrategyNotCallableError(
        f"strategy {ref!r} resolved to {type(value).__name__}, which is neither a bool nor callable"
    )


__all__ = [
    "ImportStrategyRegistry",
    "MappingStrategyRegistry",
    "ResolvedStrategy",
    "StrategyResolver",
]
