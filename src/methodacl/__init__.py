"""Method-level role-based access control decisions."""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version
except Exception:  # pragma: no cover
    PackageNotFoundError = Exception  # type: ignore[assignment,misc]
    version = None  # type: ignore[assignment]

from . import core, logging, metrics, policy
from .core.controller import MethodAccessController
from .core.errors import (
    MethodAclError,
    PolicyError,
    StrategyNotCallableError,
    StrategyResolutionError,
)
from .core.matchers import RegexMatcher
from .core.model import (
    AccessRequest,
    PolicyEntry,
    PredicateStrategy,
    ReferenceStrategy,
    StaticStrategy,
)
from .core.strategies import ImportStrategyRegistry, MappingStrategyRegistry
from .logging.decision_logger import DecisionLogger
from .policy import DEFAULT_SECURITY_POLICY, compile_policy


def _detect_version() -> str:
    if version is None:
        return "0.1.0"
    try:
        return version("methodacl")
    except PackageNotFoundError:
        return "0.1.0"


__version__ = _detect_version()

__all__ = [
    "AccessRequest",
    "DEFAULT_SECURITY_POLICY",
    "DecisionLogger",
    "ImportStrategyRegistry",
    "MappingStrategyRegistry",
    "MethodAccessController",
    "MethodAclError",
    "PolicyEntry",
    "PolicyError",
    "PredicateStrategy",
    "ReferenceStrategy",
    "RegexMatcher",
    "StaticStrategy",
    "StrategyNotCallableError",
    "StrategyResolutionError",
    "compile_policy",
    "core",
    "logging",
    "metrics",
    "policy",
    "__version__",
]
