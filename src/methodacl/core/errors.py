from __future__ import annotations


class MethodAclError(Exception):
    """Base class for errors raised by methodacl."""


class PolicyError(MethodAclError, ValueError):
    """A policy entry could not be compiled from its external representation."""


class StrategyResolutionError(MethodAclError, LookupError):
    """A strategy reference could not be resolved to a value."""


class StrategyNotCallableError(MethodAclError, TypeError):
    """A strategy is neither a boolean literal nor callable."""


__all__ = [
    "MethodAclError",
    "PolicyError",
    "StrategyResolutionError",
    "StrategyNotCallableError",
]
