from .errors import MethodAclError, PolicyError, StrategyNotCallableError, StrategyResolutionError
from .matchers import ANY, RegexMatcher, as_matcher
from .model import (
    AccessRequest,
    PolicyEntry,
    PredicateStrategy,
    ReferenceStrategy,
    StaticStrategy,
    Strategy,
    as_strategy,
)
from .strategies import ImportStrategyRegistry, MappingStrategyRegistry, StrategyResolver

__all__ = [
    "ANY",
    "AccessRequest",
    "ImportStrategyRegistry",
    "MappingStrategyRegistry",
    "MethodAclError",
    "PolicyEntry",
    "PolicyError",
    "PredicateStrategy",
    "ReferenceStrategy",
    "RegexMatcher",
    "StaticStrategy",
    "Strategy",
    "StrategyNotCallableError",
    "StrategyResolutionError",
    "StrategyResolver",
    "as_matcher",
    "as_strategy",
]
