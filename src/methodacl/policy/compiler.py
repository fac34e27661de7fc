from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

from ..core.errors import PolicyError, StrategyNotCallableError
from ..core.model import PolicyEntry

_REQUIRED_KEYS = ("roles", "classes", "methods", "strategy")
_ALLOWED_KEYS = frozenset(_REQUIRED_KEYS) | {"id"}


def compile_entry(raw: PolicyEntry | Mapping[str, Any], *, index: int = 0) -> PolicyEntry:
    """Build a PolicyEntry from its external representation.

    ``raw`` is either a PolicyEntry (returned unchanged) or a mapping with keys
    ``roles``, ``classes``, ``methods``, ``strategy`` and optionally ``id``.
    """
    if isinstance(raw, PolicyEntry):
        return raw
    if not isinstance(raw, Mapping):
        raise PolicyError(f"policy entry #{index}: expected a mapping or PolicyEntry, got {type(raw).__name__}")

    missing = [k for k in _REQUIRED_KEYS if k not in raw]
    if missing:
        raise PolicyError(f"policy entry #{index}: missing key(s): {', '.join(missing)}")
    unknown = sorted(set(raw) - _ALLOWED_KEYS)
    if unknown:
        raise PolicyError(f"policy entry #{index}: unknown key(s): {', '.join(map(str, unknown))}")

    entry_id = raw.get("id")
    if entry_id is not None and not isinstance(entry_id, str):
        raise PolicyError(f"policy entry #{index}: 'id' must be a string")

    try:
        return PolicyEntry(
            roles=raw["roles"],
            classes=raw["classes"],
            methods=raw["methods"],
            strategy=raw["strategy"],
            id=entry_id,
        )
    except re.error as e:
        raise PolicyError(f"policy entry #{index}: invalid pattern: {e}") from e
    except StrategyNotCallableError:
        raise
    except TypeError as e:
        raise PolicyError(f"policy entry #{index}: {e}") from e


def compile_policy(entries: Iterable[PolicyEntry | Mapping[str, Any]]) -> tuple[PolicyEntry, ...]:
    """Compile a whole policy, preserving entry order."""
    if isinstance(entries, (str, bytes, Mapping)):
        raise PolicyError("policy must be a sequence of entries")
    return tuple(compile_entry(raw, index=i) for i, raw in enumerate(entries))


__all__ = ["compile_entry", "compile_policy"]
