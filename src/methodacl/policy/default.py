from __future__ import annotations

from ..core.matchers import ANY
from ..core.model import PolicyEntry, StaticStrategy

# Grants every role every method on every class.
DEFAULT_SECURITY_POLICY: tuple[PolicyEntry, ...] = (
    PolicyEntry(roles=ANY, classes=ANY, methods=ANY, strategy=StaticStrategy(True), id="default-permit-all"),
)

__all__ = ["DEFAULT_SECURITY_POLICY"]
