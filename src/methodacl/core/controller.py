from __future__ import annotations

import logging
import time
import warnings
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from ..policy.compiler import compile_policy
from ..policy.default import DEFAULT_SECURITY_POLICY
from .model import AccessRequest, PolicyEntry
from .ports import DecisionLogSink, MetricsSink, StrategyRegistry
from .strategies import StrategyResolver

logger = logging.getLogger("methodacl.controller")

Role = Union[str, Iterable[str]]


class MethodAccessController:
    """Decide whether roles may invoke methods on classes.

    The policy is an ordered sequence of entries. For every role, the matching
    entries are searched once for an explicit denial and, if none is found,
    once more for a grant. A denial on any role vetoes the whole request.

    The policy is frozen into a tuple at construction time and never changes
    afterwards, so one controller can be shared between threads as long as the
    dynamic strategies and sinks it calls are themselves thread-safe.

    Args:
        policy: entries (PolicyEntry instances or mappings, see
            :func:`methodacl.policy.compile_policy`); defaults to a policy
            that grants everything.
        registry: resolves reference strategies; defaults to dotted-path imports.
        logger_sink: receives one payload per ``permits``/``denies`` call.
        metrics: receives a counter increment and a duration per call.
    """

    def __init__(
        self,
        policy: Optional[Iterable[PolicyEntry | Mapping[str, Any]]] = None,
        *,
        registry: StrategyRegistry | None = None,
        logger_sink: DecisionLogSink | None = None,
        metrics: MetricsSink | None = None,
    ) -> None:
        self._policy: tuple[PolicyEntry, ...] = (
            DEFAULT_SECURITY_POLICY if policy is None else compile_policy(policy)
        )
        self._resolver = StrategyResolver(registry)
        self._logger_sink = logger_sink
        self._metrics = metrics

    @property
    def policy(self) -> tuple[PolicyEntry, ...]:
        return self._policy

    # ------------------------------------------------------------------ public

    def permits(
        self,
        role: Role | AccessRequest,
        clazz: Optional[str] = None,
        method: Optional[str] = None,
        data: Any = None,
    ) -> bool:
        """Return True if ``role`` may invoke ``method`` on ``clazz``.

        ``role`` may be a single role name, an iterable of role names or an
        :class:`AccessRequest` carrying all four arguments. With several
        roles, the request is permitted only if no role is denied and at
        least one role is granted.
        """
        req = _as_request(role, clazz, method, data)
        started = time.perf_counter()
        if req.is_multi_role:
            matched = [(r, self._find_entries(r, req.clazz, req.method)) for r in req.roles]
            result = not any(
                self._interrogate(entries, r, req.clazz, req.method, req.data, want_permit=False)
                for r, entries in matched
            ) and any(
                self._interrogate(entries, r, req.clazz, req.method, req.data, want_permit=True)
                for r, entries in matched
            )
        else:
            result = self._permits_single(req.role, req.clazz, req.method, req.data)  # type: ignore[arg-type]
        self._report("permits", req, result, started)
        return result

    def denies(
        self,
        role: Role | AccessRequest,
        clazz: Optional[str] = None,
        method: Optional[str] = None,
        data: Any = None,
    ) -> bool:
        """Return True if ``role`` is explicitly denied ``method`` on ``clazz``.

        With several roles, the request is denied as soon as any role is.
        An empty role sequence is never denied.
        """
        req = _as_request(role, clazz, method, data)
        started = time.perf_counter()
        result = any(self._denies_single(r, req.clazz, req.method, req.data) for r in req.roles)
        self._report("denies", req, result, started)
        return result

    def grants(
        self,
        role: Role | AccessRequest,
        clazz: Optional[str] = None,
        method: Optional[str] = None,
        data: Any = None,
    ) -> bool:
        """Deprecated alias of :meth:`permits`."""
        warnings.warn(
            "MethodAccessController.grants() is deprecated; use permits()",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.permits(role, clazz, method, data)

    # --------------------------------------------------------------- internals

    def _permits_single(self, role: str, clazz: str, method: str, data: Any) -> bool:
        entries = self._find_entries(role, clazz, method)
        if self._interrogate(entries, role, clazz, method, data, want_permit=False):
            return False
        return self._interrogate(entries, role, clazz, method, data, want_permit=True)

    def _denies_single(self, role: str, clazz: str, method: str, data: Any) -> bool:
        entries = self._find_entries(role, clazz, method)
        return self._interrogate(entries, role, clazz, method, data, want_permit=False)

    def _find_entries(self, role: str, clazz: str, method: str) -> tuple[PolicyEntry, ...]:
        entries = tuple(e for e in self._policy if e.applies_to(role, clazz, method))
        logger.debug(
            "methodacl: %d entr%s match role=%r clazz=%r method=%r",
            len(entries),
            "y" if len(entries) == 1 else "ies",
            role,
            clazz,
            method,
        )
        return entries

    def _interrogate(
        self,
        entries: Sequence[PolicyEntry],
        role: str,
        clazz: str,
        method: str,
        data: Any,
        *,
        want_permit: bool,
    ) -> bool:
        """Search ``entries`` in order for the first decisive answer.

        Static strategies are decisive only when they equal ``want_permit``.
        A predicate answering True settles a permit query; a predicate
        answering False settles a deny query as *not denied*. Without a
        decisive entry the answer is False in both modes.
        """
        for entry in entries:
            resolved = self._resolver.resolve(entry.strategy)
            if isinstance(resolved, bool):
                if resolved == want_permit:
                    self._log_decisive(entry, want_permit, True)
                    return True
                continue

            granted = bool(resolved(role, clazz, method, data))
            if want_permit and granted:
                self._log_decisive(entry, want_permit, True)
                return True
            if not want_permit and not granted:
                self._log_decisive(entry, want_permit, False)
                return False
        return False

    @staticmethod
    def _log_decisive(entry: PolicyEntry, want_permit: bool, result: bool) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "methodacl: entry %s decided %s query: %s",
                entry.id or hex(id(entry)),
                "permit" if want_permit else "deny",
                result,
            )

    def _report(self, query: str, req: AccessRequest, result: bool, started: float) -> None:
        duration = time.perf_counter() - started
        if self._logger_sink is not None:
            payload = {
                "query": query,
                "roles": list(req.roles),
                "clazz": req.clazz,
                "method": req.method,
                "result": result,
                "duration": duration,
                "data": req.data,
            }
            try:
                self._logger_sink.log(payload)
            except Exception:
                logger.exception("methodacl: decision logger sink failed")
        if self._metrics is not None:
            labels = {"query": query, "result": "true" if result else "false"}
            try:
                self._metrics.inc("methodacl_decisions_total", labels)
                self._metrics.observe("methodacl_decision_seconds", duration, labels)
            except Exception:
                logger.exception("methodacl: metrics sink failed")


def _as_request(
    role: Role | AccessRequest, clazz: Optional[str], method: Optional[str], data: Any
) -> AccessRequest:
    if isinstance(role, AccessRequest):
        if clazz is not None or method is not None or data is not None:
            raise TypeError("pass either an AccessRequest or role, clazz and method, not both")
        return role
    if clazz is None or method is None:
        raise TypeError("clazz and method are required unless an AccessRequest is given")
    return AccessRequest(role=role, clazz=clazz, method=method, data=data)


__all__ = ["MethodAccessController", "Role"]
