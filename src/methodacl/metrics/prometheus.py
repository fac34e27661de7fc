from __future__ import annotations

from typing import Any, Dict, Optional

from methodacl.core.ports import MetricsSink

try:
    from prometheus_client import Counter, Histogram  # type: ignore
except Exception:  # pragma: no cover
    Counter = Histogram = None  # type: ignore


class PrometheusMetrics(MetricsSink):
    """Prometheus-based MetricsSink.

    Exposes:
      - methodacl_decisions_total{query="permits|denies", result="true|false"}
      - methodacl_decision_seconds (Histogram)
    """

    _counter: Optional[Any]
    _hist: Optional[Any]

    def __init__(self, *, registry: Any = None) -> None:
        self._counter = None
        self._hist = None

        if Counter is None or Histogram is None:  # pragma: no cover
            return

        kwargs: Dict[str, Any] = {}
        if registry is not None:
            kwargs["registry"] = registry
        self._counter = Counter(
            "methodacl_decisions_total",
            "Total methodacl decisions by query and result.",
            labelnames=("query", "result"),
            **kwargs,
        )
        self._hist = Histogram(
            "methodacl_decision_seconds",
            "methodacl decision evaluation duration in seconds.",
            **kwargs,
        )

    # -- MetricsSink ------------------------------------------------------------

    def inc(self, name: str, labels: Dict[str, str] | None = None) -> None:
        """Increment the decisions counter; *name* is accepted for the port signature only."""
        if self._counter is None:
            return
        labels = labels or {}
        try:
            self._counter.labels(
                query=labels.get("query", "unknown"), result=labels.get("result", "unknown")
            ).inc()
        except Exception:  # pragma: no cover
            # never raise from metrics path
            pass

    def observe(self, name: str, value: float, labels: Dict[str, str] | None = None) -> None:
        if self._hist is None:
            return
        try:
            self._hist.observe(float(value))
        except Exception:  # pragma: no cover
            pass


__all__ = ["PrometheusMetrics"]
