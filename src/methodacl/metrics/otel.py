from __future__ import annotations

from typing import Any, Dict, Optional

from methodacl.core.ports import MetricsSink

try:
    from opentelemetry.metrics import get_meter  # type: ignore
except Exception:  # pragma: no cover
    get_meter = None  # type: ignore


class OpenTelemetryMetrics(MetricsSink):
    """OpenTelemetry-based MetricsSink.

    Creates, on meter ``methodacl.metrics``:
      - Counter: methodacl_decisions_total (attributes: query, result)
      - Histogram: methodacl_decision_seconds (unit: s)
    """

    _counter: Optional[Any]
    _hist: Optional[Any]

    def __init__(self) -> None:
        self._counter = None
        self._hist = None

        if get_meter is None:  # pragma: no cover
            return

        meter = get_meter("methodacl.metrics")
        try:
            self._counter = meter.create_counter(
                name="methodacl_decisions_total",
                description="Total methodacl decisions by query and result.",
            )
        except Exception:  # pragma: no cover
            self._counter = None

        try:
            self._hist = meter.create_histogram(
                name="methodacl_decision_seconds",
                description="methodacl decision evaluation duration in seconds.",
                unit="s",
            )
        except Exception:  # pragma: no cover
            self._hist = None

    # -- MetricsSink ------------------------------------------------------------

    def inc(self, name: str, labels: Dict[str, str] | None = None) -> None:
        if self._counter is None:
            return
        try:
            self._counter.add(1, dict(labels or {}))
        except Exception:  # pragma: no cover
            pass

    def observe(self, name: str, value: float, labels: Dict[str, str] | None = None) -> None:
        if self._hist is None:
            return
        try:
            self._hist.record(float(value), dict(labels or {}))
        except Exception:  # pragma: no cover
            pass


__all__ = ["OpenTelemetryMetrics"]
