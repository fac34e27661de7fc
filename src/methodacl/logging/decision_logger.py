from __future__ import annotations

import json
import logging
import random
from typing import Any, Dict

from ..core.ports import DecisionLogSink


class DecisionLogger(DecisionLogSink):
    """Audit sink that writes one record per decision to a standard logger.

    Args:
        logger_name: target logger, ``"methodacl.audit"`` by default.
        level: log level of emitted records.
        as_json: emit ``json.dumps(payload)`` instead of ``"decision {payload!r}"``.
        sample_rate: fraction of decisions to log (0.0..1.0).
        smart_sampling: always log refusals (``permits`` answering False,
            ``denies`` answering True); ``sample_rate`` applies to the rest.
        include_data: keep the request's opaque ``data`` in the record. Off by
            default because it usually carries application objects.
    """

    def __init__(
        self,
        *,
        logger_name: str = "methodacl.audit",
        level: int = logging.INFO,
        as_json: bool = False,
        sample_rate: float = 1.0,
        smart_sampling: bool = False,
        include_data: bool = False,
    ) -> None:
        self.logger = logging.getLogger(logger_name)
        self.level = level
        self.as_json = as_json
        self.sample_rate = min(1.0, max(0.0, float(sample_rate)))
        self.smart_sampling = smart_sampling
        self.include_data = include_data

    def log(self, payload: Dict[str, Any]) -> None:
        if not self._should_log(payload):
            return

        record = dict(payload)
        if not self.include_data:
            record.pop("data", None)

        if self.as_json:
            msg = json.dumps(record, ensure_ascii=False, default=repr)
        else:
            msg = f"decision {record!r}"
        self.logger.log(self.level, msg)

    def _should_log(self, payload: Dict[str, Any]) -> bool:
        if self.smart_sampling and _is_refusal(payload):
            return True
        if self.sample_rate <= 0.0:
            return False
        if self.sample_rate >= 1.0:
            return True
        return random.random() < self.sample_rate


def _is_refusal(payload: Dict[str, Any]) -> bool:
    query = payload.get("query")
    result = payload.get("result")
    return (query == "permits" and result is False) or (query == "denies" and result is True)


__all__ = ["DecisionLogger"]
