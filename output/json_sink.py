from __future__ import annotations
import json
from typing import Any, Dict, Iterable
from core.namespace import to_path
from core.plugin import Metric
from core.util import ensure_parent

class JsonSink:
    """
    NDJSON sink for collected metrics.

    Each metric becomes one JSON line with its namespace joined by the
    platform path separator.
    Parent directories of the output file are created on demand.
    """
    
    def __init__(self, path: str) -> None:
        self.path = path
        ensure_parent(self.path)

    @staticmethod
    def record(metric: Metric) -> Dict[str, Any]:
        """
        Build the JSON record for a single metric.

        Args:
            metric: Collected metric

        Returns:
            Dictionary with namespace, value, source and ts_unix keys
        """
        return {
            "namespace": to_path(metric.namespace),
            "value": metric.value,
            "source": metric.source,
            "ts_unix": metric.timestamp,
        }

    def write(self, metrics: Iterable[Metric]) -> int:
        """
        Append metrics to the output file.

        Returns:
            Number of records written
        """
        n = 0
        with open(self.path, "a", encoding="utf-8") as f:
            for m in metrics:
                f.write(json.dumps(self.record(m)) + "\n")
                n += 1
        return n
