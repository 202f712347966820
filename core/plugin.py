from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from collectors.proc_net_dev import SOURCE, ValueParseWarning, read_snapshot
from core.namespace import Namespace, enumerate_namespaces, resolve
from core.stats import StatsStore
from core.util import hostname, now_ts

log = logging.getLogger(__name__)

@dataclass(frozen=True)
class PluginMeta:
    name: str
    version: int
    type: str

META = PluginMeta(name="iface", version=2, type="collector")

@dataclass(frozen=True)
class MetricType:
    """A metric available for collection, identified by its namespace."""
    namespace: Namespace

@dataclass(frozen=True)
class Metric:
    """One collected value, stamped with the reporting host and collection time."""
    namespace: Namespace
    value: int | None
    source: str
    timestamp: float

@dataclass(frozen=True)
class ConfigPolicy:
    """Configuration rules accepted by the plugin. This plugin accepts none."""
    rules: Dict[str, Any] = field(default_factory=dict)

class IfacePlugin:
    """
    Network interface collector plugin.

    Serves metric discovery and collection from the kernel interface table.
    Not safe for concurrent calls; the host serializes them.
    """

    def __init__(self, source: str = SOURCE, host: str | None = None,
                 store: StatsStore | None = None) -> None:
        """
        Args:
            source: Path of the interface statistics file
            host: Reported source host, resolved from the system when omitted
            store: Statistics store, a fresh one when omitted
        """
        self.source = source
        self.host = host if host is not None else hostname()
        self.stats = store if store is not None else StatsStore()
        self.last_warnings: List[ValueParseWarning] = []

    def refresh(self) -> List[ValueParseWarning]:
        """Re-read the interface table into the store."""
        content = read_snapshot(self.source)
        self.last_warnings = self.stats.refresh(content)
        return self.last_warnings

    def get_metric_types(self) -> List[MetricType]:
        """
        Refresh and list every available metric.

        Raises:
            OSError: if the source cannot be read
            FormatError: if the table is malformed
        """
        self.refresh()
        return [MetricType(namespace=ns) for ns in enumerate_namespaces(self.stats)]

    def collect_metrics(self, metric_types: Iterable[MetricType]) -> List[Metric]:
        """
        Refresh and resolve the requested metrics.

        Unknown metrics are returned with a None value.

        Raises:
            OSError: if the source cannot be read
            FormatError: if the table is malformed or any namespace is too short
        """
        self.refresh()

        metrics: List[Metric] = []
        for mt in metric_types:
            ns = tuple(mt.namespace)
            metrics.append(Metric(
                namespace=ns,
                value=resolve(self.stats, ns),
                source=self.host,
                timestamp=now_ts(),
            ))
        return metrics

    def get_config_policy(self) -> ConfigPolicy:
        return ConfigPolicy()

def new(source: str = SOURCE) -> IfacePlugin | None:
    """
    Create the plugin after checking that the source can be opened.

    Returns:
        The plugin, or None when the source is not readable.
    """
    try:
        with open(source, "r", encoding="utf-8"):
            pass
    except OSError as e:
        log.error("cannot open interface statistics source", extra={"source": source, "error": str(e)})
        return None
    return IfacePlugin(source=source)
