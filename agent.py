from __future__ import annotations
import argparse
import logging
import os
import sys
import time
from typing import Any, Dict, List
import yaml  # from pyyaml

from collectors.proc_net_dev import SOURCE
from core.plugin import META, IfacePlugin, new
from output.json_sink import JsonSink

log = logging.getLogger("agent")

DEFAULTS: Dict[str, Any] = {
    "source": SOURCE,
    "poll_interval_sec": 1.0,
    "output": {"path": "./metrics.ndjson"},
    "log_level": "INFO",
}

def load_config(path: str = "config.yml") -> Dict[str, Any]:
    """
    Load configuration from YAML file and override with environment variables.

    Environment variables override YAML values:
    - IFACE_SOURCE_PATH: Interface statistics file (e.g., /proc/net/dev)
    - IFACE_POLL_INTERVAL: Polling interval in seconds (e.g., 1.0)
    - IFACE_OUTPUT_PATH: Output file path (e.g., /var/log/iface/metrics.ndjson)
    - IFACE_LOG_LEVEL: Logging level name (e.g., DEBUG)

    Args:
        path: Path to the YAML configuration file

    Returns:
        Dictionary containing defaults merged with file and environment values
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except FileNotFoundError:
        log.warning("config file %s not found, using defaults", path)
        loaded = {}

    config = dict(DEFAULTS)
    config["output"] = dict(DEFAULTS["output"])
    for key, value in loaded.items():
        if key == "output" and isinstance(value, dict):
            config["output"].update(value)
        else:
            config[key] = value

    if "IFACE_SOURCE_PATH" in os.environ:
        config["source"] = os.environ["IFACE_SOURCE_PATH"]

    if "IFACE_POLL_INTERVAL" in os.environ:
        try:
            config["poll_interval_sec"] = float(os.environ["IFACE_POLL_INTERVAL"])
        except ValueError:
            log.warning("invalid IFACE_POLL_INTERVAL value: %s", os.environ["IFACE_POLL_INTERVAL"])

    if "IFACE_OUTPUT_PATH" in os.environ:
        config["output"]["path"] = os.environ["IFACE_OUTPUT_PATH"]

    if "IFACE_LOG_LEVEL" in os.environ:
        config["log_level"] = os.environ["IFACE_LOG_LEVEL"]

    return config

def resolve_log_level(name: Any) -> int:
    """
    Map a level name (e.g. 'debug') to its logging level, INFO when unknown.
    """
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        log.warning("invalid log_level value: %s, using INFO", name)
        return logging.INFO
    return level

def run_cycle(plugin: IfacePlugin, sink: JsonSink) -> int:
    """
    Discover every metric, collect it and write the values to the sink.

    Returns:
        Number of metrics written
    """
    types = plugin.get_metric_types()
    metrics = plugin.collect_metrics(types)
    return sink.write(metrics)

def main(argv: List[str] | None = None) -> int:
    """
    Run the collector until interrupted.

    Each tick re-discovers the available metrics (interfaces come and go),
    collects them and appends one NDJSON record per metric.
    """
    parser = argparse.ArgumentParser(description=f"{META.name} collector (v{META.version})")
    parser.add_argument("--config", default="config.yml", help="YAML configuration file")
    parser.add_argument("--once", action="store_true", help="Collect a single cycle and exit")
    args = parser.parse_args(argv)

    cfg = load_config(args.config)
    logging.basicConfig(
        level=resolve_log_level(cfg["log_level"]),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    plugin = new(cfg["source"])
    if plugin is None:
        log.error("interface statistics source %s is not readable", cfg["source"])
        return 1

    sink = JsonSink(cfg["output"]["path"])
    interval = float(cfg["poll_interval_sec"])

    try:
        while True:
            written = run_cycle(plugin, sink)
            log.debug("wrote %d metrics", written)
            if args.once:
                return 0
            time.sleep(interval)
    except KeyboardInterrupt:
        return 0

if __name__ == "__main__":
    sys.exit(main())
