from __future__ import annotations
from typing import Dict, Iterator, List, Tuple

from collectors.proc_net_dev import ValueParseWarning, parse_rows

class StatsStore:
    """
    Interface statistics keyed by interface name, then statistic name.

    Rebuilt on every refresh by overwriting one interface at a time.
    Interfaces that disappear from the table keep their last values.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._stats: Dict[str, Dict[str, int]] = {}

    def refresh(self, content: str) -> List[ValueParseWarning]:
        """
        Apply a freshly read interface table.

        Args:
            content: Full text of the interface statistics file

        Returns:
            Values that failed to parse during this cycle (stored as -1).

        Raises:
            FormatError: on a malformed header or data line. Interfaces from
            lines before the failing one are already updated.
        """
        warnings: List[ValueParseWarning] = []
        for row in parse_rows(content):
            self._stats[row.iface] = row.stats
            warnings.extend(row.warnings)
        return warnings

    def lookup(self, iface: str, stat: str) -> int | None:
        """Return the value of one statistic, None when either key is unknown."""
        istats = self._stats.get(iface)
        if istats is None:
            return None
        return istats.get(stat)

    def interfaces(self) -> List[str]:
        return list(self._stats)

    def items(self) -> Iterator[Tuple[str, str, int]]:
        """Yield (interface, statistic, value) for every leaf in insertion order."""
        for iface, istats in self._stats.items():
            for stat, value in istats.items():
                yield iface, stat, value

    def as_dict(self) -> Dict[str, Dict[str, int]]:
        return {iface: dict(istats) for iface, istats in self._stats.items()}

    def __contains__(self, iface: object) -> bool:
        return iface in self._stats

    def __len__(self) -> int:
        return len(self._stats)
