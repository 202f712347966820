from __future__ import annotations
import os
from typing import List, Sequence, Tuple

from core.errors import FormatError
from core.stats import StatsStore

VENDOR = "intel"
FS = "procfs"
PLUGIN = "iface"

PREFIX: Tuple[str, ...] = (VENDOR, FS, PLUGIN)
NAMESPACE_LENGTH = 5

Namespace = Tuple[str, ...]

def enumerate_namespaces(store: StatsStore) -> List[Namespace]:
    """
    Flatten the store into one namespace per statistic.

    Returns:
        Namespaces of the form (intel, procfs, iface, <interface>, <stat>),
        in the store's insertion order.
    """
    return [PREFIX + (iface, stat) for iface, stat, _ in store.items()]

def resolve(store: StatsStore, namespace: Sequence[str]) -> int | None:
    """
    Resolve a namespace to its current value.

    Args:
        store: Refreshed statistics store
        namespace: Full namespace, at least 5 segments

    Returns:
        The statistic value, or None when the path does not name a statistic.

    Raises:
        FormatError: if the namespace has fewer than 5 segments
    """
    if len(namespace) < NAMESPACE_LENGTH:
        raise FormatError(f"Namespace length is too short (len = {len(namespace)})")
    tail = namespace[len(PREFIX):]
    # a value is a leaf, nothing below it resolves
    if len(tail) != 2:
        return None
    return store.lookup(tail[0], tail[1])

def to_path(namespace: Sequence[str], sep: str = os.sep) -> str:
    return sep.join(namespace)
