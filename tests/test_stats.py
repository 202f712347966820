from __future__ import annotations

import pytest

from core.errors import FormatError
from core.stats import StatsStore
from tests.samples import ETH0, LO, net_dev


def test_refresh_end_to_end() -> None:
    store = StatsStore()

    warnings = store.refresh(net_dev(ETH0))

    assert warnings == []
    assert store.as_dict() == {"eth0": {
        "bytes_recv": 100, "packets_recv": 10, "errs_recv": 0, "drop_recv": 0,
        "fifo_recv": 0, "frame_recv": 0, "compressed_recv": 0, "multicast_recv": 0,
        "bytes_sent": 200, "packets_sent": 20, "errs_sent": 0, "drop_sent": 0,
        "fifo_sent": 0, "frame_sent": 0, "compressed_sent": 0, "multicast_sent": 0,
    }}


def test_refresh_is_idempotent() -> None:
    store = StatsStore()
    content = net_dev(LO, ETH0)

    store.refresh(content)
    first = store.as_dict()
    store.refresh(content)

    assert store.as_dict() == first


def test_refresh_overwrites_interface_and_keeps_stale_ones() -> None:
    store = StatsStore()
    store.refresh(net_dev(LO, ETH0))

    store.refresh(net_dev("  eth0: 500 50 1 0 0 0 0 0 600 60 0 0 0 0 0 0"))

    assert store.lookup("eth0", "bytes_recv") == 500
    assert store.lookup("eth0", "errs_recv") == 1
    assert store.lookup("eth0", "packets_sent") == 60
    assert store.lookup("lo", "bytes_recv") == 1
    assert store.interfaces() == ["lo", "eth0"]


def test_refresh_returns_sentinel_warnings() -> None:
    store = StatsStore()

    warnings = store.refresh(net_dev("  eth0: 100 10 0 0 0 0 0 0 bogus 20 0 0 0 0 0 0"))

    assert store.lookup("eth0", "bytes_sent") == -1
    assert [(w.iface, w.stat, w.raw) for w in warnings] == [("eth0", "bytes_sent", "bogus")]


def test_refresh_stops_at_malformed_line() -> None:
    store = StatsStore()

    with pytest.raises(FormatError):
        store.refresh(net_dev(
            LO,
            "  eth0: 100 10 0 0 0 0 0 0 200 20 0 0 0 0 0 0 7",
            "  eth1: 1 1 0 0 0 0 0 0 1 1 0 0 0 0 0 0",
        ))

    assert "lo" in store
    assert "eth0" not in store
    assert "eth1" not in store
    assert len(store) == 1


def test_lookup_unknown_keys() -> None:
    store = StatsStore()
    store.refresh(net_dev(ETH0))

    assert store.lookup("eth1", "bytes_recv") is None
    assert store.lookup("eth0", "colls_sent") is None
