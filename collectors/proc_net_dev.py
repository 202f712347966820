from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from core.errors import FormatError

SOURCE = "/proc/net/dev"

MIN_FIELDS = 8
NUM_STATS = 2 * MIN_FIELDS
SENTINEL = -1

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Header:
    """
    Statistic names of the interface table.

    Both lists are built from the same (receive) field list of the header
    line, suffixed with '_recv' and '_sent'. Data lines are read against
    `names` positionally, and only the first 16 columns are kept, so a
    header wider than 8 fields shifts the '_sent' names off their columns.
    """
    recv: List[str]
    sent: List[str]

    @property
    def names(self) -> List[str]:
        return self.recv + self.sent


@dataclass(frozen=True)
class ValueParseWarning:
    """A value that could not be parsed and was stored as the sentinel."""
    iface: str
    stat: str
    raw: str
    value: int = SENTINEL


@dataclass
class Row:
    iface: str
    stats: Dict[str, int]
    warnings: List[ValueParseWarning] = field(default_factory=list)


def read_snapshot(path: str = SOURCE) -> str:
    """
    Read the whole interface statistics file.

    OSError (missing file, permission denied) is not caught here.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def parse_header(line: str) -> Header:
    """
    Parse the column header line, e.g.

        ' face |bytes    packets errs drop fifo frame compressed multicast|bytes ...'

    Only the receive field list is used; it names both value groups.
    """
    parts = line.split("|")
    if len(parts) < 3:
        raise FormatError(f"Wrong header format: {line!r}")

    fields = parts[1].split()
    if len(fields) < MIN_FIELDS:
        raise FormatError(f"Wrong header length. Expected at least {MIN_FIELDS}, got {len(fields)}")

    return Header(
        recv=[f + "_recv" for f in fields],
        sent=[f + "_sent" for f in fields],
    )


def parse_value(raw: str) -> int | None:
    """Parse a base-10 signed 64-bit integer, None if it is not one."""
    if not _INT_RE.fullmatch(raw):
        return None
    v = int(raw)
    if v < INT64_MIN or v > INT64_MAX:
        return None
    return v


def parse_line(line: str, header: Header) -> Row:
    ifdata = line.split(":")
    if len(ifdata) != 2:
        raise FormatError(f"Wrong interface line format: {line!r}")

    iname = ifdata[0].strip()
    ivals = ifdata[1].split()

    expected = len(header.names)
    if len(ivals) != expected:
        raise FormatError(f"Wrong data length for {iname!r}. Expected {expected}, got {len(ivals)}")

    # only the first 16 columns are stored, positionally against the header
    columns = list(zip(header.names, ivals))[:NUM_STATS]

    row = Row(iface=iname, stats={})
    for stat, raw in columns:
        val = parse_value(raw)
        if val is None:
            warning = ValueParseWarning(iface=iname, stat=stat, raw=raw)
            log.warning(
                "Cannot parse %s %s value %r to number, metric value saved as %d",
                iname, stat, raw, SENTINEL,
                extra={"iface": iname, "stat": stat, "raw": raw, "value": SENTINEL},
            )
            row.warnings.append(warning)
            val = SENTINEL
        row.stats[stat] = val
    return row


def parse_rows(content: str) -> Iterator[Row]:
    """
    Parse the interface table, yielding one Row per data line.

    The first line is a title and is skipped. Rows are produced lazily, so a
    FormatError on a line is raised only after every earlier row was yielded.
    """
    lines = content.split("\n")
    if len(lines) < 2:
        raise FormatError(f"Missing header line, got {len(lines)} line(s)")

    header = parse_header(lines[1])

    for line in lines[2:]:
        if line == "":
            continue
        yield parse_line(line, header)
