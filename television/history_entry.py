"""Search history entries and their JSON file format."""

from __future__ import annotations

import json
import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

__all__ = [
    "HistoryEntry",
    "history_entry_from_dict",
    "load_entries",
    "dump_entries",
]


def _now() -> int:
    return int(time.time())


@dataclass
class HistoryEntry:
    """A query typed in a channel, with the time (in seconds) it was recorded.

    Two entries are equal when their query and channel match; the timestamp
    is not compared.
    """

    query: str
    channel: str
    timestamp: int = field(default_factory=_now, compare=False)

    def to_dict(self) -> dict[str, object]:
        """The entry as stored in the history file."""
        return {
            "query": self.query,
            "channel": self.channel,
            "timestamp": self.timestamp,
        }


def _require(data: Mapping[str, object], name: str) -> object:
    if name not in data:
        raise ValueError(f"missing field `{name}`")
    return data[name]


def history_entry_from_dict(data: Mapping[str, object]) -> HistoryEntry:
    """Build an entry from a mapping as stored in the history file."""
    if not isinstance(data, Mapping):
        raise ValueError(f"invalid history entry: {data!r}")
    query = _require(data, "query")
    channel = _require(data, "channel")
    timestamp = _require(data, "timestamp")
    if not isinstance(query, str):
        raise ValueError(f"invalid value for `query`: {query!r}")
    if not isinstance(channel, str):
        raise ValueError(f"invalid value for `channel`: {channel!r}")
    if isinstance(timestamp, bool) or not isinstance(timestamp, int) or timestamp < 0:
        raise ValueError(f"invalid value for `timestamp`: {timestamp!r}")
    return HistoryEntry(query, channel, timestamp)


def load_entries(path: str | Path) -> list[HistoryEntry]:
    """Read entries from a history file.

    A missing file or one holding only whitespace yields no entries;
    malformed content raises ``ValueError``.
    """
    path = Path(path)
    if not path.exists():
        return []
    content = path.read_text(encoding="utf-8")
    if not content.strip():
        return []
    data = json.loads(content)
    if not isinstance(data, list):
        raise ValueError("history file must hold a list of entries")
    return [history_entry_from_dict(item) for item in data]


def dump_entries(entries: Iterable[HistoryEntry], path: str | Path) -> None:
    """Write entries to a history file, creating its directory if needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps([entry.to_dict() for entry in entries], indent=2)
    path.write_text(content, encoding="utf-8")