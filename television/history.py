"""Search history with navigation scoped to a channel or across all channels."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from television.history_entry import HistoryEntry, dump_entries, load_entries

__all__ = ["History", "DEFAULT_HISTORY_SIZE", "HISTORY_FILE_NAME"]

HISTORY_FILE_NAME = "history.json"
DEFAULT_HISTORY_SIZE = 200

_log = logging.getLogger(__name__)


class History:
    """Recent queries, persisted to ``history.json`` in a data directory.

    Navigation walks back and forth through entries of the current channel,
    or through every entry when in global mode. A ``max_size`` of zero
    disables loading and saving.
    """

    def __init__(
        self,
        max_size: int,
        channel_name: str,
        global_mode: bool,
        data_dir: str | Path,
    ) -> None:
        self.max_size = max_size
        self.file_path = Path(data_dir) / HISTORY_FILE_NAME
        self.current_channel = channel_name
        self.global_mode = global_mode
        self._entries: list[HistoryEntry] = []
        self._current_index: int | None = None

    def init(self) -> None:
        """Load previously saved entries, keeping only the most recent ones."""
        if self.max_size <= 0:
            return
        if not self.file_path.exists():
            _log.debug("History file not found: %s", self.file_path)
        loaded = load_entries(self.file_path)
        if len(loaded) > self.max_size:
            loaded = loaded[len(loaded) - self.max_size:]
        self._entries = loaded

    def add_entry(self, query: str, channel: str) -> None:
        """Record a query unless it is blank or repeats the last entry."""
        if not query.strip():
            return
        if self._entries:
            last = self._entries[-1]
            if last.query == query and last.channel == channel:
                return
        if len(self._entries) + 1 > self.max_size:
            del self._entries[: len(self._entries) - self.max_size + 1]
        self._entries.append(HistoryEntry(query, channel))
        self._current_index = None

    def _matches(self, entry: HistoryEntry) -> bool:
        return self.global_mode or entry.channel == self.current_channel

    def previous_entry(self) -> HistoryEntry | None:
        """Step back to the previous matching entry, if any."""
        if self._current_index is None:
            search_end = len(self._entries)
        elif self._current_index == 0:
            first = self._entries[0] if self._entries else None
            return first if first is not None and self._matches(first) else None
        else:
            search_end = self._current_index

        for idx in reversed(range(min(search_end, len(self._entries)))):
            entry = self._entries[idx]
            if self._matches(entry):
                self._current_index = idx
                return entry
        return None

    def next_entry(self) -> HistoryEntry | None:
        """Step forward to the next matching entry; past the end, navigation resets."""
        if self._current_index is None:
            return None
        search_start = self._current_index + 1
        if search_start > len(self._entries):
            return None
        for idx in range(search_start, len(self._entries)):
            entry = self._entries[idx]
            if self._matches(entry):
                self._current_index = idx
                return entry
        self._current_index = None
        return None

    def save(self) -> None:
        """Write the entries to the history file."""
        if self.max_size <= 0:
            _log.debug("History is disabled, not saving to file.")
            return
        dump_entries(self._entries, self.file_path)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(list(self._entries))

    def update_channel_context(self, channel_name: str, global_mode: bool) -> None:
        """Switch the channel and mode used for navigation, resetting position."""
        self.current_channel = channel_name
        self.global_mode = global_mode
        self._current_index = None