#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Change queue receiving file mutations for downstream batch processing."""

from __future__ import annotations

import threading
from collections import deque
from pathlib import Path
from typing import Protocol

from provide.foundation.logger import get_logger

from wcnotify.events.update import ChangeQueueEntry, UpdateEvent

log = get_logger(__name__)


class ChangeQueue(Protocol):
    """Port the update event handler publishes file changes to."""

    def enqueue(self, path: Path, event: UpdateEvent) -> None:
        """Queue a change for later processing. Must not block."""
        ...


class InMemoryChangeQueue:
    """FIFO change queue safe to fill and drain from different threads.

    When ``maxlen`` is set, the oldest entries are discarded once the queue is
    full.
    """

    def __init__(self, maxlen: int | None = None) -> None:
        self._entries: deque[ChangeQueueEntry] = deque(maxlen=maxlen)
        self._lock = threading.Lock()
        self._maxlen = maxlen
        self._log = log.bind(queue_id=id(self))

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @property
    def maxlen(self) -> int | None:
        return self._maxlen

    def enqueue(self, path: Path, event: UpdateEvent) -> None:
        entry = ChangeQueueEntry(path, event)
        with self._lock:
            if self._maxlen is not None and len(self._entries) >= self._maxlen:
                dropped = self._entries[0]
                self._log.warning(
                    "Change queue full, dropping oldest entry",
                    maxlen=self._maxlen,
                    dropped_path=str(dropped.path),
                )
            self._entries.append(entry)

    def snapshot(self) -> list[ChangeQueueEntry]:
        """Return the queued entries without removing them."""
        with self._lock:
            return list(self._entries)

    def drain(self) -> list[ChangeQueueEntry]:
        """Remove and return every queued entry in arrival order."""
        with self._lock:
            entries = list(self._entries)
            self._entries.clear()
        self._log.debug("Change queue drained", count=len(entries))
        return entries


# 🔼⚙️🔚
