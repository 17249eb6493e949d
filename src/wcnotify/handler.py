#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Update event handler turning per-path notifications into status lines.

A version-control client calls ``handle_event`` once for every path it
touches during an update, add, delete or lock operation. Each call writes one
status line (plus, for some actions, auxiliary lines) to the output sink and,
when the event represents a change to the working copy's files, publishes it
to the change queue. Between events the owning operation polls
``check_cancelled``.

Status lines use a fixed three-column prefix::

    GUB       svn://host/repo/foo.txt
    |||
    ||+-- lock label: B when the lock was broken
    |+--- property change: U changed, C conflicted, G merged
    +---- path change: A added, D deleted, U updated, C conflicted, G merged
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from provide.foundation.logger import get_logger
from rich.markup import escape

from wcnotify.cancellation import CancellationCheck, never_cancelled
from wcnotify.changes import ChangeQueue
from wcnotify.errors import CancelledOperation
from wcnotify.events.notify import event_from_notification
from wcnotify.events.update import UpdateEvent
from wcnotify.output.sinks import OutputSink
from wcnotify.types import ContentStatus, EventAction, LockStatus

log = get_logger(__name__)

# --- Status line layout ---
BLANK = " "
PATH_GAP = " " * 7

STATUS_CODES = {
    ContentStatus.CHANGED: "U",
    ContentStatus.CONFLICTED: "C",
    ContentStatus.MERGED: "G",
}
LOCK_LABELS = {
    LockStatus.BROKEN: "B",
}
UPDATE_PATH_CODES = {
    EventAction.UPDATE_ADD: "A",
    EventAction.UPDATE_DELETE: "D",
}

# Repository-side actions report a single prefixed line and stop there.
REPOSITORY_LINE_PREFIXES = {
    EventAction.ADD: "A     ",
    EventAction.DELETE: "D     ",
    EventAction.LOCKED: "L     ",
    EventAction.LOCK_FAILED: "failed to lock    ",
}

CONFLICT_WARNING = "There are unresolved conflicts for {name}"
CONFLICT_ADVICE = "Resolve them manually and perform another update."


class UpdateEventListener(Protocol):
    """Callback surface a version-control operation drives."""

    def handle_event(self, event: UpdateEvent, progress: float | None = None) -> None: ...

    def check_cancelled(self) -> None: ...


class UpdateEventHandler:
    """Formats update events and publishes file changes to a queue."""

    def __init__(
        self,
        queue: ChangeQueue,
        sink: OutputSink,
        *,
        is_cancelled: CancellationCheck = never_cancelled,
        markup: bool = True,
    ) -> None:
        """Initialize the handler.

        Args:
            queue: Receives ``(path, event)`` for every file mutation
            sink: Receives every formatted line
            is_cancelled: Predicate polled by ``check_cancelled``
            markup: Emit Rich markup for conflict warnings and escape
                paths, URLs and revisions in every line. Pass False for
                sinks that do not render markup
        """
        self._queue = queue
        self._sink = sink
        self._is_cancelled = is_cancelled
        self._markup = markup
        self._log = log.bind(handler_id=id(self))

    def __call__(self, notification: Mapping[str, Any]) -> None:
        """Entry point for clients that deliver notifications as mappings."""
        self.handle_event(event_from_notification(notification))

    def check_cancelled(self) -> None:
        """Raise CancelledOperation if the owning operation was cancelled."""
        if self._is_cancelled():
            self._log.info("Operation cancelled between events")
            raise CancelledOperation()

    def handle_event(self, event: UpdateEvent, progress: float | None = None) -> None:
        """Report one path's outcome. ``progress`` is reserved and ignored."""
        action = event.action
        self._log.debug(
            "Handling update event",
            action=str(action),
            path=str(event.path),
            enqueue=event.is_mutation,
        )

        if action is EventAction.UPDATE_EXTERNAL:
            self._write(f"Fetching external item into '{self._text(str(event.path.absolute()))}'")
            self._write(f"External at revision {self._revision(event)}")
            return

        if action is EventAction.UPDATE_COMPLETED:
            self._write(f"At revision {self._revision(event)}")
            return

        if action in REPOSITORY_LINE_PREFIXES:
            self._publish(event)
            self._write(REPOSITORY_LINE_PREFIXES[action] + self._text(event.display_target))
            return

        path_code = self._path_change_code(event)
        self._publish(event)

        property_code = STATUS_CODES.get(event.property_status, BLANK)
        lock_label = LOCK_LABELS.get(event.lock_status, BLANK)
        self._write(path_code + property_code + lock_label + PATH_GAP + self._text(event.display_target))

    def _path_change_code(self, event: UpdateEvent) -> str:
        if event.action in UPDATE_PATH_CODES:
            return UPDATE_PATH_CODES[event.action]
        if event.action is not EventAction.UPDATE_UPDATE:
            return BLANK

        if event.content_status is ContentStatus.CONFLICTED:
            self._write_conflict_warning(event)
        return STATUS_CODES.get(event.content_status, BLANK)

    def _write_conflict_warning(self, event: UpdateEvent) -> None:
        warning = CONFLICT_WARNING.format(name=self._text(event.path.name))
        self._write(f"[red]{warning}[/red]" if self._markup else warning)
        self._write(CONFLICT_ADVICE)

    def _publish(self, event: UpdateEvent) -> None:
        if event.is_mutation:
            self._queue.enqueue(event.path, event)

    def _revision(self, event: UpdateEvent) -> str:
        return "unknown" if event.revision is None else self._text(str(event.revision))

    def _text(self, value: str) -> str:
        return escape(value) if self._markup else value

    def _write(self, line: str) -> None:
        self._sink.write_line(line)


# 🔼⚙️🔚
