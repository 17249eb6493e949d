#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Update events reported by a version-control client, one per touched path."""

from __future__ import annotations

from pathlib import Path

import attrs

from wcnotify.events.base import BaseEvent
from wcnotify.types import (
    MUTATING_ACTIONS,
    ContentStatus,
    EventAction,
    LockStatus,
    to_action,
    to_content_status,
    to_lock_status,
)

# Content outcomes of an update that rewrote the file on disk.
_MUTATING_CONTENT = frozenset({ContentStatus.CHANGED, ContentStatus.CONFLICTED, ContentStatus.MERGED})


@attrs.define(frozen=True, kw_only=True)
class UpdateEvent(BaseEvent):
    """Outcome of one version-control operation for one path.

    Action and status fields only ever hold enum members: names and binding
    enum objects are converted, anything unrecognised becomes ``UNKNOWN``.
    """

    source: str = attrs.field(default="wc")
    action: EventAction = attrs.field(default=EventAction.UNKNOWN, converter=to_action)
    path: Path = attrs.field(converter=Path)
    url: str | None = attrs.field(default=None)
    revision: int | str | None = attrs.field(default=None)
    content_status: ContentStatus = attrs.field(default=ContentStatus.INAPPLICABLE, converter=to_content_status)
    property_status: ContentStatus = attrs.field(default=ContentStatus.INAPPLICABLE, converter=to_content_status)
    lock_status: LockStatus = attrs.field(default=LockStatus.INAPPLICABLE, converter=to_lock_status)

    @property
    def is_mutation(self) -> bool:
        """True when the event stands for a change to the working copy's files."""
        if self.action in MUTATING_ACTIONS:
            return True
        return self.action is EventAction.UPDATE_UPDATE and self.content_status in _MUTATING_CONTENT

    @property
    def display_target(self) -> str:
        """The remote URL when known, otherwise the local path."""
        return self.url if self.url is not None else str(self.path)

    def format(self) -> str:
        time_str = self.timestamp.strftime("%H:%M:%S")
        return f"[{time_str}] [{self.source}] {self.action.value} {self.display_target}"


@attrs.define(frozen=True)
class ChangeQueueEntry:
    """A file change waiting for downstream batch processing."""

    path: Path = attrs.field(converter=Path)
    event: UpdateEvent


# 🔼⚙️🔚
