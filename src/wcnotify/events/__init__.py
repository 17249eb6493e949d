#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""wcnotify Events Package.

Event records produced by a version-control client and consumed by the
update event handler."""

from wcnotify.events.base import BaseEvent
from wcnotify.events.notify import event_from_notification
from wcnotify.events.update import ChangeQueueEntry, UpdateEvent

__all__ = [
    "BaseEvent",
    "ChangeQueueEntry",
    "UpdateEvent",
    "event_from_notification",
]

# 🔼⚙️🔚
