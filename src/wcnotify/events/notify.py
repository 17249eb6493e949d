#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Conversion of notify-callback mappings into UpdateEvent records.

Subversion client bindings deliver notifications as a dict with keys such as
``action``, ``path``, ``revision``, ``content_state``, ``prop_state`` and
``lock_state``. Values are binding-specific enum objects whose ``str()`` is
the lowercase state name, so conversion works on names only and never needs
the binding itself to be importable.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from wcnotify.events.update import UpdateEvent
from wcnotify.types import ContentStatus, EventAction, LockStatus, coerce_enum

# Binding names that differ from our own value names.
ACTION_ALIASES = {
    "failed_lock": EventAction.LOCK_FAILED,
    "failed_unlock": EventAction.UNLOCK_FAILED,
}

CONTENT_ALIASES = {
    "missing": ContentStatus.UNKNOWN,
    "obstructed": ContentStatus.UNKNOWN,
}

# A lock reported as "unlocked" during an update was broken by someone else.
LOCK_ALIASES = {
    "unlocked": LockStatus.BROKEN,
}


def _revision_number(value: Any) -> int | str | None:
    # Binding revision objects expose the number as an attribute.
    number = getattr(value, "number", value)
    if number is None or isinstance(number, int | str):
        return number
    return str(number)


def event_from_notification(notification: Mapping[str, Any]) -> UpdateEvent:
    """Build an UpdateEvent from a notify-callback mapping."""
    return UpdateEvent(
        action=coerce_enum(notification.get("action"), EventAction, EventAction.UNKNOWN, ACTION_ALIASES),
        path=notification.get("path") or "",
        url=notification.get("url"),
        revision=_revision_number(notification.get("revision")),
        content_status=coerce_enum(
            notification.get("content_state"), ContentStatus, ContentStatus.UNKNOWN, CONTENT_ALIASES
        ),
        property_status=coerce_enum(
            notification.get("prop_state"), ContentStatus, ContentStatus.UNKNOWN, CONTENT_ALIASES
        ),
        lock_status=coerce_enum(notification.get("lock_state"), LockStatus, LockStatus.UNKNOWN, LOCK_ALIASES),
    )


# 🔼⚙️🔚
