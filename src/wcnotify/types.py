#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Closed enumerations describing a working-copy notification."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from provide.foundation.logger import get_logger

log = get_logger(__name__)

E = TypeVar("E", bound=Enum)


class EventAction(Enum):
    """What happened to a path during a version-control operation.

    ``UPDATE_ADD`` and ``ADD`` are kept apart even though both are reported as
    additions: the first is an add received during an update, the second an
    explicit add scheduled against the working copy.
    """

    UPDATE_ADD = "update_add"
    UPDATE_DELETE = "update_delete"
    UPDATE_UPDATE = "update_update"
    UPDATE_EXTERNAL = "update_external"
    UPDATE_COMPLETED = "update_completed"
    UPDATE_NONE = "update_none"
    ADD = "add"
    DELETE = "delete"
    LOCKED = "locked"
    LOCK_FAILED = "lock_failed"
    UNLOCKED = "unlocked"
    UNLOCK_FAILED = "unlock_failed"
    RESTORE = "restore"
    REVERT = "revert"
    SKIP = "skip"
    UNKNOWN = "unknown"


class ContentStatus(Enum):
    """State of a path's content (or properties) after an operation."""

    INAPPLICABLE = "inapplicable"
    UNKNOWN = "unknown"
    UNCHANGED = "unchanged"
    CHANGED = "changed"
    CONFLICTED = "conflicted"
    MERGED = "merged"


class LockStatus(Enum):
    """State of the repository lock held against a path."""

    INAPPLICABLE = "inapplicable"
    UNKNOWN = "unknown"
    UNCHANGED = "unchanged"
    LOCKED = "locked"
    BROKEN = "broken"


# Actions whose outcome is an actual filesystem mutation in the working copy.
MUTATING_ACTIONS = frozenset(
    {
        EventAction.UPDATE_ADD,
        EventAction.UPDATE_DELETE,
        EventAction.ADD,
        EventAction.DELETE,
    }
)


def _state_name(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value if isinstance(value.value, str) else value.name
    return str(value).strip().lower().rsplit(".", 1)[-1]


def coerce_enum(value: Any, enum_type: type[E], default: E, aliases: Mapping[str, E] | None = None) -> E:
    """Map an enum member, a name or a binding enum object onto ``enum_type``.

    Unrecognised values degrade to ``default`` instead of raising.
    """
    if isinstance(value, enum_type):
        return value
    if value is None:
        return default

    name = _state_name(value)
    if aliases and name in aliases:
        return aliases[name]
    try:
        return enum_type(name)
    except ValueError:
        log.debug("Unrecognised notification value", enum=enum_type.__name__, value=name)
        return default


def to_action(value: Any) -> EventAction:
    return coerce_enum(value, EventAction, EventAction.UNKNOWN)


def to_content_status(value: Any) -> ContentStatus:
    return coerce_enum(value, ContentStatus, ContentStatus.UNKNOWN)


def to_lock_status(value: Any) -> LockStatus:
    return coerce_enum(value, LockStatus, LockStatus.UNKNOWN)


# 🔼⚙️🔚
