#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Cancellation predicates polled between per-path events."""

from __future__ import annotations

import threading
from collections.abc import Callable

CancellationCheck = Callable[[], bool]


def never_cancelled() -> bool:
    """Default predicate: operations are never interrupted."""
    return False


class CancellationFlag:
    """Thread-safe flag usable as a cancellation predicate.

    A host sets the flag from any thread; the handler only observes it
    between events, never while a single event is being formatted.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def __call__(self) -> bool:
        return self._event.is_set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def reset(self) -> None:
        self._event.clear()


# 🔼⚙️🔚
