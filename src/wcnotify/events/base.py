#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Base event type shared by all wcnotify events."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import attrs


@attrs.define(frozen=True, kw_only=True)
class BaseEvent:
    """Immutable event carrying a timestamp, its source and a description."""

    timestamp: datetime = attrs.field(factory=datetime.now)
    source: str = attrs.field(default="wcnotify")
    description: str = attrs.field(default="")
    metadata: dict[str, Any] = attrs.field(factory=dict)

    def format(self) -> str:
        """Format the event as a single display line."""
        time_str = self.timestamp.strftime("%H:%M:%S")
        return f"[{time_str}] [{self.source}] {self.description}"


# 🔼⚙️🔚
