#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Line-oriented output sinks for update status lines."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from provide.foundation.logger import get_logger
from rich.console import Console
from rich.text import Text

if TYPE_CHECKING:
    from wcnotify.config.models import ReporterConfig

log = get_logger(__name__)


class OutputSink(Protocol):
    """Append-only destination for formatted lines.

    Lines are Rich markup whenever the handler writing them has ``markup``
    enabled: conflict warnings are wrapped in ``[red]...[/red]`` and every
    path, URL and revision in any line is passed through
    ``rich.markup.escape``, so a tag-like ``[abc]`` in a path arrives as
    ``\\[abc]``. Sinks that do not render markup should be paired with a
    handler built with ``markup=False`` to receive the literal text.
    """

    def write_line(self, text: str) -> None:
        """Write one line. Text may carry Rich markup, e.g. ``[red]...[/red]``."""
        ...


class ConsoleSink:
    """Writes lines to a Rich console, rendering markup when enabled."""

    def __init__(self, console: Console | None = None, markup: bool = True) -> None:
        self._console = console or Console()
        self._markup = markup

    @property
    def console(self) -> Console:
        return self._console

    def write_line(self, text: str) -> None:
        self._console.print(text, markup=self._markup, highlight=False, soft_wrap=True)


class LoggerSink:
    """Forwards lines to the structured logger with markup stripped."""

    def __init__(self, logger: Any | None = None, markup: bool = True) -> None:
        self._log = logger or log.bind(sink="status")
        self._markup = markup

    def write_line(self, text: str) -> None:
        plain = Text.from_markup(text).plain if self._markup else text
        self._log.info(plain)


class BufferSink:
    """Collects lines in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)

    def clear(self) -> None:
        self.lines.clear()


def sink_from_config(config: ReporterConfig, console: Console | None = None) -> OutputSink:
    """Create the sink selected by the reporter configuration."""
    if config.sink == "log":
        return LoggerSink(markup=config.markup)
    return ConsoleSink(console=console, markup=config.markup)


# 🔼⚙️🔚
