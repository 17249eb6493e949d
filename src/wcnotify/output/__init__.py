#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Output sinks for status lines."""

from wcnotify.output.sinks import BufferSink, ConsoleSink, LoggerSink, OutputSink, sink_from_config

__all__ = [
    "BufferSink",
    "ConsoleSink",
    "LoggerSink",
    "OutputSink",
    "sink_from_config",
]

# 🔼⚙️🔚
