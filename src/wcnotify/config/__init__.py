#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Configuration module for wcnotify."""

from __future__ import annotations

from wcnotify.config.models import ReporterConfig, load_config
from wcnotify.errors import ConfigurationError

__all__ = [
    "ConfigurationError",
    "ReporterConfig",
    "load_config",
]

# 🔼⚙️🔚
