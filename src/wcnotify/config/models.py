#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Reporter configuration model and TOML loader."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import attrs
from provide.foundation.logger import get_logger

from wcnotify.errors import ConfigurationError

log = get_logger(__name__)

SINK_CHOICES = ("console", "log")


def _positive(instance: Any, attribute: attrs.Attribute, value: int | None) -> None:
    if value is not None and value <= 0:
        raise ValueError(f"'{attribute.name}' must be a positive integer, got {value}")


@attrs.define(frozen=True)
class ReporterConfig:
    """How status lines are written and how many changes may be queued."""

    sink: str = attrs.field(default="console", validator=attrs.validators.in_(SINK_CHOICES))
    markup: bool = attrs.field(default=True, validator=attrs.validators.instance_of(bool))
    queue_maxlen: int | None = attrs.field(
        default=None,
        validator=attrs.validators.optional([attrs.validators.instance_of(int), _positive]),
    )


def load_config(config_path: Path | None) -> ReporterConfig:
    """Load a ReporterConfig from the ``[reporter]`` table of a TOML file.

    Returns the defaults when no path is given.
    """
    if config_path is None:
        return ReporterConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {config_path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {config_path}: {e}") from e

    section = data.get("reporter", {})
    if not isinstance(section, dict):
        raise ConfigurationError(f"[reporter] in {config_path} must be a table")

    unknown = set(section) - {a.name for a in attrs.fields(ReporterConfig)}
    if unknown:
        raise ConfigurationError(f"Unknown reporter settings in {config_path}: {', '.join(sorted(unknown))}")

    try:
        config = ReporterConfig(**section)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid reporter configuration in {config_path}: {e}") from e

    log.debug("Reporter configuration loaded", path=str(config_path), sink=config.sink)
    return config


# 🔼⚙️🔚
