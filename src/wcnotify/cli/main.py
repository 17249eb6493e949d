#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""wcnotify command line entry point."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from provide.foundation.cli.decorators import logging_options
from provide.foundation.logger import get_logger
from structlog.typing import FilteringBoundLogger as StructLogger

from wcnotify import __version__
from wcnotify.changes import InMemoryChangeQueue
from wcnotify.config import ConfigurationError, load_config
from wcnotify.engines.git import GitUpdateReplayer
from wcnotify.errors import CancelledOperation, ReplayError
from wcnotify.handler import UpdateEventHandler
from wcnotify.output import sink_from_config

log: StructLogger = get_logger(__name__)


@click.group()
@click.version_option(__version__, prog_name="wcnotify")
def cli():
    """wcnotify: report working-copy updates as status lines."""


@cli.command(name="replay")
@click.argument(
    "repo_path",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.argument("old_rev")
@click.argument("new_rev")
@click.option(
    "-c",
    "--config-path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
    default=None,
    envvar="WCNOTIFY_CONF",
    help="Path to a TOML file with a [reporter] table (env var WCNOTIFY_CONF).",
    show_envvar=True,
)
@logging_options
@click.pass_context
def replay_command(
    ctx: click.Context,
    repo_path: Path,
    old_rev: str,
    new_rev: str,
    config_path: Path | None,
    **kwargs,
):
    """Report the changes between two git revisions as update status lines.

    REPO_PATH: Git working copy to read revisions from

    Example:
        wcnotify replay . HEAD~3 HEAD
    """
    try:
        config = load_config(config_path)
        queue = InMemoryChangeQueue(maxlen=config.queue_maxlen)
        handler = UpdateEventHandler(queue, sink_from_config(config), markup=config.markup)

        GitUpdateReplayer().replay(repo_path, old_rev, new_rev, handler)

        entries = queue.drain()
        click.echo(f"{len(entries)} file change(s) queued for processing")
    except (ConfigurationError, ReplayError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)
    except CancelledOperation:
        click.echo("⚠️  Replay cancelled", err=True)
        sys.exit(130)
    except Exception as e:
        log.exception("Replay failed", repo_path=str(repo_path))
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()

# 🔼⚙️🔚
