#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures for wcnotify tests."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from wcnotify.changes import InMemoryChangeQueue
from wcnotify.handler import UpdateEventHandler
from wcnotify.output import BufferSink


@pytest.fixture
def sink() -> BufferSink:
    """Sink capturing every written line."""
    return BufferSink()


@pytest.fixture
def queue() -> InMemoryChangeQueue:
    """Unbounded in-memory change queue."""
    return InMemoryChangeQueue()


@pytest.fixture
def handler(queue: InMemoryChangeQueue, sink: BufferSink) -> UpdateEventHandler:
    """Handler wired to the capturing sink and in-memory queue."""
    return UpdateEventHandler(queue, sink)


def _git(repo_path: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo_path, check=True, capture_output=True)


@pytest.fixture
def git(temp_git_repo: Path):
    """Run a git command inside the temporary repository."""

    def run(*args: str) -> None:
        _git(temp_git_repo, *args)

    return run


@pytest.fixture
def temp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git repository with one initial commit."""
    repo_path = tmp_path / "test_repo"
    repo_path.mkdir()

    try:
        subprocess.run(["git", "--version"], check=True, capture_output=True, text=True)
    except (subprocess.CalledProcessError, FileNotFoundError) as e:
        pytest.skip(f"Git is not available or `git --version` failed: {e}")

    _git(repo_path, "init")
    # Configure Git user for testing (disable GPG signing to avoid issues)
    _git(repo_path, "config", "user.name", "wcnotify Test Bot")
    _git(repo_path, "config", "user.email", "test@wcnotify.example.com")
    _git(repo_path, "config", "commit.gpgsign", "false")

    (repo_path / "README.md").write_text("initial commit")
    (repo_path / "notes.txt").write_text("first draft\n")
    (repo_path / "obsolete.txt").write_text("to be removed\n")
    _git(repo_path, "add", ".")
    _git(repo_path, "commit", "-m", "Initial commit")
    return repo_path


# 🔼⚙️🔚
