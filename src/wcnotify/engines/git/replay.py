#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Replays the difference between two git revisions as update events."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pygit2
from provide.foundation.logger import get_logger

from wcnotify.errors import ReplayError
from wcnotify.events.update import UpdateEvent
from wcnotify.handler import UpdateEventListener
from wcnotify.types import ContentStatus, EventAction

log = get_logger(__name__)

SHORT_HASH_LENGTH = 7

_UPDATED_DELTAS = frozenset({pygit2.GIT_DELTA_MODIFIED, pygit2.GIT_DELTA_TYPECHANGE})


class GitUpdateReplayer:
    """Drives an update event listener from a pygit2 tree diff.

    Each changed path becomes one event, delivered in diff order. The
    listener's cancellation check runs before every event, and a final
    update-completed event carries the short hash of the target revision.
    """

    def __init__(self) -> None:
        self._log = log.bind(replayer_id=id(self))

    def get_repo(self, repo_path: Path) -> pygit2.Repository:
        try:
            return pygit2.Repository(str(repo_path))
        except pygit2.GitError as e:
            self._log.error("Failed to open Git repository", path=str(repo_path), error=str(e))
            raise ReplayError(f"Not a git repository: {repo_path}", str(repo_path)) from e

    def resolve_commit(self, repo: pygit2.Repository, revision: str) -> pygit2.Commit:
        try:
            return repo.revparse_single(revision).peel(pygit2.Commit)
        except (KeyError, ValueError, pygit2.GitError) as e:
            raise ReplayError(f"Cannot resolve revision '{revision}'", str(repo.path), revision) from e

    def conflicted_paths(self, repo: pygit2.Repository) -> set[str]:
        """Paths with unresolved merge conflicts in the index."""
        conflicts = repo.index.conflicts
        if conflicts is None:
            return set()
        paths = set()
        for ancestor, ours, theirs in conflicts:
            entry = ours or theirs or ancestor
            if entry is not None:
                paths.add(entry.path)
        return paths

    def iter_events(
        self, diff: pygit2.Diff, workdir: Path, conflicted: set[str], revision: str
    ) -> Iterator[UpdateEvent]:
        for delta in diff.deltas:
            if delta.status == pygit2.GIT_DELTA_ADDED:
                yield self._event(EventAction.UPDATE_ADD, workdir / delta.new_file.path, revision)
            elif delta.status == pygit2.GIT_DELTA_DELETED:
                yield self._event(EventAction.UPDATE_DELETE, workdir / delta.old_file.path, revision)
            elif delta.status == pygit2.GIT_DELTA_RENAMED:
                yield self._event(EventAction.UPDATE_DELETE, workdir / delta.old_file.path, revision)
                yield self._event(EventAction.UPDATE_ADD, workdir / delta.new_file.path, revision)
            elif delta.status in _UPDATED_DELTAS:
                status = (
                    ContentStatus.CONFLICTED if delta.new_file.path in conflicted else ContentStatus.CHANGED
                )
                yield self._event(
                    EventAction.UPDATE_UPDATE,
                    workdir / delta.new_file.path,
                    revision,
                    content_status=status,
                    property_status=ContentStatus.UNCHANGED,
                )

    def replay(self, repo_path: Path, old_rev: str, new_rev: str, listener: UpdateEventListener) -> int:
        """Deliver one event per changed path between two revisions.

        Returns:
            Number of per-path events delivered, excluding the completion event

        Raises:
            ReplayError: If the repository or a revision cannot be resolved
            CancelledOperation: If the listener reports cancellation
        """
        repo = self.get_repo(repo_path)
        old_commit = self.resolve_commit(repo, old_rev)
        new_commit = self.resolve_commit(repo, new_rev)
        short_hash = str(new_commit.id)[:SHORT_HASH_LENGTH]
        workdir = Path(repo.workdir) if repo.workdir else Path(repo_path)

        try:
            diff = repo.diff(old_commit.tree, new_commit.tree)
            diff.find_similar(flags=pygit2.GIT_DIFF_FIND_RENAMES)
        except pygit2.GitError as e:
            self._log.error("Failed to diff revisions", old=old_rev, new=new_rev, error=str(e))
            raise ReplayError(f"Cannot diff {old_rev}..{new_rev}: {e}", str(repo_path)) from e

        self._log.info("Replaying revision range", path=str(workdir), old=old_rev, new=new_rev)

        delivered = 0
        for event in self.iter_events(diff, workdir, self.conflicted_paths(repo), short_hash):
            listener.check_cancelled()
            listener.handle_event(event)
            delivered += 1

        listener.check_cancelled()
        listener.handle_event(self._event(EventAction.UPDATE_COMPLETED, workdir, short_hash))

        self._log.info("Replay completed", events=delivered, revision=short_hash)
        return delivered

    @staticmethod
    def _event(action: EventAction, path: Path, revision: str, **statuses: ContentStatus) -> UpdateEvent:
        return UpdateEvent(action=action, path=path, revision=revision, source="git", **statuses)


# 🔼⚙️🔚
