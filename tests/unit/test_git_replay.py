#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for replaying git revision ranges as update events."""

import subprocess
from pathlib import Path

import pygit2
import pytest
from provide.testkit.mocking import Mock

from wcnotify.cancellation import CancellationFlag
from wcnotify.changes import InMemoryChangeQueue
from wcnotify.engines.git import GitUpdateReplayer
from wcnotify.errors import CancelledOperation, ReplayError
from wcnotify.handler import UpdateEventHandler
from wcnotify.output import BufferSink
from wcnotify.types import ContentStatus, EventAction

GAP = " " * 7


@pytest.fixture
def replayer() -> GitUpdateReplayer:
    return GitUpdateReplayer()


@pytest.fixture
def changed_repo(temp_git_repo: Path, git) -> Path:
    """Second commit adding, modifying and deleting one file each."""
    (temp_git_repo / "added.txt").write_text("brand new\n")
    (temp_git_repo / "notes.txt").write_text("first draft\nsecond thoughts\n")
    (temp_git_repo / "obsolete.txt").unlink()
    git("add", "-A")
    git("commit", "-m", "Second commit")
    return temp_git_repo


def workdir_of(repo_path: Path) -> Path:
    return Path(pygit2.Repository(str(repo_path)).workdir)


class TestGitUpdateReplayer:
    def test_replay_reports_each_change(self, replayer, changed_repo) -> None:
        listener = Mock()

        delivered = replayer.replay(changed_repo, "HEAD~1", "HEAD", listener)

        assert delivered == 3
        events = [call.args[0] for call in listener.handle_event.call_args_list]
        by_name = {event.path.name: event for event in events[:-1]}
        assert by_name["added.txt"].action is EventAction.UPDATE_ADD
        assert by_name["obsolete.txt"].action is EventAction.UPDATE_DELETE
        assert by_name["notes.txt"].action is EventAction.UPDATE_UPDATE
        assert by_name["notes.txt"].content_status is ContentStatus.CHANGED
        assert all(event.source == "git" for event in events)

    def test_replay_finishes_with_completed_event(self, replayer, changed_repo) -> None:
        listener = Mock()
        head = str(pygit2.Repository(str(changed_repo)).head.target)

        replayer.replay(changed_repo, "HEAD~1", "HEAD", listener)

        completed = listener.handle_event.call_args_list[-1].args[0]
        assert completed.action is EventAction.UPDATE_COMPLETED
        assert completed.revision == head[:7]
        assert completed.path == workdir_of(changed_repo)

    def test_cancellation_polled_before_every_event(self, replayer, changed_repo) -> None:
        listener = Mock()

        replayer.replay(changed_repo, "HEAD~1", "HEAD", listener)

        assert listener.check_cancelled.call_count == listener.handle_event.call_count == 4

    def test_cancellation_stops_replay(self, replayer, changed_repo) -> None:
        flag = CancellationFlag()
        flag.cancel()
        queue = InMemoryChangeQueue()
        sink = BufferSink()
        handler = UpdateEventHandler(queue, sink, is_cancelled=flag)

        with pytest.raises(CancelledOperation):
            replayer.replay(changed_repo, "HEAD~1", "HEAD", handler)

        assert sink.lines == []
        assert len(queue) == 0

    def test_replay_through_handler(self, replayer, changed_repo) -> None:
        queue = InMemoryChangeQueue()
        sink = BufferSink()
        handler = UpdateEventHandler(queue, sink)
        workdir = workdir_of(changed_repo)

        replayer.replay(changed_repo, "HEAD~1", "HEAD", handler)

        assert sorted(sink.lines[:-1]) == sorted(
            [
                f"A  {GAP}{workdir / 'added.txt'}",
                f"U  {GAP}{workdir / 'notes.txt'}",
                f"D  {GAP}{workdir / 'obsolete.txt'}",
            ]
        )
        assert sink.lines[-1].startswith("At revision ")
        assert sorted(entry.path.name for entry in queue.drain()) == ["added.txt", "notes.txt", "obsolete.txt"]

    def test_rename_is_delete_then_add(self, replayer, temp_git_repo, git) -> None:
        git("mv", "notes.txt", "renamed.txt")
        git("commit", "-m", "Rename")
        listener = Mock()

        replayer.replay(temp_git_repo, "HEAD~1", "HEAD", listener)

        events = [call.args[0] for call in listener.handle_event.call_args_list]
        assert [(e.action, e.path.name) for e in events[:-1]] == [
            (EventAction.UPDATE_DELETE, "notes.txt"),
            (EventAction.UPDATE_ADD, "renamed.txt"),
        ]

    def test_identical_revisions_only_complete(self, replayer, temp_git_repo) -> None:
        listener = Mock()

        assert replayer.replay(temp_git_repo, "HEAD", "HEAD", listener) == 0
        assert listener.handle_event.call_count == 1

    def test_unknown_revision(self, replayer, temp_git_repo) -> None:
        with pytest.raises(ReplayError, match="no-such-rev") as exc_info:
            replayer.replay(temp_git_repo, "no-such-rev", "HEAD", Mock())

        assert exc_info.value.revision == "no-such-rev"

    def test_not_a_repository(self, replayer, tmp_path) -> None:
        plain_dir = tmp_path / "plain"
        plain_dir.mkdir()

        with pytest.raises(ReplayError, match="Not a git repository"):
            replayer.replay(plain_dir, "HEAD~1", "HEAD", Mock())

    def test_merge_conflict_reported_as_conflicted(self, replayer, temp_git_repo, git) -> None:
        git("checkout", "-b", "side")
        (temp_git_repo / "notes.txt").write_text("side branch edit\n")
        git("commit", "-am", "Edit notes on side")
        git("checkout", "-")
        (temp_git_repo / "notes.txt").write_text("main branch edit\n")
        git("commit", "-am", "Edit notes on main")
        merge = subprocess.run(["git", "merge", "side"], cwd=temp_git_repo, capture_output=True)
        assert merge.returncode != 0

        queue = InMemoryChangeQueue()
        sink = BufferSink()
        workdir = workdir_of(temp_git_repo)

        replayer.replay(temp_git_repo, "HEAD~1", "HEAD", UpdateEventHandler(queue, sink))

        assert sink.lines[:3] == [
            "[red]There are unresolved conflicts for notes.txt[/red]",
            "Resolve them manually and perform another update.",
            f"C  {GAP}{workdir / 'notes.txt'}",
        ]
        assert sink.lines[3].startswith("At revision ")
        entries = queue.drain()
        assert [entry.path for entry in entries] == [workdir / "notes.txt"]
        assert entries[0].event.content_status is ContentStatus.CONFLICTED
        assert replayer.conflicted_paths(pygit2.Repository(str(temp_git_repo))) == {"notes.txt"}

    def test_conflicted_paths_empty_for_clean_index(self, replayer, temp_git_repo) -> None:
        repo = pygit2.Repository(str(temp_git_repo))

        assert replayer.conflicted_paths(repo) == set()


# 🔼⚙️🔚
