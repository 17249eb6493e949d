#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Exception hierarchy for wcnotify."""


class WcNotifyError(Exception):
    """Base exception for wcnotify errors."""


class CancelledOperation(WcNotifyError):
    """Raised by a cancellation check when the owning operation was cancelled."""

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)


class ReplayError(WcNotifyError):
    """Raised when a revision range cannot be replayed as update events."""

    def __init__(self, message: str, repo_path: str, revision: str | None = None):
        self.repo_path = repo_path
        self.revision = revision
        super().__init__(message)


class ConfigurationError(WcNotifyError):
    """Raised when reporter configuration is missing or invalid."""


# 🔼⚙️🔚
