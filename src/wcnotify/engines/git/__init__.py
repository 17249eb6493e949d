#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Git engine driving update events from pygit2 diffs."""

from .replay import GitUpdateReplayer

__all__ = ["GitUpdateReplayer"]

# 🔼⚙️🔚
