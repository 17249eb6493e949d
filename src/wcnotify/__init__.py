#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Working-copy update notifications as status lines and queued file changes."""

from provide.foundation.utils.versioning import get_version

__version__ = get_version("wcnotify", caller_file=__file__)

__all__ = [
    "__version__",
]

# 🔼⚙️🔚
