#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""wcnotify Engines Package.

This package contains version-control drivers that feed update events
into an update event listener."""

# 🔼⚙️🔚
