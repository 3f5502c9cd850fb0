#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the fxbuild CLI."""

from __future__ import annotations

from fxbuild.commands.manifest import generate_command
from fxbuild.commands.host import deps_command, detect_command
from fxbuild.commands.translations import check_translations_command
from fxbuild.commands.warm import warm_command

__all__ = [
    "check_translations_command",
    "deps_command",
    "detect_command",
    "generate_command",
    "warm_command",
]

# 🌶️📦🔚
