#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""fxbuild configuration built on Foundation runtime configs."""

from __future__ import annotations

from fxbuild.config.runtime import FxBuildRuntimeConfig

__all__ = [
    "FxBuildRuntimeConfig",
]

# 🌶️📦🔚
