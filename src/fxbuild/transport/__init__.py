#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Network access behind a narrow fetch interface."""

from __future__ import annotations

from fxbuild.transport.fetcher import RemoteFetcher, UrllibFetcher

__all__ = ["RemoteFetcher", "UrllibFetcher"]

# 🌶️📦🔚
