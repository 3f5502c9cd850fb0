#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Target platform catalog and host platform detection."""

from __future__ import annotations

from fxbuild.catalog.detection import (
    current_platform,
    detect_platform,
    normalize_arch_name,
    normalize_os_name,
)
from fxbuild.catalog.platforms import DEFAULT_CATALOG, PlatformCatalog, PlatformDescriptor

__all__ = [
    "DEFAULT_CATALOG",
    "PlatformCatalog",
    "PlatformDescriptor",
    "current_platform",
    "detect_platform",
    "normalize_arch_name",
    "normalize_os_name",
]

# 🌶️📦🔚
