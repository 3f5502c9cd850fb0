#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Map OS and architecture names onto catalog platforms."""

from __future__ import annotations

import platform as _platform

from fxbuild.catalog.platforms import DEFAULT_CATALOG, PlatformCatalog, PlatformDescriptor

_ARCH_ALIASES: dict[str, frozenset[str]] = {
    "x86_64": frozenset({"x86_64", "x86-64", "amd64", "ia32e", "em64t", "x64"}),
    "x86": frozenset({"x86", "x86_32", "x86-32", "i386", "i486", "i586", "i686", "i86pc", "ia32", "x32"}),
    "arm64": frozenset({"arm64", "aarch64", "armv8", "armv9"}),
    "arm32": frozenset({"arm", "arm32", "armv7", "armv7l", "armhf", "aarch32"}),
}


def normalize_os_name(os_name: str) -> str | None:
    """Reduce an OS name to ``osx``, ``windows`` or ``linux``."""
    lowered = os_name.strip().lower()
    # "darwin" contains "win", so macOS has to be matched first
    if any(token in lowered for token in ("mac", "darwin", "osx")):
        return "osx"
    if "win" in lowered:
        return "windows"
    if "linux" in lowered or "unix" in lowered:
        return "linux"
    return None


def normalize_arch_name(arch_name: str) -> str | None:
    """Reduce an architecture name to ``x86_64``, ``x86``, ``arm64`` or ``arm32``."""
    lowered = arch_name.strip().lower()
    for canonical, aliases in _ARCH_ALIASES.items():
        if lowered in aliases:
            return canonical
    return None


def detect_platform(
    os_name: str,
    arch_name: str,
    catalog: PlatformCatalog = DEFAULT_CATALOG,
) -> PlatformDescriptor | None:
    """Find the catalog platform for an OS/arch pair, or None if unsupported."""
    os_key = normalize_os_name(os_name)
    arch_key = normalize_arch_name(arch_name)
    if os_key is None or arch_key is None:
        return None
    return catalog.find(f"{os_key}-{arch_key}")


def current_platform(catalog: PlatformCatalog = DEFAULT_CATALOG) -> PlatformDescriptor | None:
    """Detect the catalog platform of the running host."""
    return detect_platform(_platform.system(), _platform.machine(), catalog)


# 🌶️📦🔚
