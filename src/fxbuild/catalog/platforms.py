#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Static catalog of target platforms and UI toolkit modules."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from attrs import field, frozen

from fxbuild.config.defaults import DEFAULT_GROUP_ID, DEFAULT_MODULES
from fxbuild.exceptions import CatalogError


@frozen
class PlatformDescriptor:
    """One OS/architecture target and the toolkit modules it cannot use."""

    name: str
    classifier: str
    group_id: str = DEFAULT_GROUP_ID
    excluded_modules: frozenset[str] = field(default=frozenset(), converter=frozenset)

    def supported_modules(self, modules: Iterable[str]) -> tuple[str, ...]:
        """Return ``modules`` minus the exclusions, keeping their order."""
        return tuple(module for module in modules if module not in self.excluded_modules)


@frozen
class PlatformCatalog:
    """Ordered platforms and the ordered module list they draw from."""

    modules: tuple[str, ...] = field(converter=tuple)
    platforms: tuple[PlatformDescriptor, ...] = field(converter=tuple)

    def __attrs_post_init__(self) -> None:
        if len(set(self.modules)) != len(self.modules):
            raise CatalogError(f"Duplicate module names in catalog: {list(self.modules)}")

        seen: set[str] = set()
        for platform in self.platforms:
            if platform.name in seen:
                raise CatalogError(f"Duplicate platform name in catalog: {platform.name}")
            seen.add(platform.name)

            unknown = platform.excluded_modules - set(self.modules)
            if unknown:
                raise CatalogError(
                    f"Platform {platform.name} excludes unknown modules: {sorted(unknown)}"
                )

    def __iter__(self) -> Iterator[PlatformDescriptor]:
        return iter(self.platforms)

    def __len__(self) -> int:
        return len(self.platforms)

    def __contains__(self, name: object) -> bool:
        return self.find(name) is not None if isinstance(name, str) else False

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(platform.name for platform in self.platforms)

    def find(self, name: str) -> PlatformDescriptor | None:
        """Look up a platform by name, returning None when absent."""
        for platform in self.platforms:
            if platform.name == name:
                return platform
        return None

    def get(self, name: str) -> PlatformDescriptor:
        """Look up a platform by name.

        Raises:
            CatalogError: If no platform carries that name
        """
        platform = self.find(name)
        if platform is None:
            raise CatalogError(f"Unknown platform '{name}'. Known platforms: {', '.join(self.names)}")
        return platform

    def supported_modules(self, platform: PlatformDescriptor | str) -> tuple[str, ...]:
        """Modules available on ``platform``, in catalog order."""
        descriptor = self.get(platform) if isinstance(platform, str) else platform
        return descriptor.supported_modules(self.modules)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PlatformCatalog:
        """Build a catalog from plain data.

        Expected shape::

            {
                "modules": ["base", "graphics"],
                "platforms": [
                    {"name": "linux-x86_64", "classifier": "linux",
                     "groupId": "org.openjfx", "excludedModules": []},
                ],
            }
        """
        try:
            modules = list(data["modules"])
            platforms = [
                PlatformDescriptor(
                    name=entry["name"],
                    classifier=entry["classifier"],
                    group_id=entry.get("groupId", DEFAULT_GROUP_ID),
                    excluded_modules=entry.get("excludedModules", ()),
                )
                for entry in data["platforms"]
            ]
        except (KeyError, TypeError) as e:
            raise CatalogError(f"Malformed catalog data: {e}") from e
        return cls(modules=modules, platforms=platforms)


DEFAULT_CATALOG = PlatformCatalog(
    modules=DEFAULT_MODULES,
    platforms=(
        PlatformDescriptor("windows-x86", "win-x86"),
        PlatformDescriptor("windows-x86_64", "win"),
        PlatformDescriptor("osx-x86_64", "mac"),
        PlatformDescriptor("osx-arm64", "mac-aarch64"),
        PlatformDescriptor("linux-x86_64", "linux"),
        PlatformDescriptor("linux-arm32", "linux-arm32-monocle", excluded_modules={"media", "web"}),
        PlatformDescriptor("linux-arm64", "linux-aarch64"),
    ),
)


# 🌶️📦🔚
