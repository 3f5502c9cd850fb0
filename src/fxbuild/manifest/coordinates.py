#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Repository coordinates for toolkit module artifacts."""

from __future__ import annotations

from attrs import frozen

from fxbuild.catalog.platforms import PlatformDescriptor
from fxbuild.config.defaults import DEFAULT_MODULES, DEFAULT_REPOSITORY, TOOLKIT_ARTIFACT_PREFIX


def artifact_id_for(module: str) -> str:
    """Artifact id of a toolkit module, e.g. ``javafx-base``."""
    return f"{TOOLKIT_ARTIFACT_PREFIX}-{module}"


@frozen
class ArtifactCoordinates:
    """Repository coordinates of one platform-specific module artifact."""

    group_id: str
    artifact_id: str
    version: str
    classifier: str

    @classmethod
    def for_module(cls, platform: PlatformDescriptor, module: str, version: str) -> ArtifactCoordinates:
        return cls(
            group_id=platform.group_id,
            artifact_id=artifact_id_for(module),
            version=version,
            classifier=platform.classifier,
        )

    @property
    def group_path(self) -> str:
        return self.group_id.replace(".", "/")

    @property
    def notation(self) -> str:
        """Dependency notation ``group:artifact:version:classifier``."""
        return f"{self.group_id}:{self.artifact_id}:{self.version}:{self.classifier}"

    def file_name(self, extension: str) -> str:
        return f"{self.artifact_id}-{self.version}-{self.classifier}.{extension}"

    def url(self, extension: str, repository: str = DEFAULT_REPOSITORY) -> str:
        """Download URL of the artifact file with ``extension`` in ``repository``."""
        base = repository.rstrip("/")
        return f"{base}/{self.group_path}/{self.artifact_id}/{self.version}/{self.file_name(extension)}"


def dependency_notations(
    platform: PlatformDescriptor,
    version: str,
    modules: tuple[str, ...] = DEFAULT_MODULES,
) -> list[str]:
    """Compile-only dependency notations for every module on ``platform``."""
    return [ArtifactCoordinates.for_module(platform, module, version).notation for module in modules]


# 🌶️📦🔚
