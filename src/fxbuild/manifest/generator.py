#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Per-platform dependency manifest generation.

The manifest maps every catalog platform to the toolkit module artifacts it
needs at runtime, each pinned by the digest published next to the artifact
in the repository. Generation is fail-fast: the first fetch failure aborts
the run before anything is written.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from attrs import frozen
from provide.foundation import logger
from provide.foundation.file import atomic_write_text
from provide.foundation.file.directory import ensure_parent_dir

from fxbuild.catalog.platforms import PlatformCatalog
from fxbuild.config.defaults import (
    DEFAULT_REPOSITORY,
    DIGEST_EXTENSION,
    DIGEST_FIELD,
    MANIFEST_INDENT,
    TOOLKIT_MODULE_PREFIX,
)
from fxbuild.exceptions import ManifestError
from fxbuild.manifest.coordinates import ArtifactCoordinates
from fxbuild.transport.fetcher import RemoteFetcher

_RECORD_FIELDS = ("module", "groupId", "artifactId", "version", "classifier", DIGEST_FIELD)


@frozen
class ModuleArtifactRecord:
    """One manifest row: a module artifact on one platform and its digest."""

    module: str
    group_id: str
    artifact_id: str
    version: str
    classifier: str
    digest: str

    def to_dict(self) -> dict[str, str]:
        return {
            "module": self.module,
            "groupId": self.group_id,
            "artifactId": self.artifact_id,
            "version": self.version,
            "classifier": self.classifier,
            DIGEST_FIELD: self.digest,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ModuleArtifactRecord:
        missing = [name for name in _RECORD_FIELDS if name not in data]
        if missing:
            raise ManifestError(f"Manifest record missing fields {missing}: {data}")
        return cls(
            module=data["module"],
            group_id=data["groupId"],
            artifact_id=data["artifactId"],
            version=data["version"],
            classifier=data["classifier"],
            digest=data[DIGEST_FIELD],
        )


Manifest = dict[str, tuple[ModuleArtifactRecord, ...]]


def generate_manifest(
    catalog: PlatformCatalog,
    version: str,
    fetcher: RemoteFetcher,
    repository: str = DEFAULT_REPOSITORY,
) -> Manifest:
    """Resolve every (platform, supported module) pair and fetch its digest.

    Args:
        catalog: Platforms and modules to cover
        version: Toolkit artifact version
        fetcher: Capability used to read each digest side-file
        repository: Repository base URL the digests are read from

    Returns:
        Mapping of platform name to records in catalog module order

    Raises:
        FetchError: As soon as any single digest cannot be fetched
    """
    manifest: Manifest = {}
    for platform in catalog:
        records = []
        for module in catalog.supported_modules(platform):
            coordinates = ArtifactCoordinates.for_module(platform, module, version)
            url = coordinates.url(DIGEST_EXTENSION, repository)
            digest = fetcher.fetch_text(url)
            logger.debug("Fetched artifact digest", platform=platform.name, module=module, url=url)
            records.append(
                ModuleArtifactRecord(
                    module=f"{TOOLKIT_MODULE_PREFIX}{module}",
                    group_id=coordinates.group_id,
                    artifact_id=coordinates.artifact_id,
                    version=coordinates.version,
                    classifier=coordinates.classifier,
                    digest=digest,
                )
            )
        manifest[platform.name] = tuple(records)

    logger.info(
        "Generated dependency manifest",
        platforms=len(manifest),
        records=sum(len(records) for records in manifest.values()),
    )
    return manifest


def render_manifest(manifest: Manifest) -> str:
    """Serialize a manifest to pretty-printed JSON with a trailing newline."""
    data = {name: [record.to_dict() for record in records] for name, records in manifest.items()}
    return json.dumps(data, indent=MANIFEST_INDENT, ensure_ascii=False) + "\n"


def write_manifest(manifest: Manifest, path: Path) -> Path:
    """Write ``manifest`` to ``path``, replacing any existing file atomically."""
    content = render_manifest(manifest)
    try:
        ensure_parent_dir(path)
        atomic_write_text(path, content)
    except OSError as e:
        raise ManifestError(f"Failed to write manifest to {path}: {e}") from e

    logger.info("Wrote dependency manifest", path=str(path), size_bytes=len(content.encode("utf-8")))
    return path


def generate_manifest_file(
    catalog: PlatformCatalog,
    version: str,
    fetcher: RemoteFetcher,
    path: Path,
    repository: str = DEFAULT_REPOSITORY,
) -> Manifest:
    """Generate the manifest and write it only once every digest is known."""
    manifest = generate_manifest(catalog, version, fetcher, repository)
    write_manifest(manifest, path)
    return manifest


def read_manifest(path: Path) -> Manifest:
    """Load a manifest previously written by ``write_manifest``."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ManifestError(f"Manifest not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid manifest JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest root must be an object, got {type(data).__name__}")

    manifest: Manifest = {}
    for name, records in data.items():
        if not isinstance(records, list):
            raise ManifestError(f"Records for platform {name} must be a list")
        manifest[name] = tuple(ModuleArtifactRecord.from_dict(record) for record in records)
    return manifest


# 🌶️📦🔚
