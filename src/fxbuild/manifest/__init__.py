#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Dependency manifest generation and mirror cache warming."""

from __future__ import annotations

from fxbuild.manifest.coordinates import ArtifactCoordinates, artifact_id_for, dependency_notations
from fxbuild.manifest.generator import (
    Manifest,
    ModuleArtifactRecord,
    generate_manifest,
    generate_manifest_file,
    read_manifest,
    render_manifest,
    write_manifest,
)
from fxbuild.manifest.prefetch import WarmReport, warm_cache

__all__ = [
    "ArtifactCoordinates",
    "Manifest",
    "ModuleArtifactRecord",
    "WarmReport",
    "artifact_id_for",
    "dependency_notations",
    "generate_manifest",
    "generate_manifest_file",
    "read_manifest",
    "render_manifest",
    "warm_cache",
    "write_manifest",
]

# 🌶️📦🔚
