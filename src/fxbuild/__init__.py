#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""fxbuild core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from fxbuild.catalog import DEFAULT_CATALOG, PlatformCatalog, PlatformDescriptor, detect_platform
from fxbuild.exceptions import FetchError, FxBuildError, TranslationError
from fxbuild.i18n import LocaleResourceSet, VerificationReport, check_translations, verify_translations
from fxbuild.manifest import ModuleArtifactRecord, generate_manifest, generate_manifest_file, warm_cache
from fxbuild.transport import RemoteFetcher, UrllibFetcher

__version__ = get_version("fxbuild", caller_file=__file__)

__all__ = [
    "DEFAULT_CATALOG",
    "FetchError",
    "FxBuildError",
    "LocaleResourceSet",
    "ModuleArtifactRecord",
    "PlatformCatalog",
    "PlatformDescriptor",
    "RemoteFetcher",
    "TranslationError",
    "UrllibFetcher",
    "VerificationReport",
    "__version__",
    "check_translations",
    "detect_platform",
    "generate_manifest",
    "generate_manifest_file",
    "verify_translations",
    "warm_cache",
]

# 🌶️📦🔚
