#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Best-effort warming of mirror repository caches."""

from __future__ import annotations

from collections.abc import Sequence

from attrs import define, field
from provide.foundation import logger

from fxbuild.catalog.platforms import PlatformCatalog
from fxbuild.config.defaults import ARTIFACT_EXTENSION
from fxbuild.exceptions import FetchError
from fxbuild.manifest.coordinates import ArtifactCoordinates
from fxbuild.transport.fetcher import RemoteFetcher


@define
class WarmReport:
    """Outcome of one warming run."""

    attempted: int = 0
    failures: list[tuple[str, str]] = field(factory=list)

    @property
    def succeeded(self) -> int:
        return self.attempted - len(self.failures)


def warm_cache(
    catalog: PlatformCatalog,
    version: str,
    mirror_repos: Sequence[str],
    fetcher: RemoteFetcher,
) -> WarmReport:
    """Request every module artifact from every mirror so the mirror caches it.

    Bodies are discarded. A failed fetch is logged and skipped; the run
    always covers every mirror, platform and module.
    """
    report = WarmReport()
    for repo in mirror_repos:
        for platform in catalog:
            for module in catalog.supported_modules(platform):
                url = ArtifactCoordinates.for_module(platform, module, version).url(ARTIFACT_EXTENSION, repo)
                report.attempted += 1
                try:
                    fetcher.fetch_bytes(url)
                except FetchError as e:
                    logger.warning("Failed to pre-touch artifact", url=url, error=str(e))
                    report.failures.append((url, str(e)))
                    continue
                logger.debug("Pre-touched artifact", url=url)

    logger.info(
        "Mirror warming finished",
        mirrors=len(mirror_repos),
        attempted=report.attempted,
        failed=len(report.failures),
    )
    return report


# 🌶️📦🔚
