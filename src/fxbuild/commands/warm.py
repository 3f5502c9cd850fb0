#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Mirror cache warming command for the fxbuild CLI."""

from __future__ import annotations

import click
from provide.foundation.console import pout

from fxbuild.catalog import DEFAULT_CATALOG
from fxbuild.commands._context import get_config
from fxbuild.console import get_command_logger
from fxbuild.manifest import warm_cache
from fxbuild.transport import UrllibFetcher

# Get structured logger for this command
log = get_command_logger("warm")


@click.command("warm")
@click.pass_context
def warm_command(ctx: click.Context) -> None:
    """Pre-touch every toolkit artifact on the configured mirrors."""
    config = get_config(ctx)
    if not config.mirror_repos:
        pout("No mirror repositories configured, nothing to warm.")
        return

    log.debug("Warming mirrors", mirrors=list(config.mirror_repos), version=config.toolkit_version)
    fetcher = UrllibFetcher(timeout=config.fetch_timeout)
    report = warm_cache(DEFAULT_CATALOG, config.toolkit_version, config.mirror_repos, fetcher)

    pout(f"Pre-touched {report.succeeded}/{report.attempted} artifacts")
    if report.failures:
        pout(f"⚠️  {len(report.failures)} artifacts could not be fetched:")
        for url, error in report.failures:
            pout(f"  - {url} ({error})")


# 🌶️📦🔚
