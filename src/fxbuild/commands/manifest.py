#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Dependency manifest generation command for the fxbuild CLI."""

from __future__ import annotations

import click
from provide.foundation.console import perr, pout

from fxbuild.catalog import DEFAULT_CATALOG
from fxbuild.commands._context import get_config
from fxbuild.console import get_command_logger
from fxbuild.exceptions import FxBuildError
from fxbuild.manifest import generate_manifest_file
from fxbuild.transport import UrllibFetcher

# Get structured logger for this command
log = get_command_logger("generate")


@click.command("generate")
@click.pass_context
def generate_command(ctx: click.Context) -> None:
    """Generate the per-platform toolkit dependency manifest."""
    config = get_config(ctx)
    output = config.manifest_path
    log.debug(
        "Generating dependency manifest",
        version=config.toolkit_version,
        repository=config.repository,
        output=str(output),
    )

    fetcher = UrllibFetcher(timeout=config.fetch_timeout)
    try:
        manifest = generate_manifest_file(
            DEFAULT_CATALOG,
            config.toolkit_version,
            fetcher,
            output,
            repository=config.repository,
        )
    except FxBuildError as e:
        log.error("Manifest generation failed", error=str(e))
        perr(f"❌ Manifest generation failed: {e}")
        raise click.Abort() from e

    total = sum(len(records) for records in manifest.values())
    pout(f"✅ Wrote {total} artifacts for {len(manifest)} platforms to '{output}'")


# 🌶️📦🔚
