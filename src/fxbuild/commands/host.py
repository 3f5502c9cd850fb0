#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Host platform commands for the fxbuild CLI."""

from __future__ import annotations

import platform

import click
from provide.foundation.console import perr, pout

from fxbuild.catalog import DEFAULT_CATALOG, PlatformDescriptor, current_platform
from fxbuild.commands._context import get_config
from fxbuild.console import get_command_logger
from fxbuild.manifest import dependency_notations

log = get_command_logger("host")


def _require_host_platform() -> PlatformDescriptor:
    descriptor = current_platform(DEFAULT_CATALOG)
    if descriptor is None:
        log.error("Unsupported host platform", system=platform.system(), machine=platform.machine())
        perr(f"❌ No toolkit build for {platform.system()} {platform.machine()}")
        raise click.Abort()
    return descriptor


@click.command("detect")
def detect_command() -> None:
    """Print the catalog platform matching this host."""
    descriptor = _require_host_platform()
    log.debug("Detected host platform", platform=descriptor.name)
    pout(f"{descriptor.name} (classifier: {descriptor.classifier})")


@click.command("deps")
@click.pass_context
def deps_command(ctx: click.Context) -> None:
    """Print compile-only toolkit dependency notations for this host."""
    config = get_config(ctx)
    descriptor = _require_host_platform()
    for notation in dependency_notations(descriptor, config.toolkit_version, DEFAULT_CATALOG.modules):
        pout(notation)


# 🌶️📦🔚
