#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared access to objects the CLI group stores on the click context."""

from __future__ import annotations

import click
from provide.foundation.console import perr

from fxbuild.config import FxBuildRuntimeConfig
from fxbuild.exceptions import ConfigError


def load_config() -> FxBuildRuntimeConfig:
    """Load the runtime config, aborting the command when it is invalid."""
    try:
        return FxBuildRuntimeConfig.from_env()
    except ConfigError as e:
        perr(f"❌ {e}")
        raise click.Abort() from e


def get_config(ctx: click.Context) -> FxBuildRuntimeConfig:
    """Return the runtime config loaded by the root group, or load it now."""
    obj = ctx.ensure_object(dict)
    config = obj.get("config")
    if config is None:
        config = load_config()
        obj["config"] = config
    return config


# 🌶️📦🔚
